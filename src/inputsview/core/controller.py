from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace
from enum import Enum

from pydantic import BaseModel

from inputsview.core.loadable import NOT_LOADED, Loadable, is_loaded
from inputsview.core.models import Input, InputsPayload, Node, NodePayload
from inputsview.core.partition import partition_inputs
from inputsview.core.permissions import CREATE_INPUTS, is_permitted
from inputsview.core.topic import Feed, Subscription
from inputsview.core.view import ViewModel

logger = logging.getLogger(__name__)

type Listener = Callable[[ViewModel], None]


class Status(Enum):
    STARTUP = "startup"
    RUNNING = "running"
    STOPPED = "stopped"


@dataclass(frozen=True)
class PartitionedState:
    global_inputs: Loadable[tuple[Input, ...]] = NOT_LOADED
    local_inputs: Loadable[tuple[Input, ...]] = NOT_LOADED
    node: Loadable[Node] = NOT_LOADED

    @property
    def ready(self) -> bool:
        return is_loaded(self.global_inputs) and is_loaded(self.local_inputs) and is_loaded(self.node)


class ControllerSnapshot(BaseModel):
    status: str
    started_at: float | None
    ready: bool
    global_count: int | None
    local_count: int | None
    node_id: str | None
    listeners: int


class InputListController:
    """Keeps a sorted global/local split of the inputs feed next to the current node.

    Both feeds are injected; the controller only subscribes to them and asks each
    for one refresh on activation. Every change is published as a single
    immutable PartitionedState, so listeners never see the two lists out of step.
    """

    def __init__(
        self,
        inputs_feed: Feed[InputsPayload],
        node_feed: Feed[NodePayload],
        *,
        permissions: Iterable[str],
    ) -> None:
        self._inputs_feed = inputs_feed
        self._node_feed = node_feed
        self._permissions: tuple[str, ...] = tuple(permissions)
        self._state = PartitionedState()
        self._lock = threading.Lock()
        self._listeners: dict[int, Listener] = {}
        self._next_listener_id = 0
        self._subscriptions: list[Subscription] = []
        self._status = Status.STARTUP
        self._started_at: float | None = None

    @property
    def status(self) -> Status:
        return self._status

    @property
    def state(self) -> PartitionedState:
        return self._state

    @property
    def permissions(self) -> tuple[str, ...]:
        return self._permissions

    @property
    def ready(self) -> bool:
        return self._state.ready

    def activate(self) -> None:
        if self._status == Status.RUNNING:
            return
        if self._status == Status.STOPPED:
            raise RuntimeError("Controller has been torn down and cannot be activated again")

        self._status = Status.RUNNING
        self._started_at = time.time()
        self._subscriptions = [
            self._inputs_feed.subscribe(self._on_inputs),
            self._node_feed.subscribe(self._on_node),
        ]
        logger.info("Input list controller activated, requesting inputs and node")
        self._inputs_feed.request_refresh()
        self._node_feed.request_refresh()

    def teardown(self) -> None:
        """
        Idempotent.
        Releases both feed subscriptions and drops the derived state. Emissions that
        are already being dispatched when this runs are ignored.
        """
        if self._status == Status.STOPPED:
            return
        with self._lock:
            self._status = Status.STOPPED
            self._state = PartitionedState()
            self._listeners.clear()
        for subscription in self._subscriptions:
            subscription.release()
        self._subscriptions = []
        logger.info("Input list controller torn down")

    def __enter__(self) -> InputListController:
        self.activate()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.teardown()

    def add_listener(self, listener: Listener) -> Callable[[], None]:
        """Registers a callback for every view model change; returns its remover."""
        with self._lock:
            listener_id = self._next_listener_id
            self._next_listener_id += 1
            self._listeners[listener_id] = listener

        def remove() -> None:
            with self._lock:
                self._listeners.pop(listener_id, None)

        return remove

    def view_model(self) -> ViewModel:
        return self._build_view_model(self._state)

    def snapshot(self) -> ControllerSnapshot:
        state = self._state
        return ControllerSnapshot(
            status=self._status.value,
            started_at=self._started_at,
            ready=state.ready,
            global_count=len(state.global_inputs) if is_loaded(state.global_inputs) else None,
            local_count=len(state.local_inputs) if is_loaded(state.local_inputs) else None,
            node_id=state.node.node_id if is_loaded(state.node) else None,
            listeners=len(self._listeners),
        )

    def _on_inputs(self, payload: InputsPayload) -> None:
        if self._status != Status.RUNNING:
            return
        global_inputs, local_inputs = partition_inputs(payload.inputs)
        logger.debug("Received %d inputs (%d global, %d local)", len(payload.inputs), len(global_inputs), len(local_inputs))
        self._publish(global_inputs=global_inputs, local_inputs=local_inputs)

    def _on_node(self, payload: NodePayload) -> None:
        logger.debug("Received node %s", payload.node.node_id)
        self._publish(node=payload.node)

    def _publish(self, **changes: object) -> None:
        with self._lock:
            if self._status != Status.RUNNING:
                return
            was_ready = self._state.ready
            self._state = replace(self._state, **changes)
            state = self._state
            listeners = list(self._listeners.values())

        if state.ready and not was_ready:
            logger.info("Input list ready")
        view_model = self._build_view_model(state)
        for listener in listeners:
            try:
                listener(view_model)
            except Exception:
                logger.exception("View model listener failed")

    def _build_view_model(self, state: PartitionedState) -> ViewModel:
        if not state.ready:
            return ViewModel.loading()
        return ViewModel(
            ready=True,
            global_inputs=list(state.global_inputs),
            local_inputs=list(state.local_inputs),
            node=state.node,
            can_create_inputs=is_permitted(self._permissions, CREATE_INPUTS),
        )
