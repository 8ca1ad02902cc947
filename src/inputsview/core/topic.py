from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from typing import Protocol

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class TopicSnapshot(BaseModel):
    name: str
    msg_count: int
    last_send_time: float
    subscribers: int
    closed: bool


class Subscription[T]:
    def __init__(self, topic: Topic[T], sub_id: int) -> None:
        self._topic = topic
        self._sub_id = sub_id
        self._released = False

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        """Idempotent."""
        if self._released:
            return
        self._released = True
        self._topic._unregister(self._sub_id)


class Feed[T](Protocol):
    def subscribe(self, on_change: Callable[[T], None]) -> Subscription[T]: ...

    def request_refresh(self) -> None: ...


class Topic[T]:
    """Broadcasts every sent item to the callbacks subscribed at send time."""

    _registry: list[Topic] = []

    def __init__(self, *, name: str | None = None) -> None:
        self._lock = threading.Lock()
        self._callbacks: dict[int, Callable[[T], None]] = {}
        self._next_sub_id = 0
        self.name: str = name or f"topic_{id(self):x}"
        self._msg_count: int = 0
        self._last_send_time: float = 0.0
        self._closed: bool = False
        Topic._registry.append(self)

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self, on_change: Callable[[T], None]) -> Subscription[T]:
        with self._lock:
            sub_id = self._next_sub_id
            self._next_sub_id += 1
            self._callbacks[sub_id] = on_change
        logger.debug("%s: subscriber %d registered", self.name, sub_id)
        return Subscription(self, sub_id)

    def request_refresh(self) -> None:
        logger.debug("%s: refresh requested but topic has no source", self.name)

    def send(self, item: T) -> None:
        with self._lock:
            if self._closed:
                return
            self._msg_count += 1
            self._last_send_time = time.time()
            callbacks = list(self._callbacks.values())
        # callbacks run outside the lock so they may release their own subscription
        for callback in callbacks:
            try:
                callback(item)
            except Exception:
                logger.exception("%s: subscriber failed on %s", self.name, type(item).__name__)

    def close(self) -> None:
        with self._lock:
            self._closed = True
            self._callbacks.clear()
        if self in Topic._registry:
            Topic._registry.remove(self)

    def snapshot(self) -> TopicSnapshot:
        with self._lock:
            return TopicSnapshot(
                name=self.name,
                msg_count=self._msg_count,
                last_send_time=self._last_send_time,
                subscribers=len(self._callbacks),
                closed=self._closed,
            )

    @classmethod
    def all_topics(cls) -> list[Topic]:
        return list(cls._registry)

    def _unregister(self, sub_id: int) -> None:
        with self._lock:
            self._callbacks.pop(sub_id, None)
        logger.debug("%s: subscriber %d released", self.name, sub_id)
