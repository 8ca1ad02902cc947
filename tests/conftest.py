from __future__ import annotations

import pytest

from inputsview.core.models import Input, InputsPayload, Node, NodePayload
from inputsview.core.topic import Topic


class RecordingTopic[T](Topic[T]):
    def __init__(self, *, name: str | None = None) -> None:
        super().__init__(name=name)
        self.refresh_requests = 0

    def request_refresh(self) -> None:
        self.refresh_requests += 1


def make_input(input_id: str, title: str, is_global: bool) -> Input:
    return Input.model_validate({"id": input_id, "title": title, "global": is_global})


def inputs_payload(*inputs: Input) -> InputsPayload:
    return InputsPayload(inputs=list(inputs))


def node_payload(node_id: str = "N1") -> NodePayload:
    return NodePayload(node=Node(node_id=node_id))


@pytest.fixture(autouse=True)
def _close_topics():
    yield
    for topic in Topic.all_topics():
        topic.close()


@pytest.fixture
def inputs_feed() -> RecordingTopic[InputsPayload]:
    return RecordingTopic[InputsPayload](name="inputs")


@pytest.fixture
def node_feed() -> RecordingTopic[NodePayload]:
    return RecordingTopic[NodePayload](name="node")
