import json
import logging
import threading

import pytest

from conftest import make_input
from inputsview.core.controller import InputListController
from inputsview.core.models import InputsPayload, NodePayload
from inputsview.stores import InputsStore, NodeStore, load_inputs_file, load_node_file


def test_inputs_store_sends_validated_payload():
    store = InputsStore(lambda: [{"id": "1", "title": "gelf", "global": True}], background=False)
    received: list[InputsPayload] = []
    store.subscribe(received.append)

    store.request_refresh()

    assert len(received) == 1
    assert received[0].inputs[0].global_ is True
    assert store.last_error is None


def test_failed_fetch_is_logged_and_not_sent(caplog):
    def broken():
        raise ConnectionError("registry unreachable")

    store = NodeStore(broken, background=False)
    received: list[NodePayload] = []
    store.subscribe(received.append)

    with caplog.at_level(logging.ERROR, logger="inputsview"):
        store.request_refresh()

    assert received == []
    assert store.last_error == "ConnectionError: registry unreachable"
    assert "node: refresh 1 failed" in caplog.text


def test_malformed_payload_counts_as_failed_fetch():
    store = InputsStore(lambda: [{"id": "1", "title": "x", "global": "maybe"}], background=False)
    received: list[InputsPayload] = []
    store.subscribe(received.append)

    store.request_refresh()

    assert received == []
    assert store.last_error is not None


def test_error_cleared_after_successful_fetch():
    results = iter([RuntimeError("boom"), {"node_id": "n1"}])

    def flaky():
        item = next(results)
        if isinstance(item, Exception):
            raise item
        return item

    store = NodeStore(flaky, background=False)
    store.request_refresh()
    assert store.last_error is not None

    store.request_refresh()
    assert store.last_error is None


def test_background_refresh_delivers_from_thread():
    store = InputsStore(lambda: [make_input("1", "a", False)])
    received: list[InputsPayload] = []
    store.subscribe(received.append)

    store.request_refresh()
    store.join(timeout=5)

    assert [p.inputs[0].id for p in received] == ["1"]


def test_closed_store_does_not_fetch():
    calls: list[int] = []
    store = NodeStore(lambda: calls.append(1) or {"node_id": "n"}, background=False)
    store.close()

    store.request_refresh()

    assert calls == []


def test_file_loaders(tmp_path):
    inputs_path = tmp_path / "inputs.json"
    inputs_path.write_text(json.dumps({"inputs": [{"id": "1", "title": "a", "global": False}]}), encoding="utf-8")
    node_path = tmp_path / "node.json"
    node_path.write_text(json.dumps({"node": {"node_id": "abc", "hostname": "gl-1"}}), encoding="utf-8")
    bare_node_path = tmp_path / "bare.json"
    bare_node_path.write_text(json.dumps({"node_id": "def"}), encoding="utf-8")

    assert load_inputs_file(inputs_path) == [{"id": "1", "title": "a", "global": False}]
    assert load_node_file(node_path) == {"node_id": "abc", "hostname": "gl-1"}
    assert load_node_file(bare_node_path) == {"node_id": "def"}


def test_inputs_file_must_hold_a_list(tmp_path):
    path = tmp_path / "inputs.json"
    path.write_text(json.dumps({"inputs": {"id": "1"}}), encoding="utf-8")

    with pytest.raises(ValueError):
        load_inputs_file(path)


def test_controller_over_stores_becomes_ready():
    inputs_store = InputsStore(
        lambda: [make_input("1", "Input10", True), make_input("2", "Input2", True), make_input("3", "local", False)],
        background=False,
    )
    node_store = NodeStore(lambda: {"node_id": "n1"}, background=False)

    with InputListController(inputs_store, node_store, permissions=[]) as controller:
        view = controller.view_model()
        assert view.ready
        assert [i.title for i in view.global_inputs] == ["Input2", "Input10"]
        assert [i.title for i in view.local_inputs] == ["local"]
        assert view.node.node_id == "n1"

    assert inputs_store.snapshot().subscribers == 0
    assert node_store.snapshot().subscribers == 0


def test_slow_older_refresh_does_not_overwrite_newer():
    entered = threading.Event()
    release = threading.Event()
    delivered = threading.Event()
    calls = iter(["old", "new"])
    calls_lock = threading.Lock()

    def loader():
        with calls_lock:
            title = next(calls)
        if title == "old":
            entered.set()
            release.wait(5)
        return [make_input("1", title, True)]

    store = InputsStore(loader)
    received: list[str] = []

    def on_change(payload: InputsPayload) -> None:
        received.append(payload.inputs[0].title)
        delivered.set()

    store.subscribe(on_change)

    store.request_refresh()
    assert entered.wait(5)
    store.request_refresh()
    assert delivered.wait(5)
    release.set()
    store.join(timeout=5)

    assert received == ["new"]


def test_join_waits_for_every_pending_refresh():
    release = threading.Event()
    store = NodeStore(lambda: release.wait(5) and {"node_id": "n"})
    received: list[NodePayload] = []
    store.subscribe(received.append)

    store.request_refresh()
    store.request_refresh()
    release.set()
    store.join(timeout=5)

    assert len(received) >= 1
    assert all(not t.is_alive() for t in store._threads)


def test_failing_subscriber_does_not_fail_the_refresh():
    store = NodeStore(lambda: {"node_id": "n"}, background=False)
    received: list[NodePayload] = []

    def broken(_: NodePayload) -> None:
        raise RuntimeError("listener crashed")

    store.subscribe(broken)
    store.subscribe(received.append)

    store.request_refresh()
    store.request_refresh()

    assert len(received) == 2
    assert store.last_error is None
