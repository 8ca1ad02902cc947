from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

from inputsview.core.models import Node, NodePayload
from inputsview.stores.base import Store

type NodeLoader = Callable[[], Node | dict[str, Any]]


def load_node_file(path: str | Path) -> dict[str, Any]:
    """Reads ``{"node": {...}}`` or a bare node object from a JSON file."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict) and isinstance(data.get("node"), dict):
        return data["node"]
    return data


class NodeStore(Store[NodePayload]):
    def __init__(self, loader: NodeLoader, *, name: str = "node", background: bool = True) -> None:
        super().__init__(name=name, background=background)
        self._loader = loader

    def fetch(self) -> NodePayload:
        return NodePayload.model_validate({"node": self._loader()})
