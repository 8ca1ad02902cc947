from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

from inputsview.core.models import Input, InputsPayload
from inputsview.stores.base import Store

logger = logging.getLogger(__name__)

type InputsLoader = Callable[[], Iterable[Input | dict[str, Any]]]


def load_inputs_file(path: str | Path) -> list[dict[str, Any]]:
    """Reads ``{"inputs": [...]}`` (or a bare list) from a JSON file."""
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("inputs", [])
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of inputs in {path}")
    return data


class InputsStore(Store[InputsPayload]):
    def __init__(self, loader: InputsLoader, *, name: str = "inputs", background: bool = True) -> None:
        super().__init__(name=name, background=background)
        self._loader = loader

    def fetch(self) -> InputsPayload:
        payload = InputsPayload.model_validate({"inputs": list(self._loader())})
        logger.debug("%s: loaded %d inputs", self.name, len(payload.inputs))
        return payload
