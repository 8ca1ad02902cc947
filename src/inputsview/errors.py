from __future__ import annotations

from typing import Any


class InputsViewError(Exception):
    pass


class InvalidInputError(InputsViewError, ValueError):
    """Raised when an input's `global` flag is not a strict boolean."""

    def __init__(self, input_id: str, flag: Any) -> None:
        super().__init__(f"Input {input_id!r} has non-boolean global flag: {flag!r}")
        self.input_id = input_id
        self.flag = flag
