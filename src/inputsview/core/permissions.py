"""Wildcard permission matching (``"inputs:create"``, ``"inputs:*"``, ``"*"``)."""
from __future__ import annotations

from collections.abc import Iterable

CREATE_INPUTS = "inputs:create"


def _implies(granted: str, required: str) -> bool:
    granted_parts = granted.split(":")
    required_parts = required.split(":")
    for i, part in enumerate(granted_parts):
        if i >= len(required_parts):
            # extra granted parts must all be wildcards
            return all(p == "*" for p in granted_parts[i:])
        if part != "*" and not set(required_parts[i].split(",")) <= set(part.split(",")):
            return False
    return True


def is_permitted(permissions: Iterable[str], required: str) -> bool:
    return any(_implies(granted, required) for granted in permissions)
