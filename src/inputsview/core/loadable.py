from __future__ import annotations

from typing import Final, TypeGuard


class _NotLoaded:
    _instance: _NotLoaded | None = None

    def __new__(cls) -> _NotLoaded:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOT_LOADED"


NOT_LOADED: Final = _NotLoaded()

type Loadable[T] = T | _NotLoaded


def is_loaded[T](value: Loadable[T]) -> TypeGuard[T]:
    return value is not NOT_LOADED
