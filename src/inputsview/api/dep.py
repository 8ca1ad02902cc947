from __future__ import annotations

from fastapi import Request

from inputsview.core.controller import InputListController
from inputsview.stores.base import Store


def get_controller(request: Request) -> InputListController:
    return request.app.state.controller


def get_stores(request: Request) -> list[Store]:
    return request.app.state.stores
