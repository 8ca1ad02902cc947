from __future__ import annotations

import time
from collections.abc import AsyncGenerator

from fastapi import APIRouter, Depends
from sse_starlette.sse import EventSourceResponse

from inputsview.api.dep import get_controller, get_stores
from inputsview.api.inputs import service
from inputsview.api.inputs.dto import ViewResponse
from inputsview.core.controller import InputListController
from inputsview.core.view import ViewModel
from inputsview.stores.base import Store

router = APIRouter(prefix="/inputs")


def _response(view: ViewModel) -> ViewResponse:
    return ViewResponse(**dict(view), timestamp=time.time())


async def _stream(controller: InputListController) -> AsyncGenerator[str, None]:
    async for view in service.watch(controller):
        yield _response(view).model_dump_json(by_alias=True)


@router.get("")
def get_inputs(controller: InputListController = Depends(get_controller)) -> ViewResponse:
    return _response(service.current_view(controller))


@router.get("/stream")
async def stream_inputs(controller: InputListController = Depends(get_controller)) -> EventSourceResponse:
    return EventSourceResponse(_stream(controller))


@router.post("/refresh", status_code=204)
def refresh_inputs(stores: list[Store] = Depends(get_stores)) -> None:
    service.refresh(stores)
