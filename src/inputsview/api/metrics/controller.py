from __future__ import annotations

import asyncio
from collections.abc import AsyncGenerator

from fastapi import APIRouter, Depends
from sse_starlette.sse import EventSourceResponse

from inputsview.api.dep import get_controller, get_stores
from inputsview.api.metrics import service
from inputsview.core.controller import InputListController
from inputsview.stores.base import Store

router = APIRouter(prefix="/metrics")


async def _stream(controller: InputListController, stores: list[Store]) -> AsyncGenerator[str, None]:
    while True:
        yield service.collect(controller, stores).model_dump_json()
        await asyncio.sleep(1)


@router.get("")
async def get_metrics(
    controller: InputListController = Depends(get_controller),
    stores: list[Store] = Depends(get_stores),
) -> EventSourceResponse:
    return EventSourceResponse(_stream(controller, stores))
