from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncGenerator

from inputsview.core.controller import InputListController
from inputsview.core.view import ViewModel
from inputsview.stores.base import Store

logger = logging.getLogger(__name__)


def current_view(controller: InputListController) -> ViewModel:
    return controller.view_model()


def refresh(stores: list[Store]) -> None:
    for store in stores:
        store.request_refresh()


async def watch(controller: InputListController) -> AsyncGenerator[ViewModel, None]:
    """Yields the current view model, then one per change until cancelled."""
    loop = asyncio.get_running_loop()
    queue: asyncio.Queue[ViewModel] = asyncio.Queue()

    # listeners may fire on a store's refresh thread
    remove = controller.add_listener(lambda vm: loop.call_soon_threadsafe(queue.put_nowait, vm))
    try:
        yield controller.view_model()
        while True:
            yield await queue.get()
    finally:
        remove()
        logger.debug("View model watcher removed")
