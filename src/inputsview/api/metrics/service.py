from __future__ import annotations

import time

from inputsview.api.metrics.dto import MetricsResponse
from inputsview.core.controller import InputListController
from inputsview.stores.base import Store


def collect(controller: InputListController, stores: list[Store]) -> MetricsResponse:
    return MetricsResponse(
        controller=controller.snapshot(),
        topics={store.name: store.snapshot() for store in stores},
        errors={store.name: store.last_error for store in stores if store.last_error is not None},
        timestamp=time.time(),
    )
