from __future__ import annotations

from pydantic import BaseModel

from inputsview.core.controller import ControllerSnapshot
from inputsview.core.topic import TopicSnapshot


class MetricsResponse(BaseModel):
    controller: ControllerSnapshot
    topics: dict[str, TopicSnapshot]
    errors: dict[str, str]
    timestamp: float
