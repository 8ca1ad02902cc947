from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool


class Input(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    id: str
    title: str
    global_: StrictBool = Field(alias="global")
    type: str | None = None
    name: str | None = None
    node: str | None = None
    configuration: dict[str, Any] = Field(default_factory=dict)
    created_at: str | None = None
    creator_user_id: str | None = None


class Node(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    node_id: str
    hostname: str | None = None
    short_node_id: str | None = None
    transport_address: str | None = None
    is_leader: bool = False


class InputsPayload(BaseModel):
    inputs: list[Input]


class NodePayload(BaseModel):
    node: Node
