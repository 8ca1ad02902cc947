from __future__ import annotations

from pydantic import BaseModel, ConfigDict, computed_field

from inputsview.core.models import Input, Node


class InputGroup(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    inputs: list[Input]
    empty_text: str

    @computed_field
    @property
    def count(self) -> int:
        return len(self.inputs)

    @computed_field
    @property
    def subtitle(self) -> str:
        return f"{self.count} configured on this node"


class ViewModel(BaseModel):
    """What the renderer draws. Carries no list content until ready."""

    model_config = ConfigDict(frozen=True)

    ready: bool
    global_inputs: list[Input] = []
    local_inputs: list[Input] = []
    node: Node | None = None
    can_create_inputs: bool = False

    @computed_field
    @property
    def global_count(self) -> int:
        return len(self.global_inputs)

    @computed_field
    @property
    def local_count(self) -> int:
        return len(self.local_inputs)

    @computed_field
    @property
    def groups(self) -> list[InputGroup]:
        if not self.ready:
            return []
        return [
            InputGroup(title="Global inputs", inputs=self.global_inputs, empty_text="There are no global inputs."),
            InputGroup(title="Local inputs", inputs=self.local_inputs, empty_text="There are no local inputs."),
        ]

    @classmethod
    def loading(cls) -> ViewModel:
        return cls(ready=False)
