"""Tool catalogue models: parameters and the descriptor sent by ``tools/list``."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ToolParameter(BaseModel):
    """A single named, typed tool argument."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: str = "string"
    description: str = ""
    required: bool = False
    default: Any = None


class ToolDescriptor(BaseModel):
    """A tool definition as returned by ``tools/list``.

    Built once at startup and never mutated afterwards.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    description: str = ""
    input_schema: dict[str, Any] = Field(default_factory=dict, alias="inputSchema")

    @classmethod
    def from_parameters(
        cls,
        name: str,
        description: str,
        parameters: list[ToolParameter],
    ) -> ToolDescriptor:
        """Build a descriptor whose ``inputSchema`` lists *parameters*."""
        properties: dict[str, Any] = {}
        required: list[str] = []
        for param in parameters:
            prop: dict[str, Any] = {
                "type": param.type,
                "description": param.description,
            }
            if param.default is not None:
                prop["default"] = param.default
            properties[param.name] = prop
            if param.required:
                required.append(param.name)
        return cls(
            name=name,
            description=description,
            input_schema={
                "type": "object",
                "properties": properties,
                "required": required,
            },
        )

    def to_wire(self) -> dict[str, Any]:
        """Return the camelCase form used on the wire."""
        return self.model_dump(by_alias=True)
