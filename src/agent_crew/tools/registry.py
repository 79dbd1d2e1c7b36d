from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Literal

JSONSchema = dict[str, Any]
ToolDetailLevel = Literal["name", "summary", "full"]


def _normalize_items(items: Iterable[str] | str | None) -> tuple[str, ...]:
    if items is None:
        return ()
    if isinstance(items, str):
        stripped = items.strip()
        return (stripped,) if stripped else ()
    normalized: list[str] = []
    for item in items:
        value = str(item).strip()
        if value and value not in normalized:
            normalized.append(value)
    return tuple(normalized)


def _validate_json_schema(schema: Mapping[str, Any], label: str) -> None:
    if not isinstance(schema, Mapping):
        message = f"{label} must be a mapping"
        raise TypeError(message)
    properties = schema.get("properties")
    if properties is not None and schema.get("type") not in (None, "object"):
        message = f"{label}.properties requires type 'object'"
        raise ValueError(message)
    required = schema.get("required")
    if required is None:
        return
    if not isinstance(required, list):
        message = f"{label}.required must be a list when provided"
        raise ValueError(message)
    if properties is None:
        message = f"{label}.required requires properties to be defined"
        raise ValueError(message)
    for key in required:
        if key not in properties:
            message = f"{label}.required contains unknown property '{key}'"
            raise ValueError(message)


@dataclass(frozen=True)
class ToolDefinition:
    """Metadata describing a tool exposed to agents."""

    name: str
    description: str
    tags: tuple[str, ...] = ()
    input_schema: JSONSchema | None = None

    def __post_init__(self) -> None:
        if not self.name.strip():
            msg = "ToolDefinition.name must be non-empty"
            raise ValueError(msg)
        if not self.description.strip():
            msg = "ToolDefinition.description must be non-empty"
            raise ValueError(msg)
        object.__setattr__(self, "tags", _normalize_items(self.tags))
        if self.input_schema is not None:
            _validate_json_schema(self.input_schema, "input_schema")

    def to_dict(self, detail_level: ToolDetailLevel = "full") -> dict[str, Any]:
        """Convert tool definition to dict with specified detail level."""
        payload: dict[str, Any] = {"name": self.name}
        if detail_level in ("summary", "full"):
            payload.update({"description": self.description, "tags": list(self.tags)})
        if detail_level == "full":
            payload["input_schema"] = self.input_schema
        return payload


@dataclass(frozen=True)
class RegisteredTool:
    """Tool definition paired with its callable implementation."""

    definition: ToolDefinition
    handler: Callable[..., Any]


class ToolRegistry:
    """Registry for tools and their metadata definitions."""

    def __init__(self) -> None:
        self._tools: dict[str, RegisteredTool] = {}

    def register(self, definition: ToolDefinition, handler: Callable[..., Any]) -> None:
        """Register a tool definition and handler."""
        if definition.name in self._tools:
            message = f"Tool already registered: {definition.name}"
            raise ValueError(message)
        self._tools[definition.name] = RegisteredTool(definition=definition, handler=handler)

    def get(self, name: str) -> RegisteredTool | None:
        """Get a registered tool by name."""
        return self._tools.get(name)

    def names(self) -> list[str]:
        """Return registered tool names in registration order."""
        return list(self._tools)

    def list(self, detail_level: ToolDetailLevel = "full") -> list[dict[str, Any]]:
        """List registered tools at the requested detail level."""
        return [entry.definition.to_dict(detail_level) for entry in self._tools.values()]
