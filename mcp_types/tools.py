"""Tool definitions, tool calls and their results."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, ClassVar

from mcp_types.protocol import (
    _is_bool,
    _is_object,
    _is_str,
    _mapping,
    _optional,
    _put,
    _required,
)

_SCHEMA_FIELDS = frozenset({"type", "properties", "required"})


def _is_any(value: Any) -> bool:
    return True


def _is_list(value: Any) -> bool:
    return isinstance(value, list)


def _is_str_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def _list_of(parse: Callable[[Any], Any]) -> Callable[[list], list]:
    return lambda items: [parse(item) for item in items]


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def _dump(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, list):
        return [_dump(item) for item in value]
    if hasattr(value, "to_dict"):
        return value.to_dict()
    return value


class _Record:
    """Dataclass mixin writing snake_case fields as camelCase JSON keys.

    Fields defaulting to None are optional and left out when unset; other
    fields are required. Values are strings unless ``_checks`` says otherwise,
    and ``_parsers`` turns parsed JSON values into field values.
    """

    _what: ClassVar[str] = "record"
    _checks: ClassVar[Mapping[str, Callable[[Any], bool]]] = {}
    _parsers: ClassVar[Mapping[str, Callable[[Any], Any]]] = {}

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for f in fields(self):
            _put(out, _camel(f.name), _dump(getattr(self, f.name)))
        return out

    @classmethod
    def _values(cls, data: Mapping) -> dict[str, Any]:
        values = {}
        for f in fields(cls):
            read = _optional if f.default is None else _required
            value = read(data, _camel(f.name), cls._checks.get(f.name, _is_str), cls._what)
            parse = cls._parsers.get(f.name)
            values[f.name] = value if parse is None or value is None else parse(value)
        return values

    @classmethod
    def from_dict(cls, data: Any):
        return cls(**cls._values(_mapping(data, cls._what)))


class _Tagged(_Record):
    """Base of a union whose variants are told apart by a "type" field."""

    kind: ClassVar[str]
    _variants: ClassVar[tuple[type, ...]] = ()

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind, **super().to_dict()}

    @classmethod
    def from_dict(cls, data: Any):
        data = _mapping(data, cls._what)
        tag = _required(data, "type", _is_str, cls._what)
        kind = next((variant for variant in cls._variants if variant.kind == tag), None)
        if kind is None:
            raise ValueError(f"{cls._what}: unknown type {tag!r}")
        if not issubclass(kind, cls):
            raise ValueError(f"{cls._what}: expected {cls.__name__}, got type {tag!r}")
        return kind(**kind._values(data))


@dataclass
class ToolInputSchema:
    """JSON Schema describing a tool's input parameters."""

    type: str = "object"
    properties: Any = None
    required: list[str] | None = None
    additional: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"type": self.type}
        _put(out, "properties", self.properties)
        if self.required is not None:
            out["required"] = list(self.required)
        if self.additional is not None:
            if not isinstance(self.additional, Mapping):
                raise ValueError("tool input schema: additional properties must be a JSON object")
            for key, value in self.additional.items():
                out.setdefault(key, value)
        return out

    @classmethod
    def from_dict(cls, data: Any) -> ToolInputSchema:
        what = "tool input schema"
        data = _mapping(data, what)
        required = _optional(data, "required", _is_str_list, what)
        extra = {key: value for key, value in data.items() if key not in _SCHEMA_FIELDS}
        return cls(
            type=_required(data, "type", _is_str, what),
            properties=data.get("properties"),
            required=None if required is None else list(required),
            additional=extra or None,
        )


@dataclass
class Tool(_Record):
    """A tool a server offers, with the schema of its input."""

    name: str
    description: str | None = None
    input_schema: ToolInputSchema = field(default_factory=ToolInputSchema)

    _what = "tool"
    _checks = {"input_schema": _is_object}
    _parsers = {"input_schema": ToolInputSchema.from_dict}

    @classmethod
    def new(cls, name: str, description: str) -> Tool:
        """Create a tool with an empty object schema."""
        return cls(name=name, description=description)

    def with_parameter(self, name: str, description: str, required: bool) -> Tool:
        """Add a string parameter to the input schema and return the tool."""
        schema = self.input_schema
        if schema.properties is None:
            schema.properties = {}
        if isinstance(schema.properties, dict):
            schema.properties[name] = {"type": "string", "description": description}
        if required:
            if schema.required is None:
                schema.required = []
            schema.required.append(name)
        return self

    def to_dict(self) -> dict[str, Any]:
        return super().to_dict()

    @classmethod
    def from_dict(cls, data: Any) -> Tool:
        return super().from_dict(data)


@dataclass
class ListToolsRequest(_Record):
    """Request for the tools a server offers."""

    cursor: str | None = None

    _what = "list tools request"

    def to_dict(self) -> dict[str, Any]:
        return super().to_dict()

    @classmethod
    def from_dict(cls, data: Any) -> ListToolsRequest:
        return super().from_dict(data)


@dataclass
class ListToolsResult(_Record):
    """One page of available tools."""

    tools: list[Tool]
    next_cursor: str | None = None

    _what = "list tools result"
    _checks = {"tools": _is_list}
    _parsers = {"tools": _list_of(Tool.from_dict)}

    def to_dict(self) -> dict[str, Any]:
        return super().to_dict()

    @classmethod
    def from_dict(cls, data: Any) -> ListToolsResult:
        return super().from_dict(data)


@dataclass
class CallToolRequest(_Record):
    """Request to run a tool with the given arguments."""

    name: str
    arguments: Any = None

    _what = "call tool request"
    _checks = {"arguments": _is_any}

    def to_dict(self) -> dict[str, Any]:
        return super().to_dict()

    @classmethod
    def from_dict(cls, data: Any) -> CallToolRequest:
        return super().from_dict(data)


class ToolResultContent(_Tagged):
    """A piece of content returned by a tool, tagged by its "type" field."""

    _what = "tool result content"

    @classmethod
    def text(cls, text: str) -> ToolTextContent:
        return ToolTextContent(text)

    @classmethod
    def image(cls, data: str, mime_type: str) -> ToolImageContent:
        return ToolImageContent(data, mime_type)

    @classmethod
    def resource(cls, uri: str) -> ToolResourceContent:
        return ToolResourceContent(uri)

    def to_dict(self) -> dict[str, Any]:
        return super().to_dict()

    @classmethod
    def from_dict(cls, data: Any) -> ToolResultContent:
        return super().from_dict(data)


@dataclass
class ToolTextContent(ToolResultContent):
    text: str
    kind = "text"


@dataclass
class ToolImageContent(ToolResultContent):
    data: str
    mime_type: str
    kind = "image"


@dataclass
class ToolResourceContent(ToolResultContent):
    resource: str
    kind = "resource"


ToolResultContent._variants = (ToolTextContent, ToolImageContent, ToolResourceContent)


@dataclass
class CallToolResult(_Record):
    """Content produced by a tool call."""

    content: list[ToolResultContent]
    is_error: bool | None = None

    _what = "call tool result"
    _checks = {"content": _is_list, "is_error": _is_bool}
    _parsers = {"content": _list_of(ToolResultContent.from_dict)}

    def to_dict(self) -> dict[str, Any]:
        return super().to_dict()

    @classmethod
    def from_dict(cls, data: Any) -> CallToolResult:
        return super().from_dict(data)