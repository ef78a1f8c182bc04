"""Messages and parameters for asking a client to sample from a model."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from mcp_types.protocol import _is_object, _is_str, _mapping, _optional, _put, _required

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _is_list(value: Any) -> bool:
    return isinstance(value, list)


def _is_str_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_i32(value: Any) -> bool:
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and _I32_MIN <= value <= _I32_MAX
    )


def _optional_float(data: Mapping, key: str, what: str) -> float | None:
    value = _optional(data, key, _is_number, what)
    return None if value is None else float(value)


class MessageRole(str, Enum):
    """Who a sampling message comes from."""

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class MessageContent:
    """Content of a sampling message, tagged by its "type" field."""

    kind: ClassVar[str]

    @classmethod
    def text(cls, text: str) -> TextMessageContent:
        return TextMessageContent(text)

    @classmethod
    def image(cls, data: str, mime_type: str) -> ImageMessageContent:
        return ImageMessageContent(data, mime_type)

    def _payload(self) -> dict[str, Any]:
        raise NotImplementedError

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind, **self._payload()}

    @classmethod
    def _parse(cls, data: Mapping) -> MessageContent:
        raise NotImplementedError

    @classmethod
    def from_dict(cls, data: Any) -> MessageContent:
        what = "message content"
        data = _mapping(data, what)
        tag = _required(data, "type", _is_str, what)
        kinds = {k.kind: k for k in (TextMessageContent, ImageMessageContent)}
        kind = kinds.get(tag)
        if kind is None:
            raise ValueError(f"{what}: unknown type {tag!r}")
        result = kind._parse(data)
        if not isinstance(result, cls):
            raise ValueError(f"{what}: expected {cls.__name__}, got type {tag!r}")
        return result


@dataclass
class TextMessageContent(MessageContent):
    text: str
    kind: ClassVar[str] = "text"

    def _payload(self) -> dict[str, Any]:
        return {"text": self.text}

    @classmethod
    def _parse(cls, data: Mapping) -> TextMessageContent:
        return cls(_required(data, "text", _is_str, "text message content"))


@dataclass
class ImageMessageContent(MessageContent):
    data: str
    mime_type: str
    kind: ClassVar[str] = "image"

    def _payload(self) -> dict[str, Any]:
        return {"data": self.data, "mimeType": self.mime_type}

    @classmethod
    def _parse(cls, data: Mapping) -> ImageMessageContent:
        what = "image message content"
        return cls(
            _required(data, "data", _is_str, what),
            _required(data, "mimeType", _is_str, what),
        )


@dataclass
class SamplingMessage:
    """A message handed to or produced by a model."""

    role: MessageRole
    content: MessageContent

    def __post_init__(self) -> None:
        self.role = MessageRole(self.role)

    def to_dict(self) -> dict[str, Any]:
        return {"role": self.role.value, "content": self.content.to_dict()}

    @classmethod
    def from_dict(cls, data: Any) -> SamplingMessage:
        what = "sampling message"
        data = _mapping(data, what)
        role = _required(data, "role", _is_str, what)
        try:
            parsed_role = MessageRole(role)
        except ValueError:
            raise ValueError(f"{what}: unknown role {role!r}") from None
        return cls(
            role=parsed_role,
            content=MessageContent.from_dict(_required(data, "content", _is_object, what)),
        )


@dataclass
class ModelHint:
    """A model name or family the caller would like."""

    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name}

    @classmethod
    def from_dict(cls, data: Any) -> ModelHint:
        what = "model hint"
        data = _mapping(data, what)
        return cls(name=_required(data, "name", _is_str, what))


@dataclass
class ModelPreferences:
    """How to weigh cost, speed and capability when choosing a model."""

    hints: list[ModelHint] | None = None
    cost_priority: float | None = None
    speed_priority: float | None = None
    intelligence_priority: float | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.hints is not None:
            out["hints"] = [hint.to_dict() for hint in self.hints]
        _put(out, "costPriority", self.cost_priority)
        _put(out, "speedPriority", self.speed_priority)
        _put(out, "intelligencePriority", self.intelligence_priority)
        return out

    @classmethod
    def from_dict(cls, data: Any) -> ModelPreferences:
        what = "model preferences"
        data = _mapping(data, what)
        hints = _optional(data, "hints", _is_list, what)
        return cls(
            hints=None if hints is None else [ModelHint.from_dict(item) for item in hints],
            cost_priority=_optional_float(data, "costPriority", what),
            speed_priority=_optional_float(data, "speedPriority", what),
            intelligence_priority=_optional_float(data, "intelligencePriority", what),
        )


@dataclass
class CreateMessageRequest:
    """Request to sample a message from a model."""

    messages: list[SamplingMessage]
    model_preferences: ModelPreferences | None = None
    system_prompt: str | None = None
    include_context: str | None = None
    temperature: float | None = None
    max_tokens: int | None = None
    stop: list[str] | None = None
    metadata: Any = None

    def __post_init__(self) -> None:
        if self.max_tokens is not None and not _is_i32(self.max_tokens):
            raise ValueError(f"max_tokens out of range: {self.max_tokens!r}")

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"messages": [message.to_dict() for message in self.messages]}
        if self.model_preferences is not None:
            out["modelPreferences"] = self.model_preferences.to_dict()
        _put(out, "systemPrompt", self.system_prompt)
        _put(out, "includeContext", self.include_context)
        _put(out, "temperature", self.temperature)
        _put(out, "maxTokens", self.max_tokens)
        if self.stop is not None:
            out["stop"] = list(self.stop)
        _put(out, "metadata", self.metadata)
        return out

    @classmethod
    def from_dict(cls, data: Any) -> CreateMessageRequest:
        what = "create message request"
        data = _mapping(data, what)
        preferences = _optional(data, "modelPreferences", _is_object, what)
        stop = _optional(data, "stop", _is_str_list, what)
        return cls(
            messages=[
                SamplingMessage.from_dict(item)
                for item in _required(data, "messages", _is_list, what)
            ],
            model_preferences=None
            if preferences is None
            else ModelPreferences.from_dict(preferences),
            system_prompt=_optional(data, "systemPrompt", _is_str, what),
            include_context=_optional(data, "includeContext", _is_str, what),
            temperature=_optional_float(data, "temperature", what),
            max_tokens=_optional(data, "maxTokens", _is_i32, what),
            stop=None if stop is None else list(stop),
            metadata=data.get("metadata"),
        )


@dataclass
class CreateMessageResult:
    """A message sampled from a model."""

    message: SamplingMessage
    model: str | None = None
    stop_reason: str | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"message": self.message.to_dict()}
        _put(out, "model", self.model)
        _put(out, "stopReason", self.stop_reason)
        return out

    @classmethod
    def from_dict(cls, data: Any) -> CreateMessageResult:
        what = "create message result"
        data = _mapping(data, what)
        return cls(
            message=SamplingMessage.from_dict(_required(data, "message", _is_object, what)),
            model=_optional(data, "model", _is_str, what),
            stop_reason=_optional(data, "stopReason", _is_str, what),
        )