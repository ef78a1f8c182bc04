"""Prompt templates, their arguments and generated messages."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from mcp_types.protocol import _is_bool, _is_object
from mcp_types.tools import _is_any, _is_list, _list_of, _Record, _Tagged


class PromptRole(str, Enum):
    """Who a prompt message comes from."""

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


@dataclass
class PromptArgument(_Record):
    """An argument a prompt template accepts."""

    name: str
    description: str | None = None
    required: bool | None = None

    _what = "prompt argument"
    _checks = {"required": _is_bool}

    def to_dict(self) -> dict[str, Any]:
        return super().to_dict()

    @classmethod
    def from_dict(cls, data: Any) -> PromptArgument:
        return super().from_dict(data)


@dataclass
class Prompt(_Record):
    """A prompt template a server offers."""

    name: str
    description: str | None = None
    arguments: list[PromptArgument] | None = None

    _what = "prompt"
    _checks = {"arguments": _is_list}
    _parsers = {"arguments": _list_of(PromptArgument.from_dict)}

    def to_dict(self) -> dict[str, Any]:
        return super().to_dict()

    @classmethod
    def from_dict(cls, data: Any) -> Prompt:
        return super().from_dict(data)


@dataclass
class ListPromptsRequest(_Record):
    """Request for the prompts a server offers."""

    cursor: str | None = None

    _what = "list prompts request"

    def to_dict(self) -> dict[str, Any]:
        return super().to_dict()

    @classmethod
    def from_dict(cls, data: Any) -> ListPromptsRequest:
        return super().from_dict(data)


@dataclass
class ListPromptsResult(_Record):
    """One page of available prompts."""

    prompts: list[Prompt]
    next_cursor: str | None = None

    _what = "list prompts result"
    _checks = {"prompts": _is_list}
    _parsers = {"prompts": _list_of(Prompt.from_dict)}

    def to_dict(self) -> dict[str, Any]:
        return super().to_dict()

    @classmethod
    def from_dict(cls, data: Any) -> ListPromptsResult:
        return super().from_dict(data)


@dataclass
class GetPromptRequest(_Record):
    """Request to render a prompt with the given arguments."""

    name: str
    arguments: Any = None

    _what = "get prompt request"
    _checks = {"arguments": _is_any}

    def to_dict(self) -> dict[str, Any]:
        return super().to_dict()

    @classmethod
    def from_dict(cls, data: Any) -> GetPromptRequest:
        return super().from_dict(data)


class PromptContent(_Tagged):
    """Content of a prompt message, tagged by its "type" field."""

    _what = "prompt content"

    def to_dict(self) -> dict[str, Any]:
        return super().to_dict()

    @classmethod
    def from_dict(cls, data: Any) -> PromptContent:
        return super().from_dict(data)


@dataclass
class PromptTextContent(PromptContent):
    text: str
    kind = "text"


@dataclass
class PromptImageContent(PromptContent):
    data: str
    mime_type: str
    kind = "image"


@dataclass
class PromptResourceContent(PromptContent):
    resource: str
    kind = "resource"


PromptContent._variants = (PromptTextContent, PromptImageContent, PromptResourceContent)


@dataclass
class PromptMessage(_Record):
    """A single message of a rendered prompt."""

    role: PromptRole
    content: PromptContent

    _what = "prompt message"
    _checks = {"content": _is_object}
    _parsers = {"role": PromptRole, "content": PromptContent.from_dict}

    def __post_init__(self) -> None:
        self.role = PromptRole(self.role)

    def to_dict(self) -> dict[str, Any]:
        return super().to_dict()

    @classmethod
    def from_dict(cls, data: Any) -> PromptMessage:
        return super().from_dict(data)


@dataclass
class GetPromptResult(_Record):
    """A rendered prompt."""

    messages: list[PromptMessage]
    description: str | None = None

    _what = "get prompt result"
    _checks = {"messages": _is_list}
    _parsers = {"messages": _list_of(PromptMessage.from_dict)}

    def to_dict(self) -> dict[str, Any]:
        return super().to_dict()

    @classmethod
    def from_dict(cls, data: Any) -> GetPromptResult:
        return super().from_dict(data)