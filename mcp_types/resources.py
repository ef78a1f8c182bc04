"""Resource listing and reading."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from mcp_types.tools import _is_list, _list_of, _Record, _Tagged


@dataclass
class Resource(_Record):
    """A resource a server exposes."""

    uri: str
    name: str | None = None
    description: str | None = None
    mime_type: str | None = None

    _what = "resource"

    def to_dict(self) -> dict[str, Any]:
        return super().to_dict()

    @classmethod
    def from_dict(cls, data: Any) -> Resource:
        return super().from_dict(data)


@dataclass
class ResourceTemplate(_Record):
    """A family of resources described by a URI template."""

    uri_template: str
    name: str | None = None
    description: str | None = None
    mime_type: str | None = None

    _what = "resource template"

    def to_dict(self) -> dict[str, Any]:
        return super().to_dict()

    @classmethod
    def from_dict(cls, data: Any) -> ResourceTemplate:
        return super().from_dict(data)


@dataclass
class ListResourcesRequest(_Record):
    """Request for the resources a server exposes."""

    cursor: str | None = None

    _what = "list resources request"

    def to_dict(self) -> dict[str, Any]:
        return super().to_dict()

    @classmethod
    def from_dict(cls, data: Any) -> ListResourcesRequest:
        return super().from_dict(data)


@dataclass
class ListResourcesResult(_Record):
    """One page of available resources."""

    resources: list[Resource]
    next_cursor: str | None = None

    _what = "list resources result"
    _checks = {"resources": _is_list}
    _parsers = {"resources": _list_of(Resource.from_dict)}

    def to_dict(self) -> dict[str, Any]:
        return super().to_dict()

    @classmethod
    def from_dict(cls, data: Any) -> ListResourcesResult:
        return super().from_dict(data)


@dataclass
class ReadResourceRequest(_Record):
    """Request to read one resource."""

    uri: str

    _what = "read resource request"

    def to_dict(self) -> dict[str, Any]:
        return super().to_dict()

    @classmethod
    def from_dict(cls, data: Any) -> ReadResourceRequest:
        return super().from_dict(data)


class ResourceContents(_Tagged):
    """Contents of a resource, tagged by its "type" field."""

    _what = "resource contents"

    @classmethod
    def text(cls, uri: str, text: str) -> TextResourceContents:
        """Plain-text contents."""
        return TextResourceContents(uri=uri, text=text, mime_type="text/plain")

    @classmethod
    def blob(cls, uri: str, blob: str, mime_type: str) -> BlobResourceContents:
        """Base64-encoded binary contents."""
        return BlobResourceContents(uri=uri, blob=blob, mime_type=mime_type)

    def to_dict(self) -> dict[str, Any]:
        return super().to_dict()

    @classmethod
    def from_dict(cls, data: Any) -> ResourceContents:
        return super().from_dict(data)


@dataclass
class TextResourceContents(ResourceContents):
    uri: str
    text: str
    mime_type: str | None = None
    kind = "text"


@dataclass
class BlobResourceContents(ResourceContents):
    uri: str
    blob: str
    mime_type: str | None = None
    kind = "blob"


ResourceContents._variants = (TextResourceContents, BlobResourceContents)


@dataclass
class ReadResourceResult(_Record):
    """Contents returned by reading a resource."""

    contents: list[ResourceContents]

    _what = "read resource result"
    _checks = {"contents": _is_list}
    _parsers = {"contents": _list_of(ResourceContents.from_dict)}

    def to_dict(self) -> dict[str, Any]:
        return super().to_dict()

    @classmethod
    def from_dict(cls, data: Any) -> ReadResourceResult:
        return super().from_dict(data)