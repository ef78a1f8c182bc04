"""JSON-RPC 2.0 messages and MCP initialization structures."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, fields
from typing import Any, Union

from mcp_types.errors import McpError

JSONRPC_VERSION = "2.0"

RequestId = Union[str, int, None]

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


def validate_request_id(value: Any) -> RequestId:
    """Return value if it is a valid request id (string, 64-bit integer or None)."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        if _I64_MIN <= value <= _I64_MAX:
            return value
        raise ValueError(f"request id out of range: {value}")
    raise ValueError(f"invalid request id: {value!r}")


def _is_str(value: Any) -> bool:
    return isinstance(value, str)


def _is_bool(value: Any) -> bool:
    return isinstance(value, bool)


def _is_object(value: Any) -> bool:
    return isinstance(value, Mapping)


def _mapping(data: Any, what: str) -> Mapping:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be a JSON object")
    return data


def _required(data: Mapping, key: str, check: Callable[[Any], bool], what: str) -> Any:
    if key not in data:
        raise ValueError(f"{what}: missing field '{key}'")
    value = data[key]
    if not check(value):
        raise ValueError(f"{what}: invalid value for '{key}'")
    return value


def _optional(data: Mapping, key: str, check: Callable[[Any], bool], what: str) -> Any:
    value = data.get(key)
    if value is None:
        return None
    if not check(value):
        raise ValueError(f"{what}: invalid value for '{key}'")
    return value


def _required_id(data: Mapping, what: str) -> RequestId:
    if "id" not in data:
        raise ValueError(f"{what}: missing field 'id'")
    return validate_request_id(data["id"])


def _put(out: dict, key: str, value: Any) -> None:
    if value is not None:
        out[key] = value


def _envelope(data: Any, what: str) -> tuple[Mapping, str]:
    data = _mapping(data, what)
    return data, _required(data, "jsonrpc", _is_str, what)


def _flags_to_dict(obj: Any) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for f in fields(obj):
        _put(out, f.name, getattr(obj, f.name))
    return out


def _flags_from_dict(cls: type, data: Any) -> Any:
    what = cls.__name__
    data = _mapping(data, what)
    return cls(**{f.name: _optional(data, f.name, _is_bool, what) for f in fields(cls)})


def _caps_to_dict(obj: Any, nested: Mapping[str, type]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key in nested:
        value = getattr(obj, key)
        if value is not None:
            out[key] = value.to_dict()
    _put(out, "experimental", obj.experimental)
    return out


def _caps_from_dict(cls: type, data: Any, nested: Mapping[str, type]) -> Any:
    what = cls.__name__
    data = _mapping(data, what)
    values = {}
    for key, kind in nested.items():
        value = _optional(data, key, _is_object, what)
        values[key] = None if value is None else kind.from_dict(value)
    experimental = _optional(data, "experimental", _is_object, what)
    return cls(**values, experimental=None if experimental is None else dict(experimental))


@dataclass
class JsonRpcRequest:
    """A JSON-RPC 2.0 request."""

    id: RequestId
    method: str
    params: Any = None
    jsonrpc: str = JSONRPC_VERSION

    def __post_init__(self) -> None:
        validate_request_id(self.id)

    @classmethod
    def new(cls, id: RequestId, method: str) -> JsonRpcRequest:
        return cls(id=id, method=method)

    @classmethod
    def with_params(cls, id: RequestId, method: str, params: Any) -> JsonRpcRequest:
        return cls(id=id, method=method, params=params)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id, "method": self.method}
        _put(out, "params", self.params)
        return out

    @classmethod
    def from_dict(cls, data: Any) -> JsonRpcRequest:
        data, jsonrpc = _envelope(data, "request")
        return cls(
            jsonrpc=jsonrpc,
            id=_required_id(data, "request"),
            method=_required(data, "method", _is_str, "request"),
            params=data.get("params"),
        )


@dataclass
class JsonRpcResponse:
    """A JSON-RPC 2.0 response carrying either a result or an error."""

    id: RequestId
    result: Any = None
    error: McpError | None = None
    jsonrpc: str = JSONRPC_VERSION

    def __post_init__(self) -> None:
        validate_request_id(self.id)

    @classmethod
    def success(cls, id: RequestId, result: Any) -> JsonRpcResponse:
        return cls(id=id, result=result)

    @classmethod
    def failure(cls, id: RequestId, error: McpError) -> JsonRpcResponse:
        return cls(id=id, error=error)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        _put(out, "result", self.result)
        if self.error is not None:
            out["error"] = self.error.to_dict()
        return out

    @classmethod
    def from_dict(cls, data: Any) -> JsonRpcResponse:
        data, jsonrpc = _envelope(data, "response")
        error = data.get("error")
        return cls(
            jsonrpc=jsonrpc,
            id=_required_id(data, "response"),
            result=data.get("result"),
            error=None if error is None else McpError.from_dict(error),
        )


@dataclass
class JsonRpcNotification:
    """A JSON-RPC 2.0 notification, which expects no response."""

    method: str
    params: Any = None
    jsonrpc: str = JSONRPC_VERSION

    @classmethod
    def new(cls, method: str) -> JsonRpcNotification:
        return cls(method=method)

    @classmethod
    def with_params(cls, method: str, params: Any) -> JsonRpcNotification:
        return cls(method=method, params=params)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"jsonrpc": self.jsonrpc, "method": self.method}
        _put(out, "params", self.params)
        return out

    @classmethod
    def from_dict(cls, data: Any) -> JsonRpcNotification:
        data, jsonrpc = _envelope(data, "notification")
        return cls(
            jsonrpc=jsonrpc,
            method=_required(data, "method", _is_str, "notification"),
            params=data.get("params"),
        )


@dataclass
class ToolsCapability:
    """Tool calling support."""

    list_changed: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        return _flags_to_dict(self)

    @classmethod
    def from_dict(cls, data: Any) -> ToolsCapability:
        return _flags_from_dict(cls, data)


@dataclass
class ResourcesCapability:
    """Resource access support."""

    subscribe: bool | None = None
    list_changed: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        return _flags_to_dict(self)

    @classmethod
    def from_dict(cls, data: Any) -> ResourcesCapability:
        return _flags_from_dict(cls, data)


@dataclass
class PromptsCapability:
    """Prompt template support."""

    list_changed: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        return _flags_to_dict(self)

    @classmethod
    def from_dict(cls, data: Any) -> PromptsCapability:
        return _flags_from_dict(cls, data)


@dataclass
class LoggingCapability:
    """Logging support; carries no options."""

    def to_dict(self) -> dict[str, Any]:
        return _flags_to_dict(self)

    @classmethod
    def from_dict(cls, data: Any) -> LoggingCapability:
        return _flags_from_dict(cls, data)


@dataclass
class RootsCapability:
    """Resource roots support."""

    list_changed: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        return _flags_to_dict(self)

    @classmethod
    def from_dict(cls, data: Any) -> RootsCapability:
        return _flags_from_dict(cls, data)


@dataclass
class SamplingCapability:
    """Sampling support; carries no options."""

    def to_dict(self) -> dict[str, Any]:
        return _flags_to_dict(self)

    @classmethod
    def from_dict(cls, data: Any) -> SamplingCapability:
        return _flags_from_dict(cls, data)


@dataclass
class PingRequest:
    """Connection health check."""

    def to_dict(self) -> dict[str, Any]:
        return _flags_to_dict(self)

    @classmethod
    def from_dict(cls, data: Any) -> PingRequest:
        return _flags_from_dict(cls, data)


@dataclass
class EmptyResult:
    """Empty result returned by various operations."""

    def to_dict(self) -> dict[str, Any]:
        return _flags_to_dict(self)

    @classmethod
    def from_dict(cls, data: Any) -> EmptyResult:
        return _flags_from_dict(cls, data)


_SERVER_NESTED: dict[str, type] = {
    "tools": ToolsCapability,
    "resources": ResourcesCapability,
    "prompts": PromptsCapability,
    "logging": LoggingCapability,
}

_CLIENT_NESTED: dict[str, type] = {
    "roots": RootsCapability,
    "sampling": SamplingCapability,
}


@dataclass
class ServerCapabilities:
    """Capabilities a server advertises during initialization."""

    tools: ToolsCapability | None = None
    resources: ResourcesCapability | None = None
    prompts: PromptsCapability | None = None
    logging: LoggingCapability | None = None
    experimental: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        return _caps_to_dict(self, _SERVER_NESTED)

    @classmethod
    def from_dict(cls, data: Any) -> ServerCapabilities:
        return _caps_from_dict(cls, data, _SERVER_NESTED)


@dataclass
class ClientCapabilities:
    """Capabilities a client sends during initialization."""

    roots: RootsCapability | None = None
    sampling: SamplingCapability | None = None
    experimental: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        return _caps_to_dict(self, _CLIENT_NESTED)

    @classmethod
    def from_dict(cls, data: Any) -> ClientCapabilities:
        return _caps_from_dict(cls, data, _CLIENT_NESTED)


@dataclass
class Implementation:
    """Name and version of a client or server implementation."""

    name: str
    version: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "version": self.version}

    @classmethod
    def from_dict(cls, data: Any) -> Implementation:
        what = "implementation"
        data = _mapping(data, what)
        return cls(
            name=_required(data, "name", _is_str, what),
            version=_required(data, "version", _is_str, what),
        )


def _handshake(data: Mapping, caps: type, info_key: str, what: str) -> tuple[str, Any, Implementation]:
    return (
        _required(data, "protocolVersion", _is_str, what),
        caps.from_dict(_required(data, "capabilities", _is_object, what)),
        Implementation.from_dict(_required(data, info_key, _is_object, what)),
    )


@dataclass
class InitializeParams:
    """Parameters of the initialize request."""

    protocol_version: str
    capabilities: ClientCapabilities
    client_info: Implementation

    def to_dict(self) -> dict[str, Any]:
        return {
            "protocolVersion": self.protocol_version,
            "capabilities": self.capabilities.to_dict(),
            "clientInfo": self.client_info.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Any) -> InitializeParams:
        what = "initialize params"
        data = _mapping(data, what)
        return cls(*_handshake(data, ClientCapabilities, "clientInfo", what))


@dataclass
class InitializeResult:
    """Result of the initialize request."""

    protocol_version: str
    capabilities: ServerCapabilities
    server_info: Implementation
    instructions: str | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "protocolVersion": self.protocol_version,
            "capabilities": self.capabilities.to_dict(),
            "serverInfo": self.server_info.to_dict(),
        }
        _put(out, "instructions", self.instructions)
        return out

    @classmethod
    def from_dict(cls, data: Any) -> InitializeResult:
        what = "initialize result"
        data = _mapping(data, what)
        return cls(
            *_handshake(data, ServerCapabilities, "serverInfo", what),
            instructions=_optional(data, "instructions", _is_str, what),
        )