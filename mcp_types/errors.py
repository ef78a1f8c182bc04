"""Error codes and the error type carried in JSON-RPC responses."""

from __future__ import annotations

import json
from collections.abc import Mapping
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Error codes defined by the JSON-RPC 2.0 specification."""

    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603

    @property
    def label(self) -> str:
        """CamelCase name used when the code is displayed."""
        return "".join(part.capitalize() for part in self.name.split("_"))

    @property
    def wire(self) -> str:
        """The code as it appears on the wire: a JSON string."""
        return str(self.value)

    @classmethod
    def from_wire(cls, value: Any) -> ErrorCode:
        """Parse the wire form of a code, raising ValueError if it is unknown."""
        if isinstance(value, str):
            for code in cls:
                if code.wire == value:
                    return code
        raise ValueError(f"unknown error code: {value!r}")


class McpError(Exception):
    """An error reported through a JSON-RPC response."""

    def __init__(self, code: ErrorCode | int, message: str, data: Any = None) -> None:
        self.code = ErrorCode(code)
        self.message = str(message)
        self.data = data
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.message} (code: {self.code.label})"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(code={self.code!r}, "
            f"message={self.message!r}, data={self.data!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, McpError):
            return NotImplemented
        return (self.code, self.message, self.data) == (
            other.code,
            other.message,
            other.data,
        )

    __hash__ = None  # type: ignore[assignment]

    def __reduce__(self):
        return (type(self), (self.code, self.message, self.data))

    @classmethod
    def with_data(cls, code: ErrorCode | int, message: str, data: Any) -> McpError:
        """Create an error carrying additional data."""
        return cls(code, message, data)

    @classmethod
    def parse_error(cls, message: str) -> McpError:
        return cls(ErrorCode.PARSE_ERROR, message)

    @classmethod
    def invalid_request(cls, message: str) -> McpError:
        return cls(ErrorCode.INVALID_REQUEST, message)

    @classmethod
    def method_not_found(cls, method: str) -> McpError:
        return cls(ErrorCode.METHOD_NOT_FOUND, f"Method not found: {method}")

    @classmethod
    def invalid_params(cls, message: str) -> McpError:
        return cls(ErrorCode.INVALID_PARAMS, message)

    @classmethod
    def internal_error(cls, message: str) -> McpError:
        return cls(ErrorCode.INTERNAL_ERROR, message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form of the error."""
        out: dict[str, Any] = {"code": self.code.wire, "message": self.message}
        if self.data is not None:
            out["data"] = self.data
        return out

    @classmethod
    def from_dict(cls, data: Any) -> McpError:
        """Build an error from its JSON object form."""
        if not isinstance(data, Mapping):
            raise ValueError("error must be a JSON object")
        if "code" not in data:
            raise ValueError("error: missing field 'code'")
        if "message" not in data:
            raise ValueError("error: missing field 'message'")
        message = data["message"]
        if not isinstance(message, str):
            raise ValueError("error: 'message' must be a string")
        return cls(ErrorCode.from_wire(data["code"]), message, data.get("data"))

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: str | bytes) -> McpError:
        return cls.from_dict(json.loads(text))