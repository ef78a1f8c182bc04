# mcp_types

Plain Python data types for the Model Context Protocol (MCP). The package
covers JSON-RPC 2.0 messages, capability negotiation, tools, resources,
prompts, sampling and logging. Every type turns into a JSON-ready dict with
`to_dict()` and is built back from one with `from_dict()`, using the
protocol's field names on the wire (`inputSchema`, `nextCursor`, `mimeType`
and the rest). Optional fields that are unset are left out of the dict.

It depends on nothing outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `mcp_types.errors`: `ErrorCode` and `McpError`, an exception that can be
  written to and read from a JSON-RPC error object (`to_dict`, `from_dict`,
  `to_json`, `from_json`). Codes travel as JSON strings, such as `"-32601"`.
- `mcp_types.protocol`: `JsonRpcRequest`, `JsonRpcResponse`,
  `JsonRpcNotification`, `validate_request_id`, the capability types
  (`ServerCapabilities`, `ClientCapabilities`, `ToolsCapability`,
  `ResourcesCapability`, `PromptsCapability`, `LoggingCapability`,
  `RootsCapability`, `SamplingCapability`), `Implementation`,
  `InitializeParams`, `InitializeResult`, `PingRequest` and `EmptyResult`.
- `mcp_types.logging_types`: `LoggingLevel`, `LogEntry` and
  `SetLoggingLevelRequest`.
- `mcp_types.tools`: `Tool`, `ToolInputSchema`, `ListToolsRequest`,
  `ListToolsResult`, `CallToolRequest`, `CallToolResult`, and
  `ToolResultContent` with its variants `ToolTextContent`,
  `ToolImageContent` and `ToolResourceContent`.
- `mcp_types.resources`: `Resource`, `ResourceTemplate`,
  `ListResourcesRequest`, `ListResourcesResult`, `ReadResourceRequest`,
  `ReadResourceResult`, and `ResourceContents` with its variants
  `TextResourceContents` and `BlobResourceContents`.
- `mcp_types.prompts`: `Prompt`, `PromptArgument`, `ListPromptsRequest`,
  `ListPromptsResult`, `GetPromptRequest`, `GetPromptResult`,
  `PromptMessage`, `PromptRole`, and `PromptContent` with its variants
  `PromptTextContent`, `PromptImageContent` and `PromptResourceContent`.
- `mcp_types.sampling`: `SamplingMessage`, `MessageRole`, `MessageContent`
  with its variants `TextMessageContent` and `ImageMessageContent`,
  `CreateMessageRequest`, `ModelPreferences`, `ModelHint` and
  `CreateMessageResult`.

## Examples

A request and a response:

```python
from mcp_types.protocol import JsonRpcRequest, JsonRpcResponse

request = JsonRpcRequest.with_params(1, "tools/call", {"name": "calculate"})
wire = request.to_dict()
# {'jsonrpc': '2.0', 'id': 1, 'method': 'tools/call', 'params': {'name': 'calculate'}}
assert JsonRpcRequest.from_dict(wire) == request

response = JsonRpcResponse.success(1, {"ok": True})
```

Request ids may be a string, a 64-bit integer or `None`; anything else is
rejected by `validate_request_id` with `ValueError`.

Errors are exceptions that also travel in responses:

```python
from mcp_types.errors import McpError
from mcp_types.protocol import JsonRpcResponse

try:
    raise McpError.method_not_found("tools/unknown")
except McpError as exc:
    print(exc)  # Method not found: tools/unknown (code: MethodNotFound)
    reply = JsonRpcResponse.failure(7, exc)
    print(reply.to_dict()["error"])
    # {'code': '-32601', 'message': 'Method not found: tools/unknown'}
```

A tool with its input schema:

```python
from mcp_types.tools import CallToolResult, Tool, ToolResultContent

tool = (
    Tool.new("calculate", "Perform mathematical calculations")
    .with_parameter("expression", "Mathematical expression to evaluate", True)
)
print(tool.to_dict()["inputSchema"]["required"])  # ['expression']

result = CallToolResult(content=[ToolResultContent.text("42")])
```

Tagged content is read back into the right variant by its `type` field:

```python
from mcp_types.resources import ResourceContents, TextResourceContents

contents = ResourceContents.from_dict(
    {"type": "text", "uri": "file:///notes.txt", "text": "hello"}
)
assert isinstance(contents, TextResourceContents)
```

Invalid input (a missing field, a value of the wrong type, an unknown `type`
tag or an unknown enum value) makes `from_dict` raise `ValueError`.

## What it does not do

The package only describes and (de)serialises messages. It has no transport,
no client and no server: sending, receiving and dispatching messages, and
validating tool arguments against an input schema, are left to the code that
uses it.