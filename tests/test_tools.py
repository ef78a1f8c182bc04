import json

import pytest

from mcp_types.tools import (
    CallToolRequest,
    CallToolResult,
    ListToolsRequest,
    ListToolsResult,
    Tool,
    ToolImageContent,
    ToolInputSchema,
    ToolResourceContent,
    ToolResultContent,
    ToolTextContent,
)


def _roundtrip(obj, kind=None):
    kind = kind or type(obj)
    return kind.from_dict(json.loads(json.dumps(obj.to_dict())))


def test_tool_creation():
    tool = Tool.new("calculate", "Perform mathematical calculations").with_parameter(
        "expression", "Mathematical expression to evaluate", True
    )
    assert tool.name == "calculate"
    assert tool.description == "Perform mathematical calculations"
    assert tool.input_schema.type == "object"
    assert tool.input_schema.required == ["expression"]
    assert tool.input_schema.properties == {
        "expression": {"type": "string", "description": "Mathematical expression to evaluate"}
    }


def test_optional_parameter_not_required():
    tool = Tool.new("search", "Search").with_parameter("query", "Query text", False)
    assert tool.input_schema.required is None
    assert "query" in tool.input_schema.properties


def test_with_parameter_leaves_non_object_properties():
    tool = Tool("t", input_schema=ToolInputSchema(properties=["x"]))
    tool.with_parameter("y", "desc", True)
    assert tool.input_schema.properties == ["x"]
    assert tool.input_schema.required == ["y"]


def test_tool_serialization():
    tool = Tool(
        name="test_tool",
        description="A test tool",
        input_schema=ToolInputSchema(
            type="object",
            properties={"param": {"type": "string"}},
            required=["param"],
        ),
    )
    assert _roundtrip(tool) == tool


def test_tool_wire_keys():
    tool = Tool("bare")
    assert tool.to_dict() == {"name": "bare", "inputSchema": {"type": "object"}}


def test_additional_schema_fields_flattened():
    schema = ToolInputSchema(additional={"additionalProperties": False})
    out = schema.to_dict()
    assert out["additionalProperties"] is False
    assert _roundtrip(schema) == schema


def test_schema_without_extras_has_no_additional():
    schema = ToolInputSchema.from_dict({"type": "object", "properties": {}})
    assert schema.additional is None
    assert schema.properties == {}


def test_tool_result_content():
    text = ToolResultContent.text("Hello, world!")
    image = ToolResultContent.image("base64data", "image/png")
    resource = ToolResultContent.resource("file:///path/to/file.txt")
    for item in (text, image, resource):
        assert _roundtrip(item, ToolResultContent) == item
    assert isinstance(text, ToolTextContent)
    assert image.to_dict() == {"type": "image", "data": "base64data", "mimeType": "image/png"}
    assert resource.to_dict() == {"type": "resource", "resource": "file:///path/to/file.txt"}


def test_content_unknown_type():
    with pytest.raises(ValueError):
        ToolResultContent.from_dict({"type": "video", "data": "x"})


def test_content_missing_type():
    with pytest.raises(ValueError):
        ToolResultContent.from_dict({"text": "x"})


def test_content_subclass_mismatch():
    with pytest.raises(ValueError):
        ToolImageContent.from_dict({"type": "text", "text": "x"})


def test_content_missing_field():
    with pytest.raises(ValueError):
        ToolResultContent.from_dict({"type": "image", "data": "abc"})


def test_call_tool_result_roundtrip():
    result = CallToolResult([ToolTextContent("ok"), ToolResourceContent("file:///a")], True)
    out = result.to_dict()
    assert out["isError"] is True
    assert _roundtrip(result) == result


def test_call_tool_request_roundtrip():
    request = CallToolRequest("calc", {"expression": "1+1"})
    assert _roundtrip(request) == request
    assert CallToolRequest("calc").to_dict() == {"name": "calc"}


def test_list_tools_roundtrip():
    result = ListToolsResult([Tool.new("a", "b")], next_cursor="page2")
    assert result.to_dict()["nextCursor"] == "page2"
    assert _roundtrip(result) == result
    assert ListToolsRequest().to_dict() == {}
    assert _roundtrip(ListToolsRequest("c1")) == ListToolsRequest("c1")


def test_tool_missing_input_schema():
    with pytest.raises(ValueError):
        Tool.from_dict({"name": "x"})


def test_schema_required_must_be_strings():
    with pytest.raises(ValueError):
        ToolInputSchema.from_dict({"type": "object", "required": [1]})