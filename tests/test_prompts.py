import json

import pytest

from mcp_types.prompts import (
    GetPromptRequest,
    GetPromptResult,
    ListPromptsRequest,
    ListPromptsResult,
    Prompt,
    PromptArgument,
    PromptContent,
    PromptImageContent,
    PromptMessage,
    PromptResourceContent,
    PromptRole,
    PromptTextContent,
)


def _roundtrip(obj):
    return type(obj).from_dict(json.loads(json.dumps(obj.to_dict())))


@pytest.mark.parametrize(
    "obj",
    [
        Prompt(
            "review",
            description="Review code",
            arguments=[PromptArgument("code", "Code to review", True), PromptArgument("style")],
        ),
        GetPromptResult(
            [
                PromptMessage(PromptRole.SYSTEM, PromptTextContent("be brief")),
                PromptMessage(PromptRole.USER, PromptResourceContent("file:///a")),
            ],
            description="rendered",
        ),
        GetPromptRequest("review", {"code": "print(1)"}),
        ListPromptsResult([Prompt("a")], next_cursor="n"),
        ListPromptsRequest(cursor="c"),
    ],
)
def test_roundtrip(obj):
    assert _roundtrip(obj) == obj


@pytest.mark.parametrize(
    "obj, expected",
    [
        (Prompt("bare"), {"name": "bare"}),
        (PromptArgument("a"), {"name": "a"}),
        (GetPromptRequest("review"), {"name": "review"}),
        (ListPromptsRequest(), {}),
        (ListPromptsResult([Prompt("a")], next_cursor="n"), {"prompts": [{"name": "a"}], "nextCursor": "n"}),
        (PromptImageContent("abc", "image/png"), {"type": "image", "data": "abc", "mimeType": "image/png"}),
    ],
)
def test_wire_form(obj, expected):
    assert obj.to_dict() == expected


def test_role_values():
    assert PromptRole("assistant") is PromptRole.ASSISTANT
    message = PromptMessage("user", PromptTextContent("hi"))
    assert message.role is PromptRole.USER
    assert message.to_dict()["role"] == "user"


@pytest.mark.parametrize(
    "wire, expected",
    [
        ({"type": "text", "text": "hi"}, PromptTextContent("hi")),
        ({"type": "image", "data": "abc", "mimeType": "image/png"}, PromptImageContent("abc", "image/png")),
        ({"type": "resource", "resource": "file:///a"}, PromptResourceContent("file:///a")),
    ],
)
def test_content_dispatch(wire, expected):
    assert PromptContent.from_dict(wire) == expected


@pytest.mark.parametrize(
    "kind, wire",
    [
        (PromptMessage, {"role": "robot", "content": {"type": "text", "text": "x"}}),
        (GetPromptResult, {"description": "x"}),
        (PromptArgument, {"name": "x", "required": "yes"}),
        (PromptContent, {"type": "audio", "data": "x"}),
        (PromptTextContent, {"type": "image", "data": "x", "mimeType": "image/png"}),
    ],
)
def test_invalid_input_raises(kind, wire):
    with pytest.raises(ValueError):
        kind.from_dict(wire)