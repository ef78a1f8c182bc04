import json

import pytest

from mcp_types.sampling import (
    CreateMessageRequest,
    CreateMessageResult,
    ImageMessageContent,
    MessageContent,
    MessageRole,
    ModelHint,
    ModelPreferences,
    SamplingMessage,
    TextMessageContent,
)


def _roundtrip(obj, kind=None):
    kind = kind or type(obj)
    return kind.from_dict(json.loads(json.dumps(obj.to_dict())))


def _full_request():
    return CreateMessageRequest(
        messages=[SamplingMessage(MessageRole.USER, MessageContent.text("What is 2+2?"))],
        model_preferences=ModelPreferences(
            hints=[ModelHint("claude")],
            cost_priority=0.2,
            speed_priority=0.5,
            intelligence_priority=0.9,
        ),
        system_prompt="Answer briefly",
        include_context="thisServer",
        temperature=0.7,
        max_tokens=100,
        stop=["\n\n"],
        metadata={"trace": "t1"},
    )


@pytest.mark.parametrize(
    "obj, kind",
    [
        (MessageContent.text("hello"), MessageContent),
        (MessageContent.image("abc", "image/jpeg"), MessageContent),
        (SamplingMessage("assistant", MessageContent.text("hi")), None),
        (_full_request(), None),
        (CreateMessageRequest(messages=[]), None),
        (
            CreateMessageResult(
                SamplingMessage(MessageRole.ASSISTANT, MessageContent.text("4")),
                model="model-a",
                stop_reason="endTurn",
            ),
            None,
        ),
        (ModelPreferences(), None),
    ],
)
def test_roundtrip(obj, kind):
    assert _roundtrip(obj, kind) == obj


def test_message_content_constructors():
    assert MessageContent.text("hello") == TextMessageContent("hello")
    assert MessageContent.image("abc", "image/jpeg").to_dict() == {
        "type": "image",
        "data": "abc",
        "mimeType": "image/jpeg",
    }


def test_sampling_message_role():
    assert SamplingMessage("assistant", MessageContent.text("hi")).role is MessageRole.ASSISTANT


def test_create_message_request_wire_keys():
    out = _full_request().to_dict()
    for key in ("modelPreferences", "systemPrompt", "includeContext", "maxTokens"):
        assert key in out
    assert out["modelPreferences"]["costPriority"] == 0.2


@pytest.mark.parametrize(
    "obj, expected",
    [
        (CreateMessageRequest(messages=[]), {"messages": []}),
        (ModelPreferences(), {}),
    ],
)
def test_minimal_wire_form(obj, expected):
    assert obj.to_dict() == expected


def test_create_message_result_stop_reason_key():
    result = CreateMessageResult(
        SamplingMessage(MessageRole.ASSISTANT, MessageContent.text("4")),
        model="model-a",
        stop_reason="endTurn",
    )
    assert result.to_dict()["stopReason"] == "endTurn"


def test_integer_temperature_accepted_as_float():
    request = CreateMessageRequest.from_dict({"messages": [], "temperature": 1})
    assert request.temperature == 1.0
    assert isinstance(request.temperature, float)


@pytest.mark.parametrize(
    "kind, wire",
    [
        (SamplingMessage, {"role": "robot", "content": {"type": "text", "text": "x"}}),
        (MessageContent, {"type": "resource", "resource": "file:///a"}),
        (CreateMessageRequest, {"messages": [], "maxTokens": 10.5}),
        (CreateMessageRequest, {"messages": [], "maxTokens": 2**31}),
        (CreateMessageRequest, {"messages": [], "stop": [1, 2]}),
        (CreateMessageRequest, {"temperature": 0.5}),
        (ImageMessageContent, {"type": "text", "text": "x"}),
    ],
)
def test_invalid_input_raises(kind, wire):
    with pytest.raises(ValueError):
        kind.from_dict(wire)


def test_max_tokens_range_on_construction():
    with pytest.raises(ValueError):
        CreateMessageRequest(messages=[], max_tokens=2**31)