from __future__ import annotations

import json

import pytest
from loguru import logger
from pydantic import ValidationError

from openai_chat.models import (
    ChatConversation,
    ChatConversationFunction,
    ChatFunctionCall,
    ChatFunctions,
    ChatMessage,
    ChatRole,
    FunctionCall,
    JSONSchemaParameters,
    JSONSchemaProperty,
)
from openai_chat.utils.codec import encode, encode_dict
from openai_chat.utils.error_handler import DecodingError


def _conversation(**fields: object) -> ChatConversation:
    return ChatConversation(
        model="gpt-3.5-turbo",
        messages=[ChatMessage(role=ChatRole.USER, content="Hello")],
        **fields,
    )


def test_role_serialises_to_lowercase_name() -> None:
    assert [role.value for role in ChatRole] == ["system", "user", "assistant", "function"]
    assert encode_dict(ChatMessage(role=ChatRole.SYSTEM, content="Be brief")) == {
        "role": "system",
        "content": "Be brief",
    }


def test_renamed_conversation_fields_use_wire_keys() -> None:
    payload = json.loads(
        encode(
            _conversation(
                top_probability_mass=0.9,
                choices=2,
                max_tokens=256,
                presence_penalty=0.5,
                frequency_penalty=-0.5,
                logit_bias={50256: -100.0},
            )
        )
    )

    assert payload["top_p"] == 0.9
    assert payload["n"] == 2
    assert payload["max_tokens"] == 256
    assert payload["presence_penalty"] == 0.5
    assert payload["frequency_penalty"] == -0.5
    assert payload["logit_bias"] == {"50256": -100.0}
    assert "top_probability_mass" not in payload
    assert "choices" not in payload


def test_unset_optional_fields_are_omitted() -> None:
    payload = encode_dict(_conversation())

    assert payload == {
        "messages": [{"role": "user", "content": "Hello"}],
        "model": "gpt-3.5-turbo",
    }


def test_wire_keys_accepted_on_construction() -> None:
    conversation = ChatConversation.model_validate(
        {"model": "gpt-4", "messages": [], "top_p": 0.5, "n": 3}
    )

    assert conversation.top_probability_mass == 0.5
    assert conversation.choices == 3


def test_message_function_call_uses_wire_key() -> None:
    message = ChatMessage(
        role=ChatRole.ASSISTANT,
        function_call=ChatFunctionCall(name="get_weather", arguments='{"location": "Oslo"}'),
    )

    assert encode_dict(message) == {
        "role": "assistant",
        "function_call": {"name": "get_weather", "arguments": '{"location": "Oslo"}'},
    }


def test_records_are_immutable() -> None:
    message = ChatMessage(role=ChatRole.USER, content="Hi")

    with pytest.raises(ValidationError):
        message.content = "Changed"


def test_function_message_without_name_is_accepted() -> None:
    message = ChatMessage(role=ChatRole.FUNCTION, content='{"temperature": 21}')

    assert message.name is None
    assert encode_dict(message) == {"role": "function", "content": '{"temperature": 21}'}


def test_function_conversation_defaults_to_auto() -> None:
    conversation = ChatConversationFunction[JSONSchemaParameters](
        model="gpt-3.5-turbo-0613",
        messages=[ChatMessage(role=ChatRole.USER, content="Weather in Oslo?")],
    )

    assert conversation.function_call == "auto"
    assert json.loads(encode(conversation))["function_call"] == "auto"


def test_function_conversation_encodes_functions_and_forced_call() -> None:
    parameters = JSONSchemaParameters(
        properties={
            "location": JSONSchemaProperty(type="string", description="City name"),
            "unit": JSONSchemaProperty(type="string", enum=["celsius", "fahrenheit"]),
        },
        required=["location"],
    )
    conversation = ChatConversationFunction[JSONSchemaParameters](
        model="gpt-3.5-turbo-0613",
        messages=[ChatMessage(role=ChatRole.USER, content="Weather in Oslo?")],
        functions=[
            ChatFunctions[JSONSchemaParameters](
                name="get_weather",
                description="Current weather for a city",
                parameters=parameters,
            )
        ],
        function_call=FunctionCall(name="get_weather"),
    )

    payload = encode_dict(conversation)

    assert payload["function_call"] == {"name": "get_weather"}
    assert payload["functions"] == [
        {
            "name": "get_weather",
            "description": "Current weather for a city",
            "parameters": {
                "type": "object",
                "properties": {
                    "location": {"type": "string", "description": "City name"},
                    "unit": {"type": "string", "enum": ["celsius", "fahrenheit"]},
                },
                "required": ["location"],
            },
        }
    ]


def test_parsed_arguments() -> None:
    call = ChatFunctionCall(name="get_weather", arguments='{"location": "Oslo", "days": 2}')

    assert call.parsed_arguments() == {"location": "Oslo", "days": 2}
    assert ChatFunctionCall(name="noop").parsed_arguments() == {}


@pytest.mark.parametrize("arguments", ['{"location": ', '["Oslo"]'])
def test_parsed_arguments_rejects_malformed_payload(arguments: str) -> None:
    call = ChatFunctionCall(name="get_weather", arguments=arguments)

    with pytest.raises(DecodingError):
        call.parsed_arguments()


def test_malformed_arguments_are_logged() -> None:
    messages: list[str] = []
    handler_id = logger.add(messages.append, level="ERROR", format="{message}")
    try:
        with pytest.raises(DecodingError):
            ChatFunctionCall(name="get_weather", arguments="[1]").parsed_arguments()
    finally:
        logger.remove(handler_id)

    assert any("get_weather" in message for message in messages)
