"""Request envelope construction, setters and wire serialization."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from onellm import (
    APIInput,
    Content,
    GenerationConfig,
    Message,
    ModelId,
    ResponseFormat,
    SafetySetting,
    SerializationError,
    Tool,
)
from onellm.base.models import ALWAYS_PRESENT_FIELDS, OPTIONAL_FIELDS
from onellm.base.models_parts.api_input import UINT32_MAX


def test_mandatory_only_envelope_emits_exact_key_set(chat_envelope):
    doc = chat_envelope.to_wire()
    assert doc == {
        "endpoint": "chat",
        "model": "GPT-4.1",
        "temperature": 1.0,
        "stream": False,
        "messages": [{"role": "user", "content": "hi"}],
        "max_tokens": 16,
        "top_p": 1.0,
    }
    assert set(doc) == set(ALWAYS_PRESENT_FIELDS)
    assert not set(doc) & set(OPTIONAL_FIELDS)


def test_to_json_matches_to_wire(chat_envelope):
    chat_envelope.set_stop_sequences(["STOP"]).set_seed(7)
    assert json.loads(chat_envelope.to_json()) == chat_envelope.to_wire()


def test_stop_sequences_added_after_setter(chat_envelope):
    chat_envelope.set_stop_sequences(["STOP"])
    doc = chat_envelope.to_wire()
    assert doc["stop_sequences"] == ["STOP"]
    assert set(doc) == set(ALWAYS_PRESENT_FIELDS) | {"stop_sequences"}


def test_set_temperature_overrides_default(chat_envelope):
    chat_envelope.set_temperature(0.2)
    assert chat_envelope.to_wire()["temperature"] == 0.2


def test_last_write_wins(chat_envelope):
    chat_envelope.set_stop_sequences(["A"])
    chat_envelope.set_stop_sequences(["B", "C"])
    chat_envelope.set_temperature(0.5)
    chat_envelope.set_temperature(0.9)
    doc = chat_envelope.to_wire()
    assert doc["stop_sequences"] == ["B", "C"]
    assert doc["temperature"] == 0.9


def _apply(envelope: APIInput, order):
    setters = {
        "seed": lambda e: e.set_seed(42),
        "top_k": lambda e: e.set_top_k(40),
        "user": lambda e: e.set_user("u-1"),
        "system": lambda e: e.set_system("be brief"),
        "n": lambda e: e.set_n(2),
    }
    for name in order:
        setters[name](envelope)
    return envelope.to_wire()


def test_setter_order_does_not_matter():
    make = lambda: APIInput.create("chat", ModelId.GPT_4O, [Message(role="user", content="x")], 8)
    forward = _apply(make(), ["seed", "top_k", "user", "system", "n"])
    backward = _apply(make(), ["n", "system", "user", "top_k", "seed"])
    assert forward == backward
    assert forward["seed"] == 42
    assert forward["top_k"] == 40
    assert forward["user"] == "u-1"
    assert forward["system"] == "be brief"
    assert forward["n"] == 2


def test_zero_and_empty_values_are_present(chat_envelope):
    chat_envelope.set_seed(0).set_top_k(0).set_stop_sequences([]).set_logprobs(False).set_frequency_penalty(0.0)
    doc = chat_envelope.to_wire()
    assert doc["seed"] == 0
    assert doc["top_k"] == 0
    assert doc["stop_sequences"] == []
    assert doc["logprobs"] is False
    assert doc["frequency_penalty"] == 0.0


def test_reset_to_none_removes_key(chat_envelope):
    chat_envelope.set_user("alice")
    chat_envelope.user = None
    assert "user" not in chat_envelope.to_wire()


def test_every_optional_field_uses_its_wire_name():
    env = APIInput.create("chat", ModelId.GEMINI_2_0_FLASH, [{"role": "user", "content": "hi"}], 32)
    (
        env.set_stop_sequences(["END"])
        .set_tools([Tool.function_tool("lookup", "Find a thing", {"type": "object"})])
        .set_contents([Content.from_text("user", "hi", "there")])
        .set_safety_settings([SafetySetting(category="HARM_CATEGORY_HARASSMENT", threshold="BLOCK_NONE")])
        .set_generation_config(GenerationConfig(temperature=0.3, max_output_tokens=64))
        .set_frequency_penalty(0.1)
        .set_presence_penalty(0.2)
        .set_n(1)
        .set_response_format("json_object")
        .set_seed(3)
        .set_tool_choice("auto")
        .set_user("u")
        .set_logprobs(True)
        .set_top_logprobs(5)
        .set_system("sys")
        .set_top_k(10)
    )
    doc = env.to_wire()
    assert set(doc) == set(ALWAYS_PRESENT_FIELDS) | set(OPTIONAL_FIELDS)
    assert doc["tools"] == [
        {"type": "function", "function": {"name": "lookup", "description": "Find a thing", "parameters": {"type": "object"}}}
    ]
    assert doc["contents"] == [{"role": "user", "parts": [{"text": "hi"}, {"text": "there"}]}]
    assert doc["safety_settings"] == [{"category": "HARM_CATEGORY_HARASSMENT", "threshold": "BLOCK_NONE"}]
    assert doc["generation_config"] == {
        "temperature": 0.3,
        "top_p": 1.0,
        "top_k": 0,
        "candidate_count": 1,
        "max_output_tokens": 64,
        "stop_sequences": [],
    }
    assert doc["response_format"] == {"type": "json_object"}


def test_message_order_preserved():
    msgs = [
        {"role": "system", "content": "s"},
        {"role": "user", "content": "u1"},
        {"role": "assistant", "content": "a1"},
        {"role": "user", "content": "u2"},
    ]
    env = APIInput.create("chat", "Sonnet-4", msgs, 100)
    assert env.to_wire()["messages"] == msgs
    assert env.model is ModelId.CLAUDE_SONNET_4


def test_tool_parameters_pass_through_verbatim(chat_envelope):
    schema = {"type": "object", "properties": {"q": {"type": "string", "default": None}}, "required": ["q"]}
    chat_envelope.set_tools([{"function": {"name": "search", "parameters": schema}}])
    tool = chat_envelope.to_wire()["tools"][0]
    assert tool["type"] == "function"
    assert tool["function"]["parameters"] == schema


def test_dict_inputs_are_validated_on_assignment(chat_envelope):
    chat_envelope.set_generation_config({"temperature": 0.1, "top_k": 3})
    assert isinstance(chat_envelope.generation_config, GenerationConfig)
    chat_envelope.set_response_format(ResponseFormat(type="text"))
    assert chat_envelope.to_wire()["response_format"] == {"type": "text"}


def test_invalid_assignment_rejected(chat_envelope):
    with pytest.raises(ValidationError):
        chat_envelope.set_seed(-1)
    with pytest.raises(ValidationError):
        chat_envelope.set_generation_config({"bogus": 1})
    assert "seed" not in chat_envelope.to_wire()


def test_unknown_model_string_rejected():
    with pytest.raises(ValidationError):
        APIInput.create("chat", "GPT-99", [{"role": "user", "content": "hi"}], 16)


def test_no_consistency_check_between_model_and_fields():
    env = APIInput.create("chat", ModelId.GPT_4_1, [{"role": "user", "content": "hi"}], 16)
    env.set_safety_settings([{"category": "c", "threshold": "t"}])
    assert env.to_wire()["safety_settings"] == [{"category": "c", "threshold": "t"}]


def test_active_shape_follows_model_family():
    msgs = [{"role": "user", "content": "hi"}]
    gemini = APIInput.create("chat", ModelId.GEMINI_1_5_PRO, msgs, 16)
    assert gemini.active_shape() == "messages"
    gemini.set_contents([Content.from_text("user", "hi")])
    assert gemini.active_shape() == "contents"

    openai = APIInput.create("chat", ModelId.GPT_4O_MINI, msgs, 16)
    openai.set_contents([Content.from_text("user", "hi")])
    assert openai.active_shape() == "messages"


def test_present_optional_fields_in_wire_order(chat_envelope):
    chat_envelope.set_top_k(1).set_stop_sequences(["x"]).set_seed(2)
    assert chat_envelope.present_optional_fields() == ["stop_sequences", "seed", "top_k"]


def test_unserializable_tool_schema_raises_serialization_error(chat_envelope):
    chat_envelope.set_tools([{"function": {"name": "f", "parameters": {"bad": object()}}}])
    with pytest.raises(SerializationError):
        chat_envelope.to_json()
    with pytest.raises(SerializationError):
        chat_envelope.to_wire()


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_floats_rejected(chat_envelope, value):
    with pytest.raises(ValidationError):
        chat_envelope.set_temperature(value)
    with pytest.raises(ValidationError):
        chat_envelope.set_frequency_penalty(value)
    with pytest.raises(ValidationError):
        chat_envelope.set_generation_config({"top_p": value})
    doc = json.loads(chat_envelope.to_json())
    assert doc["temperature"] == 1.0
    assert "frequency_penalty" not in doc
    assert "generation_config" not in doc


def test_non_finite_values_rejected_at_construction():
    with pytest.raises(ValidationError):
        GenerationConfig(temperature=float("nan"))
    with pytest.raises(ValidationError):
        APIInput(
            endpoint="chat",
            model=ModelId.GPT_4_1,
            messages=[{"role": "user", "content": "hi"}],
            max_tokens=16,
            top_p=float("inf"),
        )


def test_count_fields_are_unsigned_32_bit(chat_envelope):
    chat_envelope.set_seed(UINT32_MAX).set_top_k(UINT32_MAX)
    assert chat_envelope.to_wire()["seed"] == 2**32 - 1
    for setter in ("set_seed", "set_n", "set_top_logprobs", "set_top_k"):
        with pytest.raises(ValidationError):
            getattr(chat_envelope, setter)(2**32)
    with pytest.raises(ValidationError):
        APIInput.create("chat", ModelId.GPT_4_1, [{"role": "user", "content": "hi"}], 2**40)


def test_count_fields_reject_bool_and_float(chat_envelope):
    with pytest.raises(ValidationError):
        chat_envelope.set_seed(True)
    with pytest.raises(ValidationError):
        chat_envelope.set_n(2.0)
    with pytest.raises(ValidationError):
        APIInput.create("chat", ModelId.GPT_4_1, [{"role": "user", "content": "hi"}], True)
    assert chat_envelope.to_wire()["max_tokens"] == 16
    assert "seed" not in chat_envelope.to_wire()
