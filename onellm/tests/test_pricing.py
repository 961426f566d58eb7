"""Price table lookups and the ModelId/price lockstep check."""

from __future__ import annotations

import pytest

from onellm import MODEL_PRICES, ModelId, UnknownModelError, get_price
from onellm.base.errors import ErrorCode, GatewayError
from onellm.base.pricing import verify_price_table


def test_table_keys_match_model_enumeration_exactly():
    assert set(MODEL_PRICES) == set(ModelId)
    assert len(MODEL_PRICES) == len(ModelId)


@pytest.mark.parametrize("model", list(ModelId))
def test_every_model_has_positive_price(model):
    price = get_price(model)
    assert isinstance(price, int)
    assert price > 0


def test_o3_pro_price():
    assert get_price(ModelId.GPT_O3_PRO) == 10400


def test_lookup_by_wire_string():
    assert get_price("GPT-o3-pro") == 10400
    assert get_price("Haiku-3") == 182
    assert get_price("gemini-2.0-Flash-lite") == 39


@pytest.mark.parametrize("bogus", ["GPT-5-ultra", "ModelGptO3Pro", "", "gpt-4.1"])
def test_unknown_identifier_raises_instead_of_zero(bogus):
    with pytest.raises(UnknownModelError) as exc:
        get_price(bogus)
    assert exc.value.code is ErrorCode.UNKNOWN_MODEL
    assert exc.value.model == bogus


def test_unknown_model_error_is_lookup_and_gateway_error():
    with pytest.raises(LookupError):
        get_price("nope")
    with pytest.raises(GatewayError):
        get_price("nope")


def test_table_is_read_only():
    with pytest.raises(TypeError):
        MODEL_PRICES[ModelId.GPT_4_1] = 0  # type: ignore[index]


def test_verify_reports_missing_entry():
    partial = {k: v for k, v in MODEL_PRICES.items() if k is not ModelId.MISTRAL_NEMO}
    with pytest.raises(RuntimeError, match="Mistral-NeMo"):
        verify_price_table(partial)


def test_verify_reports_unknown_key_and_zero_price():
    extra = dict(MODEL_PRICES)
    extra["Imaginary-1"] = 5
    with pytest.raises(RuntimeError, match="Imaginary-1"):
        verify_price_table(extra)

    zeroed = dict(MODEL_PRICES)
    zeroed[ModelId.GPT_4O_MINI] = 0
    with pytest.raises(RuntimeError, match="GPT-4o-mini"):
        verify_price_table(zeroed)


def test_every_model_has_a_family():
    for model in ModelId:
        assert model.family is not None
    assert ModelId.GEMINI_1_5_PRO.family.value == "gemini"
    assert ModelId.CLAUDE_SONNET_4.family.value == "anthropic"
    assert ModelId.DEEPSEEK_R1.family.value == "deepseek"
    assert ModelId.CODESTRAL.family.value == "mistral"
    assert ModelId.GPT_O3_PRO.family.value == "openai"
