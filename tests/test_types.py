"""Tests for ModelParameters and ModelRequest."""

import pytest

from dim.types import DataType, ImagePayload, ModelParameters, ModelRequest, TextPayload


def test_model_parameters_omit_unset_fields() -> None:
    params = ModelParameters(model="gpt-4o-mini")

    assert params.to_request_fields() == {"model": "gpt-4o-mini"}


def test_model_parameters_include_set_fields() -> None:
    params = ModelParameters(model="m", temperature=0.2, max_tokens=64, seed=7)

    assert params.to_request_fields() == {
        "model": "m",
        "temperature": 0.2,
        "max_tokens": 64,
        "seed": 7,
    }


@pytest.mark.parametrize("temperature", [-0.1, 2.5])
def test_model_parameters_reject_out_of_range_temperature(temperature: float) -> None:
    with pytest.raises(ValueError, match="temperature"):
        ModelParameters(model="m", temperature=temperature)


def test_model_parameters_reject_non_positive_max_tokens() -> None:
    with pytest.raises(ValueError, match="max_tokens"):
        ModelParameters(model="m", max_tokens=0)


def test_model_parameters_reject_empty_model() -> None:
    with pytest.raises(ValueError, match="model"):
        ModelParameters(model="")


def test_model_parameters_are_immutable() -> None:
    params = ModelParameters(model="m")

    with pytest.raises(AttributeError):
        params.model = "other"  # type: ignore[misc]


def test_payload_tags() -> None:
    assert TextPayload("hi").data_type is DataType.TEXT
    assert ImagePayload(b"\x89PNG").data_type is DataType.IMAGE


def test_model_request_messages() -> None:
    request = ModelRequest(prompt="p", content="p\n\nText to analyze: x", parameters=ModelParameters(model="m"))

    assert request.to_messages() == [{"role": "user", "content": "p\n\nText to analyze: x"}]
