"""Tests for user-facing error messages."""

import pytest
from pydantic import BaseModel, ValidationError

from fieldcheck.error_details import get_error_human_message
from fieldcheck.validation import RequestDecodeError, UnsupportedValueError, ValidationErrors


class Port(BaseModel):
    port: int


def test_validation_errors():
    report = ValidationErrors({"name": ["value cannot be empty"]})
    assert get_error_human_message(report) == "Validation failed: [name: value cannot be empty]"


def test_decode_error_before_value_error():
    error = RequestDecodeError("failed to parse request")
    assert get_error_human_message(error) == "Failed to decode request: failed to parse request"


def test_unsupported_value():
    message = get_error_human_message(UnsupportedValueError(len))
    assert message.startswith("Programming error: cannot test emptiness")


def test_pydantic_error():
    with pytest.raises(ValidationError) as exc_info:
        Port(port="many")

    message = get_error_human_message(exc_info.value)
    assert message.startswith("Invalid configuration:\nport: ")


def test_key_error():
    assert get_error_human_message(KeyError("name")) == "Missing required field 'name'."


def test_unknown_error_falls_back_to_str():
    assert get_error_human_message(RuntimeError("boom")) == "boom"
