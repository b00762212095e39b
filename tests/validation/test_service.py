"""Tests for request decoding and record validation."""

import json
from dataclasses import dataclass

import pytest
from pydantic import BaseModel

from fieldcheck.api.models import SignupRequest
from fieldcheck.validation import (
    RequestDecodeError,
    ValidationErrors,
    decode_request,
    error_response,
    parse_request,
    validate_record,
)
from fieldcheck.validation.checks import str_length

VALID_BODY = json.dumps(
    {"name": "My Name", "dob": "2000-10-12T00:00:00Z", "isEnabled": False, "count": 1}
)
INVALID_BODY = json.dumps(
    {"name": "My Name", "dob": "2000-10-12T00:00:00Z", "isEnabled": True, "count": 0}
)


@dataclass
class Note:
    """Record without its own validation."""

    text: str = ""


@dataclass
class Title:
    text: str = ""

    def validate(self) -> ValidationErrors:
        return ValidationErrors().validate("text", str_length(self.text, 1, 5))


class Plain(BaseModel):
    text: str = ""


class TestParseRequest:
    """Tests for parse_request."""

    def test_valid_request(self):
        record = parse_request(VALID_BODY, SignupRequest)

        assert isinstance(record, SignupRequest)
        assert record.name == "My Name"
        assert record.count == 1
        assert record.is_enabled is False

    def test_accepts_bytes(self):
        record = parse_request(VALID_BODY.encode(), SignupRequest)
        assert record.name == "My Name"

    def test_invalid_request_raises_report(self):
        with pytest.raises(ValidationErrors) as exc_info:
            parse_request(INVALID_BODY, SignupRequest)

        assert exc_info.value.to_dict() == {
            "count": ["value 0 should be greater than 0"],
            "isEnabled": ["value true does not evaluate to false"],
        }

    def test_missing_fields_decode_to_zero_values(self):
        with pytest.raises(ValidationErrors) as exc_info:
            parse_request("{}", SignupRequest)

        report = exc_info.value
        assert report.fields() == ["count", "dob", "name"]
        assert report["dob"] == ["value cannot be empty"]

    def test_naive_dob_is_treated_as_utc(self):
        body = json.dumps({"name": "My Name", "dob": "2000-10-12T00:00:00", "count": 1})
        record = parse_request(body, SignupRequest)

        assert record.dob.tzinfo is not None

    def test_too_young(self):
        body = json.dumps({"name": "My Name", "dob": "2099-01-01T00:00:00Z", "count": 1})

        with pytest.raises(ValidationErrors) as exc_info:
            parse_request(body, SignupRequest)

        assert exc_info.value.fields() == ["dob"]
        assert exc_info.value["dob"][0].startswith("the date provided 2099-01-01 00:00:00+00:00, must be before")

    @pytest.mark.parametrize(
        "body",
        ["not json", "{", json.dumps({"count": "many"})],
        ids=["garbage", "truncated", "wrong_type"],
    )
    def test_undecodable_body(self, body):
        with pytest.raises(RequestDecodeError):
            parse_request(body, SignupRequest)

    def test_record_without_validation_is_returned(self):
        record = parse_request('{"text": ""}', Note)
        assert record == Note(text="")

    def test_plain_dataclass_with_validate(self):
        with pytest.raises(ValidationErrors) as exc_info:
            parse_request('{"text": "too long"}', Title)

        assert exc_info.value["text"] == ["value must be between 1 and 5 characters"]


class TestDecodeRequest:
    """Tests for decode_request."""

    def test_does_not_validate(self):
        record = decode_request(INVALID_BODY, SignupRequest)

        assert record.count == 0
        assert record.is_enabled is True


class TestValidateRecord:
    """Tests for validate_record."""

    def test_self_validating_record(self):
        report = validate_record(Title(text="ok"))
        assert report is not None
        assert report.is_valid()

    def test_not_self_validating(self):
        assert validate_record(Note()) is None

    def test_pydantic_model_without_validate(self):
        assert validate_record(Plain()) is None


class TestErrorResponse:
    """Tests for the error body."""

    def test_shape(self):
        report = ValidationErrors({"isEnabled": ["value true does not evaluate to false"], "count": ["value 0 should be greater than 0"]})

        body = error_response(report)

        assert json.dumps(body, separators=(",", ":")) == (
            '{"errors":{"count":["value 0 should be greater than 0"],'
            '"isEnabled":["value true does not evaluate to false"]}}'
        )
