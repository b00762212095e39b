"""Service layer for decoding and validating self-validating records.

This module turns raw request bodies into typed records and runs their own
validation, so transports (HTTP handlers, CLI commands, queue consumers) can
check input in one place without knowing the concrete record type.
"""

from functools import lru_cache
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from fieldcheck.utils.logging import get_logger
from fieldcheck.validation.results import ValidationErrors, Validator

logger = get_logger(__name__)

R = TypeVar("R")


class RequestDecodeError(ValueError):
    """The request body could not be decoded into the record type."""


@lru_cache(maxsize=None)
def _adapter(record_type: type) -> TypeAdapter:
    return TypeAdapter(record_type)


def _is_self_validating(record: Any) -> bool:
    if not isinstance(record, Validator):
        return False
    if not isinstance(record, BaseModel):
        return True
    # pydantic models inherit a deprecated ``validate`` classmethod
    for klass in type(record).__mro__:
        if klass is BaseModel:
            return False
        if "validate" in vars(klass):
            return True
    return False


def validate_record(record: Any) -> ValidationErrors | None:
    """Run a record's own validation.

    Args:
        record: Any decoded record

    Returns:
        The record's report, or None when the record is not self-validating
    """
    if not _is_self_validating(record):
        return None
    return record.validate()


def decode_request(body: str | bytes, record_type: type[R]) -> R:
    """Decode a JSON body into ``record_type`` without validating it.

    Raises:
        RequestDecodeError: body is not valid JSON for ``record_type``
    """
    try:
        return _adapter(record_type).validate_json(body)
    except PydanticValidationError as e:
        logger.info("request_decode_failed", record_type=record_type.__name__, errors=e.error_count())
        raise RequestDecodeError("failed to parse request") from e


def parse_request(body: str | bytes, record_type: type[R]) -> R:
    """Decode a JSON body into ``record_type`` and validate it.

    Args:
        body: Raw JSON request body
        record_type: Dataclass, pydantic dataclass or model to decode into

    Returns:
        The decoded record, known to be valid if it is self-validating

    Raises:
        RequestDecodeError: body is not valid JSON for ``record_type``
        ValidationErrors: the record validated itself and failed
    """
    record = decode_request(body, record_type)
    report = validate_record(record)
    if report is not None and report.err() is not None:
        logger.info("request_rejected", record_type=record_type.__name__, fields=report.fields())
        raise report
    return record


def error_response(report: ValidationErrors) -> dict[str, dict[str, list[str]]]:
    """Body returned to clients when validation fails.

    The shape ``{"errors": {field: [message, ...]}}`` is a public contract.
    """
    return {"errors": report.to_dict()}
