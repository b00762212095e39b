"""Field validation for application boundaries.

Checks are small deferred predicates; a ValidationErrors report collects
their failures per field:

    from fieldcheck.validation import ValidationErrors, checks

    report = (
        ValidationErrors()
        .validate("name", checks.str_length(name, 1, 20))
        .validate("amount", checks.min_number(total, 10))
    )
    if not report.is_valid():
        print(report)
"""

from fieldcheck.validation import checks
from fieldcheck.validation.kinds import UnsupportedValueError, ValueKind
from fieldcheck.validation.results import (
    ValidationErrors,
    Validator,
    new,
    new_from_error,
    new_single_error,
)
from fieldcheck.validation.service import (
    RequestDecodeError,
    decode_request,
    error_response,
    parse_request,
    validate_record,
)

__all__ = [
    "checks",
    "UnsupportedValueError",
    "ValueKind",
    "ValidationErrors",
    "Validator",
    "new",
    "new_from_error",
    "new_single_error",
    "RequestDecodeError",
    "decode_request",
    "error_response",
    "parse_request",
    "validate_record",
]
