"""Reusable field checks.

Every constructor in this module captures the value(s) to test and returns a
zero-argument ``Check``. Evaluating the check returns ``None`` when the value
is acceptable, or a human-readable failure message when it is not::

    check = str_length(name, 1, 20)
    message = check()  # None or "value must be between 1 and 20 characters"

Checks are pure: they hold no shared state and never touch I/O, so they can
be built once and evaluated any number of times.
"""

import binascii
import dataclasses
import math
import re
from collections.abc import Callable
from datetime import UTC, date, datetime, time, timedelta
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Any, TypeVar
from uuid import UUID

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel

from fieldcheck.const import (
    INT64_MAX,
    INT64_MIN,
    MSG_ANY_OF,
    MSG_BETWEEN,
    MSG_DATE_AFTER,
    MSG_DATE_BEFORE,
    MSG_DATE_EQUAL,
    MSG_EMAIL,
    MSG_EMPTY,
    MSG_EQUAL,
    MSG_EXACT_LENGTH,
    MSG_HAS_PREFIX,
    MSG_HEX,
    MSG_IS_NUMERIC,
    MSG_LENGTH,
    MSG_MAX,
    MSG_MIN,
    MSG_NO_PREFIX,
    MSG_NOT_EMPTY,
    MSG_POSITIVE,
    MSG_REGEX,
    MSG_UK_POST_CODE,
    MSG_US_ZIP_CODE,
)
from fieldcheck.validation.kinds import ValueKind, UnsupportedValueError, kind_of

Check = Callable[[], str | None]

# Numeric checks accept any of these, but both operands must share a type.
Num = TypeVar("Num", int, float, Decimal, Fraction)
T = TypeVar("T")

RE_UK_POST_CODE = re.compile(r"[a-zA-Z]{1,2}\d[a-zA-Z\d]?\s*\d[a-zA-Z]{2}", re.ASCII)
RE_US_ZIP_CODE = re.compile(r"\d{5}(?:-\d{4})?", re.ASCII)
RE_INTEGER = re.compile(r"[+-]?[0-9]+")

# Joe Bloggs <joe@example.com> or "Bloggs, Joe" <joe@example.com>
RE_NAME_ADDR = re.compile(r'\s*(?:"(?:[^"\\]|\\.)*"|[^<>"]*?)\s*<([^<>]*)>\s*')


def format_value(value: Any) -> str:
    """Render a value for a failure message.

    Booleans are lower case and ``None`` is ``<nil>`` so messages read the
    same no matter which client produced the input.
    """
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


# ── Length ──


def str_length(val: str, minimum: int, maximum: int) -> Check:
    """Ensure ``val`` has at least ``minimum`` and at most ``maximum`` characters."""

    def check() -> str | None:
        if minimum <= len(val) <= maximum:
            return None
        return MSG_LENGTH.format(minimum, maximum)

    return check


def str_length_exact(val: str, length: int) -> Check:
    """Ensure ``val`` is exactly ``length`` characters long."""

    def check() -> str | None:
        if len(val) == length:
            return None
        return MSG_EXACT_LENGTH.format(length)

    return check


# ── Numbers ──


def min_number(val: Num, minimum: Num) -> Check:
    """Ensure ``val`` is at least ``minimum``."""

    def check() -> str | None:
        if val >= minimum:
            return None
        return MSG_MIN.format(format_value(val), format_value(minimum))

    return check


def max_number(val: Num, maximum: Num) -> Check:
    """Ensure ``val`` is at most ``maximum``."""

    def check() -> str | None:
        if val <= maximum:
            return None
        return MSG_MAX.format(format_value(val), format_value(maximum))

    return check


def between_number(val: Num, minimum: Num, maximum: Num) -> Check:
    """Ensure ``minimum <= val <= maximum``."""

    def check() -> str | None:
        if minimum <= val <= maximum:
            return None
        return MSG_BETWEEN.format(
            format_value(val), format_value(minimum), format_value(maximum)
        )

    return check


def positive_number(val: Num) -> Check:
    """Ensure ``val`` is strictly greater than zero."""

    def check() -> str | None:
        if val > 0:
            return None
        return MSG_POSITIVE.format(format_value(val))

    return check


# ── Patterns ──


def match_string(val: str, pattern: re.Pattern[str] | str) -> Check:
    """Check that ``pattern`` matches somewhere in ``val``.

    Anchor the pattern (``^...$``) to require a whole-value match.
    """
    regex = re.compile(pattern) if isinstance(pattern, str) else pattern

    def check() -> str | None:
        if regex.search(val):
            return None
        return MSG_REGEX.format(format_value(val))

    return check


def match_bytes(val: bytes, pattern: re.Pattern[bytes] | bytes) -> Check:
    """Byte-string counterpart of :func:`match_string`."""
    regex = re.compile(pattern) if isinstance(pattern, bytes) else pattern

    def check() -> str | None:
        if regex.search(val):
            return None
        return MSG_REGEX.format(format_value(val))

    return check


# ── Equality ──


def equal(val: T, expected: T) -> Check:
    """Ensure ``val == expected``."""

    def check() -> str | None:
        if val == expected:
            return None
        return MSG_EQUAL.format(format_value(val), format_value(expected))

    return check


def any_of(val: T, *allowed: T) -> Check:
    """Ensure ``val`` equals one of ``allowed``."""

    def check() -> str | None:
        for candidate in allowed:
            if val == candidate:
                return None
        return MSG_ANY_OF

    return check


any_string = any_of


# ── Dates ──


def _comparable(val: datetime, expected: datetime) -> tuple[datetime, datetime]:
    """Read a naive datetime as UTC when the other side is aware."""
    if not isinstance(val, datetime) or not isinstance(expected, datetime):
        return val, expected
    if (val.tzinfo is None) != (expected.tzinfo is None):
        if val.tzinfo is None:
            val = val.replace(tzinfo=UTC)
        else:
            expected = expected.replace(tzinfo=UTC)
    return val, expected


def date_equal(val: datetime, expected: datetime) -> Check:
    """Ensure ``val`` is the same instant as ``expected``.

    Aware datetimes in different zones compare equal when they describe
    the same moment. A naive datetime compared with an aware one is read
    as UTC.
    """

    def check() -> str | None:
        left, right = _comparable(val, expected)
        if left == right:
            return None
        return MSG_DATE_EQUAL.format(val, expected)

    return check


def date_after(val: datetime, expected: datetime) -> Check:
    """Ensure ``val`` occurs strictly after ``expected``."""

    def check() -> str | None:
        left, right = _comparable(val, expected)
        if left > right:
            return None
        return MSG_DATE_AFTER.format(val, expected)

    return check


def date_before(val: datetime, expected: datetime) -> Check:
    """Ensure ``val`` occurs strictly before ``expected``."""

    def check() -> str | None:
        left, right = _comparable(val, expected)
        if left < right:
            return None
        return MSG_DATE_BEFORE.format(val, expected)

    return check


# ── Emptiness ──


def is_empty_value(value: Any) -> bool:
    """Return True when ``value`` is empty by the rules of its kind.

    Raises:
        UnsupportedValueError: ``value`` has no emptiness rule (a function,
            class, iterator, generator, ...). This is a usage bug in the
            caller, not a validation failure.
    """
    kind = kind_of(value)
    if kind is ValueKind.NIL:
        return True
    if kind is ValueKind.CONTAINER:
        return len(value) == 0
    if kind is ValueKind.SCALAR:
        return _is_zero_scalar(value)
    if kind is ValueKind.RECORD:
        return all(_is_empty_field(v) for v in _record_values(value))
    if kind is ValueKind.REFERENCE:
        return False
    raise UnsupportedValueError(value)


def _is_zero_scalar(value: Any) -> bool:
    if isinstance(value, Enum):
        return is_empty_value(value.value)
    if isinstance(value, datetime):
        return value.replace(tzinfo=None) == datetime.min
    if isinstance(value, date):
        return value == date.min
    if isinstance(value, time):
        return value.replace(tzinfo=None) == time.min
    if isinstance(value, timedelta):
        return value == timedelta(0)
    if isinstance(value, UUID):
        return value.int == 0
    if isinstance(value, float):
        # -0.0 has a sign bit set, so it is not the zero value
        return value == 0 and math.copysign(1.0, value) > 0
    return value == 0


def _is_empty_field(value: Any) -> bool:
    # callables and iterators held by a record count as set
    if kind_of(value) is ValueKind.UNSUPPORTED:
        return False
    return is_empty_value(value)


def _record_values(record: Any) -> list[Any]:
    if isinstance(record, BaseModel):
        return [getattr(record, name) for name in type(record).model_fields]
    return [getattr(record, f.name) for f in dataclasses.fields(record)]


def not_empty(val: Any) -> Check:
    """Ensure ``val`` is not empty.

    Rules:
        None: empty
        str/bytes/list/tuple/dict/set and other sized collections: len == 0
        numbers: == 0 (negative numbers and -0.0 are not empty)
        datetime/date: equal to ``datetime.min``/``date.min``
        dataclasses and pydantic models: every field is empty, where a
            callable or iterator field is never empty
        any other object: never empty
    """

    def check() -> str | None:
        if is_empty_value(val):
            return MSG_EMPTY
        return None

    return check


def empty(val: Any) -> Check:
    """Ensure ``val`` is empty. The exact negation of :func:`not_empty`."""

    def check() -> str | None:
        if not_empty(val)() is None:
            return MSG_NOT_EMPTY
        return None

    return check


# ── Strings ──


def is_numeric(val: str) -> Check:
    """Pass when ``val`` is a base-10 integer that fits in 64 bits."""

    def check() -> str | None:
        if RE_INTEGER.fullmatch(val) and INT64_MIN <= int(val) <= INT64_MAX:
            return None
        return MSG_IS_NUMERIC.format(val)

    return check


def uk_post_code(val: str) -> Check:
    """Validate the shape of a UK postcode. It does not check the postcode exists."""

    def check() -> str | None:
        if RE_UK_POST_CODE.fullmatch(val):
            return None
        return MSG_UK_POST_CODE.format(val)

    return check


def us_zip_code(val: str) -> Check:
    """Validate the shape of a US zip code (``12345`` or ``12345-6789``)."""

    def check() -> str | None:
        if RE_US_ZIP_CODE.fullmatch(val):
            return None
        return MSG_US_ZIP_CODE.format(val)

    return check


def has_prefix(val: str, prefix: str) -> Check:
    def check() -> str | None:
        if val.startswith(prefix):
            return None
        return MSG_HAS_PREFIX

    return check


def no_prefix(val: str, prefix: str) -> Check:
    def check() -> str | None:
        if val.startswith(prefix):
            return MSG_NO_PREFIX
        return None

    return check


def is_hex(val: str) -> Check:
    """Pass when ``val`` decodes as hexadecimal. The empty string is valid hex."""

    def check() -> str | None:
        try:
            binascii.unhexlify(val)
        except ValueError:
            return MSG_HEX
        return None

    return check


def email(val: str) -> Check:
    """Check ``val`` is a syntactically valid mailbox.

    Accepts a bare address (``joe@example.com``) or one with a display name
    (``Joe <joe@example.com>``). A top level domain is not required and the
    address is never looked up.
    """

    def check() -> str | None:
        match = RE_NAME_ADDR.fullmatch(val)
        addr = match.group(1) if match else val.strip()
        try:
            validate_email(addr, check_deliverability=False, globally_deliverable=False)
        except EmailNotValidError:
            return MSG_EMAIL
        return None

    return check


__all__ = [
    "Check",
    "format_value",
    "str_length",
    "str_length_exact",
    "min_number",
    "max_number",
    "between_number",
    "positive_number",
    "match_string",
    "match_bytes",
    "equal",
    "any_of",
    "any_string",
    "date_equal",
    "date_after",
    "date_before",
    "is_empty_value",
    "not_empty",
    "empty",
    "is_numeric",
    "uk_post_code",
    "us_zip_code",
    "has_prefix",
    "no_prefix",
    "is_hex",
    "email",
]
