"""Value kinds used to decide what "empty" means for a value."""

import dataclasses
import inspect
import types
from collections.abc import Iterator, Mapping, Sequence, Set, Sized
from datetime import date, time, timedelta
from enum import Enum
from numbers import Number
from uuid import UUID

from pydantic import BaseModel


class ValueKind(str, Enum):
    """Closed set of kinds the emptiness test knows about."""

    NIL = "nil"                  # None
    CONTAINER = "container"      # sized collections, strings and bytes
    SCALAR = "scalar"            # numbers, timestamps, enums, uuids
    RECORD = "record"            # dataclasses and pydantic models
    REFERENCE = "reference"      # any other object, never empty
    UNSUPPORTED = "unsupported"  # callables, classes, iterators, ...


class UnsupportedValueError(TypeError):
    """Raised when a value has no defined emptiness rule.

    Passing such a value to ``not_empty``/``empty`` is a programming error
    in the caller, so it is raised rather than reported as a field error.
    """

    def __init__(self, value: object):
        self.value = value
        super().__init__(
            f"cannot test emptiness of a value of type {type(value).__name__!r}"
        )


_SCALAR_TYPES = (Number, date, time, timedelta, Enum, UUID)


def kind_of(value: object) -> ValueKind:
    """Classify ``value`` for the emptiness test.

    Order matters: an ``IntEnum`` member is both a number and an enum, a
    ``str`` is both a sequence and a scalar, and a class object is callable.
    """
    if value is None:
        return ValueKind.NIL
    if isinstance(value, type) or isinstance(value, types.ModuleType):
        return ValueKind.UNSUPPORTED
    if isinstance(value, _SCALAR_TYPES):
        return ValueKind.SCALAR
    if isinstance(value, (str, bytes, bytearray, Sequence, Mapping, Set)):
        return ValueKind.CONTAINER
    if isinstance(value, BaseModel) or dataclasses.is_dataclass(value):
        return ValueKind.RECORD
    if (
        callable(value)
        or isinstance(value, Iterator)
        or inspect.isgenerator(value)
        or inspect.iscoroutine(value)
        or inspect.isasyncgen(value)
    ):
        return ValueKind.UNSUPPORTED
    if isinstance(value, Sized):
        return ValueKind.CONTAINER
    return ValueKind.REFERENCE
