"""Validation report types.

This module defines the report that collects check failures per field. The
report is an exception, so a failed validation pass can be raised and handled
with ordinary ``try``/``except`` by calling code.
"""

from collections.abc import Iterable, Iterator
from typing import Protocol, runtime_checkable

from fieldcheck.const import NO_VALIDATION_ERRORS
from fieldcheck.validation.checks import Check


class ValidationErrors(Exception):
    """Field name to failure messages, built up by chained ``validate`` calls.

    Usage:
        report = (
            ValidationErrors()
            .validate("name", str_length(name, 4, 10))
            .validate("count", positive_number(count))
        )
        if not report.is_valid():
            raise report

    A field is only present once at least one of its checks has failed.
    """

    def __init__(self, errors: dict[str, list[str]] | None = None):
        super().__init__()
        self.errors: dict[str, list[str]] = dict(errors) if errors else {}

    def validate(self, field: str, *checks: Check) -> "ValidationErrors":
        """Evaluate ``checks`` in order and record their failures under ``field``.

        Failures replace any list previously stored for ``field``. A field
        whose checks all pass is left untouched.

        Args:
            field: Name the failures are reported under
            *checks: Checks built by ``fieldcheck.validation.checks``

        Returns:
            This report, so calls can be chained
        """
        failures = [msg for msg in (check() for check in checks) if msg is not None]
        if failures:
            self.errors[field] = failures
        return self

    def is_valid(self) -> bool:
        """True when no field has failed."""
        return len(self.errors) == 0

    def err(self) -> "ValidationErrors | None":
        """Return this report if it holds failures, otherwise None."""
        if self.is_valid():
            return None
        return self

    def to_dict(self) -> dict[str, list[str]]:
        """Copy of the report as plain JSON-serializable data, keys sorted."""
        return {field: list(self.errors[field]) for field in self.fields()}

    def fields(self) -> list[str]:
        return sorted(self.errors)

    def __getitem__(self, field: str) -> list[str]:
        return self.errors[field]

    def __contains__(self, field: object) -> bool:
        return field in self.errors

    def __iter__(self) -> Iterator[str]:
        return iter(self.errors)

    def __str__(self) -> str:
        if self.is_valid():
            return NO_VALIDATION_ERRORS
        return ", ".join(
            f"[{field}: {', '.join(self.errors[field])}]" for field in self.fields()
        )

    def __repr__(self) -> str:
        return f"ValidationErrors({self.errors!r})"


def new() -> ValidationErrors:
    """Create an empty report ready for chained ``validate`` calls."""
    return ValidationErrors()


def new_single_error(field: str, errors: Iterable[str]) -> ValidationErrors:
    """Wrap an existing list of messages under a single field.

    The list is stored as given, even when it is empty. An empty list still
    creates the field, so the resulting report is not valid.
    """
    return ValidationErrors({field: list(errors)})


def new_from_error(field: str, error: BaseException | str | None) -> ValidationErrors | None:
    """Wrap an error produced elsewhere under ``field``.

    Returns None, not an empty report, when there is no error.
    """
    if error is None:
        return None
    return ValidationErrors({field: [str(error)]})


@runtime_checkable
class Validator(Protocol):
    """A record that knows how to validate its own fields."""

    def validate(self) -> ValidationErrors:
        ...
