"""Error message formatting for user-friendly exception handling."""

from pydantic import ValidationError as PydanticValidationError

from fieldcheck.validation.kinds import UnsupportedValueError
from fieldcheck.validation.results import ValidationErrors
from fieldcheck.validation.service import RequestDecodeError


def _format_pydantic_error(error: PydanticValidationError) -> str:
    """Format pydantic errors as one line per offending location."""
    lines = []
    for item in error.errors():
        location = ".".join(str(part) for part in item.get("loc", ())) or "value"
        lines.append(f"{location}: {item.get('msg', 'invalid')}")
    return "Invalid configuration:\n" + "\n".join(lines)


ERROR_TYPES = {
    ValidationErrors: lambda e: f"Validation failed: {e}",
    RequestDecodeError: lambda e: f"Failed to decode request: {e}",
    UnsupportedValueError: lambda e: f"Programming error: {e}",
    PydanticValidationError: _format_pydantic_error,
    ValueError: lambda e: str(e),
    KeyError: lambda e: f"Missing required field '{e.args[0] if e.args else e}'.",
    OSError: lambda e: f"System error: {e!s}",
}


def get_error_human_message(error: Exception) -> str:
    """
    Get user-friendly error message based on exception type.

    Args:
        error: The exception to format

    Returns:
        Formatted error message suitable for end users
    """
    for error_type, handler in ERROR_TYPES.items():
        if isinstance(error, error_type):
            return handler(error)
    return str(error)
