"""fieldcheck - composable field validation."""

__version__ = "2.0.0"
