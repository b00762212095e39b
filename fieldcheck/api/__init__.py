"""HTTP example for fieldcheck."""

from fieldcheck.api.app import app, create_app
from fieldcheck.api.models import SignupRequest

__all__ = ["app", "create_app", "SignupRequest"]
