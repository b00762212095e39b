"""HTTP example that validates JSON request bodies.

``POST /`` decodes the body into a self-validating record and lets
``parse_request`` run its checks. ``POST /inline`` does the same checks
inline in the handler. Either way a failed validation is answered with
status 400 and ``{"errors": {field: [message, ...]}}``.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from fieldcheck import __version__
from fieldcheck.api.models import MINIMUM_AGE_YEARS, SignupRequest, years_ago
from fieldcheck.utils.logging import get_logger
from fieldcheck.validation import (
    RequestDecodeError,
    ValidationErrors,
    decode_request,
    error_response,
    parse_request,
)
from fieldcheck.validation.checks import (
    date_before,
    equal,
    not_empty,
    positive_number,
    str_length,
)

logger = get_logger(__name__)

JSON_CONTENT_TYPE = "application/json"


def create_app() -> FastAPI:
    """Build the example application with its error handlers and routes."""
    app = FastAPI(
        title="fieldcheck",
        description="Example service rejecting invalid signup requests",
        version=__version__,
    )

    # ── Exception Handlers ──

    @app.exception_handler(ValidationErrors)
    async def validation_errors_handler(request: Request, exc: ValidationErrors):
        """Reject the request with the per-field report."""
        logger.info("request_invalid", path=request.url.path, fields=exc.fields())
        return JSONResponse(status_code=400, content=error_response(exc))

    @app.exception_handler(RequestDecodeError)
    async def decode_error_handler(request: Request, exc: RequestDecodeError):
        logger.warning("request_undecodable", path=request.url.path, error=str(exc))
        return PlainTextResponse(
            f"Failed to decode request: {exc}",
            status_code=500,
            media_type=JSON_CONTENT_TYPE,
        )

    # ── Routes ──

    @app.post("/")
    async def signup(request: Request) -> Response:
        """Validate through the record's own ``validate`` method."""
        parse_request(await request.body(), SignupRequest)
        return Response(status_code=200, media_type=JSON_CONTENT_TYPE)

    @app.post("/inline")
    async def signup_inline(request: Request) -> Response:
        """Validate with checks written out in the handler."""
        req = decode_request(await request.body(), SignupRequest)
        report = (
            ValidationErrors()
            .validate("name", str_length(req.name, 4, 10))
            .validate(
                "dob",
                not_empty(req.dob),
                date_before(req.dob, years_ago(MINIMUM_AGE_YEARS)),
            )
            .validate("isEnabled", equal(req.is_enabled, False))
            .validate("count", positive_number(req.count))
        )
        if report.err() is not None:
            raise report
        return Response(status_code=200, media_type=JSON_CONTENT_TYPE)

    return app


app = create_app()
