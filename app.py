#!/usr/bin/env python3

import sys

import click
from dotenv import load_dotenv

from fieldcheck.api.models import SignupRequest
from fieldcheck.config import get_settings
from fieldcheck.error_details import get_error_human_message
from fieldcheck.utils.logging import get_logger, setup_logging
from fieldcheck.validation import RequestDecodeError, ValidationErrors, parse_request
from fieldcheck.validation.checks import min_number, str_length

logger = get_logger(__name__)


@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx) -> None:
    """fieldcheck - composable field validation"""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.option("--name", default="", help="name of a thing")
@click.option(
    "--total",
    type=int,
    default=0,
    help="an amount of something or other, who knows",
)
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Exit with status 1 when validation fails "
    "(default: FIELDCHECK_STRICT, otherwise report and carry on)",
)
@click.pass_context
def check(ctx, name, total, strict) -> None:
    """Validate command line values and report any problems"""
    if strict is None:
        strict = get_settings().cli.strict

    report = (
        ValidationErrors()
        .validate("name", str_length(name, 1, 20))
        .validate("amount", min_number(total, 10))
    )
    if report.err() is not None:
        click.echo(str(report))
        click.echo(ctx.get_help())
        if strict:
            ctx.exit(1)
        logger.warning("continuing_with_invalid_input", fields=report.fields())
    click.echo("all valid, nice")


@cli.command(name="validate-json")
@click.argument("source", type=click.File("rb"), default="-")
def validate_json(source) -> None:
    """Decode a signup request from SOURCE (a file or - for stdin) and validate it"""
    try:
        parse_request(source.read(), SignupRequest)
    except (ValidationErrors, RequestDecodeError) as e:
        click.echo(get_error_human_message(e), err=True)
        sys.exit(1)
    click.echo("all valid, nice")


@cli.command()
@click.option("--host", default=None, help="Interface to bind (default: FIELDCHECK_HOST)")
@click.option("--port", type=int, default=None, help="Port to listen on (default: FIELDCHECK_PORT)")
def serve(host, port) -> None:
    """Run the HTTP example server"""
    import uvicorn

    settings = get_settings().server
    host = host or settings.host
    port = port or settings.port

    logger.info("server_config", host=host, port=port)
    try:
        uvicorn.run(
            "fieldcheck.api:app",
            host=host,
            port=port,
            log_config=None,
        )
    except OSError as e:
        click.echo(get_error_human_message(e), err=True)
        sys.exit(1)


def main() -> None:
    load_dotenv()
    setup_logging()
    cli()


if __name__ == "__main__":
    main()
