"""
Options and error reporting shared by detabase commands.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import json
from typing import Any, NoReturn

import click
import httpx

from ..constants import (
    ENV_API_KEY,
    ENV_BASE_NAME,
    ENV_PROJECT_ID,
    EXIT_NOT_FOUND,
    EXIT_SERVICE_ERROR,
    EXIT_USAGE,
    STATUS_NOT_FOUND,
)
from ..exceptions import ConfigError, DetabaseError
from ..utils import report_error

# Everything an operation may raise that a command reports instead of crashing
FAILURES = (ConfigError, DetabaseError, httpx.HTTPError, json.JSONDecodeError)


def connection_options(func: Any) -> Any:
    """Attach the connection and output options every command takes."""
    func = click.option(
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity (-v INFO, -vv DEBUG, -vvv TRACE)",
    )(func)
    func = click.option("--text", is_flag=True, help="Output as human-readable text")(func)
    func = click.option("--api-key", envvar=ENV_API_KEY, help="Deta project API key")(func)
    func = click.option("--base-name", envvar=ENV_BASE_NAME, help="Deta Base name")(func)
    func = click.option("--project-id", envvar=ENV_PROJECT_ID, help="Deta project id")(func)
    return func


def fail(ctx: click.Context, error: Exception, text: bool) -> NoReturn:
    """
    Report a failed operation and exit.

    Exit codes:
    - 1: Key not found (404)
    - 2: Missing configuration
    - 3: Service error, transport error or undecodable response
    """
    if isinstance(error, ConfigError):
        report_error(
            ctx, str(error), "Pass the option or set the environment variable", EXIT_USAGE, text
        )
    elif isinstance(error, DetabaseError) and error.status_code == STATUS_NOT_FOUND:
        report_error(ctx, str(error), "Check the key exists", EXIT_NOT_FOUND, text)
    elif isinstance(error, DetabaseError):
        report_error(ctx, str(error), "Check the request and the API key", EXIT_SERVICE_ERROR, text)
    elif isinstance(error, httpx.HTTPError):
        report_error(
            ctx, f"Request failed: {error}", "Check network connectivity", EXIT_SERVICE_ERROR, text
        )
    else:
        report_error(ctx, f"Invalid response: {error}", "Retry later", EXIT_SERVICE_ERROR, text)


def transport_from(ctx: click.Context) -> httpx.AsyncBaseTransport | None:
    """Transport injected through ``ctx.obj`` (tests), else httpx's default."""
    obj = ctx.find_root().obj
    if isinstance(obj, dict):
        return obj.get("transport")
    return None
