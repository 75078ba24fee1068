"""
Utility functions for detabase commands.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import asyncio
import json
from collections.abc import Coroutine
from typing import Any, NoReturn, TypeVar

import click

from .constants import ENV_API_KEY, ENV_BASE_NAME, ENV_PROJECT_ID
from .exceptions import ConfigError
from .models import Options

T = TypeVar("T")


def build_options(project_id: str | None, base_name: str | None, api_key: str | None) -> Options:
    """
    Build connection options from CLI values.

    Args:
        project_id: Deta project id
        base_name: Base name
        api_key: Project API key

    Returns:
        Options instance

    Raises:
        ConfigError: If any value is missing or empty
    """
    missing = [
        f"--{flag} / ${env}"
        for flag, env, value in (
            ("project-id", ENV_PROJECT_ID, project_id),
            ("base-name", ENV_BASE_NAME, base_name),
            ("api-key", ENV_API_KEY, api_key),
        )
        if not value
    ]
    if missing:
        raise ConfigError(f"Missing configuration: {', '.join(missing)}")
    return Options(project_id=project_id, base_name=base_name, api_key=api_key)  # type: ignore[arg-type]


def run(coro: Coroutine[Any, Any, T]) -> T:
    """Run a client coroutine to completion from synchronous CLI code."""
    return asyncio.run(coro)


def parse_json(raw: str, name: str) -> Any:
    """
    Parse a JSON command-line argument.

    Args:
        raw: Raw argument text
        name: Argument name for the error message

    Returns:
        Decoded JSON value

    Raises:
        click.BadParameter: If the text is not valid JSON
    """
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"invalid JSON: {e}", param_hint=name) from e


def parse_value(raw: str) -> Any:
    """
    Parse a KV value argument.

    Valid JSON is decoded; anything else is stored as a plain string so
    ``kv set greeting hello`` works without quoting.
    """
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def output_json(data: Any, quiet: bool = False) -> None:
    """
    Output JSON to stdout.

    Args:
        data: Data to output as JSON
        quiet: If True, suppress output
    """
    if not quiet:
        print(json.dumps(data))


def output_text(message: str, quiet: bool = False) -> None:
    """
    Output text to stdout.

    Args:
        message: Message to output
        quiet: If True, suppress output
    """
    if not quiet:
        print(message)


def error_json(error: str, solution: str, exit_code: int) -> dict[str, Any]:
    """
    Format error as JSON.

    Args:
        error: Error message
        solution: Solution suggestion
        exit_code: Exit code

    Returns:
        Error dictionary
    """
    return {"error": error, "solution": solution, "exit_code": exit_code}


def error_text(error: str, solution: str) -> str:
    """
    Format error as human-readable text.

    Args:
        error: Error message
        solution: Solution suggestion

    Returns:
        Formatted error message
    """
    return f"❌ Error: {error}\n\n💡 Solution: {solution}"


def report_error(
    ctx: click.Context, error: str, solution: str, exit_code: int, text_format: bool = False
) -> NoReturn:
    """
    Write an error to stderr and exit.

    Args:
        ctx: Click context
        error: Error message
        solution: Solution suggestion
        exit_code: Exit code
        text_format: If True, output as text; otherwise JSON
    """
    if text_format:
        click.echo(error_text(error, solution), err=True)
    else:
        click.echo(json.dumps(error_json(error, solution, exit_code)), err=True)
    ctx.exit(exit_code)
