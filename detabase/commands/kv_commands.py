"""
Key-value commands for detabase.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import json
from typing import Any

import click

from ..constants import EXIT_NOT_FOUND
from ..core.kv import DetabaseKV
from ..logging_config import get_logger, setup_logging
from ..utils import build_options, output_json, output_text, parse_value, run
from .common import FAILURES, connection_options, fail, transport_from

logger = get_logger(__name__)


def _kv(
    ctx: click.Context, project_id: str | None, base_name: str | None, api_key: str | None
) -> DetabaseKV[Any]:
    options = build_options(project_id, base_name, api_key)
    return DetabaseKV(options, transport=transport_from(ctx))


@click.command("set")
@click.argument("key")
@click.argument("value")
@connection_options
@click.pass_context
def set_command(
    ctx: click.Context,
    key: str,
    value: str,
    project_id: str | None,
    base_name: str | None,
    api_key: str | None,
    text: bool,
    verbose: int,
) -> None:
    """Store a value under a key.

    VALUE is decoded as JSON when possible, otherwise stored as a string.

    Examples:

    \b
        # Store a string
        detabase kv set greeting hello

    \b
        # Store structured data
        detabase kv set config '{"retries": 3, "tags": ["a", "b"]}'

    \b
    Output Format:
        {"key": "greeting", "value": "hello"}
    """
    setup_logging(verbose)
    decoded = parse_value(value)

    try:
        logger.info(f"Setting key '{key}'")
        run(_kv(ctx, project_id, base_name, api_key).set(key, decoded))
    except FAILURES as e:
        fail(ctx, e, text)

    if text:
        output_text(f"✅ Set {key} = {json.dumps(decoded)}")
    else:
        output_json({"key": key, "value": decoded})


@click.command("get")
@click.argument("key")
@click.option("--default", help="Value to print if the key does not exist (decoded as JSON)")
@connection_options
@click.pass_context
def get_command(
    ctx: click.Context,
    key: str,
    default: str | None,
    project_id: str | None,
    base_name: str | None,
    api_key: str | None,
    text: bool,
    verbose: int,
) -> None:
    """Retrieve the value for a key.

    Exits with code 1 if the key does not exist and no --default is given.

    Examples:

    \b
        detabase kv get greeting

    \b
        detabase kv get greeting --default '"hi"'

    \b
    Output Format:
        {"key": "greeting", "value": "hello"}
    """
    setup_logging(verbose)

    try:
        logger.info(f"Getting key '{key}'")
        value = run(_kv(ctx, project_id, base_name, api_key).get(key))
    except FAILURES as e:
        fail(ctx, e, text)

    result: dict[str, Any] = {"key": key, "value": value}
    if value is None:
        if default is None:
            logger.info(f"Key '{key}' not found")
            if text:
                output_text(f"❌ Key '{key}' not found")
            else:
                output_json(result)
            ctx.exit(EXIT_NOT_FOUND)
        result = {"key": key, "value": parse_value(default), "default": True}

    if text:
        suffix = " (default)" if result.get("default") else ""
        output_text(f"{key} = {json.dumps(result['value'])}{suffix}")
    else:
        output_json(result)


@click.command("delete")
@click.argument("key")
@connection_options
@click.pass_context
def delete_command(
    ctx: click.Context,
    key: str,
    project_id: str | None,
    base_name: str | None,
    api_key: str | None,
    text: bool,
    verbose: int,
) -> None:
    """Delete a key. Succeeds whether or not the key exists.

    \b
    Output Format:
        {"key": "greeting", "deleted": true}
    """
    setup_logging(verbose)

    try:
        logger.info(f"Deleting key '{key}'")
        run(_kv(ctx, project_id, base_name, api_key).delete(key))
    except FAILURES as e:
        fail(ctx, e, text)

    if text:
        output_text(f"✅ Deleted {key}")
    else:
        output_json({"key": key, "deleted": True})
