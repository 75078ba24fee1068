"""
Item commands for detabase.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import json
from typing import Any

import click

from ..core.client import Detabase
from ..logging_config import get_logger, setup_logging
from ..models import ListQuery, UpdateQuery
from ..utils import build_options, output_json, output_text, parse_json, run
from .common import FAILURES, connection_options, fail, transport_from

logger = get_logger(__name__)


def _client(
    ctx: click.Context, project_id: str | None, base_name: str | None, api_key: str | None
) -> Detabase[Any]:
    options = build_options(project_id, base_name, api_key)
    return Detabase(options, transport=transport_from(ctx))


@click.command("put")
@click.argument("items_json")
@connection_options
@click.pass_context
def put_command(
    ctx: click.Context,
    items_json: str,
    project_id: str | None,
    base_name: str | None,
    api_key: str | None,
    text: bool,
    verbose: int,
) -> None:
    """Store up to 25 items in one request, overwriting existing keys.

    ITEMS_JSON is a JSON array of objects, or a single object.

    Examples:

    \b
        detabase items put '[{"key": "a", "n": 1}, {"key": "b", "n": 2}]'

    \b
    Output Format:
        {"processed": {"items": [...]}, "failed": {"items": [...]}}
    """
    setup_logging(verbose)
    items = parse_json(items_json, "ITEMS_JSON")
    if isinstance(items, dict):
        items = [items]
    if not isinstance(items, list):
        raise click.BadParameter("expected a JSON array or object", param_hint="ITEMS_JSON")

    try:
        logger.info(f"Putting {len(items)} item(s)")
        result = run(_client(ctx, project_id, base_name, api_key).put(items))
    except FAILURES as e:
        fail(ctx, e, text)

    if text:
        processed = result.get("processed", {}).get("items", [])
        failed = result.get("failed", {}).get("items", [])
        output_text(f"✅ Processed {len(processed)} item(s)")
        if failed:
            output_text(f"⚠️  Failed {len(failed)} item(s)")
    else:
        output_json(result)


@click.command("get")
@click.argument("key")
@connection_options
@click.pass_context
def get_command(
    ctx: click.Context,
    key: str,
    project_id: str | None,
    base_name: str | None,
    api_key: str | None,
    text: bool,
    verbose: int,
) -> None:
    """Retrieve an item by key.

    Exits with code 1 if the key does not exist.

    Examples:

    \b
        detabase items get user-1 | jq '.name'
    """
    setup_logging(verbose)

    try:
        logger.info(f"Getting key '{key}'")
        item = run(_client(ctx, project_id, base_name, api_key).get(key))
    except FAILURES as e:
        fail(ctx, e, text)

    if text:
        output_text(json.dumps(item, indent=2))
    else:
        output_json(item)


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
    """Delete an item by key.

    Succeeds whether or not the key exists.

    \b
    Output Format:
        {"key": "user-1"}
    """
    setup_logging(verbose)

    try:
        logger.info(f"Deleting key '{key}'")
        result = run(_client(ctx, project_id, base_name, api_key).delete(key))
    except FAILURES as e:
        fail(ctx, e, text)

    if text:
        output_text(f"✅ Deleted {key}")
    else:
        output_json(result)


@click.command("insert")
@click.argument("item_json")
@connection_options
@click.pass_context
def insert_command(
    ctx: click.Context,
    item_json: str,
    project_id: str | None,
    base_name: str | None,
    api_key: str | None,
    text: bool,
    verbose: int,
) -> None:
    """Create an item only if its key does not exist yet.

    Examples:

    \b
        detabase items insert '{"key": "user-1", "name": "alice"}'
    """
    setup_logging(verbose)
    item = parse_json(item_json, "ITEM_JSON")
    if not isinstance(item, dict):
        raise click.BadParameter("expected a JSON object", param_hint="ITEM_JSON")

    try:
        logger.info("Inserting item")
        result = run(_client(ctx, project_id, base_name, api_key).insert(item))
    except FAILURES as e:
        fail(ctx, e, text)

    if text:
        output_text(f"✅ Inserted {result.get('key')}")
    else:
        output_json(result)


@click.command("update")
@click.argument("key")
@click.option("--set", "set_json", help="JSON object of fields to set")
@click.option("--increment", "increment_json", help="JSON object of fields to increment")
@click.option("--append", "append_json", help="JSON object of fields to append lists to")
@click.option("--delete", "delete_fields", multiple=True, help="Field to remove (repeatable)")
@connection_options
@click.pass_context
def update_command(
    ctx: click.Context,
    key: str,
    set_json: str | None,
    increment_json: str | None,
    append_json: str | None,
    delete_fields: tuple[str, ...],
    project_id: str | None,
    base_name: str | None,
    api_key: str | None,
    text: bool,
    verbose: int,
) -> None:
    """Update fields of an existing item.

    Examples:

    \b
        detabase items update user-1 --set '{"name": "bob"}' --increment '{"visits": 1}'

    \b
        detabase items update user-1 --delete nickname --delete avatar

    \b
    Output Format:
        {"key": "user-1", "set": {...}, "delete": [...]}
    """
    setup_logging(verbose)

    query: UpdateQuery = {}
    if set_json is not None:
        query["set"] = parse_json(set_json, "--set")
    if increment_json is not None:
        query["increment"] = parse_json(increment_json, "--increment")
    if append_json is not None:
        query["append"] = parse_json(append_json, "--append")
    if delete_fields:
        query["delete"] = list(delete_fields)
    if not query:
        raise click.UsageError("Nothing to update: give --set, --increment, --append or --delete")

    try:
        logger.info(f"Updating key '{key}'")
        logger.debug(f"Operations: {sorted(query)}")
        result = run(_client(ctx, project_id, base_name, api_key).update(key, query))
    except FAILURES as e:
        fail(ctx, e, text)

    if text:
        output_text(f"✅ Updated {key}")
    else:
        output_json(result)


async def _collect_all(client: Detabase[Any], query: ListQuery) -> list[Any]:
    return [item async for item in client.query_all(query)]


@click.command("query")
@click.argument("filter_json", required=False)
@click.option("--limit", type=int, help="Maximum number of items per page")
@click.option("--last", help="Cursor returned as paging.last by a previous page")
@click.option("--all", "fetch_all", is_flag=True, help="Follow cursors and return every match")
@connection_options
@click.pass_context
def query_command(
    ctx: click.Context,
    filter_json: str | None,
    limit: int | None,
    last: str | None,
    fetch_all: bool,
    project_id: str | None,
    base_name: str | None,
    api_key: str | None,
    text: bool,
    verbose: int,
) -> None:
    """List items matching a filter.

    FILTER_JSON is a JSON object (AND of conditions) or array (OR of
    objects). At most 1 MB is scanned per page, so use --all or --last
    to read past the first page.

    Examples:

    \b
        detabase items query '{"age?gt": 18}' --limit 10

    \b
        detabase items query '[{"name": "alice"}, {"name": "bob"}]' --all

    \b
    Output Format:
        {"paging": {"size": 2, "last": "..."}, "items": [...]}
    """
    setup_logging(verbose)

    query: ListQuery = {}
    if filter_json is not None:
        query["query"] = parse_json(filter_json, "FILTER_JSON")
    if limit is not None:
        query["limit"] = limit
    if last is not None:
        query["last"] = last

    try:
        client = _client(ctx, project_id, base_name, api_key)
        if fetch_all:
            logger.info("Querying all pages")
            items = run(_collect_all(client, query))
            result: dict[str, Any] = {"paging": {"size": len(items)}, "items": items}
        else:
            logger.info("Querying one page")
            result = dict(run(client.query(query)))
    except FAILURES as e:
        fail(ctx, e, text)

    if text:
        for item in result.get("items", []):
            output_text(json.dumps(item))
        cursor = result.get("paging", {}).get("last")
        if cursor:
            output_text(f"💡 More results: --last {cursor}")
    else:
        output_json(result)
