"""CLI entry point for detabase.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import click

from detabase import __version__
from detabase.commands.item_commands import (
    delete_command,
    get_command,
    insert_command,
    put_command,
    query_command,
    update_command,
)
from detabase.commands.kv_commands import delete_command as kv_delete_command
from detabase.commands.kv_commands import get_command as kv_get_command
from detabase.commands.kv_commands import set_command as kv_set_command


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """A typed client for Deta Base, the hosted key-value/document store"""
    pass


@main.group("items")
def items() -> None:
    """Store, fetch, update and query items (records with a 'key' field)"""
    pass


@main.group("kv")
def kv() -> None:
    """Simple key-value store: one JSON value per key"""
    pass


# Register item commands
items.add_command(put_command)
items.add_command(get_command)
items.add_command(delete_command)
items.add_command(insert_command)
items.add_command(update_command)
items.add_command(query_command)

# Register kv commands
kv.add_command(kv_set_command)
kv.add_command(kv_get_command)
kv.add_command(kv_delete_command)

if __name__ == "__main__":
    main()
