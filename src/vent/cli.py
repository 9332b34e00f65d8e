"""Vent CLI - personal append-only log."""

import logging
import sys

import click

from .config import STORE_ENV_VAR, TEMPLATE_ENV_VAR, load_config
from .core.errors import RenderError, VentError
from .workflows import (
    add_entry,
    collect_message,
    edit_entry,
    get_renderer,
    get_store,
    parse_message_id,
    remove_entry,
    render_entries,
)

ENV_HELP = f"""\b
Environment:
  {STORE_ENV_VAR}    Vent database location (default: 'vent.csv')
  {TEMPLATE_ENV_VAR}    Render template (default: 'template/vent.hbs')
"""


def _fail(e: Exception) -> None:
    """Report an error and exit non-zero."""
    click.echo(f"Error: {e}", err=True)
    if isinstance(e, RenderError) and e.__cause__ is not None:
        click.echo(f"Caused by: {e.__cause__!r}", err=True)
    sys.exit(1)


@click.group(epilog=ENV_HELP)
@click.version_option(package_name="vent")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, debug: bool):
    """Vent - append-only personal log."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )
    ctx.obj = load_config()


@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("words", nargs=-1)
@click.pass_obj
def add(config, words: tuple[str, ...]):
    """Add an entry. Start with '>>ID' to reply to entry ID."""
    try:
        add_entry(get_store(config), collect_message(words))
    except (VentError, OSError) as e:
        _fail(e)


@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("message_id", required=False)
@click.argument("words", nargs=-1)
@click.pass_obj
def edit(config, message_id: str | None, words: tuple[str, ...]):
    """Replace the message of entry MESSAGE_ID."""
    try:
        entry_id = parse_message_id(message_id)
        edit_entry(get_store(config), entry_id, collect_message(words))
    except (VentError, OSError) as e:
        _fail(e)


@main.command("rm")
@click.argument("message_id", required=False)
@click.pass_obj
def remove(config, message_id: str | None):
    """Mark entry MESSAGE_ID as removed."""
    try:
        remove_entry(get_store(config), parse_message_id(message_id))
    except (VentError, OSError) as e:
        _fail(e)


@main.command()
@click.pass_obj
def render(config):
    """Render all entries through the template to stdout."""
    try:
        render_entries(get_store(config), get_renderer(config), sys.stdout)
    except (VentError, OSError) as e:
        _fail(e)


if __name__ == "__main__":
    main()
