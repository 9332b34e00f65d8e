"""Shared operations between the CLI and tests.

Entry IDs are positions in the store, so edits and removals rewrite a line in
place rather than deleting it; reply markers keep pointing at the same slot.
"""

import logging
from datetime import datetime
from typing import Iterable, TextIO

from .adapters.file_store import FileEntryStore
from .config import Config
from .core.entry import (
    REMOVED_MESSAGE,
    Entry,
    format_record,
    format_timestamp,
    parse_entries,
)
from .core.errors import InvalidInputError
from .ports.entry_store import EntryStore
from .render import TemplateRenderer

logger = logging.getLogger(__name__)


def get_store(config: Config) -> FileEntryStore:
    """Resolve the entry store from config."""
    return FileEntryStore(config.store_path)


def get_renderer(config: Config) -> TemplateRenderer:
    """Resolve the template renderer from config."""
    return TemplateRenderer(config.template_path)


# ============== Input Collection ==============


def collect_message(words: Iterable[str]) -> str:
    """Join command-line words into a single-line message."""
    message = " ".join(words).strip()
    if not message:
        raise InvalidInputError("Empty message")
    if "\n" in message or "\r" in message:
        raise InvalidInputError("Message contains new line")
    return message


def parse_message_id(text: str | None) -> int:
    """Parse a message ID argument (a 0-based position)."""
    if text is None or not (text.isascii() and text.isdigit()):
        raise InvalidInputError("Invalid message ID")
    return int(text)


# ============== Store Operations ==============


def add_entry(store: EntryStore, message: str, now: datetime | None = None) -> str:
    """Append a new entry. Returns the stored line."""
    line = format_record(format_timestamp(now), message)
    store.append_line(line)
    return line


def edit_entry(
    store: EntryStore,
    message_id: int,
    message: str,
    now: datetime | None = None,
) -> str:
    """Replace the entry at message_id with a freshly dated record."""
    lines = store.read_lines()
    if not 0 <= message_id < len(lines):
        raise InvalidInputError("Out-of-bound message ID")

    line = format_record(format_timestamp(now), message)
    lines[message_id] = line
    logger.info(f"Rewriting entry {message_id}")
    store.write_lines(lines)
    return line


def remove_entry(store: EntryStore, message_id: int, now: datetime | None = None) -> str:
    """Blank out an entry's message; its position is kept."""
    return edit_entry(store, message_id, REMOVED_MESSAGE, now)


def read_entries(store: EntryStore) -> list[Entry]:
    """Load and decode every entry, oldest first."""
    return parse_entries(store.read_lines())


def render_entries(store: EntryStore, renderer: TemplateRenderer, out: TextIO) -> None:
    """Render the whole store to a text stream."""
    renderer.render_to(read_entries(store), out)
