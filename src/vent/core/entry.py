"""Entry record codec - pure parsing/formatting, no I/O."""

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Iterable

from .errors import MalformedRecordError

REPLY_MARKER = ">>"
REMOVED_MESSAGE = "[removed]"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S %z"

# Largest reply ID accepted; longer digit runs are treated as plain text.
MAX_REPLY_ID = 2**64 - 1


@dataclass
class Entry:
    """A single log entry. Its ID is its position in the store."""

    date: str
    reply: int | None
    message: str

    def to_context(self) -> dict:
        """Plain dict exposed to templates."""
        return asdict(self)


def _parse_reply_id(text: str) -> int | None:
    if not text or not (text.isascii() and text.isdigit()):
        return None
    value = int(text)
    if value > MAX_REPLY_ID:
        return None
    return value


def parse_entry(raw: str) -> Entry:
    """
    Decode one stored line.

    The date runs up to the first comma. A leading ">>N" on the rest marks a
    reply to entry N; a marker that doesn't parse is left in the message.
    """
    date_end = raw.find(",")
    if date_end == -1:
        raise MalformedRecordError("No date in entry")

    date = raw[:date_end]
    message = raw[date_end + 1:]

    reply = None
    if len(message) > 2 and message.startswith(REPLY_MARKER):
        reply_end = message.find(" ")
        if reply_end == -1:
            reply_end = len(message)
        reply = _parse_reply_id(message[2:reply_end])
        if reply is not None:
            # The separating space stays at the front of the message.
            message = message[reply_end:]

    return Entry(date=date, reply=reply, message=message)


def parse_entries(lines: Iterable[str]) -> list[Entry]:
    """Decode lines in store order. Fails on the first malformed line."""
    entries = []
    for line_no, line in enumerate(lines, start=1):
        try:
            entries.append(parse_entry(line))
        except MalformedRecordError as e:
            raise MalformedRecordError(f"{e} (line {line_no})") from e
    return entries


def format_record(date: str, message: str) -> str:
    """Encode a record. Reply markers must already be part of the message."""
    return f"{date},{message}"


def format_timestamp(when: datetime | None = None) -> str:
    """Local time as stored in the date field."""
    when = when or datetime.now()
    if when.tzinfo is None:
        when = when.astimezone()
    return when.strftime(TIMESTAMP_FORMAT)
