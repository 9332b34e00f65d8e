"""Functional core - pure entry and helper logic with no I/O."""

from .entry import (
    Entry,
    REMOVED_MESSAGE,
    format_record,
    format_timestamp,
    parse_entries,
    parse_entry,
)
from .errors import (
    HelperError,
    InvalidInputError,
    MalformedRecordError,
    RenderError,
    VentError,
)
from .helpers import ParamKind, classify_param, each_reverse, if_reply

__all__ = [
    # Entries
    "Entry",
    "REMOVED_MESSAGE",
    "format_record",
    "format_timestamp",
    "parse_entries",
    "parse_entry",
    # Errors
    "HelperError",
    "InvalidInputError",
    "MalformedRecordError",
    "RenderError",
    "VentError",
    # Helpers
    "ParamKind",
    "classify_param",
    "each_reverse",
    "if_reply",
]
