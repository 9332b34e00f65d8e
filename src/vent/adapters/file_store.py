"""File-based entry storage adapter."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class FileEntryStore:
    """
    Flat text file storage.

    Implements EntryStore protocol. One UTF-8 record per line, in append order.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def read_lines(self) -> list[str]:
        """Read all lines. Raises FileNotFoundError if the store is missing."""
        with self.path.open(encoding="utf-8", newline="\n") as f:
            lines = [line.removesuffix("\n").removesuffix("\r") for line in f]
        logger.debug(f"Read {len(lines)} entries from {self.path}")
        return lines

    def append_line(self, line: str) -> None:
        with self.path.open("a", encoding="utf-8", newline="\n") as f:
            f.write(f"{line}\n")
        logger.debug(f"Appended entry to {self.path}")

    def write_lines(self, lines: list[str]) -> None:
        """Rewrite the whole file. Not crash-safe."""
        with self.path.open("w", encoding="utf-8", newline="\n") as f:
            for line in lines:
                f.write(f"{line}\n")
        logger.debug(f"Rewrote {len(lines)} entries to {self.path}")
