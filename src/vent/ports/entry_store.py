"""Entry storage interface."""

from typing import Protocol


class EntryStore(Protocol):
    """Interface for reading and writing raw entry lines."""

    def read_lines(self) -> list[str]:
        """Read all raw lines in store order."""
        ...

    def append_line(self, line: str) -> None:
        """Append one line, creating the store if needed."""
        ...

    def write_lines(self, lines: list[str]) -> None:
        """Replace the whole store with the given lines."""
        ...
