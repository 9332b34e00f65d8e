"""Handlebars rendering of log entries."""

import logging
from pathlib import Path
from typing import Sequence, TextIO

from pybars import Compiler

from .core.entry import Entry
from .core.errors import RenderError
from .core.helpers import HELPERS

logger = logging.getLogger(__name__)

TEMPLATE_SUFFIX = ".hbs"


class TemplateRenderer:
    """
    Renders entries through a Handlebars template file.

    Other ``.hbs`` files next to the template are available as partials,
    named after their file stem.
    """

    def __init__(self, template_path: Path | str):
        self.template_path = Path(template_path).expanduser()
        self._compiler = Compiler()
        self._template = None
        self._partials: dict = {}

    def _compile(self, path: Path):
        try:
            source = path.read_text(encoding="utf-8")
        except OSError as e:
            raise RenderError(f"Failed to load template {path}") from e
        try:
            return self._compiler.compile(source)
        except Exception as e:
            raise RenderError(f"Failed to compile template {path}") from e

    def load(self) -> None:
        """Compile the template and any partials. Called lazily by render()."""
        logger.debug(f"Loading template {self.template_path}")
        self._template = self._compile(self.template_path)

        partials = {}
        template_dir = self.template_path.parent
        for path in sorted(template_dir.glob(f"*{TEMPLATE_SUFFIX}")):
            if path.resolve() == self.template_path.resolve():
                continue
            logger.debug(f"Registering partial {path.stem!r}")
            partials[path.stem] = self._compile(path)
        self._partials = partials

    def render(self, entries: Sequence[Entry]) -> str:
        """Render entries, oldest first; the template decides display order."""
        if self._template is None:
            self.load()

        context = [entry.to_context() for entry in entries]
        try:
            return str(self._template(context, helpers=HELPERS, partials=self._partials))
        except Exception as e:
            raise RenderError(f"Failed to render template {self.template_path}") from e

    def render_to(self, entries: Sequence[Entry], out: TextIO) -> None:
        """Render entries and write the result to a text stream."""
        out.write(self.render(entries))
