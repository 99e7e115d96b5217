"""Host inclusion primitive for located template files."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Callable, Optional, Set, TextIO

logger = logging.getLogger(__name__)

TemplateHandler = Callable[[Path, Mapping[str, Any]], Optional[str]]


def read_template(path: Path, context: Mapping[str, Any]) -> str:
    """Return the contents of a template file."""

    with path.open("r", encoding="utf-8") as handle:
        return handle.read()


class TemplateIncluder:
    """Hands located templates to a handler, at most once with ``require_once``.

    Any string the handler returns is written to ``stream`` when one is set.
    """

    def __init__(self, handler: Optional[TemplateHandler] = None, *, stream: Optional[TextIO] = None) -> None:
        self._handler: TemplateHandler = handler or read_template
        self._stream = stream
        self._included: Set[str] = set()

    @property
    def included(self) -> Set[str]:
        return set(self._included)

    def include(self, path: str, context: Mapping[str, Any], require_once: bool = True) -> Optional[str]:
        if require_once and path in self._included:
            logger.debug("Skipping already included template %s", path)
            return None
        logger.debug("Including template %s", path)
        output = self._handler(Path(path), context)
        self._included.add(path)
        if output is not None and self._stream is not None:
            self._stream.write(output)
        return output
