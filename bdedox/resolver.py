"""Deprecation and privacy lookups for entities referenced from group pages."""

from __future__ import annotations

import re
from pathlib import Path

from .errors import NotAnEntityError
from .fileio import read_page
from .logging import get_logger
from .models import EntityAttributes
from .nomenclature import get_component_package, is_component

_FORWARDING_PREFIX = "bslfwd_"
_FORWARDING_PRIVATE_SUFFIX = "buildtarget"

DEPRECATION_MARKER = re.compile(
    r'<dl class="deprecated"><dt><b>'
    r'<a class="el" href="deprecated\.html#_deprecated.*">'
    r"Deprecated:</a>"
)


class EntityAttributeResolver:
    """Read-only queries against the rendered files of an HTML directory."""

    def __init__(self, html_dir: Path) -> None:
        self.html_dir = Path(html_dir)
        self.logger = get_logger("resolver")

    def is_deprecated(self, filename: str) -> bool:
        """Return True when the rendered page ``filename`` carries a deprecation notice.

        A missing page raises :class:`FileNotFoundError`; callers only pass
        names taken from generator cross-references.
        """
        path = self.html_dir / filename
        try:
            text = read_page(path)
        except FileNotFoundError as exc:
            raise FileNotFoundError(f"cannot open {path} for reading: {exc}") from exc
        return any(DEPRECATION_MARKER.search(line) for line in text.splitlines())

    def is_private(self, entity: str) -> bool:
        return is_private_component(entity)

    def resolve(self, filename: str, entity: str) -> EntityAttributes:
        """Return both attributes; an unrecognised ``entity`` is never private."""
        deprecated = self.is_deprecated(filename)
        try:
            private = self.is_private(entity)
        except NotAnEntityError:
            self.logger.debug("Skipping privacy check for non-component %s", entity)
            private = False
        return EntityAttributes(is_deprecated=deprecated, is_private=private)


def is_private_component(component: str) -> bool:
    """Return True when ``component`` is subordinate to another component.

    Forwarding components (``bslfwd_*``) are private only when they name a
    build target.  Otherwise the stem left after removing the owning package
    must be a single segment for the component to be public.
    """
    if not is_component(component):
        raise NotAnEntityError(f"not component: {component}")

    if component.startswith(_FORWARDING_PREFIX):
        return component[len(_FORWARDING_PREFIX):].endswith(_FORWARDING_PRIVATE_SUFFIX)

    package = get_component_package(component)
    stem = component[len(package) + 1:]
    return len(stem.split("_")) > 1


__all__ = ["DEPRECATION_MARKER", "EntityAttributeResolver", "is_private_component"]
