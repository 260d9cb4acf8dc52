"""Filename classification and display-title derivation for generated pages.

Doxygen names its output files after the documented entity, encoding ``_``
as ``__`` and ``::`` as ``_1_1``.  This module recognises those filename
shapes, maps each onto an :class:`~bdedox.models.EntityKind` and rebuilds a
human-readable title such as ``"Class bsl::Vector Members"``.

Shapes overlap (``class*-members`` is also ``class*``), so the dispatch is an
ordered table evaluated first-match-wins.
"""

from __future__ import annotations

import re
from typing import Callable

from .errors import FormatError
from .models import AggregationLevel, Classification, EntityKind

_HTML_SUFFIX = ".html"

_LEVEL_RULES: tuple[tuple[re.Pattern[str], AggregationLevel], ...] = (
    (re.compile(r"^\w_\w+_\w+", re.ASCII), AggregationLevel.COMPONENT),
    (re.compile(r"^\w_\w+", re.ASCII), AggregationLevel.PACKAGE),
    (re.compile(r"^\w+_\w+", re.ASCII), AggregationLevel.COMPONENT),
    (re.compile(r"^\w{3}$", re.ASCII), AggregationLevel.PACKAGE_GROUP),
    (re.compile(r"^\w{3}\w+$", re.ASCII), AggregationLevel.PACKAGE),
)


def level_of_aggregation(name: str) -> AggregationLevel:
    """Return the aggregation level implied by the lexical shape of ``name``."""
    for pattern, level in _LEVEL_RULES:
        if pattern.match(name):
            return level
    return AggregationLevel.UNKNOWN


def markup_to_ascii(token: str) -> str:
    """Undo Doxygen's filename escaping: ``__`` -> ``_`` then ``_1`` -> ``:``."""
    return token.replace("__", "_").replace("_1", ":")


def ascii_to_markup(name: str) -> str:
    """Apply Doxygen's filename escaping (inverse of :func:`markup_to_ascii`)."""
    return name.replace("_", "__").replace(":", "_1")


def _strip_prefix(value: str, prefix: str) -> str:
    return value[len(prefix):] if value.startswith(prefix) else value


def _strip_suffix(value: str, suffix: str) -> str:
    return value[: -len(suffix)] if suffix and value.endswith(suffix) else value


def _with_level(name: str) -> str:
    level = level_of_aggregation(name)
    return f"{name} {level.label}" if level.label else name


def _class_members_title(stem: str) -> str:
    name = markup_to_ascii(_strip_suffix(_strip_prefix(stem, "class"), "-members"))
    return f"Class {name} Members"


def _class_title(stem: str) -> str:
    return f"Class {markup_to_ascii(_strip_prefix(stem, 'class'))}"


def _group_title(stem: str) -> str:
    return _with_level(markup_to_ascii(_strip_prefix(stem, "group__")))


def _header_source_title(stem: str) -> str:
    name = markup_to_ascii(_strip_suffix(stem, "_8h_source") + ".h")
    return f"{name} Source"


def _header_reference_title(stem: str) -> str:
    name = markup_to_ascii(_strip_suffix(stem, "_8h") + ".h")
    return f"{name} Reference"


def _struct_members_title(stem: str) -> str:
    name = markup_to_ascii(_strip_suffix(_strip_prefix(stem, "struct"), "-members"))
    return f"Struct {name} Members"


def _struct_title(stem: str) -> str:
    return f"Struct {markup_to_ascii(_strip_prefix(stem, 'struct'))}"


def _namespace_title(stem: str) -> str:
    return f"Namespace {markup_to_ascii(_strip_prefix(stem, 'namespace'))}"


def _index_title(stem: str) -> str:
    return f"Index of {_with_level(markup_to_ascii(_strip_prefix(stem, 'index_')))}"


def _union_members_title(stem: str) -> str:
    name = markup_to_ascii(_strip_suffix(_strip_prefix(stem, "union"), "-members"))
    return f"Union {name} Members"


def _union_title(stem: str) -> str:
    return f"Union {markup_to_ascii(_strip_prefix(stem, 'union'))}"


_TITLE_RULES: tuple[tuple[re.Pattern[str], EntityKind, Callable[[str], str]], ...] = (
    (re.compile(r"^class.*-members$"), EntityKind.CLASS_MEMBERS, _class_members_title),
    (re.compile(r"^class"), EntityKind.CLASS, _class_title),
    (re.compile(r"^group"), EntityKind.GROUP, _group_title),
    (re.compile(r"_8h_source$"), EntityKind.HEADER_SOURCE, _header_source_title),
    (re.compile(r"_8h$"), EntityKind.HEADER_REFERENCE, _header_reference_title),
    (re.compile(r"^struct.*-members$"), EntityKind.STRUCT_MEMBERS, _struct_members_title),
    (re.compile(r"^struct"), EntityKind.STRUCT, _struct_title),
    (re.compile(r"^namespace"), EntityKind.NAMESPACE, _namespace_title),
    (re.compile(r"^index"), EntityKind.INDEX, _index_title),
    (re.compile(r"^union.*-members$"), EntityKind.UNION_MEMBERS, _union_members_title),
    (re.compile(r"^union"), EntityKind.UNION, _union_title),
)


def classify(filename: str) -> Classification:
    """Return the entity kind and display title for a generated HTML filename.

    Raises :class:`FormatError` when ``filename`` lacks the ``.html`` suffix.
    Unrecognised shapes yield ``EntityKind.UNRECOGNIZED`` with an empty title.
    """
    if not filename.endswith(_HTML_SUFFIX):
        raise FormatError(f"bad filename: {filename}")
    stem = filename[: -len(_HTML_SUFFIX)]

    for pattern, kind, build_title in _TITLE_RULES:
        if pattern.search(stem):
            return Classification(kind=kind, title=build_title(stem))
    return Classification(kind=EntityKind.UNRECOGNIZED, title="")


def filename_to_title(filename: str) -> str:
    """Return only the display title for ``filename`` (empty when unrecognised)."""
    return classify(filename).title


__all__ = [
    "ascii_to_markup",
    "classify",
    "filename_to_title",
    "level_of_aggregation",
    "markup_to_ascii",
]
