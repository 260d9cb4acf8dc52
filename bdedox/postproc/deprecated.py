"""Relabels the entries of the generated ``deprecated.html`` list."""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

from ..fileio import join_lines, read_page, split_lines, write_page
from ..logging import get_logger
from ..titles import level_of_aggregation

DEPRECATED_PAGE = "deprecated.html"

logger = get_logger("postproc.deprecated")


def relabel_line(line: str) -> str:
    """Replace the ``Group`` of a ``<dt>Group ...`` entry with its aggregation level."""
    if not line.startswith("<dt>Group "):
        return line
    item = line.rsplit('.html">', 1)[-1].split("</a>", 1)[0]
    level = level_of_aggregation(item)
    return line.replace("Group", level.label, 1)


def relabel_lines(lines: Sequence[str]) -> List[str]:
    return [relabel_line(line) for line in lines]


def edit_deprecated_file(html_dir: Path) -> bool:
    """Rewrite ``deprecated.html`` in place; returns False when it is absent."""
    path = Path(html_dir) / DEPRECATED_PAGE
    try:
        text = read_page(path)
    except OSError as exc:
        logger.warning("edit_deprecated_file: SKIP: cannot open for read: %s: %s", path, exc)
        return False

    write_page(path, join_lines(relabel_lines(split_lines(text))))
    return True


__all__ = ["DEPRECATED_PAGE", "edit_deprecated_file", "relabel_line", "relabel_lines"]
