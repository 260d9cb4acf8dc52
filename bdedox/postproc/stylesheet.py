"""Edits to the generated ``doxygen.css`` stylesheet."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from ..fileio import read_page, write_page
from ..logging import get_logger

STYLESHEET_NAME = "doxygen.css"
ORIGINAL_STYLESHEET_NAME = "doxygen_ORIG.css"

_BLOCK_START = "table.doxtable td, table.doxtable th {"
_BLOCK_END = "}"

logger = get_logger("postproc.stylesheet")


def comment_out_table_borders(lines: Iterable[str]) -> List[str]:
    """Comment out ``border`` declarations inside the ``doxtable`` cell rule."""
    output: List[str] = []
    in_block = False
    for line in lines:
        if not in_block and line == _BLOCK_START:
            in_block = True
        elif in_block and line == _BLOCK_END:
            in_block = False
            output.append(line)
            continue

        if in_block and "border" in line:
            line = line.replace("border", "/* border", 1) + " */"
        output.append(line)
    return output


def edit_stylesheet(html_dir: Path) -> bool:
    """Rewrite ``doxygen.css``, keeping the original as ``doxygen_ORIG.css``.

    Returns False (after logging) when there is no stylesheet to edit.
    """
    current = Path(html_dir) / STYLESHEET_NAME
    original = Path(html_dir) / ORIGINAL_STYLESHEET_NAME
    logger.info("editing '%s' in %s", STYLESHEET_NAME, html_dir)

    if not current.is_file():
        logger.warning("SKIP: cannot open for read: %s", current)
        return False

    current.replace(original)
    text = read_page(original)
    lines = text.split("\n")
    trailing_newline = bool(lines) and lines[-1] == ""
    if trailing_newline:
        lines.pop()

    edited = "\n".join(comment_out_table_borders(lines))
    if trailing_newline:
        edited += "\n"
    write_page(current, edited)
    return True


__all__ = [
    "ORIGINAL_STYLESHEET_NAME",
    "STYLESHEET_NAME",
    "comment_out_table_borders",
    "edit_stylesheet",
]
