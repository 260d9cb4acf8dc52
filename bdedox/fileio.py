"""Byte-faithful reading and writing of generated pages.

Pages are decoded with ``newline=""`` so ``\\r\\n`` and lone ``\\r`` survive a
rewrite untouched; only ``\\n`` separates lines.
"""

from __future__ import annotations

from pathlib import Path

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def read_page(path: Path) -> str:
    with Path(path).open("r", encoding=_ENCODING, errors=_ERRORS, newline="") as handle:
        return handle.read()


def write_page(path: Path, text: str) -> None:
    with Path(path).open("w", encoding=_ENCODING, errors=_ERRORS, newline="") as handle:
        handle.write(text)


def split_lines(text: str) -> list[str]:
    """Split on ``\\n`` only, dropping the empty field after a final newline."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def join_lines(lines: list[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


__all__ = ["join_lines", "read_page", "split_lines", "write_page"]
