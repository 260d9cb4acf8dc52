"""Deprecation and privacy badges for the member tables of group pages.

A package or package-group page lists its members in a
``<table class="memberdecls">``.  Each member is a ``memItemLeft`` row
linking to the member's own page, followed by an ``mdescLeft`` row holding
its brief description.  The annotator scans the page line by line, looks up
each linked member and, for deprecated or private members, appends a bold
badge to the link and greys out both the link and its description.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import List, Sequence

from ..errors import FormatError, UnexpectedSyntaxError
from ..fileio import join_lines, read_page, split_lines, write_page
from ..logging import get_logger
from ..models import EntityAttributes, MemberRow
from ..resolver import EntityAttributeResolver

TABLE_OPEN = '<table class="memberdecls">'
TABLE_CLOSE = "</table>"
MEMBER_ITEM_PREFIX = '<tr><td class="memItemLeft"'
MEMBER_DESCRIPTION_PREFIX = '<p><tr><td class="mdescLeft"'

_EXPECTED_KIND_WORDS = ("Package", "Component")
_MUTED_SPAN = '<span style="color:gray;">'


class ScanState(Enum):
    OUTSIDE = "outside"
    IN_MEMBER_TABLE = "in_member_table"


def parse_member_row(line: str) -> MemberRow:
    """Split a ``memItemLeft`` row into link target and visible label."""
    if 'href="' not in line or '.html">' not in line:
        raise FormatError(f"member row without a page link: {line}")
    target = line.rsplit('href="', 1)[1].split('">', 1)[0]
    label = line.rsplit('.html">', 1)[1].split("</a>", 1)[0]
    return MemberRow(line=line, target=target, label=label, tokens=label.split())


def fix_description_margin(line: str) -> str:
    return line.replace(
        '<td class="mdescRight"><p>',
        '<td class="mdescRight"><p style="margin-top: 0; margin-bottom: 0;">',
        1,
    )


def mute_description(line: str) -> str:
    return line.replace('<p style="', '<p style="color: gray;', 1)


def add_badges(line: str, attributes: EntityAttributes) -> str:
    """Insert DEPRECATED/PRIVATE badges before the first ``</a>`` and grey the label."""
    if attributes.is_deprecated:
        line = line.replace("</a>", "<strong>: DEPRECATED</strong></a>", 1)
    if attributes.is_private:
        line = line.replace("</a>", "<strong>: PRIVATE</strong></a>", 1)
    if attributes.is_muted:
        line = line.replace('.html">', f'.html">{_MUTED_SPAN}', 1)
        line = line.replace("</a>", "</span></a>", 1)
    return line


class GroupFileAnnotator:
    """Single-pass scanner over the lines of one group-listing page."""

    def __init__(self, resolver: EntityAttributeResolver) -> None:
        self.resolver = resolver
        self.logger = get_logger("postproc.annotator")

    def entity_name(self, row: MemberRow) -> str:
        """Recover the bare entity name from the row label.

        The label is normally ``"<Kind> <name>"``.  A single token happens
        when the generator synthesised the group (no ``.txt`` file for it);
        such labels may start with a capital, so the token is lower-cased.
        """
        tokens = row.tokens
        if len(tokens) == 2:
            if tokens[0] not in _EXPECTED_KIND_WORDS:
                self.logger.warning("unexpected form: %s", tokens[0])
            return tokens[1]
        if len(tokens) == 1:
            entity = tokens[0].lower()
            self.logger.warning(
                "unexpected form: %s (missing '.txt' file?); assume entity is: %s",
                row.label,
                entity,
            )
            return entity
        raise UnexpectedSyntaxError(f"totally unexpected syntax: {row.label}")

    def annotate_lines(self, lines: Sequence[str]) -> List[str]:
        """Return ``lines`` with member rows badged; count and order are preserved."""
        output: List[str] = []
        state = ScanState.OUTSIDE
        carried = EntityAttributes()

        for line in lines:
            if line == TABLE_OPEN:
                state = ScanState.IN_MEMBER_TABLE

            if state is ScanState.IN_MEMBER_TABLE:
                if line.startswith(MEMBER_DESCRIPTION_PREFIX):
                    line = fix_description_margin(line)
                    if carried.is_muted:
                        line = mute_description(line)
                elif line.startswith(MEMBER_ITEM_PREFIX):
                    row = parse_member_row(line)
                    entity = self.entity_name(row)
                    carried = self.resolver.resolve(row.target, entity)
                    self.logger.debug("entity %s: %s", entity, carried)
                    line = add_badges(row.line, carried)

            if line == TABLE_CLOSE:
                state = ScanState.OUTSIDE

            output.append(line)

        return output

    def annotate_text(self, text: str) -> str:
        """Annotate a whole page; only ``\\n`` separates lines."""
        return join_lines(self.annotate_lines(split_lines(text)))

    def annotate_file(self, path: Path) -> None:
        """Rewrite the group page at ``path`` in place."""
        self.logger.info("annotating %s", path)
        write_page(path, self.annotate_text(read_page(path)))


__all__ = [
    "GroupFileAnnotator",
    "ScanState",
    "add_badges",
    "fix_description_margin",
    "mute_description",
    "parse_member_row",
]
