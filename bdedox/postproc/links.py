"""Cross-links from class pages to their component-level documentation."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional

from ..fileio import read_page
from ..logging import get_logger

ATTRIBUTE_LINK_MARKER = (
    "See the Attributes section under @DESCRIPTION"
    " in the component-level documentation."
)
GLOSSARY_TERM = "bsldoc_glossary"
GLOSSARY_LINK = '<A href="group__bsldoc__glossary.html">bsldoc_glossary</A>'

_ATTRIBUTES_ANCHOR = re.compile(r'\n<a href="#([^"]+)">Attributes </a> </li>\n')
_DESCRIPTION_ANCHOR = re.compile(r'\n<a href="#([^"]+)">Description </a> <ul>\n')

logger = get_logger("postproc.links")


def is_class_file(filename: str) -> bool:
    """True for ``class*.html`` pages other than the ``-members`` listings."""
    return (
        filename.endswith(".html")
        and filename.startswith("class")
        and not filename.endswith("-members.html")
    )


def needs_attribute_link(content: str) -> bool:
    return ATTRIBUTE_LINK_MARKER in content


def description_file(class_filename: str) -> str:
    """Return the component group page that documents ``class_filename``.

    ``classbslma_1_1Allocator.html`` -> ``group__bslma__allocator.html``
    """
    name = re.sub(r"^class", "group__", class_filename)
    return name.replace("_1_1", "__").lower()


def extract_attributes_anchor(content: str) -> Optional[str]:
    match = _ATTRIBUTES_ANCHOR.search(content)
    return match.group(1) if match else None


def extract_description_anchor(content: str) -> Optional[str]:
    match = _DESCRIPTION_ANCHOR.search(content)
    return match.group(1) if match else None


def _href(filename: str, anchor: Optional[str]) -> str:
    return f"{filename}#{anchor}" if anchor else filename


def compose_linked_attributes(anchor: Optional[str], filename: str) -> str:
    return f'<A  href="{_href(filename, anchor)}">Attributes</A>'


def compose_linked_description(anchor: Optional[str], filename: str) -> str:
    return f'<A  href="{_href(filename, anchor)}">@DESCRIPTION</A>'


class AttributeLinker:
    """Turns the "see the Attributes section" boilerplate into live links."""

    def __init__(self, html_dir: Path) -> None:
        self.html_dir = Path(html_dir)

    def apply(self, content: str, filename: str) -> str:
        """Link the marker sentence, ``@DESCRIPTION`` tokens and the glossary term.

        A missing or anchor-less component page still produces links, pointing
        at the page itself rather than at a section.
        """
        target = description_file(filename)
        source = self.html_dir / target
        try:
            description_content = read_page(source)
        except OSError as exc:
            logger.warning("cannot open %s: %s", source, exc)
            description_content = ""

        description_anchor = extract_description_anchor(description_content)
        attributes_anchor = extract_attributes_anchor(description_content)
        if description_anchor is None or attributes_anchor is None:
            logger.info("Missing section anchors in %s", target)

        linked_description = compose_linked_description(description_anchor, target)
        linked_attributes = compose_linked_attributes(attributes_anchor, target)

        content = content.replace(
            "See the Attributes section under",
            f"See the {linked_attributes} section under",
            1,
        )
        content = content.replace("@DESCRIPTION", linked_description)
        return content.replace(GLOSSARY_TERM, GLOSSARY_LINK)


__all__ = [
    "ATTRIBUTE_LINK_MARKER",
    "AttributeLinker",
    "compose_linked_attributes",
    "compose_linked_description",
    "description_file",
    "extract_attributes_anchor",
    "extract_description_anchor",
    "is_class_file",
    "needs_attribute_link",
]
