"""Whole-file rewrites applied to every generated HTML page."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List, Optional

from ..logging import get_logger
from ..nomenclature import is_package_group_name
from ..titles import filename_to_title
from .links import AttributeLinker, is_class_file, needs_attribute_link

OBSCURED_COLON_COLON = (
    "PER_DRQS-27494910_OBSCURE_COLON-COLON_HERE_THEN_RESTORE_IN_POST-PROCESSING"
)
OBSCURED_ASTERISK_SLASH = (
    "PER_DRQS-28777305_OBSCURE_ASTERISK-SLASH_HERE_THEN_RESTORE_IN_POST-PROCESSING"
)

_TITLE_PATTERN = re.compile(r"<title>.*</title>", re.DOTALL)
_QUICK_INDEX_PATTERN = re.compile(
    r'<a class="qindex[^>]+>(Main|Alpha|Namespace).*?</a>\s+\|', re.DOTALL
)
_MODULE_UPPER = re.compile(r"\bModule(s?)\b")
_MODULE_LOWER = re.compile(r"\bmodule(s?)\b")
_MAIN_PAGE = re.compile(r"\bmain\.html\b")

_COMPONENTS_LINK = '\n<a href="#groups">Components</a>  </div>\n'
_PACKAGES_LINK = '\n<a href="#groups">Packages</a>  </div>\n'
_COMPONENTS_HEADER = "\nComponents</h2></td></tr>\n"
_PACKAGES_HEADER = "\nPackages</h2></td></tr>\n"

logger = get_logger("postproc.markup")


def inject_title(content: str, filename: str, base_title: str) -> str:
    """Replace the ``<title>`` element with ``"<base_title>: <page title>"``."""
    title = filename_to_title(filename)
    full_title = f"{base_title}: {title}" if title else base_title
    return _TITLE_PATTERN.sub(lambda _match: f"<title>{full_title}</title>", content)


def remove_quick_index_links(content: str) -> str:
    return _QUICK_INDEX_PATTERN.sub("", content)


def rename_modules(content: str) -> str:
    """Doxygen "modules" are BDE components."""
    content = _MODULE_UPPER.sub(r"Component\1", content)
    return _MODULE_LOWER.sub(r"component\1", content)


def retarget_main_page(content: str) -> str:
    return _MAIN_PAGE.sub("components.html", content)


def restore_placeholders(content: str) -> str:
    content = content.replace(OBSCURED_COLON_COLON, "::")
    return content.replace(OBSCURED_ASTERISK_SLASH, "*/")


def is_group_file(filename: str) -> bool:
    return filename.startswith("group__") and filename.endswith(".html")


def is_package_group_file(filename: str) -> bool:
    """True for the group page of a package group such as ``group__bsl.html``."""
    if not is_group_file(filename):
        return False
    name = filename[len("group__"):-len(".html")].replace("__", "_")
    return is_package_group_name(name)


def change_component_to_package_links(content: str) -> str:
    """A package group lists packages, not components."""
    if _COMPONENTS_LINK not in content:
        logger.info("change_component_to_package_links: no match for section link")
    content = content.replace(_COMPONENTS_LINK, _PACKAGES_LINK, 1)

    if _COMPONENTS_HEADER not in content:
        logger.info("change_component_to_package_links: no match for section header")
    return content.replace(_COMPONENTS_HEADER, _PACKAGES_HEADER, 1)


def remove_breaks_from_table(content: str) -> str:
    return content.replace("\n<br/></td></tr>\n", "\n</td></tr>\n")


def needs_at_sign_fix(filename: str) -> bool:
    return filename.endswith(".html") and not filename.endswith("_source.html")


def unescape_at_signs_in_pre(content: str) -> str:
    """Turn ``\\@`` into ``@`` on lines from ``<pre`` through ``/pre>``.

    The result is newline-terminated and trailing blank lines are dropped.
    """
    lines = content.split("\n")
    while lines and lines[-1] == "":
        lines.pop()

    new_lines: List[str] = []
    in_pre = False
    for line in lines:
        active = in_pre
        if not in_pre and "<pre" in line:
            in_pre = active = True
        if in_pre and "/pre>" in line:
            in_pre = False
        if active:
            line = line.replace("\\@", "@")
        new_lines.append(line)

    return "\n".join(new_lines) + "\n"


class MarkupEditor:
    """Applies the ordered sequence of text rewrites to one page."""

    def __init__(self, html_dir: Path, linker: AttributeLinker | None = None) -> None:
        self.html_dir = Path(html_dir)
        self.linker = linker or AttributeLinker(self.html_dir)

    def edit(
        self,
        content: str,
        filename: str,
        base_title: Optional[str] = None,
        user_main_page: bool = False,
    ) -> str:
        """Return the rewritten ``content`` of the page named ``filename``."""
        if base_title:
            content = inject_title(content, filename, base_title)

        content = remove_quick_index_links(content)
        content = rename_modules(content)
        if not user_main_page:
            content = retarget_main_page(content)
        content = restore_placeholders(content)

        if is_class_file(filename) and needs_attribute_link(content):
            content = self.linker.apply(content, filename)

        if is_package_group_file(filename):
            content = change_component_to_package_links(content)

        if is_group_file(filename):
            content = remove_breaks_from_table(content)

        if needs_at_sign_fix(filename):
            content = unescape_at_signs_in_pre(content)

        return content


__all__ = [
    "MarkupEditor",
    "OBSCURED_ASTERISK_SLASH",
    "OBSCURED_COLON_COLON",
    "change_component_to_package_links",
    "inject_title",
    "is_group_file",
    "is_package_group_file",
    "needs_at_sign_fix",
    "remove_breaks_from_table",
    "remove_quick_index_links",
    "rename_modules",
    "restore_placeholders",
    "retarget_main_page",
    "unescape_at_signs_in_pre",
]
