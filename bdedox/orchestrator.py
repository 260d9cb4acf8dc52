"""Pipeline orchestration for a full edit of a Doxygen HTML directory."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List

from .config import EditConfig
from .fileio import read_page, write_page
from .logging import get_logger
from .models import AggregationLevel
from .postproc.annotator import GroupFileAnnotator
from .postproc.deprecated import edit_deprecated_file
from .postproc.markup import MarkupEditor
from .postproc.stylesheet import edit_stylesheet
from .resolver import EntityAttributeResolver
from .titles import level_of_aggregation, markup_to_ascii


@dataclass
class RunSummary:
    """Counts and flags describing one completed run."""

    html_files_edited: int = 0
    group_files_annotated: int = 0
    stylesheet_edited: bool = False
    deprecated_file_edited: bool = False


def group_item_name(filename: str) -> str:
    """``group__bslma__allocator.html`` -> ``bslma_allocator``."""
    item = filename[len("group__"):] if filename.startswith("group__") else filename
    if item.endswith(".html"):
        item = item[: -len(".html")]
    return markup_to_ascii(item)


class Orchestrator:
    """Runs the editing passes over one HTML directory, strictly in sequence.

    Group pages are annotated only after every page has been through the
    markup editor, because the deprecation lookup reads the edited pages.
    """

    def __init__(
        self,
        editor: MarkupEditor | None = None,
        annotator: GroupFileAnnotator | None = None,
    ) -> None:
        self._editor = editor
        self._annotator = annotator
        self.logger = get_logger("orchestrator")

    def run(self, config: EditConfig) -> RunSummary:
        html_dir = Path(config.html_dir)
        if not html_dir.is_dir():
            raise FileNotFoundError(f"HTML directory not found: {html_dir}")

        summary = RunSummary()
        self.logger.info("DO: edit HTML files")
        summary.html_files_edited = self.edit_html_files(config)

        self.logger.info("DO: edit stylesheet")
        summary.stylesheet_edited = edit_stylesheet(html_dir)

        self.logger.info("DO: edit deprecated file")
        summary.deprecated_file_edited = edit_deprecated_file(html_dir)

        self.logger.info("DO: edit group files")
        summary.group_files_annotated = self.edit_group_files(html_dir)
        return summary

    def edit_html_files(self, config: EditConfig) -> int:
        """Apply the markup editor to every page; returns the number rewritten."""
        html_dir = Path(config.html_dir)
        editor = self._editor or MarkupEditor(html_dir)
        self.logger.info("editing HTML files in %s", html_dir)

        count = 0
        for path in sorted(html_dir.iterdir()):
            if not path.is_file() or path.suffix != ".html" or path.name.endswith("ORIG.html"):
                self.logger.debug("SKIP file:|%s|", path.name)
                continue
            self.logger.debug("PROC file:|%s|", path.name)

            try:
                content = read_page(path)
            except OSError as exc:
                self.logger.warning("cannot open %s: %s", path, exc)
                continue

            new_content = editor.edit(
                content,
                path.name,
                base_title=config.base_title or None,
                user_main_page=config.user_main_page,
            )
            write_page(path, new_content)
            count += 1

        self.logger.info("HTML file edit count: %d", count)
        return count

    def edit_group_files(self, html_dir: Path) -> int:
        """Annotate every package and package-group page; component pages are skipped."""
        html_dir = Path(html_dir)
        annotator = self._annotator or GroupFileAnnotator(EntityAttributeResolver(html_dir))

        annotated: List[str] = []
        for path in sorted(html_dir.glob("group__*.html")):
            item = group_item_name(path.name)
            level = level_of_aggregation(item)
            if level is AggregationLevel.COMPONENT:
                self.logger.debug("skipping component group %s", path.name)
                continue
            self.logger.debug("edit group file: %s, %s, %s", path.name, item, level.label)
            try:
                content = read_page(path)
            except OSError as exc:
                self.logger.warning("cannot open %s: %s", path, exc)
                continue
            write_page(path, annotator.annotate_text(content))
            annotated.append(path.name)
        return len(annotated)


__all__ = ["Orchestrator", "RunSummary", "group_item_name"]
