"""Tests for the doxygen.css edit."""

from __future__ import annotations

from bdedox.postproc.stylesheet import comment_out_table_borders, edit_stylesheet
from tests._fixtures.html_builder import HtmlDirBuilder

STYLESHEET = """\
table.doxtable {
    border-collapse:collapse;
}

table.doxtable td, table.doxtable th {
    border: 1px solid #2D4068;
    padding: 3px 7px 2px;
}

div.border { border: none; }
"""


def test_comment_out_table_borders_only_inside_cell_rule() -> None:
    result = comment_out_table_borders(STYLESHEET.split("\n"))
    assert "    border-collapse:collapse;" in result
    assert "    /* border: 1px solid #2D4068; */" in result
    assert "    padding: 3px 7px 2px;" in result
    assert "div.border { border: none; }" in result


def test_edit_stylesheet_keeps_original(html_builder: HtmlDirBuilder) -> None:
    html_builder.write({"doxygen.css": STYLESHEET})

    assert edit_stylesheet(html_builder.path()) is True

    assert html_builder.read("doxygen_ORIG.css") == STYLESHEET
    edited = html_builder.read("doxygen.css")
    assert "/* border: 1px solid #2D4068; */" in edited
    assert edited.count("\n") == STYLESHEET.count("\n")


def test_edit_stylesheet_skips_missing_file(html_builder: HtmlDirBuilder) -> None:
    assert edit_stylesheet(html_builder.path()) is False
    assert not (html_builder.path() / "doxygen_ORIG.css").exists()
