"""Tests for bdedox.titles."""

from __future__ import annotations

import pytest

from bdedox.errors import FormatError
from bdedox.models import AggregationLevel, EntityKind
from bdedox.titles import (
    ascii_to_markup,
    classify,
    filename_to_title,
    level_of_aggregation,
    markup_to_ascii,
)


@pytest.mark.parametrize(
    ("filename", "kind", "title"),
    [
        ("classbsl_1_1Vector-members.html", EntityKind.CLASS_MEMBERS, "Class bsl::Vector Members"),
        ("classbslma_1_1Allocator.html", EntityKind.CLASS, "Class bslma::Allocator"),
        ("group__bsl.html", EntityKind.GROUP, "bsl Package Group"),
        ("group__bslma.html", EntityKind.GROUP, "bslma Package"),
        ("group__bslma__allocator.html", EntityKind.GROUP, "bslma_allocator Component"),
        ("bslma__allocator_8h_source.html", EntityKind.HEADER_SOURCE, "bslma_allocator.h Source"),
        ("bslma__allocator_8h.html", EntityKind.HEADER_REFERENCE, "bslma_allocator.h Reference"),
        ("structbsls_1_1Types-members.html", EntityKind.STRUCT_MEMBERS, "Struct bsls::Types Members"),
        ("structbsls_1_1Types.html", EntityKind.STRUCT, "Struct bsls::Types"),
        ("namespacebslma.html", EntityKind.NAMESPACE, "Namespace bslma"),
        ("index_bdl.html", EntityKind.INDEX, "Index of bdl Package Group"),
        ("unionbsls_1_1AlignmentImp-members.html", EntityKind.UNION_MEMBERS, "Union bsls::AlignmentImp Members"),
        ("unionbsls_1_1AlignmentImp.html", EntityKind.UNION, "Union bsls::AlignmentImp"),
    ],
)
def test_classify_maps_filename_shapes(filename: str, kind: EntityKind, title: str) -> None:
    result = classify(filename)
    assert result.kind is kind
    assert result.title == title


def test_classify_checks_members_shape_before_general_class_shape() -> None:
    kind, title = classify("classbsl_1_1Vector-members.html")
    assert kind is EntityKind.CLASS_MEMBERS
    assert title.endswith(" Members")


def test_classify_returns_empty_title_for_unrecognised_shapes() -> None:
    result = classify("deprecated.html")
    assert result.kind is EntityKind.UNRECOGNIZED
    assert result.title == ""
    assert filename_to_title("files.html") == ""


def test_classify_rejects_names_without_html_suffix() -> None:
    with pytest.raises(FormatError):
        classify("classbsl_1_1Vector.htm")


def test_classify_is_deterministic() -> None:
    first = classify("group__bdlt.html")
    assert all(classify("group__bdlt.html") == first for _ in range(5))


def test_group_title_with_unknown_level_has_no_suffix() -> None:
    assert classify("group__ab.html").title == "ab"


@pytest.mark.parametrize(
    ("name", "level"),
    [
        ("a_bdema_foo", AggregationLevel.COMPONENT),
        ("a_bdema", AggregationLevel.PACKAGE),
        ("bslma_allocator", AggregationLevel.COMPONENT),
        ("bsl", AggregationLevel.PACKAGE_GROUP),
        ("bslma", AggregationLevel.PACKAGE),
        ("ab", AggregationLevel.UNKNOWN),
        ("", AggregationLevel.UNKNOWN),
    ],
)
def test_level_of_aggregation_priority_table(name: str, level: AggregationLevel) -> None:
    assert level_of_aggregation(name) is level


def test_level_labels_are_title_suffixes() -> None:
    assert AggregationLevel.PACKAGE_GROUP.label == "Package Group"
    assert AggregationLevel.UNKNOWN.label == ""


def test_markup_to_ascii_collapses_separators() -> None:
    assert markup_to_ascii("bsl_1_1Vector") == "bsl::Vector"
    assert markup_to_ascii("bslma__allocator") == "bslma_allocator"


@pytest.mark.parametrize("name", ["bsl::Vector", "bslma_allocator", "BloombergLP::bdlt::Date"])
def test_markup_escaping_round_trips(name: str) -> None:
    assert markup_to_ascii(ascii_to_markup(name)) == name
