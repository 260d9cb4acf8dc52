"""Tests for bdedox.resolver."""

from __future__ import annotations

import pytest

from bdedox.errors import NotAnEntityError
from bdedox.models import EntityAttributes
from bdedox.resolver import EntityAttributeResolver, is_private_component
from tests._fixtures.html_builder import DEPRECATED_NOTICE, HtmlDirBuilder


def test_is_private_counts_residual_segments() -> None:
    assert is_private_component("pkg_component_extra") is True
    assert is_private_component("pkg_component") is False
    assert is_private_component("bslstl_vector") is False
    assert is_private_component("bslalg_arraydestructionprimitives_impl") is True


def test_is_private_for_forwarding_components_checks_build_target() -> None:
    assert is_private_component("bslfwd_buildtarget") is True
    assert is_private_component("bslfwd_bslma_allocator") is False


def test_is_private_rejects_non_components() -> None:
    with pytest.raises(NotAnEntityError):
        is_private_component("bslma")


def test_is_deprecated_searches_rendered_page(html_builder: HtmlDirBuilder) -> None:
    html_builder.write(
        {
            "group__bslma__old.html": f"<html>\n<body>\n{DEPRECATED_NOTICE}\n</body>\n</html>\n",
            "group__bslma__new.html": "<html>\n<body>\nCurrent.\n</body>\n</html>\n",
        }
    )
    resolver = EntityAttributeResolver(html_builder.path())
    assert resolver.is_deprecated("group__bslma__old.html") is True
    assert resolver.is_deprecated("group__bslma__new.html") is False


def test_is_deprecated_missing_page_is_fatal(html_builder: HtmlDirBuilder) -> None:
    resolver = EntityAttributeResolver(html_builder.path())
    with pytest.raises(FileNotFoundError):
        resolver.is_deprecated("group__nope.html")


def test_resolve_treats_non_components_as_public(html_builder: HtmlDirBuilder) -> None:
    html_builder.write({"group__bslma.html": f"{DEPRECATED_NOTICE}\n"})
    resolver = EntityAttributeResolver(html_builder.path())

    attributes = resolver.resolve("group__bslma.html", "bslma")

    assert attributes == EntityAttributes(is_deprecated=True, is_private=False)
    assert attributes.is_muted


def test_resolve_is_stable_across_queries(html_builder: HtmlDirBuilder) -> None:
    html_builder.write({"group__pkg__component__extra.html": "<p>body</p>\n"})
    resolver = EntityAttributeResolver(html_builder.path())
    first = resolver.resolve("group__pkg__component__extra.html", "pkg_component_extra")
    second = resolver.resolve("group__pkg__component__extra.html", "pkg_component_extra")
    assert first == second == EntityAttributes(is_deprecated=False, is_private=True)
