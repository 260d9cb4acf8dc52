"""House naming rules for package groups, packages and components."""

from __future__ import annotations

import re

from .errors import NotAnEntityError

_PACKAGE_GROUP_PATTERN = re.compile(r"^(z_)?([el]_)?[a-z][a-z0-9]{2}$")
_COMPONENT_PATTERN = re.compile(
    r"^(?P<package>(?:[a-z]_)*[a-z][a-z0-9]{2,})_(?P<stem>[a-z0-9]+(?:_[a-z0-9]+)*)$"
)


def is_package_group_name(name: str) -> bool:
    """Return True for names such as ``bsl``, ``z_bae`` or ``e_ipc``."""
    return bool(_PACKAGE_GROUP_PATTERN.match(name))


def is_component(name: str) -> bool:
    """Return True when ``name`` has the ``<package>_<stem>`` component shape."""
    return bool(_COMPONENT_PATTERN.match(name))


def get_component_package(component: str) -> str:
    """Return the package that owns ``component``."""
    match = _COMPONENT_PATTERN.match(component)
    if match is None:
        raise NotAnEntityError(f"not component: {component}")
    return match.group("package")


__all__ = ["get_component_package", "is_component", "is_package_group_name"]
