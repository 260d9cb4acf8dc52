"""Core data models shared across bdedox components."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, NamedTuple


class EntityKind(str, Enum):
    """Documentation-entity kind inferred from a generated filename."""

    CLASS_MEMBERS = "ClassMembers"
    CLASS = "Class"
    GROUP = "Group"
    HEADER_SOURCE = "HeaderSource"
    HEADER_REFERENCE = "HeaderReference"
    STRUCT_MEMBERS = "StructMembers"
    STRUCT = "Struct"
    NAMESPACE = "Namespace"
    INDEX = "Index"
    UNION_MEMBERS = "UnionMembers"
    UNION = "Union"
    UNRECOGNIZED = "Unrecognized"


class AggregationLevel(str, Enum):
    """Level of source aggregation implied by the shape of a bare entity name."""

    COMPONENT = "Component"
    PACKAGE = "Package"
    PACKAGE_GROUP = "Package Group"
    UNKNOWN = ""

    @property
    def label(self) -> str:
        return self.value


class Classification(NamedTuple):
    """Result of classifying a generated filename."""

    kind: EntityKind
    title: str


@dataclass(frozen=True)
class EntityAttributes:
    """Badge-relevant attributes of one referenced entity."""

    is_deprecated: bool = False
    is_private: bool = False

    @property
    def is_muted(self) -> bool:
        """True when the entity should be rendered in the muted style."""
        return self.is_deprecated or self.is_private


@dataclass
class MemberRow:
    """One linked entry of a group-listing member table."""

    line: str
    target: str
    label: str
    tokens: List[str]


__all__ = [
    "AggregationLevel",
    "Classification",
    "EntityAttributes",
    "EntityKind",
    "MemberRow",
]
