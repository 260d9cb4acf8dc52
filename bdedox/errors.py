"""Exception types raised while editing generated documentation."""

from __future__ import annotations


class BdeDoxError(RuntimeError):
    """Base class for unrecoverable editing failures."""


class FormatError(BdeDoxError):
    """Raised when a filename or line does not have an expected generator shape."""


class NotAnEntityError(BdeDoxError):
    """Raised when a name does not denote a documentable component."""


class UnexpectedSyntaxError(BdeDoxError):
    """Raised when a member-table row cannot be decomposed into kind and name."""


class ConfigError(BdeDoxError):
    """Raised when the configuration file cannot be parsed."""


__all__ = [
    "BdeDoxError",
    "ConfigError",
    "FormatError",
    "NotAnEntityError",
    "UnexpectedSyntaxError",
]
