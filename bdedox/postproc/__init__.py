"""Text rewrites applied to generated HTML pages."""

from .annotator import GroupFileAnnotator
from .markup import MarkupEditor

__all__ = ["GroupFileAnnotator", "MarkupEditor"]
