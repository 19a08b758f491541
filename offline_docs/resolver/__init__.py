"""Utilities for reading, detecting, and converting documentation sources."""

from .content_resolver import ContentResolver, ResolvedContent, resolve
from .formats import FormatRule, default_rules
from .link_rewriter import AnchorLinkExtension
from .renderer import HtmlContentRenderer

__all__ = [
    "AnchorLinkExtension",
    "ContentResolver",
    "FormatRule",
    "HtmlContentRenderer",
    "ResolvedContent",
    "default_rules",
    "resolve",
]
