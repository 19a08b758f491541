"""Helpers for rewriting cross-document markdown links to in-page anchors."""

from __future__ import annotations

import posixpath
import typing as typ
from urllib.parse import urlsplit

from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from offline_docs.anchors import derive_anchor_id

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from xml.etree.ElementTree import Element

    from markdown import Markdown
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any
    Element = typ.Any


def _build_link_rewriter(
    doc_url: str, known_urls: cabc.Collection[str]
) -> Extension | None:
    """Return an AnchorLinkExtension for ``doc_url`` or None without targets."""
    if not known_urls:
        return None
    return AnchorLinkExtension(doc_url, known_urls)


class AnchorLinkExtension(Extension):
    """Rewrite links between manifest documents to same-page anchors.

    Once every document is concatenated into one offline page, a link such as
    ``[Setup](../guides/setup.md)`` no longer has a file to point at. This
    extension resolves relative link targets against the linking document's
    directory and, when the result names another manifest document, replaces
    the href with ``#<anchor-id>``.
    """

    def __init__(self, doc_url: str, known_urls: cabc.Collection[str]) -> None:
        self.doc_url = doc_url
        self.base_dir = posixpath.dirname(doc_url)
        self.targets = {_normalize(url): derive_anchor_id(url) for url in known_urls}

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the anchor-link treeprocessor on the Markdown instance."""
        processor = AnchorLinkTreeprocessor(md, self.base_dir, self.targets)
        md.treeprocessors.register(processor, "offline_docs_anchor_links", 15)


class AnchorLinkTreeprocessor(Treeprocessor):
    """Point relative anchors at the sections they reference in the page."""

    def __init__(self, md: Markdown, base_dir: str, targets: dict[str, str]) -> None:
        super().__init__(md)
        self.base_dir = base_dir
        self.targets = targets

    def run(self, root: Element) -> Element:
        """Rewrite hrefs in the parsed markdown tree that name manifest documents."""
        for element in root.iter("a"):
            rewritten = self._rewrite(element.get("href"))
            if rewritten:
                element.set("href", rewritten)
        return root

    def _rewrite(self, target: str | None) -> str | None:
        """Return ``#anchor`` for a relative link to a known document, else None."""
        if not target or target.startswith(("#", "//")) or "://" in target:
            return None
        parsed = urlsplit(target)
        if parsed.scheme or parsed.netloc or not parsed.path:
            return None
        if parsed.path.startswith("/"):
            joined = parsed.path
        else:
            joined = posixpath.join(self.base_dir, parsed.path)
        anchor = self.targets.get(_normalize(joined))
        return f"#{anchor}" if anchor is not None else None


def _normalize(url: str) -> str:
    """Return ``url`` as a rooted, normalised posix path for comparisons."""
    return posixpath.normpath("/" + url.lstrip("/"))


__all__ = [
    "AnchorLinkExtension",
    "AnchorLinkTreeprocessor",
    "_build_link_rewriter",
]
