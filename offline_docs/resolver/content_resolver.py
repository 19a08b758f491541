"""Resolve manifest entries into HTML fragments ready for embedding.

:class:`ContentResolver` reads a document from the base directory, strips any
front matter, picks a converter from the format-rule chain, and returns the
fragment together with the document's navigation anchor. Resolution never
raises for a well-formed :class:`~offline_docs.manifest.DocumentRef`: missing,
unreadable, or unconvertible sources degrade to a labelled placeholder
paragraph and a log record so one broken entry cannot block the rest of the
page.

Example
-------
>>> from pathlib import Path
>>> from offline_docs.manifest import DocumentRef
>>> from offline_docs.resolver import resolve
>>> doc = DocumentRef(page_title="Missing", url="/en/missing.md")
>>> resolve(Path("/nonexistent"), doc).html_fragment
'<p>Content not found for: /en/missing.md</p>'
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import logging
from html import escape
from pathlib import Path

from offline_docs._constants import LOAD_ERROR_TEMPLATE, NOT_FOUND_TEMPLATE
from offline_docs.anchors import derive_anchor_id
from offline_docs.manifest import DocumentRef

from .formats import FormatRule, default_rules, select_rule, strip_front_matter
from .link_rewriter import _build_link_rewriter
from .renderer import HtmlContentRenderer

logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class ResolvedContent:
    """HTML fragment for one document plus the anchor it is filed under."""

    anchor_id: str
    html_fragment: str


class ContentResolver:
    """Turn DocumentRefs into HTML fragments using an ordered format chain."""

    def __init__(
        self,
        *,
        renderer: HtmlContentRenderer | None = None,
        known_urls: cabc.Collection[str] = (),
        rules: cabc.Sequence[FormatRule] | None = None,
    ) -> None:
        """Initialize the resolver.

        Parameters
        ----------
        renderer : HtmlContentRenderer, optional
            Markdown renderer; defaults to one using the ``"default"`` Pygments
            style.
        known_urls : Collection[str], optional
            Urls of documents rendered into the same page. Relative Markdown
            links to any of them are rewritten to in-page anchors.
        rules : Sequence[FormatRule], optional
            Format detection chain; defaults to :func:`default_rules`.
        """
        self.renderer = renderer or HtmlContentRenderer()
        self.known_urls = frozenset(known_urls)
        if rules is None:
            rules = default_rules(self._render_markdown)
        self.rules = list(rules)

    def resolve(self, base_dir: Path, doc_ref: DocumentRef) -> ResolvedContent:
        """Return the anchor and HTML fragment for ``doc_ref``.

        Parameters
        ----------
        base_dir : Path
            Directory the manifest urls are relative to.
        doc_ref : DocumentRef
            Manifest entry to resolve.

        Returns
        -------
        ResolvedContent
            Converted fragment, or a placeholder paragraph naming the url when
            the source is missing, unreadable, or fails to convert.
        """
        url = doc_ref.url
        anchor_id = derive_anchor_id(url)
        full_path = Path(base_dir) / url.lstrip("/")
        try:
            raw = full_path.read_text(encoding="utf-8")
        except (FileNotFoundError, NotADirectoryError):
            logger.warning("File not found: %s", full_path)
            return ResolvedContent(anchor_id, _placeholder(NOT_FOUND_TEMPLATE, url))
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Error fetching content for %s: %s", url, exc)
            return ResolvedContent(anchor_id, _placeholder(LOAD_ERROR_TEMPLATE, url))
        try:
            fragment = self.convert(raw, url)
        except Exception:
            logger.exception("Error converting content for %s", url)
            fragment = _placeholder(LOAD_ERROR_TEMPLATE, url)
        return ResolvedContent(anchor_id, fragment)

    def convert(self, content: str, url: str) -> str:
        """Strip front matter from ``content`` and convert it by format."""
        stripped = strip_front_matter(content)
        rule = select_rule(self.rules, url, stripped)
        if rule is None:
            return stripped
        logger.debug("Converting %s as %s", url, rule.name)
        return rule.convert(stripped, url)

    def _render_markdown(self, content: str, url: str) -> str:
        extension = _build_link_rewriter(url, self.known_urls)
        return self.renderer.markdown(content, link_extension=extension)


def _placeholder(template: str, url: str) -> str:
    """Wrap a degraded-content message naming ``url`` in a paragraph."""
    return f"<p>{escape(template.format(url=url), quote=False)}</p>"


_DEFAULT_RESOLVER = ContentResolver()


def resolve(base_dir: Path, doc_ref: DocumentRef) -> ResolvedContent:
    """Resolve ``doc_ref`` with the default resolver configuration."""
    return _DEFAULT_RESOLVER.resolve(base_dir, doc_ref)


__all__ = ["ContentResolver", "ResolvedContent", "resolve"]
