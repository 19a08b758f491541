"""Typed dataclasses describing the documentation manifest."""

from __future__ import annotations

import dataclasses as dc

from offline_docs.anchors import derive_anchor_id, is_external_url


class OfflineDocsError(Exception):
    """Base class for fatal offline documentation errors."""


class ManifestLoadError(OfflineDocsError, ValueError):
    """Raised when the manifest is missing, unreadable, or structurally invalid."""


@dc.dataclass(frozen=True, slots=True)
class DocumentRef:
    """A single manifest entry pointing at one source document.

    Attributes
    ----------
    page_title : str
        Heading and sidebar label for the document.
    url : str
        Path of the source relative to the base directory, or an http(s)
        link for external entries.
    sidebar_exclude : bool
        Hide the entry from the sidebar while still rendering its content.
    """

    page_title: str
    url: str
    sidebar_exclude: bool = False

    @property
    def anchor_id(self) -> str:
        """Return the navigation anchor derived from the url."""
        return derive_anchor_id(self.url)

    @property
    def is_external(self) -> bool:
        """Return True when the entry links out and has no offline body."""
        return is_external_url(self.url)


@dc.dataclass(slots=True)
class Section:
    """Titled group of documents, kept in manifest order."""

    title: str
    documents: list[DocumentRef] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class Manifest:
    """Ordered sections driving sidebar and content generation."""

    sections: list[Section] = dc.field(default_factory=list)

    def documents(self) -> list[DocumentRef]:
        """Return every DocumentRef in manifest order."""
        return [doc for section in self.sections for doc in section.documents]

    def local_urls(self) -> set[str]:
        """Return the urls of documents that are rendered into the page."""
        return {doc.url for doc in self.documents() if not doc.is_external}


__all__ = [
    "DocumentRef",
    "Manifest",
    "ManifestLoadError",
    "OfflineDocsError",
    "Section",
]
