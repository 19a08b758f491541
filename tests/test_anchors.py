"""Unit tests for anchor-id derivation and external url detection."""

from __future__ import annotations

import pytest

from offline_docs.anchors import derive_anchor_id, is_external_url
from offline_docs.manifest import DocumentRef


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("/en/getting-started.md", "getting-started.md"),
        ("/guides/setup/", "-guides-setup"),
        ("/en/guide/setup.md", "guide-setup.md"),
        ("./notes.md", "-notes.md"),
        (".hidden.md", "hidden.md"),
        ("docs/en/page.md", "docs-en-page.md"),
        ("guides//", "guides-"),
    ],
)
def test_derive_anchor_id(url: str, expected: str) -> None:
    """Anchors strip /en/, dash-separate segments, and trim one '.' and one '-'."""
    assert derive_anchor_id(url) == expected


def test_colliding_urls_are_not_deduplicated() -> None:
    """Distinct urls may map to the same anchor; no suffix is appended."""
    assert derive_anchor_id("/en/a/b.md") == derive_anchor_id("/en/a-b.md")


def test_document_ref_exposes_anchor() -> None:
    """DocumentRef.anchor_id should delegate to derive_anchor_id."""
    doc = DocumentRef(page_title="Setup", url="/en/guide/setup.md")
    assert doc.anchor_id == "guide-setup.md"


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("https://example.com/docs", True),
        ("http://example.com", True),
        ("HTTPS://EXAMPLE.COM", True),
        ("/en/http-guide.md", False),
        ("httpdocs/intro.md", False),
    ],
)
def test_is_external_url(url: str, expected: bool) -> None:
    """Only http:// and https:// schemes mark a url as external."""
    assert is_external_url(url) is expected
