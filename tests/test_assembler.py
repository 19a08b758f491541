"""Unit tests for sidebar and content assembly.

These tests drive :class:`offline_docs.assembler.PageAssembler` with manifests
built in code and a minimal stub page template, checking link eligibility,
ordering, the treatment of external urls, and slot substitution. Generated
markup is inspected with BeautifulSoup rather than compared byte for byte.
"""

from __future__ import annotations

import typing as typ

import pytest
from bs4 import BeautifulSoup
from jinja2 import Template

from offline_docs.assembler import PageAssembler, load_page_template
from offline_docs.manifest import DocumentRef, Manifest, Section

if typ.TYPE_CHECKING:
    from pathlib import Path

STUB_TEMPLATE = "<nav>{{ sidebar_content }}</nav><main>{{ main_content }}</main>"


@pytest.fixture
def manifest() -> Manifest:
    """Return a manifest mixing visible, excluded, external, and empty entries."""
    return Manifest(
        sections=[
            Section(
                title="Getting Started",
                documents=[
                    DocumentRef("Welcome", "/en/welcome.md"),
                    DocumentRef("Changelog", "/en/changelog.html", sidebar_exclude=True),
                    DocumentRef("Setup", "/en/guide/setup.md"),
                ],
            ),
            Section(title="Coming Soon", documents=[]),
            Section(
                title="Links",
                documents=[
                    DocumentRef("Website", "https://example.com/"),
                    DocumentRef("Hidden site", "http://example.org", sidebar_exclude=True),
                ],
            ),
        ]
    )


@pytest.fixture
def base_dir(tmp_path: Path) -> Path:
    """Write sources for the local documents, leaving setup.md missing."""
    (tmp_path / "en").mkdir()
    (tmp_path / "en" / "welcome.md").write_text(
        "---\ntitle: Welcome\n---\nHello **reader**.\n", encoding="utf-8"
    )
    (tmp_path / "en" / "changelog.html").write_text(
        "<html><body><ul><li>1.0</li></ul></body></html>", encoding="utf-8"
    )
    return tmp_path


@pytest.fixture
def assembler() -> PageAssembler:
    """Return an assembler using the stub page template."""
    return PageAssembler(Template(STUB_TEMPLATE))


def test_sidebar_links_follow_manifest_order(
    assembler: PageAssembler, manifest: Manifest
) -> None:
    """One nav link per non-excluded document, in manifest order."""
    soup = BeautifulSoup(assembler.build_sidebar(manifest), "html.parser")
    links = [(a["href"], a.get_text()) for a in soup.select("a.nav-link")]
    assert links == [
        ("#welcome.md", "Welcome"),
        ("#guide-setup.md", "Setup"),
        ("#https:--example.com", "Website"),
    ]


def test_sidebar_renders_sections_without_links(
    assembler: PageAssembler, manifest: Manifest
) -> None:
    """Sections with no eligible links still render their titles."""
    soup = BeautifulSoup(assembler.build_sidebar(manifest), "html.parser")
    titles = [div.get_text() for div in soup.select("div.section > div.section-title")]
    assert titles == ["Getting Started", "Coming Soon", "Links"]
    empty = soup.select("div.section")[1]
    assert empty.find("a") is None


def test_content_skips_external_urls(
    assembler: PageAssembler, manifest: Manifest, base_dir: Path
) -> None:
    """Content blocks exist for local documents only, including excluded ones."""
    soup = BeautifulSoup(assembler.build_content(manifest, base_dir), "html.parser")
    blocks = soup.select("div.content-section")
    assert [block["id"] for block in blocks] == [
        "welcome.md",
        "changelog.html",
        "guide-setup.md",
    ]
    assert [block.h1.get_text() for block in blocks] == ["Welcome", "Changelog", "Setup"]
    assert "example.com" not in str(soup)
    assert "example.org" not in str(soup)


def test_content_embeds_resolved_fragments(
    assembler: PageAssembler, manifest: Manifest, base_dir: Path
) -> None:
    """Each block holds the heading followed by the converted fragment."""
    soup = BeautifulSoup(assembler.build_content(manifest, base_dir), "html.parser")
    welcome = soup.find(id="welcome.md")
    assert welcome.find("strong").get_text() == "reader"
    changelog = soup.find(id="changelog.html")
    assert changelog.find("li").get_text() == "1.0"
    setup = soup.find(id="guide-setup.md")
    assert "Content not found for: /en/guide/setup.md" in setup.get_text()


def test_titles_are_escaped(assembler: PageAssembler, tmp_path: Path) -> None:
    """Page and section titles are text, not markup."""
    manifest = Manifest(
        sections=[Section("Q&A <beta>", [DocumentRef("Tips & <tricks>", "tips.md")])]
    )
    sidebar = assembler.build_sidebar(manifest)
    content = assembler.build_content(manifest, tmp_path)
    assert "Q&amp;A &lt;beta&gt;" in sidebar
    assert "Tips &amp; &lt;tricks&gt;" in content
    soup = BeautifulSoup(content, "html.parser")
    assert soup.h1.get_text() == "Tips & <tricks>"


def test_render_substitutes_both_slots_verbatim(assembler: PageAssembler) -> None:
    """render() inserts markup into the stub template without escaping."""
    html = assembler.render('<a href="#x">X</a>', "<p>Body & more</p>")
    assert html == '<nav><a href="#x">X</a></nav><main><p>Body & more</p></main>'


def test_packaged_template_exposes_slots(manifest: Manifest, base_dir: Path) -> None:
    """The default page shell places sidebar and content in their containers."""
    assembler = PageAssembler(load_page_template())
    html = assembler.render(
        assembler.build_sidebar(manifest), assembler.build_content(manifest, base_dir)
    )
    soup = BeautifulSoup(html, "html.parser")
    assert soup.title.get_text() == "Documentation"
    assert len(soup.select("nav.sidebar a.nav-link")) == 3
    assert len(soup.select("main.main-content div.content-section")) == 3


def test_custom_template_file(tmp_path: Path) -> None:
    """load_page_template accepts a template path outside the package."""
    path = tmp_path / "shell.html"
    path.write_text("[{{ sidebar_content }}|{{ main_content }}]", encoding="utf-8")
    assembler = PageAssembler(load_page_template(path))
    assert assembler.render("<b>s</b>", "<i>m</i>") == "[<b>s</b>|<i>m</i>]"


def test_output_is_deterministic(
    assembler: PageAssembler, manifest: Manifest, base_dir: Path
) -> None:
    """Repeated assembly over unchanged inputs produces identical markup."""
    first = assembler.render(
        assembler.build_sidebar(manifest), assembler.build_content(manifest, base_dir)
    )
    second = assembler.render(
        assembler.build_sidebar(manifest), assembler.build_content(manifest, base_dir)
    )
    assert first == second
