"""Assemble resolved documents into the single offline documentation page.

``PageAssembler`` walks a :class:`~offline_docs.manifest.Manifest`, builds the
sidebar navigation and the main content column, and substitutes both into the
page template's ``sidebar_content`` and ``main_content`` slots. The page
template is injected at construction, so tests can pass a minimal stub while
the CLI uses the packaged ``offline_page.jinja`` shell.

Typical usage:

>>> from pathlib import Path
>>> from offline_docs.assembler import PageAssembler, load_page_template
>>> from offline_docs.manifest import load_manifest
>>> manifest = load_manifest(Path("_data/docs.yml"))  # doctest: +SKIP
>>> assembler = PageAssembler(load_page_template())  # doctest: +SKIP
>>> html = assembler.render(
...     assembler.build_sidebar(manifest),
...     assembler.build_content(manifest, Path(".")),
... )  # doctest: +SKIP

Output contains no timestamps, so repeated runs over unchanged inputs are
byte-identical.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, Template, select_autoescape
from markupsafe import Markup

from ._constants import (
    CONTENT_SECTION_TEMPLATE_NAME,
    PAGE_TEMPLATE_NAME,
    SIDEBAR_TEMPLATE_NAME,
)
from .resolver import ContentResolver

if typ.TYPE_CHECKING:
    from .manifest import Manifest

TEMPLATES_DIR = Path(__file__).parent / "templates"


def _build_environment(templates_dir: Path) -> Environment:
    return Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=select_autoescape(["html", "xml", "jinja"]),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def load_page_template(path: Path | None = None) -> Template:
    """Load the page shell exposing ``sidebar_content`` and ``main_content``.

    Parameters
    ----------
    path : Path, optional
        Custom Jinja template file. Defaults to the packaged
        ``offline_page.jinja``.

    Returns
    -------
    Template
        Compiled template ready to inject into :class:`PageAssembler`.
    """
    if path is None:
        return _build_environment(TEMPLATES_DIR).get_template(PAGE_TEMPLATE_NAME)
    return _build_environment(path.parent).get_template(path.name)


class PageAssembler:
    """Build sidebar and content markup and render them into the page shell."""

    def __init__(
        self,
        template: Template,
        *,
        resolver: ContentResolver | None = None,
        partials_dir: Path | None = None,
    ) -> None:
        """Initialize the assembler.

        Parameters
        ----------
        template : Template
            Page shell rendered with ``sidebar_content`` and ``main_content``.
        resolver : ContentResolver, optional
            Resolver used for each local document; defaults to a resolver
            without cross-document link rewriting.
        partials_dir : Path, optional
            Directory holding ``sidebar.jinja`` and ``content_section.jinja``;
            defaults to the packaged templates.
        """
        self.template = template
        self.resolver = resolver or ContentResolver()
        env = _build_environment(partials_dir or TEMPLATES_DIR)
        self._sidebar_template = env.get_template(SIDEBAR_TEMPLATE_NAME)
        self._section_template = env.get_template(CONTENT_SECTION_TEMPLATE_NAME)

    def build_sidebar(self, manifest: Manifest) -> str:
        """Return navigation markup for every section and non-excluded document.

        Sections without eligible links still render their title.
        """
        return self._sidebar_template.render(sections=manifest.sections)

    def build_content(self, manifest: Manifest, base_dir: Path) -> str:
        """Return one content block per local document, in manifest order.

        Parameters
        ----------
        manifest : Manifest
            Loaded manifest to walk.
        base_dir : Path
            Directory the document urls are relative to.

        Returns
        -------
        str
            Concatenated ``content-section`` blocks. Documents with http(s)
            urls are skipped whether or not they appear in the sidebar.
        """
        blocks: list[str] = []
        for section in manifest.sections:
            for doc in section.documents:
                if doc.is_external:
                    continue
                resolved = self.resolver.resolve(base_dir, doc)
                blocks.append(
                    self._section_template.render(
                        anchor_id=resolved.anchor_id,
                        title=doc.page_title,
                        fragment=Markup(resolved.html_fragment),
                    )
                )
        return "\n".join(blocks)

    def render(self, sidebar_html: str, content_html: str) -> str:
        """Substitute sidebar and content markup into the page template."""
        return self.template.render(
            sidebar_content=Markup(sidebar_html),
            main_content=Markup(content_html),
        )


__all__ = ["TEMPLATES_DIR", "PageAssembler", "load_page_template"]
