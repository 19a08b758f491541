"""High-level orchestration for offline documentation generation.

This module wires the manifest loader, content resolver, and page assembler
together. :class:`OfflineDocsGenerator` loads the manifest once per run,
resolves every local document, renders the page shell, and writes the result
to disk. Manifest and output failures are fatal; per-document problems degrade
inside the resolver and never abort the run.

Example
-------
>>> from pathlib import Path
>>> from offline_docs.generator import OfflineDocsGenerator
>>> generator = OfflineDocsGenerator(Path("_data/docs.yml"), Path("."))  # doctest: +SKIP
>>> generator.run(Path("offline-docs.html"))  # doctest: +SKIP
PosixPath('offline-docs.html')
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from ._constants import SUCCESS_MESSAGE
from .assembler import PageAssembler, load_page_template
from .manifest import OfflineDocsError, load_manifest
from .resolver import ContentResolver, HtmlContentRenderer

if typ.TYPE_CHECKING:
    from jinja2 import Template

logger = logging.getLogger(__name__)


class OutputWriteError(OfflineDocsError):
    """Raised when the generated page cannot be written to its destination."""


class OfflineDocsGenerator:
    """Load a manifest and emit the assembled offline HTML page."""

    def __init__(
        self,
        manifest_path: Path,
        base_dir: Path,
        *,
        template: Template | None = None,
        pygments_style: str = "default",
    ) -> None:
        """Initialize the generator.

        Parameters
        ----------
        manifest_path : Path
            YAML manifest listing sections and documents.
        base_dir : Path
            Directory every manifest url is resolved against.
        template : Template, optional
            Page shell; defaults to the packaged ``offline_page.jinja``.
        pygments_style : str, optional
            Pygments style applied to highlighted code blocks.
        """
        self.manifest_path = Path(manifest_path)
        self.base_dir = Path(base_dir)
        self.template = template or load_page_template()
        self.renderer = HtmlContentRenderer(pygments_style)

    def build(self) -> str:
        """Return the complete HTML document.

        Raises
        ------
        ManifestLoadError
            If the manifest is missing or structurally invalid.
        """
        manifest = load_manifest(self.manifest_path)
        resolver = ContentResolver(
            renderer=self.renderer, known_urls=manifest.local_urls()
        )
        assembler = PageAssembler(self.template, resolver=resolver)
        sidebar = assembler.build_sidebar(manifest)
        content = assembler.build_content(manifest, self.base_dir)
        return assembler.render(sidebar, content)

    def run(self, output_path: Path) -> Path:
        """Render the page and write it to ``output_path``.

        Returns
        -------
        Path
            The path that was written.

        Raises
        ------
        ManifestLoadError
            If the manifest is missing or structurally invalid.
        OutputWriteError
            If the output directory or file cannot be written.
        """
        html = self.build()
        if not html.endswith("\n"):
            html += "\n"
        output_path = Path(output_path)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(html, encoding="utf-8")
        except OSError as exc:
            msg = f"Could not write documentation to '{output_path}': {exc}"
            raise OutputWriteError(msg) from exc
        logger.info(SUCCESS_MESSAGE, output_path)
        return output_path


__all__ = ["OfflineDocsGenerator", "OutputWriteError"]
