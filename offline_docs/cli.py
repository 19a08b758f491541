"""Cyclopts CLI entrypoint for building the offline documentation page.

The ``offline-docs`` console script reads a YAML manifest, resolves every local
document beneath a base directory, and writes one self-contained HTML file.
Every option can also be supplied through an ``INPUT_``-prefixed environment
variable, which keeps CI invocations short.

Examples
--------
Build the page from the default manifest location:

>>> from offline_docs.cli import main
>>> main()  # doctest: +SKIP

Build from a custom manifest into a custom output file:

>>> from offline_docs.cli import app
>>> app(
...     ["generate", "--manifest", "_data/docs.yml", "--output", "dist/docs.html"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter
from jinja2 import TemplateError

from .assembler import load_page_template
from .generator import OfflineDocsGenerator
from .logging_config import configure_logging
from .manifest import OfflineDocsError

DEFAULT_MANIFEST = Path("_data/docs.yml")
DEFAULT_BASE_DIR = Path()
DEFAULT_OUTPUT = Path("offline-docs.html")

logger = logging.getLogger(__name__)

app = App(name="offline-docs", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


@app.command(help="Assemble manifest documents into a single offline HTML page.")
def generate(
    *,
    manifest: typ.Annotated[
        Path, Parameter(help="Path to the docs manifest", env_var="INPUT_MANIFEST")
    ] = DEFAULT_MANIFEST,
    base_dir: typ.Annotated[
        Path,
        Parameter(help="Directory manifest urls are relative to", env_var="INPUT_BASE_DIR"),
    ] = DEFAULT_BASE_DIR,
    output: typ.Annotated[
        Path, Parameter(help="Where to write the HTML page", env_var="INPUT_OUTPUT")
    ] = DEFAULT_OUTPUT,
    template: typ.Annotated[
        Path | None,
        Parameter(help="Custom page template", env_var="INPUT_TEMPLATE"),
    ] = None,
    pygments_style: typ.Annotated[
        str,
        Parameter(help="Pygments style for code blocks", env_var="INPUT_PYGMENTS_STYLE"),
    ] = "default",
) -> None:
    """Generate the offline documentation page.

    Parameters
    ----------
    manifest : Path, optional
        YAML manifest with a top-level ``docs`` list (``INPUT_MANIFEST``).
    base_dir : Path, optional
        Root directory for document urls (``INPUT_BASE_DIR``).
    output : Path, optional
        Destination HTML file; parent directories are created
        (``INPUT_OUTPUT``).
    template : Path or None, optional
        Jinja page template exposing ``sidebar_content`` and ``main_content``;
        defaults to the packaged shell (``INPUT_TEMPLATE``).
    pygments_style : str, optional
        Pygments style name used for highlighted code (``INPUT_PYGMENTS_STYLE``).

    Raises
    ------
    SystemExit
        With status 1 when the manifest cannot be loaded or the output cannot
        be written. Missing or unreadable documents do not affect the status.
    """
    configure_logging()
    try:
        page_template = load_page_template(template) if template else None
        generator = OfflineDocsGenerator(
            manifest,
            base_dir,
            template=page_template,
            pygments_style=pygments_style,
        )
        generator.run(output)
    except (OfflineDocsError, TemplateError) as exc:
        logger.error("%s", exc)
        raise SystemExit(1) from exc


def main() -> None:
    """Invoke the Cyclopts application that powers the ``offline-docs`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
