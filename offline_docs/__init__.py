"""Build a single self-contained HTML page from local documentation sources.

This package exposes the CLI entry points used by the ``offline-docs`` console
script, which reads a YAML manifest of sections and documents, converts each
Markdown or HTML source, and writes one offline page with sidebar navigation.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from offline_docs import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
