"""Load and model the manifest that drives offline documentation builds.

This subpackage parses the manifest YAML (a ``docs`` list of sections, each
with a ``title`` and ordered ``documents``), preserves the original ordering,
and produces typed dataclasses (:class:`Manifest`, :class:`Section`,
:class:`DocumentRef`) that the resolver and assembler consume. The primary
entry point is :func:`load_manifest`.

Examples
--------
>>> from pathlib import Path
>>> from offline_docs.manifest import load_manifest
>>> manifest = load_manifest(Path("_data/docs.yml"))  # doctest: +SKIP
>>> [doc.anchor_id for doc in manifest.documents()][:1]  # doctest: +SKIP
['getting-started.md']
"""

from .loader import load, load_manifest
from .models import DocumentRef, Manifest, ManifestLoadError, OfflineDocsError, Section

__all__ = [
    "DocumentRef",
    "Manifest",
    "ManifestLoadError",
    "OfflineDocsError",
    "Section",
    "load",
    "load_manifest",
]
