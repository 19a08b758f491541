"""Load the documentation manifest YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .models import DocumentRef, Manifest, ManifestLoadError, Section


def load_manifest(path: Path) -> Manifest:
    """Load the manifest describing sections, documents, and source urls.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML manifest (for example ``_data/docs.yml``).

    Returns
    -------
    Manifest
        Sections and documents in the order they appear in the file.

    Raises
    ------
    ManifestLoadError
        If the file does not exist, cannot be read or parsed, or lacks the
        ``docs`` list of sections with ``title``/``documents`` entries.

    Examples
    --------
    >>> from pathlib import Path
    >>> from offline_docs.manifest import load_manifest
    >>> manifest = load_manifest(Path("_data/docs.yml"))  # doctest: +SKIP
    >>> manifest.sections[0].title  # doctest: +SKIP
    'Getting Started'
    """
    path = Path(path)
    if not path.exists():
        msg = f"Manifest file '{path}' not found."
        raise ManifestLoadError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        with path.open("r", encoding="utf-8") as handle:
            loaded = loader.load(handle)
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Manifest file '{path}' could not be read: {exc}"
        raise ManifestLoadError(msg) from exc
    except YAMLError as exc:
        msg = f"Manifest file '{path}' is not valid YAML: {exc}"
        raise ManifestLoadError(msg) from exc

    if not isinstance(loaded, dict):
        msg = f"Manifest '{path}' must contain a top-level mapping."
        raise ManifestLoadError(msg)
    if "docs" not in loaded:
        msg = f"Manifest '{path}' is missing the top-level 'docs' key."
        raise ManifestLoadError(msg)
    sections_raw = loaded["docs"]
    if not isinstance(sections_raw, list):
        msg = f"Manifest '{path}': 'docs' must be a list of sections."
        raise ManifestLoadError(msg)

    sections = [
        _build_section(payload, index=idx, path=path)
        for idx, payload in enumerate(sections_raw)
    ]
    return Manifest(sections=sections)


def _build_section(payload: object, *, index: int, path: Path) -> Section:
    """Build a Section from one entry of the ``docs`` list."""
    match payload:
        case {"title": title, **rest} if title is not None:
            documents_raw = rest.get("documents") or []
        case _:
            msg = f"Manifest '{path}': section #{index + 1} needs a 'title'."
            raise ManifestLoadError(msg)
    if not isinstance(documents_raw, list):
        msg = f"Manifest '{path}': 'documents' of section {title!r} must be a list."
        raise ManifestLoadError(msg)
    documents = [
        _build_document(entry, section_title=str(title), path=path)
        for entry in documents_raw
    ]
    return Section(title=str(title), documents=documents)


def _build_document(
    payload: typ.Any, *, section_title: str, path: Path
) -> DocumentRef:
    """Build a DocumentRef from one entry of a section's ``documents`` list."""
    match payload:
        case {"url": str() as url, "page": page, **rest} if page is not None:
            exclude_raw = rest.get("sidebar_exclude")
        case _:
            msg = (
                f"Manifest '{path}': every document in section {section_title!r} "
                "needs a string 'url' and a 'page' title."
            )
            raise ManifestLoadError(msg)
    match exclude_raw:
        case None:
            sidebar_exclude = False
        case bool() as flag:
            sidebar_exclude = flag
        case other:
            msg = (
                f"Manifest '{path}': 'sidebar_exclude' of {url!r} must be "
                f"true or false, not {other!r}."
            )
            raise ManifestLoadError(msg)
    return DocumentRef(page_title=str(page), url=url, sidebar_exclude=sidebar_exclude)


load = load_manifest

__all__ = ["load", "load_manifest"]
