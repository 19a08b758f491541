"""Derive navigation anchors from manifest urls.

Anchor ids serve both as the ``id`` of a rendered content block and as the
``#fragment`` target of its sidebar link, so the derivation must stay a pure
function of the url.

Examples
--------
>>> derive_anchor_id("/en/getting-started.md")
'getting-started.md'
>>> derive_anchor_id("/guides/setup/")
'-guides-setup'
>>> is_external_url("https://example.com/docs")
True
"""

from __future__ import annotations

from ._constants import EXTERNAL_SCHEMES, LOCALE_PREFIX


def derive_anchor_id(url: str) -> str:
    """Return the element id used for ``url`` in the assembled page.

    Parameters
    ----------
    url : str
        Manifest url of the document.

    Returns
    -------
    str
        ``url`` without a leading ``/en/`` segment, with every ``/`` replaced
        by ``-`` and a single leading ``.`` and trailing ``-`` removed.

    Notes
    -----
    Distinct urls may map to the same id (``/a-b`` and ``/a/b``); collisions
    are not deduplicated.
    """
    anchor = url.removeprefix(LOCALE_PREFIX).replace("/", "-")
    return anchor.removeprefix(".").removesuffix("-")


def is_external_url(url: str) -> bool:
    """Return True when ``url`` points at an http(s) resource."""
    return url.lower().startswith(EXTERNAL_SCHEMES)


__all__ = ["derive_anchor_id", "is_external_url"]
