"""Render Markdown documents into self-contained HTML fragments.

Code fences are highlighted by Pygments with inline styles, and each
highlighted block is tagged with a ``data-language`` attribute taken from its
fence label so readers (and page scripts) can tell blocks apart.
"""

from __future__ import annotations

import logging
import re
import typing as typ

from bs4 import BeautifulSoup
from markdown import Markdown
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

if typ.TYPE_CHECKING:
    from markdown.extensions import Extension
else:  # pragma: no cover - type-checking fallback
    Extension = typ.Any

FENCE_OPEN_PATTERN = re.compile(r"^ {0,3}(?P<fence>`{3,}|~{3,})[ \t]*(?P<info>.*)$")
LANGUAGE_TOKEN_PATTERN = re.compile(r"[\w#+.-]*")
DEFAULT_LANGUAGE = "text"

logger = logging.getLogger(__name__)


def _fence_language(info: str) -> str:
    """Return the language named by a fence info string such as ``rust,no_run``."""
    token = LANGUAGE_TOKEN_PATTERN.match(info.lstrip("{."))
    return token.group(0) if token else ""


def _is_closing_fence(line: str, fence: str) -> bool:
    stripped = line.strip()
    return (
        len(stripped) >= len(fence)
        and set(stripped) == {fence[0]}
        and len(line) - len(line.lstrip(" ")) <= 3
    )


def scan_fences(text: str) -> tuple[str, list[str]]:
    """Prepare fenced blocks for ``fenced_code`` and list their languages.

    Opening fences lose up to three spaces of indentation and any attributes
    after the language token, which ``fenced_code`` would otherwise reject.
    Block bodies are left untouched.

    Parameters
    ----------
    text : str
        Markdown source.

    Returns
    -------
    tuple[str, list[str]]
        The normalised source and, in document order, the language of every
        closed fence (``"text"`` when unlabelled).
    """
    lines: list[str] = []
    languages: list[str] = []
    fence: str | None = None
    language = ""
    for line in text.splitlines(keepends=True):
        body = line.rstrip("\r\n")
        ending = line[len(body) :]
        if fence is None:
            opening = FENCE_OPEN_PATTERN.match(body)
            if opening and "`" not in opening["info"]:
                fence = opening["fence"]
                language = _fence_language(opening["info"])
                lines.append(f"{fence}{language}{ending}")
                continue
        elif _is_closing_fence(body, fence):
            languages.append(language or DEFAULT_LANGUAGE)
            lines.append(f"{body.strip()}{ending}")
            fence = None
            continue
        lines.append(line)
    return "".join(lines), languages


def tag_code_languages(html: str, languages: typ.Sequence[str]) -> str:
    """Set ``data-language`` on highlighted blocks, pairing them in order."""
    if not languages:
        return html
    soup = BeautifulSoup(html, "html.parser")
    blocks = soup.find_all("div", class_="codehilite")
    for block, language in zip(blocks, languages, strict=False):
        block["data-language"] = language
    if len(blocks) != len(languages):
        logger.debug(
            "Found %d highlighted blocks for %d fences", len(blocks), len(languages)
        )
    return soup.decode()


class HtmlContentRenderer:
    """Convert Markdown to HTML with inline-styled syntax highlighting."""

    def __init__(self, pygments_style: str = "default") -> None:
        """Initialize the renderer.

        Parameters
        ----------
        pygments_style : str, optional
            Pygments style for code blocks. Unknown names fall back to
            ``"default"`` with a warning.
        """
        try:
            get_style_by_name(pygments_style)
        except ClassNotFound:
            logger.warning("Unknown Pygments style %r; using default", pygments_style)
            pygments_style = "default"
        self.pygments_style = pygments_style

    def _build_markdown(self, link_extension: Extension | None) -> Markdown:
        extensions: list[Extension | str] = [
            "fenced_code",
            "codehilite",
            "tables",
            "sane_lists",
        ]
        if link_extension is not None:
            extensions.append(link_extension)
        return Markdown(
            extensions=extensions,
            extension_configs={
                "codehilite": {
                    "css_class": "codehilite",
                    "guess_lang": False,
                    "linenums": False,
                    "noclasses": True,
                    "pygments_style": self.pygments_style,
                }
            },
        )

    def markdown(self, text: str, *, link_extension: Extension | None = None) -> str:
        """Render ``text`` to an HTML fragment.

        Parameters
        ----------
        text : str
            Markdown source with any front matter already removed.
        link_extension : Extension, optional
            Per-document extension, typically the in-page link rewriter.

        Returns
        -------
        str
            Rendered HTML, or ``""`` when ``text`` is blank.
        """
        if not text.strip():
            return ""
        source, languages = scan_fences(text)
        html = self._build_markdown(link_extension).convert(source)
        return tag_code_languages(html, languages)


__all__ = ["HtmlContentRenderer", "scan_fences", "tag_code_languages"]
