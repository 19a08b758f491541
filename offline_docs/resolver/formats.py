r"""Detect document formats and convert sources into HTML fragments.

Format detection is an ordered chain of :class:`FormatRule` entries: the first
rule whose predicate accepts the document converts it. New formats are added
by inserting rules rather than editing existing ones.

Example
-------
>>> rules = default_rules(lambda text, url: f"<md>{text}</md>")
>>> select_rule(rules, "notes.txt", "plain text").name
'passthrough'
>>> strip_front_matter("---\ntitle: Intro\n---\n# Intro\n")
'# Intro\n'
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import re

from bs4 import BeautifulSoup

FRONT_MATTER_PATTERN = re.compile(r"\A---\n.*?^---\n", re.DOTALL | re.MULTILINE)
MARKDOWN_HEADING_PATTERN = re.compile(r"^#\s", re.MULTILINE)

Predicate = cabc.Callable[[str, str], bool]
Converter = cabc.Callable[[str, str], str]


@dc.dataclass(frozen=True, slots=True)
class FormatRule:
    """Pair a format predicate with the converter that handles it.

    Attributes
    ----------
    name : str
        Short label used in log messages and tests.
    matches : Callable[[str, str], bool]
        Receives ``(url, content)`` and returns True when the rule applies.
    convert : Callable[[str, str], str]
        Receives ``(content, url)`` and returns the HTML fragment.
    """

    name: str
    matches: Predicate
    convert: Converter


def strip_front_matter(content: str) -> str:
    """Remove a leading ``---`` delimited metadata block, if present."""
    return FRONT_MATTER_PATTERN.sub("", content, count=1)


def extract_body(content: str) -> str:
    """Return the inner markup of ``<body>``, or ``content`` when there is none."""
    soup = BeautifulSoup(content, "html.parser")
    body = soup.body
    if body is None:
        return content
    return body.decode_contents()


def looks_like_markdown(content: str) -> bool:
    """Return True when any line opens with a ``#`` heading marker."""
    return MARKDOWN_HEADING_PATTERN.search(content) is not None


def _passthrough(content: str, _url: str) -> str:
    return content


def default_rules(render_markdown: Converter) -> list[FormatRule]:
    """Return the built-in detection chain, in priority order.

    Parameters
    ----------
    render_markdown : Callable[[str, str], str]
        Converter used for every rule that treats content as Markdown.

    Returns
    -------
    list[FormatRule]
        ``.md`` extension, ``.html`` extension, Markdown heading heuristic,
        then an unconditional passthrough.
    """
    return [
        FormatRule(
            name="markdown",
            matches=lambda url, _content: url.endswith(".md"),
            convert=render_markdown,
        ),
        FormatRule(
            name="html",
            matches=lambda url, _content: url.endswith(".html"),
            convert=lambda content, _url: extract_body(content),
        ),
        FormatRule(
            name="markdown-heading",
            matches=lambda _url, content: looks_like_markdown(content),
            convert=render_markdown,
        ),
        FormatRule(
            name="passthrough",
            matches=lambda _url, _content: True,
            convert=_passthrough,
        ),
    ]


def select_rule(
    rules: cabc.Sequence[FormatRule], url: str, content: str
) -> FormatRule | None:
    """Return the first rule accepting ``url``/``content``, or None."""
    return next((rule for rule in rules if rule.matches(url, content)), None)


__all__ = [
    "FRONT_MATTER_PATTERN",
    "FormatRule",
    "default_rules",
    "extract_body",
    "looks_like_markdown",
    "select_rule",
    "strip_front_matter",
]
