"""Parsing and tree-splicing helpers shared by the expander stages."""

from __future__ import annotations

import typing as typ

from bs4 import BeautifulSoup
from bs4.element import Comment, NavigableString, PageElement, PreformattedString

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from bs4.element import Tag

PARSER = "html.parser"


def parse_html(text: str) -> BeautifulSoup:
    """Parse ``text`` into a tree without html/body wrappers.

    Multi-valued attributes such as ``class`` are kept as plain strings so
    placeholders spanning whitespace (``class="btn {{ variant }}"``) survive
    parsing intact.
    """
    return BeautifulSoup(text, PARSER, multi_valued_attributes=None)


def _is_plain_string(node: PageElement) -> bool:
    return isinstance(node, NavigableString) and not isinstance(
        node, PreformattedString
    )


def _is_blank(node: PageElement) -> bool:
    return _is_plain_string(node) and not str(node).strip()


def has_content(nodes: cabc.Iterable[PageElement]) -> bool:
    """Return ``True`` when ``nodes`` hold anything besides whitespace and comments."""
    return any(not (_is_blank(node) or isinstance(node, Comment)) for node in nodes)


def trimmed_contents(tag: Tag) -> list[PageElement]:
    """Return ``tag``'s children with surrounding whitespace trimmed.

    Whitespace-only text at either end is dropped and the outermost remaining
    text nodes are stripped on their outer side. The returned nodes are still
    attached to ``tag``; splicing them elsewhere moves them.
    """
    nodes: list[PageElement] = list(tag.contents)
    while nodes and _is_blank(nodes[0]):
        nodes.pop(0)
    while nodes and _is_blank(nodes[-1]):
        nodes.pop()
    if not nodes:
        return []
    if _is_plain_string(nodes[0]):
        stripped = NavigableString(str(nodes[0]).lstrip())
        nodes[0].replace_with(stripped)
        nodes[0] = stripped
    if _is_plain_string(nodes[-1]):
        stripped = NavigableString(str(nodes[-1]).rstrip())
        nodes[-1].replace_with(stripped)
        nodes[-1] = stripped
    return nodes


def splice(node: Tag, replacement: cabc.Iterable[PageElement]) -> None:
    """Replace ``node`` with ``replacement``, keeping sibling order."""
    for item in list(replacement):
        node.insert_before(item)
    node.decompose()


__all__ = ["PARSER", "has_content", "parse_html", "splice", "trimmed_contents"]
