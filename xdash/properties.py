r"""Substitute ``{{ name }}`` placeholders inside a parsed fragment.

Substitution walks the fragment tree and rewrites text nodes and attribute
values only, so tag structure is never altered and property values are always
inserted as text. Placeholders without a matching property stay in place,
which lets a fragment be partially applied.

Example
-------
>>> from xdash.markup import parse_html
>>> tree = parse_html('<h1 title="{{title}}">{{ title }}</h1>')
>>> str(substitute_properties(tree, {"title": "Hi"}))
'<h1 title="Hi">Hi</h1>'
"""

from __future__ import annotations

import re
import typing as typ

from bs4.element import PreformattedString, Tag

if typ.TYPE_CHECKING:
    import collections.abc as cabc

PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*([A-Za-z_][A-Za-z0-9_-]*)\s*\}\}")


def find_placeholders(text: str) -> list[str]:
    """Return placeholder names in ``text`` in order of appearance."""
    return [match.group(1) for match in PLACEHOLDER_PATTERN.finditer(text)]


def substitute_text(text: str, properties: cabc.Mapping[str, str]) -> str:
    """Replace known placeholders in a plain string.

    An exact key wins. A placeholder with no exact key falls back to its
    lower-cased name, since directive attributes such as ``myTitle`` are
    folded to ``mytitle`` when the document is parsed.
    """

    def _replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in properties:
            return properties[name]
        return properties.get(name.lower(), match.group(0))

    return PLACEHOLDER_PATTERN.sub(_replace, text)


def _substitute_attributes(tag: Tag, properties: cabc.Mapping[str, str]) -> None:
    for name, value in list(tag.attrs.items()):
        tag[name] = substitute_text(str(value), properties)


def substitute_properties(tree: Tag, properties: cabc.Mapping[str, str]) -> Tag:
    """Apply ``properties`` to every text node and attribute value in ``tree``.

    Parameters
    ----------
    tree : Tag
        Parsed fragment, usually a ``BeautifulSoup`` document.
    properties : Mapping[str, str]
        Property values keyed by placeholder name.

    Returns
    -------
    Tag
        The same ``tree``, mutated in place.
    """
    if not properties:
        return tree
    for tag in [tree, *tree.find_all(True)]:
        _substitute_attributes(tag, properties)
    for string in list(tree.find_all(string=True)):
        if isinstance(string, PreformattedString):
            continue
        replaced = substitute_text(str(string), properties)
        if replaced != string:
            string.replace_with(type(string)(replaced))
    return tree


def directive_properties(directive: Tag, *, exclude: str) -> dict[str, str]:
    """Collect a directive's attributes as a property set, minus ``exclude``."""
    result: dict[str, str] = {}
    for name, value in directive.attrs.items():
        if name == exclude:
            continue
        result[name] = str(value)
    return result


__all__ = [
    "PLACEHOLDER_PATTERN",
    "directive_properties",
    "find_placeholders",
    "substitute_properties",
    "substitute_text",
]
