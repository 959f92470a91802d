"""Pretty-print flattened HTML before it is written to disk.

Formatting is cosmetic: every element lands on its own line, indented by
``indent_size`` spaces, text longer than ``wrap_line_length`` is soft-wrapped
at word boundaries, and blank lines between elements are either dropped or
kept according to ``preserve_newlines``. Whitespace-sensitive elements such
as ``<pre>`` are emitted verbatim. Formatting already formatted output yields
the same text.

Example
-------
>>> print(format_html("<div><p>Hello</p></div>"), end="")
<div>
  <p>
    Hello
  </p>
</div>
"""

from __future__ import annotations

import dataclasses as dc
import re
import textwrap

from bs4.dammit import EntitySubstitution
from bs4.element import Comment, NavigableString, PreformattedString
from bs4.formatter import HTMLFormatter

from .markup import parse_html

VERBATIM_TAGS = ("pre", "textarea", "script", "style")
BLANK_LINE_MARKER = "xdash:blank-line"
BLANK_LINE_COMMENT = f"<!--{BLANK_LINE_MARKER}-->"
# whitespace between two tags that spans at least one empty line
BLANK_LINE_PATTERN = re.compile(r">([ \t]*\n(?:[ \t]*\n)+[ \t]*)<")


@dc.dataclass(frozen=True, slots=True)
class FormatOptions:
    """Pretty-printing options.

    Attributes
    ----------
    indent_size : int
        Spaces per nesting level.
    wrap_line_length : int
        Maximum width for text lines; ``0`` disables wrapping.
    preserve_newlines : bool
        Keep a single blank line wherever the source separates elements with
        one or more empty lines.
    """

    indent_size: int = 2
    wrap_line_length: int = 120
    preserve_newlines: bool = False


def _is_verbatim(string: NavigableString) -> bool:
    return string.find_parent(VERBATIM_TAGS) is not None


def _mark_blank_lines(html: str) -> str:
    """Tag every empty line between two tags with a marker comment.

    The parser folds whitespace-only text down to a single newline, so blank
    lines have to be recorded before the document is parsed.
    """
    return BLANK_LINE_PATTERN.sub(
        lambda match: f">{match.group(1)}{BLANK_LINE_COMMENT}<", html
    )


def _drop_markers(string: NavigableString) -> None:
    # markers inside verbatim content sit next to the original whitespace
    if isinstance(string, Comment) and string == BLANK_LINE_MARKER:
        string.extract()
    elif BLANK_LINE_COMMENT in string:
        string.replace_with(type(string)(string.replace(BLANK_LINE_COMMENT, "")))


def _depth(string: NavigableString) -> int:
    # the BeautifulSoup root is a parent too but is never indented
    return sum(1 for _ in string.parents) - 1


def _wrap_text(string: NavigableString, options: FormatOptions) -> None:
    text = str(string).strip()
    indent = " " * (_depth(string) * options.indent_size)
    lines = [line.strip() for line in text.splitlines()]
    if all(len(indent) + len(line) <= options.wrap_line_length for line in lines):
        return
    width = max(options.wrap_line_length - len(indent), 1)
    wrapped = textwrap.wrap(
        " ".join(text.split()),
        width=width,
        break_long_words=False,
        break_on_hyphens=False,
    )
    string.replace_with(NavigableString(f"\n{indent}".join(wrapped)))


def format_html(html: str, options: FormatOptions | None = None) -> str:
    """Return ``html`` pretty-printed according to ``options``.

    Parameters
    ----------
    html : str
        Flattened HTML document.
    options : FormatOptions, optional
        Pretty-printing options; defaults to two-space indentation, a
        120-column wrap and no blank-line preservation.

    Returns
    -------
    str
        Formatted HTML terminated by a newline.
    """
    options = options or FormatOptions()
    if options.preserve_newlines:
        html = _mark_blank_lines(html)
    tree = parse_html(html)
    for string in list(tree.find_all(string=True)):
        if _is_verbatim(string):
            if options.preserve_newlines:
                _drop_markers(string)
            continue
        if isinstance(string, PreformattedString) or not string.strip():
            continue
        if options.wrap_line_length > 0:
            _wrap_text(string, options)

    formatter = HTMLFormatter(
        entity_substitution=EntitySubstitution.substitute_xml,
        indent=options.indent_size,
    )
    text = tree.prettify(formatter=formatter)
    if options.preserve_newlines:
        text = "\n".join(
            "" if line.strip() == BLANK_LINE_COMMENT else line
            for line in text.splitlines()
        )
    text = text.rstrip("\n")
    return f"{text}\n" if text else ""


__all__ = ["FormatOptions", "format_html"]
