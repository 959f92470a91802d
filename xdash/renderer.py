"""Markdown-to-HTML conversion for ``<x-content>`` includes."""

from __future__ import annotations

import re
import typing as typ

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter
from pygments.util import ClassNotFound

from .errors import MarkdownRenderError

if typ.TYPE_CHECKING:
    from markdown.extensions import Extension
else:  # pragma: no cover - type-checking fallback
    Extension = typ.Any

FENCED_INDENT_PATTERN = re.compile(r"^[ ]{1,3}([`~]{3,})", re.MULTILINE)
FENCE_LABEL_PATTERN = re.compile(
    r"^([`~]{3,})([A-Za-z0-9_+#.-]+)?(,[^\r\n]+)$", re.MULTILINE
)
MARKDOWN_EXTENSIONS = ("fenced_code", "codehilite", "tables", "sane_lists")


class HtmlContentRenderer:
    """Render markdown content with highlighted code blocks.

    The converter is configured without the ``toc`` extension so headings
    never receive generated ``id`` attributes and output stays deterministic.
    """

    def __init__(
        self,
        pygments_style: str = "monokai",
        extensions: typ.Sequence[Extension | str] | None = None,
    ) -> None:
        """Initialize a renderer.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style used for syntax highlighting. Defaults
            to ``"monokai"``.
        extensions : Sequence[Extension | str], optional
            Extra Python-Markdown extensions appended to the defaults.
        """
        self.pygments_style = pygments_style
        self._extensions: list[Extension | str] = [
            *MARKDOWN_EXTENSIONS,
            *(extensions or ()),
        ]

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        try:
            formatter = HtmlFormatter(style=self.pygments_style, cssclass="codehilite")
        except ClassNotFound as exc:
            msg = f"Unknown Pygments style '{self.pygments_style}'"
            raise MarkdownRenderError(msg) from exc
        return formatter.get_style_defs(".codehilite")

    def markdown(self, text: str) -> str:
        """Render markdown into HTML.

        Raises
        ------
        MarkdownRenderError
            If the converter or one of its extensions fails.
        """
        normalized = self._normalize_fenced_blocks(text)
        if not normalized.strip():
            return ""
        try:
            md = Markdown(
                extensions=self._extensions,
                extension_configs={
                    "codehilite": {
                        "linenums": False,
                        "guess_lang": False,
                        "css_class": "codehilite",
                        "pygments_style": self.pygments_style,
                    }
                },
            )
            return md.convert(normalized)
        except Exception as exc:  # noqa: BLE001 - third-party extensions raise anything
            msg = f"Markdown conversion failed: {exc}"
            raise MarkdownRenderError(msg) from exc

    @staticmethod
    def _normalize_fenced_blocks(text: str) -> str:
        without_indent = FENCED_INDENT_PATTERN.sub(r"\1", text)

        def _strip_labels(match: re.Match[str]) -> str:
            fence, language, _extras = match.groups()
            return f"{fence}{language or ''}"

        return FENCE_LABEL_PATTERN.sub(_strip_labels, without_indent)


__all__ = ["HtmlContentRenderer", "MARKDOWN_EXTENSIONS"]
