"""Recursive resolution of ``<x-content>`` and ``<x-component>`` directives.

The :class:`Expander` walks a parsed document in two passes. The content pass
replaces every ``<x-content>`` directive with its rendered markdown, and
markdown that itself holds ``<x-content>`` is resolved against its own file.
The component pass then replaces each outermost ``<x-component>`` directive with
its fragment: properties are substituted, the slot is filled, and the
fragment is expanded recursively against its own location before it is
spliced back into the parent. Nested includes are therefore always resolved
relative to the file that declares them, at any depth.

Example
-------
>>> from pathlib import Path
>>> from xdash.expander import Expander, render_document
>>> expander = Expander(components_root=Path("src/components"))
>>> render_document(
...     '<x-component src="card" title="Hi"/>', Path("index.html"), expander
... )  # doctest: +SKIP
'<h1>Hi</h1>'
"""

from __future__ import annotations

import dataclasses as dc
import logging
import os
import typing as typ
from pathlib import Path

from ._constants import COMPONENT_TAG, CONTENT_TAG, SOURCE_ATTRIBUTE
from .errors import (
    CyclicIncludeError,
    ExpansionLimitError,
    MalformedDirectiveError,
    MarkdownRenderError,
)
from .loader import load_fragment
from .markup import has_content, parse_html, splice, trimmed_contents
from .paths import IncludeKind, resolve_include_path
from .properties import directive_properties, substitute_properties
from .renderer import HtmlContentRenderer
from .slots import fill_slot, find_slot

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from bs4.element import PageElement, Tag

log = logging.getLogger(__name__)

DEFAULT_MAX_PASSES = 8


@dc.dataclass(frozen=True, slots=True)
class ResolutionContext:
    """Location of the file being expanded and the component chain above it.

    Attributes
    ----------
    file_path : Path
        Absolute path of the document whose directives are being resolved.
    chain : tuple[Path, ...]
        Entry document followed by every component or markdown file currently
        being expanded, outermost first.
    """

    file_path: Path
    chain: tuple[Path, ...] = ()

    @classmethod
    def for_entry(cls, file_path: Path) -> ResolutionContext:
        """Return the root context for an entry document."""
        absolute = Path(os.path.abspath(file_path))
        return cls(file_path=absolute, chain=(absolute,))

    def descend(self, path: Path) -> ResolutionContext:
        """Return the context for a component loaded from ``path``.

        Raises
        ------
        CyclicIncludeError
            If ``path`` is already being expanded further up the chain.
        """
        if path in self.chain:
            raise CyclicIncludeError((*self.chain, path))
        return ResolutionContext(file_path=path, chain=(*self.chain, path))

    @property
    def depth(self) -> int:
        """Return how many components deep this context sits."""
        return len(self.chain) - 1


def _outermost(nodes: cabc.Iterable[Tag], name: str) -> list[Tag]:
    """Drop directives nested inside another directive of the same kind."""
    return [node for node in nodes if node.find_parent(name) is None]


def _require_source(node: Tag, context: ResolutionContext) -> str:
    src = node.get(SOURCE_ATTRIBUTE)
    if not src or not str(src).strip():
        msg = (
            f"<{node.name}> in '{context.file_path}' is missing the "
            f"'{SOURCE_ATTRIBUTE}' attribute"
        )
        raise MalformedDirectiveError(msg)
    return str(src).strip()


class Expander:
    """Resolve include directives in document trees."""

    def __init__(
        self,
        renderer: HtmlContentRenderer | None = None,
        *,
        components_root: Path | None = None,
        content_root: Path | None = None,
        max_passes: int = DEFAULT_MAX_PASSES,
    ) -> None:
        """Initialize the expander.

        Parameters
        ----------
        renderer : HtmlContentRenderer, optional
            Markdown converter used for ``<x-content>``; a default renderer is
            created when omitted.
        components_root : Path, optional
            Directory that ``@components/`` sources resolve against.
        content_root : Path, optional
            Directory that ``@content/`` sources resolve against.
        max_passes : int, optional
            Upper bound on component passes per document before expansion is
            abandoned with :class:`ExpansionLimitError`.
        """
        if max_passes < 1:
            msg = "max_passes must be at least 1"
            raise ValueError(msg)
        self.renderer = renderer or HtmlContentRenderer()
        self.components_root = components_root
        self.content_root = content_root
        self.max_passes = max_passes

    def expand(self, tree: Tag, file_path: Path) -> Tag:
        """Resolve every directive in ``tree`` in place.

        Parameters
        ----------
        tree : Tag
            Parsed entry document.
        file_path : Path
            Location of the entry document; relative sources resolve
            against its directory.

        Returns
        -------
        Tag
            The same ``tree`` with no include directives left.
        """
        return self._expand(tree, ResolutionContext.for_entry(file_path))

    def _expand(self, tree: Tag, context: ResolutionContext) -> Tag:
        self._content_pass(tree, context)
        for _ in range(self.max_passes):
            directives = _outermost(tree.find_all(COMPONENT_TAG), COMPONENT_TAG)
            if not directives:
                return tree
            for node in directives:
                self._resolve_component(node, context)
        if tree.find(COMPONENT_TAG) is None:
            return tree
        msg = (
            f"Components in '{context.file_path}' did not converge after "
            f"{self.max_passes} passes"
        )
        raise ExpansionLimitError(msg)

    def _content_pass(self, tree: Tag, context: ResolutionContext) -> None:
        for node in _outermost(tree.find_all(CONTENT_TAG), CONTENT_TAG):
            src = _require_source(node, context)
            path = resolve_include_path(
                src, context.file_path, IncludeKind.CONTENT, self.content_root
            )
            content_context = context.descend(path)
            log.debug("content %s -> %s", src, path)
            markdown_text = load_fragment(path, src=src)
            try:
                html = self.renderer.markdown(markdown_text)
            except MarkdownRenderError as exc:
                msg = f"Failed to render '{src}' (resolved to '{path}'): {exc}"
                raise MarkdownRenderError(msg) from exc
            rendered = parse_html(html)
            self._content_pass(rendered, content_context)
            splice(node, list(rendered.contents))

    def _resolve_component(self, node: Tag, context: ResolutionContext) -> None:
        src = _require_source(node, context)
        path = resolve_include_path(
            src, context.file_path, IncludeKind.COMPONENT, self.components_root
        )
        child_context = context.descend(path)
        log.debug("component %s -> %s (depth %d)", src, path, child_context.depth)

        fragment = parse_html(load_fragment(path, src=src))
        substitute_properties(
            fragment, directive_properties(node, exclude=SOURCE_ATTRIBUTE)
        )
        caller_content = None
        if find_slot(fragment) is not None:
            caller_content = self._caller_content(node, context)
        fill_slot(fragment, caller_content)
        self._expand(fragment, child_context)
        splice(node, list(fragment.contents))

    def _caller_content(
        self, node: Tag, context: ResolutionContext
    ) -> list[PageElement] | None:
        """Expand the directive's inner content against the caller's location."""
        nodes = trimmed_contents(node)
        if not has_content(nodes):
            return None
        holder = parse_html("")
        for item in nodes:
            holder.append(item)
        self._expand(holder, context)
        return list(holder.contents)


def render_document(text: str, file_path: Path, expander: Expander) -> str:
    """Parse ``text``, expand it as if stored at ``file_path``, and serialise it."""
    tree = parse_html(text)
    expander.expand(tree, file_path)
    return tree.decode()


__all__ = [
    "DEFAULT_MAX_PASSES",
    "Expander",
    "ResolutionContext",
    "render_document",
]
