"""Render entry documents and write them to the output tree.

:class:`SiteBuilder` wires an :class:`~xdash.expander.Expander` and the
formatter together from a :class:`~xdash.config.BuildConfig`. Each entry is
rendered completely in memory before anything touches the output path, so a
failed expansion never leaves a partial file behind. Batch builds record a
failure and carry on with the next entry.

Example
-------
>>> from pathlib import Path
>>> from xdash.build import SiteBuilder
>>> from xdash.config import BuildConfig
>>> from xdash.discovery import plan_entries
>>> builder = SiteBuilder(BuildConfig())
>>> report = builder.build(plan_entries(Path("src"), Path("public")))  # doctest: +SKIP
>>> report.ok  # doctest: +SKIP
True
"""

from __future__ import annotations

import dataclasses as dc
import logging
import time
import typing as typ
from pathlib import Path

from .errors import OutputWriteError, XdashError
from .expander import Expander, render_document
from .formatter import format_html
from .loader import load_fragment
from .renderer import HtmlContentRenderer

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .config import BuildConfig
    from .discovery import Entry

log = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class BuildResult:
    """Outcome of rendering one entry."""

    entry: Entry
    elapsed_ms: float
    error: XdashError | None = None

    @property
    def ok(self) -> bool:
        """Return ``True`` when the entry was written."""
        return self.error is None


@dc.dataclass(slots=True)
class BuildReport:
    """Results of a batch build, in entry order."""

    results: list[BuildResult] = dc.field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Return ``True`` when every entry was written."""
        return all(result.ok for result in self.results)

    @property
    def failures(self) -> list[BuildResult]:
        """Return the results whose entries failed."""
        return [result for result in self.results if not result.ok]


class SiteBuilder:
    """Render entries according to a build configuration."""

    def __init__(self, config: BuildConfig) -> None:
        self.config = config
        self.expander = Expander(
            HtmlContentRenderer(config.pygments_style),
            components_root=config.components_root.resolve(),
            content_root=config.content_root.resolve(),
            max_passes=config.max_passes,
        )

    def render(self, entry_path: Path) -> str:
        """Return the expanded and formatted HTML for ``entry_path``."""
        text = load_fragment(entry_path.resolve(), src=str(entry_path))
        html = render_document(text, entry_path, self.expander)
        return format_html(html, self.config.format)

    def build_entry(self, entry: Entry) -> BuildResult:
        """Render ``entry`` and write it, timing the whole operation.

        Raises
        ------
        XdashError
            Any expansion failure, or :class:`OutputWriteError` when the
            output cannot be written. Nothing is written on failure.
        """
        started = time.perf_counter()
        html = self.render(entry.input_path)
        _write_output(entry.output_path, html)
        elapsed_ms = (time.perf_counter() - started) * 1000
        return BuildResult(entry=entry, elapsed_ms=elapsed_ms)

    def build(
        self,
        entries: cabc.Iterable[Entry],
        *,
        on_result: cabc.Callable[[BuildResult], None] | None = None,
    ) -> BuildReport:
        """Build ``entries`` in order, isolating failures per entry.

        Parameters
        ----------
        entries : Iterable[Entry]
            Entries to render.
        on_result : Callable[[BuildResult], None], optional
            Called after each entry, successful or not, so callers can report
            progress as the batch runs.

        Returns
        -------
        BuildReport
            One result per entry.
        """
        report = BuildReport()
        for entry in entries:
            started = time.perf_counter()
            try:
                result = self.build_entry(entry)
            except XdashError as exc:
                log.debug("failed to build %s: %s", entry.input_path, exc)
                elapsed_ms = (time.perf_counter() - started) * 1000
                result = BuildResult(entry=entry, elapsed_ms=elapsed_ms, error=exc)
            report.results.append(result)
            if on_result is not None:
                on_result(result)
        return report


def _write_output(path: Path, html: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        msg = f"Failed to create output directory '{path.parent}'"
        raise OutputWriteError(msg) from exc
    try:
        path.write_text(html, encoding="utf-8")
    except OSError as exc:
        msg = f"Failed to write '{path}'"
        raise OutputWriteError(msg) from exc


__all__ = ["BuildReport", "BuildResult", "SiteBuilder"]
