"""Cyclopts CLI entrypoint that flattens xdash entry documents into HTML.

The ``xdash`` console script takes an input file or directory, expands every
``<x-component>`` and ``<x-content>`` directive, pretty-prints the result and
writes it under the output path. Directory inputs are scanned recursively;
one line is printed per entry with the time it took, and a failing entry is
reported without stopping the rest of the batch.

Examples
--------
Render every page under ``src`` into ``public``:

>>> from xdash.cli import app
>>> app(["src", "--output", "public"])  # doctest: +SKIP

Render a single page to an explicit file:

>>> app(["src/index.html", "-o", "dist/home.html"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_CONFIG_FILE, __version__
from .build import BuildResult, SiteBuilder
from .config import load_build_config
from .discovery import plan_entries
from .errors import XdashError

app = App(
    name="xdash",
    help="Flatten HTML entry documents by expanding x-component and x-content includes.",
    version=__version__,
    version_flags=["--version", "-v"],
    help_flags=["--help", "-h"],
    config=cyclopts.config.Env("XDASH_", command=False),  # type: ignore[unknown-argument]
)


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _fail(message: str) -> typ.NoReturn:
    print(f"error: {message}", file=sys.stderr)
    raise SystemExit(1)


def _print_result(result: BuildResult) -> None:
    entry = result.entry
    if result.ok:
        print(
            f"{_format_path(entry.input_path)} → "
            f"{_format_path(entry.output_path)} ({result.elapsed_ms:.2f}ms)"
        )
    else:
        print(f"error: {_format_path(entry.input_path)}: {result.error}", file=sys.stderr)


@app.default
def build(
    input_path: typ.Annotated[
        Path | None, Parameter(help="Entry file or directory of entry files")
    ] = None,
    *,
    output: typ.Annotated[
        Path | None,
        Parameter(name=["--output", "-o"], help="Output file or directory"),
    ] = None,
    config: typ.Annotated[
        Path | None,
        Parameter(help=f"Path to build config (default: ./{DEFAULT_CONFIG_FILE})"),
    ] = None,
    components: typ.Annotated[
        Path | None, Parameter(help="Root that @components/ sources resolve against")
    ] = None,
    content: typ.Annotated[
        Path | None, Parameter(help="Root that @content/ sources resolve against")
    ] = None,
    verbose: typ.Annotated[bool, Parameter(help="Log every include resolution")] = False,
) -> None:
    """Expand and write one entry or a directory of entries.

    Parameters
    ----------
    input_path : Path or None, optional
        Entry file, or a directory scanned recursively for ``.html`` entries.
    output : Path or None, optional
        Output directory, or an output file when ``input_path`` is a file.
        Defaults to the configured output (``public``).
    config : Path or None, optional
        YAML build configuration. When omitted ``xdash.yaml`` in the working
        directory is used if it exists.
    components : Path or None, optional
        Override for the components root.
    content : Path or None, optional
        Override for the content root.
    verbose : bool, optional
        Enable debug logging.

    Returns
    -------
    None
        Writes rendered documents and prints one line per entry. Exits with
        status 1 when any entry fails.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="[%(levelname)s] %(message)s")
    if input_path is None:
        _fail("Input path is missing. See `xdash --help` for usage instructions")

    try:
        settings = load_build_config(
            config or Path(DEFAULT_CONFIG_FILE), required=config is not None
        ).merge(output=output, components_root=components, content_root=content)
        entries = plan_entries(
            input_path, settings.output, excluded=settings.excluded_dirs()
        )
    except (FileNotFoundError, XdashError) as exc:
        _fail(str(exc))

    report = SiteBuilder(settings).build(entries, on_result=_print_result)
    if not report.ok:
        raise SystemExit(1)


def main() -> None:
    """Invoke the Cyclopts application that powers the ``xdash`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
