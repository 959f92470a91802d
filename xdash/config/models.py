"""Typed dataclasses describing an xdash build configuration."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from xdash.formatter import FormatOptions

DEFAULT_COMPONENTS_ROOT = Path("src/components")
DEFAULT_CONTENT_ROOT = Path("src/content")
DEFAULT_OUTPUT = Path("public")


@dc.dataclass(frozen=True, slots=True)
class BuildConfig:
    """Settings shared by every entry rendered in one build.

    Attributes
    ----------
    components_root : Path
        Directory that ``@components/`` sources resolve against.
    content_root : Path
        Directory that ``@content/`` sources resolve against.
    output : Path
        Output file or directory.
    exclude : tuple[Path, ...]
        Extra directories skipped during entry discovery.
    pygments_style : str
        Pygments style for fenced code blocks in markdown content.
    max_passes : int
        Component pass cap per document.
    format : FormatOptions
        Pretty-printing options applied to every rendered document.
    """

    components_root: Path = DEFAULT_COMPONENTS_ROOT
    content_root: Path = DEFAULT_CONTENT_ROOT
    output: Path = DEFAULT_OUTPUT
    exclude: tuple[Path, ...] = ()
    pygments_style: str = "monokai"
    max_passes: int = 8
    format: FormatOptions = dc.field(default_factory=FormatOptions)

    def merge(self, **overrides: typ.Any) -> BuildConfig:  # noqa: ANN401
        """Return a copy with every non-``None`` override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return dc.replace(self, **changes)

    def excluded_dirs(self) -> tuple[Path, ...]:
        """Return every directory that entry discovery must skip."""
        return (self.components_root, self.content_root, self.output, *self.exclude)


__all__ = [
    "DEFAULT_COMPONENTS_ROOT",
    "DEFAULT_CONTENT_ROOT",
    "DEFAULT_OUTPUT",
    "BuildConfig",
]
