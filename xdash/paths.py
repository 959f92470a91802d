"""Resolve include ``src`` attributes into absolute filesystem paths.

Relative sources resolve against the directory of the file that contains the
directive, so a fragment always resolves its own includes from where it lives
on disk. Sources starting with an alias marker (``@components/`` or
``@content/``) are redirected to the matching configured root instead.

Examples
--------
>>> from pathlib import Path
>>> resolve_include_path("card", Path("/site/index.html"), IncludeKind.COMPONENT)
PosixPath('/site/card.html')
>>> resolve_include_path(
...     "@content/intro", Path("/site/index.html"), IncludeKind.CONTENT,
...     alias_root=Path("/site/src/content"),
... )
PosixPath('/site/src/content/intro.md')
"""

from __future__ import annotations

import enum
import os
from pathlib import Path

from ._constants import (
    COMPONENT_TAG,
    COMPONENTS_ALIAS,
    CONTENT_ALIAS,
    CONTENT_TAG,
    DEFAULT_SUFFIXES,
)


class IncludeKind(enum.Enum):
    """Kinds of include directive, keyed by their tag name."""

    COMPONENT = COMPONENT_TAG
    CONTENT = CONTENT_TAG

    @property
    def default_suffix(self) -> str:
        """Return the extension appended to sources that have none."""
        return DEFAULT_SUFFIXES[self.value]

    @property
    def alias(self) -> str:
        """Return the alias marker redirecting to this kind's root."""
        return COMPONENTS_ALIAS if self is IncludeKind.COMPONENT else CONTENT_ALIAS


def _split_alias(src: str, kind: IncludeKind) -> str | None:
    """Return the remainder of ``src`` after its alias marker, if any."""
    if src.startswith(kind.alias):
        return src[len(kind.alias) :]
    return None


def resolve_include_path(
    src: str,
    including_file: Path,
    kind: IncludeKind,
    alias_root: Path | None = None,
) -> Path:
    """Turn an include's ``src`` into an absolute path.

    Parameters
    ----------
    src : str
        Raw ``src`` attribute value, relative or alias-prefixed.
    including_file : Path
        File containing the directive; its directory is the resolution base.
    kind : IncludeKind
        Whether the directive includes a component or markdown content.
    alias_root : Path, optional
        Root substituted for the alias marker. When ``None`` the marker is
        not recognised and ``src`` resolves like any relative path.

    Returns
    -------
    Path
        Absolute, normalised path. Existence is not checked here.
    """
    remainder = _split_alias(src, kind) if alias_root is not None else None
    if remainder is not None and alias_root is not None:
        candidate = alias_root / remainder
    else:
        candidate = Path(including_file).parent / src
    resolved = Path(os.path.abspath(candidate))
    if not resolved.suffix:
        resolved = resolved.with_name(resolved.name + kind.default_suffix)
    return resolved


__all__ = ["IncludeKind", "resolve_include_path"]
