"""Exception hierarchy raised while expanding and writing xdash documents.

Every error aborts the expansion of the current entry document. The build
pipeline catches :class:`XdashError` per entry so a batch keeps going after a
single bad file.
"""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path


class XdashError(Exception):
    """Base class for every failure surfaced by xdash."""


class FragmentNotFoundError(XdashError, FileNotFoundError):
    """Raised when an include points at a file that does not exist."""

    def __init__(self, src: str, path: Path) -> None:
        self.src = src
        self.path = path
        super().__init__(f"Could not find '{src}' (resolved to '{path}')")


class FragmentReadError(XdashError, OSError):
    """Raised when an include exists but cannot be read or decoded."""

    def __init__(self, src: str, path: Path, reason: str = "") -> None:
        self.src = src
        self.path = path
        msg = f"Failed to read '{src}' (resolved to '{path}')"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class MarkdownRenderError(XdashError):
    """Raised when the markdown converter fails on a content include."""


class MalformedDirectiveError(XdashError, ValueError):
    """Raised when an include directive lacks its ``src`` attribute."""


class OutputWriteError(XdashError, OSError):
    """Raised when a rendered document or its directory cannot be written."""


class CyclicIncludeError(XdashError):
    """Raised when an include reaches itself, directly or transitively."""

    def __init__(self, chain: cabc.Sequence[Path]) -> None:
        self.chain = tuple(chain)
        trail = " -> ".join(str(path) for path in self.chain)
        super().__init__(f"Cyclic include: {trail}")


class ExpansionLimitError(XdashError):
    """Raised when the component pass fails to converge within its cap."""


class BuildConfigError(XdashError, ValueError):
    """Raised when the build configuration file is invalid."""


class EntryDiscoveryError(XdashError):
    """Raised when the input root cannot be enumerated."""


__all__ = [
    "BuildConfigError",
    "CyclicIncludeError",
    "EntryDiscoveryError",
    "ExpansionLimitError",
    "FragmentNotFoundError",
    "FragmentReadError",
    "MalformedDirectiveError",
    "MarkdownRenderError",
    "OutputWriteError",
    "XdashError",
]
