"""Enumerate entry documents and pair them with output paths.

Entries are ``.html`` files under the input root. Files and directories whose
name starts with an underscore are private and skipped, as are configured
excluded directories such as the components, content and output roots when
they live inside the input tree.
"""

from __future__ import annotations

import dataclasses as dc
import os
import typing as typ
from pathlib import Path

from ._constants import ENTRY_SUFFIX, PRIVATE_PREFIX
from .errors import EntryDiscoveryError

if typ.TYPE_CHECKING:
    import collections.abc as cabc


@dc.dataclass(frozen=True, slots=True)
class Entry:
    """An entry document and where its rendered output belongs."""

    input_path: Path
    output_path: Path


def _absolute(path: Path) -> Path:
    return Path(os.path.abspath(path))


def discover_entries(
    input_root: Path,
    output_root: Path,
    *,
    excluded: cabc.Iterable[Path] = (),
) -> list[Entry]:
    """Return entries for every renderable ``.html`` file under ``input_root``.

    Parameters
    ----------
    input_root : Path
        Directory to scan recursively.
    output_root : Path
        Directory mirroring ``input_root`` that receives rendered files.
    excluded : Iterable[Path], optional
        Directories skipped entirely while scanning.

    Returns
    -------
    list[Entry]
        Entries in sorted, depth-first order.

    Raises
    ------
    EntryDiscoveryError
        If ``input_root`` is missing or cannot be listed.
    """
    skipped = {_absolute(path) for path in excluded}
    entries: list[Entry] = []
    _scan(input_root, output_root, skipped, entries)
    return entries


def _scan(
    directory: Path, output_dir: Path, skipped: set[Path], entries: list[Entry]
) -> None:
    try:
        children = sorted(directory.iterdir(), key=lambda child: child.name)
    except FileNotFoundError as exc:
        msg = f"Could not find '{directory}'"
        raise EntryDiscoveryError(msg) from exc
    except OSError as exc:
        msg = f"Failed to read '{directory}'"
        raise EntryDiscoveryError(msg) from exc

    for child in children:
        if child.name.startswith(PRIVATE_PREFIX):
            continue
        if child.is_dir():
            if _absolute(child) in skipped:
                continue
            _scan(child, output_dir / child.name, skipped, entries)
        elif child.suffix == ENTRY_SUFFIX:
            entries.append(Entry(child, output_dir / child.name))


def plan_entries(
    input_path: Path,
    output_path: Path,
    *,
    excluded: cabc.Iterable[Path] = (),
) -> list[Entry]:
    """Map an input file or directory onto output entries.

    A directory input is scanned with :func:`discover_entries`. A single file
    renders into ``output_path`` directly when it has a suffix, or into
    ``output_path / <file name>`` when it looks like a directory.
    """
    if not input_path.exists():
        msg = f"Could not find '{input_path}'"
        raise EntryDiscoveryError(msg)
    if input_path.is_dir():
        return discover_entries(input_path, output_path, excluded=excluded)
    if output_path.suffix:
        return [Entry(input_path, output_path)]
    return [Entry(input_path, output_path / input_path.name)]


__all__ = ["Entry", "discover_entries", "plan_entries"]
