"""Read fragment files for the expander."""

from __future__ import annotations

import logging
import typing as typ

from .errors import FragmentNotFoundError, FragmentReadError

if typ.TYPE_CHECKING:
    from pathlib import Path

log = logging.getLogger(__name__)


def load_fragment(path: Path, *, src: str) -> str:
    """Return the UTF-8 text stored at ``path``.

    Parameters
    ----------
    path : Path
        Resolved absolute path of the fragment.
    src : str
        Original ``src`` attribute, echoed in error messages so alias and
        relative-path mistakes are easy to spot.

    Raises
    ------
    FragmentNotFoundError
        If nothing exists at ``path``.
    FragmentReadError
        If the file exists but cannot be read or is not valid UTF-8.
    """
    log.debug("loading %s from %s", src, path)
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise FragmentNotFoundError(src, path) from exc
    except UnicodeDecodeError as exc:
        raise FragmentReadError(src, path, "not valid UTF-8") from exc
    except OSError as exc:
        raise FragmentReadError(src, path, exc.strerror or str(exc)) from exc


__all__ = ["load_fragment"]
