"""Coercion helpers shared by the build configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from xdash.errors import BuildConfigError


def _as_path(value: object, *, key: str, base: Path) -> Path:
    """Return ``value`` as a path, resolving relative paths against ``base``."""
    if not isinstance(value, str) or not value.strip():
        msg = f"'{key}' must be a non-empty path string"
        raise BuildConfigError(msg)
    path = Path(value.strip()).expanduser()
    return path if path.is_absolute() else base / path


def _as_int(value: object, *, key: str, minimum: int = 0) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"'{key}' must be an integer"
        raise BuildConfigError(msg)
    if value < minimum:
        msg = f"'{key}' must be at least {minimum}"
        raise BuildConfigError(msg)
    return value


def _as_bool(value: object, *, key: str) -> bool:
    if not isinstance(value, bool):
        msg = f"'{key}' must be true or false"
        raise BuildConfigError(msg)
    return value


def _as_str(value: object, *, key: str) -> str:
    if not isinstance(value, str) or not value.strip():
        msg = f"'{key}' must be a non-empty string"
        raise BuildConfigError(msg)
    return value.strip()


def _as_mapping(value: object, *, key: str) -> typ.Mapping[str, typ.Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        msg = f"'{key}' must be a mapping"
        raise BuildConfigError(msg)
    return value


def _reject_unknown(
    payload: typ.Mapping[str, typ.Any], allowed: typ.Collection[str], *, section: str
) -> None:
    unknown = sorted(set(payload) - set(allowed))
    if unknown:
        msg = f"Unknown {section} key(s): {', '.join(map(str, unknown))}"
        raise BuildConfigError(msg)


__all__ = [
    "_as_bool",
    "_as_int",
    "_as_mapping",
    "_as_path",
    "_as_str",
    "_reject_unknown",
]
