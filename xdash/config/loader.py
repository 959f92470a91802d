"""Load the optional ``xdash.yaml`` build configuration."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from xdash.errors import BuildConfigError
from xdash.formatter import FormatOptions

from .helpers import (
    _as_bool,
    _as_int,
    _as_mapping,
    _as_path,
    _as_str,
    _reject_unknown,
)
from .models import BuildConfig

TOP_LEVEL_KEYS = (
    "components_root",
    "content_root",
    "output",
    "exclude",
    "pygments_style",
    "max_passes",
    "format",
)
FORMAT_KEYS = ("indent_size", "wrap_line_length", "preserve_newlines")


def load_build_config(path: Path, *, required: bool = True) -> BuildConfig:
    """Load build settings from a YAML file.

    Parameters
    ----------
    path : Path
        Location of the YAML file. Relative paths inside it resolve against
        the file's own directory.
    required : bool, optional
        When ``False`` a missing file yields the built-in defaults instead of
        an error.

    Returns
    -------
    BuildConfig
        Defaults overlaid with the file's values.

    Raises
    ------
    FileNotFoundError
        If ``required`` is true and ``path`` does not exist.
    BuildConfigError
        If the YAML cannot be parsed or holds unknown keys or wrong types.

    Examples
    --------
    >>> from pathlib import Path
    >>> config = load_build_config(Path("xdash.yaml"), required=False)
    >>> config.format.indent_size
    2
    """
    if not path.exists():
        if required:
            msg = f"Configuration file '{path}' not found."
            raise FileNotFoundError(msg)
        return BuildConfig()

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        with path.open("r", encoding="utf-8") as handle:
            loaded = loader.load(handle)
    except YAMLError as exc:
        msg = f"Could not parse '{path}': {exc}"
        raise BuildConfigError(msg) from exc
    raw = _as_mapping(loaded, key=str(path))
    _reject_unknown(raw, TOP_LEVEL_KEYS, section="configuration")
    return _build_config(raw, base=path.resolve().parent)


def _build_config(raw: typ.Mapping[str, typ.Any], *, base: Path) -> BuildConfig:
    """Translate a validated YAML mapping into a BuildConfig."""
    defaults = BuildConfig()
    changes: dict[str, typ.Any] = {}
    for key in ("components_root", "content_root", "output"):
        if key in raw:
            changes[key] = _as_path(raw[key], key=key, base=base)
    if "exclude" in raw:
        excluded = raw["exclude"] or []
        if not isinstance(excluded, list):
            msg = "'exclude' must be a list of paths"
            raise BuildConfigError(msg)
        changes["exclude"] = tuple(
            _as_path(item, key="exclude", base=base) for item in excluded
        )
    if "pygments_style" in raw:
        changes["pygments_style"] = _as_str(raw["pygments_style"], key="pygments_style")
    if "max_passes" in raw:
        changes["max_passes"] = _as_int(raw["max_passes"], key="max_passes", minimum=1)
    if "format" in raw:
        changes["format"] = _build_format(
            _as_mapping(raw["format"], key="format"), defaults.format
        )
    return defaults.merge(**changes)


def _build_format(
    payload: typ.Mapping[str, typ.Any], base: FormatOptions
) -> FormatOptions:
    _reject_unknown(payload, FORMAT_KEYS, section="format")
    return FormatOptions(
        indent_size=_as_int(
            payload.get("indent_size", base.indent_size), key="format.indent_size"
        ),
        wrap_line_length=_as_int(
            payload.get("wrap_line_length", base.wrap_line_length),
            key="format.wrap_line_length",
        ),
        preserve_newlines=_as_bool(
            payload.get("preserve_newlines", base.preserve_newlines),
            key="format.preserve_newlines",
        ),
    )


__all__ = ["load_build_config"]
