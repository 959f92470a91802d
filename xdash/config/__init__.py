"""Load and validate build configuration for xdash.

Settings are layered: built-in defaults, then an optional ``xdash.yaml``
parsed with ruamel.yaml, then CLI flags and ``XDASH_*`` environment
variables applied through :meth:`BuildConfig.merge`.

Examples
--------
>>> from pathlib import Path
>>> from xdash.config import load_build_config
>>> config = load_build_config(Path("xdash.yaml"))  # doctest: +SKIP
>>> config.merge(output=Path("dist")).output  # doctest: +SKIP
PosixPath('dist')
"""

from .loader import load_build_config
from .models import (
    DEFAULT_COMPONENTS_ROOT,
    DEFAULT_CONTENT_ROOT,
    DEFAULT_OUTPUT,
    BuildConfig,
)

__all__ = [
    "DEFAULT_COMPONENTS_ROOT",
    "DEFAULT_CONTENT_ROOT",
    "DEFAULT_OUTPUT",
    "BuildConfig",
    "load_build_config",
]
