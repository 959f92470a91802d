"""Common literal values used across xdash.

Directive tag names, alias markers and default suffixes live here so the
expander, the resolver, and the tests share one source of truth.

Examples
--------
>>> from xdash import _constants
>>> _constants.DEFAULT_SUFFIXES[_constants.COMPONENT_TAG]
'.html'
"""

__version__ = "0.3.0"

COMPONENT_TAG = "x-component"
CONTENT_TAG = "x-content"
SLOT_TAG = "x-slot"
SOURCE_ATTRIBUTE = "src"

COMPONENTS_ALIAS = "@components/"
CONTENT_ALIAS = "@content/"

DEFAULT_SUFFIXES = {
    COMPONENT_TAG: ".html",
    CONTENT_TAG: ".md",
}

ENTRY_SUFFIX = ".html"
PRIVATE_PREFIX = "_"
DEFAULT_CONFIG_FILE = "xdash.yaml"
