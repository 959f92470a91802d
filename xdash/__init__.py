"""Static include expansion for HTML documents.

xdash flattens an HTML entry document by recursively resolving
``<x-component>`` includes (with ``{{ name }}`` properties and an
``<x-slot>`` insertion point) and ``<x-content>`` markdown includes, then
pretty-prints the result.

Exports
-------
- ``app``: Cyclopts application behind the ``xdash`` console script.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``Expander``: Resolve directives in a parsed document tree.
- ``SiteBuilder``: Render and write entries from a build configuration.

Examples
--------
>>> from xdash import main
>>> main()  # doctest: +SKIP
>>> from xdash import Expander
>>> Expander().max_passes
8
"""

from __future__ import annotations

from ._constants import __version__
from .build import SiteBuilder
from .cli import app, main
from .expander import Expander, render_document

__all__ = ["Expander", "SiteBuilder", "__version__", "app", "main", "render_document"]
