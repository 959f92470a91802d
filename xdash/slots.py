"""Fill a component fragment's single ``<x-slot>`` insertion point.

A fragment may define one slot. Content supplied by the caller between the
component's opening and closing tags wins over the slot's own fallback
children; when the caller supplies nothing but whitespace the fallback is
used, and when both are empty the slot simply disappears.

Example
-------
>>> from xdash.markup import parse_html
>>> fragment = parse_html("<div><x-slot>Fallback</x-slot></div>")
>>> str(fill_slot(fragment, None))
'<div>Fallback</div>'
"""

from __future__ import annotations

import typing as typ

from ._constants import SLOT_TAG
from .markup import splice, trimmed_contents

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from bs4.element import PageElement, Tag


def find_slot(fragment: Tag) -> Tag | None:
    """Return the first slot element in ``fragment`` or ``None``."""
    return fragment.find(SLOT_TAG)


def fill_slot(
    fragment: Tag, caller_content: cabc.Sequence[PageElement] | None
) -> Tag:
    """Replace the fragment's slot with caller content or its fallback.

    Parameters
    ----------
    fragment : Tag
        Parsed component fragment, mutated in place.
    caller_content : Sequence[PageElement] or None
        Already-trimmed nodes supplied by the caller. ``None`` or an empty
        sequence means the caller supplied nothing.

    Returns
    -------
    Tag
        The same ``fragment``. A fragment without a slot is returned
        unchanged and the caller content is discarded.
    """
    slot = find_slot(fragment)
    if slot is None:
        return fragment
    if caller_content:
        splice(slot, caller_content)
    else:
        splice(slot, trimmed_contents(slot))
    return fragment


__all__ = ["fill_slot", "find_slot"]
