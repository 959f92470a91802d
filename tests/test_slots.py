"""Tests for slot filling precedence and whitespace trimming."""

from __future__ import annotations

import pytest

from xdash.markup import parse_html, trimmed_contents
from xdash.slots import fill_slot, find_slot


def _caller(html: str) -> list:
    holder = parse_html(f"<x-component>{html}</x-component>")
    return trimmed_contents(holder.find("x-component"))


def test_caller_content_wins_over_fallback() -> None:
    fragment = parse_html("<div><x-slot>FALLBACK</x-slot></div>")
    fill_slot(fragment, _caller("CALLER"))
    assert str(fragment) == "<div>CALLER</div>"


@pytest.mark.parametrize("caller", [None, [], "   \n\t  "])
def test_fallback_used_when_caller_is_empty(caller: object) -> None:
    fragment = parse_html("<div><x-slot>\n  FALLBACK  \n</x-slot></div>")
    content = _caller(caller) if isinstance(caller, str) else caller
    fill_slot(fragment, content)
    assert str(fragment) == "<div>FALLBACK</div>"


def test_both_empty_removes_the_slot() -> None:
    fragment = parse_html("<div>a<x-slot>   </x-slot>b</div>")
    fill_slot(fragment, None)
    assert str(fragment) == "<div>ab</div>"


def test_self_closing_slot_receives_caller_content() -> None:
    fragment = parse_html("<section><x-slot/></section>")
    fill_slot(fragment, _caller("  <p>Body</p>  "))
    assert str(fragment) == "<section><p>Body</p></section>"


def test_self_closing_slot_without_caller_disappears() -> None:
    fragment = parse_html("<section><x-slot/></section>")
    fill_slot(fragment, None)
    assert str(fragment) == "<section></section>"


def test_fragment_without_slot_is_unchanged() -> None:
    fragment = parse_html("<p>static</p>")
    fill_slot(fragment, _caller("<em>dropped</em>"))
    assert str(fragment) == "<p>static</p>"


def test_only_the_first_slot_is_filled() -> None:
    fragment = parse_html("<x-slot>one</x-slot><x-slot>two</x-slot>")
    fill_slot(fragment, _caller("CALLER"))
    assert str(fragment) == "CALLER<x-slot>two</x-slot>"
    assert find_slot(fragment) is not None


def test_caller_text_is_trimmed_but_inner_spacing_kept() -> None:
    fragment = parse_html("<p><x-slot/></p>")
    fill_slot(fragment, _caller("\n   Hello <b>big</b> world   \n"))
    assert str(fragment) == "<p>Hello <b>big</b> world</p>"
