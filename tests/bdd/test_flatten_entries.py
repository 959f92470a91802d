"""Behaviour tests for flattening entry documents.

These pytest-bdd scenarios drive the ``flatten_entries.feature`` file. Each
named site in ``SITES`` lists the fragment files to write, the entry document
and the expected flattened markup. Steps write the site into a temporary
directory, expand the entry with :class:`~xdash.expander.Expander` (or build
it with :class:`~xdash.build.SiteBuilder`), and check the result or the
reported failure.

Usage
-----
Run ``pytest tests/bdd/test_flatten_entries.py -v`` after installing the test
extra (``pip install -e .[test]``). No network access is required.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from xdash.build import SiteBuilder
from xdash.config import BuildConfig
from xdash.discovery import Entry
from xdash.errors import FragmentNotFoundError, XdashError
from xdash.expander import Expander, render_document

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "flatten_entries.feature"
)
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]


class SiteCase(typ.NamedTuple):
    """Fragment files, entry markup and expected output for one scenario."""

    files: dict[str, str]
    entry: str
    expected: str = ""


SITES: dict[str, SiteCase] = {
    "card and intro": SiteCase(
        files={
            "intro.md": "# Hello",
            "card.html": "<h1>{{ title }}</h1><x-slot/>",
        },
        entry=(
            '<x-content src="intro.md"/>'
            '<x-component src="card" title="Hi"><p>Body</p></x-component>'
        ),
        expected="<h1>Hello</h1><h1>Hi</h1><p>Body</p>",
    ),
    "caller content": SiteCase(
        files={"box.html": "<div><x-slot>FALLBACK</x-slot></div>"},
        entry='<x-component src="box">CALLER</x-component>',
        expected="<div>CALLER</div>",
    ),
    "slot fallback": SiteCase(
        files={"box.html": "<div><x-slot>FALLBACK</x-slot></div>"},
        entry='<x-component src="box"/>',
        expected="<div>FALLBACK</div>",
    ),
    "nested content": SiteCase(
        files={
            "x.md": "entry level",
            "parts/x.md": "component level",
            "parts/panel.html": '<section><x-content src="x.md"/></section>',
        },
        entry='<x-component src="parts/panel"/>',
        expected="<section><p>component level</p></section>",
    ),
    "missing component": SiteCase(
        files={},
        entry='<x-component src="missing"/>',
    ),
}


@pytest.fixture
def scenario_state(tmp_path: Path) -> ScenarioState:
    """Return a mutable dict shared across steps, seeded with the site root."""
    return {"root": tmp_path}


def _write(root: Path, relative: str, text: str) -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@given(parsers.parse('the "{name}" site'))
def given_site(scenario_state: ScenarioState, name: str) -> None:
    """Write the named site's fragments and entry under the scenario root."""
    root = typ.cast("Path", scenario_state["root"])
    case = SITES[name]
    for relative, text in case.files.items():
        _write(root, relative, text)
    scenario_state["entry"] = _write(root, "index.html", case.entry)
    scenario_state["entry_text"] = case.entry


@when("I expand the entry")
def when_expand(scenario_state: ScenarioState) -> None:
    """Expand the entry without formatting it."""
    scenario_state["html"] = render_document(
        scenario_state["entry_text"], scenario_state["entry"], Expander()
    )


@when(parsers.parse('I build the entry into "{relative}"'))
def when_build(scenario_state: ScenarioState, relative: str) -> None:
    """Build the entry with a SiteBuilder, capturing any failure."""
    root = typ.cast("Path", scenario_state["root"])
    builder = SiteBuilder(BuildConfig(output=root / "public"))
    try:
        builder.build_entry(Entry(scenario_state["entry"], root / relative))
    except XdashError as exc:
        scenario_state["error"] = exc
    else:
        scenario_state["error"] = None


@then(parsers.parse('the expanded HTML matches the "{name}" expectation'))
def then_expanded_html(scenario_state: ScenarioState, name: str) -> None:
    """Compare the flattened markup with the named expectation."""
    assert scenario_state["html"] == SITES[name].expected, (
        f"unexpected flattened HTML: {scenario_state['html']!r}"
    )


@then(parsers.parse('the build fails with a not-found error naming "{src}"'))
def then_not_found(scenario_state: ScenarioState, src: str) -> None:
    """Check the failure names both the raw source and its resolved path."""
    error = scenario_state["error"]
    assert isinstance(error, FragmentNotFoundError), f"unexpected error: {error!r}"
    root = typ.cast("Path", scenario_state["root"])
    message = str(error)
    assert f"'{src}'" in message
    assert str(root / f"{src}.html") in message


@then(parsers.parse('no file exists at "{relative}"'))
def then_no_file(scenario_state: ScenarioState, relative: str) -> None:
    """Verify nothing was written for the failed entry."""
    root = typ.cast("Path", scenario_state["root"])
    assert not (root / relative).exists(), "no partial output may be written"
