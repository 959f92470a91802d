"""Unit tests for include path resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from xdash.paths import IncludeKind, resolve_include_path

ENTRY = Path("/site/pages/index.html")


@pytest.mark.parametrize(
    ("src", "kind", "expected"),
    [
        ("card", IncludeKind.COMPONENT, "/site/pages/card.html"),
        ("intro", IncludeKind.CONTENT, "/site/pages/intro.md"),
        ("card.htm", IncludeKind.COMPONENT, "/site/pages/card.htm"),
        ("notes.txt", IncludeKind.CONTENT, "/site/pages/notes.txt"),
        ("../shared/nav", IncludeKind.COMPONENT, "/site/shared/nav.html"),
        ("./parts/footer", IncludeKind.COMPONENT, "/site/pages/parts/footer.html"),
    ],
)
def test_relative_sources_resolve_against_including_directory(
    src: str, kind: IncludeKind, expected: str
) -> None:
    """Relative sources are based on the including file's directory."""
    assert resolve_include_path(src, ENTRY, kind) == Path(expected)


def test_component_alias_redirects_to_root() -> None:
    """``@components/`` swaps the including directory for the alias root."""
    resolved = resolve_include_path(
        "@components/ui/button",
        ENTRY,
        IncludeKind.COMPONENT,
        alias_root=Path("/lib/components"),
    )
    assert resolved == Path("/lib/components/ui/button.html")


def test_content_alias_redirects_to_root() -> None:
    """``@content/`` swaps the including directory for the content root."""
    resolved = resolve_include_path(
        "@content/blog/post",
        ENTRY,
        IncludeKind.CONTENT,
        alias_root=Path("/lib/content"),
    )
    assert resolved == Path("/lib/content/blog/post.md")


def test_alias_of_other_kind_is_treated_as_relative() -> None:
    """A content alias inside a component include is not an alias."""
    resolved = resolve_include_path(
        "@content/card",
        ENTRY,
        IncludeKind.COMPONENT,
        alias_root=Path("/lib/components"),
    )
    assert resolved == Path("/site/pages/@content/card.html")


def test_alias_without_root_is_treated_as_relative() -> None:
    """Without a configured root the marker is an ordinary path segment."""
    resolved = resolve_include_path("@components/card", ENTRY, IncludeKind.COMPONENT)
    assert resolved == Path("/site/pages/@components/card.html")


def test_relative_entry_paths_become_absolute(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """The resolved path is absolute even for a relative including file."""
    monkeypatch.chdir(tmp_path)
    resolved = resolve_include_path("card", Path("index.html"), IncludeKind.COMPONENT)
    assert resolved.is_absolute()
    assert resolved == tmp_path / "card.html"


def test_include_kind_defaults() -> None:
    assert IncludeKind.COMPONENT.default_suffix == ".html"
    assert IncludeKind.CONTENT.default_suffix == ".md"
    assert IncludeKind.COMPONENT.alias == "@components/"
    assert IncludeKind.CONTENT.alias == "@content/"
