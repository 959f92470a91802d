"""Shared fixtures for the xdash test-suite.

``site`` is a tiny helper around ``tmp_path`` that writes fixture files
(components, markdown content, entry documents) without trailing newlines, so
expected serialisations stay exact.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from xdash.expander import Expander, render_document


class SiteFixture:
    """Write files under a temporary root and render entries from it."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def write(self, relative: str, text: str) -> Path:
        """Write ``text`` to ``relative`` under the root, creating parents."""
        path = self.root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    def render(
        self, relative: str, text: str, expander: Expander | None = None
    ) -> str:
        """Write an entry document and return its expanded HTML."""
        path = self.write(relative, text)
        return render_document(text, path, expander or Expander())


@pytest.fixture
def site(tmp_path: Path) -> SiteFixture:
    """Return a SiteFixture rooted in a fresh temporary directory."""
    return SiteFixture(tmp_path)


@pytest.fixture
def aliased_expander(tmp_path: Path) -> Expander:
    """Return an Expander whose alias roots live under ``tmp_path/src``."""
    return Expander(
        components_root=tmp_path / "src" / "components",
        content_root=tmp_path / "src" / "content",
    )
