"""Pytest configuration and shared fixtures for boilerstrip tests."""

from collections.abc import Callable
from pathlib import Path

import pytest


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Pure logic tests with no I/O")
    config.addinivalue_line("markers", "integration: Tests that touch the filesystem or run the CLI")


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """
    Apply default markers to tests without explicit markers.

    Unmarked tests default to unit.
    """
    for item in items:
        marker_names = [m.name for m in item.iter_markers()]
        if any(m in marker_names for m in ("unit", "integration")):
            continue

        item.add_marker(pytest.mark.unit)


@pytest.fixture
def words() -> Callable[..., str]:
    """Build a paragraph of distinct words, e.g. words(25, "alpha")."""

    def _words(count: int, prefix: str = "word") -> str:
        return " ".join(f"{prefix}{i}" for i in range(count))

    return _words


@pytest.fixture
def article_html(words: Callable[..., str]) -> str:
    """A small page with a sidebar and one article block."""
    return (
        "<html><head><title>Test</title></head><body>"
        '<div class="sidebar"><p>short</p></div>'
        f'<div id="content"><p>{words(25)}</p></div>'
        "</body></html>"
    )


@pytest.fixture
def article_file(tmp_path: Path, article_html: str) -> Path:
    """Write article_html to a temporary file.

    Args:
        tmp_path: Pytest temporary directory.
        article_html: Page markup.

    Returns:
        Path to the created HTML file.
    """
    path = tmp_path / "page.html"
    path.write_text(article_html, encoding="utf-8")
    return path
