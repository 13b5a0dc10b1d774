"""
Pytest configuration and shared fixtures for twig tests.
"""

from io import StringIO

import click
import pytest

from twig.ui import Ui


@pytest.fixture
def command_tree() -> click.Group:
    """Create a small command tree resembling the twig CLI."""

    @click.group(name="twig", help="twig - a version control system")
    def root():
        pass

    @root.command(help="Show revision history")
    @click.option("-r", "--revisions", multiple=True, help="Which revisions to show")
    @click.argument("paths", nargs=-1)
    def log(revisions, paths):
        pass

    @root.command(help="Show high-level repo status")
    def status():
        pass

    @root.group(help="Manage bookmarks")
    def bookmark():
        pass

    @bookmark.command(help="Create a new bookmark")
    @click.argument("names", nargs=-1)
    def create(names):
        pass

    @bookmark.command(name="list", help="List bookmarks and their targets")
    def list_bookmarks():
        pass

    @bookmark.group(help="Manage remote bookmarks")
    def remote():
        pass

    @remote.command(help="Start tracking a remote bookmark")
    def track():
        pass

    return root


@pytest.fixture
def output() -> StringIO:
    """Stream that collects Ui output."""
    return StringIO()


@pytest.fixture
def ui(output) -> Ui:
    """Plain Ui writing to the output fixture."""
    return Ui(color=False, paginate="never", stream=output)


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    """
    Point TWIG_CONFIG at a temporary file.

    Returns a function writing the given TOML text to the file.
    """
    path = tmp_path / "config.toml"
    monkeypatch.setenv("TWIG_CONFIG", str(path))
    monkeypatch.delenv("NO_COLOR", raising=False)

    def write(text: str):
        path.write_text(text, encoding="utf-8")
        return path

    return write
