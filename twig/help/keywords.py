"""
Help keywords: documentation topics that are not commands.
"""

from dataclasses import dataclass
from pathlib import Path

import click

DOCS_DIR = Path(__file__).parent / "docs"


@dataclass(frozen=True)
class Keyword:
    """A documentation topic shown by ``twig help -k <name>``."""

    name: str
    description: str
    content: str


def _load(name: str, description: str) -> Keyword:
    content = (DOCS_DIR / f"{name}.md").read_text(encoding="utf-8")
    return Keyword(name=name, description=description, content=content)


# TODO: render the Markdown with ANSI styling when color is enabled
KEYWORDS: tuple[Keyword, ...] = (
    _load("bookmarks", "Named pointers to revisions (similar to Git's branches)"),
    _load("config", "How and where to set configuration options"),
    _load("filesets", "A functional language for selecting a set of files"),
    _load("glossary", "Definitions of various terms"),
    _load("revsets", "A functional language for selecting a set of revisions"),
    _load("templates", "A functional language to customize command output"),
    _load("tutorial", "Show a tutorial to get started with twig"),
)


def find_keyword(name: str) -> Keyword | None:
    """Return the keyword with exactly this name, if any."""
    for keyword in KEYWORDS:
        if keyword.name == name:
            return keyword
    return None


def keyword_names() -> list[str]:
    return [keyword.name for keyword in KEYWORDS]


def keyword_hint_after_help(bin_name: str = "twig", color: bool = False) -> str:
    """Hint printed below the help of the help command."""

    def bold(text: str) -> str:
        return click.style(text, bold=True) if color else text

    list_cmd = bold(f"'{bin_name} help --help'")
    keyword_cmd = bold(f"'{bin_name} help -k'")
    return f"{list_cmd} lists available keywords. Use {keyword_cmd} to show help for one of these keywords."
