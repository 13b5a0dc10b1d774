"""
Terminal output for twig commands.

Output is buffered for the lifetime of a ``Ui`` block and written when the
block exits cleanly, optionally through a pager. A failing command therefore
never leaves partial output on stdout.
"""

import logging
import os
import sys
from typing import Literal, TextIO

import click

logger = logging.getLogger(__name__)

ColorChoice = Literal["always", "never", "auto"]
PaginationChoice = Literal["auto", "never"]


def use_color(choice: ColorChoice, stream: TextIO | None = None) -> bool:
    """Decide whether output should be styled."""
    if choice == "always":
        return True
    if choice == "never":
        return False
    if os.environ.get("NO_COLOR"):
        return False
    stream = stream if stream is not None else sys.stdout
    return stream.isatty()


class Ui:
    """
    Buffered, optionally paged output stream.

    Usage:
        with Ui(color=True) as ui:
            ui.request_pager()
            ui.write("...")
    """

    def __init__(
        self,
        color: bool = False,
        paginate: PaginationChoice = "auto",
        stream: TextIO | None = None,
    ) -> None:
        """
        Args:
            color: Whether to emit ANSI styling
            paginate: "auto" to page when stdout is a terminal, "never" to disable
            stream: Destination stream (defaults to sys.stdout at flush time)
        """
        self.color = color
        self.paginate = paginate
        self.stream = stream
        self._chunks: list[str] = []
        self._pager_requested = False

    def __enter__(self) -> "Ui":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.flush()
        else:
            self._chunks.clear()

    def request_pager(self) -> None:
        """Ask for the output to go through a pager if paging is enabled."""
        self._pager_requested = True

    def write(self, text: str) -> None:
        self._chunks.append(text)

    def writeln(self, text: str = "") -> None:
        self._chunks.append(f"{text}\n")

    def _should_page(self) -> bool:
        if not self._pager_requested or self.paginate == "never":
            return False
        return self.stream is None and sys.stdout.isatty()

    def flush(self) -> None:
        """Write buffered output to the stream or the pager."""
        text = "".join(self._chunks)
        self._chunks.clear()
        if not text:
            return
        if self._should_page():
            logger.debug("Writing output through pager")
            click.echo_via_pager(text, color=self.color)
        else:
            click.echo(text, file=self.stream, nl=False, color=self.color)
