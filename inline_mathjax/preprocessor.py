"""mdbook preprocessor rewriting inline MathJax delimiters in every chapter."""

import logging
from dataclasses import dataclass
from typing import Any, Dict

from .config import (
    CLOSE_MARKER,
    OPEN_MARKER,
    PREPROCESSOR_NAME,
    UNSUPPORTED_RENDERER
)
from .exceptions import ConfigError
from .models import Book, Chapter, PreprocessorContext
from .rewriter import count_delimiters, rewrite_inline_math

logger = logging.getLogger(__name__)


@dataclass
class RewriteOptions:
    """Marker settings read from [preprocessor.inline-mathjax]."""
    open_marker: str = OPEN_MARKER
    close_marker: str = CLOSE_MARKER

    @classmethod
    def from_config(cls, table: Dict[str, Any]) -> "RewriteOptions":
        """Build options from the preprocessor's book.toml table.

        Args:
            table: The [preprocessor.inline-mathjax] table

        Returns:
            Validated options

        Raises:
            ConfigError: If an option has the wrong type
        """
        open_marker = table.get("open-marker", OPEN_MARKER)
        close_marker = table.get("close-marker", CLOSE_MARKER)
        markdown_escape = table.get("markdown-escape", False)

        for key, value in (("open-marker", open_marker), ("close-marker", close_marker)):
            if not isinstance(value, str):
                raise ConfigError(f"'{key}' must be a string, got {value!r}")
        if not isinstance(markdown_escape, bool):
            raise ConfigError(f"'markdown-escape' must be a boolean, got {markdown_escape!r}")

        # mdbook's markdown pass eats one backslash
        if markdown_escape:
            open_marker = _escape_backslash(open_marker)
            close_marker = _escape_backslash(close_marker)

        return cls(open_marker=open_marker, close_marker=close_marker)


def _escape_backslash(marker: str) -> str:
    return marker.replace("\\", "\\\\")


class InlineMathjax:
    """Turns `$...$` into `\\( ... \\)` and leaves `$$...$$` alone."""

    def name(self) -> str:
        return PREPROCESSOR_NAME

    def rewrite_chapter(self, chapter: Chapter, options: RewriteOptions) -> None:
        """Rewrite a single chapter's content in place."""
        candidates = count_delimiters(chapter.content)
        if candidates % 2 == 1:
            # The last '$' is still turned into an opening marker
            logger.warning(
                f"Chapter '{chapter.name}' has an odd number of inline math delimiters ({candidates})"
            )
        chapter.content = rewrite_inline_math(
            chapter.content,
            open_marker=options.open_marker,
            close_marker=options.close_marker
        )
        logger.debug(f"Rewrote {candidates} delimiters in chapter '{chapter.name}'")

    def run(self, ctx: PreprocessorContext, book: Book) -> Book:
        """Rewrite inline math in every chapter of the book.

        Args:
            ctx: Context passed by mdbook
            book: Book to process

        Returns:
            The same book with rewritten chapter contents

        Raises:
            ConfigError: If the preprocessor options are invalid
        """
        options = RewriteOptions.from_config(ctx.preprocessor_config(self.name()))
        book.for_each_chapter(lambda chapter: self.rewrite_chapter(chapter, options))
        return book

    def supports_renderer(self, renderer: str) -> bool:
        return renderer != UNSUPPORTED_RENDERER
