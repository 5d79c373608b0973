"""Inline math delimiter detection and rewriting."""

import re
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import List, Pattern

from ..config import OPEN_MARKER, CLOSE_MARKER
from ..exceptions import PatternError

# A '$' not preceded by '\' or another '$', and not followed by '$'.
# The '$' checks keep '$$' blocks out, mdbook already handles those.
INLINE_DELIMITER_REGEX = r"(?<!\\)(?<!\$)\$(?!\$)"


class DelimiterRole(Enum):
    """Role of an inline delimiter within its pair."""
    OPENING = "opening"
    CLOSING = "closing"


@dataclass(frozen=True)
class Delimiter:
    """A candidate '$' in the original text."""
    position: int
    role: DelimiterRole


@lru_cache(maxsize=None)
def inline_delimiter_pattern() -> Pattern[str]:
    """Return the shared compiled pattern matching inline delimiters.

    Raises:
        PatternError: If the pattern cannot be compiled
    """
    try:
        return re.compile(INLINE_DELIMITER_REGEX)
    except re.error as e:
        raise PatternError(f"Failed to compile inline delimiter pattern: {e}") from e


def find_delimiters(text: str) -> List[Delimiter]:
    """Collect every candidate '$' in left-to-right order.

    Candidates alternate strictly between opening and closing by order of
    appearance. Nothing looks at the content between them, so an odd count
    leaves the last candidate classified as opening.

    Args:
        text: Raw text to scan

    Returns:
        List of delimiters with their roles
    """
    delimiters = []
    for i, match in enumerate(inline_delimiter_pattern().finditer(text)):
        role = DelimiterRole.OPENING if i % 2 == 0 else DelimiterRole.CLOSING
        delimiters.append(Delimiter(match.start(), role))
    return delimiters


def count_delimiters(text: str) -> int:
    """Count candidate '$' characters in text."""
    return sum(1 for _ in inline_delimiter_pattern().finditer(text))


def rewrite_inline_math(
    text: str,
    open_marker: str = OPEN_MARKER,
    close_marker: str = CLOSE_MARKER
) -> str:
    """Replace inline '$' delimiters with MathJax markers.

    Block math ('$$') and escaped dollars ('\\$') are left as they are.

    Args:
        text: Raw text to rewrite
        open_marker: Replacement for an opening delimiter
        close_marker: Replacement for a closing delimiter

    Returns:
        Rewritten text
    """
    delimiters = find_delimiters(text)
    if not delimiters:
        return text

    parts = []
    last = 0
    for delimiter in delimiters:
        parts.append(text[last:delimiter.position])
        if delimiter.role is DelimiterRole.OPENING:
            parts.append(open_marker)
        else:
            parts.append(close_marker)
        last = delimiter.position + 1
    parts.append(text[last:])

    return "".join(parts)
