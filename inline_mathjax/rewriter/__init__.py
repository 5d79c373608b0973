"""Rewriter package for inline math delimiters."""

from .delimiters import (
    Delimiter,
    DelimiterRole,
    count_delimiters,
    find_delimiters,
    inline_delimiter_pattern,
    rewrite_inline_math
)

__all__ = [
    'Delimiter',
    'DelimiterRole',
    'count_delimiters',
    'find_delimiters',
    'inline_delimiter_pattern',
    'rewrite_inline_math'
]
