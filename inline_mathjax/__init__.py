"""
mdbook preprocessor for inline MathJax delimiters.
"""

from .models import Book, Chapter, PreprocessorContext
from .preprocessor import InlineMathjax, RewriteOptions
from .rewriter import rewrite_inline_math

__all__ = ['Book', 'Chapter', 'PreprocessorContext', 'InlineMathjax', 'RewriteOptions', 'rewrite_inline_math']
