"""Models package for shared data structures."""

from .book import Book, BookItem, Chapter, PartTitle, Separator
from .context import PreprocessorContext

__all__ = ['Book', 'BookItem', 'Chapter', 'PartTitle', 'Separator', 'PreprocessorContext']
