"""Command line interface for the inline-mathjax preprocessor."""

from .main import app

__all__ = ['app']
