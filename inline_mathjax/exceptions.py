"""Custom exceptions for the inline-mathjax preprocessor."""

class InlineMathjaxError(Exception):
    """Base exception for preprocessor errors."""
    pass

class PatternError(InlineMathjaxError):
    """Exception for a delimiter pattern that cannot be compiled."""
    pass

class ProtocolError(InlineMathjaxError):
    """Exception for malformed input from mdbook."""
    pass

class ConfigError(InlineMathjaxError):
    """Exception for invalid preprocessor options in book.toml."""
    pass
