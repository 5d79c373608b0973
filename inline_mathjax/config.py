"""Configuration settings for the inline-mathjax preprocessor."""

# Preprocessor identity
PREPROCESSOR_NAME = "inline-mathjax"
TOOL_VERSION = "0.1.0"

# mdbook release the JSON protocol handling was written against
MDBOOK_VERSION = "0.4.40"

# Renderer name reserved for exercising the "unsupported" path
UNSUPPORTED_RENDERER = "not-supported"

# Canonical MathJax markers
OPEN_MARKER = "\\( "
CLOSE_MARKER = " \\)"

# Standalone conversion settings
DEFAULT_FILE_PATTERN = "*.md"
SKIPPED_DIRECTORIES = (".git", "book", "node_modules")

# Logging
LOG_LEVEL_ENV_VAR = "INLINE_MATHJAX_LOG"
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
