"""JSON protocol spoken between mdbook and its preprocessors."""

import json
import logging
from typing import Any, TextIO, Tuple

import semver

from .config import MDBOOK_VERSION, PREPROCESSOR_NAME
from .exceptions import ProtocolError
from .models import Book, PreprocessorContext

logger = logging.getLogger(__name__)


def parse_input(stream: TextIO) -> Tuple[PreprocessorContext, Book]:
    """Read the `[context, book]` pair mdbook writes to stdin.

    Raises:
        ProtocolError: If the input is not valid JSON or has the wrong shape
    """
    try:
        data = json.load(stream)
    except json.JSONDecodeError as e:
        raise ProtocolError(f"Unable to parse the input: {e}") from e

    if not isinstance(data, list) or len(data) != 2:
        raise ProtocolError("Expected a JSON array of [context, book]")

    return PreprocessorContext.from_dict(data[0]), Book.from_dict(data[1])


def parse_version(version: str) -> semver.Version:
    """Parse a semantic version string."""
    try:
        return semver.Version.parse(version)
    except (TypeError, ValueError) as e:
        raise ProtocolError(f"Invalid version '{version}': {e}") from e


def caret_upper_bound(version: semver.Version) -> semver.Version:
    """Exclusive upper bound of Cargo's default `^version` requirement."""
    if version.major > 0:
        return semver.Version(version.major + 1, 0, 0)
    if version.minor > 0:
        return semver.Version(0, version.minor + 1, 0)
    return semver.Version(0, 0, version.patch + 1)


def version_matches(version: str, requirement: str = MDBOOK_VERSION) -> bool:
    """Check `version` against `^requirement`.

    Pre-releases only match a pre-release requirement on the same
    major.minor.patch, as in Cargo.
    """
    found = parse_version(version)
    lower = parse_version(requirement)
    if found.prerelease:
        same_release = found.finalize_version() == lower.finalize_version()
        if not (lower.prerelease and same_release):
            return False
    return lower <= found < caret_upper_bound(lower)


def check_version(ctx: PreprocessorContext, name: str = PREPROCESSOR_NAME) -> bool:
    """Warn when mdbook's version differs from the one we were built against.

    A mismatch is advisory only; the caller carries on either way.

    Raises:
        ProtocolError: If mdbook's version string cannot be parsed
    """
    if version_matches(ctx.mdbook_version):
        return True
    logger.warning(
        f"The {name} plugin was built against version {MDBOOK_VERSION} of mdbook, "
        f"but we're being called from version {ctx.mdbook_version}"
    )
    return False


def write_output(book: Book, stream: TextIO) -> None:
    """Write the processed book back to mdbook."""
    json.dump(book.to_dict(), stream, ensure_ascii=False)
    stream.flush()


def handle_preprocessing(preprocessor: Any, stdin: TextIO, stdout: TextIO) -> None:
    """Run the full stdin to stdout pipeline for one mdbook invocation."""
    ctx, book = parse_input(stdin)
    check_version(ctx, preprocessor.name())

    logger.debug(f"Processing book for renderer '{ctx.renderer}'")
    processed_book = preprocessor.run(ctx, book)
    write_output(processed_book, stdout)
