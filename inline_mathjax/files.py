"""Rewrite inline math in standalone Markdown files outside of mdbook."""

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from tqdm import tqdm

from .config import DEFAULT_FILE_PATTERN, SKIPPED_DIRECTORIES
from .preprocessor import RewriteOptions
from .rewriter import count_delimiters, rewrite_inline_math

logger = logging.getLogger(__name__)


def collect_files(paths: Iterable[Path], file_pattern: str = DEFAULT_FILE_PATTERN) -> List[Path]:
    """Expand files and directories into a sorted list of Markdown files.

    Directories are searched recursively, skipping build output and VCS
    folders.

    Raises:
        FileNotFoundError: If a path does not exist
    """
    files = []
    for path in paths:
        path = Path(path)
        if path.is_dir():
            for file_path in sorted(path.rglob(file_pattern)):
                relative_parts = file_path.relative_to(path).parts[:-1]
                if any(part in SKIPPED_DIRECTORIES for part in relative_parts):
                    continue
                if file_path.is_file():
                    files.append(file_path)
        elif path.is_file():
            files.append(path)
        else:
            raise FileNotFoundError(f"No such file or directory: {path}")
    return files


def convert_file(
    file_path: Path,
    options: Optional[RewriteOptions] = None,
    output_path: Optional[Path] = None
) -> bool:
    """Rewrite one file.

    Args:
        file_path: Markdown file to read
        options: Marker settings, defaults to the canonical markers
        output_path: Where to write the result; the file itself when omitted

    Returns:
        Whether the content changed
    """
    options = options or RewriteOptions()
    content = file_path.read_text(encoding="utf-8")

    if count_delimiters(content) % 2 == 1:
        logger.warning(f"{file_path} has an odd number of inline math delimiters")

    converted = rewrite_inline_math(content, options.open_marker, options.close_marker)
    changed = converted != content
    target = output_path or file_path

    # Unchanged files are only written when they go somewhere new
    if changed or target != file_path:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(converted, encoding="utf-8")
        logger.debug(f"Wrote {target}")

    return changed


def convert_paths(
    paths: Iterable[Path],
    output_dir: Optional[Path] = None,
    file_pattern: str = DEFAULT_FILE_PATTERN,
    options: Optional[RewriteOptions] = None,
    show_progress: bool = True
) -> List[Path]:
    """Rewrite every Markdown file found under paths.

    Args:
        paths: Files and directories to process
        output_dir: Mirror results into this directory instead of in place
        file_pattern: Glob pattern for files inside directories
        options: Marker settings
        show_progress: Whether to display a progress bar

    Returns:
        Files whose content changed
    """
    changed = []
    for root in paths:
        root = Path(root)
        files = collect_files([root], file_pattern)
        for file_path in tqdm(files, desc=f"Converting {root}", disable=not show_progress):
            output_path = None
            if output_dir is not None:
                relative = file_path.relative_to(root) if root.is_dir() else Path(file_path.name)
                output_path = Path(output_dir) / relative
            if convert_file(file_path, options, output_path):
                changed.append(file_path)

    logger.info(f"Converted inline math in {len(changed)} file(s)")
    return changed
