"""Directory walker - discovers files in a directory tree."""

import logging
import os
import stat
from pathlib import Path
from typing import Callable, Iterator, Optional, Union

from .classifier import is_audio, is_image
from .exceptions import ScanRootError

logger = logging.getLogger(__name__)


def walk(root: Union[str, Path], max_depth: Optional[int] = None) -> Iterator[Path]:
    """
    Lazily enumerate regular files under a directory, depth-first.

    Args:
        root: Directory to walk
        max_depth: None for an unbounded walk, 1 for direct children only, etc.

    Yields:
        Path objects for each regular file found. Directories, symlinks and
        special files are never yielded, and symlinked directories are not
        followed.

    Raises:
        ScanRootError: if root is missing, not a directory, or cannot be listed.
            Errors below the root are logged and skipped.
    """
    root = Path(root)

    try:
        root_stat = root.stat()
    except (FileNotFoundError, NotADirectoryError) as e:
        raise ScanRootError(f"Directory not found: {root}", details={"path": str(root)}) from e
    except OSError as e:
        raise ScanRootError(f"Cannot read directory {root}: {e}", details={"path": str(root)}) from e

    if not stat.S_ISDIR(root_stat.st_mode):
        raise ScanRootError(f"Not a directory: {root}", details={"path": str(root)})

    try:
        entries = _list_dir(root)
    except OSError as e:
        raise ScanRootError(f"Cannot read directory {root}: {e}", details={"path": str(root)}) from e

    yield from _walk_entries(entries, max_depth)


def _list_dir(directory: Path) -> list[os.DirEntry]:
    with os.scandir(directory) as it:
        return list(it)


def _walk_entries(entries: list[os.DirEntry], max_depth: Optional[int]) -> Iterator[Path]:
    # Explicit stack of (pending entries, depth) keeps very deep trees off the call stack
    stack = [(iter(entries), 1)]
    while stack:
        pending, depth = stack[-1]
        entry = next(pending, None)
        if entry is None:
            stack.pop()
            continue

        try:
            is_dir = entry.is_dir(follow_symlinks=False)
            is_file = not is_dir and entry.is_file(follow_symlinks=False)
            if is_dir and (max_depth is None or depth < max_depth):
                children = _list_dir(Path(entry.path))
            else:
                children = None
        except OSError as e:
            logger.debug(f"Skipping {entry.path}: {e}")
            continue

        if is_file:
            yield Path(entry.path)
        elif children is not None:
            stack.append((iter(children), depth + 1))


def scan_audio_files(
    root: Union[str, Path],
    on_file: Optional[Callable[[Path], None]] = None,
) -> Iterator[Path]:
    """
    Recursively scan a directory for audio files.

    Args:
        root: Root directory to scan
        on_file: Called with each audio file as it is found

    Yields:
        Path objects for each audio file found
    """
    logger.info(f"Scanning directory: {root}")

    for path in walk(root):
        if is_audio(path):
            if on_file:
                on_file(path)
            yield path


def scan_image_files(root: Union[str, Path]) -> Iterator[Path]:
    """Yield image files directly inside root (no recursion)."""
    for path in walk(root, max_depth=1):
        if is_image(path):
            yield path
