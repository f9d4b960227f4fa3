"""
Module: common.file_locking

Purpose:
    Cross-platform file locking for export files.
    Uses portalocker for Mac, Windows, and Linux compatibility.

Key Functions:
    - locked_file: Context manager for locked file access
    - locked_write_text: Replace a file's contents while holding an exclusive lock

Dependencies:
    - portalocker: Cross-platform file locking

Used By:
    - export.writer: JSON and CSV progress export
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, TextIO

import portalocker

logger = logging.getLogger(__name__)


@contextmanager
def locked_file(path: Path, mode: str = 'a') -> Generator[TextIO, None, None]:
    """
    Context manager for cross-platform exclusive file access.

    Args:
        path: Path to file.
        mode: File open mode; must create the file if missing ('a', 'w', 'x').

    Yields:
        Open file handle with an exclusive lock held.

    Example:
        >>> with locked_file(path, 'a') as f:
        ...     f.write('data')
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, mode, encoding='utf-8', newline='') as f:
        portalocker.lock(f, portalocker.LOCK_EX)
        try:
            yield f
        finally:
            portalocker.unlock(f)


def locked_write_text(path: Path, content: str) -> None:
    """
    Replace the contents of a file under an exclusive lock.

    The file is opened in append mode so nothing is truncated until the
    lock is held; a concurrent writer never sees a half-written export.

    Args:
        path: Path to file (parent directories are created).
        content: Full text to write.
    """
    with locked_file(path, 'a') as f:
        f.seek(0)
        f.truncate()
        f.write(content)

    logger.debug(f"Wrote {len(content)} characters to {path.name}")
