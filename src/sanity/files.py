"""
sanity - Whole-File I/O.

``slurp`` reads a file into a string; ``spit`` writes a string to a file,
replacing any existing content. Writes are not atomic.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Union

from sanity.errors import FileIOError

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def slurp(path: PathLike, encoding: str = "utf-8") -> str:
    """
    Read an entire file into a string.

    Raises:
        FileIOError: If the file cannot be read
    """
    file_path = Path(path)
    try:
        content = file_path.read_text(encoding=encoding)
    except OSError as e:
        raise FileIOError(f"Cannot read file: {e.strerror or e}", str(file_path), "slurp") from e
    logger.debug("Read %d characters from %s", len(content), file_path)
    return content


def spit(path: PathLike, content: str, encoding: str = "utf-8") -> None:
    """
    Write content to a file, creating it if needed and truncating it otherwise.

    Raises:
        FileIOError: If the file cannot be written
    """
    file_path = Path(path)
    try:
        file_path.write_text(content, encoding=encoding)
    except OSError as e:
        raise FileIOError(f"Cannot write file: {e.strerror or e}", str(file_path), "spit") from e
    logger.debug("Wrote %d characters to %s", len(content), file_path)
