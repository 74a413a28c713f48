"""
Bundle source reader.

Loads bundle files from the local file system as UTF-8 text.
Newlines are preserved exactly as stored so that splitting and
re-joining a bundle reproduces the file byte-for-byte.
"""

import glob
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from docbundle.errors import BundleReadError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BundleSource:
    """A bundle read from disk.

    Attributes:
        path: Path to the source file (None for standard input)
        text: Decoded bundle text
        metadata: Additional metadata about the source
    """
    path: Optional[Path]
    text: str
    metadata: dict = field(default_factory=dict)


class BundleReader:
    """Reads bundle files as UTF-8 text."""

    ENCODING = "utf-8"

    def read(self, path: Union[str, Path]) -> BundleSource:
        """Read a single bundle file.

        Raises:
            BundleReadError: If the file is missing, is a directory, or is
                not valid UTF-8
        """
        file_path = Path(path)

        if not file_path.exists():
            raise BundleReadError(f"Bundle file not found: {path}", path=str(path))
        if not file_path.is_file():
            raise BundleReadError(f"Path is not a file: {path}", path=str(path))

        try:
            # newline="" keeps \r\n intact
            with open(file_path, "r", encoding=self.ENCODING, newline="") as f:
                text = f.read()
        except UnicodeDecodeError as e:
            raise BundleReadError(
                f"Bundle file is not valid UTF-8: {path} ({e.reason} at byte {e.start})",
                path=str(path),
                original_error=e,
            ) from e
        except OSError as e:
            raise BundleReadError(
                f"Failed to read bundle file {path}: {e}",
                path=str(path),
                original_error=e,
            ) from e

        logger.debug(f"Read bundle {file_path} ({len(text)} chars)")

        return BundleSource(path=file_path, text=text, metadata=_metadata(file_path.name, text))

    def read_bytes(self, data: bytes, name: str = "<stdin>") -> BundleSource:
        """Decode raw bundle bytes, e.g. from standard input.

        Raises:
            BundleReadError: If the bytes are not valid UTF-8
        """
        try:
            text = data.decode(self.ENCODING)
        except UnicodeDecodeError as e:
            raise BundleReadError(
                f"Bundle input is not valid UTF-8: {name} ({e.reason} at byte {e.start})",
                path=name,
                original_error=e,
            ) from e

        logger.debug(f"Read bundle from {name} ({len(text)} chars)")
        return BundleSource(path=None, text=text, metadata=_metadata(name, text))

    def read_many(self, pattern: str) -> List[BundleSource]:
        """Read every file matching a glob pattern, sorted by path.

        Raises:
            BundleReadError: If nothing matches or any file fails to read
        """
        paths = expand_pattern(pattern)
        if not paths:
            raise BundleReadError(f"No files match pattern: {pattern}", path=pattern)

        logger.info(f"Reading {len(paths)} bundle file(s) matching {pattern}")
        return [self.read(p) for p in paths]


def expand_pattern(pattern: str) -> List[str]:
    """Files matching a glob pattern (``**`` allowed), sorted by path."""
    return sorted(p for p in glob.glob(pattern, recursive=True) if Path(p).is_file())


def _metadata(name: str, text: str) -> dict:
    return {
        "name": name,
        "char_count": len(text),
        "line_count": text.count("\n") + 1,
    }
