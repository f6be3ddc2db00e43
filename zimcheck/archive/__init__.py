"""Archive access for zimcheck."""

from pathlib import Path
from typing import Union

from zimcheck.archive.base import INVALID_INDEX, ArchiveEntry, ArchiveReader
from zimcheck.archive.memory import MemoryArchive, MemoryEntry
from zimcheck.errors import ArchiveOpenError


def open_archive(path: Union[str, Path]) -> ArchiveReader:
    """Open a ZIM file for checking.

    Raises:
        ArchiveOpenError: If the file cannot be opened as a ZIM archive
    """
    # libzim is an optional binary dependency, only needed for real files
    try:
        from zimcheck.archive.libzim_reader import LibzimArchive
    except ImportError as exc:
        raise ArchiveOpenError(
            path,
            f"libzim is not available ({exc})",
            suggestion="Install it with: pip install zimcheck[zim]",
        ) from exc
    return LibzimArchive(path)


__all__ = [
    "INVALID_INDEX",
    "ArchiveEntry",
    "ArchiveReader",
    "MemoryArchive",
    "MemoryEntry",
    "open_archive",
]
