"""
Archive reader backed by python-libzim.

libzim reports every problem as a RuntimeError; this module translates
those into ArchiveOpenError (fatal, archive unusable) or EntryReadError
(one entry is broken, the scan goes on).
"""

from pathlib import Path
from typing import Iterator, List, Union

from libzim.reader import Archive

from zimcheck.archive.base import INVALID_INDEX, ArchiveEntry, ArchiveReader
from zimcheck.errors import ArchiveError, ArchiveOpenError, EntryReadError
from zimcheck.utils.logger import logger


class LibzimEntry(ArchiveEntry):
    """Lazy wrapper around ``libzim.reader.Entry``.

    Nothing is resolved until a member is accessed, and the item content
    is only fetched by read().
    """

    def __init__(self, archive: Archive, index: int):
        self._archive = archive
        self._index = index
        self._entry = None
        self._item = None

    def _resolve_entry(self):
        if self._entry is None:
            try:
                self._entry = self._archive._get_entry_by_id(self._index)
            except RuntimeError as exc:
                raise EntryReadError(f"#{self._index}", str(exc)) from exc
        return self._entry

    def _resolve_item(self):
        if self._item is None:
            entry = self._resolve_entry()
            try:
                self._item = entry.get_item()
            except RuntimeError as exc:
                raise EntryReadError(entry.path, str(exc)) from exc
        return self._item

    @property
    def path(self) -> str:
        return self._resolve_entry().path

    @property
    def is_redirect(self) -> bool:
        return self._resolve_entry().is_redirect

    @property
    def mimetype(self) -> str:
        return self._resolve_item().mimetype

    @property
    def size(self) -> int:
        return self._resolve_item().size

    def read(self) -> bytes:
        item = self._resolve_item()
        try:
            return bytes(item.content)
        except RuntimeError as exc:
            raise EntryReadError(item.path, str(exc)) from exc


class LibzimArchive(ArchiveReader):
    """ZIM file opened with ``libzim.reader.Archive``."""

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)
        try:
            self._archive = Archive(self._path)
        except (RuntimeError, OSError) as exc:
            raise ArchiveOpenError(path, str(exc)) from exc

    @property
    def filename(self) -> str:
        return str(self._path)

    @property
    def uuid(self) -> str:
        return str(self._archive.uuid)

    @property
    def entry_count(self) -> int:
        return self._archive.entry_count

    def iter_entries(self) -> Iterator[ArchiveEntry]:
        # Entry ids follow path order
        for index in range(self._archive.entry_count):
            yield LibzimEntry(self._archive, index)

    def has_entry(self, path: str) -> bool:
        return self._archive.has_entry_by_path(path)

    # ------------------------------------------------------------------
    # Checksum and structure
    # ------------------------------------------------------------------

    @property
    def declared_checksum(self) -> str:
        if not self._archive.has_checksum:
            return ""
        return self._archive.checksum

    def verify_checksum(self) -> bool:
        try:
            return self._archive.check()
        except RuntimeError as exc:
            raise ArchiveError("Checksum verification failed", context={"reason": str(exc)}) from exc

    def verify_integrity(self) -> bool:
        """Verify the checksum, then resolve every entry, redirect and item.

        python-libzim exposes no structural validator, so this walks the
        entries itself. Damage that libzim tolerates while reading (cluster
        offsets, pointer list ordering) is not detected here.
        """
        if self._archive.has_checksum and not self.verify_checksum():
            logger.debug("Integrity: checksum mismatch in %s", self._path)
            return False
        for index in range(self._archive.entry_count):
            try:
                entry = self._archive._get_entry_by_id(index)
                if entry.is_redirect:
                    entry.get_redirect_entry()
                else:
                    item = entry.get_item()
                    item.mimetype
                    item.size
            except RuntimeError as exc:
                logger.debug("Integrity: entry #%d is broken: %s", index, exc)
                return False
        if self._archive.has_main_entry:
            try:
                self._archive.main_entry
            except RuntimeError as exc:
                logger.debug("Integrity: main entry is broken: %s", exc)
                return False
        return True

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    @property
    def metadata_keys(self) -> List[str]:
        return list(self._archive.metadata_keys)

    def get_metadata(self, key: str) -> bytes:
        try:
            return bytes(self._archive.get_metadata(key))
        except RuntimeError as exc:
            raise ArchiveError(f"Metadata {key!r} not found") from exc

    def has_illustration(self) -> bool:
        return self._archive.has_illustration()

    # ------------------------------------------------------------------
    # Main page
    # ------------------------------------------------------------------

    @property
    def main_page_index(self) -> int:
        if not self._archive.has_main_entry:
            return INVALID_INDEX
        try:
            return self._archive.main_entry._index
        except RuntimeError as exc:
            raise ArchiveError("Main entry cannot be resolved", context={"reason": str(exc)}) from exc

    def is_valid_entry_index(self, index: int) -> bool:
        # Header indices count every entry, including the metadata ones
        return index != INVALID_INDEX and 0 <= index < self._archive.all_entry_count
