"""
In-memory archive.

Implements the reader interface over a list of entries held in memory. It
is used to build fixture archives and to run the checks on content that has
not been packed into a ZIM file yet.
"""

import hashlib
import uuid as uuid_module
from typing import Dict, Iterable, Iterator, List, Optional

from zimcheck.archive.base import INVALID_INDEX, ArchiveEntry, ArchiveReader
from zimcheck.errors import ArchiveError
from zimcheck.utils.logger import logger


class MemoryEntry(ArchiveEntry):
    """Entry whose content is a bytes object (or a redirect to another path)."""

    def __init__(
        self,
        path: str,
        content: bytes = b"",
        mimetype: str = "text/html",
        redirect_to: Optional[str] = None,
    ):
        if isinstance(content, str):
            content = content.encode("utf-8")
        self._path = path
        self._content = content
        self._mimetype = mimetype
        self.redirect_to = redirect_to

    @property
    def path(self) -> str:
        return self._path

    @property
    def is_redirect(self) -> bool:
        return self.redirect_to is not None

    @property
    def mimetype(self) -> str:
        return self._mimetype

    @property
    def size(self) -> int:
        return len(self._content)

    def read(self) -> bytes:
        return self._content

    def payload(self) -> bytes:
        """Raw stored bytes, as hashed into the archive checksum."""
        if self.is_redirect:
            return self.redirect_to.encode("utf-8")
        return self._content


class MemoryArchive(ArchiveReader):
    """Archive backed by in-memory entries and metadata.

    Entries are kept sorted by path, as in a ZIM file. The checksum is an
    MD5 digest over entry paths, contents and metadata; when
    ``declared_checksum`` is omitted the archive declares the digest of its
    own payload and the checksum check passes.
    """

    def __init__(
        self,
        entries: Iterable[MemoryEntry] = (),
        metadata: Optional[Dict[str, str]] = None,
        main_page: Optional[str] = None,
        main_page_index: Optional[int] = None,
        illustration: bool = False,
        declared_checksum: Optional[str] = None,
        filename: str = "memory.zim",
        uuid: Optional[str] = None,
    ):
        self._entries: List[MemoryEntry] = sorted(entries, key=lambda e: e.path)
        self._by_path = {entry.path: index for index, entry in enumerate(self._entries)}
        if len(self._by_path) != len(self._entries):
            raise ArchiveError("Duplicate entry paths in memory archive")

        self._metadata = {
            key: value.encode("utf-8") if isinstance(value, str) else value
            for key, value in (metadata or {}).items()
        }

        if main_page_index is None:
            main_page_index = self._by_path.get(main_page, INVALID_INDEX) if main_page else INVALID_INDEX
        self._main_page_index = main_page_index

        self._illustration = illustration
        self._filename = filename
        self._uuid = uuid or str(uuid_module.UUID(int=0))
        self._declared_checksum = declared_checksum or self._compute_checksum()

    # ------------------------------------------------------------------
    # Identity and entries
    # ------------------------------------------------------------------

    @property
    def filename(self) -> str:
        return self._filename

    @property
    def uuid(self) -> str:
        return self._uuid

    @property
    def entry_count(self) -> int:
        return len(self._entries)

    def iter_entries(self) -> Iterator[ArchiveEntry]:
        return iter(self._entries)

    def has_entry(self, path: str) -> bool:
        return path in self._by_path

    # ------------------------------------------------------------------
    # Checksum and structure
    # ------------------------------------------------------------------

    def _compute_checksum(self) -> str:
        digest = hashlib.md5()
        for entry in self._entries:
            digest.update(entry.path.encode("utf-8"))
            digest.update(b"\0")
            digest.update(entry.payload())
            digest.update(b"\0")
        for key in sorted(self._metadata):
            digest.update(key.encode("utf-8"))
            digest.update(b"\0")
            digest.update(self._metadata[key])
            digest.update(b"\0")
        return digest.hexdigest()

    @property
    def declared_checksum(self) -> str:
        return self._declared_checksum

    def verify_checksum(self) -> bool:
        return self._compute_checksum() == self._declared_checksum

    def verify_integrity(self) -> bool:
        if not self.verify_checksum():
            logger.debug("Integrity: checksum mismatch in %s", self._filename)
            return False
        for entry in self._entries:
            if entry.is_redirect and entry.redirect_to not in self._by_path:
                logger.debug("Integrity: redirect %s points to missing %s",
                             entry.path, entry.redirect_to)
                return False
        if self._main_page_index != INVALID_INDEX and not self.is_valid_entry_index(self._main_page_index):
            logger.debug("Integrity: main page index %d out of range", self._main_page_index)
            return False
        return True

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    @property
    def metadata_keys(self) -> List[str]:
        return list(self._metadata)

    def get_metadata(self, key: str) -> bytes:
        try:
            return self._metadata[key]
        except KeyError:
            raise ArchiveError(f"Metadata {key!r} not found") from None

    def has_illustration(self) -> bool:
        return self._illustration

    # ------------------------------------------------------------------
    # Main page
    # ------------------------------------------------------------------

    @property
    def main_page_index(self) -> int:
        return self._main_page_index

    def is_valid_entry_index(self, index: int) -> bool:
        return 0 <= index < len(self._entries)
