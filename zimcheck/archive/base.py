"""
Archive access interface.

The checks only talk to archives through ArchiveReader and ArchiveEntry, so
the engine can run against the libzim-backed reader or against an in-memory
archive without knowing which one it got.
"""

from abc import ABC, abstractmethod
from typing import Iterator, List

# Main page index stored in the header when an archive has no main page
INVALID_INDEX = 0xFFFFFFFF


class ArchiveEntry(ABC):
    """One addressable entry of an archive.

    ``read()`` is the only operation that decompresses content. Readers may
    raise EntryReadError from any member when the entry is corrupted.
    """

    @property
    @abstractmethod
    def path(self) -> str:
        ...

    @property
    @abstractmethod
    def is_redirect(self) -> bool:
        ...

    @property
    @abstractmethod
    def mimetype(self) -> str:
        ...

    @property
    @abstractmethod
    def size(self) -> int:
        """Content size in bytes, known without decoding the content."""

    @abstractmethod
    def read(self) -> bytes:
        """Decode the whole content of the entry."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.path!r})"


class ArchiveReader(ABC):
    """Read-only view over an archive."""

    @property
    @abstractmethod
    def filename(self) -> str:
        ...

    @property
    @abstractmethod
    def uuid(self) -> str:
        ...

    @property
    @abstractmethod
    def entry_count(self) -> int:
        """Number of content entries yielded by iter_entries()."""

    @abstractmethod
    def iter_entries(self) -> Iterator[ArchiveEntry]:
        """Yield content entries (redirects included) in path order."""

    @abstractmethod
    def has_entry(self, path: str) -> bool:
        ...

    # Checksum and structure

    @property
    @abstractmethod
    def declared_checksum(self) -> str:
        """Checksum stored in the archive, as lowercase hex."""

    @abstractmethod
    def verify_checksum(self) -> bool:
        """Compare the declared checksum with one computed over the payload."""

    @abstractmethod
    def verify_integrity(self) -> bool:
        """Low-level structure verification; includes the checksum."""

    # Metadata

    @property
    @abstractmethod
    def metadata_keys(self) -> List[str]:
        ...

    def has_metadata(self, key: str) -> bool:
        return key in self.metadata_keys

    @abstractmethod
    def get_metadata(self, key: str) -> bytes:
        ...

    @abstractmethod
    def has_illustration(self) -> bool:
        """Whether the archive carries a favicon illustration."""

    # Main page

    @property
    @abstractmethod
    def main_page_index(self) -> int:
        """Main page index from the header, INVALID_INDEX when unset."""

    @abstractmethod
    def is_valid_entry_index(self, index: int) -> bool:
        ...

    def close(self) -> None:
        """Release underlying resources."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
