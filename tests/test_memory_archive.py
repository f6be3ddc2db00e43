"""
Tests for the in-memory archive and open_archive.
"""

import sys

import pytest

from zimcheck.archive import INVALID_INDEX, MemoryArchive, MemoryEntry, open_archive
from zimcheck.errors import ArchiveError, ArchiveOpenError


class TestMemoryEntry:
    """Test in-memory entries."""

    def test_text_content_is_encoded(self):
        entry = MemoryEntry("a.html", "café")
        assert entry.read() == "café".encode("utf-8")
        assert entry.size == 5

    def test_defaults(self):
        entry = MemoryEntry("a.html")
        assert entry.mimetype == "text/html"
        assert entry.size == 0
        assert not entry.is_redirect

    def test_redirect(self):
        entry = MemoryEntry("home.html", redirect_to="index.html")
        assert entry.is_redirect
        assert entry.payload() == b"index.html"

    def test_repr(self):
        assert repr(MemoryEntry("a.html")) == "MemoryEntry('a.html')"


class TestMemoryArchive:
    """Test the in-memory archive reader."""

    def test_entries_sorted_by_path(self):
        archive = MemoryArchive([MemoryEntry("b.html"), MemoryEntry("a.html")])
        assert [entry.path for entry in archive.iter_entries()] == ["a.html", "b.html"]
        assert archive.entry_count == 2

    def test_duplicate_paths_rejected(self):
        with pytest.raises(ArchiveError):
            MemoryArchive([MemoryEntry("a.html"), MemoryEntry("a.html")])

    def test_has_entry(self, good_archive):
        assert good_archive.has_entry("index.html")
        assert not good_archive.has_entry("missing.html")

    def test_metadata(self, good_archive):
        assert good_archive.has_metadata("Title")
        assert good_archive.get_metadata("Title") == b"Test ZIM file"
        with pytest.raises(ArchiveError):
            good_archive.get_metadata("Flavour")

    def test_main_page(self, good_archive, poor_archive):
        assert good_archive.is_valid_entry_index(good_archive.main_page_index)
        assert poor_archive.main_page_index == INVALID_INDEX

    def test_unknown_main_page_path(self):
        archive = MemoryArchive([MemoryEntry("a.html")], main_page="missing.html")
        assert archive.main_page_index == INVALID_INDEX

    def test_declared_checksum_defaults_to_computed(self, good_archive):
        assert len(good_archive.declared_checksum) == 32
        assert good_archive.verify_checksum()
        assert good_archive.verify_integrity()

    def test_metadata_is_part_of_checksum(self):
        first = MemoryArchive([MemoryEntry("a.html", "a")], metadata={"Title": "one"})
        second = MemoryArchive([MemoryEntry("a.html", "a")], metadata={"Title": "two"})
        assert first.declared_checksum != second.declared_checksum

    def test_integrity_detects_bad_main_page_index(self):
        archive = MemoryArchive([MemoryEntry("a.html", "a")], main_page_index=3)
        assert not archive.verify_integrity()

    def test_uuid(self, good_archive):
        assert good_archive.uuid == "00000000-0000-0000-0000-000000000000"
        assert MemoryArchive(uuid="abc").uuid == "abc"

    def test_context_manager(self, good_archive):
        with good_archive as archive:
            assert archive is good_archive


class TestOpenArchive:
    """Test opening archives from disk."""

    def test_missing_libzim(self, monkeypatch, tmp_path):
        # A None entry in sys.modules makes the import fail
        monkeypatch.setitem(sys.modules, "libzim", None)
        monkeypatch.setitem(sys.modules, "libzim.reader", None)
        monkeypatch.delitem(sys.modules, "zimcheck.archive.libzim_reader", raising=False)
        with pytest.raises(ArchiveOpenError) as exc_info:
            open_archive(tmp_path / "x.zim")
        assert "pip install zimcheck[zim]" in exc_info.value.suggestion

    @pytest.mark.integration
    def test_not_a_zim_file(self, tmp_path):
        pytest.importorskip("libzim")
        path = tmp_path / "not_a.zim"
        path.write_bytes(b"definitely not a zim file")
        with pytest.raises(ArchiveOpenError):
            open_archive(path)
