"""
Pytest configuration for zimcheck tests.

Registers custom markers and provides the fixture archives shared by the
test suites: a good archive passing every check, a poor archive failing
most of them, and a good archive whose declared checksum is wrong.
"""

import pytest

from zimcheck.archive import MemoryArchive, MemoryEntry
from zimcheck.checks import EnabledChecks


GOOD_METADATA = {
    "Title": "Test ZIM file",
    "Creator": "Test suite",
    "Publisher": "Test suite",
    "Date": "2026-10-18",
    "Description": "Archive passing every check",
    "Language": "eng",
}

POOR_METADATA = {
    "Creator": "Test suite",
    "Publisher": "Test suite",
    "Date": "2026-10-18",
    "Language": "eng",
}

SAME_CONTENT = "<html><body><p>Same content</p></body></html>"


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests needing a real ZIM library (libzim)"
    )


def good_entries():
    return [
        MemoryEntry(
            "index.html",
            '<html><body><a href="article.html">Article</a> <a href="#top">top</a>'
            ' <img src="-/logo.png"></body></html>',
        ),
        MemoryEntry(
            "article.html",
            '<html><body><a href="index.html">Home</a> <a href="mailto:test@example.org">mail</a>'
            ' <a href="https://example.org/">Website</a></body></html>',
        ),
        MemoryEntry("-/logo.png", b"\x89PNG\r\n\x1a\nlogo", mimetype="image/png"),
        MemoryEntry("home.html", redirect_to="index.html"),
    ]


def poor_entries():
    return [
        MemoryEntry("article1.html", SAME_CONTENT),
        MemoryEntry("redundant_article.html", SAME_CONTENT),
        MemoryEntry("dangling_link.html", '<html><body><a href="A/non_existent.html">x</a></body></html>'),
        MemoryEntry("empty.html", b""),
        MemoryEntry("empty_link.html", '<html><body><a href="">x</a></body></html>'),
        MemoryEntry("external_link.html", '<html><body><img src="http://a.io/pic.png"></body></html>'),
        MemoryEntry("outofbounds_link.html", '<html><body><a href="../../oops.html">x</a></body></html>'),
    ]


@pytest.fixture
def good_archive():
    return MemoryArchive(
        good_entries(),
        metadata=GOOD_METADATA,
        main_page="index.html",
        illustration=True,
        filename="data/zimfiles/good.zim",
    )


@pytest.fixture
def poor_archive():
    return MemoryArchive(
        poor_entries(),
        metadata=POOR_METADATA,
        filename="data/zimfiles/poor.zim",
    )


@pytest.fixture
def bad_checksum_archive():
    return MemoryArchive(
        good_entries(),
        metadata=GOOD_METADATA,
        main_page="index.html",
        illustration=True,
        declared_checksum="0" * 32,
        filename="data/zimfiles/bad_checksum.zim",
    )


@pytest.fixture
def all_checks():
    checks = EnabledChecks()
    checks.enable_all()
    return checks
