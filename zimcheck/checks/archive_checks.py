"""
Independent archive checks.

Each check looks at one aspect of the archive that does not need the
article traversal: checksum, low-level structure, metadata, favicon and
main page. They print an info line, then record their outcome in the
report; none of them raises on a failed check.
"""

from typing import Optional

from zimcheck.archive.base import INVALID_INDEX, ArchiveReader
from zimcheck.checks.kinds import CheckKind
from zimcheck.checks.report import DiagnosticReport
from zimcheck.config.schema import CheckerConfig
from zimcheck.utils.logger import logger


def check_integrity(archive: ArchiveReader, report: DiagnosticReport) -> bool:
    """Verify the low-level structure (checksum included)."""
    report.info("[INFO] Verifying ZIM-archive structure integrity...")
    if archive.verify_integrity():
        return True
    report.fail(CheckKind.INTEGRITY, "ZIM file's low level structure is invalid")
    return False


def check_checksum(archive: ArchiveReader, report: DiagnosticReport) -> bool:
    """Compare the declared checksum with the one computed over the content."""
    report.info("[INFO] Verifying Internal Checksum...")
    if archive.verify_checksum():
        return True
    report.info("  [ERROR] Wrong Checksum in ZIM archive")
    # Trailing newline closes the block with a blank line
    report.fail(
        CheckKind.CHECKSUM,
        f"ZIM Archive Checksum in archive: {archive.declared_checksum}\n",
    )
    return False


def check_metadata(
    archive: ArchiveReader,
    report: DiagnosticReport,
    config: Optional[CheckerConfig] = None,
) -> bool:
    """Report every required metadata key the archive does not carry."""
    config = config or CheckerConfig()
    report.info("[INFO] Searching for metadata entries...")

    present = set(archive.metadata_keys)
    missing = [key for key in config.required_metadata if key not in present]
    for key in missing:
        report.fail(CheckKind.METADATA, key)
    if missing:
        logger.debug("Missing metadata: %s", ", ".join(missing))
    return not missing


def check_favicon(
    archive: ArchiveReader,
    report: DiagnosticReport,
    config: Optional[CheckerConfig] = None,
) -> bool:
    """Pass if the archive has an illustration or a favicon entry."""
    config = config or CheckerConfig()
    report.info("[INFO] Searching for Favicon...")

    if archive.has_illustration():
        return True
    for path in config.favicon_paths:
        if archive.has_entry(path):
            logger.debug("Favicon found at %s", path)
            return True
    report.fail(CheckKind.FAVICON)
    return False


def check_main_page(archive: ArchiveReader, report: DiagnosticReport) -> bool:
    report.info("[INFO] Searching for main page...")
    index = archive.main_page_index
    if index != INVALID_INDEX and archive.is_valid_entry_index(index):
        return True
    report.fail(CheckKind.MAIN_PAGE, f"Main Page Index stored in Archive Header: {index}")
    return False
