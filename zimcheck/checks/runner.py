"""
Check orchestration.

Runs the selected checks against one archive in a fixed order and returns
the filled DiagnosticReport. The driver (zimcheck.main) only decides which
checks are selected and how the report is printed.
"""

from typing import Callable, Optional

from zimcheck.archive.base import ArchiveReader
from zimcheck.checks.archive_checks import (
    check_checksum,
    check_favicon,
    check_integrity,
    check_main_page,
    check_metadata,
)
from zimcheck.checks.articles import check_articles
from zimcheck.checks.kinds import CONTENT_CHECKS, CheckKind
from zimcheck.checks.report import DiagnosticReport
from zimcheck.checks.selection import EnabledChecks
from zimcheck.config.schema import CheckerConfig
from zimcheck.errors import ArchiveError
from zimcheck.utils.logger import logger
from zimcheck.utils.progress import ProgressBar


def _guarded(name: str, report: DiagnosticReport, check: Callable[[], object]) -> None:
    """Run one check; an archive failure inside it is recorded, not raised."""
    try:
        check()
    except ArchiveError as exc:
        logger.error("%s check aborted: %s", name, exc)
        report.fail(CheckKind.OTHER, f"{name} check aborted: {exc.message}")


def run_selected_checks(
    archive: ArchiveReader,
    checks: EnabledChecks,
    report: Optional[DiagnosticReport] = None,
    config: Optional[CheckerConfig] = None,
    progress: Optional[ProgressBar] = None,
) -> DiagnosticReport:
    """
    Run every enabled check against ``archive``.

    Order: integrity, checksum, metadata, favicon, main page, then the
    article traversal when any content check is enabled. The checksum is
    part of the integrity verification, so it is not computed twice.

    Args:
        archive: Opened archive
        checks: Enabled check kinds
        report: Report to fill (a new one when None)
        config: Checker configuration (defaults when None)
        progress: Progress bar for the article traversal

    Returns:
        The filled report
    """
    report = report if report is not None else DiagnosticReport()
    config = config or CheckerConfig()

    if checks.is_enabled(CheckKind.INTEGRITY):
        _guarded("Integrity", report, lambda: check_integrity(archive, report))

    if checks.is_enabled(CheckKind.CHECKSUM):
        if checks.is_enabled(CheckKind.INTEGRITY):
            report.info("[INFO] Avoiding redundant checksum test"
                        " (already performed by the integrity check).")
        else:
            _guarded("Checksum", report, lambda: check_checksum(archive, report))

    if checks.is_enabled(CheckKind.METADATA):
        _guarded("Metadata", report, lambda: check_metadata(archive, report, config))

    if checks.is_enabled(CheckKind.FAVICON):
        _guarded("Favicon", report, lambda: check_favicon(archive, report, config))

    if checks.is_enabled(CheckKind.MAIN_PAGE):
        _guarded("Main page", report, lambda: check_main_page(archive, report))

    if checks.any_enabled(*CONTENT_CHECKS):
        _guarded(
            "Article",
            report,
            lambda: check_articles(archive, report, checks, config, progress),
        )

    return report
