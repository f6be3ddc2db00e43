"""Validation engine: check kinds, selection, report and checks."""

from zimcheck.checks.kinds import (
    CHECK_INFO,
    CONTENT_CHECKS,
    SELECTABLE_CHECKS,
    CheckInfo,
    CheckKind,
    Severity,
    StatusCode,
)
from zimcheck.checks.selection import EnabledChecks
from zimcheck.checks.report import DiagnosticReport
from zimcheck.checks.archive_checks import (
    check_checksum,
    check_favicon,
    check_integrity,
    check_main_page,
    check_metadata,
)
from zimcheck.checks.articles import ArticleRecord, ArticleScanner, FingerprintIndex, check_articles
from zimcheck.checks.runner import run_selected_checks

__all__ = [
    "CHECK_INFO",
    "CONTENT_CHECKS",
    "SELECTABLE_CHECKS",
    "CheckInfo",
    "CheckKind",
    "Severity",
    "StatusCode",
    "EnabledChecks",
    "DiagnosticReport",
    "check_checksum",
    "check_favicon",
    "check_integrity",
    "check_main_page",
    "check_metadata",
    "ArticleRecord",
    "ArticleScanner",
    "FingerprintIndex",
    "check_articles",
    "run_selected_checks",
]
