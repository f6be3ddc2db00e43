"""
Tests for check kinds, severities and check selection.
"""

import pytest

from zimcheck.checks import (
    CHECK_INFO,
    CONTENT_CHECKS,
    SELECTABLE_CHECKS,
    CheckKind,
    EnabledChecks,
    Severity,
    StatusCode,
)


class TestCheckKind:
    """Test the CheckKind enumeration and its fixed attributes."""

    def test_declaration_order(self):
        """Test kinds are declared in report order."""
        assert [kind.value for kind in CheckKind] == [
            "checksum", "integrity", "empty", "metadata", "favicon",
            "main", "redundant", "url_internal", "url_external", "other",
        ]

    def test_ordinals_are_dense(self):
        assert [kind.ordinal for kind in CheckKind] == list(range(len(CheckKind)))

    def test_only_redundant_is_a_warning(self):
        warnings = [kind for kind in CheckKind if kind.severity is Severity.WARNING]
        assert warnings == [CheckKind.REDUNDANT]

    def test_labels(self):
        assert CheckKind.CHECKSUM.label == "Invalid checksum"
        assert CheckKind.MAIN_PAGE.label == "Missing mainpage"
        assert CheckKind.REDUNDANT.label == "Redundant data found"
        assert CheckKind.OTHER.label == "Other errors found"

    def test_info_table_is_read_only(self):
        with pytest.raises(TypeError):
            CHECK_INFO[CheckKind.REDUNDANT] = CHECK_INFO[CheckKind.EMPTY]

    def test_string_conversion(self):
        assert CheckKind("url_internal") is CheckKind.URL_INTERNAL

    def test_content_checks(self):
        assert set(CONTENT_CHECKS) == {
            CheckKind.EMPTY, CheckKind.REDUNDANT,
            CheckKind.URL_INTERNAL, CheckKind.URL_EXTERNAL,
        }

    def test_other_is_not_selectable(self):
        assert CheckKind.OTHER not in SELECTABLE_CHECKS
        assert len(SELECTABLE_CHECKS) == len(CheckKind) - 1


class TestStatusCode:
    """Test process exit statuses."""

    def test_values(self):
        assert StatusCode.PASS == 0
        assert StatusCode.FAIL == 1
        assert StatusCode.EXCEPTION == 2


class TestEnabledChecks:
    """Test the enabled check set."""

    def test_starts_empty(self):
        checks = EnabledChecks()
        assert not checks
        assert len(checks) == 0
        assert not any(checks.is_enabled(kind) for kind in CheckKind)

    def test_enable(self):
        checks = EnabledChecks()
        checks.enable(CheckKind.FAVICON)
        assert checks.is_enabled(CheckKind.FAVICON)
        assert not checks.is_enabled(CheckKind.METADATA)
        assert len(checks) == 1

    def test_enable_is_idempotent(self):
        checks = EnabledChecks([CheckKind.EMPTY, CheckKind.EMPTY])
        assert len(checks) == 1

    def test_enable_all_skips_other(self):
        checks = EnabledChecks()
        checks.enable_all()
        assert list(checks) == list(SELECTABLE_CHECKS)
        assert not checks.is_enabled(CheckKind.OTHER)

    def test_iteration_follows_declaration_order(self):
        checks = EnabledChecks([CheckKind.URL_EXTERNAL, CheckKind.CHECKSUM, CheckKind.MAIN_PAGE])
        assert list(checks) == [CheckKind.CHECKSUM, CheckKind.MAIN_PAGE, CheckKind.URL_EXTERNAL]

    def test_any_enabled(self):
        checks = EnabledChecks([CheckKind.REDUNDANT])
        assert checks.any_enabled(*CONTENT_CHECKS)
        assert not checks.any_enabled(CheckKind.CHECKSUM, CheckKind.INTEGRITY)

    def test_accepts_values(self):
        checks = EnabledChecks()
        checks.enable("metadata")
        assert checks.is_enabled(CheckKind.METADATA)

    def test_repr(self):
        checks = EnabledChecks([CheckKind.FAVICON, CheckKind.EMPTY])
        assert repr(checks) == "EnabledChecks([empty, favicon])"
