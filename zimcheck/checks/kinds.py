"""
Check kinds and their fixed severities.

The kind -> (severity, label) table is domain configuration: it is built
once at import time and exposed read-only. Declaration order of CheckKind is
the order in which report blocks are printed.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Mapping


class StatusCode(IntEnum):
    """Process exit status of a zimcheck run."""
    PASS = 0
    FAIL = 1
    EXCEPTION = 2


class Severity(str, Enum):
    """Severity of a check kind."""
    ERROR = "ERROR"      # Affects the overall status
    WARNING = "WARNING"  # Reported, never fatal


class CheckKind(str, Enum):
    """One discrete validation category.

    Values double as the command line long option names and as the
    ``check`` field of JSON logs.
    """
    CHECKSUM = "checksum"
    INTEGRITY = "integrity"
    EMPTY = "empty"
    METADATA = "metadata"
    FAVICON = "favicon"
    MAIN_PAGE = "main"
    REDUNDANT = "redundant"
    URL_INTERNAL = "url_internal"
    URL_EXTERNAL = "url_external"
    OTHER = "other"

    @property
    def ordinal(self) -> int:
        return _ORDINALS[self]

    @property
    def severity(self) -> Severity:
        return CHECK_INFO[self].severity

    @property
    def label(self) -> str:
        return CHECK_INFO[self].label


_ORDINALS = {kind: index for index, kind in enumerate(CheckKind)}


@dataclass(frozen=True)
class CheckInfo:
    """Fixed reporting attributes of a check kind."""
    severity: Severity
    label: str


CHECK_INFO: Mapping[CheckKind, CheckInfo] = MappingProxyType({
    CheckKind.CHECKSUM:     CheckInfo(Severity.ERROR, "Invalid checksum"),
    CheckKind.INTEGRITY:    CheckInfo(Severity.ERROR, "Invalid low-level structure"),
    CheckKind.EMPTY:        CheckInfo(Severity.ERROR, "Empty articles"),
    CheckKind.METADATA:     CheckInfo(Severity.ERROR, "Missing metadata entries"),
    CheckKind.FAVICON:      CheckInfo(Severity.ERROR, "Missing favicon"),
    CheckKind.MAIN_PAGE:    CheckInfo(Severity.ERROR, "Missing mainpage"),
    CheckKind.REDUNDANT:    CheckInfo(Severity.WARNING, "Redundant data found"),
    CheckKind.URL_INTERNAL: CheckInfo(Severity.ERROR, "Invalid internal links found"),
    CheckKind.URL_EXTERNAL: CheckInfo(Severity.ERROR, "Invalid external links found"),
    CheckKind.OTHER:        CheckInfo(Severity.ERROR, "Other errors found"),
})

# Kinds evaluated by the single article traversal
CONTENT_CHECKS = (
    CheckKind.EMPTY,
    CheckKind.REDUNDANT,
    CheckKind.URL_INTERNAL,
    CheckKind.URL_EXTERNAL,
)

# Kinds a user can select; OTHER is only ever reported
SELECTABLE_CHECKS = tuple(kind for kind in CheckKind if kind is not CheckKind.OTHER)
