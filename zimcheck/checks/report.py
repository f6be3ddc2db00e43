"""
Diagnostic model: collects per-check results and renders the report.

Every check writes into one DiagnosticReport. A kind passes until a check
says otherwise, messages are kept in discovery order, and blocks are
rendered in CheckKind declaration order so the text output is stable from
run to run.
"""

import json
import sys
from typing import Any, Dict, Iterable, List, Optional, TextIO

from .kinds import CheckKind, Severity


class DiagnosticReport:
    """Per-kind pass flags and messages for one archive."""

    def __init__(self, info_stream: Optional[TextIO] = None, quiet: bool = False):
        """
        Args:
            info_stream: Where progress/info lines go (current stdout when None)
            quiet: Drop info lines entirely (JSON output mode)
        """
        self.info_stream = info_stream
        self.quiet = quiet
        self._passed = [True] * len(CheckKind)
        self._messages: List[List[str]] = [[] for _ in CheckKind]

    # ------------------------------------------------------------------
    # Recording
    # ------------------------------------------------------------------

    def set_result(self, kind: CheckKind, passed: bool) -> None:
        self._passed[kind.ordinal] = passed

    def add_message(self, kind: CheckKind, text: str) -> None:
        """Append a detail line under ``kind``; the pass flag is untouched."""
        self._messages[kind.ordinal].append(text)

    def fail(self, kind: CheckKind, text: Optional[str] = None) -> None:
        """Record a failure of ``kind``, with an optional detail line."""
        if text is not None:
            self.add_message(kind, text)
        self.set_result(kind, False)

    def info(self, text: str) -> None:
        """Write an informational line (not part of the diagnostics)."""
        if not self.quiet:
            print(text, file=self.info_stream or sys.stdout)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def passed(self, kind: CheckKind) -> bool:
        return self._passed[kind.ordinal]

    def messages(self, kind: CheckKind) -> List[str]:
        return list(self._messages[kind.ordinal])

    def overall_status(self) -> bool:
        """True iff every ERROR-severity kind passed."""
        return all(
            self._passed[kind.ordinal]
            for kind in CheckKind
            if kind.severity is Severity.ERROR
        )

    def _reported_kinds(self) -> Iterable[CheckKind]:
        for kind in CheckKind:
            if self._messages[kind.ordinal] or not self._passed[kind.ordinal]:
                yield kind

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def report(self) -> str:
        """Render the text report.

        One ``[SEVERITY] <label>:`` block per kind that failed or carries
        messages, each message indented by two spaces.
        """
        lines = []
        for kind in self._reported_kinds():
            lines.append(f"[{kind.severity.value}] {kind.label}:")
            for message in self._messages[kind.ordinal]:
                lines.append(f"  {message}")
        if not lines:
            return ""
        return "\n".join(lines) + "\n"

    def to_dict(
        self,
        version: str,
        file_name: str,
        file_uuid: str,
        checks: Iterable[CheckKind],
    ) -> Dict[str, Any]:
        logs = []
        for kind in self._reported_kinds():
            # A failure without details still gets one entry
            messages = self._messages[kind.ordinal] or [""]
            for message in messages:
                logs.append({
                    "check": kind.value,
                    "level": kind.severity.value,
                    "message": message.rstrip("\n"),
                })
        return {
            "zimcheck_version": version,
            "checks": [kind.value for kind in checks],
            "file_name": file_name,
            "file_uuid": file_uuid,
            "status": self.overall_status(),
            "logs": logs,
        }

    def to_json(
        self,
        version: str,
        file_name: str,
        file_uuid: str,
        checks: Iterable[CheckKind],
    ) -> str:
        """Render the structured (machine readable) report."""
        data = self.to_dict(version, file_name, file_uuid, checks)
        return json.dumps(data, indent=2, ensure_ascii=False)
