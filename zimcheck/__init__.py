"""zimcheck - quality checks for ZIM archives"""

from zimcheck.__version__ import __version__


# Public API exports
from zimcheck.archive import ArchiveReader, MemoryArchive, MemoryEntry, open_archive
from zimcheck.checks import (
    CheckKind,
    DiagnosticReport,
    EnabledChecks,
    Severity,
    StatusCode,
    run_selected_checks,
)
from zimcheck.config import CheckerConfig, load_config
from zimcheck.utils.logger import setup_logger


__all__ = [
    "ArchiveReader",
    "MemoryArchive",
    "MemoryEntry",
    "open_archive",
    "CheckKind",
    "DiagnosticReport",
    "EnabledChecks",
    "Severity",
    "StatusCode",
    "run_selected_checks",
    "CheckerConfig",
    "load_config",
    "setup_logger",
]

# Don't import main at top level, it pulls in argparse handling
def _run():
    from .main import main
    return main()

if __name__ == "__main__":
    _run()
