"""
Article scanner: one pass over the content entries.

Looping over the tests and then over the articles would decompress every
article once per test. The scanner loops over the articles instead and
hands the decoded content of each one to every enabled content check:

    for entry in archive:
        data = entry.read()          # at most once
        empty / redundant / internal links / external links

Only the fingerprints and paths survive the pass (in FingerprintIndex);
redundancy is reported after the traversal.
"""

import hashlib
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from zimcheck.archive.base import ArchiveEntry, ArchiveReader
from zimcheck.checks.kinds import CheckKind
from zimcheck.checks.links import Link, LinkKind, OutOfBoundsError, distinct, extract_links, resolve_link
from zimcheck.checks.report import DiagnosticReport
from zimcheck.checks.selection import EnabledChecks
from zimcheck.config.schema import CheckerConfig
from zimcheck.errors import EntryReadError
from zimcheck.utils.logger import logger
from zimcheck.utils.progress import ProgressBar


@dataclass
class ArticleRecord:
    """What the scanner knows about the entry being visited."""
    path: str
    size: int
    fingerprint: Optional[str] = None
    links: List[Link] = field(default_factory=list)


class FingerprintIndex:
    """Content fingerprint -> paths sharing it, in discovery order."""

    def __init__(self, algorithm: str = "blake2b"):
        self.algorithm = algorithm
        self._paths: Dict[str, List[str]] = {}

    def fingerprint(self, data: bytes) -> str:
        if self.algorithm == "blake2b":
            return hashlib.blake2b(data, digest_size=16).hexdigest()
        return hashlib.new(self.algorithm, data).hexdigest()

    def add(self, data: bytes, path: str) -> str:
        key = self.fingerprint(data)
        self._paths.setdefault(key, []).append(path)
        return key

    def groups(self) -> Iterator[List[str]]:
        """Paths of every fingerprint shared by two entries or more."""
        for paths in self._paths.values():
            if len(paths) > 1:
                yield list(paths)

    def __len__(self) -> int:
        return len(self._paths)


class ArticleScanner:
    """Runs the content checks over every entry in a single traversal."""

    def __init__(
        self,
        archive: ArchiveReader,
        report: DiagnosticReport,
        checks: EnabledChecks,
        config: Optional[CheckerConfig] = None,
        progress: Optional[ProgressBar] = None,
    ):
        self.archive = archive
        self.report = report
        self.config = config or CheckerConfig()
        self.progress = progress or ProgressBar(enabled=False)

        self.check_empty = checks.is_enabled(CheckKind.EMPTY)
        self.check_redundant = checks.is_enabled(CheckKind.REDUNDANT)
        self.check_internal = checks.is_enabled(CheckKind.URL_INTERNAL)
        self.check_external = checks.is_enabled(CheckKind.URL_EXTERNAL)

        self.index = FingerprintIndex(self.config.fingerprint_algorithm)
        self.entries_read = 0

    @property
    def check_links(self) -> bool:
        return self.check_internal or self.check_external

    def scan(self) -> DiagnosticReport:
        self.report.info("[INFO] Verifying Articles' content...")

        self.progress.reset(self.archive.entry_count, desc="Verifying articles")
        visited = 0
        for entry in self.archive.iter_entries():
            self.progress.update()
            visited += 1
            try:
                self._visit(entry)
            except EntryReadError as exc:
                logger.warning("%s", exc)
                self.report.fail(CheckKind.OTHER, str(exc))
        logger.debug("Visited %d entries, decoded %d", visited, self.entries_read)

        if self.check_redundant:
            self.report.info("[INFO] Searching for redundant articles...")
            self.report.info("  Verifying Similar Articles for redundancies...")
            self._report_redundancies()
        return self.report

    # ------------------------------------------------------------------
    # Per entry
    # ------------------------------------------------------------------

    def _visit(self, entry: ArchiveEntry) -> None:
        if entry.is_redirect:
            return

        path = entry.path
        size = entry.size
        if size == 0:
            if self.check_empty:
                self.report.fail(CheckKind.EMPTY, f"Entry {path} is empty")
            return

        linkable = self.check_links and self.config.is_linkable(entry.mimetype)
        if not (self.check_redundant or linkable):
            return

        data = entry.read()
        self.entries_read += 1
        record = ArticleRecord(path=path, size=len(data))

        if self.check_redundant:
            record.fingerprint = self.index.add(data, path)

        if linkable:
            record.links = extract_links(
                data, self.config.link_attributes, self.config.ignored_schemes
            )
            if self.check_internal:
                self._check_internal_links(record)
            if self.check_external:
                self._check_external_links(record)

    def _check_internal_links(self, record: ArticleRecord) -> None:
        dangling: Dict[str, List[str]] = {}
        empty_links = 0

        for link in record.links:
            if link.kind is LinkKind.EMPTY:
                empty_links += 1
                continue
            if link.kind is not LinkKind.INTERNAL:
                continue
            try:
                resolved = resolve_link(link.target, record.path)
            except OutOfBoundsError:
                self.report.fail(
                    CheckKind.URL_INTERNAL,
                    f"{link.target} is out of bounds. Article: {record.path}",
                )
                continue
            if resolved in dangling:
                dangling[resolved].append(link.target)
            elif not self.archive.has_entry(resolved):
                dangling[resolved] = [link.target]

        if dangling:
            lines = ["The following links:"]
            for targets in dangling.values():
                lines.extend(f"- {target}" for target in distinct(targets))
            resolved_paths = ", ".join(f"/{path}" for path in dangling)
            lines.append(f"({resolved_paths}) were not found in article {record.path}")
            self.report.fail(CheckKind.URL_INTERNAL, "\n".join(lines))

        if empty_links:
            self.report.fail(
                CheckKind.URL_INTERNAL,
                f"Found {empty_links} empty links in article: {record.path}",
            )

    def _check_external_links(self, record: ArticleRecord) -> None:
        attributes = self.config.external_dependency_attributes
        targets = distinct(
            link.target for link in record.links
            if link.kind is LinkKind.EXTERNAL and link.attribute in attributes
        )
        for target in targets:
            self.report.fail(
                CheckKind.URL_EXTERNAL,
                f"{target} is an external dependence in article {record.path}",
            )

    # ------------------------------------------------------------------
    # After the traversal
    # ------------------------------------------------------------------

    def _report_redundancies(self) -> None:
        for paths in self.index.groups():
            # Chained pairs: every member appears, each next to its predecessor
            for first, second in zip(paths, paths[1:]):
                self.report.fail(CheckKind.REDUNDANT, f"{first} and {second}")


def check_articles(
    archive: ArchiveReader,
    report: DiagnosticReport,
    checks: EnabledChecks,
    config: Optional[CheckerConfig] = None,
    progress: Optional[ProgressBar] = None,
) -> DiagnosticReport:
    """Run the enabled content checks over all entries of ``archive``."""
    return ArticleScanner(archive, report, checks, config, progress).scan()
