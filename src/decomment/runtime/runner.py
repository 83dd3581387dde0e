from __future__ import annotations

"""Per-file pipeline and whole-tree run.

classify -> read -> strip -> write, one file at a time. Files share no state,
so `jobs > 1` spreads them over a thread pool; outcomes are still reported in
walk order.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional

from decomment.core.errors import ReadError, WriteError
from decomment.core.interfaces import (
    FileClassifierProtocol,
    StorageProtocol,
    StripperProtocol,
    WalkerProtocol,
)
from decomment.core.models import FileOutcome, FileStatus, Language
from decomment.core.report import RunReport, StageTimer
from decomment.io.storage import TextFileStorage
from decomment.io.walker import DirectoryWalker
from decomment.logging.helpers import get_logger
from decomment.processing.classifier import ExtensionClassifier
from decomment.processing.stripper import strip


class DecommentRunner:
    def __init__(
        self,
        *,
        classifier: Optional[FileClassifierProtocol] = None,
        storage: Optional[StorageProtocol] = None,
        walker: Optional[WalkerProtocol] = None,
        stripper: Optional[StripperProtocol] = None,
        logger: Optional[logging.Logger] = None,
        jobs: int = 1,
        dry_run: bool = False,
        formatted_copy: bool = False,
    ) -> None:
        if jobs < 1:
            raise ValueError(f'jobs must be >= 1, got {jobs}')
        self._log = logger or get_logger('runtime')
        self._classifier = classifier or ExtensionClassifier.default()
        self._storage = storage or TextFileStorage(logger=get_logger('io.storage'))
        self._walker = walker or DirectoryWalker(logger=get_logger('io.walker'))
        self._strip = stripper or strip
        self._jobs = jobs
        self._dry_run = dry_run
        self._formatted_copy = formatted_copy

    def process_file(self, path: Path) -> FileOutcome:
        """Strip one file. Per-file failures are returned, never raised."""
        lang = self._classifier.classify(path.name)
        if lang is Language.UNSUPPORTED:
            self._log.debug('unsupported extension, skipped: %s', path)
            return FileOutcome(path=path, language=lang, status=FileStatus.SKIPPED)

        try:
            original = self._storage.read(path)
        except ReadError as exc:
            self._log.error('✘ %s', exc)
            return FileOutcome(path=path, language=lang, status=FileStatus.FAILED, error=str(exc))

        stripped = self._strip(original, lang)
        size_before, size_after = len(original), len(stripped)
        if stripped == original:
            self._log.debug('no comments in %s', path)
            return FileOutcome(
                path=path, language=lang, status=FileStatus.UNCHANGED,
                chars_before=size_before, chars_after=size_after,
            )

        written_to: Optional[Path] = None
        if self._dry_run:
            self._log.info('would strip %s (%s, -%d chars)', path, lang.value, size_before - size_after)
        else:
            try:
                if self._formatted_copy:
                    written_to = self._storage.write_copy(path, stripped)
                else:
                    self._storage.write(path, stripped)
                    written_to = path
            except WriteError as exc:
                self._log.error('✘ %s', exc)
                return FileOutcome(
                    path=path, language=lang, status=FileStatus.FAILED,
                    chars_before=size_before, chars_after=size_after, error=str(exc),
                )
            self._log.info('✔ %s (%s, -%d chars)', written_to, lang.value, size_before - size_after)

        return FileOutcome(
            path=path, language=lang, status=FileStatus.STRIPPED,
            chars_before=size_before, chars_after=size_after, written_to=written_to,
        )

    def _process_all(self, files: List[Path]) -> List[FileOutcome]:
        if self._jobs == 1 or len(files) < 2:
            return [self.process_file(fp) for fp in files]
        with ThreadPoolExecutor(max_workers=self._jobs) as ex:
            return list(ex.map(self.process_file, files))

    def run(self, root: Path) -> RunReport:
        """Process every file below *root*.

        Raises:
            TraversalError: *root* is missing, not a directory or cannot be listed.
        """
        report = RunReport(root=str(root), dry_run=self._dry_run)

        with StageTimer(report, 'walk'):
            files = list(self._walker.walk(Path(root)))
        for message in self._walker.errors:
            report.add_error(message)
        self._log.debug('%d candidate file(s) under %s', len(files), root)

        with StageTimer(report, 'process'):
            outcomes = self._process_all(files)
        for outcome in outcomes:
            report.add_outcome(outcome)

        report.finish()
        self._log.info('%s', report.summary_line())
        return report
