from __future__ import annotations

"""
Run summary collected by the runner.

Counters are keyed by the string value of FileStatus / Language so the JSON
dump stays stable and readable.
"""

import json
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from decomment.core.models import FileOutcome, FileStatus, Language


@dataclass
class RunReport:
    started_at: float = field(default_factory=time.perf_counter)
    finished_at: float | None = None
    duration_s: float | None = None

    root: Optional[str] = None
    dry_run: bool = False

    files_total: int = 0
    files_by_status: Dict[str, int] = field(
        default_factory=lambda: {s.value: 0 for s in FileStatus}
    )
    files_by_language: Dict[str, int] = field(
        default_factory=lambda: {lang.value: 0 for lang in Language}
    )

    chars_removed: int = 0

    time_by_stage: Dict[str, float] = field(
        default_factory=lambda: {"walk": 0.0, "process": 0.0}
    )

    errors: List[str] = field(default_factory=list)
    outcomes: List[FileOutcome] = field(default_factory=list)

    def add_outcome(self, outcome: FileOutcome) -> None:
        self.outcomes.append(outcome)
        self.files_total += 1
        status = outcome.status.value
        lang = outcome.language.value
        self.files_by_status[status] = self.files_by_status.get(status, 0) + 1
        self.files_by_language[lang] = self.files_by_language.get(lang, 0) + 1
        if outcome.status is FileStatus.STRIPPED:
            self.chars_removed += outcome.chars_removed
        if outcome.status is FileStatus.FAILED:
            self.add_error(outcome.error or f"{outcome.path}: failed")

    def add_time(self, stage: str, seconds: float) -> None:
        self.time_by_stage[stage] = self.time_by_stage.get(stage, 0.0) + seconds

    def add_error(self, message: str) -> None:
        self.errors.append(message)

    def count(self, status: FileStatus) -> int:
        return self.files_by_status.get(status.value, 0)

    def finish(self) -> None:
        self.finished_at = time.perf_counter()
        self.duration_s = self.finished_at - self.started_at

    def summary_line(self) -> str:
        verb = "would strip" if self.dry_run else "stripped"
        return (
            f"{self.files_total} file(s) scanned: "
            f"{self.count(FileStatus.STRIPPED)} {verb}, "
            f"{self.count(FileStatus.UNCHANGED)} unchanged, "
            f"{self.count(FileStatus.SKIPPED)} skipped, "
            f"{self.count(FileStatus.FAILED)} failed"
        )

    def to_json(self, *, indent: int = 2) -> str:
        return json.dumps(
            {
                "root": self.root,
                "dry_run": self.dry_run,
                "started_at": self.started_at,
                "finished_at": self.finished_at,
                "duration_s": self.duration_s,
                "files_total": self.files_total,
                "files_by_status": self.files_by_status,
                "files_by_language": self.files_by_language,
                "chars_removed": self.chars_removed,
                "time_by_stage": self.time_by_stage,
                "errors": self.errors,
                "files": [
                    {
                        "path": str(o.path),
                        "language": o.language.value,
                        "status": o.status.value,
                        "chars_removed": o.chars_removed,
                    }
                    for o in self.outcomes
                ],
            },
            indent=indent,
        )


class StageTimer:
    def __init__(self, report: RunReport, stage: str):
        self._report = report
        self._stage = stage
        self._t0: float | None = None

    def __enter__(self):
        self._t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        if self._t0 is not None:
            self._report.add_time(self._stage, time.perf_counter() - self._t0)
        return False
