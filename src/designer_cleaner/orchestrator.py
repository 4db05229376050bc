"""
Orchestrator — runs clean or report mode over a directory.

Pairs are processed one after another. Each pair's console lines go to a
single sink in order, so output never interleaves.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Union

from designer_cleaner.config import CleanerConfig, Mode
from designer_cleaner.model import PairOutcome, PairReport, PairStatus
from designer_cleaner.pairing import iter_designer_files
from designer_cleaner.reporter import report_pair
from designer_cleaner.rewriter import clean_pair


@dataclass
class RunSummary:
    """Outcomes of one run, in processing order."""
    mode: Mode
    outcomes: List[PairOutcome] = field(default_factory=list)

    def count(self, status: PairStatus) -> int:
        return sum(1 for o in self.outcomes if o.status is status)

    @property
    def processed(self) -> int:
        return len(self.outcomes)

    @property
    def reports(self) -> List[PairReport]:
        return [o.report for o in self.outcomes if o.report is not None]


def process_pair(designer_path: Path, config: CleanerConfig, mode: Mode) -> PairOutcome:
    """Run one pair; an unexpected OS error becomes a FAILED outcome."""
    try:
        if mode is Mode.CLEAN:
            return clean_pair(designer_path, config)
        return report_pair(designer_path, config)
    except OSError as e:
        return PairOutcome(designer_path.name, PairStatus.FAILED, [f"❌ {designer_path}: {e}"])


def process_directory(
    directory: Union[str, Path],
    config: CleanerConfig,
    mode: Mode,
    sink: Callable[[str], None] = print,
) -> RunSummary:
    """
    Clean or report every designer file directly inside ``directory``.

    Args:
        directory: Directory holding designer and companion files
        config: Run configuration
        mode: Mode.CLEAN rewrites designer files, Mode.REPORT only prints
        sink: Receives every console line, in order

    Returns:
        RunSummary with one outcome per designer file
    """
    summary = RunSummary(mode=mode)
    for designer_path in iter_designer_files(directory):
        outcome = process_pair(designer_path, config, mode)
        for line in outcome.messages:
            sink(line)
        summary.outcomes.append(outcome)
    return summary


__all__ = ["RunSummary", "process_pair", "process_directory"]
