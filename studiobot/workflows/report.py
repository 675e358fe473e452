"""Outcome of a workflow run."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from studiobot.config import Mode


@dataclass
class RunReport:
    """Per-run tally of what a driver found and finished.

    Items are appended as they complete, so a report built up to a failure
    still lists everything that was already changed in Studio.
    """

    mode: Mode
    found: int = 0
    eligible: int = 0
    processed: List[str] = field(default_factory=list)
    elapsed_seconds: float = 0.0

    @property
    def completed(self) -> bool:
        return len(self.processed) == self.eligible

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mode": self.mode.value,
            "found": self.found,
            "eligible": self.eligible,
            "processed": list(self.processed),
            "elapsed_seconds": self.elapsed_seconds,
        }
