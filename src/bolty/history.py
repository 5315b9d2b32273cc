"""In-memory history of saved calculations."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
import logging
import threading
from typing import Any, Iterator

from .results import AnalysisResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SavedCalculation:
    """Snapshot of an `AnalysisResult` the user chose to keep.

    Holds copies of the values only, so later evaluations do not affect it.
    """

    timestamp: datetime
    grade: str
    size: str
    shear_force: float
    axial_force: float
    shear_utilisation: float
    tension_utilisation: float
    combined_ratio: float

    @classmethod
    def from_result(cls, result: AnalysisResult, timestamp: datetime | None = None) -> "SavedCalculation":
        return cls(
            timestamp=timestamp if timestamp is not None else datetime.now(),
            grade=result.spec.grade,
            size=result.spec.size,
            shear_force=float(result.max_shear),
            axial_force=float(result.max_tension),
            shear_utilisation=float(result.shear_utilisation),
            tension_utilisation=float(result.tension_utilisation),
            combined_ratio=float(result.combined_ratio),
        )

    @property
    def info(self) -> dict[str, Any]:
        return {
            "timestamp": self.timestamp.isoformat(),
            "grade": self.grade,
            "size": self.size,
            "shear_force_kN": self.shear_force,
            "axial_force_kN": self.axial_force,
            "shear_utilisation": self.shear_utilisation,
            "tension_utilisation": self.tension_utilisation,
            "combined_ratio": self.combined_ratio,
        }


class CalculationHistory:
    """Ordered, append-only list of `SavedCalculation` entries."""

    def __init__(self) -> None:
        self._entries: list[SavedCalculation] = []
        self._lock = threading.Lock()

    def save(self, result: AnalysisResult, timestamp: datetime | None = None) -> SavedCalculation:
        """Snapshot `result` and append it."""
        saved = SavedCalculation.from_result(result, timestamp=timestamp)
        self.append(saved)
        return saved

    def append(self, saved: SavedCalculation) -> None:
        if not isinstance(saved, SavedCalculation):
            raise TypeError("saved must be a SavedCalculation")
        with self._lock:
            self._entries.append(saved)
            count = len(self._entries)
        logger.info(
            "Saved calculation %d: %s %s ratio=%.3f",
            count,
            saved.grade,
            saved.size,
            saved.combined_ratio,
        )

    def entries(self) -> tuple[SavedCalculation, ...]:
        with self._lock:
            return tuple(self._entries)

    @property
    def latest(self) -> SavedCalculation | None:
        with self._lock:
            return self._entries[-1] if self._entries else None

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __iter__(self) -> Iterator[SavedCalculation]:
        return iter(self.entries())

    def __getitem__(self, index: int) -> SavedCalculation:
        with self._lock:
            return self._entries[index]


__all__ = ["SavedCalculation", "CalculationHistory"]
