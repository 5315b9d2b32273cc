"""Exceptions raised by bolt group evaluation."""

from __future__ import annotations

MIN_BOLTS = 2


class BoltGroupError(ValueError):
    """Base class for inputs that cannot be evaluated as a bolt group."""


class InsufficientBoltCount(BoltGroupError):
    """Raised when the arrangement has fewer than two bolts."""

    def __init__(self, n: int) -> None:
        self.n = int(n)
        super().__init__(f"Minimum {MIN_BOLTS} bolts required for analysis (got {self.n})")


class UnknownBoltSpec(BoltGroupError):
    """Raised when a grade/size pair is not in the capacity catalog."""

    def __init__(self, grade: str, size: str) -> None:
        self.grade = grade
        self.size = size
        super().__init__(f"Invalid bolt grade and size combination: {grade!r} / {size!r}")


__all__ = ["MIN_BOLTS", "BoltGroupError", "InsufficientBoltCount", "UnknownBoltSpec"]
