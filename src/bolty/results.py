"""Result models for bolt group evaluation."""

from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Any

from .capacity import BoltSpec
from .geometry import Arrangement, Point2D
from .load import LoadSet
from .units import KN_TO_N

ACCEPTANCE_LIMIT = 1.0


@dataclass(frozen=True)
class BoltForce:
    """Forces at a single bolt.

    `Vx` and `Vy` are the shear reaction components in N (they oppose the
    applied load). `tension` is in kN and already includes the prying
    allowance; it is negative for bolts on the compression side.
    """

    point: Point2D
    Vx: float
    Vy: float
    tension: float

    @property
    def x(self) -> float:
        return self.point[0]

    @property
    def y(self) -> float:
        return self.point[1]

    @property
    def shear(self) -> float:
        """Resultant shear (kN)."""
        return math.sqrt(self.Vx**2 + self.Vy**2) / KN_TO_N

    @property
    def info(self) -> dict[str, Any]:
        return {
            "point": self.point,
            "Vx_N": self.Vx,
            "Vy_N": self.Vy,
            "shear_kN": self.shear,
            "tension_kN": self.tension,
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Governing bolt demands for one evaluation, checked against `spec`."""

    arrangement: Arrangement
    loads: LoadSet
    spec: BoltSpec
    prying_allowance: float
    Ibp: float
    xm: float
    ym: float
    max_shear: float
    max_tension: float
    combined_ratio: float
    shear_stress: float
    tensile_stress: float
    bolt_forces: tuple[BoltForce, ...] = field(default_factory=tuple, repr=False)

    @property
    def n(self) -> int:
        return len(self.bolt_forces)

    @property
    def shear_capacity(self) -> float:
        return self.spec.phi_vf

    @property
    def tension_capacity(self) -> float:
        return self.spec.phi_ntf

    @property
    def tensile_area(self) -> float:
        return self.spec.tensile_area

    @property
    def shear_utilisation(self) -> float:
        return self.max_shear / self.shear_capacity

    @property
    def tension_utilisation(self) -> float:
        return self.max_tension / self.tension_capacity

    @property
    def is_acceptable(self) -> bool:
        return self.combined_ratio <= ACCEPTANCE_LIMIT

    @property
    def info(self) -> dict[str, Any]:
        return {
            "arrangement": self.arrangement.kind,
            "n": self.n,
            "grade": self.spec.grade,
            "size": self.spec.size,
            "prying_allowance": self.prying_allowance,
            "Ibp_mm4": self.Ibp,
            "max_shear_kN": self.max_shear,
            "max_tension_kN": self.max_tension,
            "shear_capacity_kN": self.shear_capacity,
            "tension_capacity_kN": self.tension_capacity,
            "tensile_area_mm2": self.tensile_area,
            "shear_utilisation": self.shear_utilisation,
            "tension_utilisation": self.tension_utilisation,
            "combined_ratio": self.combined_ratio,
            "is_acceptable": self.is_acceptable,
            "shear_stress_MPa": self.shear_stress,
            "tensile_stress_MPa": self.tensile_stress,
            "loads": self.loads.info,
            "bolts": [bf.info for bf in self.bolt_forces],
        }


__all__ = ["ACCEPTANCE_LIMIT", "BoltForce", "AnalysisResult"]
