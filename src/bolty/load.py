"""Load definition for bolt group evaluation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LoadSet:
    """Design actions applied at the centroid of a bolt group.

    Attributes:
        Vx: Horizontal shear (kN)
        Vy: Vertical shear (kN)
        Tb: Torsion about the bolt group centroid (kNm)
        Mb: Major-axis moment, produces a tension gradient in y (kNm)
        Mm: Minor-axis moment, produces a tension gradient in x (kNm)
        Nt: Axial force, tension positive (kN)

    Notes:
        - No relationship between components is assumed; zero and negative
          values are valid.
    """

    Vx: float = 0.0
    Vy: float = 0.0
    Tb: float = 0.0
    Mb: float = 0.0
    Mm: float = 0.0
    Nt: float = 0.0

    @property
    def info(self) -> dict[str, float]:
        return {
            "Vx_kN": self.Vx,
            "Vy_kN": self.Vy,
            "Tb_kNm": self.Tb,
            "Mb_kNm": self.Mb,
            "Mm_kNm": self.Mm,
            "Nt_kN": self.Nt,
        }


__all__ = ["LoadSet"]
