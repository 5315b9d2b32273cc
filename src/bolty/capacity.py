"""AS 4100 bolt capacity catalog.

Design capacities for single bolts in bearing-type connections, tabulated by
property class and metric size. The catalog is built once at import and is
read-only afterwards; `lookup` returns ``None`` for a pair that is not tabulated.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class BoltSpec:
    """Tabulated capacities for one grade/size pair.

    Attributes:
        grade: Property class label, e.g. ``"Grade 8.8"``
        size: Metric size label, e.g. ``"M24"``
        phi_vf: Design shear capacity φVf (kN)
        phi_ntf: Design tension capacity φNtf (kN)
        tensile_area: Tensile stress area As (mm²)
        fuf: Minimum tensile strength of the bolt (MPa)
    """

    grade: str
    size: str
    phi_vf: float
    phi_ntf: float
    tensile_area: float
    fuf: float

    @property
    def info(self) -> dict[str, object]:
        return {
            "grade": self.grade,
            "size": self.size,
            "phi_vf_kN": self.phi_vf,
            "phi_ntf_kN": self.phi_ntf,
            "tensile_area_mm2": self.tensile_area,
            "fuf_MPa": self.fuf,
        }


# === Reference data (AS 4100) ===

TENSILE_AREA: dict[str, float] = {
    "M12": 84.3,
    "M16": 156.7,
    "M20": 244.8,
    "M22": 303.4,
    "M24": 352.5,
    "M27": 459.4,
    "M30": 560.6,
    "M36": 816.7,
}

_GRADE_CAPACITIES: dict[str, dict] = {
    "Grade 4.6": {
        "fuf": 400.0,
        "phi_vf": {"M12": 16.7, "M16": 31.1, "M20": 48.6, "M22": 60.2, "M24": 69.9, "M27": 91.1, "M30": 111.2, "M36": 162.0},
        "phi_ntf": {"M12": 27.0, "M16": 50.1, "M20": 78.3, "M22": 97.1, "M24": 112.8, "M27": 147.0, "M30": 179.4, "M36": 261.4},
    },
    "Grade 8.8": {
        "fuf": 830.0,
        "phi_vf": {"M12": 34.7, "M16": 64.5, "M20": 100.8, "M22": 124.9, "M24": 145.1, "M27": 189.1, "M30": 230.8, "M36": 336.2},
        "phi_ntf": {"M12": 56.0, "M16": 104.0, "M20": 162.5, "M22": 201.5, "M24": 234.1, "M27": 305.0, "M30": 372.2, "M36": 542.3},
    },
    "Grade 10.9": {
        "fuf": 1030.0,
        "phi_vf": {"M12": 43.1, "M16": 80.0, "M20": 125.1, "M22": 155.0, "M24": 180.1, "M27": 234.7, "M30": 286.4, "M36": 417.2},
        "phi_ntf": {"M12": 69.4, "M16": 129.1, "M20": 201.7, "M22": 250.0, "M24": 290.5, "M27": 378.6, "M30": 461.9, "M36": 673.0},
    },
}


def _build_catalog() -> Mapping[str, Mapping[str, BoltSpec]]:
    catalog: dict[str, Mapping[str, BoltSpec]] = {}
    for grade, props in _GRADE_CAPACITIES.items():
        fuf = float(props["fuf"])
        sizes: dict[str, BoltSpec] = {}
        for size, phi_vf in props["phi_vf"].items():
            sizes[size] = BoltSpec(
                grade=grade,
                size=size,
                phi_vf=float(phi_vf),
                phi_ntf=float(props["phi_ntf"][size]),
                tensile_area=float(TENSILE_AREA[size]),
                fuf=fuf,
            )
        catalog[grade] = MappingProxyType(sizes)
    return MappingProxyType(catalog)


CATALOG: Mapping[str, Mapping[str, BoltSpec]] = _build_catalog()


def list_grades() -> list[str]:
    """Return the tabulated grades in catalog order."""
    return list(CATALOG)


def list_sizes(grade: str) -> list[str]:
    """Return the sizes tabulated for `grade` (empty if the grade is unknown)."""
    sizes = CATALOG.get(grade)
    if sizes is None:
        return []
    return list(sizes)


def lookup(grade: str, size: str) -> BoltSpec | None:
    """Return the `BoltSpec` for an exact grade/size match, or ``None``."""
    sizes = CATALOG.get(grade)
    if sizes is None:
        return None
    return sizes.get(size)


def default_size(grade: str, preferred: str | None = None) -> str | None:
    """Pick a size for `grade`, keeping `preferred` when it is tabulated.

    Falls back to the first tabulated size; ``None`` for an unknown grade.
    """
    sizes = list_sizes(grade)
    if not sizes:
        return None
    if preferred is not None and preferred in sizes:
        return preferred
    return sizes[0]


__all__ = [
    "BoltSpec",
    "CATALOG",
    "TENSILE_AREA",
    "list_grades",
    "list_sizes",
    "lookup",
    "default_size",
]
