"""Elastic (linear) in-plane shear distribution for bolt groups."""

from __future__ import annotations

from ..geometry import BoltGroupProperties, Point2D
from ..load import LoadSet
from ..units import KN_TO_N, KNM_TO_NMM


def solve_elastic_shear(
    *,
    points: list[Point2D],
    props: BoltGroupProperties,
    load: LoadSet,
) -> list[tuple[float, float]]:
    """Return per-bolt shear reactions (Vx, Vy) in N.

    Direct shear is shared equally between the bolts. Torsion adds a component
    proportional to the bolt's offset from the centroid along the other axis.
    Reactions oppose the applied actions, hence the negative signs.
    `points` are measured from the bolt group centroid.
    """
    n = props.n
    Ibp = props.Ibp

    V_direct_x = -load.Vx * KN_TO_N / n
    V_direct_y = -load.Vy * KN_TO_N / n
    T = -load.Tb * KNM_TO_NMM

    shears: list[tuple[float, float]] = []
    for (x, y) in points:
        V_x = V_direct_x + T * y / Ibp
        V_y = V_direct_y + T * x / Ibp
        shears.append((V_x, V_y))

    return shears


__all__ = ["solve_elastic_shear"]
