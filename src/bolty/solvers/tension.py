"""Bolt tension from axial force and biaxial bending."""

from __future__ import annotations

from ..geometry import BoltGroupProperties, Point2D
from ..load import LoadSet
from ..units import KN_TO_N, KNM_TO_NMM


def calculate_bolt_tensions(
    *,
    points: list[Point2D],
    props: BoltGroupProperties,
    load: LoadSet,
    prying_allowance: float,
) -> list[float]:
    """Return per-bolt tension in kN, prying allowance included.

    Axial force is shared equally. Each moment adds a linear gradient about the
    centroid, scaled by the reference half-depth of the group (`ym` for the
    major axis, `xm` for the minor axis).

    Bolts on the compression side receive negative contributions; these are
    kept, so a bolt can end up with net compression. No neutral axis shift is
    modelled.
    """
    n = props.n
    N_direct = load.Nt * KN_TO_N / n
    Mb = load.Mb * KNM_TO_NMM
    Mm = load.Mm * KNM_TO_NMM

    tensions: list[float] = []
    for (x, y) in points:
        N_major = Mb * y / (2.0 * props.ym**2)
        N_minor = Mm * x / (2.0 * props.xm**2)
        tensions.append(prying_allowance * (N_direct + N_major + N_minor) / KN_TO_N)

    return tensions


__all__ = ["calculate_bolt_tensions"]
