"""Bolt group evaluation: force distribution plus the combined interaction check."""

from __future__ import annotations

import logging

from .capacity import lookup
from .errors import MIN_BOLTS, InsufficientBoltCount, UnknownBoltSpec
from .geometry import Arrangement
from .load import LoadSet
from .results import AnalysisResult, BoltForce
from .solvers.elastic import solve_elastic_shear
from .solvers.tension import calculate_bolt_tensions
from .units import KN_TO_N

logger = logging.getLogger(__name__)

DEFAULT_PRYING_ALLOWANCE = 1.1


def evaluate(
    arrangement: Arrangement,
    loads: LoadSet,
    grade: str,
    size: str,
    prying_allowance: float = DEFAULT_PRYING_ALLOWANCE,
) -> AnalysisResult:
    """Distribute `loads` over the bolt group and check the governing bolt.

    Parameters
    ----------
    arrangement:
        `RectangularArrangement` or `CircularArrangement`.
    loads:
        Design actions at the bolt group centroid (kN, kNm).
    grade, size:
        Catalog keys, e.g. ``"Grade 8.8"`` and ``"M24"``.
    prying_allowance:
        Multiplier (>= 1.0) applied to every bolt tension.

    Raises
    ------
    InsufficientBoltCount
        If the arrangement has fewer than two bolts.
    UnknownBoltSpec
        If the grade/size pair is not tabulated.
    ValueError
        If `prying_allowance` is below 1.0.
    """
    n = arrangement.n
    if n < MIN_BOLTS:
        logger.debug("Rejected %s arrangement with %d bolt(s)", arrangement.kind, n)
        raise InsufficientBoltCount(n)

    spec = lookup(grade, size)
    if spec is None:
        logger.debug("No capacity entry for %r / %r", grade, size)
        raise UnknownBoltSpec(grade, size)

    if not prying_allowance >= 1.0:
        raise ValueError("prying_allowance must be at least 1.0")

    points = arrangement.points
    props = arrangement.properties

    shears = solve_elastic_shear(points=points, props=props, load=loads)
    tensions = calculate_bolt_tensions(
        points=points,
        props=props,
        load=loads,
        prying_allowance=prying_allowance,
    )

    bolt_forces = tuple(
        BoltForce(point=point, Vx=V_x, Vy=V_y, tension=tension)
        for point, (V_x, V_y), tension in zip(points, shears, tensions)
    )

    # Governing shear and tension may come from different bolts.
    max_shear = 0.0
    max_tension = 0.0
    for bf in bolt_forces:
        max_shear = max(max_shear, bf.shear)
        max_tension = max(max_tension, bf.tension)

    combined_ratio = (max_shear / spec.phi_vf) ** 2 + (max_tension / spec.phi_ntf) ** 2

    result = AnalysisResult(
        arrangement=arrangement,
        loads=loads,
        spec=spec,
        prying_allowance=float(prying_allowance),
        Ibp=props.Ibp,
        xm=props.xm,
        ym=props.ym,
        max_shear=max_shear,
        max_tension=max_tension,
        combined_ratio=combined_ratio,
        shear_stress=max_shear * KN_TO_N / spec.tensile_area,
        tensile_stress=max_tension * KN_TO_N / spec.tensile_area,
        bolt_forces=bolt_forces,
    )

    logger.debug(
        "Evaluated %s group: n=%d Ibp=%.1f max_shear=%.3f kN max_tension=%.3f kN ratio=%.3f",
        arrangement.kind,
        n,
        props.Ibp,
        max_shear,
        max_tension,
        combined_ratio,
    )
    return result


__all__ = ["DEFAULT_PRYING_ALLOWANCE", "MIN_BOLTS", "evaluate"]
