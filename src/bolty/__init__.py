"""
Bolty - Bolt Group Force Distribution and Capacity Check

Distribute shear, torsion, biaxial bending and axial load over a rectangular
or circular bolt group using the elastic method, then check the governing
bolt against tabulated AS 4100 capacities with the combined interaction
equation (V*/φVf)² + (N*/φNtf)² <= 1.0.

Example usage:
    from bolty import LoadSet, RectangularArrangement, CalculationHistory, evaluate

    # 1. Define the bolt pattern (mm)
    arrangement = RectangularArrangement(
        num_rows=4, num_cols=4, row_spacing=150.0, col_spacing=160.0
    )

    # 2. Define loads at the group centroid (kN, kNm)
    loads = LoadSet(Vx=20.0, Vy=5.0, Tb=10.0, Mb=50.0, Mm=10.0, Nt=10.0)

    # 3. Evaluate against a catalog bolt
    result = evaluate(arrangement, loads, "Grade 8.8", "M24", prying_allowance=1.1)

    # 4. Access results
    print(f"Max shear: {result.max_shear:.2f} kN")
    print(f"Max tension: {result.max_tension:.2f} kN")
    if result.is_acceptable:
        print(f"OK: {result.combined_ratio:.3f}")

    # 5. Keep a snapshot
    history = CalculationHistory()
    history.save(result)
"""

from .analysis import DEFAULT_PRYING_ALLOWANCE, evaluate
from .capacity import BoltSpec, default_size, list_grades, list_sizes, lookup
from .errors import BoltGroupError, InsufficientBoltCount, UnknownBoltSpec
from .geometry import Arrangement, BoltGroupProperties, CircularArrangement, RectangularArrangement
from .history import CalculationHistory, SavedCalculation
from .load import LoadSet
from .results import AnalysisResult, BoltForce

__all__ = [
    # Evaluation
    "evaluate",
    "DEFAULT_PRYING_ALLOWANCE",
    # Capacity table
    "BoltSpec",
    "list_grades",
    "list_sizes",
    "lookup",
    "default_size",
    # Geometry and loads
    "Arrangement",
    "BoltGroupProperties",
    "RectangularArrangement",
    "CircularArrangement",
    "LoadSet",
    # Results
    "BoltForce",
    "AnalysisResult",
    "SavedCalculation",
    "CalculationHistory",
    # Errors
    "BoltGroupError",
    "InsufficientBoltCount",
    "UnknownBoltSpec",
]

__version__ = "0.1.0"
