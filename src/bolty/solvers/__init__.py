"""Per-bolt force distribution (elastic shear, linear tension)."""

from .elastic import solve_elastic_shear
from .tension import calculate_bolt_tensions

__all__ = ["solve_elastic_shear", "calculate_bolt_tensions"]
