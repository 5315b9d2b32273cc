import pytest

from bolty import CircularArrangement, LoadSet, RectangularArrangement


@pytest.fixture
def rectangular_4x4() -> RectangularArrangement:
    """4 rows x 4 columns at 150 mm row / 160 mm column spacing."""
    return RectangularArrangement(num_rows=4, num_cols=4, row_spacing=150.0, col_spacing=160.0)


@pytest.fixture
def circular_8() -> CircularArrangement:
    """8 bolts on a 400 mm diameter circle."""
    return CircularArrangement(diameter=400.0, num_bolts=8)


@pytest.fixture
def combined_loads() -> LoadSet:
    """Shear, torsion, biaxial bending and axial load together."""
    return LoadSet(Vx=20.0, Vy=5.0, Tb=10.0, Mb=50.0, Mm=10.0, Nt=10.0)
