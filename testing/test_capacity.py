from dataclasses import FrozenInstanceError

import pytest

from bolty import BoltSpec, default_size, list_grades, list_sizes, lookup
from bolty.capacity import CATALOG

SIZES = ["M12", "M16", "M20", "M22", "M24", "M27", "M30", "M36"]


def test_grades_in_catalog_order() -> None:
    assert list_grades() == ["Grade 4.6", "Grade 8.8", "Grade 10.9"]


@pytest.mark.parametrize("grade", ["Grade 4.6", "Grade 8.8", "Grade 10.9"])
def test_sizes_in_catalog_order(grade: str) -> None:
    assert list_sizes(grade) == SIZES


def test_sizes_for_unknown_grade_is_empty() -> None:
    assert list_sizes("Grade 12.9") == []


def test_lookup_grade_4_6_m12_matches_table() -> None:
    spec = lookup("Grade 4.6", "M12")

    assert spec is not None
    assert spec.phi_vf == 16.7
    assert spec.phi_ntf == 27
    assert spec.tensile_area == 84.3
    assert spec.fuf == 400


def test_lookup_grade_10_9_m36_matches_table() -> None:
    spec = lookup("Grade 10.9", "M36")

    assert spec == BoltSpec(
        grade="Grade 10.9",
        size="M36",
        phi_vf=417.2,
        phi_ntf=673.0,
        tensile_area=816.7,
        fuf=1030.0,
    )


@pytest.mark.parametrize(
    ("grade", "size"),
    [("Grade 8.8", "M10"), ("Grade 12.9", "M24"), ("grade 8.8", "M24"), ("", "")],
)
def test_lookup_miss_returns_none(grade: str, size: str) -> None:
    assert lookup(grade, size) is None


def test_tensile_area_shared_across_grades() -> None:
    for size in SIZES:
        areas = {lookup(grade, size).tensile_area for grade in list_grades()}
        assert len(areas) == 1


def test_catalog_is_read_only() -> None:
    with pytest.raises(TypeError):
        CATALOG["Grade 12.9"] = {}  # type: ignore[index]
    with pytest.raises(TypeError):
        CATALOG["Grade 8.8"]["M10"] = lookup("Grade 8.8", "M12")  # type: ignore[index]

    spec = lookup("Grade 8.8", "M24")
    with pytest.raises(FrozenInstanceError):
        spec.phi_vf = 0.0  # type: ignore[misc]


def test_default_size_keeps_available_preference() -> None:
    assert default_size("Grade 8.8", preferred="M24") == "M24"


def test_default_size_falls_back_to_first_size() -> None:
    assert default_size("Grade 8.8", preferred="M10") == "M12"
    assert default_size("Grade 8.8") == "M12"


def test_default_size_unknown_grade() -> None:
    assert default_size("Grade 12.9", preferred="M24") is None
