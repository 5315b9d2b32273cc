from dataclasses import FrozenInstanceError
from datetime import datetime
import threading

import pytest

from bolty import CalculationHistory, LoadSet, SavedCalculation, evaluate


@pytest.fixture
def result(rectangular_4x4, combined_loads):
    return evaluate(rectangular_4x4, combined_loads, "Grade 8.8", "M24", prying_allowance=1.1)


def test_snapshot_copies_result_values(result) -> None:
    stamp = datetime(2024, 3, 1, 9, 30)
    saved = SavedCalculation.from_result(result, timestamp=stamp)

    assert saved.timestamp == stamp
    assert saved.grade == "Grade 8.8"
    assert saved.size == "M24"
    assert saved.shear_force == result.max_shear
    assert saved.axial_force == result.max_tension
    assert saved.shear_utilisation == pytest.approx(result.max_shear / 145.1)
    assert saved.tension_utilisation == pytest.approx(result.max_tension / 234.1)
    assert saved.combined_ratio == result.combined_ratio


def test_snapshot_is_immutable(result) -> None:
    saved = SavedCalculation.from_result(result)

    with pytest.raises(FrozenInstanceError):
        saved.combined_ratio = 0.0  # type: ignore[misc]


def test_history_preserves_order(result, circular_8) -> None:
    history = CalculationHistory()
    other = evaluate(circular_8, LoadSet(Nt=80.0), "Grade 4.6", "M20")

    first = history.save(result, timestamp=datetime(2024, 3, 1))
    second = history.save(other, timestamp=datetime(2024, 3, 2))

    assert len(history) == 2
    assert list(history) == [first, second]
    assert history[0] is first
    assert history.latest is second
    assert second.grade == "Grade 4.6"
    assert second.axial_force == pytest.approx(11.0)


def test_entries_is_a_copy(result) -> None:
    history = CalculationHistory()
    history.save(result)

    entries = history.entries()
    history.save(result)

    assert len(entries) == 1
    assert len(history.entries()) == 2


def test_saved_entry_unaffected_by_later_evaluations(rectangular_4x4) -> None:
    history = CalculationHistory()
    saved = history.save(evaluate(rectangular_4x4, LoadSet(Nt=16.0), "Grade 8.8", "M24"))

    evaluate(rectangular_4x4, LoadSet(Nt=1600.0), "Grade 8.8", "M24")

    assert history.latest == saved
    assert saved.axial_force == pytest.approx(1.1)


def test_empty_history() -> None:
    history = CalculationHistory()

    assert len(history) == 0
    assert history.latest is None
    assert history.entries() == ()


def test_append_rejects_other_types(result) -> None:
    history = CalculationHistory()

    with pytest.raises(TypeError):
        history.append(result)  # type: ignore[arg-type]


def test_concurrent_saves_are_all_kept(result) -> None:
    history = CalculationHistory()

    def worker() -> None:
        for _ in range(50):
            history.save(result)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(history) == 200


def test_info_uses_iso_timestamp(result) -> None:
    saved = SavedCalculation.from_result(result, timestamp=datetime(2024, 3, 1, 9, 30))

    assert saved.info["timestamp"] == "2024-03-01T09:30:00"
    assert saved.info["combined_ratio"] == result.combined_ratio
