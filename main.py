"""
Bolty Example: Bolt group check under combined actions.

This example demonstrates:
1. Picking a bolt from the capacity catalog
2. Defining rectangular and circular bolt patterns
3. Evaluating the governing bolt demands
4. Keeping a history of saved calculations
"""
import logging

from bolty import (
    BoltGroupError,
    CalculationHistory,
    CircularArrangement,
    LoadSet,
    RectangularArrangement,
    default_size,
    evaluate,
    list_grades,
    lookup,
)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    # 1. Capacity catalog
    grade = "Grade 8.8"
    size = default_size(grade, preferred="M24")
    spec = lookup(grade, size)
    print(f"Grades: {', '.join(list_grades())}")
    print(f"{grade} {size}: phiVf = {spec.phi_vf} kN, phiNtf = {spec.phi_ntf} kN")

    # 2. Loads at the bolt group centroid
    loads = LoadSet(Vx=20.0, Vy=5.0, Tb=10.0, Mb=50.0, Mm=10.0, Nt=10.0)

    history = CalculationHistory()
    arrangements = [
        RectangularArrangement(num_rows=4, num_cols=4, row_spacing=150.0, col_spacing=160.0),
        CircularArrangement(diameter=400.0, num_bolts=8),
        RectangularArrangement(num_rows=1, num_cols=1, row_spacing=150.0, col_spacing=160.0),
    ]

    # 3. Evaluate each pattern
    for arrangement in arrangements:
        print(f"\n{arrangement}")
        try:
            result = evaluate(arrangement, loads, grade, size, prying_allowance=1.1)
        except BoltGroupError as exc:
            print(f"  Error: {exc}")
            continue

        print(f"  Ibp: {result.Ibp:.0f} mm4")
        print(f"  Max shear: {result.max_shear:.2f} kN ({result.shear_stress:.1f} MPa)")
        print(f"  Max tension: {result.max_tension:.2f} kN ({result.tensile_stress:.1f} MPa)")
        status = "OK" if result.is_acceptable else "NG"
        print(f"  Combined ratio: {result.combined_ratio:.3f} {status}")

        # 4. Keep the result
        history.save(result)

    print(f"\nSaved calculations: {len(history)}")
    for saved in history:
        print(f"  {saved.timestamp:%d/%m/%Y} {saved.grade} {saved.size} ratio={saved.combined_ratio:.3f}")


if __name__ == "__main__":
    main()
