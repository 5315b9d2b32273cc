"""Unit conversion factors.

Inputs and outputs use kN, kNm, mm and MPa. Force distribution is carried out
in N and N·mm so that dividing by mm² gives MPa directly.
"""

KN_TO_N = 1e3
KNM_TO_NMM = 1e6

__all__ = ["KN_TO_N", "KNM_TO_NMM"]
