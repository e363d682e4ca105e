"""
Percentile estimate for a credit score.

Models the score population as Normal(600, 100). The error function is the
Abramowitz-Stegun 7.1.26 rational approximation with pinned coefficients, not
math.erf: reported percentiles must not change with the platform's erf.
"""

from __future__ import annotations

import math

from backend_creditscore.analysis_engine.constants import POPULATION_MEAN, POPULATION_STDDEV
from backend_creditscore.analysis_engine.scorer import round_half_up

# Abramowitz & Stegun 7.1.26 (max abs error 1.5e-7)
AS_A1 = 0.254829592
AS_A2 = -0.284496736
AS_A3 = 1.421413741
AS_A4 = -1.453152027
AS_A5 = 1.061405429
AS_P = 0.3275911

# Beyond these bounds the percentile is 0 or 100; large ints never reach float math
SATURATION_LOW = POPULATION_MEAN - 10 * POPULATION_STDDEV
SATURATION_HIGH = POPULATION_MEAN + 10 * POPULATION_STDDEV


def erf(x: float) -> float:
    sign = -1.0 if x < 0 else 1.0
    x = abs(x)
    t = 1.0 / (1.0 + AS_P * x)
    y = 1.0 - (((((AS_A5 * t + AS_A4) * t) + AS_A3) * t + AS_A2) * t + AS_A1) * t * math.exp(-x * x)
    return sign * y


def percentile(score: float) -> int:
    """
    Estimated share (0-100) of the population scoring below `score`.

    Scores beyond ten standard deviations saturate at 0 or 100.

    Raises:
        ValueError: score is NaN.
    """
    if score != score:
        raise ValueError("score must not be NaN")
    score = max(SATURATION_LOW, min(SATURATION_HIGH, score))
    z = (score - POPULATION_MEAN) / POPULATION_STDDEV
    value = 50 * (1 + erf(z / math.sqrt(2)))
    return max(0, min(100, round_half_up(value)))
