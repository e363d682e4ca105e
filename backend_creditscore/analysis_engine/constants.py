"""
Versioned scoring constants.

Weights, score bounds, and the address scheme define the meaning of every issued
score. They are not configuration: changing any value here changes previously
reported scores and must ship with a SCORING_MODEL_VERSION bump.
"""

from __future__ import annotations

SCORING_MODEL_VERSION = "2.0.0"

# Subject ids are Aleo addresses
ADDRESS_PREFIX = "aleo1"

# Final score range: BASE_SCORE + up to MAX_BONUS_POINTS
BASE_SCORE = 300
MIN_SCORE = 300
MAX_SCORE = 850
MAX_BONUS_POINTS = MAX_SCORE - BASE_SCORE  # 550

# Factor raw scores and the normalized weighted sum live on a 0-100 scale
FACTOR_SCALE = 100.0

# Bonus points per weighted factor point: MAX_BONUS_POINTS / FACTOR_SCALE (5.5).
# Suggestion potential gain and breakdown points use this same conversion as
# the aggregator, so it must be derived here rather than hard-coded elsewhere.
POINTS_PER_FACTOR_POINT = MAX_BONUS_POINTS / FACTOR_SCALE

# Risk bands, inclusive lower bounds
LOW_RISK_MIN_SCORE = 750
MEDIUM_RISK_MIN_SCORE = 500

# Factor rating bands, inclusive lower bounds
RATING_EXCELLENT_MIN = 85
RATING_GOOD_MIN = 70
RATING_FAIR_MIN = 50

# Factors scoring below this produce an improvement suggestion
SUGGESTION_THRESHOLD = 70

# Percentile model: score population ~ Normal(mean, stddev)
POPULATION_MEAN = 600.0
POPULATION_STDDEV = 100.0

MS_PER_DAY = 1000 * 60 * 60 * 24

# Recency adjustments for activity history (days since last activity)
RECENT_ACTIVITY_DAYS = 7
RECENT_ACTIVITY_BONUS = 10
MONTH_ACTIVITY_DAYS = 30
MONTH_ACTIVITY_BONUS = 5
INACTIVE_DAYS = 90
INACTIVE_PENALTY = 15
DORMANT_DAYS = 180
DORMANT_PENALTY = 25
