"""
Backend CreditScore — explainable creditworthiness scoring for wallet activity.

Maps a wallet's behavioral metrics to a bounded 300–850 credit score, a risk
level, a per-factor breakdown, ranked improvement suggestions, and a percentile
estimate. Modular architecture with clear separation between the analysis
engine, API server, and command-line tools.
"""

__version__ = "0.1.0"
