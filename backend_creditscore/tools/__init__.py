"""
Command-line tools for scoring metrics files.

Modules: score_wallet (one JSON record), batch_score (CSV, parallel).
"""
