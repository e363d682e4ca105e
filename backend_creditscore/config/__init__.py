"""
Configuration management for the credit scoring backend.

Loads and validates settings from environment variables and an optional .env
file. Scoring constants are not configuration; see analysis_engine.constants.
"""

from backend_creditscore.config.settings import Settings, get_settings  # noqa: F401

__all__ = ["Settings", "get_settings"]
