# src/plateau/exceptions.py
from __future__ import annotations

class WealthPlateauError(Exception):
    """Base exception for the wealth-plateau package."""

class ConfigurationError(WealthPlateauError):
    """Raised when a scenario configuration is invalid or incomplete."""
