"""
Shared utilities for Guide Validator

Common helpers used by the web service and its maintenance scripts.
"""

from .logger import configure_logging

__all__ = [
    "configure_logging",
]

__version__ = "1.0.0"
