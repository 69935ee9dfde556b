"""
Core Module - Shared Infrastructure.
"""

from src.core.config import settings, Settings

__all__ = [
    "settings",
    "Settings",
]
