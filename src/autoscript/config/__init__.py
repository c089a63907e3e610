"""Configuration package.

Usage:
    from autoscript.config import get_settings

    settings = get_settings()
    print(settings.max_call_depth)
"""

from .settings import EngineSettings, get_settings, reset_settings

__all__ = [
    "EngineSettings",
    "get_settings",
    "reset_settings",
]
