"""Configuration module using Pydantic Settings.

Usage:
    from methodscope.config import ViewerSettings

    settings = ViewerSettings(memoize_derived=False)
"""

from methodscope.config.settings import ViewerSettings

__all__ = [
    "ViewerSettings",
]
