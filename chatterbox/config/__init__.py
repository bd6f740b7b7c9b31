"""
Configuration

One Settings object per process, built from the environment.

Usage:
======
    from chatterbox.config.settings import settings

    db_url = settings.DATABASE_URL
    is_dev = settings.is_development
"""

from chatterbox.config.settings import settings, get_settings, Settings

__all__ = [
    "settings",
    "get_settings",
    "Settings",
]
