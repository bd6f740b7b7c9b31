"""
Enums used across the application.
"""

from enum import Enum


class PassportType(str, Enum):
    """Authentication method attached to a user."""

    LOCAL = "local"
    FACEBOOK = "facebook"
    GOOGLE = "google"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]
