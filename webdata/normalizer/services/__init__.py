"""
Services package.

Provides maintenance tasks that run outside request normalization.
"""

from .update_check import UpdateChecker, UpdateCheckStatus, run_update_check

__all__ = [
    "UpdateChecker",
    "UpdateCheckStatus",
    "run_update_check",
]
