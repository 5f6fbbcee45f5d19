"""
Scheduled backup bookkeeping.

Records backup triggers in the store and reports whether the cron schedule
is actually producing backups.
"""

from .backup_service import get_cron_status, trigger_backup

__all__ = [
    "get_cron_status",
    "trigger_backup",
]
