"""
Backup trigger and cron health checks against the backup_config and
backup_logs tables.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from models.backup import BackupConfig, BackupLog
from shared.db import get_supabase_client
from shared.errors import BackupNotConfiguredError
from shared.utils import parse_iso_datetime

logger = logging.getLogger(__name__)

CONFIG_TABLE = "backup_config"
LOGS_TABLE = "backup_logs"
CONFIG_ROW_ID = "settings"

# A backup older than this means the schedule has stopped running
RECENT_BACKUP_WINDOW = timedelta(days=2)


def get_backup_config(supabase: Any = None) -> Optional[BackupConfig]:
    supabase = supabase or get_supabase_client()

    response = (
        supabase.table(CONFIG_TABLE)
        .select("*")
        .eq("id", CONFIG_ROW_ID)
        .limit(1)
        .execute()
    )

    if not response.data:
        return None

    return BackupConfig.model_validate(response.data[0])


def get_last_backup_log(supabase: Any = None) -> Optional[BackupLog]:
    supabase = supabase or get_supabase_client()

    response = (
        supabase.table(LOGS_TABLE)
        .select("*")
        .order("triggered_at", desc=True)
        .limit(1)
        .execute()
    )

    if not response.data:
        return None

    return BackupLog.model_validate(response.data[0])


def has_recent_backup(
    last_log: Optional[BackupLog], now: Optional[datetime] = None
) -> bool:
    """True when the last logged backup is within RECENT_BACKUP_WINDOW."""
    if last_log is None:
        return False

    triggered_at = parse_iso_datetime(last_log.triggered_at)
    if triggered_at is None:
        return False

    now = now or datetime.now(timezone.utc)
    return now - triggered_at < RECENT_BACKUP_WINDOW


def get_cron_status(supabase: Any = None, now: Optional[datetime] = None) -> Dict[str, Any]:
    """
    Report whether scheduled backups are configured and recently ran.

    Returns:
        Dictionary with isConfigured, hasRecentBackup, config, lastBackup, cronStatus
    """
    supabase = supabase or get_supabase_client()

    config = get_backup_config(supabase)
    last_log = get_last_backup_log(supabase)

    is_configured = bool(config and config.enabled)
    recent = has_recent_backup(last_log, now)

    return {
        "isConfigured": is_configured,
        "hasRecentBackup": recent,
        "config": config.model_dump(mode="json") if config else None,
        "lastBackup": last_log.triggered_at.isoformat() if last_log else None,
        "cronStatus": "active" if is_configured and recent else "inactive",
    }


def trigger_backup(triggered_by: str = "cron", supabase: Any = None) -> BackupConfig:
    """
    Record a backup trigger.

    Returns:
        The backup config in effect

    Raises:
        BackupNotConfiguredError: If the config row is missing or disabled
    """
    supabase = supabase or get_supabase_client()

    config = get_backup_config(supabase)
    if config is None or not config.enabled:
        raise BackupNotConfiguredError("Backup not configured or disabled")

    now = datetime.now(timezone.utc).isoformat()

    supabase.table(CONFIG_TABLE).update(
        {"last_backup": now, "last_backup_status": "triggered"}
    ).eq("id", CONFIG_ROW_ID).execute()

    supabase.table(LOGS_TABLE).insert(
        {"triggered_at": now, "triggered_by": triggered_by, "status": "initiated"}
    ).execute()

    logger.info("Backup triggered by %s", triggered_by)
    return config
