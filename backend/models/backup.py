"""Pydantic models for scheduled backup bookkeeping."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class BackupConfig(BaseModel):
    """The single `settings` row in backup_config."""

    model_config = ConfigDict(extra="allow")

    id: str = "settings"
    enabled: bool = False
    schedule: str | None = None
    last_backup: datetime | None = None
    last_backup_status: str | None = None


class BackupLog(BaseModel):
    """One row in backup_logs, written each time a backup is triggered."""

    model_config = ConfigDict(extra="ignore")

    triggered_at: datetime
    triggered_by: str = "cron"
    status: str = "initiated"
