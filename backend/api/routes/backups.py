"""
/api/backups: scheduled backup trigger and cron health.
"""

import logging

from fastapi import APIRouter
from starlette.concurrency import run_in_threadpool

from api.responses import error_response
from backups.backup_service import get_cron_status, trigger_backup
from shared.errors import BackupNotConfiguredError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/backups", tags=["backups"])


@router.get("/cron-status")
async def cron_status():
    try:
        return await run_in_threadpool(get_cron_status)
    except Exception:
        logger.exception("Error checking cron status")
        return error_response(500, "Failed to check cron status")


@router.post("/trigger-backup")
async def trigger_backup_route():
    try:
        config = await run_in_threadpool(trigger_backup, "cron")
    except BackupNotConfiguredError:
        return error_response(400, "Backup not configured or disabled")
    except Exception as e:
        logger.exception("Error triggering backup")
        return error_response(500, "Failed to trigger backup", details=str(e))

    return {
        "success": True,
        "message": "Backup triggered successfully",
        "config": config.model_dump(mode="json"),
    }
