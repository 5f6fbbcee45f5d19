"""
CLI script for scheduled backups.

Usage:
    # Record a backup trigger (run from cron / CI schedule)
    uv run python -m backups.run_backup --trigger

    # Attribute the trigger to someone other than cron
    uv run python -m backups.run_backup --trigger --triggered-by manual

    # Check whether the schedule is healthy
    uv run python -m backups.run_backup --status
"""

import argparse
import sys

from backups.backup_service import get_cron_status, trigger_backup
from shared.errors import BackupNotConfiguredError
from shared.utils import print_summary


def run_trigger(triggered_by: str) -> int:
    try:
        config = trigger_backup(triggered_by=triggered_by)
    except BackupNotConfiguredError as e:
        print(f"✗ {e}")
        return 1

    print_summary(
        "Backup Triggered",
        {
            "Triggered by": triggered_by,
            "Schedule": config.schedule or "-",
        },
    )
    return 0


def run_status() -> int:
    status = get_cron_status()
    print_summary(
        "Backup Cron Status",
        {
            "Configured": status["isConfigured"],
            "Recent backup": status["hasRecentBackup"],
            "Last backup": status["lastBackup"] or "never",
            "Cron status": status["cronStatus"],
        },
    )
    return 0 if status["cronStatus"] == "active" else 1


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Trigger or inspect scheduled backups")

    parser.add_argument("--trigger", action="store_true", help="Record a backup trigger")
    parser.add_argument("--status", action="store_true", help="Show cron status")
    parser.add_argument(
        "--triggered-by",
        type=str,
        default="cron",
        help="Who triggered the backup (default: cron)",
    )

    args = parser.parse_args()

    if not args.trigger and not args.status:
        parser.error("Must specify --trigger or --status")

    if args.trigger:
        sys.exit(run_trigger(args.triggered_by))

    sys.exit(run_status())


if __name__ == "__main__":
    main()
