"""
Local development server.

    uv run python main.py

Serverless deployments import `api.app:app` directly instead.
"""

import logging
import os

import uvicorn
from dotenv import load_dotenv

load_dotenv()

PORT = int(os.getenv("PORT", "3001"))


def main() -> None:
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    print(f"🚀 Balagh email backend running on port {PORT}")
    print(f"📧 Email API: http://localhost:{PORT}/api/notifications/send-emails")
    print(f"🔄 Backup API: http://localhost:{PORT}/api/backups/cron-status")
    uvicorn.run("api.app:app", host="0.0.0.0", port=PORT)


if __name__ == "__main__":
    main()
