from datetime import datetime, timezone
from typing import Any

from fastapi.responses import JSONResponse


def error_response(status_code: int, error: str, **extra: Any) -> JSONResponse:
    """JSON error body in the {"error": ..., ...} shape the admin panel expects."""
    return JSONResponse(status_code=status_code, content={"error": error, **extra})


def health_payload(status: str) -> dict[str, str]:
    return {"status": status, "timestamp": datetime.now(timezone.utc).isoformat()}
