"""GET /health: liveness check."""

from fastapi import APIRouter

from api.responses import health_payload

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check() -> dict[str, str]:
    return health_payload("Balagh email backend is running")
