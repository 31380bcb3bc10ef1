"""Health check endpoint — no dependencies, always available."""

from datetime import datetime, timezone

from fastapi import APIRouter

router = APIRouter(tags=["Health"])


@router.get("/")
async def health_check() -> dict:
    """Returns a liveness message with the current server time."""
    return {
        "status": "ok",
        "message": "Backend da Florê está no ar!",
        "timestamp": datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
    }
