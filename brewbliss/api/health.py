"""Health check endpoints"""

from datetime import datetime, timezone

from fastapi import APIRouter, Request
import structlog

router = APIRouter()
logger = structlog.get_logger()


@router.get("/health")
async def health():
    """Basic liveness probe"""
    return {
        "message": "Brew Bliss Cafe API is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "status": "healthy",
    }


@router.get("/health/ready")
async def ready(request: Request):
    """Readiness check with database verification"""
    checks = {}

    try:
        await request.app.state.db.ping()
        checks["database"] = "ok"
    except Exception as e:
        logger.warning("Readiness check failed", dependency="database", error=str(e))
        checks["database"] = f"failed: {str(e)}"

    all_ok = all(v == "ok" for v in checks.values())

    return {
        "status": "ready" if all_ok else "not_ready",
        "checks": checks,
    }
