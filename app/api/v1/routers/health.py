# app/api/v1/routers/health.py
import time
from fastapi import APIRouter
from app.core.config import get_settings
from app.db import mongo
from app.db.redis import get_redis

router = APIRouter(tags=["health"])
START_TIME = time.time()

SERVICE_NAME = "Backend API"


@router.get("/health")
async def health():
    return {"status": "OK", "service": SERVICE_NAME}


@router.get("/health/deps")
async def health_deps():
    """
    Dependency check:
    - ping Mongo via Motor (async)
    - ping Redis
    - expose basic info + global status
    """
    settings = get_settings()
    checks: dict[str, object] = {
        "app_name": settings.APP_NAME,
        "env": settings.APP_ENV,
        "debug": settings.DEBUG,
        "uptime_seconds": int(time.time() - START_TIME),
    }

    # --- Mongo ---
    try:
        db = mongo.get_db()
        await db.command("ping")
        checks["mongodb"] = "ok"
    except Exception as e:
        checks["mongodb"] = f"error: {e}"

    # --- Redis ---
    try:
        await get_redis().ping()
        checks["redis"] = "ok"
    except Exception as e:
        checks["redis"] = f"error: {e}"

    health_keys = ("mongodb", "redis")
    status = "ok" if all(checks.get(k) == "ok" for k in health_keys) else "error"

    return {"status": status, "checks": checks, "timestamp": int(time.time())}
