import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from roster.api.deps import get_config, get_storage
from roster.api.routes import students

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    # Load config and open storage on startup (fail-fast)
    try:
        config = get_config()
        logging.basicConfig(level=config.logging.level)
        get_storage()
        logger.info(
            "Roster storage: backend=%s key=%s path=%s",
            config.storage.backend,
            config.storage.key,
            config.storage.path,
        )
    except Exception as e:
        print(f"CRITICAL: Roster startup failed: {e}", file=sys.stderr)
        sys.exit(1)

    yield


app = FastAPI(
    title="Student Roster API",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.include_router(students.router, prefix="/api/students", tags=["Students"])


@app.get("/health")
def health_check() -> dict[str, Any]:
    return {"status": "ok", "storage_backend": get_config().storage.backend}
