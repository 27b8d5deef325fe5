"""
Acquisitions API — application entry point.
"""

from __future__ import annotations

import logging
import sys
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from api.errors import register_exception_handlers
from api.middleware import register_middleware
from auth.routes import router as auth_router
from config.settings import DEFAULT_JWT_SECRET, config
from database.session import init_models

logging.basicConfig(
    level=logging.DEBUG if config.debug else config.log_level.upper(),
    format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
    stream=sys.stdout,
)
for _noisy in ("sqlalchemy.engine", "httpx", "asyncio"):
    logging.getLogger(_noisy).setLevel(logging.WARNING)
logger = logging.getLogger(__name__)

_STARTED_AT = time.monotonic()


@asynccontextmanager
async def lifespan(app: FastAPI):
    if config.jwt_secret == DEFAULT_JWT_SECRET:
        logger.warning("JWT_SECRET not set, using the development default")
    await init_models()
    logger.info("Application ready to accept requests.")
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Acquisitions API",
        version="1.0.0",
        description="User registration and authentication.",
        lifespan=lifespan,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_middleware(app)
    register_exception_handlers(app)

    @app.get("/", response_class=PlainTextResponse)
    async def root() -> str:
        return "Hello from Acquisitions!"

    @app.get("/health")
    async def health():
        return {
            "status": "OK",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "uptime": round(time.monotonic() - _STARTED_AT, 3),
        }

    # Routes
    app.include_router(auth_router, prefix="/api/auth")

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level="debug" if config.debug else config.log_level.lower(),
    )
