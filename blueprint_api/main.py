from __future__ import annotations

from typing import Any, Dict

from fastapi import FastAPI
from loguru import logger

from blueprint_playground import __version__ as core_version

from .adapters import sessions as sessions_adapter
from .routers import sessions as sessions_router

app = FastAPI(
    title="Blueprint API",
    version="0.1.0",
    description="In-memory wall drawing sessions driven by pointer events",
)
app.include_router(sessions_router.router)
logger.info("Blueprint API ready (core {})", core_version)


@app.get("/")
async def index() -> Dict[str, Any]:
    return {
        "name": "blueprint-api",
        "version": app.version,
        "routes": [
            {"path": "/sessions", "methods": ["GET", "POST"]},
            {"path": "/sessions/{id}", "methods": ["GET", "DELETE"]},
            {"path": "/sessions/{id}/pointer", "methods": ["POST"]},
            {"path": "/sessions/{id}/keys", "methods": ["POST"]},
            {"path": "/sessions/{id}/undo", "methods": ["POST"]},
            {"path": "/sessions/{id}/clear", "methods": ["POST"]},
            {"path": "/sessions/{id}/config", "methods": ["PATCH"]},
        ],
        "session_count": len(sessions_adapter.list_sessions()),
    }
