"""FastAPI application entrypoint.

This module builds the application object, wires middleware and mounts
one router per resource. Routers are intentionally thin: they accept
requests, delegate to services and translate missing rows into 404.

Resources:
- /api/categories
- /api/levels
- /api/words
- /api/stageWords
- /api/pronunciations
- /api/gameProgress
- /api/users
"""

from fastapi import FastAPI, Request
from fastapi.responses import Response
from fastapi.middleware.cors import CORSMiddleware
import json
import logging
import time
import uuid
from .config import settings
from .database import create_db_and_tables
from .routes import ALL_ROUTERS

app = FastAPI(title="Pronunciation App API")
logger = logging.getLogger("pronunciation_app.api")
if not logger.handlers:
    logging.basicConfig(level=settings.LOG_LEVEL)

# Wide-open CORS keeps the local web client working without extra config in dev.
if settings.ALLOW_DEV_CORS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

create_db_and_tables()


def _request_log_payload(request: Request, req_id: str, started: float, **extra) -> str:
    payload = {
        "request_id": req_id,
        "path": request.url.path,
        "method": request.method,
        "duration_ms": round((time.perf_counter() - started) * 1000.0, 2),
        "client": request.client.host if request.client else "unknown",
    }
    payload.update(extra)
    return json.dumps(payload, ensure_ascii=True)


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID", uuid.uuid4().hex)
    request.state.request_id = req_id
    started = time.perf_counter()
    response: Response
    try:
        response = await call_next(request)
    except Exception:
        if request.url.path.startswith("/api"):
            logger.exception("request_failed %s", _request_log_payload(request, req_id, started))
        raise
    response.headers["X-Request-ID"] = req_id
    if request.url.path.startswith("/api"):
        logger.info(
            "request_done %s",
            _request_log_payload(request, req_id, started, status_code=response.status_code),
        )
    return response


for router in ALL_ROUTERS:
    app.include_router(router)


@app.get("/health")
def health():
    """Lightweight health check for uptime monitoring."""
    return {"status": "ok"}
