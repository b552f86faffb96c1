# studium/adapters/inbound/api/endpoints/health_endpoint.py

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

router = APIRouter()

STARTED_AT = time.monotonic()


@router.get("/health", summary="Verificar se a API está no ar")
async def health(request: Request) -> JSONResponse:
    settings = request.app.state.settings
    return JSONResponse(
        content={
            "status": "ok",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "uptime": round(time.monotonic() - STARTED_AT, 3),
            "environment": settings.ENVIRONMENT,
        }
    )


@router.get("/health/db", summary="Verificar a conexão com o banco de dados")
async def health_db(request: Request) -> JSONResponse:
    if await request.app.state.database.ping():
        return JSONResponse(content={"status": "ok", "database": "connected"})
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "error", "database": "disconnected"},
    )
