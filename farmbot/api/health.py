from __future__ import annotations

from fastapi import APIRouter

from farmbot.schemas import StatusResponse

router = APIRouter()

SERVICE_VERSION = "1.0"


@router.get("/", response_model=StatusResponse)
async def root_status() -> StatusResponse:
    """Liveness probe."""
    return StatusResponse(status="FarmBot is running 🌾", version=SERVICE_VERSION)
