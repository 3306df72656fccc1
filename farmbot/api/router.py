from __future__ import annotations

from fastapi import APIRouter

from farmbot.api import diagnostics, health, webhook

api_router = APIRouter()

api_router.include_router(health.router, tags=["Health"])
api_router.include_router(webhook.router, tags=["Webhook"])
api_router.include_router(diagnostics.router, tags=["Diagnostics"])
