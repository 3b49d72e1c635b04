# app/routers/health.py
from __future__ import annotations

from fastapi import APIRouter

from app.services.health import version_payload

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    # Liveness only: parsing is in-process, there is nothing else to check
    return {"status": "ok", **version_payload()}


@router.get("/version")
def version():
    return version_payload()
