"""Liveness endpoint.  Not origin gated and touches no storage."""

from typing import Any, Dict

from fastapi import APIRouter

router = APIRouter()


@router.get("/")
async def health() -> Dict[str, Any]:
    return {"ok": True, "info": "API is alive"}
