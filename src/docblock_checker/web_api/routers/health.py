"""
Health Check Router
==================
Liveness and readiness probes.
"""
from fastapi import APIRouter, HTTPException

from docblock_checker import __version__
from docblock_checker.contracts.load import load_schema

router = APIRouter()


@router.get("/health")
async def health_check():
    """Process is up."""
    return {"status": "ok", "version": __version__}


@router.get("/ready")
async def readiness_check():
    """
    Ready once the bundled report schema can be loaded, since every
    report the service returns is shaped by it.
    """
    try:
        load_schema("report.schema.json")
    except FileNotFoundError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return {"status": "ready"}
