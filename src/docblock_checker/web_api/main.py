"""
FastAPI Application
==================
HTTP front-end for the docblock scanner.

Serve with:
    uvicorn docblock_checker.web_api.main:app --port 8000
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from docblock_checker import __version__
from docblock_checker.web_api.config import settings
from docblock_checker.web_api.routers import health, scan

app = FastAPI(
    title="Docblock Checker API",
    description="Reports PHP classes and methods missing a docblock",
    version=__version__,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url=None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(health.router, tags=["Health"])
app.include_router(scan.router, prefix="/scan", tags=["Scan"])


@app.get("/")
async def root():
    """List the scan endpoints and the active exclude defaults."""
    return {
        "name": "Docblock Checker API",
        "version": __version__,
        "endpoints": ["/scan/", "/scan/source"],
        "default_exclude": settings.DEFAULT_EXCLUDE,
    }
