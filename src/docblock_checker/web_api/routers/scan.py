"""
Scan Router
===========
Endpoints for running docblock scans.
"""
from fastapi import APIRouter, HTTPException

from docblock_checker import api as core_api
from docblock_checker.model.run_result import ScanRun
from docblock_checker.web_api.config import settings
from docblock_checker.web_api.schemas.scan import (
    FileError,
    ScanRequest,
    ScanResponse,
    ScanSummary,
    SourceScanRequest,
)

router = APIRouter()


def _to_response(run: ScanRun) -> ScanResponse:
    return ScanResponse(
        status="violations" if run.findings else "clean",
        summary=ScanSummary(**run.summary()),
        report=run.report(),
        errors=[FileError(file=r.path, error=r.error or "") for r in run.errors],
    )


@router.post("/", response_model=ScanResponse)
async def run_scan(request: ScanRequest):
    """
    Scan a directory and/or files on the server.

    - **directory**: Local directory to walk for ``*.php`` files
    - **files**: Extra files, relative to the directory when given
    - **exclude**: Paths relative to the directory to leave out
    """
    if request.directory is None and not request.files:
        raise HTTPException(status_code=422, detail="Provide a directory and/or files")

    try:
        run = core_api.scan_project(
            request.directory,
            request.files,
            exclude=[*settings.DEFAULT_EXCLUDE, *request.exclude],
            config=request.to_config(),
        )
    except FileNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return _to_response(run)


@router.post("/source", response_model=ScanResponse)
async def scan_source(request: SourceScanRequest):
    """
    Scan PHP source text sent in the request body.
    """
    run = ScanRun()
    run.add(core_api.scan_source(request.source, request.path, request.to_config()))
    return _to_response(run)
