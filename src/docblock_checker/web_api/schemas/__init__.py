"""
Pydantic Schemas
===============
Request and response models for the API.
"""
from .scan import ScanRequest, ScanResponse, ScanSummary, SourceScanRequest

__all__ = ["ScanRequest", "ScanResponse", "ScanSummary", "SourceScanRequest"]
