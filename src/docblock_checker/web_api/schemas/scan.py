"""
Scan Schemas
============
Request and response models for scan endpoints.
"""
from pydantic import BaseModel, Field
from typing import Optional, Dict, Any, List

from docblock_checker.core.config import ScanConfig


class _SkipFlags(BaseModel):
    """Skip flags shared by every scan request"""

    skip_classes: bool = Field(default=False, description="Don't check classes")
    skip_methods: bool = Field(
        default=False, description="Don't check methods or anonymous functions"
    )
    skip_anonymous_functions: bool = Field(
        default=False, description="Don't check anonymous functions"
    )

    def to_config(self) -> ScanConfig:
        return ScanConfig(
            skip_classes=self.skip_classes,
            skip_methods=self.skip_methods,
            skip_anonymous_functions=self.skip_anonymous_functions,
        )


class ScanRequest(_SkipFlags):
    """Request to scan a directory and/or files on the server"""

    directory: Optional[str] = Field(default=None, description="Directory to scan")
    files: List[str] = Field(default_factory=list, description="Files to scan")
    exclude: List[str] = Field(
        default_factory=list, description="Paths relative to directory to skip"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "directory": "/path/to/project/src",
                "exclude": ["vendor", "Legacy/Old.php"],
                "skip_anonymous_functions": True,
            }
        }


class SourceScanRequest(_SkipFlags):
    """Request to scan PHP source sent in the request body"""

    path: str = Field(default="<source>", description="Name reported for the file")
    source: str = Field(..., description="PHP source text")

    class Config:
        json_schema_extra = {
            "example": {
                "path": "src/Foo.php",
                "source": "<?php\nclass Foo {}\n",
            }
        }


class FileError(BaseModel):
    """A file that could not be scanned"""

    file: str
    error: str


class ScanSummary(BaseModel):
    """Summary of scan results"""

    files_scanned: int = Field(default=0)
    files_failed: int = Field(default=0)
    findings_total: int = Field(default=0)
    clean_classes: int = Field(default=0)
    by_type: Dict[str, int] = Field(default_factory=dict)


class ScanResponse(BaseModel):
    """Response from a scan operation"""

    status: str = Field(..., description="Scan status: clean, violations")
    summary: ScanSummary
    report: List[Dict[str, Any]] = Field(default_factory=list)
    errors: List[FileError] = Field(default_factory=list)

    class Config:
        json_schema_extra = {
            "example": {
                "status": "violations",
                "summary": {
                    "files_scanned": 12,
                    "files_failed": 0,
                    "findings_total": 1,
                    "clean_classes": 11,
                    "by_type": {"method": 1},
                },
                "report": [
                    {
                        "type": "method",
                        "file": "Foo.php",
                        "class": "Foo",
                        "method": "run",
                        "line": 10,
                    }
                ],
                "errors": [],
            }
        }
