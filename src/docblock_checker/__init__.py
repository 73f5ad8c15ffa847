"""docblock_checker — reports PHP classes and methods missing a docblock."""

__all__ = [
    "__version__",
    "ScanConfig",
    "scan_project",
    "scan_source",
]
__version__ = "0.1.0"

from docblock_checker.core.config import ScanConfig  # noqa: E402
from docblock_checker.api import scan_project, scan_source  # noqa: E402
