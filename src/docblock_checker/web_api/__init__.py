"""
Docblock Checker Web API
========================
FastAPI-based REST API around the docblock scanner.

Quick Start:
    uvicorn docblock_checker.web_api.main:app --reload
"""
from .main import app

__all__ = ["app"]
