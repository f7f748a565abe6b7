"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from finance_insights.config import settings
from finance_insights.domain.thresholds import Thresholds


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_thresholds() -> Thresholds:
    """Provide rule thresholds from the loaded settings"""
    return settings.thresholds()
