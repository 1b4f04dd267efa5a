"""
FastAPI dependencies - hand the application's registry to endpoints.
Tests build a fresh app (and registry) per test instead of sharing module globals.
"""

from typing import Annotated

from fastapi import Depends, Request

from resident_api.config import Settings
from resident_api.services.resident_registry import ResidentRegistry


def get_registry(request: Request) -> ResidentRegistry:
    """Registry created once in create_app and stored on app.state."""
    return request.app.state.registry


Registry = Annotated[ResidentRegistry, Depends(get_registry)]


def get_app_settings(request: Request) -> Settings:
    """Settings the app was built with (may differ from get_settings() in tests)."""
    return request.app.state.settings


AppSettings = Annotated[Settings, Depends(get_app_settings)]
