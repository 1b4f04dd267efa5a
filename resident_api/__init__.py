"""Resident API - in-memory resident registry over HTTP."""

__version__ = "1.0.0"
