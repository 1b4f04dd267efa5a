"""Health and error payloads."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    message: str
    timestamp: str
    environment: str


class ErrorResponse(BaseModel):
    status: str = "error"
    message: str
