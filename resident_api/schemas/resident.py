"""Resident request/response schemas - REST API contract."""

from pydantic import BaseModel, Field


class ResidentCreate(BaseModel):
    """Create input after parsing: trimmed name, truncated age."""

    name: str = Field(..., min_length=1, examples=["Jane Doe"])
    age: int = Field(..., ge=0, examples=[35])


class Resident(BaseModel):
    id: int = Field(..., ge=1, examples=[1])
    name: str
    age: int

    model_config = {"frozen": True}
