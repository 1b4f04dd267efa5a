"""
Resident endpoints - list, create and delete over the in-memory registry.
Design: Thin controller; parsing lives in services.validation, state in the registry.
"""

from typing import Any

from fastapi import APIRouter, HTTPException, Request, status

from resident_api.core.dependencies import Registry
from resident_api.core.errors import RESIDENT_NOT_FOUND
from resident_api.schemas.resident import Resident, ResidentCreate
from resident_api.schemas.system import ErrorResponse
from resident_api.services.validation import parse_resident_create, to_finite_number

router = APIRouter()

# Body is read by hand so malformed input reaches the parse step; document the contract here.
_CREATE_BODY = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": ResidentCreate.model_json_schema()}},
    }
}


async def _read_json(request: Request) -> Any:
    """Decoded JSON body, or None when the body is missing or not JSON."""
    try:
        return await request.json()
    except ValueError:
        return None


@router.get("", response_model=list[Resident], summary="List all residents")
async def list_residents(registry: Registry):
    """Returns all residents from the in-memory store, oldest first."""
    return registry.list_all()


@router.post(
    "",
    response_model=Resident,
    status_code=status.HTTP_201_CREATED,
    summary="Add a resident",
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
    openapi_extra=_CREATE_BODY,
)
async def create_resident(request: Request, registry: Registry):
    """Creates a new resident and auto-generates an id."""
    data = parse_resident_create(await _read_json(request))
    return registry.create(data)


@router.delete(
    "/{resident_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a resident by id",
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
async def delete_resident(resident_id: str, registry: Registry):
    """Removes a resident by id. Unparseable ids are reported as not found."""
    target = to_finite_number(resident_id)
    if target is None or not registry.delete(target):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=RESIDENT_NOT_FOUND)
