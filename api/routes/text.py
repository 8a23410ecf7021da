"""Phone number and person name formatting endpoints."""
from fastapi import APIRouter

from models.schemas import PhoneRequest, PhoneResponse, NameRequest, NameResponse
from services.name_format_service import (
    abbreviated_from_full,
    correct_name,
    full_name,
    short_name,
    shortest_name,
)
from services.phone_number_service import format_phone_number

router = APIRouter(tags=["Formatting"])


@router.post("/phone/format", response_model=PhoneResponse)
async def format_phone_endpoint(request: PhoneRequest):
    """Normalize a Ukrainian phone number to +38XXXXXXXXXX."""
    return PhoneResponse(
        phone_number=request.phone_number,
        formatted=format_phone_number(request.phone_number),
    )


@router.post("/names/format", response_model=NameResponse)
async def format_name_endpoint(request: NameRequest):
    """Display forms of a person name, after fixing capitalization."""
    first = correct_name(request.first_name)
    fathers = correct_name(request.fathers_name)
    last = correct_name(request.last_name)
    full = full_name(first, fathers, last)
    return NameResponse(
        full_name=full,
        short_name=short_name(first, last),
        shortest_name=shortest_name(first, last),
        abbreviated=abbreviated_from_full(full) if full else None,
    )
