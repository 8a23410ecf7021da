"""RNOKPP (Ukrainian taxpayer number) endpoints."""
import logging
from fastapi import APIRouter

from models.schemas import RnokppRequest, RnokppValidationResponse, RnokppInfoResponse
from services.rnokpp_service import is_valid_rnokpp, parse_rnokpp

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/rnokpp", tags=["RNOKPP"])


@router.post("/validate", response_model=RnokppValidationResponse)
async def validate_rnokpp_endpoint(request: RnokppRequest):
    """Check the control digit. Malformed codes are reported as invalid, not rejected."""
    return RnokppValidationResponse(code=request.code, is_valid=is_valid_rnokpp(request.code))


@router.post("/parse", response_model=RnokppInfoResponse)
async def parse_rnokpp_endpoint(request: RnokppRequest):
    """
    Decode date of birth and gender from an RNOKPP code.

    Codes that are not exactly 10 digits are rejected with 422.
    A well-formed code with a wrong control digit is still decoded,
    with is_valid=false.
    """
    info = parse_rnokpp(request.code)
    if not info.is_valid:
        logger.info("RNOKPP decoded with mismatching control digit")
    return RnokppInfoResponse(**info.to_dict())
