"""
Pydantic models for API request/response schemas.
"""
from typing import Optional, Literal
from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response model for the health check endpoint."""
    status: str = Field("ok", description="Service status")
    version: str = Field(..., description="API version")
    current_date: str = Field(..., description="Server date in DD.MM.YYYY format")


# =============================================================================
# DATES
# =============================================================================

class DateRequest(BaseModel):
    """A single date in DD.MM.YYYY, MM.YYYY or YYYY layout."""
    date: str = Field(..., description="Date string, e.g. 26.02.2022")

    class Config:
        json_schema_extra = {
            "example": {"date": "26.02.2022"}
        }


class DateParseResponse(BaseModel):
    """Result of parsing a date string."""
    input: str = Field(..., description="Original input")
    is_valid: bool = Field(..., description="Whether the input is an accepted date")
    date: Optional[str] = Field(None, description="Canonical DD.MM.YYYY form")
    postgres_date: Optional[str] = Field(None, description="YYYY-MM-DD form")
    day: Optional[str] = Field(None, description="Zero-padded day of month")
    month_genitive: Optional[str] = Field(None, description="Ukrainian month name, genitive case")
    year: Optional[str] = Field(None, description="Four-digit year")


class WeekResponse(BaseModel):
    """Monday-to-Sunday week containing a date."""
    date: str
    week_start: str = Field(..., description="Monday of the week")
    week_end: str = Field(..., description="Sunday of the week")


class DateShiftRequest(BaseModel):
    """Shift a date by days and/or months."""
    date: str = Field(..., description="Date string in an accepted layout")
    days: int = Field(0, description="Days to add (negative subtracts)")
    months: int = Field(0, description="Months to add (negative subtracts)")

    class Config:
        json_schema_extra = {
            "example": {"date": "31.01.2024", "days": 0, "months": 1}
        }


class DateShiftResponse(BaseModel):
    """Shifted date."""
    date: str
    result: str = Field(..., description="Shifted date in DD.MM.YYYY format")


class DateRangeRequest(BaseModel):
    """Two dates for day counting."""
    date_begin: str = Field(..., description="Start date")
    date_end: str = Field(..., description="End date")


class DaysBetweenResponse(BaseModel):
    """Signed number of days between two dates."""
    date_begin: str
    date_end: str
    days: int = Field(..., description="Signed day count from date_begin to date_end")


class DateTimeCompareRequest(BaseModel):
    """Two date-times in DD.MM.YYYY HH:MM:SS layout."""
    first: str = Field(..., description="First date-time, e.g. 27.04.2024 14:46:29")
    second: str = Field(..., description="Second date-time")


class DateTimeCompareResponse(BaseModel):
    """Comparison result."""
    result: Literal[-1, 0, 1] = Field(..., description="-1 earlier, 0 equal, 1 later")


# =============================================================================
# RNOKPP
# =============================================================================

class RnokppRequest(BaseModel):
    """Request carrying an RNOKPP code."""
    code: Optional[str] = Field(None, description="10-digit RNOKPP code")

    class Config:
        json_schema_extra = {
            "example": {"code": "3456789014"}
        }


class RnokppValidationResponse(BaseModel):
    """Checksum validation result."""
    code: Optional[str]
    is_valid: bool


class RnokppInfoResponse(BaseModel):
    """Data decoded from an RNOKPP code."""
    code: str
    is_valid: bool = Field(..., description="Whether the control digit matches")
    date_of_birth: str = Field(..., description="DD.MM.YYYY")
    gender: Literal["Male", "Female"]


# =============================================================================
# PHONE / NAMES
# =============================================================================

class PhoneRequest(BaseModel):
    """Phone number to normalize."""
    phone_number: Optional[str] = Field(None, description="Phone number in any common notation")


class PhoneResponse(BaseModel):
    """Normalized phone number."""
    phone_number: Optional[str]
    formatted: Optional[str]


class NameRequest(BaseModel):
    """Person name parts."""
    first_name: Optional[str] = None
    fathers_name: Optional[str] = None
    last_name: Optional[str] = None


class NameResponse(BaseModel):
    """Display forms of a person name."""
    full_name: str
    short_name: str
    shortest_name: str
    abbreviated: Optional[str]
