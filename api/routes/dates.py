"""Date parsing and calendar arithmetic endpoints."""
import logging
from fastapi import APIRouter

from models.schemas import (
    DateRequest,
    DateParseResponse,
    WeekResponse,
    DateShiftRequest,
    DateShiftResponse,
    DateRangeRequest,
    DaysBetweenResponse,
    DateTimeCompareRequest,
    DateTimeCompareResponse,
)
from utils.date_utils import (
    add_days,
    add_months,
    compare_date_times,
    date_string_to_datetime,
    days_between,
    format_date,
    get_day,
    get_month_genitive,
    get_week_end,
    get_week_start,
    get_year,
    is_valid_date,
    parse_date,
    to_postgres,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dates", tags=["Dates"])


@router.post("/parse", response_model=DateParseResponse)
async def parse_date_endpoint(request: DateRequest):
    """
    Parse a date in DD.MM.YYYY, MM.YYYY or YYYY layout.

    Invalid input is not an error here: the response carries is_valid=false.
    """
    if not is_valid_date(request.date):
        return DateParseResponse(input=request.date, is_valid=False)

    canonical = format_date(parse_date(request.date))
    return DateParseResponse(
        input=request.date,
        is_valid=True,
        date=canonical,
        postgres_date=to_postgres(canonical),
        day=get_day(canonical),
        month_genitive=get_month_genitive(canonical),
        year=get_year(canonical),
    )


@router.post("/week", response_model=WeekResponse)
async def week_endpoint(request: DateRequest):
    """Monday and Sunday of the week containing the date."""
    return WeekResponse(
        date=request.date,
        week_start=get_week_start(request.date),
        week_end=get_week_end(request.date),
    )


@router.post("/shift", response_model=DateShiftResponse)
async def shift_date_endpoint(request: DateShiftRequest):
    """Add months, then days, to a date."""
    start = date_string_to_datetime(request.date).date()
    shifted = add_days(add_months(start, request.months), request.days)
    return DateShiftResponse(date=request.date, result=format_date(shifted))


@router.post("/between", response_model=DaysBetweenResponse)
async def days_between_endpoint(request: DateRangeRequest):
    """
    Signed number of days from date_begin to date_end.

    An empty date yields -1.
    """
    days = days_between(parse_date(request.date_begin), parse_date(request.date_end))
    return DaysBetweenResponse(
        date_begin=request.date_begin,
        date_end=request.date_end,
        days=days,
    )


@router.post("/compare", response_model=DateTimeCompareResponse)
async def compare_endpoint(request: DateTimeCompareRequest):
    """Compare two DD.MM.YYYY HH:MM:SS date-times."""
    return DateTimeCompareResponse(result=compare_date_times(request.first, request.second))
