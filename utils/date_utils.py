"""
Date Utilities for Ukrainian documents.

Provides centralized date parsing, formatting and calendar arithmetic around
the canonical long date layout (DD.MM.YYYY) used across the application.

Usage:
    from utils.date_utils import parse_date, format_date, date_by_add_days

    # Parse any accepted layout to a date
    d = parse_date("15.01.2024")  # -> date(2024, 1, 15)

    # Convert a date back to the canonical string
    date_str = format_date(d)  # -> "15.01.2024"

    # Calendar arithmetic on canonical strings
    date_by_add_days("19.04.2022", -1)  # -> "18.04.2022"
"""
import calendar
import re
import time as time_module
from datetime import date, datetime, time, timedelta
from typing import List, Optional, Union

from utils.exceptions import DateFormatError


# =============================================================================
# FORMAT CONSTANTS
# =============================================================================
DATE_FORMAT_LONG = "%d.%m.%Y"              # 31.12.2023 (canonical)
DATE_FORMAT_MIDDLE = "%m.%Y"               # 12.2023
DATE_FORMAT_SHORT = "%Y"                   # 2023
TIME_FORMAT = "%H:%M:%S"                   # 23:59:59
TIME_FORMAT_NO_SECONDS = "%H:%M"           # 23:59
DATE_TIME_FORMAT = "%d.%m.%Y %H:%M:%S"     # 31.12.2023 23:59:59
DATE_TIME_FORMAT_NO_SECONDS = "%d.%m.%Y %H:%M"
DATE_TIME_DESC_FORMAT_NO_SECONDS = "%Y.%m.%d %H:%M"
DATE_TIME_SECONDS_DESC_FORMAT = "%Y.%m.%d %H:%M:%S"
DATE_FORMAT_POSTGRES = "%Y-%m-%d"          # 2023-12-31

# Layouts tried by parse_date, in priority order. First match wins.
INPUT_FORMATS = [
    DATE_FORMAT_LONG,
    DATE_FORMAT_MIDDLE,
    DATE_FORMAT_SHORT,
]

# Leading text each input layout is matched against. Anything after the
# match is ignored, so "19.04.2022 10:15" parses as 19.04.2022.
_LAYOUT_PREFIXES = {
    DATE_FORMAT_LONG: re.compile(r"[0-9]{1,2}\.[0-9]{1,2}\.[0-9]{4}(?![0-9])"),
    DATE_FORMAT_MIDDLE: re.compile(r"[0-9]{1,2}\.[0-9]{4}(?![0-9])"),
    DATE_FORMAT_SHORT: re.compile(r"[0-9]{4}(?![0-9])"),
}

# Human-readable layout names for error messages
FORMAT_LABELS = {
    DATE_FORMAT_LONG: "dd.MM.yyyy",
    DATE_FORMAT_MIDDLE: "MM.yyyy",
    DATE_FORMAT_SHORT: "yyyy",
    DATE_TIME_FORMAT: "dd.MM.yyyy HH:mm:ss",
    DATE_FORMAT_POSTGRES: "yyyy-MM-dd",
}

TIME_LABELS = ["HH:mm:ss", "HH:mm"]

# Longest text is_valid_date will look at
MAX_DATE_LENGTH = 10

# Returned by days_between when a side is missing.
# Indistinguishable from a real one-day backwards span.
DAYS_BETWEEN_MISSING = -1

MONTHS_GENITIVE = (
    "січня",
    "лютого",
    "березня",
    "квітня",
    "травня",
    "червня",
    "липня",
    "серпня",
    "вересня",
    "жовтня",
    "листопада",
    "грудня",
)

DURATION_DAYS = "дн."
DURATION_HOURS = "г."
DURATION_MINUTES = "хв."
DURATION_SECONDS = "сек."
DURATION_MILLISECONDS = "мс."

_TIME_PATTERN = re.compile(r"([0-9]{2}):([0-9]{2})(?::([0-9]{2}))?")
_YEAR_PATTERN = re.compile(r"[0-9]+")
_SECONDS_PER_DAY = 24 * 60 * 60


def _labels(formats: List[str]) -> List[str]:
    return [FORMAT_LABELS.get(fmt, fmt) for fmt in formats]


# =============================================================================
# PARSING AND FORMATTING
# =============================================================================

def parse_date(date_str: Optional[str]) -> Optional[date]:
    """
    Parse a date string using the accepted layouts in priority order.

    Tries DD.MM.YYYY, then MM.YYYY, then YYYY. The first layout that matches
    the start of the string wins; trailing text such as a time part is
    ignored. Month-only input resolves to the first day of that
    month, year-only input to 1 January.

    Args:
        date_str: Date string in any supported layout

    Returns:
        date object, or None if the input is None or empty

    Raises:
        DateFormatError: if no layout matches (including impossible dates
            such as 31.02.2022)

    Example:
        >>> parse_date("15.01.2024")
        datetime.date(2024, 1, 15)
        >>> parse_date("01.2024")
        datetime.date(2024, 1, 1)
        >>> parse_date("19.04.2022 10:15")
        datetime.date(2022, 4, 19)
    """
    if not date_str:
        return None

    for fmt in INPUT_FORMATS:
        match = _LAYOUT_PREFIXES[fmt].match(date_str)
        if not match:
            continue
        try:
            return datetime.strptime(match.group(0), fmt).date()
        except ValueError:
            continue

    raise DateFormatError(date_str, expected_formats=_labels(INPUT_FORMATS))


def format_date(date_obj: Optional[date]) -> Optional[str]:
    """
    Convert a date to the canonical DD.MM.YYYY string.

    This is the function every date-to-string conversion should go through.

    Example:
        >>> format_date(date(2024, 1, 15))
        '15.01.2024'
    """
    if date_obj is None:
        return None
    return date_obj.strftime(DATE_FORMAT_LONG)


def format_date_time(date_time: datetime) -> str:
    """Format a datetime as DD.MM.YYYY HH:MM:SS."""
    return date_time.strftime(DATE_TIME_FORMAT)


def _require_date(date_str: Optional[str]) -> date:
    """parse_date that treats empty input as a format error."""
    parsed = parse_date(date_str)
    if parsed is None:
        raise DateFormatError(date_str, expected_formats=_labels(INPUT_FORMATS))
    return parsed


def date_string_to_datetime(date_str: str) -> datetime:
    """Parse a date string and return it as a datetime at midnight."""
    return datetime.combine(_require_date(date_str), time.min)


def is_valid_date(date_str: Optional[str]) -> bool:
    """
    Check whether a string is a date in one of the accepted layouts.

    Strings longer than 10 characters are rejected before parsing, so
    "22.06.2022," is not a valid date.

    Args:
        date_str: The string to check

    Returns:
        True if the string parses, False otherwise (never raises)
    """
    if date_str is None:
        return False
    if len(date_str) > MAX_DATE_LENGTH:
        return False
    try:
        return parse_date(date_str) is not None
    except DateFormatError:
        return False


def _parse_long(date_str: str) -> date:
    """Strict DD.MM.YYYY parse used by the field extractors."""
    try:
        return datetime.strptime(date_str, DATE_FORMAT_LONG).date()
    except ValueError as e:
        raise DateFormatError(date_str, expected_formats=_labels([DATE_FORMAT_LONG])) from e


# =============================================================================
# CURRENT DATE / TIME
# =============================================================================

def _now_with_format(fmt: str) -> str:
    return datetime.now().strftime(fmt)


def get_current_date() -> str:
    """Today as DD.MM.YYYY."""
    return _now_with_format(DATE_FORMAT_LONG)


def get_current_date_as_date() -> date:
    """Today as a date object."""
    return date.today()


def get_current_time() -> str:
    """Current time as HH:MM:SS."""
    return _now_with_format(TIME_FORMAT)


def get_current_date_time() -> str:
    """Current date and time as DD.MM.YYYY HH:MM."""
    return _now_with_format(DATE_TIME_FORMAT_NO_SECONDS)


def get_current_date_time_desc() -> str:
    """Current date and time as YYYY.MM.DD HH:MM."""
    return _now_with_format(DATE_TIME_DESC_FORMAT_NO_SECONDS)


def get_current_date_time_seconds_desc() -> str:
    """Current date and time as YYYY.MM.DD HH:MM:SS."""
    return _now_with_format(DATE_TIME_SECONDS_DESC_FORMAT)


def get_current_date_time_seconds() -> str:
    """Current date and time as DD.MM.YYYY HH:MM:SS."""
    return _now_with_format(DATE_TIME_FORMAT)


# =============================================================================
# CALENDAR ARITHMETIC
# =============================================================================

def add_days(date_obj: date, days: int) -> date:
    """
    Add a number of days to a date (negative values subtract).

    Example:
        >>> add_days(date(2022, 2, 28), 1)
        datetime.date(2022, 3, 1)
    """
    return date_obj + timedelta(days=days)


def date_by_add_days(date_str: str, days: int) -> str:
    """
    Add days to a date string and return the canonical string.

    Example:
        >>> date_by_add_days("19.04.2022", -1)
        '18.04.2022'
    """
    return format_date(add_days(_require_date(date_str), days))


def add_months(date_obj: date, months: int) -> date:
    """
    Add a number of months to a date (negative values subtract).

    The day of month is clamped to the last day of the target month,
    so 31.01.2024 + 1 month is 29.02.2024.
    """
    month_index = date_obj.month - 1 + months
    year = date_obj.year + month_index // 12
    month = month_index % 12 + 1
    day = min(date_obj.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def date_by_add_months(date_str: str, months: int) -> str:
    """Add months to a date string and return the canonical string."""
    return format_date(add_months(_require_date(date_str), months))


def days_between(
    date_begin: Optional[Union[date, datetime]],
    date_end: Optional[Union[date, datetime]]
) -> int:
    """
    Signed number of days from date_begin to date_end.

    Time-of-day is discarded before counting.

    Note:
        Returns DAYS_BETWEEN_MISSING (-1) when either date is None. This is
        ambiguous with a genuine one-day backwards span; callers that can
        receive None must check for it before calling.

    Args:
        date_begin: The start date
        date_end: The end date

    Returns:
        Number of days, or -1 if either date is None
    """
    if date_begin is None or date_end is None:
        return DAYS_BETWEEN_MISSING
    if isinstance(date_begin, datetime):
        date_begin = date_begin.date()
    if isinstance(date_end, datetime):
        date_end = date_end.date()
    return (date_end - date_begin).days


def is_date_less_than(date1: str, date2: str) -> bool:
    """True if date1 is strictly earlier than date2."""
    return _require_date(date1) < _require_date(date2)


def is_date_less_or_equal(date1: str, date2: str) -> bool:
    """True if date1 is earlier than or the same as date2."""
    return _require_date(date1) <= _require_date(date2)


def week_start(date_obj: date) -> date:
    """Monday of the ISO week containing date_obj (date_obj itself if Monday)."""
    monday = date_obj
    # Go backward to Monday
    while monday.isoweekday() != 1:
        monday -= timedelta(days=1)
    return monday


def week_end(date_obj: date) -> date:
    """Sunday of the ISO week containing date_obj (date_obj itself if Sunday)."""
    sunday = date_obj
    # Go forward to Sunday
    while sunday.isoweekday() != 7:
        sunday += timedelta(days=1)
    return sunday


def get_week_start(date_str: str) -> str:
    """
    Canonical string of the Monday starting the week of date_str.

    Example:
        >>> get_week_start("26.02.2022")
        '21.02.2022'
    """
    return format_date(week_start(_require_date(date_str)))


def get_week_end(date_str: str) -> str:
    """
    Canonical string of the Sunday ending the week of date_str.

    Example:
        >>> get_week_end("28.02.2022")
        '06.03.2022'
    """
    return format_date(week_end(_require_date(date_str)))


# =============================================================================
# FIELD EXTRACTION
# =============================================================================

def year_of(date_str: str) -> int:
    """
    Year of a DD.MM.YYYY string as an integer.

    Raises:
        DateFormatError: if the text has no third dot-separated component
            or that component is not a number
    """
    items = date_str.split(".")
    if len(items) < 3:
        raise DateFormatError(date_str, expected_formats=_labels([DATE_FORMAT_LONG]))
    if not _YEAR_PATTERN.fullmatch(items[2]):
        raise DateFormatError(date_str, expected_formats=_labels([DATE_FORMAT_LONG]))
    return int(items[2])


def get_day(date_str: Optional[str]) -> Optional[str]:
    """Zero-padded day of a DD.MM.YYYY string, e.g. "05"."""
    if date_str is None:
        return None
    return f"{_parse_long(date_str).day:02d}"


def get_month_genitive(date_str: Optional[str]) -> Optional[str]:
    """
    Ukrainian month name in the genitive case for a DD.MM.YYYY string.

    Example:
        >>> get_month_genitive("05.01.2024")
        'січня'
    """
    if date_str is None:
        return None
    return MONTHS_GENITIVE[_parse_long(date_str).month - 1]


def get_year(date_str: Optional[str]) -> Optional[str]:
    """Four-digit year of a DD.MM.YYYY string, as text."""
    if date_str is None:
        return None
    return f"{_parse_long(date_str).year:04d}"


# =============================================================================
# POSTGRES CONVERSION
# =============================================================================

def to_postgres(date_str: str) -> str:
    """Convert any accepted date layout to YYYY-MM-DD."""
    return _require_date(date_str).strftime(DATE_FORMAT_POSTGRES)


def from_postgres(date_str: str) -> str:
    """
    Convert a YYYY-MM-DD string to DD.MM.YYYY.

    Raises:
        DateFormatError: if the input is not in YYYY-MM-DD layout
    """
    try:
        parsed = datetime.strptime(date_str, DATE_FORMAT_POSTGRES).date()
    except (TypeError, ValueError) as e:
        raise DateFormatError(
            date_str,
            expected_formats=_labels([DATE_FORMAT_POSTGRES]),
            message=f'Failed to parse PostgreSQL date format: "{date_str}". Expected format: yyyy-MM-dd'
        ) from e
    return format_date(parsed)


# =============================================================================
# TIME OF DAY
# =============================================================================

def _parse_time(time_str: str) -> time:
    """Parse HH:MM or HH:MM:SS into a time object."""
    match = _TIME_PATTERN.fullmatch(time_str or "")
    if not match:
        raise DateFormatError(time_str, expected_formats=TIME_LABELS)
    hours, minutes, seconds = match.group(1), match.group(2), match.group(3) or "0"
    try:
        return time(int(hours), int(minutes), int(seconds))
    except ValueError as e:
        raise DateFormatError(time_str, expected_formats=TIME_LABELS) from e


def _seconds_of_day(value: time) -> int:
    return value.hour * 3600 + value.minute * 60 + value.second


def _render_time(value: time) -> str:
    # Seconds are only shown when non-zero
    if value.second:
        return value.strftime(TIME_FORMAT)
    return value.strftime(TIME_FORMAT_NO_SECONDS)


def get_time_from_date_time(date_time: str) -> str:
    """
    Time part of a "DD.MM.YYYY HH:MM[:SS]" string (everything after the first space).

    Raises:
        DateFormatError: if the string has no time part
    """
    _, separator, time_part = date_time.partition(" ")
    if not separator or not time_part:
        raise DateFormatError(
            date_time,
            expected_formats=["dd.MM.yyyy HH:mm:ss", "dd.MM.yyyy HH:mm"],
            message=(
                f"Invalid date-time format: '{date_time}'. "
                "Expected format: 'dd.MM.yyyy HH:mm:ss' or 'dd.MM.yyyy HH:mm'"
            )
        )
    return time_part


def plus_minutes_to_time(time_str: str, minutes_to_add: int) -> str:
    """
    Add minutes to a HH:MM[:SS] time, wrapping around midnight.

    Zero or negative offsets are no-ops: the input is returned unchanged.

    Example:
        >>> plus_minutes_to_time("23:20", 5)
        '23:25'
        >>> plus_minutes_to_time("23:50", 15)
        '00:05'
    """
    if minutes_to_add <= 0:
        return time_str
    start = _parse_time(time_str)
    total = (_seconds_of_day(start) + minutes_to_add * 60) % _SECONDS_PER_DAY
    hours, remainder = divmod(total, 3600)
    minutes, seconds = divmod(remainder, 60)
    return _render_time(time(hours, minutes, seconds))


def _parse_time_pair(time1: str, time2: str) -> tuple:
    try:
        return _seconds_of_day(_parse_time(time1)), _seconds_of_day(_parse_time(time2))
    except DateFormatError as e:
        raise DateFormatError(
            e.value,
            expected_formats=TIME_LABELS,
            message=(
                f'Failed to parse time strings: "{(time1 or "").strip()}" or '
                f'"{(time2 or "").strip()}". Expected format: \'HH:mm:ss\' or \'HH:mm\''
            )
        ) from e


def is_time_less_than(time1: str, time2: str) -> bool:
    """True if time1 is strictly earlier in the day than time2."""
    first, second = _parse_time_pair(time1, time2)
    return first < second


def is_time_greater_than(time1: str, time2: str) -> bool:
    """True if time1 is strictly later in the day than time2. Equal times are neither."""
    first, second = _parse_time_pair(time1, time2)
    return first > second


def compare_date_times(date_time1: str, date_time2: str) -> int:
    """
    Compare two "DD.MM.YYYY HH:MM:SS" strings.

    Only the full date-time layout is accepted; there is no fallback.

    Returns:
        -1 if date_time1 is earlier, 0 if equal, 1 if later

    Raises:
        DateFormatError: if either string is not in the full layout
    """
    try:
        first = datetime.strptime(date_time1, DATE_TIME_FORMAT)
        second = datetime.strptime(date_time2, DATE_TIME_FORMAT)
    except (TypeError, ValueError) as e:
        raise DateFormatError(
            date_time1,
            expected_formats=_labels([DATE_TIME_FORMAT]),
            message=(
                f'Invalid date format for comparison: "{date_time1}" or "{date_time2}". '
                "Expected format: dd.MM.yyyy HH:mm:ss"
            )
        ) from e
    return (first > second) - (first < second)


# =============================================================================
# DURATIONS
# =============================================================================

def format_duration(nanos: int) -> str:
    """
    Render a duration in nanoseconds as Ukrainian days/hours/minutes/seconds/ms.

    Units with a zero value are left out. Plain integer division, no rounding.

    Args:
        nanos: Duration in nanoseconds

    Returns:
        e.g. "1 дн. 2 г. 5 хв. 7 сек. 120 мс.", or "0 мс." for an empty duration

    Example:
        >>> format_duration(61_500_000_000)
        '1 хв. 1 сек. 500 мс.'
    """
    millis = max(nanos, 0) // 1_000_000

    total_seconds, milliseconds = divmod(millis, 1000)
    total_minutes, seconds = divmod(total_seconds, 60)
    total_hours, minutes = divmod(total_minutes, 60)
    days, hours = divmod(total_hours, 24)

    parts = []
    for value, label in (
        (days, DURATION_DAYS),
        (hours, DURATION_HOURS),
        (minutes, DURATION_MINUTES),
        (seconds, DURATION_SECONDS),
        (milliseconds, DURATION_MILLISECONDS),
    ):
        if value > 0:
            parts.append(f"{value} {label}")

    if not parts:
        return f"0 {DURATION_MILLISECONDS}"
    return " ".join(parts)


def calc_elapsed_time(start_ns: int) -> str:
    """
    Format the time elapsed since start_ns.

    Args:
        start_ns: Start timestamp from time.perf_counter_ns()
    """
    return format_duration(time_module.perf_counter_ns() - start_ns)
