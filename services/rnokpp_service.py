"""
RNOKPP (Ukrainian taxpayer number) Service

Validates RNOKPP codes and decodes the data embedded in them.

RNOKPP Format (10 digits):
- Digits 1-5: number of days since 31.12.1899 (date of birth)
- Digits 6-8: sequence number
- Digit 9: gender (odd = Male, even = Female)
- Digit 10: control digit

Control digit:
    sum = d1*(-1) + d2*5 + d3*7 + d4*9 + d5*4 + d6*6 + d7*10 + d8*5 + d9*7
    control = (sum mod 11) mod 10

The remainder keeps the sign of the dividend, so a negative, non-zero
sum never produces a valid control digit.
"""
import math
import re
from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import List, Optional

from utils.config import RNOKPP_PATTERN
from utils.date_utils import format_date
from utils.exceptions import ValidationError


RNOKPP_WEIGHTS: List[int] = [-1, 5, 7, 9, 4, 6, 10, 5, 7]
RNOKPP_EPOCH = date(1899, 12, 31)

_RNOKPP_REGEX = re.compile(RNOKPP_PATTERN, re.ASCII)


class Gender(str, Enum):
    """Gender encoded in the 9th digit of an RNOKPP code."""
    MALE = "Male"
    FEMALE = "Female"


@dataclass
class RnokppInfo:
    """Decoded RNOKPP code."""
    code: str
    is_valid: bool
    date_of_birth: str  # DD.MM.YYYY format
    gender: Gender

    def to_dict(self) -> dict:
        """Convert to dictionary for API response."""
        return {
            "code": self.code,
            "is_valid": self.is_valid,
            "date_of_birth": self.date_of_birth,
            "gender": self.gender.value,
        }


def _has_rnokpp_format(code: Optional[str]) -> bool:
    return isinstance(code, str) and _RNOKPP_REGEX.fullmatch(code) is not None


def _require_rnokpp_format(code: Optional[str]) -> str:
    if not _has_rnokpp_format(code):
        raise ValidationError(
            f"Invalid RNOKPP code format: {code}. RNOKPP code must contain exactly 10 digits.",
            field="rnokpp",
        )
    return code


def _truncated_mod(value: int, divisor: int) -> int:
    """Remainder with the sign of the dividend."""
    return int(math.fmod(value, divisor))


def calculate_control_digit(digits: List[int]) -> int:
    """
    Calculate the RNOKPP control digit from the first nine digits.

    Args:
        digits: The first nine digits of the code

    Returns:
        Control digit; negative when the weighted sum is negative
        and not a multiple of 11
    """
    control_sum = sum(digit * weight for digit, weight in zip(digits, RNOKPP_WEIGHTS))
    return _truncated_mod(_truncated_mod(control_sum, 11), 10)


def is_valid_rnokpp(code: Optional[str]) -> bool:
    """
    Validate an RNOKPP code using the control digit algorithm.

    Never raises: None, empty strings and anything that is not exactly
    10 digits are simply invalid.

    Args:
        code: RNOKPP code to validate

    Returns:
        True if the control digit matches, False otherwise
    """
    if not _has_rnokpp_format(code):
        return False

    digits = [int(char) for char in code]
    return calculate_control_digit(digits[:9]) == digits[9]


def get_date_of_birth(code: str) -> str:
    """
    Extract the date of birth from an RNOKPP code.

    The first 5 digits are the number of days since 31.12.1899.

    Args:
        code: RNOKPP code

    Returns:
        Date of birth in DD.MM.YYYY format

    Raises:
        ValidationError: if the code is not exactly 10 digits
    """
    code = _require_rnokpp_format(code)
    days_since_epoch = int(code[:5])
    return format_date(RNOKPP_EPOCH + timedelta(days=days_since_epoch))


def get_gender(code: str) -> Gender:
    """
    Extract the gender from an RNOKPP code.

    Raises:
        ValidationError: if the code is not exactly 10 digits
    """
    code = _require_rnokpp_format(code)
    gender_digit = int(code[8])
    return Gender.FEMALE if gender_digit % 2 == 0 else Gender.MALE


def parse_rnokpp(code: str) -> RnokppInfo:
    """
    Decode everything an RNOKPP code carries.

    The format is checked first (ValidationError on failure); checksum
    validity is reported in the result rather than raised.
    """
    code = _require_rnokpp_format(code)
    return RnokppInfo(
        code=code,
        is_valid=is_valid_rnokpp(code),
        date_of_birth=get_date_of_birth(code),
        gender=get_gender(code),
    )
