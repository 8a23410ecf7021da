"""
Phone Number Service

Normalizes Ukrainian phone numbers to the +38XXXXXXXXXX form.
"""
import re
from typing import Optional

from utils.config import UA_PHONE_PREFIX, UA_PHONE_LOCAL_LENGTH


_NON_PHONE_CHARS = re.compile(r"[^\d+]")


def format_phone_number(phone_number: Optional[str]) -> Optional[str]:
    """
    Strip separators from a phone number and add the +38 country code.

    Rules:
    - None or blank input is returned as-is
    - Everything except digits and '+' is removed
    - A number already starting with '+' is kept
    - A bare 10-digit number gets the +38 prefix
    - Anything else is returned unchanged (original input, separators included)

    Example:
        >>> format_phone_number("050 123-45-67")
        '+380501234567'
        >>> format_phone_number("+38 (050) 123-45-67")
        '+380501234567'
    """
    if phone_number is None or not phone_number.strip():
        return phone_number

    digits = _NON_PHONE_CHARS.sub("", phone_number)

    if not digits.startswith("+"):
        if len(digits) == UA_PHONE_LOCAL_LENGTH:
            digits = UA_PHONE_PREFIX + digits
        else:
            return phone_number

    return digits
