"""
Name Formatting Service

Builds display forms of Ukrainian person names (last name first,
patronymic last) and fixes their capitalization.
"""
from typing import Optional


# Lowercase suffixes kept as-is in hyphenated names (Мустафа-огли)
LOWERCASE_SUFFIXES = {"огли", "заде", "кизи"}

# Lowercase particle allowed as the first word (да Море)
LOWERCASE_PARTICLES = {"да"}


def capitalize(s: Optional[str]) -> Optional[str]:
    """Upper-case the first character, leave the rest alone."""
    if not s:
        return s
    return s[0].upper() + s[1:]


def full_name(
    first_name: Optional[str],
    fathers_name: Optional[str],
    last_name: Optional[str]
) -> str:
    """
    Join name parts as "Last First Fathers", skipping missing parts.

    Example:
        >>> full_name("Іван", "Михайлович", "Василишин")
        'Василишин Іван Михайлович'
    """
    parts = [part for part in (last_name, first_name, fathers_name) if part is not None]
    return " ".join(parts).strip()


def short_name(first_name: Optional[str], last_name: Optional[str]) -> str:
    """"First LAST" form."""
    result = ""
    if first_name is not None:
        result += capitalize(first_name)
    if last_name is not None:
        result += " " + last_name.upper()
    return result.strip()


def shortest_name(first_name: Optional[str], last_name: Optional[str]) -> str:
    """"F. Last" form."""
    result = ""
    if first_name:
        result += first_name[0].upper()
    if last_name is not None:
        result += ". " + capitalize(last_name)
    return result.strip()


def shortest_from_full(name: Optional[str]) -> Optional[str]:
    """
    "F. Last" form from a "Last First [Fathers]" string.

    A single word is returned unchanged.
    """
    if name is None:
        return None
    parts = name.split(" ")
    if len(parts) == 1:
        return parts[0]
    return shortest_name(parts[1], parts[0])


def abbreviated_from_full(name: Optional[str]) -> Optional[str]:
    """
    "Last F.P." form from a "Last First [Fathers]" string.

    Example:
        >>> abbreviated_from_full("Василишин Іван Михайлович")
        'Василишин І.М.'
        >>> abbreviated_from_full("Василишин Іван")
        'Василишин І.'
    """
    if name is None:
        return None
    parts = name.split(" ")
    if len(parts) == 1:
        return parts[0]

    result = f"{parts[0]} {parts[1][:1]}."
    if len(parts) > 2:
        result += f"{parts[2][:1]}."
    return result


def correct_name(name: Optional[str]) -> Optional[str]:
    """
    Fix the capitalization of a name.

    Hyphenated names get every part capitalized except the suffixes
    огли/заде/кизи. Otherwise each space-separated word is capitalized,
    except a leading "да" which is lower-cased.

    Example:
        >>> correct_name("іван-василь")
        'Іван-Василь'
        >>> correct_name("Да море")
        'да Море'
    """
    if name is None:
        return None

    parts = name.split("-")
    if len(parts) > 1:
        return "-".join(
            part if part.lower() in LOWERCASE_SUFFIXES else capitalize(part.lower())
            for part in parts
        )

    words = []
    for i, word in enumerate(name.split(" ")):
        lowered = word.lower()
        if i == 0 and lowered in LOWERCASE_PARTICLES:
            words.append(lowered)
        else:
            words.append(capitalize(lowered))
    return " ".join(words)
