import calendar
import re
from typing import Optional, Tuple


def _valid(year: int, month: int, day: int) -> bool:
    if year < 1 or not 1 <= month <= 12:
        return False
    return 1 <= day <= calendar.monthrange(year, month)[1]


def _mmddccyy(digits: str) -> Tuple[int, int, int]:
    return int(digits[4:8]), int(digits[0:2]), int(digits[2:4])


def _ccyymmdd(digits: str) -> Tuple[int, int, int]:
    return int(digits[0:4]), int(digits[4:6]), int(digits[6:8])


def resolve_date(raw: str) -> Optional[str]:
    """Resolve an AAMVA 8-digit date into YYYY-MM-DD.

    MMDDCCYY (US layout) is tried first, then CCYYMMDD (Canada and some
    states). Returns None when neither reading is a real calendar date.
    """
    digits = re.sub(r"\D", "", raw or "")
    if len(digits) != 8:
        return None
    for layout in (_mmddccyy, _ccyymmdd):
        year, month, day = layout(digits)
        if _valid(year, month, day):
            return f"{year:04d}-{month:02d}-{day:02d}"
    return None
