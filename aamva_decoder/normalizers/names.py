"""Name casing for AAMVA name elements.

AAMVA transmits names in upper case ("MCDONALD", "O'BRIEN", "SMITH-JONES").
``normalize_name`` renders them in conventional mixed case:

- tokens are split on whitespace and hyphens; separators are kept as-is
- each token is title-cased (first letter upper, rest lower)
- a leading ``MC`` particle keeps the next letter upper: ``McDonald``
- the letter after an apostrophe is upper: ``O'Brien``

The result is lower-cased before casing, so applying it twice is a no-op.
"""
import re
from typing import Optional, Tuple

_SEPARATORS_RE = re.compile(r"([\s\-]+)")


def _case_part(part: str) -> str:
    if len(part) > 2 and part.startswith("mc"):
        return "Mc" + part[2].upper() + part[3:]
    return part[:1].upper() + part[1:]


def _case_token(token: str) -> str:
    return "'".join(_case_part(p) for p in token.lower().split("'"))


def normalize_name(raw: str) -> str:
    pieces = _SEPARATORS_RE.split((raw or "").strip())
    # índices impares = separadores capturados
    return "".join(p if i % 2 else _case_token(p) for i, p in enumerate(pieces))


def _name_or_none(raw: str) -> Optional[str]:
    value = normalize_name(raw)
    return value or None


def split_full_name(composite: str) -> Tuple[Optional[str], Optional[str], Optional[str]]:
    """Split a DAA value into (last, first, middle).

    Accepts ``LAST,FIRST,MIDDLE`` and ``LAST,FIRST MIDDLE``; in the second form
    the first word of the given-names segment is the first name.
    """
    parts = [p.strip() for p in (composite or "").split(",")]
    if len(parts) == 2 and len(parts[1].split(None, 1)) == 2:
        parts[1:] = parts[1].split(None, 1)
    last = _name_or_none(parts[0]) if len(parts) > 0 else None
    first = _name_or_none(parts[1]) if len(parts) > 1 else None
    middle = _name_or_none(parts[2]) if len(parts) > 2 else None
    return last, first, middle


def normalize_full_name(composite: str) -> str:
    """Case each comma segment of a DAA value: ``DOE,JOHN`` -> ``Doe,John``."""
    return ",".join(normalize_name(p) for p in (composite or "").split(","))
