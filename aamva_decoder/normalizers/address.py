from typing import Dict

# Abreviaturas de calle que se conservan con su forma habitual
STREET_ABBREVIATIONS: Dict[str, str] = {
    "st": "St",
    "ave": "Ave",
    "blvd": "Blvd",
    "dr": "Dr",
    "ln": "Ln",
    "rd": "Rd",
    "ct": "Ct",
    "pl": "Pl",
    "cir": "Cir",
    "way": "Way",
    "pkwy": "Pkwy",
    "hwy": "Hwy",
    "apt": "Apt",
    "ste": "Ste",
    "fl": "Fl",
    "unit": "Unit",
    "n": "N",
    "s": "S",
    "e": "E",
    "w": "W",
    "ne": "NE",
    "nw": "NW",
    "se": "SE",
    "sw": "SW",
}


def _title(word: str) -> str:
    return word[:1].upper() + word[1:]


def normalize_street(raw: str) -> str:
    words = []
    for word in (raw or "").lower().split():
        word = word.replace(".", "")
        words.append(STREET_ABBREVIATIONS.get(word) or _title(word))
    return " ".join(w for w in words if w)


def normalize_city(raw: str) -> str:
    return " ".join(_title(w) for w in (raw or "").lower().split())


def normalize_state(raw: str) -> str:
    return (raw or "").strip().upper()


def normalize_zip(raw: str) -> str:
    """Drop the space padding AAMVA adds to postal codes; digits are kept as sent."""
    return (raw or "").strip()
