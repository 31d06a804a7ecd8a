from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterator, Optional, Tuple

from aamva_decoder.commons.logger import logger

# CR es el terminador de segmento AAMVA; LF y RS aparecen entre elementos
RECORD_SEPARATORS = frozenset("\r\n\x1e")
SUBFILE_TYPES = ("DL", "ID")


class ElementID(str, Enum):
    FULL_NAME = "DAA"
    LAST_NAME = "DCS"
    LAST_NAME_ALT = "DAB"  # layout anterior a 2009
    FIRST_NAME = "DAC"
    FIRST_NAME_ALT = "DCT"  # given names, layout 2009
    MIDDLE_NAME = "DAD"
    LICENSE_NUMBER = "DAQ"
    DATE_OF_BIRTH = "DBB"
    EXPIRATION_DATE = "DBA"
    ISSUE_DATE = "DBD"
    STREET_ADDRESS = "DAG"
    CITY = "DAI"
    STATE = "DAJ"
    ZIP_CODE = "DAK"
    HEIGHT = "DAU"
    EYE_COLOR = "DAY"

    @classmethod
    def lookup(cls, code: str) -> Optional["ElementID"]:
        try:
            return cls(code)
        except ValueError:
            return None


# ElementID -> campo de ParsedIdentity
ELEMENT_TABLE = MappingProxyType(
    {
        ElementID.FULL_NAME: "full_name",
        ElementID.LAST_NAME: "last_name",
        ElementID.LAST_NAME_ALT: "last_name",
        ElementID.FIRST_NAME: "first_name",
        ElementID.FIRST_NAME_ALT: "first_name",
        ElementID.MIDDLE_NAME: "middle_name",
        ElementID.LICENSE_NUMBER: "license_number",
        ElementID.DATE_OF_BIRTH: "date_of_birth",
        ElementID.EXPIRATION_DATE: "expiration_date",
        ElementID.ISSUE_DATE: "issue_date",
        ElementID.STREET_ADDRESS: "street_address",
        ElementID.CITY: "city",
        ElementID.STATE: "state",
        ElementID.ZIP_CODE: "zip_code",
        ElementID.HEIGHT: "height",
        ElementID.EYE_COLOR: "eye_color",
    }
)


@dataclass(frozen=True)
class RawRecord:
    element: ElementID
    value: str


def _split_record(candidate: str) -> Optional[Tuple[ElementID, str]]:
    """Return (element, value), or None when the candidate is not a known record."""
    if len(candidate) < 3:
        return None
    # El primer elemento de cada subfile viene pegado al tipo: "DLDAQ123..."
    if candidate[:2] in SUBFILE_TYPES:
        element = ElementID.lookup(candidate[2:5])
        if element is not None:
            return element, candidate[5:]
    element = ElementID.lookup(candidate[:3])
    if element is None:
        return None
    return element, candidate[3:]


class RecordTokenizer:
    """Iterable of RawRecord over an AAMVA body.

    Every iteration rescans the body from position 0, so the same instance can
    be consumed more than once with identical results.
    """

    def __init__(self, body: str):
        self.body = body or ""

    def __iter__(self) -> Iterator[RawRecord]:
        body = self.body
        end = len(body)
        pos = 0
        while pos < end:
            nxt = pos
            while nxt < end and body[nxt] not in RECORD_SEPARATORS:
                nxt += 1
            candidate = body[pos:nxt]
            pos = nxt + 1
            if not candidate:
                continue
            split = _split_record(candidate)
            if split is None:
                # nunca loguear valores crudos: solo el prefijo
                logger.debug(f"Registro ignorado, prefijo {candidate[:3]!r}")
                continue
            yield RawRecord(*split)


def tokenize(body: str) -> RecordTokenizer:
    return RecordTokenizer(body)
