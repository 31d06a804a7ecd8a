# aamva_decoder/validation/validators.py
import re
from typing import List, Literal, Optional

from pydantic import BaseModel, field_validator

from aamva_decoder.commons.logger import logger
from aamva_decoder.parsers.issuers import lookup_issuer
from aamva_decoder.validation.errors import EmptyInputError, InvalidFormatError

# "ANSI " + IIN(6) + versión AAMVA(2) [+ versión jurisdicción(2)] [+ nº de entradas(2)]
HEADER_MARKER = "ANSI "
HEADER_RE = re.compile(
    r"ANSI (?P<iin>\d{6})(?P<aamva>\d{2})(?P<jur>\d{2})?(?P<cnt>\d{2})?"
)
# Designador de subfile: tipo(2) + offset(4) + longitud(4), p.ej. DL00410278
DESIGNATOR_RE = re.compile(r"(?P<type>[A-Z]{2})(?P<offset>\d{4})(?P<length>\d{4})")


class SubfileDesignator(BaseModel):
    type: str
    offset: int
    length: int


class AAMVAHeader(BaseModel):
    compliance_indicator: bool = False
    iin: str
    aamva_version: int
    jurisdiction_version: Optional[int] = None
    entries: Optional[int] = None
    subfiles: List[SubfileDesignator] = []
    issuer: Optional[str] = None
    country: Optional[str] = None
    body: str = ""

    @field_validator("iin")
    @classmethod
    def _iin_digits(cls, v: str):
        if not (len(v) == 6 and v.isdigit()):
            raise ValueError(f"IIN inválido: {v!r}")
        return v

    @property
    def document_type(self) -> Optional[Literal["DL", "ID"]]:
        for sub in self.subfiles:
            if sub.type in ("DL", "ID"):
                return sub.type
        # sin designadores: el body arranca con el tipo ("DL\r..." o "DLDAQ...")
        head = self.body[:2]
        return head if head in ("DL", "ID") else None


def _parse_designators(raw: str, pos: int, entries: Optional[int]):
    subfiles: List[SubfileDesignator] = []
    while entries is None or len(subfiles) < entries:
        m = DESIGNATOR_RE.match(raw, pos)
        if not m:
            break
        subfiles.append(
            SubfileDesignator(
                type=m.group("type"), offset=int(m.group("offset")), length=int(m.group("length"))
            )
        )
        pos = m.end()
    return subfiles, pos


def _find_header(raw: str, window: int):
    # "ANSI " debe empezar dentro de la ventana; los dígitos pueden quedar fuera
    pos = raw.find(HEADER_MARKER, 0, window + len(HEADER_MARKER) - 1)
    while pos != -1:
        m = HEADER_RE.match(raw, pos)
        if m:
            return m
        pos = raw.find(HEADER_MARKER, pos + 1, window + len(HEADER_MARKER) - 1)
    return None


def validate_header_or_raise(raw: str, window: int = 256) -> AAMVAHeader:
    """Locate the ANSI issuer header and return it with the remaining body.

    Raises EmptyInputError for empty input and InvalidFormatError when no
    header is found within the first ``window`` characters.
    """
    if not raw:
        raise EmptyInputError()

    m = _find_header(raw, window)
    if not m:
        raise InvalidFormatError()

    entries = int(m.group("cnt")) if m.group("cnt") else None
    subfiles, pos = _parse_designators(raw, m.end(), entries)
    iin = m.group("iin")
    issuer, country = lookup_issuer(iin)
    if issuer is None:
        logger.warning(f"IIN desconocido: {iin}")

    header = AAMVAHeader(
        compliance_indicator=raw.lstrip().startswith("@"),
        iin=iin,
        aamva_version=int(m.group("aamva")),
        jurisdiction_version=int(m.group("jur")) if m.group("jur") else None,
        entries=entries,
        subfiles=subfiles,
        issuer=issuer,
        country=country,
        body=raw[pos:],
    )
    logger.debug(
        f"Header AAMVA v{header.aamva_version} IIN={iin} subfiles={[s.type for s in subfiles]}"
    )
    return header
