from typing import Callable, Dict, Iterable, Optional

from aamva_decoder.commons.logger import logger
from aamva_decoder.commons.types import DecoderSettings
from aamva_decoder.normalizers.address import (
    normalize_city,
    normalize_state,
    normalize_street,
    normalize_zip,
)
from aamva_decoder.normalizers.dates import resolve_date
from aamva_decoder.normalizers.names import normalize_full_name, normalize_name, split_full_name
from aamva_decoder.validation.errors import InvalidDateError, MissingNameError
from aamva_decoder.validation.validators import AAMVAHeader

from .base import ELEMENT_TABLE, ElementID, RawRecord
from .models import ParsedIdentity

FIELD_NORMALIZERS: Dict[str, Callable[[str], Optional[str]]] = {
    "full_name": normalize_full_name,
    "last_name": normalize_name,
    "first_name": normalize_name,
    "middle_name": normalize_name,
    "date_of_birth": resolve_date,
    "expiration_date": resolve_date,
    "issue_date": resolve_date,
    "street_address": normalize_street,
    "city": normalize_city,
    "state": normalize_state,
    "zip_code": normalize_zip,
    "license_number": str.strip,
    "height": str.strip,
    "eye_color": str.strip,
}


def _collect(records: Iterable[RawRecord]) -> Dict[ElementID, str]:
    values: Dict[ElementID, str] = {}
    for rec in records:
        values[rec.element] = rec.value  # si se repite, gana el último
    return values


def extract(
    records: Iterable[RawRecord],
    header: Optional[AAMVAHeader] = None,
    settings: Optional[DecoderSettings] = None,
) -> ParsedIdentity:
    settings = settings or DecoderSettings()
    values = _collect(records)
    logger.debug(f"Elementos reconocidos: {sorted(e.value for e in values)}")

    fields: Dict[str, str] = {}
    # El orden de ELEMENT_TABLE define la precedencia (DCS antes que DAB, DAC antes que DCT)
    for element, field in ELEMENT_TABLE.items():
        raw = values.get(element)
        if raw is None or not raw.strip():
            continue
        value = FIELD_NORMALIZERS[field](raw)
        if value:
            fields.setdefault(field, value)

    # Fallback DAA: LAST,FIRST[,MIDDLE]
    if ElementID.FULL_NAME in values:
        last, first, middle = split_full_name(values[ElementID.FULL_NAME])
        for field, value in (("last_name", last), ("first_name", first), ("middle_name", middle)):
            if value:
                fields.setdefault(field, value)

    if not fields.get("last_name") or not fields.get("first_name"):
        raise MissingNameError()

    dob_raw = values.get(ElementID.DATE_OF_BIRTH)
    if dob_raw and dob_raw.strip() and "date_of_birth" not in fields:
        if settings.dob_policy == "strict":
            raise InvalidDateError()
        logger.warning("DBB no es una fecha válida; date_of_birth queda vacío")

    if header is not None:
        fields.update(
            iin=header.iin,
            issuer=header.issuer,
            country=header.country,
            aamva_version=header.aamva_version,
            document_type=header.document_type,
        )
    return ParsedIdentity(**fields)
