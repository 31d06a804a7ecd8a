from typing import Optional

from aamva_decoder.commons.logger import logger
from aamva_decoder.commons.types import DecoderSettings
from aamva_decoder.validation.validators import validate_header_or_raise

from .base import tokenize
from .extractor import extract
from .models import ParsedIdentity


def parse(raw: str, settings: Optional[DecoderSettings] = None) -> ParsedIdentity:
    """Decode a raw AAMVA DL/ID barcode string.

    Header -> records -> fields. Raises an AAMVAError subclass
    (EmptyInputError, InvalidFormatError) when the payload cannot be decoded.
    """
    settings = settings or DecoderSettings()
    header = validate_header_or_raise(raw, settings.header_search_window)
    identity = extract(tokenize(header.body), header, settings)
    logger.info(f"Documento {identity.document_type or '?'} decodificado (IIN {header.iin})")
    return identity
