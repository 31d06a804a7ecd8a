from datetime import date
from typing import Any, Dict, Optional

import yaml

from aamva_decoder.commons.types import Settings
from aamva_decoder.parsers.aamva import parse
from aamva_decoder.parsers.models import LicenseStatus, ParsedIdentity


class AAMVAEngine:
    """Engine facade that loads config and exposes parse/map methods.
    Acepta una ruta a YAML, un dict ya cargado o nada (valores por defecto).
    """

    def __init__(self, config_path_or_obj: Any = None):
        if isinstance(config_path_or_obj, str):
            with open(config_path_or_obj, "r", encoding="utf-8") as f:
                self.cfg = yaml.safe_load(f) or {}
        elif isinstance(config_path_or_obj, dict):
            self.cfg = config_path_or_obj
        else:
            self.cfg = {}

        self.settings = Settings(**self.cfg)

    @property
    def decoder_settings(self):
        return self.settings.decoder

    def parse(self, raw: str) -> ParsedIdentity:
        return parse(raw, self.decoder_settings)

    def license_status(self, identity: ParsedIdentity, today: Optional[date] = None) -> LicenseStatus:
        return identity.license_status(today, self.decoder_settings.expiring_soon_days)

    def to_customer_payload(self, identity: ParsedIdentity, store_id: Optional[str] = None) -> Dict:
        """Map a parsed identity into the request body of the customer-verify lookup.
        Campos ausentes viajan como None.
        """
        payload = {
            "first_name": identity.first_name,
            "middle_name": identity.middle_name,
            "last_name": identity.last_name,
            "license_number": identity.license_number,
            "date_of_birth": identity.date_of_birth,
            "street_address": identity.street_address,
            "city": identity.city,
            "state": identity.state,
            "postal_code": identity.zip_code,
            "expiration_date": identity.expiration_date,
        }
        if store_id is not None:
            payload["store_id"] = store_id
        return payload

    def parse_and_map(self, raw: str, store_id: Optional[str] = None) -> Dict:
        return self.to_customer_payload(self.parse(raw), store_id)
