# ===============================
# File: aamva_decoder/parsers/models.py
# ===============================
from dataclasses import asdict, dataclass
from datetime import date, datetime
from typing import Dict, Optional


@dataclass(frozen=True)
class LicenseStatus:
    state: str  # valid | expired | expiring_soon | unknown
    days_remaining: Optional[int] = None

    @property
    def is_acceptable(self) -> bool:
        return self.state in ("valid", "expiring_soon")

    @property
    def display_text(self) -> str:
        if self.state == "expired":
            return f"Expired {-self.days_remaining} days ago"
        if self.state == "expiring_soon":
            return f"Expires in {self.days_remaining} days"
        return self.state.capitalize()


@dataclass(frozen=True)
class ParsedIdentity:
    last_name: str
    first_name: str
    middle_name: Optional[str] = None
    full_name: Optional[str] = None  # DAA normalizado
    date_of_birth: Optional[str] = None  # YYYY-MM-DD
    street_address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    license_number: Optional[str] = None
    height: Optional[str] = None
    eye_color: Optional[str] = None
    issue_date: Optional[str] = None  # YYYY-MM-DD
    expiration_date: Optional[str] = None  # YYYY-MM-DD
    # Header
    iin: Optional[str] = None
    issuer: Optional[str] = None
    country: Optional[str] = None
    aamva_version: Optional[int] = None
    document_type: Optional[str] = None  # DL | ID

    @property
    def display_name(self) -> str:
        parts = [p for p in (self.first_name, self.last_name) if p]
        return " ".join(parts) if parts else "Unknown"

    @property
    def full_display_name(self) -> str:
        parts = [p for p in (self.first_name, self.middle_name, self.last_name) if p]
        return " ".join(parts) if parts else "Unknown"

    @property
    def formatted_address(self) -> Optional[str]:
        lines = []
        if self.street_address:
            lines.append(self.street_address)
        city_state_zip = [p for p in (self.city, self.state, self.zip_code) if p]
        if city_state_zip:
            lines.append(", ".join(city_state_zip))
        return "\n".join(lines) if lines else None

    @property
    def formatted_date_of_birth(self) -> Optional[str]:
        """DOB as MM/DD/YYYY for display."""
        if not self.date_of_birth:
            return None
        return datetime.strptime(self.date_of_birth, "%Y-%m-%d").strftime("%m/%d/%Y")

    def license_status(
        self, today: Optional[date] = None, expiring_soon_days: int = 30
    ) -> LicenseStatus:
        if not self.expiration_date:
            return LicenseStatus("unknown")
        today = today or date.today()
        exp = datetime.strptime(self.expiration_date, "%Y-%m-%d").date()
        days = (exp - today).days
        if days < 0:
            return LicenseStatus("expired", days)
        if days <= expiring_soon_days:
            return LicenseStatus("expiring_soon", days)
        return LicenseStatus("valid", days)

    def to_dict(self) -> Dict:
        return asdict(self)
