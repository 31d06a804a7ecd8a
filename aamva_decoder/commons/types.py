from typing import Any, Dict, Literal

from pydantic import BaseModel, Field


class DecoderSettings(BaseModel):
    # lenient: DBB ilegible -> date_of_birth=None ; strict: InvalidDateError
    dob_policy: Literal["lenient", "strict"] = "lenient"
    header_search_window: int = Field(256, gt=0)
    expiring_soon_days: int = Field(30, ge=0)


class Settings(BaseModel):
    app: Dict[str, Any] = {}
    paths: Dict[str, str] = {"logs_root": "logs"}
    decoder: DecoderSettings = DecoderSettings()
