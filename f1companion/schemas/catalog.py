from typing import Literal

from f1companion.schemas.common import ApiModel


class DriverOut(ApiModel):
    id: int
    type: Literal["driver"] = "driver"
    first_name: str
    last_name: str
    abbreviation: str
    country_abbreviation: str
    is_active: bool


class ConstructorOut(ApiModel):
    id: int
    type: Literal["constructor"] = "constructor"
    name: str
    full_name: str | None
    country_abbreviation: str
    is_active: bool
