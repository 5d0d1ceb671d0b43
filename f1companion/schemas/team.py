from pydantic import Field

from f1companion.schemas.common import ApiModel, RecordId


class TeamCreate(ApiModel):
    name: str = Field(min_length=1, max_length=100)


class TeamOut(ApiModel):
    id: int
    name: str
    owner_name: str


class TeamDriverOut(ApiModel):
    slot_position: int
    id: int
    first_name: str
    last_name: str
    abbreviation: str
    country_abbreviation: str


class TeamConstructorOut(ApiModel):
    slot_position: int
    id: int
    name: str
    full_name: str | None
    country_abbreviation: str
    is_active: bool


class TeamDetailsOut(ApiModel):
    """Roster with one entry per seat; empty seats are ``null``."""

    id: int
    name: str
    owner_name: str
    drivers: list[TeamDriverOut | None]
    constructors: list[TeamConstructorOut | None]


# slot_position is range-checked by the slot rules, not here,
# so an out-of-range seat answers 400 like every other domain error
class AssignDriverIn(ApiModel):
    driver_id: RecordId
    slot_position: int


class AssignConstructorIn(ApiModel):
    constructor_id: RecordId
    slot_position: int
