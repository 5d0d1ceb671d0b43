from dataclasses import dataclass

from f1companion.models.constructor import Constructor
from f1companion.models.driver import Driver
from f1companion.models.team_constructor import TeamConstructor
from f1companion.models.team_driver import TeamDriver


@dataclass(frozen=True)
class SlotRole:
    """A roster category: how many seats it has and which tables back it."""

    name: str
    size: int
    slot_model: type
    catalog_model: type
    entity_column: str

    @property
    def max_position(self) -> int:
        return self.size - 1


DRIVER_ROLE = SlotRole(
    name="driver",
    size=5,
    slot_model=TeamDriver,
    catalog_model=Driver,
    entity_column="driver_id",
)

CONSTRUCTOR_ROLE = SlotRole(
    name="constructor",
    size=2,
    slot_model=TeamConstructor,
    catalog_model=Constructor,
    entity_column="constructor_id",
)
