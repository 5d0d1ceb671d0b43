from sqlalchemy import ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from f1companion.db.base import AuditColumns, Base


class TeamDriver(Base, AuditColumns):
    __tablename__ = "team_drivers"

    __table_args__ = (
        # a seat holds one driver
        UniqueConstraint("team_id", "slot_position", name="uq_team_drivers_team_slot"),
        # a driver takes one seat per team
        UniqueConstraint("team_id", "driver_id", name="uq_team_drivers_team_driver"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    team_id: Mapped[int] = mapped_column(
        ForeignKey("teams.id", ondelete="CASCADE"), index=True
    )
    driver_id: Mapped[int] = mapped_column(ForeignKey("drivers.id"), index=True)
    slot_position: Mapped[int]
