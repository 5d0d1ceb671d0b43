from sqlalchemy import ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from f1companion.db.base import AuditColumns, Base


class TeamConstructor(Base, AuditColumns):
    __tablename__ = "team_constructors"

    __table_args__ = (
        UniqueConstraint(
            "team_id", "slot_position", name="uq_team_constructors_team_slot"
        ),
        UniqueConstraint(
            "team_id", "constructor_id", name="uq_team_constructors_team_constructor"
        ),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    team_id: Mapped[int] = mapped_column(
        ForeignKey("teams.id", ondelete="CASCADE"), index=True
    )
    constructor_id: Mapped[int] = mapped_column(
        ForeignKey("constructors.id"), index=True
    )
    slot_position: Mapped[int]
