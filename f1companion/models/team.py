from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from f1companion.db.base import AuditColumns, Base


class Team(Base, AuditColumns):
    __tablename__ = "teams"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(100))

    # one team per user
    user_id: Mapped[int] = mapped_column(
        ForeignKey("user_profiles.id"), unique=True, index=True
    )

    owner: Mapped["UserProfile"] = relationship(
        "UserProfile",
        foreign_keys=[user_id],
        lazy="selectin",
    )
