from sqlalchemy import Boolean, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from f1companion.db.base import AuditColumns, Base

DEFAULT_MAX_TEAMS = 15


class League(Base, AuditColumns):
    __tablename__ = "leagues"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(100))
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    max_teams: Mapped[int] = mapped_column(default=DEFAULT_MAX_TEAMS)
    is_private: Mapped[bool] = mapped_column(Boolean, default=False)

    owner_id: Mapped[int] = mapped_column(ForeignKey("user_profiles.id"), index=True)

    owner: Mapped["UserProfile"] = relationship(
        "UserProfile",
        foreign_keys=[owner_id],
        lazy="selectin",
    )
