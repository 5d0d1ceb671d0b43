from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from f1companion.db.base import AuditColumns, Base


class LeagueInvite(Base, AuditColumns):
    __tablename__ = "league_invites"

    id: Mapped[int] = mapped_column(primary_key=True)

    # one invite per league
    league_id: Mapped[int] = mapped_column(
        ForeignKey("leagues.id", ondelete="CASCADE"), unique=True, index=True
    )
    token: Mapped[str] = mapped_column(String(64), unique=True, index=True)

    creator: Mapped["UserProfile"] = relationship(
        "UserProfile",
        primaryjoin="LeagueInvite.created_by == UserProfile.id",
        foreign_keys="LeagueInvite.created_by",
        lazy="selectin",
    )
