from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from f1companion.core.audit import utcnow
from f1companion.db.base import AuditColumns, Base


class LeagueTeam(Base, AuditColumns):
    __tablename__ = "league_teams"

    __table_args__ = (
        # a team joins a league at most once
        UniqueConstraint("league_id", "team_id", name="uq_league_teams_league_team"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    league_id: Mapped[int] = mapped_column(
        ForeignKey("leagues.id", ondelete="CASCADE"), index=True
    )
    team_id: Mapped[int] = mapped_column(
        ForeignKey("teams.id", ondelete="CASCADE"), index=True
    )
    joined_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )
