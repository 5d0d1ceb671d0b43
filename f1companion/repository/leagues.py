from __future__ import annotations

from sqlalchemy import (
    Boolean,
    DateTime,
    Integer,
    delete,
    func,
    insert,
    literal,
    select,
)
from sqlalchemy.ext.asyncio import AsyncSession

from f1companion.core.audit import utcnow
from f1companion.models.league import League
from f1companion.models.league_team import LeagueTeam
from f1companion.models.team import Team


class LeagueRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    def add(self, league: League) -> None:
        self.session.add(league)

    async def get_league(self, league_id: int, *, for_update: bool = False) -> League | None:
        stmt = select(League).where(League.id == league_id, League.is_deleted.is_(False))
        if for_update:
            # serializes admissions on the league row (no-op on SQLite)
            stmt = stmt.with_for_update()
        res = await self.session.execute(stmt)
        return res.scalar_one_or_none()

    async def list_leagues(self) -> list[League]:
        res = await self.session.execute(
            select(League).where(League.is_deleted.is_(False)).order_by(League.id.asc())
        )
        return list(res.scalars().all())

    async def list_by_owner(self, owner_id: int) -> list[League]:
        res = await self.session.execute(
            select(League)
            .where(League.owner_id == owner_id, League.is_deleted.is_(False))
            .order_by(League.id.asc())
        )
        return list(res.scalars().all())

    async def list_for_team(self, team_id: int) -> list[League]:
        res = await self.session.execute(
            select(League)
            .join(LeagueTeam, LeagueTeam.league_id == League.id)
            .where(
                LeagueTeam.team_id == team_id,
                LeagueTeam.is_deleted.is_(False),
                League.is_deleted.is_(False),
            )
            .order_by(LeagueTeam.joined_at.asc())
        )
        return list(res.scalars().all())

    async def list_available(
        self, *, team_id: int | None, search_term: str | None = None
    ) -> list[League]:
        """Public leagues with a free seat that ``team_id`` has not joined."""
        member_count = self._member_count(League.id)
        stmt = select(League).where(
            League.is_deleted.is_(False),
            League.is_private.is_(False),
            member_count < League.max_teams,
        )
        if team_id is not None:
            already_in = (
                select(LeagueTeam.id)
                .where(
                    LeagueTeam.league_id == League.id,
                    LeagueTeam.team_id == team_id,
                    LeagueTeam.is_deleted.is_(False),
                )
                .exists()
            )
            stmt = stmt.where(~already_in)
        if search_term:
            stmt = stmt.where(func.lower(League.name).contains(search_term.lower()))
        res = await self.session.execute(stmt.order_by(League.name.asc()))
        return list(res.scalars().all())

    # --- membership -------------------------------------------------------

    @staticmethod
    def _member_count(league_id_expr):
        return (
            select(func.count(LeagueTeam.id))
            .where(
                LeagueTeam.league_id == league_id_expr,
                LeagueTeam.is_deleted.is_(False),
            )
            .scalar_subquery()
        )

    async def count_members(self, league_id: int) -> int:
        res = await self.session.execute(select(self._member_count(league_id)))
        return int(res.scalar_one())

    async def count_members_by_league(self, league_ids: list[int]) -> dict[int, int]:
        if not league_ids:
            return {}
        res = await self.session.execute(
            select(LeagueTeam.league_id, func.count(LeagueTeam.id))
            .where(
                LeagueTeam.league_id.in_(league_ids),
                LeagueTeam.is_deleted.is_(False),
            )
            .group_by(LeagueTeam.league_id)
        )
        counts = {league_id: 0 for league_id in league_ids}
        counts.update({league_id: int(n) for league_id, n in res.all()})
        return counts

    async def list_member_teams(self, league_id: int) -> list[Team]:
        res = await self.session.execute(
            select(Team)
            .join(LeagueTeam, LeagueTeam.team_id == Team.id)
            .where(
                LeagueTeam.league_id == league_id,
                LeagueTeam.is_deleted.is_(False),
                Team.is_deleted.is_(False),
            )
            .order_by(LeagueTeam.joined_at.asc(), LeagueTeam.id.asc())
        )
        return list(res.scalars().all())

    async def insert_member_if_capacity(
        self,
        *,
        league_id: int,
        team_id: int,
        max_teams: int,
        acting_user_id: int,
    ) -> bool:
        """Insert the membership only while the league has a free seat.

        Count and insert run as one statement; returns ``False`` when the
        league was already full. A duplicate (league, team) pair surfaces as
        ``IntegrityError`` from the unique constraint.
        """
        now = utcnow()
        source = select(
            literal(league_id, Integer).label("league_id"),
            literal(team_id, Integer).label("team_id"),
            literal(now, DateTime(timezone=True)).label("joined_at"),
            literal(now, DateTime(timezone=True)).label("created_at"),
            literal(acting_user_id, Integer).label("created_by"),
            literal(False, Boolean).label("is_deleted"),
        ).where(self._member_count(league_id) < max_teams)

        res = await self.session.execute(
            insert(LeagueTeam.__table__).from_select(
                [
                    "league_id",
                    "team_id",
                    "joined_at",
                    "created_at",
                    "created_by",
                    "is_deleted",
                ],
                source,
            )
        )
        return res.rowcount == 1

    async def delete_membership(self, league_id: int, team_id: int) -> int:
        res = await self.session.execute(
            delete(LeagueTeam).where(
                LeagueTeam.league_id == league_id,
                LeagueTeam.team_id == team_id,
            )
        )
        return res.rowcount

    async def delete_memberships(self, league_id: int) -> None:
        await self.session.execute(
            delete(LeagueTeam).where(LeagueTeam.league_id == league_id)
        )
