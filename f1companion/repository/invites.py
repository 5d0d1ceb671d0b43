from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from f1companion.models.league import League
from f1companion.models.league_invite import LeagueInvite


class InviteRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    def add(self, invite: LeagueInvite) -> None:
        self.session.add(invite)

    async def get_by_league(self, league_id: int) -> LeagueInvite | None:
        res = await self.session.execute(
            select(LeagueInvite).where(
                LeagueInvite.league_id == league_id,
                LeagueInvite.is_deleted.is_(False),
            )
        )
        return res.scalar_one_or_none()

    async def get_league_by_token(self, token: str) -> League | None:
        """Live league behind a live invite token."""
        res = await self.session.execute(
            select(League)
            .join(LeagueInvite, LeagueInvite.league_id == League.id)
            .where(
                LeagueInvite.token == token,
                LeagueInvite.is_deleted.is_(False),
                League.is_deleted.is_(False),
            )
        )
        return res.scalar_one_or_none()
