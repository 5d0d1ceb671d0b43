import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from f1companion.core.audit import stamp_created, stamp_deleted
from f1companion.core.errors import (
    AlreadyInLeagueError,
    LeagueFullError,
    LeagueIsPrivateError,
    LeagueNotFoundError,
    LeagueOwnershipError,
    NotFoundError,
    TeamNotFoundError,
    TeamRequiredError,
)
from f1companion.models.league import League
from f1companion.models.user import UserProfile
from f1companion.projections import league_details_response, league_response
from f1companion.repository.invites import InviteRepository
from f1companion.repository.leagues import LeagueRepository
from f1companion.repository.teams import TeamRepository
from f1companion.schemas.league import LeagueCreate, LeagueDetailsOut, LeagueOut

logger = logging.getLogger(__name__)


class LeagueService:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.leagues = LeagueRepository(session)
        self.teams = TeamRepository(session)
        self.invites = InviteRepository(session)

    async def _summaries(self, leagues: list[League]) -> list[LeagueOut]:
        counts = await self.leagues.count_members_by_league([lg.id for lg in leagues])
        return [league_response(lg, counts[lg.id]) for lg in leagues]

    async def _require_league(self, league_id: int) -> League:
        league = await self.leagues.get_league(league_id)
        if league is None:
            logger.warning("League %s not found", league_id)
            raise LeagueNotFoundError(league_id)
        return league

    @staticmethod
    def _require_owner(league: League, user_id: int) -> None:
        if league.owner_id != user_id:
            logger.warning(
                "User %s is not the owner of league %s", user_id, league.id
            )
            raise LeagueOwnershipError(league.id, user_id)

    # --- leagues -----------------------------------------------------------

    async def create_league(self, owner: UserProfile, data: LeagueCreate) -> LeagueOut:
        """The owner's team is not admitted automatically; it joins like any other."""
        logger.debug("Creating league %s for owner %s", data.name, owner.id)

        league = League(
            name=data.name.strip(),
            description=data.description,
            max_teams=data.max_teams,
            is_private=data.is_private,
            owner_id=owner.id,
        )
        stamp_created(league, owner.id)
        league.owner = owner
        self.leagues.add(league)
        await self.session.commit()

        logger.info(
            "Created league %s with name %s for owner %s",
            league.id,
            league.name,
            owner.id,
        )
        return league_response(league, 0)

    async def list_leagues(self) -> list[LeagueOut]:
        return await self._summaries(await self.leagues.list_leagues())

    async def list_owned_leagues(self, owner: UserProfile) -> list[LeagueOut]:
        return await self._summaries(await self.leagues.list_by_owner(owner.id))

    async def list_member_leagues(self, user: UserProfile) -> list[LeagueOut]:
        team = await self.teams.get_by_user(user.id)
        if team is None:
            return []
        return await self._summaries(await self.leagues.list_for_team(team.id))

    async def list_available_leagues(
        self, user: UserProfile, search_term: str | None = None
    ) -> list[LeagueOut]:
        team = await self.teams.get_by_user(user.id)
        leagues = await self.leagues.list_available(
            team_id=team.id if team else None,
            search_term=search_term.strip() if search_term else None,
        )
        return await self._summaries(leagues)

    async def get_league_details(self, league_id: int) -> LeagueDetailsOut:
        league = await self._require_league(league_id)
        teams = await self.leagues.list_member_teams(league_id)
        return league_details_response(league, teams)

    # --- membership -------------------------------------------------------

    async def admit(self, league_id: int, team_id: int, acting_user_id: int) -> League:
        """``NotMember -> Member``: one guarded transition per (league, team).

        The league row is locked first so concurrent admissions queue up,
        then the seat count and the insert happen in a single statement.
        """
        league = await self.leagues.get_league(league_id, for_update=True)
        if league is None:
            raise LeagueNotFoundError(league_id)
        max_teams = league.max_teams

        try:
            inserted = await self.leagues.insert_member_if_capacity(
                league_id=league_id,
                team_id=team_id,
                max_teams=max_teams,
                acting_user_id=acting_user_id,
            )
        except IntegrityError as e:
            await self.session.rollback()
            logger.warning("Team %s is already in league %s", team_id, league_id)
            raise AlreadyInLeagueError(league_id, team_id) from e

        if not inserted:
            await self.session.rollback()
            logger.warning("League %s is full (max %s teams)", league_id, max_teams)
            raise LeagueFullError(league_id, max_teams)

        await self.session.commit()
        logger.info(
            "Team %s joined league %s (by user %s)", team_id, league_id, acting_user_id
        )
        return league

    async def join_public_league(self, league_id: int, user: UserProfile) -> LeagueOut:
        user_id = user.id
        league = await self._require_league(league_id)
        if league.is_private:
            raise LeagueIsPrivateError(league_id)

        team = await self.teams.get_by_user(user_id)
        if team is None:
            raise TeamRequiredError(user_id)

        league = await self.admit(league_id, team.id, user_id)
        return league_response(league, await self.leagues.count_members(league_id))

    async def add_team_directly(
        self, league_id: int, team_id: int, acting_user: UserProfile
    ) -> LeagueOut:
        """Owner adds a team without the invite flow; same seat rules apply."""
        acting_user_id = acting_user.id
        league = await self._require_league(league_id)
        self._require_owner(league, acting_user_id)

        if await self.teams.get_team(team_id) is None:
            raise TeamNotFoundError(team_id)

        league = await self.admit(league_id, team_id, acting_user_id)
        return league_response(league, await self.leagues.count_members(league_id))

    async def remove_team(
        self, league_id: int, team_id: int, acting_user: UserProfile
    ) -> None:
        """League owner removes any team; a team owner may leave."""
        acting_user_id = acting_user.id
        league = await self._require_league(league_id)

        team = await self.teams.get_team(team_id)
        if team is None:
            raise TeamNotFoundError(team_id)
        if acting_user_id not in (league.owner_id, team.user_id):
            raise LeagueOwnershipError(league_id, acting_user_id)

        removed = await self.leagues.delete_membership(league_id, team_id)
        if not removed:
            await self.session.rollback()
            raise NotFoundError(f"Team {team_id} is not in league {league_id}")

        await self.session.commit()
        logger.info(
            "Team %s removed from league %s by user %s",
            team_id,
            league_id,
            acting_user_id,
        )

    async def delete_league(self, league_id: int, acting_user: UserProfile) -> None:
        acting_user_id = acting_user.id
        league = await self._require_league(league_id)
        self._require_owner(league, acting_user_id)

        stamp_deleted(league, acting_user_id)
        invite = await self.invites.get_by_league(league_id)
        if invite is not None:
            stamp_deleted(invite, acting_user_id)
        await self.leagues.delete_memberships(league_id)

        await self.session.commit()
        logger.info("League %s deleted by user %s", league_id, acting_user_id)
