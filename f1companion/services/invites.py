import logging
import secrets

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from f1companion.core.audit import stamp_created
from f1companion.core.errors import (
    InvalidInviteTokenError,
    LeagueNotFoundError,
    LeagueOwnershipError,
    TeamRequiredError,
)
from f1companion.models.league_invite import LeagueInvite
from f1companion.models.user import UserProfile
from f1companion.projections import (
    invite_preview_response,
    invite_response,
    league_response,
    profile_name,
)
from f1companion.repository.invites import InviteRepository
from f1companion.repository.leagues import LeagueRepository
from f1companion.repository.teams import TeamRepository
from f1companion.schemas.league import (
    LeagueInviteOut,
    LeagueInvitePreviewOut,
    LeagueOut,
)
from f1companion.services.leagues import LeagueService

logger = logging.getLogger(__name__)

TOKEN_BYTES = 24
TOKEN_ATTEMPTS = 5


def new_invite_token() -> str:
    """URL-safe random token (32 chars for 24 bytes)."""
    return secrets.token_urlsafe(TOKEN_BYTES)


class InviteService:
    """One reusable invite token per league."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.invites = InviteRepository(session)
        self.leagues = LeagueRepository(session)
        self.teams = TeamRepository(session)
        self.memberships = LeagueService(session)

    async def get_or_create_invite(
        self, league_id: int, requester: UserProfile
    ) -> LeagueInviteOut:
        requester_id = requester.id
        requester_name = profile_name(requester)

        league = await self.leagues.get_league(league_id)
        if league is None:
            raise LeagueNotFoundError(league_id)
        if league.owner_id != requester_id:
            logger.warning(
                "User %s tried to manage the invite of league %s", requester_id, league_id
            )
            raise LeagueOwnershipError(league_id, requester_id)

        existing = await self.invites.get_by_league(league_id)
        if existing is not None:
            return invite_response(existing)

        # no SELECT for token uniqueness: rely on the UNIQUE index and retry on collision
        last_err: Exception | None = None
        for _ in range(TOKEN_ATTEMPTS):
            invite = LeagueInvite(league_id=league_id, token=new_invite_token())
            stamp_created(invite, requester_id)
            self.invites.add(invite)

            try:
                await self.session.commit()
            except IntegrityError as e:
                await self.session.rollback()
                last_err = e
                # a concurrent request may have created the league's invite first
                existing = await self.invites.get_by_league(league_id)
                if existing is not None:
                    return invite_response(existing)
                continue

            logger.info("Created invite %s for league %s", invite.id, league_id)
            return invite_response(invite, created_by_name=requester_name)

        raise RuntimeError("Failed to generate a unique invite token") from last_err

    async def preview_invite(self, token: str) -> LeagueInvitePreviewOut:
        league = await self.invites.get_league_by_token(token)
        if league is None:
            raise InvalidInviteTokenError()

        team_count = await self.leagues.count_members(league.id)
        return invite_preview_response(league, team_count)

    async def join_via_invite(self, token: str, user: UserProfile) -> LeagueOut:
        user_id = user.id

        league = await self.invites.get_league_by_token(token)
        if league is None:
            raise InvalidInviteTokenError()
        league_id = league.id

        logger.debug("User %s attempting to join league %s", user_id, league_id)

        team = await self.teams.get_by_user(user_id)
        if team is None:
            logger.warning(
                "No team found for user %s when joining league %s", user_id, league_id
            )
            raise TeamRequiredError(user_id)

        team_id = team.id
        league = await self.memberships.admit(league_id, team_id, user_id)

        logger.info(
            "User %s joined league %s with team %s via invite",
            user_id,
            league_id,
            team_id,
        )
        return league_response(league, await self.leagues.count_members(league_id))
