import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from f1companion.core.audit import stamp_created
from f1companion.core.errors import (
    DuplicateTeamError,
    TeamNotFoundError,
    TeamRequiredError,
    ValidationError,
)
from f1companion.models.slot_role import CONSTRUCTOR_ROLE, DRIVER_ROLE
from f1companion.models.team import Team
from f1companion.models.user import UserProfile
from f1companion.projections import team_details_response
from f1companion.repository.teams import TeamRepository
from f1companion.schemas.team import TeamDetailsOut

logger = logging.getLogger(__name__)


class TeamService:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.teams = TeamRepository(session)

    async def create_team(self, user: UserProfile, name: str) -> Team:
        user_id = user.id
        logger.info("Creating team for user %s", user_id)

        name = name.strip()
        if not name:
            raise ValidationError("Team name must not be blank")

        existing = await self.teams.get_by_user(user_id)
        if existing is not None:
            logger.warning("User %s already has a team %s", user_id, existing.id)
            raise DuplicateTeamError(user_id, existing.id)

        team = Team(name=name, user_id=user_id)
        stamp_created(team, user_id)
        team.owner = user
        self.teams.add(team)

        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            existing = await self.teams.get_by_user(user_id)
            raise DuplicateTeamError(user_id, existing.id if existing else 0) from e

        logger.info("Team %s created for user %s", team.id, user_id)
        return team

    async def get_user_team(self, user: UserProfile) -> Team | None:
        return await self.teams.get_by_user(user.id)

    async def require_user_team(self, user: UserProfile) -> Team:
        team = await self.teams.get_by_user(user.id)
        if team is None:
            logger.warning("No team found for user %s", user.id)
            raise TeamRequiredError(user.id)
        return team

    async def get_team(self, team_id: int) -> Team:
        team = await self.teams.get_team(team_id)
        if team is None:
            raise TeamNotFoundError(team_id)
        return team

    async def list_teams(self) -> list[Team]:
        return await self.teams.list_teams()

    async def get_team_details(self, team: Team) -> TeamDetailsOut:
        drivers = await self.teams.list_slots(team.id, DRIVER_ROLE)
        constructors = await self.teams.list_slots(team.id, CONSTRUCTOR_ROLE)
        return team_details_response(team, drivers, constructors)
