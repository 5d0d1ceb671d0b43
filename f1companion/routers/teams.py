from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from f1companion.api.deps import IdPath, get_current_user
from f1companion.db.database import get_db
from f1companion.models.user import UserProfile
from f1companion.projections import team_response
from f1companion.schemas.team import TeamCreate, TeamDetailsOut, TeamOut
from f1companion.services.teams import TeamService

router = APIRouter(prefix="/teams", tags=["teams"])


@router.post("", response_model=TeamOut, status_code=status.HTTP_201_CREATED)
async def create_team(
    payload: TeamCreate,
    user: UserProfile = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    team = await TeamService(db).create_team(user, payload.name)
    return team_response(team)


@router.get("", response_model=list[TeamOut])
async def list_teams(
    user: UserProfile = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    teams = await TeamService(db).list_teams()
    return [team_response(team) for team in teams]


@router.get("/{team_id}", response_model=TeamDetailsOut)
async def get_team(
    team_id: IdPath,
    user: UserProfile = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    service = TeamService(db)
    team = await service.get_team(team_id)
    return await service.get_team_details(team)
