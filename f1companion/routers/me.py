from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from f1companion.api.deps import AuthClaims, get_claims, get_current_user
from f1companion.core.errors import NotFoundError
from f1companion.db.database import get_db
from f1companion.models.slot_role import CONSTRUCTOR_ROLE, DRIVER_ROLE
from f1companion.models.user import UserProfile
from f1companion.projections import user_profile_response
from f1companion.schemas.league import LeagueOut
from f1companion.schemas.team import (
    AssignConstructorIn,
    AssignDriverIn,
    TeamDetailsOut,
)
from f1companion.schemas.user import ProfileUpdateIn, RegisterIn, UserProfileOut
from f1companion.services.leagues import LeagueService
from f1companion.services.profiles import ProfileService
from f1companion.services.slots import SlotService
from f1companion.services.teams import TeamService

router = APIRouter(prefix="/me", tags=["me"])


@router.post(
    "/register", response_model=UserProfileOut, status_code=status.HTTP_201_CREATED
)
async def register(
    payload: RegisterIn | None = None,
    claims: AuthClaims = Depends(get_claims),
    db: AsyncSession = Depends(get_db),
):
    profile = await ProfileService(db).register(
        claims.account_id,
        claims.email,
        payload.display_name if payload else None,
    )
    return user_profile_response(profile, None)


@router.get("/profile", response_model=UserProfileOut)
async def get_profile(
    user: UserProfile = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    team = await TeamService(db).get_user_team(user)
    return user_profile_response(user, team)


@router.patch("/profile", response_model=UserProfileOut)
async def update_profile(
    payload: ProfileUpdateIn,
    user: UserProfile = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    profile = await ProfileService(db).update_profile(
        user, payload.model_dump(exclude_unset=True)
    )
    team = await TeamService(db).get_user_team(profile)
    return user_profile_response(profile, team)


@router.get("/leagues", response_model=list[LeagueOut])
async def my_leagues(
    user: UserProfile = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Leagues my team plays in."""
    return await LeagueService(db).list_member_leagues(user)


# ---------- team roster ----------


@router.get("/team", response_model=TeamDetailsOut)
async def my_team(
    user: UserProfile = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    service = TeamService(db)
    team = await service.get_user_team(user)
    if team is None:
        raise NotFoundError("You have not created a team yet")
    return await service.get_team_details(team)


@router.post(
    "/team/drivers",
    response_model=TeamDetailsOut,
    status_code=status.HTTP_201_CREATED,
)
async def add_driver(
    payload: AssignDriverIn,
    user: UserProfile = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    teams = TeamService(db)
    team = await teams.require_user_team(user)
    await SlotService(db).assign(
        team, DRIVER_ROLE, payload.driver_id, payload.slot_position, user.id
    )
    return await teams.get_team_details(team)


@router.delete("/team/drivers/{slot_position}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_driver(
    slot_position: int,
    user: UserProfile = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    team = await TeamService(db).require_user_team(user)
    await SlotService(db).remove(team, DRIVER_ROLE, slot_position, user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/team/constructors",
    response_model=TeamDetailsOut,
    status_code=status.HTTP_201_CREATED,
)
async def add_constructor(
    payload: AssignConstructorIn,
    user: UserProfile = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    teams = TeamService(db)
    team = await teams.require_user_team(user)
    await SlotService(db).assign(
        team, CONSTRUCTOR_ROLE, payload.constructor_id, payload.slot_position, user.id
    )
    return await teams.get_team_details(team)


@router.delete(
    "/team/constructors/{slot_position}", status_code=status.HTTP_204_NO_CONTENT
)
async def remove_constructor(
    slot_position: int,
    user: UserProfile = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    team = await TeamService(db).require_user_team(user)
    await SlotService(db).remove(team, CONSTRUCTOR_ROLE, slot_position, user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
