from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from f1companion.api.deps import IdPath, get_current_user
from f1companion.db.database import get_db
from f1companion.models.user import UserProfile
from f1companion.schemas.league import (
    LeagueCreate,
    LeagueDetailsOut,
    LeagueInviteOut,
    LeagueInvitePreviewOut,
    LeagueOut,
    LeagueTeamAdd,
)
from f1companion.services.invites import InviteService
from f1companion.services.leagues import LeagueService

router = APIRouter(prefix="/leagues", tags=["leagues"])


@router.post("", response_model=LeagueOut, status_code=status.HTTP_201_CREATED)
async def create_league(
    payload: LeagueCreate,
    user: UserProfile = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await LeagueService(db).create_league(user, payload)


@router.get("", response_model=list[LeagueOut])
async def list_leagues(
    owned: bool = False,
    user: UserProfile = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    service = LeagueService(db)
    if owned:
        return await service.list_owned_leagues(user)
    return await service.list_leagues()


@router.get("/available", response_model=list[LeagueOut])
async def list_available_leagues(
    search: str | None = Query(default=None, max_length=100),
    user: UserProfile = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Public leagues with a free seat that my team has not joined yet."""
    return await LeagueService(db).list_available_leagues(user, search)


# ---------- invites ----------
# declared before /{league_id} so "join" is never parsed as an id


@router.get("/join/{token}/preview", response_model=LeagueInvitePreviewOut)
async def preview_invite(token: str, db: AsyncSession = Depends(get_db)):
    # no auth: shown before the visitor signs in
    return await InviteService(db).preview_invite(token)


@router.post("/join/{token}", response_model=LeagueOut)
async def join_via_invite(
    token: str,
    user: UserProfile = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await InviteService(db).join_via_invite(token, user)


@router.post("/{league_id}/invite", response_model=LeagueInviteOut)
async def get_or_create_invite(
    league_id: IdPath,
    user: UserProfile = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await InviteService(db).get_or_create_invite(league_id, user)


# ---------- league ----------


@router.get("/{league_id}", response_model=LeagueDetailsOut)
async def get_league(
    league_id: IdPath,
    user: UserProfile = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await LeagueService(db).get_league_details(league_id)


@router.delete("/{league_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_league(
    league_id: IdPath,
    user: UserProfile = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    await LeagueService(db).delete_league(league_id, user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{league_id}/join", response_model=LeagueOut)
async def join_league(
    league_id: IdPath,
    user: UserProfile = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await LeagueService(db).join_public_league(league_id, user)


@router.post(
    "/{league_id}/teams", response_model=LeagueOut, status_code=status.HTTP_201_CREATED
)
async def add_team(
    league_id: IdPath,
    payload: LeagueTeamAdd,
    user: UserProfile = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await LeagueService(db).add_team_directly(league_id, payload.team_id, user)


@router.delete(
    "/{league_id}/teams/{team_id}", status_code=status.HTTP_204_NO_CONTENT
)
async def remove_team(
    league_id: IdPath,
    team_id: IdPath,
    user: UserProfile = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    await LeagueService(db).remove_team(league_id, team_id, user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
