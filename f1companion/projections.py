"""Record -> response shape.

Pure functions: they take already-loaded records (and any counts the caller
fetched) and never touch the session.
"""

from f1companion.models.constructor import Constructor
from f1companion.models.driver import Driver
from f1companion.models.league import League
from f1companion.models.league_invite import LeagueInvite
from f1companion.models.slot_role import CONSTRUCTOR_ROLE, DRIVER_ROLE, SlotRole
from f1companion.models.team import Team
from f1companion.models.team_constructor import TeamConstructor
from f1companion.models.team_driver import TeamDriver
from f1companion.models.user import UserProfile
from f1companion.schemas.catalog import ConstructorOut, DriverOut
from f1companion.schemas.league import (
    LeagueDetailsOut,
    LeagueInviteOut,
    LeagueInvitePreviewOut,
    LeagueOut,
)
from f1companion.schemas.team import (
    TeamConstructorOut,
    TeamDetailsOut,
    TeamDriverOut,
    TeamOut,
)
from f1companion.schemas.user import UserProfileOut


def full_name(
    first_name: str | None,
    last_name: str | None,
    display_name: str | None = None,
) -> str:
    """``"First Last"`` from the non-blank parts, else the display name, else ``""``."""
    parts = [p.strip() for p in (first_name, last_name) if p and p.strip()]
    name = " ".join(parts)
    if name:
        return name
    return (display_name or "").strip()


def profile_name(profile: UserProfile | None) -> str:
    if profile is None:
        return ""
    return full_name(profile.first_name, profile.last_name, profile.display_name)


def slot_sequence(role: SlotRole, slots: list) -> list:
    """Place ``(slot, catalog_row)`` pairs in a fixed-length list indexed by seat."""
    seats = [None] * role.size
    for slot, entity in sorted(slots, key=lambda pair: pair[0].slot_position):
        seats[slot.slot_position] = (slot, entity)
    return seats


# --- catalog ----------------------------------------------------------------


def driver_response(driver: Driver) -> DriverOut:
    return DriverOut(
        id=driver.id,
        first_name=driver.first_name,
        last_name=driver.last_name,
        abbreviation=driver.abbreviation,
        country_abbreviation=driver.country_abbreviation,
        is_active=driver.is_active,
    )


def constructor_response(constructor: Constructor) -> ConstructorOut:
    return ConstructorOut(
        id=constructor.id,
        name=constructor.name,
        full_name=constructor.full_name,
        country_abbreviation=constructor.country_abbreviation,
        is_active=constructor.is_active,
    )


# --- teams ------------------------------------------------------------------


def team_driver_response(slot: TeamDriver, driver: Driver) -> TeamDriverOut:
    return TeamDriverOut(
        slot_position=slot.slot_position,
        id=driver.id,
        first_name=driver.first_name,
        last_name=driver.last_name,
        abbreviation=driver.abbreviation,
        country_abbreviation=driver.country_abbreviation,
    )


def team_constructor_response(
    slot: TeamConstructor, constructor: Constructor
) -> TeamConstructorOut:
    return TeamConstructorOut(
        slot_position=slot.slot_position,
        id=constructor.id,
        name=constructor.name,
        full_name=constructor.full_name,
        country_abbreviation=constructor.country_abbreviation,
        is_active=constructor.is_active,
    )


def team_response(team: Team) -> TeamOut:
    return TeamOut(id=team.id, name=team.name, owner_name=profile_name(team.owner))


def team_details_response(
    team: Team, driver_slots: list, constructor_slots: list
) -> TeamDetailsOut:
    drivers = [
        team_driver_response(*seat) if seat else None
        for seat in slot_sequence(DRIVER_ROLE, driver_slots)
    ]
    constructors = [
        team_constructor_response(*seat) if seat else None
        for seat in slot_sequence(CONSTRUCTOR_ROLE, constructor_slots)
    ]
    return TeamDetailsOut(
        id=team.id,
        name=team.name,
        owner_name=profile_name(team.owner),
        drivers=drivers,
        constructors=constructors,
    )


# --- leagues ----------------------------------------------------------------


def league_response(league: League, team_count: int) -> LeagueOut:
    return LeagueOut(
        id=league.id,
        name=league.name,
        description=league.description,
        owner_name=profile_name(league.owner),
        team_count=team_count,
        max_teams=league.max_teams,
        is_private=league.is_private,
    )


def league_details_response(league: League, teams: list[Team]) -> LeagueDetailsOut:
    return LeagueDetailsOut(
        **league_response(league, len(teams)).model_dump(),
        teams=[team_response(team) for team in teams],
    )


def invite_response(
    invite: LeagueInvite, created_by_name: str | None = None
) -> LeagueInviteOut:
    """``created_by_name`` overrides the creator lookup for freshly inserted invites."""
    if created_by_name is None:
        created_by_name = profile_name(invite.creator)
    return LeagueInviteOut(
        id=invite.id,
        league_id=invite.league_id,
        token=invite.token,
        created_at=invite.created_at,
        created_by_name=created_by_name,
    )


def invite_preview_response(league: League, team_count: int) -> LeagueInvitePreviewOut:
    return LeagueInvitePreviewOut(
        league_name=league.name,
        league_description=league.description,
        owner_name=profile_name(league.owner),
        current_team_count=team_count,
        max_teams=league.max_teams,
        is_league_full=team_count >= league.max_teams,
    )


# --- users ------------------------------------------------------------------


def user_profile_response(profile: UserProfile, team: Team | None) -> UserProfileOut:
    return UserProfileOut(
        id=profile.id,
        email=profile.email,
        display_name=profile.display_name,
        first_name=profile.first_name,
        last_name=profile.last_name,
        avatar_url=profile.avatar_url,
        created_at=profile.created_at,
        updated_at=profile.updated_at,
        team=team_response(team) if team else None,
    )
