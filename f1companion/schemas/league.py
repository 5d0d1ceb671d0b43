from datetime import datetime

from pydantic import Field

from f1companion.models.league import DEFAULT_MAX_TEAMS
from f1companion.schemas.common import ApiModel, RecordId
from f1companion.schemas.team import TeamOut


class LeagueCreate(ApiModel):
    name: str = Field(min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=1000)
    max_teams: int = Field(default=DEFAULT_MAX_TEAMS, ge=1, le=100)
    is_private: bool = False


class LeagueOut(ApiModel):
    id: int
    name: str
    description: str | None
    owner_name: str
    team_count: int
    max_teams: int
    is_private: bool


class LeagueDetailsOut(LeagueOut):
    teams: list[TeamOut]


class LeagueTeamAdd(ApiModel):
    team_id: RecordId


class LeagueInviteOut(ApiModel):
    id: int
    league_id: int
    token: str
    created_at: datetime
    created_by_name: str


class LeagueInvitePreviewOut(ApiModel):
    league_name: str
    league_description: str | None
    owner_name: str
    current_team_count: int
    max_teams: int
    is_league_full: bool
