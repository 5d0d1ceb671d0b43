from f1companion.models.constructor import Constructor
from f1companion.models.driver import Driver
from f1companion.models.league import League
from f1companion.models.league_invite import LeagueInvite
from f1companion.models.league_team import LeagueTeam
from f1companion.models.team import Team
from f1companion.models.team_constructor import TeamConstructor
from f1companion.models.team_driver import TeamDriver
from f1companion.models.user import Account, UserProfile

__all__ = [
    "Account",
    "Constructor",
    "Driver",
    "League",
    "LeagueInvite",
    "LeagueTeam",
    "Team",
    "TeamConstructor",
    "TeamDriver",
    "UserProfile",
]
