"""Typed domain errors.

Every error carries the HTTP status and problem title the API answers with;
the exception handler in ``main`` reads those attributes and never parses
``detail``.
"""


class DomainError(Exception):
    status_code: int = 400
    title: str = "Bad Request"
    # field name -> message, for errors tied to one request field
    errors: dict[str, str] | None = None

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


# --- 400 -------------------------------------------------------------------


class ValidationError(DomainError):
    status_code = 400
    title = "Validation Error"


class InvalidSlotPositionError(ValidationError):
    title = "Invalid Slot Position"

    def __init__(self, slot_position: int, max_position: int, role: str):
        super().__init__(
            f"Slot position {slot_position} is invalid for {role}s "
            f"(must be between 0 and {max_position})"
        )
        self.errors = {"slotPosition": f"must be between 0 and {max_position}"}
        self.slot_position = slot_position
        self.max_position = max_position
        self.role = role


class ProfileRequiredError(ValidationError):
    title = "User Profile Required"

    def __init__(self, account_id: str):
        super().__init__(
            "Please complete your registration before accessing this resource."
        )
        self.account_id = account_id


class TeamRequiredError(ValidationError):
    title = "Team Required"

    def __init__(self, user_id: int):
        super().__init__("Please create a team before joining a league.")
        self.user_id = user_id


# --- 401 / 403 -------------------------------------------------------------


class AuthenticationError(DomainError):
    status_code = 401
    title = "Authentication Required"


class AuthorizationError(DomainError):
    status_code = 403
    title = "Permission Denied"


class TeamOwnershipError(AuthorizationError):
    def __init__(self, team_id: int, owner_id: int, user_id: int):
        super().__init__("You do not have permission to modify this team.")
        self.team_id = team_id
        self.owner_id = owner_id
        self.user_id = user_id


class LeagueOwnershipError(AuthorizationError):
    def __init__(self, league_id: int, user_id: int):
        super().__init__("Only the league owner can manage this league.")
        self.league_id = league_id
        self.user_id = user_id


class LeagueIsPrivateError(AuthorizationError):
    title = "Private League"

    def __init__(self, league_id: int):
        super().__init__(
            f"League {league_id} is private and can only be joined by invite"
        )
        self.league_id = league_id


# --- 404 -------------------------------------------------------------------


class NotFoundError(DomainError):
    status_code = 404
    title = "Resource Not Found"


class LeagueNotFoundError(NotFoundError):
    title = "League Not Found"

    def __init__(self, league_id: int):
        super().__init__(f"League {league_id} not found")
        self.league_id = league_id


class TeamNotFoundError(NotFoundError):
    title = "Team Not Found"

    def __init__(self, team_id: int):
        super().__init__(f"Team {team_id} not found")
        self.team_id = team_id


class InvalidInviteTokenError(NotFoundError):
    title = "Invalid Invite"

    def __init__(self):
        super().__init__("League invite not found or no longer valid")


# --- 409 -------------------------------------------------------------------


class ConflictError(DomainError):
    status_code = 409
    title = "Conflict"


class SlotOccupiedError(ConflictError):
    title = "Slot Already Occupied"

    def __init__(self, slot_position: int, team_id: int):
        super().__init__(
            f"Slot {slot_position} on team {team_id} is already occupied"
        )
        self.slot_position = slot_position
        self.team_id = team_id


class EntityAlreadyOnTeamError(ConflictError):
    title = "Entity Already on Team"

    def __init__(self, entity_id: int, role: str, team_id: int):
        super().__init__(f"The {role} {entity_id} is already on team {team_id}")
        self.entity_id = entity_id
        self.role = role
        self.team_id = team_id


class DuplicateTeamError(ConflictError):
    title = "Duplicate Team"

    def __init__(self, user_id: int, team_id: int):
        super().__init__(
            "You already have a team. Each user can only create one team."
        )
        self.user_id = user_id
        self.team_id = team_id


class AlreadyRegisteredError(ConflictError):
    title = "Already Registered"

    def __init__(self, account_id: str):
        super().__init__("A profile already exists for this account.")
        self.account_id = account_id


class AlreadyInLeagueError(ConflictError):
    title = "Already in League"

    def __init__(self, league_id: int, team_id: int):
        super().__init__(f"Team {team_id} is already in league {league_id}")
        self.league_id = league_id
        self.team_id = team_id


class LeagueFullError(ConflictError):
    title = "League Full"

    def __init__(self, league_id: int, max_teams: int):
        super().__init__(f"League {league_id} is full (max {max_teams} teams)")
        self.league_id = league_id
        self.max_teams = max_teams
