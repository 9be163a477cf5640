"""League core: entity model, field validators and update workflows."""

from league_api.services.league.games import (
    create_game,
    delete_game,
    get_game,
    list_games,
    patch_game,
    validate_game,
)
from league_api.services.league.store import LeagueStore, StoreError
from league_api.services.league.teams import (
    create_team,
    delete_team,
    get_team,
    list_teams,
    patch_team,
)
from league_api.services.league.types import (
    Failure,
    FailureKind,
    Game,
    InvalidField,
    ProtoGame,
    Team,
)
from league_api.services.league.validators import (
    make_slug,
    validate_date,
    validate_score,
    validate_team,
)

__all__ = [
    # Types
    "Failure",
    "FailureKind",
    "Game",
    "InvalidField",
    "ProtoGame",
    "Team",
    "LeagueStore",
    "StoreError",
    # Validators
    "make_slug",
    "validate_date",
    "validate_score",
    "validate_team",
    "validate_game",
    # Workflows
    "create_team",
    "delete_team",
    "get_team",
    "list_teams",
    "patch_team",
    "create_game",
    "delete_game",
    "get_game",
    "list_games",
    "patch_game",
]
