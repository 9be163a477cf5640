"""User-facing messages, kept together so they can be translated in one place."""

INVALID_DATE = "invalid date"
NEGATIVE_SCORE = "score cannot be negative"
SCORE_NOT_INTEGER = "score must be a whole number"
SCORE_TOO_LARGE = "score is too large"
TEAM_DOES_NOT_EXIST = "team does not exist"
SAME_TEAM = "home and away team cannot be the same team"

MISSING_TEAM_NAME = "Missing team name"
TEAM_NAME_NOT_TEXT = "Team name must be text"
TEAM_NAME_TOO_SHORT = "Team name must be >= 3 characters long"
TEAM_NAME_NO_SLUG = "Team name must contain a letter or digit"
DESCRIPTION_NOT_TEXT = "Description must be text"
DESCRIPTION_TOO_LONG = "Description exceeds max length of 1024 characters"
TEAM_EXISTS = "Team exists"

STORAGE_ERROR = "Storage error"

MISSING_USERNAME = "Missing username"
MISSING_PASSWORD = "Missing password"
INVALID_CREDENTIALS = "Invalid username or password"

MISSING_AUTH_HEADER = "Missing Authorization header"
MISSING_SESSION_TOKEN = "Session token missing from Authorization header"
INVALID_SESSION_TOKEN = "Invalid session token"

# Combined field label for the home/away cross-field rule
HOME_AWAY_FIELD = "home, away"


def team_not_found(slug: str) -> str:
    return f"Team {slug} does not exist"


def game_not_found(game_id: int) -> str:
    return f"Game {game_id} does not exist"
