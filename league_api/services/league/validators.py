"""
Single-field validators.

Each validator takes one raw value and returns ``Valid(normalized)`` or
``Invalid(message)``. Malformed input is an expected condition, so none of
them raise on bad input.
"""

import calendar
import re
from datetime import date, datetime
from typing import Any

from league_api.config import settings
from league_api.services.league import messages
from league_api.services.league.store import MAX_STORED_INT, LeagueStore
from league_api.services.league.types import FieldCheck, Invalid, Slug, TeamId, Valid

TEAM_NAME_MIN_LENGTH = 3
TEAM_DESCRIPTION_MAX_LENGTH = 1024

# Runs of anything other than letters, digits and underscores
_NON_SLUG = re.compile(r"[^\w]+")


def make_slug(name: str) -> Slug:
    """
    Derive the URL-safe team identifier.

    "Foo Bar" -> "foo-bar", "AC/DC" -> "ac-dc". A name without any letter or
    digit yields an empty slug, which validate_team_name rejects.
    """
    return _NON_SLUG.sub("-", name.strip().lower()).strip("-")


def months_before(day: date, months: int) -> date:
    """Shift ``day`` back by whole months, clamping to the end of the target month."""
    month_index = day.year * 12 + (day.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def _parse_date(value: Any) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            # Accept a trailing Z, which fromisoformat rejects before 3.11
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        except ValueError:
            return None
    return None


def game_date_window(today: date | None = None) -> tuple[date, date]:
    """Inclusive (earliest, latest) dates a game may be recorded for."""
    today = today or date.today()
    return months_before(today, settings.game_date_window_months), today


def validate_date(value: Any, today: date | None = None) -> FieldCheck[date]:
    """Valid iff the date lies within the last two months, today included."""
    parsed = _parse_date(value)
    if parsed is None:
        return Invalid(messages.INVALID_DATE)

    earliest, latest = game_date_window(today)
    if parsed < earliest or parsed > latest:
        return Invalid(messages.INVALID_DATE)
    return Valid(parsed)


def _parse_score(value: Any) -> int | None:
    # bool is an int subclass; True is not a score
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip(), 10)
        except ValueError:
            return None
    return None


def validate_score(value: Any) -> FieldCheck[int]:
    """Valid iff the value is a whole number >= 0 that fits the score column."""
    score = _parse_score(value)
    if score is None:
        return Invalid(messages.SCORE_NOT_INTEGER)
    if score < 0:
        return Invalid(messages.NEGATIVE_SCORE)
    if score > MAX_STORED_INT:
        return Invalid(messages.SCORE_TOO_LARGE)
    return Valid(score)


async def validate_team(slug: Any, store: LeagueStore) -> FieldCheck[TeamId]:
    """Resolve a team slug to its id. The only validator that performs I/O."""
    if not isinstance(slug, str) or not slug:
        return Invalid(messages.TEAM_DOES_NOT_EXIST)

    team_id = await store.lookup_team_id(slug)
    if team_id is None:
        return Invalid(messages.TEAM_DOES_NOT_EXIST)
    return Valid(team_id)


def validate_team_name(name: Any) -> FieldCheck[str]:
    """Trim the name, which must be text of at least three characters that yields a slug."""
    if name is None:
        return Invalid(messages.MISSING_TEAM_NAME)
    if not isinstance(name, str):
        return Invalid(messages.TEAM_NAME_NOT_TEXT)

    name = name.strip()
    if len(name) < TEAM_NAME_MIN_LENGTH:
        return Invalid(messages.TEAM_NAME_TOO_SHORT)
    if not make_slug(name):
        return Invalid(messages.TEAM_NAME_NO_SLUG)
    return Valid(name)


def validate_team_description(description: Any) -> FieldCheck[str]:
    if description is None:
        return Valid("")
    if not isinstance(description, str):
        return Invalid(messages.DESCRIPTION_NOT_TEXT)
    if len(description) > TEAM_DESCRIPTION_MAX_LENGTH:
        return Invalid(messages.DESCRIPTION_TOO_LONG)
    return Valid(description)
