"""Game validation pipeline and create/read/patch/delete workflow."""

from datetime import date
from typing import Any

import structlog

from league_api.services.league import messages
from league_api.services.league.store import MAX_STORED_INT, LeagueStore, StoreError
from league_api.services.league.types import (
    Failure,
    FieldCheck,
    Game,
    GameId,
    Invalid,
    InvalidField,
    ProtoGame,
)
from league_api.services.league.validators import validate_date, validate_score, validate_team

logger = structlog.get_logger()

GAME_FIELDS = ("date", "home", "home_score", "away", "away_score")


def _same_team(home: Any, away: Any) -> InvalidField | None:
    """Cross-field rule, compared on the raw slugs before any lookup."""
    if home is not None and home == away:
        return InvalidField(messages.HOME_AWAY_FIELD, messages.SAME_TEAM)
    return None


async def _check_field(
    store: LeagueStore, field: str, value: Any, today: date | None
) -> FieldCheck[Any]:
    if field == "date":
        return validate_date(value, today=today)
    if field in ("home", "away"):
        return await validate_team(value, store)
    return validate_score(value)


async def validate_game(
    store: LeagueStore,
    date: Any,
    home: Any,
    home_score: Any,
    away: Any,
    away_score: Any,
    today=None,
) -> ProtoGame | list[InvalidField]:
    """
    Validate a complete game submission.

    Every field check and the home/away rule run unconditionally, so the
    returned error list names every violated rule at once. A ProtoGame is
    only assembled when nothing failed; partial successes are discarded.

    Raises:
        StoreError: if a team lookup fails at the storage layer
    """
    raw = {
        "date": date,
        "home": home,
        "home_score": home_score,
        "away": away,
        "away_score": away_score,
    }

    resolved: dict[str, Any] = {}
    errors: list[InvalidField] = []
    for field in GAME_FIELDS:
        check = await _check_field(store, field, raw[field], today)
        if isinstance(check, Invalid):
            errors.append(InvalidField(field, check.message))
        else:
            resolved[field] = check.value

    same_team = _same_team(home, away)
    if same_team is not None:
        errors.append(same_team)

    if errors:
        return errors

    return ProtoGame(**resolved)


async def list_games(store: LeagueStore) -> list[Game] | Failure:
    try:
        return await store.list_games()
    except StoreError as e:
        logger.error("Failed to list games", error=str(e))
        return Failure.storage(messages.STORAGE_ERROR)


async def get_game(store: LeagueStore, game_id: GameId) -> Game | Failure:
    if not 0 < game_id <= MAX_STORED_INT:
        # No such row can exist, and the id column would reject the parameter
        return Failure.not_found(messages.game_not_found(game_id))

    try:
        game = await store.lookup_game(game_id)
    except StoreError as e:
        logger.error("Failed to load game", game_id=game_id, error=str(e))
        return Failure.storage(messages.STORAGE_ERROR)

    if game is None:
        return Failure.not_found(messages.game_not_found(game_id))
    return game


async def create_game(
    store: LeagueStore,
    date: Any,
    home: Any,
    home_score: Any,
    away: Any,
    away_score: Any,
    today=None,
) -> Game | Failure:
    """Persist a game built only from a fully validated ProtoGame."""
    try:
        validated = await validate_game(
            store, date, home, home_score, away, away_score, today=today
        )
        if isinstance(validated, list):
            logger.info("Rejected game", fields=[e.field for e in validated])
            return Failure.invalid(validated)

        game = await store.create_game(validated)
    except StoreError as e:
        logger.error("Failed to create game", error=str(e))
        return Failure.storage(messages.STORAGE_ERROR)

    logger.info("Created game", game_id=game.id, home=game.home.slug, away=game.away.slug)
    return game


async def patch_game(
    store: LeagueStore,
    game_id: GameId,
    patch: dict[str, Any],
    today=None,
) -> Game | Failure:
    """
    Re-validate the supplied fields of ``patch`` and persist them.

    Fields absent from the patch (or ``None``) are not re-validated and keep
    their stored value. The home/away rule is applied to the merged pair so
    a patch cannot make a team play itself.
    """
    current = await get_game(store, game_id)
    if isinstance(current, Failure):
        return current

    supplied = {
        field: patch[field]
        for field in GAME_FIELDS
        if patch.get(field) is not None
    }
    if not supplied:
        return current

    resolved: dict[str, Any] = {}
    errors: list[InvalidField] = []
    try:
        for field, value in supplied.items():
            check = await _check_field(store, field, value, today)
            if isinstance(check, Invalid):
                errors.append(InvalidField(field, check.message))
            else:
                resolved[field] = check.value

        if "home" in supplied or "away" in supplied:
            same_team = _same_team(
                supplied.get("home", current.home.slug),
                supplied.get("away", current.away.slug),
            )
            if same_team is not None:
                errors.append(same_team)

        if errors:
            logger.info("Rejected game patch", game_id=game_id, fields=[e.field for e in errors])
            return Failure.invalid(errors)

        updated = await store.update_game(game_id, resolved)
    except StoreError as e:
        logger.error("Failed to update game", game_id=game_id, error=str(e))
        return Failure.storage(messages.STORAGE_ERROR)

    if updated is None:
        # Deleted between the lookup and the update
        return Failure.not_found(messages.game_not_found(game_id))

    logger.info("Updated game", game_id=game_id, fields=sorted(resolved))
    return updated


async def delete_game(store: LeagueStore, game_id: GameId) -> None | Failure:
    current = await get_game(store, game_id)
    if isinstance(current, Failure):
        return current

    try:
        deleted = await store.delete_game(game_id)
    except StoreError as e:
        logger.error("Failed to delete game", game_id=game_id, error=str(e))
        return Failure.storage(messages.STORAGE_ERROR)

    if not deleted:
        return Failure.not_found(messages.game_not_found(game_id))

    logger.info("Deleted game", game_id=game_id)
    return None
