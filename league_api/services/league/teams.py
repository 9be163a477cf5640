"""Team create/read/patch/delete workflow."""

from dataclasses import replace
from typing import Any

import structlog

from league_api.services.league import messages
from league_api.services.league.store import LeagueStore, StoreError
from league_api.services.league.types import Failure, InvalidField, Invalid, Slug, Team
from league_api.services.league.validators import (
    make_slug,
    validate_team_description,
    validate_team_name,
)

logger = structlog.get_logger()


def check_team_fields(name: Any, description: Any) -> tuple[str, str] | list[InvalidField]:
    """
    Apply the creation rules to a complete name/description pair.

    Returns the normalized ``(name, description)`` when every rule passes,
    otherwise the list of field errors.
    """
    errors: list[InvalidField] = []

    name_check = validate_team_name(name)
    if isinstance(name_check, Invalid):
        errors.append(InvalidField("name", name_check.message))

    description_check = validate_team_description(description)
    if isinstance(description_check, Invalid):
        errors.append(InvalidField("description", description_check.message))

    if errors:
        return errors
    return name_check.value, description_check.value


async def list_teams(store: LeagueStore) -> list[Team] | Failure:
    try:
        return await store.list_teams()
    except StoreError as e:
        logger.error("Failed to list teams", error=str(e))
        return Failure.storage(messages.STORAGE_ERROR)


async def get_team(store: LeagueStore, slug: Slug) -> Team | Failure:
    try:
        team = await store.lookup_team(slug)
    except StoreError as e:
        logger.error("Failed to load team", slug=slug, error=str(e))
        return Failure.storage(messages.STORAGE_ERROR)

    if team is None:
        return Failure.not_found(messages.team_not_found(slug))
    return team


async def create_team(store: LeagueStore, name: Any, description: Any = "") -> Team | Failure:
    """Validate and persist a new team; the slug is derived from the name."""
    checked = check_team_fields(name, description)
    if isinstance(checked, list):
        logger.info("Rejected team", fields=[e.field for e in checked])
        return Failure.invalid(checked)

    name, description = checked
    try:
        created = await store.create_team(name, description)
    except StoreError as e:
        logger.error("Failed to create team", name=name, error=str(e))
        return Failure.storage(messages.STORAGE_ERROR)

    if isinstance(created, Failure):
        logger.info("Team already exists", slug=make_slug(name))
        return created

    logger.info("Created team", slug=created.slug)
    return created


async def patch_team(store: LeagueStore, slug: Slug, patch: dict[str, Any]) -> Team | Failure:
    """
    Merge ``patch`` over the stored team and persist the result.

    Keys missing from ``patch`` (or set to ``None``) keep their current
    value. A new name re-derives the slug. The merged candidate is validated
    with the creation rules, and the stored team is left untouched unless
    every rule passes.
    """
    current = await get_team(store, slug)
    if isinstance(current, Failure):
        return current

    name = patch.get("name")
    description = patch.get("description")

    checked = check_team_fields(
        current.name if name is None else name,
        current.description if description is None else description,
    )
    if isinstance(checked, list):
        logger.info("Rejected team patch", slug=slug, fields=[e.field for e in checked])
        return Failure.invalid(checked)

    new_name, new_description = checked
    candidate = replace(
        current,
        name=new_name,
        slug=current.slug if name is None else make_slug(new_name),
        description=new_description,
    )

    try:
        if candidate.slug != slug and await store.lookup_team(candidate.slug) is not None:
            logger.info("Team rename collides", slug=slug, new_slug=candidate.slug)
            return Failure.conflict(messages.TEAM_EXISTS)

        updated = await store.update_team(slug, candidate)
    except StoreError as e:
        logger.error("Failed to update team", slug=slug, error=str(e))
        return Failure.storage(messages.STORAGE_ERROR)

    if updated is None:
        # Deleted between the lookup and the update
        return Failure.not_found(messages.team_not_found(slug))

    logger.info("Updated team", slug=slug, new_slug=updated.slug)
    return updated


async def delete_team(store: LeagueStore, slug: Slug) -> None | Failure:
    current = await get_team(store, slug)
    if isinstance(current, Failure):
        return current

    try:
        deleted = await store.delete_team(slug)
    except StoreError as e:
        logger.error("Failed to delete team", slug=slug, error=str(e))
        return Failure.storage(messages.STORAGE_ERROR)

    if not deleted:
        return Failure.not_found(messages.team_not_found(slug))

    logger.info("Deleted team", slug=slug)
    return None
