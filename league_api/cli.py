"""Command line helpers for seeding users."""

import argparse
import asyncio
import getpass

import structlog

from league_api.database import async_session
from league_api.services.auth import PasswordHasher, SqlUserDirectory

logger = structlog.get_logger()


async def create_user(username: str, name: str, password: str) -> int:
    """Insert a user with a bcrypt-hashed password; returns the new user id."""
    async with async_session() as session:
        users = SqlUserDirectory(session)
        if await users.lookup_user(username) is not None:
            raise SystemExit(f"User {username} already exists")

        user = await users.create_user(username, name, PasswordHasher().hash(password))

    logger.info("Created user", user_id=user.id, username=username)
    return user.id


def main() -> None:
    parser = argparse.ArgumentParser(description="Create a user allowed to edit teams and games")
    parser.add_argument("username", type=str, help="Login name")
    parser.add_argument("--name", type=str, default=None, help="Display name (defaults to username)")
    parser.add_argument("--password", type=str, default=None, help="Password (prompted if omitted)")
    args = parser.parse_args()

    password = args.password or getpass.getpass("Password: ")
    user_id = asyncio.run(create_user(args.username, args.name or args.username, password))
    print(f"Created user {args.username} (id={user_id})")


if __name__ == "__main__":
    main()
