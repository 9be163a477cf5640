"""Password hashing and verification with bcrypt."""

import bcrypt
import structlog

from league_api.config import settings

logger = structlog.get_logger()


class PasswordHasher:
    """bcrypt hasher; the cost factor comes from settings unless given."""

    def __init__(self, rounds: int | None = None):
        rounds = settings.bcrypt_rounds if rounds is None else rounds
        self.rounds = max(4, min(31, rounds))

    def hash(self, plaintext: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(plaintext.encode("utf-8"), salt).decode("utf-8")

    def verify(self, password_hash: str, plaintext: str) -> bool:
        """Check ``plaintext`` against a stored hash; malformed hashes never match."""
        try:
            return bcrypt.checkpw(plaintext.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError as e:
            logger.warning("Unusable password hash", error=str(e))
            return False
