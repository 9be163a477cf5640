"""Entity model and outcome values for the league core."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Generic, TypeVar

Slug = str
TeamId = int
GameId = int

T = TypeVar("T")


@dataclass
class Team:
    """Team as exposed to callers."""

    slug: Slug
    name: str
    description: str


@dataclass
class Game:
    """Persisted game with both teams resolved."""

    id: GameId
    date: date
    home: Team
    away: Team
    home_score: int
    away_score: int


@dataclass(frozen=True)
class ProtoGame:
    """Validated game proposal, not yet persisted."""

    date: date
    home: TeamId
    away: TeamId
    home_score: int
    away_score: int


@dataclass(frozen=True)
class InvalidField:
    """One validation failure, addressed to the offending input field."""

    field: str
    message: str


@dataclass(frozen=True)
class Valid(Generic[T]):
    """Successful single-field check carrying the normalized value."""

    value: T


@dataclass(frozen=True)
class Invalid:
    """Failed single-field check carrying a human-readable message."""

    message: str


FieldCheck = Valid[T] | Invalid


class FailureKind(str, Enum):
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INVALID = "invalid"
    BAD_REQUEST = "bad_request"
    STORAGE = "storage"


@dataclass
class Failure:
    """
    Uniform failure value returned by core operations.

    ``invalid`` failures carry the ordered list of field errors in ``errors``;
    every other kind carries a single ``message``.
    """

    kind: FailureKind
    message: str | None = None
    errors: list[InvalidField] = field(default_factory=list)

    @classmethod
    def not_found(cls, message: str) -> "Failure":
        return cls(FailureKind.NOT_FOUND, message=message)

    @classmethod
    def conflict(cls, message: str) -> "Failure":
        return cls(FailureKind.CONFLICT, message=message)

    @classmethod
    def invalid(cls, errors: list[InvalidField]) -> "Failure":
        return cls(FailureKind.INVALID, errors=list(errors))

    @classmethod
    def bad_request(cls, message: str) -> "Failure":
        return cls(FailureKind.BAD_REQUEST, message=message)

    @classmethod
    def storage(cls, message: str) -> "Failure":
        return cls(FailureKind.STORAGE, message=message)
