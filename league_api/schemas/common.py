"""Shared response schemas."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Single-message error body."""

    error: str


class InvalidFieldResponse(BaseModel):
    """One field-level validation failure."""

    field: str
    message: str
