"""Models for authenticated users."""

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["AuthenticatedUser"]


class AuthenticatedUser(BaseModel):
    """Identity of a user whose credentials passed verification.

    Handed to the protected handler for the duration of one request.
    """

    model_config = ConfigDict(frozen=True)

    username: str = Field(
        ..., title="Username", description="Verified username of the caller"
    )
