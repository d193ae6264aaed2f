"""Handlers for the authenticated identity."""

from typing import Annotated

from fastapi import APIRouter, Depends

from ..dependencies.auth import auth_dependency
from ..models.user import AuthenticatedUser

__all__ = ["router"]

router = APIRouter()


@router.get(
    "/user",
    response_model=AuthenticatedUser,
    summary="Authenticated user",
)
async def get_user(
    user: Annotated[AuthenticatedUser, Depends(auth_dependency)],
) -> AuthenticatedUser:
    """GET the identity the request was authenticated as."""
    return user
