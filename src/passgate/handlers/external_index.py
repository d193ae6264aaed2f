"""Handlers for the app's external root, ``/<app-name>/``."""

from typing import Annotated

from fastapi import APIRouter, Depends
from safir.metadata import Metadata, get_metadata

from ..dependencies.auth import auth_dependency
from ..models.user import AuthenticatedUser

__all__ = ["router"]

router = APIRouter()


@router.get(
    "/",
    description=(
        "Return metadata about the running application.  Requires HTTP"
        " Basic authentication, so it doubles as a credential check."
    ),
    response_model=Metadata,
    response_model_exclude_none=True,
    summary="Application metadata",
)
async def get_index(
    user: Annotated[AuthenticatedUser, Depends(auth_dependency)],
) -> Metadata:
    return get_metadata(package_name="passgate", application_name="passgate")
