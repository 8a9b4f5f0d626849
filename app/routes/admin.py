"""
Admin Routes
Guide onboarding links
"""

import structlog
from fastapi import APIRouter, HTTPException, status

from app.models.guide import CompletionLink
from app.utils.dependencies import AdminDep, ProfileServiceDep
from app.utils.i18n import DEFAULT_LOCALE, resolve_locale

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.post("/guides/{profile_id}/completion-link", response_model=CompletionLink)
async def create_completion_link(
    profile_id: str,
    _: AdminDep,
    profiles: ProfileServiceDep,
    locale: str = DEFAULT_LOCALE
):
    """
    Issue a profile completion link for an imported guide

    Replaces any token previously stored for the guide.
    """
    link = await profiles.issue_completion_link(profile_id, resolve_locale(locale))

    if link is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Guide not found"
        )

    return link
