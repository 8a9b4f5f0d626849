"""
FastAPI Dependencies
Shared clients, services and admin authentication
"""

import secrets
from typing import Annotated

import structlog
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.config import Settings, get_settings
from app.services.auth_service import AuthService
from app.services.profile_service import ProfileService
from app.utils.page_cache import PageCache
from app.utils.supabase_client import SupabaseClient, get_supabase_client

logger = structlog.get_logger(__name__)

# Security scheme for the admin API token
security = HTTPBearer()


def get_page_cache(request: Request) -> PageCache:
    """Page cache created during application startup"""
    return request.app.state.page_cache


def get_profile_service(
    supabase: SupabaseClient = Depends(get_supabase_client)
) -> ProfileService:
    return ProfileService(supabase)


def get_auth_service(
    supabase: SupabaseClient = Depends(get_supabase_client),
    page_cache: PageCache = Depends(get_page_cache)
) -> AuthService:
    return AuthService(supabase, page_cache)


async def require_admin(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    settings: Settings = Depends(get_settings)
) -> None:
    """
    Check the bearer token against the configured admin API token

    Raises:
        HTTPException: 403 when the admin API is disabled or the token is wrong
    """
    expected = settings.admin_api_token
    if not expected or not secrets.compare_digest(credentials.credentials, expected):
        logger.warning("Rejected admin API call")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required"
        )


# Type aliases for cleaner dependency injection
SettingsDep = Annotated[Settings, Depends(get_settings)]
PageCacheDep = Annotated[PageCache, Depends(get_page_cache)]
ProfileServiceDep = Annotated[ProfileService, Depends(get_profile_service)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
AdminDep = Annotated[None, Depends(require_admin)]
