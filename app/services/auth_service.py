"""
Authentication Service
Sign-out flow on top of Supabase Auth
"""

from typing import Optional

import structlog

from app.utils.i18n import resolve_locale
from app.utils.page_cache import PageCache
from app.utils.supabase_client import SupabaseClient

logger = structlog.get_logger(__name__)

ACCESS_TOKEN_COOKIE = "sb-access-token"
REFRESH_TOKEN_COOKIE = "sb-refresh-token"


class AuthService:
    """Session teardown for the current visitor"""

    def __init__(self, supabase: SupabaseClient, page_cache: PageCache):
        self.supabase = supabase
        self.page_cache = page_cache

    async def sign_out(self, locale: Optional[str], access_token: Optional[str] = None) -> str:
        """
        Sign out, drop the cached locale home page and return the redirect path

        Args:
            locale: Requested locale, anything unsupported maps to the default
            access_token: Caller's Supabase JWT from the session cookie

        Returns:
            str: Locale-prefixed path to redirect to
        """
        resolved = resolve_locale(locale)

        await self.supabase.sign_out(access_token)

        path = f"/{resolved}"
        await self.page_cache.revalidate_path(path)

        logger.info("Signed out", locale=resolved)
        return path
