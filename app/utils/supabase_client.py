"""
Supabase Client Configuration
Auth and data access for guide profiles
"""

from typing import Optional

import structlog
from supabase import create_client, Client

from app.config import get_settings

logger = structlog.get_logger(__name__)


class SupabaseClient:
    """Supabase client wrapper: anon client for auth, service client for data"""

    def __init__(self, url: str = "", key: str = "", service_key: str = ""):
        self.url = url
        self.key = key
        self.service_key = service_key
        self.client: Optional[Client] = None
        self.service_client: Optional[Client] = None

        if self.url and self.key:
            try:
                self.client = create_client(self.url, self.key)
                logger.info("Supabase client initialized successfully")
            except Exception as e:
                logger.error("Failed to initialize Supabase client", error=str(e))
                self.client = None
        else:
            logger.warning("Supabase credentials not found in environment")

        if self.url and self.service_key:
            try:
                self.service_client = create_client(self.url, self.service_key)
            except Exception as e:
                logger.error("Failed to initialize Supabase service client", error=str(e))
                self.service_client = None

    @classmethod
    def from_settings(cls) -> "SupabaseClient":
        settings = get_settings()
        return cls(settings.supabase_url, settings.supabase_anon_key, settings.supabase_service_key)

    def get_client(self) -> Client:
        """Anon client; raises when Supabase is not configured"""
        if not self.client:
            raise RuntimeError("Supabase client not available")
        return self.client

    def get_service_client(self) -> Client:
        """Service-role client, bypasses row level security"""
        if not self.service_client:
            raise RuntimeError("Supabase service client not available")
        return self.service_client

    def is_available(self) -> bool:
        """Check if Supabase is available and configured"""
        return self.client is not None

    async def sign_out(self, access_token: Optional[str] = None) -> None:
        """
        Sign the caller out of Supabase Auth

        Args:
            access_token: The caller's JWT; without one only the client's
                local session is cleared

        Vendor errors are not caught.
        """
        client = self.get_client()

        if access_token:
            client.auth.admin.sign_out(access_token)
        else:
            client.auth.sign_out()

        logger.info("Supabase session signed out", had_token=bool(access_token))


_supabase_client: Optional[SupabaseClient] = None


def get_supabase_client() -> SupabaseClient:
    """Lazily built global Supabase client"""
    global _supabase_client
    if _supabase_client is None:
        _supabase_client = SupabaseClient.from_settings()
    return _supabase_client
