"""
Profile completion tokens and links
"""

import secrets
from typing import Optional

from app.config import get_settings
from app.utils.i18n import DEFAULT_LOCALE

TOKEN_BYTES = 32


def generate_profile_completion_token() -> str:
    """32 random bytes from the OS CSPRNG, hex encoded (64 characters)"""
    return secrets.token_hex(TOKEN_BYTES)


def build_profile_completion_link(
    token: str,
    locale: str = DEFAULT_LOCALE,
    base_url: Optional[str] = None
) -> str:
    """
    Build the onboarding link a guide follows to complete their profile

    Args:
        token: Completion token stored on the guide record
        locale: Route locale prefix
        base_url: Overrides the configured site URL
    """
    base = (base_url or get_settings().site_url).rstrip("/")
    return f"{base}/{locale}/onboarding/complete-profile?token={token}"
