"""
Remote image allowlist
Only public objects from the Supabase storage host may be embedded
"""

from typing import Optional
from urllib.parse import urlparse

from app.config import get_settings

PUBLIC_STORAGE_PREFIX = "/storage/v1/object/public/"


def is_allowed_image_url(url: Optional[str], storage_host: Optional[str] = None) -> bool:
    if not url:
        return False

    parsed = urlparse(url)
    host = storage_host or get_settings().supabase_storage_host

    return (
        parsed.scheme == "https"
        and parsed.hostname == host
        and parsed.path.startswith(PUBLIC_STORAGE_PREFIX)
        and len(parsed.path) > len(PUBLIC_STORAGE_PREFIX)
    )
