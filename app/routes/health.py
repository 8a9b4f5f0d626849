"""
Health check routes for the web service
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request

from app.utils.supabase_client import SupabaseClient, get_supabase_client

router = APIRouter()


@router.get("/health")
async def health_check(
    request: Request,
    supabase: SupabaseClient = Depends(get_supabase_client)
):
    """Health check endpoint"""
    page_cache = getattr(request.app.state, "page_cache", None)

    return {
        "service": "guide-validator-web",
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "page_cache": page_cache.backend if page_cache else "not_initialized",
        "supabase": "configured" if supabase.is_available() else "not_configured",
        "version": "1.0.0"
    }
