"""
Page Routes
Locale-prefixed HTML pages: home, guide profile, profile completion
"""

from typing import Optional

import structlog
from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from app.services.auth_service import ACCESS_TOKEN_COOKIE
from app.services.profile_formatter import format_guide_profile, format_hourly_rate
from app.utils.dependencies import PageCacheDep, ProfileServiceDep, SettingsDep
from app.utils.i18n import DEFAULT_LOCALE, is_supported_locale
from app.utils.templates import render_page

logger = structlog.get_logger(__name__)

router = APIRouter()


def _require_locale(locale: str) -> str:
    if not is_supported_locale(locale):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Page not found")
    return locale


def _is_signed_in(request: Request) -> bool:
    return bool(request.cookies.get(ACCESS_TOKEN_COOKIE))


@router.get("/", include_in_schema=False)
async def root_redirect():
    """Send visitors without a locale prefix to the default locale"""
    return RedirectResponse(url=f"/{DEFAULT_LOCALE}", status_code=status.HTTP_307_TEMPORARY_REDIRECT)


@router.get("/{locale}", response_class=HTMLResponse)
async def home_page(
    locale: str,
    request: Request,
    profiles: ProfileServiceDep,
    page_cache: PageCacheDep,
    settings: SettingsDep
):
    """
    Locale home page

    Anonymous renders are cached by path until revalidated or expired.
    """
    locale = _require_locale(locale)
    path = request.url.path
    signed_in = _is_signed_in(request)

    if not signed_in:
        cached = await page_cache.get(path)
        if cached is not None:
            return HTMLResponse(cached)

    metrics = await profiles.fetch_home_metrics()
    html = render_page("home.html", locale, metrics=metrics, signed_in=signed_in)

    if not signed_in:
        await page_cache.set(path, html, settings.page_cache_ttl_seconds)

    return HTMLResponse(html)


@router.get("/{locale}/profiles/guide/{guide_id}", response_class=HTMLResponse)
async def guide_profile_page(
    locale: str,
    guide_id: str,
    request: Request,
    profiles: ProfileServiceDep
):
    """Public guide profile"""
    locale = _require_locale(locale)
    signed_in = _is_signed_in(request)

    profile = await profiles.fetch_guide_profile(guide_id)
    if profile is None:
        html = render_page("profile_not_found.html", locale, signed_in=signed_in)
        return HTMLResponse(html, status_code=status.HTTP_404_NOT_FOUND)

    formatted = format_guide_profile(profile, locale)
    location = formatted.country_label or (profile.country_code.upper() if profile.country_code else "--")
    rate = format_hourly_rate(profile.hourly_rate_cents, profile.currency, locale) or "--"

    html = render_page(
        "guide_profile.html",
        locale,
        profile=profile,
        formatted=formatted,
        location=location,
        rate=rate,
        signed_in=signed_in,
    )
    return HTMLResponse(html)


@router.get("/{locale}/onboarding/complete-profile", response_class=HTMLResponse)
async def complete_profile_page(
    locale: str,
    request: Request,
    profiles: ProfileServiceDep,
    token: Optional[str] = None
):
    """Landing page for a profile completion link"""
    locale = _require_locale(locale)
    signed_in = _is_signed_in(request)

    if not token:
        html = render_page("complete_profile.html", locale, state="invalid", guide=None, signed_in=signed_in)
        return HTMLResponse(html, status_code=status.HTTP_400_BAD_REQUEST)

    guide = await profiles.find_guide_by_completion_token(token)
    if guide is None:
        logger.info("Unknown profile completion token")
        html = render_page("complete_profile.html", locale, state="not_found", guide=None, signed_in=signed_in)
        return HTMLResponse(html, status_code=status.HTTP_404_NOT_FOUND)

    formatted = format_guide_profile(guide, locale)
    html = render_page(
        "complete_profile.html",
        locale,
        state="ready",
        guide=guide,
        language_labels=formatted.language_labels,
        signed_in=signed_in,
    )
    return HTMLResponse(html)
