"""
Profile Service
Guide profile reads, completion tokens and home page metrics via Supabase
"""

import json
from typing import Any, Dict, List, Optional

import structlog

from app.models.guide import CompletionLink, GuideProfile, PortfolioLink
from app.utils.supabase_client import SupabaseClient
from app.utils.tokens import build_profile_completion_link, generate_profile_completion_token

logger = structlog.get_logger(__name__)

GUIDE_COLUMNS = (
    "id, profile_id, name, headline, bio, specialties, spoken_languages, "
    "hourly_rate_cents, currency, years_experience, response_time_minutes, "
    "experience_summary, sample_itineraries, media_gallery, availability_notes, "
    "avatar_url, image_url, license_number, application_data, "
    "profiles!inner(id, full_name, country_code, verified, avatar_url)"
)

PREMIUM_PLAN_CODES = ["guide_premium_monthly", "guide_premium_yearly"]
PROFESSIONAL_ROLES = ["guide", "agency", "dmc", "transport"]
COVERAGE_TABLES = ["guide_countries", "dmc_countries", "transport_countries"]


def _parse_links(raw: Any, field: str) -> List[PortfolioLink]:
    """Parse a JSON text column of {title, url} objects; bad data yields []"""
    if not raw:
        return []
    try:
        items = json.loads(raw) if isinstance(raw, str) else raw
        return [PortfolioLink(**item) for item in items]
    except (ValueError, TypeError) as e:
        logger.error("Failed to parse portfolio field", field=field, error=str(e))
        return []


def _response_data(response) -> Any:
    # maybe_single() yields no response object at all when nothing matches
    return response.data if response is not None else None


class ProfileService:
    """Guide profile data access"""

    def __init__(self, supabase: SupabaseClient):
        self.supabase = supabase

    def _build_profile(self, row: Dict[str, Any], activated: bool, is_featured: bool) -> GuideProfile:
        profile_data = row.get("profiles") or {}

        return GuideProfile(
            id=row["id"],
            profile_id=row["profile_id"],
            name=row.get("name") or profile_data.get("full_name") or "Guide",
            headline=row.get("headline"),
            bio=row.get("bio"),
            country_code=profile_data.get("country_code"),
            languages=row.get("spoken_languages") or [],
            specialties=row.get("specialties") or [],
            hourly_rate_cents=row.get("hourly_rate_cents"),
            currency=row.get("currency"),
            years_experience=row.get("years_experience"),
            response_time_minutes=row.get("response_time_minutes"),
            verified=bool(profile_data.get("verified")),
            activated=activated,
            is_featured=is_featured,
            experience_summary=row.get("experience_summary"),
            sample_itineraries=_parse_links(row.get("sample_itineraries"), "sample_itineraries"),
            media_gallery=_parse_links(row.get("media_gallery"), "media_gallery"),
            availability_notes=row.get("availability_notes"),
            avatar_url=row.get("image_url") or profile_data.get("avatar_url") or row.get("avatar_url"),
            license_number=row.get("license_number"),
            application_data=row.get("application_data") or {},
        )

    def _is_activated(self, profile_id: str) -> bool:
        """A profile is activated once an auth user exists for it"""
        client = self.supabase.get_service_client()
        try:
            response = client.auth.admin.get_user_by_id(profile_id)
        except Exception as e:
            logger.info("No auth user for profile", profile_id=profile_id, error=str(e))
            return False
        return bool(response and response.user)

    def _is_featured(self, profile_id: str) -> bool:
        client = self.supabase.get_service_client()
        try:
            response = (
                client.table("subscriptions")
                .select("id, plan_code, status")
                .eq("profile_id", profile_id)
                .in_("plan_code", PREMIUM_PLAN_CODES)
                .eq("status", "active")
                .limit(1)
                .execute()
            )
        except Exception as e:
            logger.warning("Premium subscription lookup failed", profile_id=profile_id, error=str(e))
            return False
        return bool(_response_data(response))

    async def fetch_guide_profile(self, guide_id: str) -> Optional[GuideProfile]:
        """
        Fetch a guide profile by guide id

        Args:
            guide_id: Guide row id

        Returns:
            GuideProfile or None when missing or the query fails
        """
        client = self.supabase.get_service_client()

        try:
            response = (
                client.table("guides")
                .select(GUIDE_COLUMNS)
                .eq("id", guide_id)
                .maybe_single()
                .execute()
            )
        except Exception as e:
            logger.error("Failed to fetch guide profile", guide_id=guide_id, error=str(e))
            return None

        row = _response_data(response)
        if not row:
            return None

        profile_id = row["profile_id"]
        return self._build_profile(
            row,
            activated=self._is_activated(profile_id),
            is_featured=self._is_featured(profile_id),
        )

    async def find_guide_by_completion_token(self, token: str) -> Optional[GuideProfile]:
        """Look up the guide whose application data carries this completion token"""
        client = self.supabase.get_service_client()
        response = (
            client.table("guides")
            .select(GUIDE_COLUMNS)
            .eq("application_data->>profile_completion_token", token)
            .limit(1)
            .execute()
        )

        if not response.data:
            return None

        row = response.data[0]
        return self._build_profile(row, activated=False, is_featured=False)

    async def issue_completion_link(self, profile_id: str, locale: str) -> Optional[CompletionLink]:
        """
        Generate a completion token for a guide, persist it and build the link

        Returns:
            CompletionLink, or None when the guide does not exist
        """
        client = self.supabase.get_service_client()
        response = (
            client.table("guides")
            .select("profile_id, application_data")
            .eq("profile_id", profile_id)
            .maybe_single()
            .execute()
        )

        row = _response_data(response)
        if not row:
            return None

        token = generate_profile_completion_token()
        application_data = {**(row.get("application_data") or {}), "profile_completion_token": token}

        client.table("guides").update(
            {"application_data": application_data}
        ).eq("profile_id", profile_id).execute()

        logger.info("Profile completion token issued", profile_id=profile_id)

        return CompletionLink(
            profile_id=profile_id,
            token=token,
            link=build_profile_completion_link(token, locale),
        )

    async def fetch_home_metrics(self) -> Dict[str, int]:
        """
        Verified professional count and number of covered countries

        A failed query is logged and contributes nothing.
        """
        client = self.supabase.get_service_client()
        verified = 0

        try:
            response = (
                client.table("profiles")
                .select("id", count="exact", head=True)
                .eq("verified", True)
                .in_("role", PROFESSIONAL_ROLES)
                .execute()
            )
            verified = response.count or 0
        except Exception as e:
            logger.error("Failed to load verified profiles count", error=str(e))

        countries = set()
        for table in COVERAGE_TABLES:
            try:
                response = client.table(table).select("country_code").execute()
            except Exception as e:
                logger.error("Failed to load country coverage", table=table, error=str(e))
                continue
            countries.update(row["country_code"] for row in response.data or [] if row.get("country_code"))

        return {"verified_professionals": verified, "covered_countries": len(countries)}
