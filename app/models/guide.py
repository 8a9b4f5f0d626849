"""
Guide Models
Guide profile as read from Supabase, plus its display-enriched form
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class PortfolioLink(BaseModel):
    """Titled link in a guide's itineraries or media gallery"""
    title: str = ""
    url: str = ""


class GuideProfile(BaseModel):
    """Guide profile joined with its base profile row"""
    id: str
    profile_id: str
    name: str
    headline: Optional[str] = None
    bio: Optional[str] = None
    country_code: Optional[str] = None
    languages: List[str] = Field(default_factory=list)
    specialties: List[str] = Field(default_factory=list)
    hourly_rate_cents: Optional[int] = None
    currency: Optional[str] = None
    years_experience: Optional[int] = None
    response_time_minutes: Optional[int] = None
    verified: bool = False
    activated: bool = False
    is_featured: bool = False
    experience_summary: Optional[str] = None
    sample_itineraries: List[PortfolioLink] = Field(default_factory=list)
    media_gallery: List[PortfolioLink] = Field(default_factory=list)
    availability_notes: Optional[str] = None
    avatar_url: Optional[str] = None
    license_number: Optional[str] = None
    application_data: Dict = Field(default_factory=dict)


class FormattedGuideProfile(BaseModel):
    """Guide profile with human-readable locale labels"""
    profile: GuideProfile
    country_label: Optional[str] = None
    language_labels: List[str] = Field(default_factory=list)


class CompletionLink(BaseModel):
    """Issued profile completion link"""
    profile_id: str
    token: str
    link: str
