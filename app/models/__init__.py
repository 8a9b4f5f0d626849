"""
Data models for the guide validator web service
"""

from .guide import CompletionLink, FormattedGuideProfile, GuideProfile, PortfolioLink

__all__ = [
    "CompletionLink",
    "FormattedGuideProfile",
    "GuideProfile",
    "PortfolioLink"
]
