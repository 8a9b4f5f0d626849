"""
Routes for the guide validator web service
"""

from . import admin, auth, health, pages

__all__ = ["admin", "auth", "health", "pages"]
