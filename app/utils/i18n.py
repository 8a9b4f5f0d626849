"""
Locale utilities
Supported-locale allowlist and JSON message catalogs
"""

import json
import os
from functools import lru_cache
from typing import Any, Dict, Optional

import structlog

logger = structlog.get_logger(__name__)

SUPPORTED_LOCALES = ("en", "fr", "es", "de")
DEFAULT_LOCALE = "en"

LOCALES_DIR = os.path.join(os.path.dirname(__file__), "..", "locales")


def is_supported_locale(value: Optional[str]) -> bool:
    """Exact membership check against the allowlist"""
    return value in SUPPORTED_LOCALES


def resolve_locale(value: Optional[str]) -> str:
    """Return the locale when supported, the default locale otherwise"""
    if is_supported_locale(value):
        return value
    return DEFAULT_LOCALE


def _load_catalog(locale: str) -> Dict[str, Any]:
    path = os.path.join(LOCALES_DIR, f"{locale}.json")
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        logger.warning("Message catalog missing", locale=locale)
        return {}


def _lookup(catalog: Dict[str, Any], key: str) -> Optional[str]:
    node: Any = catalog
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return node if isinstance(node, str) else None


class Translator:
    """Dotted-key message lookup with fallback to the default locale"""

    def __init__(self, locale: str, catalog: Dict[str, Any], fallback: Optional[Dict[str, Any]] = None):
        self.locale = locale
        self.catalog = catalog
        self.fallback = fallback or {}

    def t(self, key: str, **variables: Any) -> str:
        message = _lookup(self.catalog, key)
        if message is None:
            message = _lookup(self.fallback, key)
        if message is None:
            return key
        if not variables:
            return message
        try:
            return message.format(**variables)
        except (KeyError, IndexError) as e:
            logger.warning("Message placeholder not supplied", key=key, locale=self.locale, error=str(e))
            return message

    __call__ = t


@lru_cache(maxsize=None)
def get_translator(locale: str) -> Translator:
    """Cached translator for a locale (unsupported locales get the default)"""
    locale = resolve_locale(locale)
    fallback = None if locale == DEFAULT_LOCALE else _load_catalog(DEFAULT_LOCALE)
    return Translator(locale, _load_catalog(locale), fallback)
