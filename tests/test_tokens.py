"""
Tests for profile completion tokens and links
"""

import string
from types import SimpleNamespace
from unittest.mock import patch

from app.config import Settings
from app.utils.tokens import build_profile_completion_link, generate_profile_completion_token

HEX_DIGITS = set(string.hexdigits.lower())


class TestGenerateToken:
    def test_token_is_64_hex_characters(self):
        token = generate_profile_completion_token()
        assert len(token) == 64
        assert set(token) <= HEX_DIGITS

    def test_tokens_do_not_repeat(self):
        tokens = {generate_profile_completion_token() for _ in range(5000)}
        assert len(tokens) == 5000
        assert all(len(token) == 64 for token in tokens)


class TestBuildLink:
    def test_uses_configured_site_url(self):
        with patch("app.utils.tokens.get_settings", return_value=SimpleNamespace(site_url="https://guidevalidator.com")):
            link = build_profile_completion_link("abc123", "fr")

        assert link == "https://guidevalidator.com/fr/onboarding/complete-profile?token=abc123"

    def test_default_locale_and_explicit_base(self):
        link = build_profile_completion_link("abc123", base_url="https://staging.example.com/")
        assert link == "https://staging.example.com/en/onboarding/complete-profile?token=abc123"

    def test_site_url_falls_back_to_localhost(self, monkeypatch):
        monkeypatch.delenv("NEXT_PUBLIC_SITE_URL", raising=False)
        monkeypatch.delenv("SITE_URL", raising=False)
        settings = Settings(_env_file=None)
        assert settings.site_url == "http://localhost:3000"

    def test_site_url_read_from_public_env_variable(self, monkeypatch):
        monkeypatch.setenv("NEXT_PUBLIC_SITE_URL", "https://guidevalidator.com/")
        settings = Settings(_env_file=None)
        assert settings.site_url == "https://guidevalidator.com"
