"""
Tests for the remote image allowlist
"""

import pytest

from app.utils.images import is_allowed_image_url

HOST = "abc.supabase.co"


@pytest.mark.parametrize("url", [
    "https://abc.supabase.co/storage/v1/object/public/profile-photos/a.jpg",
    "https://abc.supabase.co/storage/v1/object/public/bucket/nested/b.png",
])
def test_public_storage_objects_are_allowed(url):
    assert is_allowed_image_url(url, storage_host=HOST)


@pytest.mark.parametrize("url", [
    None,
    "",
    "http://abc.supabase.co/storage/v1/object/public/profile-photos/a.jpg",
    "https://evil.example.com/storage/v1/object/public/profile-photos/a.jpg",
    "https://abc.supabase.co/storage/v1/object/sign/profile-photos/a.jpg",
    "https://abc.supabase.co/storage/v1/object/public/",
    "https://abc.supabase.co.evil.com/storage/v1/object/public/x.jpg",
])
def test_everything_else_is_rejected(url):
    assert not is_allowed_image_url(url, storage_host=HOST)
