"""
Pytest fixtures for the guide validator web service
"""

from types import SimpleNamespace
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from app.utils.page_cache import InMemoryPageCache
from app.utils.supabase_client import SupabaseClient


class FakeQuery:
    """Stands in for a postgrest query builder: every builder call chains"""

    def __init__(self, data: Any = None, count: Optional[int] = None, error: Optional[Exception] = None):
        self.data = data
        self.count = count
        self.error = error
        self.calls: List[tuple] = []

    def __getattr__(self, name):
        def builder(*args, **kwargs):
            self.calls.append((name, args, kwargs))
            return self
        return builder

    def execute(self):
        self.calls.append(("execute", (), {}))
        if self.error:
            raise self.error
        return SimpleNamespace(data=self.data, count=self.count)

    def called(self, name: str) -> List[tuple]:
        return [call for call in self.calls if call[0] == name]


@pytest.fixture
def tables() -> Dict[str, FakeQuery]:
    """Per-table fake queries, filled in by each test"""
    return {}


@pytest.fixture
def service_client(tables):
    """Mock service-role supabase-py client"""
    client = MagicMock()
    client.table.side_effect = lambda name: tables.setdefault(name, FakeQuery(data=[]))
    client.auth.admin.get_user_by_id.return_value = SimpleNamespace(user=SimpleNamespace(id="profile-1"))
    return client


@pytest.fixture
def mock_supabase(service_client):
    """Mock SupabaseClient wrapper"""
    supabase = MagicMock(spec=SupabaseClient)
    supabase.get_service_client.return_value = service_client
    supabase.is_available.return_value = True
    supabase.sign_out = AsyncMock(return_value=None)
    return supabase


@pytest.fixture
def page_cache():
    return InMemoryPageCache()


@pytest.fixture
def sample_guide_row() -> Dict[str, Any]:
    """Guide row as returned by the guides/profiles join"""
    return {
        "id": "guide-1",
        "profile_id": "profile-1",
        "name": "Jane Doe",
        "headline": "Alpine hiking guide",
        "bio": "Twenty years in the Alps.",
        "specialties": ["hiking", "history"],
        "spoken_languages": ['"en"', " 'fr' ", "xx-unknown"],
        "hourly_rate_cents": 4500,
        "currency": "EUR",
        "years_experience": 20,
        "response_time_minutes": 60,
        "experience_summary": None,
        "sample_itineraries": '[{"title": "Mont Blanc loop", "url": "https://example.com/loop"}]',
        "media_gallery": "not json",
        "availability_notes": "Weekends only",
        "avatar_url": None,
        "image_url": "https://vhqzmunorymtoisijiqb.supabase.co/storage/v1/object/public/profile-photos/jane.jpg",
        "license_number": "LIC-42",
        "application_data": {"imported_from": "guides_staging"},
        "profiles": {
            "id": "profile-1",
            "full_name": "Jane Q. Doe",
            "country_code": "DE",
            "verified": True,
            "avatar_url": None,
        },
    }


@pytest.fixture
def client(mock_supabase, page_cache):
    """Test client with Supabase and the page cache replaced"""
    from app.main import app
    from app.utils.dependencies import get_page_cache
    from app.utils.supabase_client import get_supabase_client

    app.dependency_overrides[get_supabase_client] = lambda: mock_supabase
    app.dependency_overrides[get_page_cache] = lambda: page_cache

    with TestClient(app, raise_server_exceptions=False, follow_redirects=False) as test_client:
        yield test_client

    app.dependency_overrides.clear()
