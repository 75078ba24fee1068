"""Shared fixtures for unit tests."""

from typing import Any

import pytest

from detabase import Detabase, DetabaseKV

from tests.fakes.fake_base import FakeBase

PROJECT_ID = "a0abcyxz"
BASE_NAME = "users"
API_KEY = "a0abcyxz_secret"


@pytest.fixture
def fake_base() -> FakeBase:
    """Provide an empty in-memory base for each test."""
    return FakeBase(PROJECT_ID, BASE_NAME, API_KEY)


@pytest.fixture
def db(fake_base: FakeBase) -> Detabase[dict[str, Any]]:
    """Provide a Detabase client wired to the fake base."""
    return Detabase(
        project_id=PROJECT_ID, base_name=BASE_NAME, api_key=API_KEY, transport=fake_base.transport
    )


@pytest.fixture
def kv(fake_base: FakeBase) -> DetabaseKV[Any]:
    """Provide a DetabaseKV wired to the fake base."""
    return DetabaseKV(
        project_id=PROJECT_ID, base_name=BASE_NAME, api_key=API_KEY, transport=fake_base.transport
    )
