"""Shared fixtures for deepl-client tests."""

import pytest

from deepl_client import DeepL


API_KEY = "deepl_test_0000-0000:fx"
BASE_URL = "https://api.test.deepl.com"


@pytest.fixture(autouse=True)
def deepl_env(monkeypatch):
    """Every test starts with a known key and no base-URL override."""
    monkeypatch.setenv("DEEPL_API_KEY", API_KEY)
    monkeypatch.delenv("DEEPL_API_URL", raising=False)


@pytest.fixture
def client(httpx_mock):
    """Sync client pointing at the mock transport."""
    with DeepL(BASE_URL) as c:
        yield c

