"""
Shared fixtures for the Semantic Blog Mastermind test suite.

Search and LLM clients are replaced with mocks through FastAPI dependency
overrides so no test reaches Serper or OpenRouter.
"""

import json
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from blog_mastermind.core.api_key_store import ApiKeyStore
from blog_mastermind.main import app
from blog_mastermind.schemas.analysis import SearchResult
from blog_mastermind.utils.deps import get_llm_client_factory, get_search_client_factory


VALID_KEY = "sk-or-v1-0123456789abcdefWXYZ"

SAMPLE_ANALYSIS = {
    "seoBlogOutline": [
        "Remote Work Productivity: The Complete Guide",
        "Why productivity slips when teams go remote",
        "Setting up a focused home workspace",
    ],
    "semanticEntities": ["remote work", "asynchronous communication", "time blocking"],
    "contentGaps": ["Productivity for caregivers working from home"],
    "userIntentTypes": ["Informational intent", "Commercial intent"],
    "suggestedInternalTopics": ["Best tools for remote teams", "How to run async standups"],
}


def make_completion(content):
    """Build an object shaped like an OpenAI chat completion response."""
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
        usage=SimpleNamespace(prompt_tokens=120, completion_tokens=80, total_tokens=200),
    )


@pytest.fixture
def search_results():
    return [
        SearchResult(
            name="10 Remote Work Productivity Tips",
            url="https://www.example.com/remote-tips",
            snippet="Stay focused while working from home.",
            host_name="example.com",
        ),
        SearchResult(
            name="Remote Work Guide",
            url="https://blog.example.org/guide",
            snippet="Everything about remote work.",
            host_name="blog.example.org",
        ),
    ]


@pytest.fixture
def search_client(search_results):
    mock = MagicMock()
    mock.top_results.return_value = search_results
    return mock


@pytest.fixture
def llm_client():
    mock = MagicMock()
    mock.chat.completions.create.return_value = make_completion(json.dumps(SAMPLE_ANALYSIS))
    return mock


@pytest.fixture
def llm_factory(llm_client):
    """Stand-in for ``api_key -> client``; records which key was used."""
    return MagicMock(return_value=llm_client)


@pytest.fixture
def api_key_store():
    store = ApiKeyStore()
    original = app.state.api_key_store
    app.state.api_key_store = store
    yield store
    app.state.api_key_store = original


@pytest.fixture
def client(api_key_store, search_client, llm_factory):
    app.dependency_overrides[get_search_client_factory] = lambda: (lambda: search_client)
    app.dependency_overrides[get_llm_client_factory] = lambda: llm_factory
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
