from typing import Callable

from fastapi import HTTPException, Request

from blog_mastermind.core.api_key_store import ApiKeyStore
from blog_mastermind.core.config import API_KEY_MIN_LENGTH, API_KEY_PREFIX, SERPER_API_KEY
from blog_mastermind.services.openai_service import get_openai_client
from blog_mastermind.services.serper import SerperClient


def get_api_key_store(request: Request) -> ApiKeyStore:
    """FastAPI dependency returning the app's key store."""
    return request.app.state.api_key_store


def get_search_client_factory() -> Callable[[], SerperClient]:
    """FastAPI dependency returning a zero-arg factory for the search client.

    The client is built inside the handler so a missing SERPER_API_KEY is
    reported like any other search failure.
    """
    return lambda: SerperClient(api_key=SERPER_API_KEY)


def get_llm_client_factory() -> Callable[[str], object]:
    """FastAPI dependency returning ``api_key -> OpenAI client``."""
    return get_openai_client


def require_valid_api_key(api_key: str | None) -> str:
    """Boundary check for a submitted OpenRouter key; raises 400 on failure."""
    if not api_key:
        raise HTTPException(status_code=400, detail="API key is required")

    if not api_key.startswith(API_KEY_PREFIX):
        raise HTTPException(
            status_code=400,
            detail=f'Invalid OpenRouter API key format. Keys should start with "{API_KEY_PREFIX}"',
        )

    if len(api_key) < API_KEY_MIN_LENGTH:
        raise HTTPException(status_code=400, detail="API key is too short")

    return api_key
