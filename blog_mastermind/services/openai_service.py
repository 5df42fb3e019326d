import logging
from typing import Any, Dict, List, Sequence

from blog_mastermind.core.config import (
    OPENROUTER_APP_NAME,
    OPENROUTER_BASE_URL,
    OPENROUTER_MODEL,
    OPENROUTER_SITE_URL,
)
from blog_mastermind.schemas.analysis import SearchResult
from blog_mastermind.services.analysis import build_analysis_prompt, parse_analysis_response
from blog_mastermind.utils.prompts import ANALYSIS_SYSTEM_PROMPT, API_KEY_TEST_PROMPT

logger = logging.getLogger(__name__)


def get_openai_client(api_key: str):
    """Build an OpenAI SDK client that talks to OpenRouter with ``api_key``.

    A fresh client per key, since the key can change between requests.
    """
    if not api_key:
        raise RuntimeError("No OpenRouter API key configured")

    # Lazy import OpenAI
    from openai import OpenAI

    headers = {}
    if OPENROUTER_SITE_URL:
        headers["HTTP-Referer"] = OPENROUTER_SITE_URL
    if OPENROUTER_APP_NAME:
        headers["X-Title"] = OPENROUTER_APP_NAME

    return OpenAI(api_key=api_key, base_url=OPENROUTER_BASE_URL, default_headers=headers)


def _usage(response) -> Dict[str, int]:
    return {
        "prompt_tokens": getattr(getattr(response, "usage", None), "prompt_tokens", 0),
        "completion_tokens": getattr(getattr(response, "usage", None), "completion_tokens", 0),
        "total_tokens": getattr(getattr(response, "usage", None), "total_tokens", 0),
    }


def _first_content(response) -> str:
    if not response.choices:
        raise RuntimeError("OpenAI returned no choices")
    content = response.choices[0].message.content
    if not content:
        raise RuntimeError("No response from LLM")
    return content


def run_topic_analysis(client, topic: str, search_results: Sequence[SearchResult]) -> Dict[str, Any]:
    """Run the SEO analysis prompt for ``topic`` against the search results.

    Returns dict with the validated AnalysisResult and usage metrics.
    Raises RuntimeError when the completion call fails or comes back empty,
    ValueError when the reply does not parse into the five-field record.
    """
    prompt = build_analysis_prompt(topic, search_results)
    messages: List[Dict[str, str]] = [
        {"role": "system", "content": ANALYSIS_SYSTEM_PROMPT},
        {"role": "user", "content": prompt},
    ]

    try:
        response = client.chat.completions.create(
            model=OPENROUTER_MODEL,
            temperature=0.7,
            max_tokens=2000,
            messages=messages,
        )
    except Exception as e:
        raise RuntimeError(f"OpenRouter API request failed: {e}")

    content = _first_content(response)
    usage = _usage(response)
    logger.info(f"Topic analysis for {topic!r} used {usage['total_tokens']} tokens ({OPENROUTER_MODEL})")

    return {"result": parse_analysis_response(content), "usage": usage}


def check_api_key(client) -> str:
    """Make a trivial completion to prove the client's key works.

    Returns the model's reply; raises RuntimeError if the call fails or the
    reply is empty.
    """
    try:
        response = client.chat.completions.create(
            model=OPENROUTER_MODEL,
            max_tokens=10,
            messages=[{"role": "user", "content": API_KEY_TEST_PROMPT}],
        )
    except Exception as e:
        raise RuntimeError(f"OpenRouter API request failed: {e}")

    return _first_content(response)
