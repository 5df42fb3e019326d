import json
import logging
import re
from typing import Any, Dict, List, Sequence, Union

from pydantic import ValidationError

from blog_mastermind.schemas.analysis import AnalysisResult, SearchResult
from blog_mastermind.utils.prompts import TOPIC_ANALYSIS_PROMPT

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    "seoBlogOutline",
    "semanticEntities",
    "contentGaps",
    "userIntentTypes",
    "suggestedInternalTopics",
)

# Accepts ```json in any case as well as a bare ``` opening fence
_LEADING_FENCE = re.compile(r"^```(?:json)?[ \t]*\n?", re.IGNORECASE)
_TRAILING_FENCE = re.compile(r"\n?```$")
_PLACEHOLDER = re.compile(r"\{(topic|result_count|search_results)\}")


def format_search_results(results: Sequence[Union[SearchResult, Dict[str, Any]]]) -> str:
    """Render search results as numbered blocks for the analysis prompt."""
    blocks: List[str] = []
    for index, result in enumerate(results, start=1):
        if isinstance(result, dict):
            result = SearchResult(**result)
        blocks.append(
            f"{index}. Title: {result.name}\n"
            f"   URL: {result.url}\n"
            f"   Description: {result.snippet}\n"
            f"   Host: {result.host_name}"
        )
    return "\n\n".join(blocks)


def build_analysis_prompt(topic: str, results: Sequence[Union[SearchResult, Dict[str, Any]]]) -> str:
    # Single pass, so placeholder text inside the topic or results is left as typed
    values = {
        "topic": topic,
        "result_count": str(len(results)),
        "search_results": format_search_results(results),
    }
    return _PLACEHOLDER.sub(lambda m: values[m.group(1)], TOPIC_ANALYSIS_PROMPT)


def strip_code_fences(content: str) -> str:
    """Remove a surrounding ```json ... ``` fence if the model added one."""
    cleaned = content.strip()
    cleaned = _LEADING_FENCE.sub("", cleaned, count=1)
    cleaned = _TRAILING_FENCE.sub("", cleaned, count=1)
    return cleaned.strip()


def parse_analysis_response(content: str) -> AnalysisResult:
    """Parse a model reply into an AnalysisResult.

    Raises ValueError when the reply is not JSON or when any of the five
    fields is missing or is not a list of strings. A partially valid reply
    is never returned.
    """
    cleaned = strip_code_fences(content or "")
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse LLM response: {(content or '')[:500]}")
        raise ValueError(f"Failed to parse analysis results: {e}")

    if not isinstance(data, dict):
        raise ValueError("Invalid analysis results: expected a JSON object")

    try:
        return AnalysisResult.model_validate(data)
    except ValidationError as e:
        errors = e.errors()
        loc = errors[0].get("loc") if errors else ()
        field = loc[0] if loc else "response"
        raise ValueError(f"Invalid or missing field: {field}")
