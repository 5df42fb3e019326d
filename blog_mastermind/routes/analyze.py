import logging
from typing import Callable

from fastapi import APIRouter, Depends, HTTPException

from blog_mastermind.core.api_key_store import ApiKeyStore
from blog_mastermind.core.config import OPENROUTER_API_KEY, SEARCH_RESULT_COUNT
from blog_mastermind.schemas.analysis import AnalysisResult, AnalyzeRequest
from blog_mastermind.services.openai_service import run_topic_analysis
from blog_mastermind.utils.deps import (
    get_api_key_store,
    get_llm_client_factory,
    get_search_client_factory,
)

logger = logging.getLogger(__name__)
router = APIRouter(tags=["analysis"])


@router.post("/analyze", response_model=AnalysisResult)
def analyze_topic(
    req: AnalyzeRequest,
    store: ApiKeyStore = Depends(get_api_key_store),
    search_client_factory: Callable = Depends(get_search_client_factory),
    llm_client_factory: Callable = Depends(get_llm_client_factory),
):
    """
    Analyze a blog topic against its top search results.

    1. Searches the web for the topic
    2. Sends the results to the LLM with the analysis prompt
    3. Returns the validated five-field analysis
    """
    topic = (req.topic or "").strip()
    if not topic:
        raise HTTPException(status_code=400, detail="Topic is required")

    # User-provided key wins over the default from the environment
    api_key = store.get() or OPENROUTER_API_KEY

    try:
        search_results = search_client_factory().top_results(topic, num=SEARCH_RESULT_COUNT)
        logger.info(f"Analyzing {topic!r} with {len(search_results)} search results")

        client = llm_client_factory(api_key)
        analysis = run_topic_analysis(client, topic, search_results)
    except Exception as e:
        logger.error(f"Analysis error for {topic!r}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to analyze topic. Please try again.")

    return analysis["result"]
