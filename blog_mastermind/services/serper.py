import os
import requests
import json
import logging
from typing import List, Optional, Dict, Any
from urllib.parse import urlparse

from blog_mastermind.schemas.analysis import SearchResult

logger = logging.getLogger(__name__)

SERPER_ENDPOINT = "https://google.serper.dev/search"


def _host_name(url: str) -> str:
    try:
        host = (urlparse(url).hostname or "").lower().lstrip(".")
    except ValueError:
        return ""
    if host.startswith("www."):
        host = host[4:]
    return host


class SerperClient:
    def __init__(self, api_key: Optional[str] = None):
        self.api_key = api_key or os.environ.get("SERPER_API_KEY")
        if not self.api_key:
            raise ValueError("SERPER_API_KEY is not set in environment")

    def search(self, q: str, num: int = 10, gl: Optional[str] = None, hl: Optional[str] = None) -> Dict[str, Any]:
        headers = {
            "X-API-KEY": self.api_key,
            "Content-Type": "application/json",
        }
        payload: Dict[str, Any] = {"q": q, "num": num}
        if gl:
            payload["gl"] = gl
        if hl:
            payload["hl"] = hl

        logger.debug(f"Payload sent to Serper: {json.dumps(payload)}")
        resp = requests.post(SERPER_ENDPOINT, json=payload, headers=headers, timeout=20)
        resp.raise_for_status()
        result = resp.json()
        organic_count = len(result.get("organic", []))
        logger.debug(f"Serper returned {organic_count} organic results for {q!r}")

        return result

    def top_results(self, q: str, num: int = 10) -> List[SearchResult]:
        """Top organic results for ``q`` in the shape the analysis prompt expects."""
        data = self.search(q=q, num=num)
        items = data.get("organic")
        if not isinstance(items, list):
            logger.warning(f"Serper response for {q!r} had no organic results")
            return []

        results: List[SearchResult] = []
        for item in items[:num]:
            url = item.get("link") or item.get("url") or ""
            results.append(
                SearchResult(
                    name=item.get("title") or "",
                    url=url,
                    snippet=item.get("snippet") or "",
                    host_name=_host_name(url),
                )
            )
        return results
