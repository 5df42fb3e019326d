# blog_mastermind/schemas/analysis.py

from pydantic import BaseModel
from typing import List, Optional


class SearchResult(BaseModel):
    name: str = ""
    url: str = ""
    snippet: str = ""
    host_name: str = ""


class AnalyzeRequest(BaseModel):
    topic: Optional[str] = None


class AnalysisResult(BaseModel):
    seoBlogOutline: List[str]
    semanticEntities: List[str]
    contentGaps: List[str]
    userIntentTypes: List[str]
    suggestedInternalTopics: List[str]


class ApiKeyRequest(BaseModel):
    apiKey: Optional[str] = None


class ApiKeyStatus(BaseModel):
    hasKey: bool
    keyPreview: Optional[str] = None
