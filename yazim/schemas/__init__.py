"""
Pydantic schemas for API request/response models.
"""
from yazim.schemas.spellcheck import (
    WordlistEntry,
    SpellingIssue,
    TextStats,
    CheckRequest,
    CheckResponse,
    SuggestRequest,
    SuggestResponse,
    ValidityResponse,
    PersonalDictionaryRequest,
    PersonalDictionaryResponse,
    HealthResponse,
)

__all__ = [
    "WordlistEntry",
    "SpellingIssue",
    "TextStats",
    "CheckRequest",
    "CheckResponse",
    "SuggestRequest",
    "SuggestResponse",
    "ValidityResponse",
    "PersonalDictionaryRequest",
    "PersonalDictionaryResponse",
    "HealthResponse",
]
