"""
Pydantic schemas for spell-check functionality.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WordlistEntry(BaseModel):
    """One word of the source word list with its optional frequency."""

    model_config = ConfigDict(frozen=True)

    word: str = Field(description="Word as it appears in the word list")
    frequency: int = Field(default=1, ge=1, description="Ranking weight (>= 1)")

    @field_validator("word")
    @classmethod
    def validate_word(cls, v: str) -> str:
        """Strip surrounding whitespace; reject empty and multi-word entries."""
        v = v.strip()
        if not v:
            raise ValueError("Word cannot be empty")
        if any(ch.isspace() for ch in v):
            raise ValueError("Word cannot contain whitespace")
        return v

    @field_validator("frequency", mode="before")
    @classmethod
    def default_missing_frequency(cls, v):
        """Treat a null frequency as the default weight."""
        return 1 if v is None else v


class SpellingIssue(BaseModel):
    """A spelling issue with its position and suggested corrections."""

    word: str = Field(description="Misspelled token as it appears in the text")
    start: int = Field(ge=0, description="Start offset (inclusive, code points)")
    end: int = Field(ge=0, description="End offset (exclusive, code points)")
    suggestions: List[str] = Field(description="Suggested corrections ordered by relevance")


class TextStats(BaseModel):
    """Counts shown next to the checked text."""

    word_count: int
    char_count: int
    error_count: int


class CheckRequest(BaseModel):
    """Request body for checking a text."""

    text: str = Field(description="Text to check")


class CheckResponse(BaseModel):
    """Result of checking a text."""

    issues: List[SpellingIssue]
    stats: TextStats
    dictionary_empty: bool = Field(
        default=False,
        description="True when no dictionary words are loaded (every token is reported)"
    )


class SuggestRequest(BaseModel):
    """Request body for suggesting corrections for a single word."""

    word: str = Field(min_length=1)
    limit: Optional[int] = Field(default=None, ge=0, le=50, description="Max suggestions (default from config)")


class SuggestResponse(BaseModel):
    """Suggestions for a single word."""

    word: str
    suggestions: List[str]


class ValidityResponse(BaseModel):
    """Dictionary membership of a single word."""

    word: str
    valid: bool


class PersonalDictionaryRequest(BaseModel):
    """Words to add to the personal dictionary."""

    words: List[str] = Field(description="Words to add; existing words are ignored")


class PersonalDictionaryResponse(BaseModel):
    """Current personal dictionary."""

    words: List[str]
    count: int
    added: int = 0


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="healthy, degraded (empty dictionary)")
    dictionary_words: int
    personal_words: int
    timestamp: datetime
