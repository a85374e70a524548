"""
Pytest configuration and fixtures for spell-check service tests.
"""
import os
from typing import AsyncGenerator, List

import pytest
from httpx import AsyncClient, ASGITransport

# Set environment before importing Settings so the app never loads a real dictionary
os.environ.setdefault("SPELLCHECK_ENABLED", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from yazim.main import app
from yazim.services.personal_dictionary import PersonalDictionaryStore
from yazim.services.spellcheck_turkish import TurkishSpellCheckService


SAMPLE_WORDS: List[str] = [
    "merhaba", "dünya", "kitap", "kitaplar", "kalem", "ağaç", "çay", "cam",
    "çocuk", "güzel", "şehir", "ışık", "istanbul", "okul", "öğretmen", "ev",
    "göz", "söz", "kâr", "kar", "türkçe", "sözlük", "yazım", "deneme",
    "bilgisayar", "gelmek",
]


@pytest.fixture
def sample_words() -> List[str]:
    """Small Turkish word list used across tests."""
    return list(SAMPLE_WORDS)


@pytest.fixture
def spellcheck_service(sample_words) -> TurkishSpellCheckService:
    """Spell-check service loaded with the sample word list."""
    service = TurkishSpellCheckService(
        max_edit_distance=2,
        suggestion_count=5,
        min_word_length=1,
        overlay_weight=10,
        shuffle_insertion=False,
    )
    service.load(sample_words)
    return service


@pytest.fixture
def personal_store(tmp_path) -> PersonalDictionaryStore:
    """Personal dictionary store writing into a temporary directory."""
    return PersonalDictionaryStore(path=str(tmp_path / "personal" / "words.json"))


@pytest.fixture
async def client(spellcheck_service, personal_store) -> AsyncGenerator[AsyncClient, None]:
    """
    Async test client for the FastAPI application.

    The lifespan hook is not run by ASGITransport; the loaded sample
    service and temporary store are placed on app.state directly.
    """
    app.state.spellcheck_service = spellcheck_service
    app.state.personal_store = personal_store

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.state.spellcheck_service = None
    app.state.personal_store = None
