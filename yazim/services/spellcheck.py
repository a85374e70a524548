"""
Spell-check service factory.
"""
from typing import Optional

from yazim.services.personal_dictionary import PersonalDictionaryStore
from yazim.services.spellcheck_base import WordlistSourceError
from yazim.services.spellcheck_turkish import TurkishSpellCheckService
from yazim.services.wordlist_source import WordlistSource
from yazim.utils.logger import get_logger

logger = get_logger("services.spellcheck")


async def create_turkish_spellcheck_service(
    source: Optional[WordlistSource] = None,
    store: Optional[PersonalDictionaryStore] = None,
) -> Optional[TurkishSpellCheckService]:
    """
    Build a Turkish spell-check service with its dictionary loaded.

    Called during app startup. The caller owns the returned instance
    (the app keeps it on ``app.state``).

    Args:
        source: Word list source (default: configured file/URL/cache)
        store: Personal dictionary store (default: configured path)

    Returns:
        Loaded TurkishSpellCheckService, or None if no word list was available
    """
    source = source or WordlistSource()
    store = store or PersonalDictionaryStore()

    logger.info("Initializing Turkish spell-check service...")

    try:
        entries = await source.fetch_entries()
    except WordlistSourceError as e:
        logger.warning("Failed to obtain Turkish word list", error=str(e))
        return None

    service = TurkishSpellCheckService()
    report = service.load(entries)
    added = service.merge_overlay(store.load())

    logger.info(
        "Turkish spell-check service initialized successfully",
        words=report.loaded,
        skipped=report.skipped,
        personal_words=added,
    )
    return service
