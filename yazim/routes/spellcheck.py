"""
API routes for spell-checking and the personal dictionary.

Routes are async and call the spell-check service inline, so every engine
call runs on the event loop thread; overlay merges never interleave with a
running check.
"""
from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from yazim.config import settings
from yazim.schemas.spellcheck import (
    CheckRequest,
    CheckResponse,
    PersonalDictionaryRequest,
    PersonalDictionaryResponse,
    SuggestRequest,
    SuggestResponse,
    ValidityResponse,
)
from yazim.services.personal_dictionary import PersonalDictionaryStore
from yazim.services.spellcheck_base import DictionaryNotLoadedError, InternalSearchFailure
from yazim.services.spellcheck_turkish import TurkishSpellCheckService
from yazim.utils.logger import get_logger
from yazim.utils.text_stats import build_text_stats

logger = get_logger("routes.spellcheck")

router = APIRouter()


def get_spellcheck_service(request: Request) -> TurkishSpellCheckService:
    """
    Get the loaded spell-check service from application state.

    Raises:
        HTTPException: 503 if spell-check is disabled or failed to load
    """
    service = getattr(request.app.state, "spellcheck_service", None)
    if service is None or not service.is_loaded():
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Spell-check dictionary is not loaded"
        )
    return service


def get_personal_store(request: Request) -> PersonalDictionaryStore:
    """Get the personal dictionary store from application state."""
    store = getattr(request.app.state, "personal_store", None)
    if store is None:
        store = PersonalDictionaryStore()
        request.app.state.personal_store = store
    return store


def _search_failed(e: InternalSearchFailure) -> HTTPException:
    logger.error("Suggestion search failed", word=e.word, error=e.message)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={"error": "internal_search_failure", "message": e.message}
    )


@router.post(
    "/spellcheck/check",
    response_model=CheckResponse,
    summary="Check text",
    description="Tokenize text and report every misspelled token with suggestions",
    responses={
        422: {"description": "Text too long"},
        500: {"description": "Suggestion search failed"},
        503: {"description": "Dictionary not loaded"}
    }
)
async def check_text(
    body: CheckRequest,
    service: TurkishSpellCheckService = Depends(get_spellcheck_service),
) -> CheckResponse:
    """
    Check a text buffer for spelling issues.

    Offsets are code-point indices into the submitted text, half-open
    [start, end), ready for range replacement on the client.
    """
    if len(body.text) > settings.SPELLCHECK_MAX_TEXT_LENGTH:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Text exceeds {settings.SPELLCHECK_MAX_TEXT_LENGTH} characters; split it into chunks"
        )

    try:
        issues = service.check_text(body.text)
    except InternalSearchFailure as e:
        raise _search_failed(e)
    except DictionaryNotLoadedError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e)
        )

    return CheckResponse(
        issues=issues,
        stats=build_text_stats(body.text, issues),
        dictionary_empty=service.index.is_empty,
    )


@router.post("/spellcheck/suggest", response_model=SuggestResponse)
async def suggest_word(
    body: SuggestRequest,
    service: TurkishSpellCheckService = Depends(get_spellcheck_service),
) -> SuggestResponse:
    """Suggest corrections for a single word."""
    try:
        suggestions = service.suggest(body.word, body.limit)
    except InternalSearchFailure as e:
        raise _search_failed(e)

    return SuggestResponse(word=body.word, suggestions=suggestions)


@router.get("/spellcheck/valid", response_model=ValidityResponse)
async def validate_word(
    word: str = Query(..., min_length=1),
    service: TurkishSpellCheckService = Depends(get_spellcheck_service),
) -> ValidityResponse:
    """Check whether a single word is in the dictionary or personal dictionary."""
    return ValidityResponse(word=word, valid=service.is_valid(word))


@router.get("/spellcheck/personal-dictionary", response_model=PersonalDictionaryResponse)
async def get_personal_dictionary(
    service: TurkishSpellCheckService = Depends(get_spellcheck_service),
) -> PersonalDictionaryResponse:
    """List personal dictionary words."""
    words = service.index.overlay_words()
    return PersonalDictionaryResponse(words=words, count=len(words))


@router.post("/spellcheck/personal-dictionary", response_model=PersonalDictionaryResponse)
async def add_personal_words(
    body: PersonalDictionaryRequest,
    service: TurkishSpellCheckService = Depends(get_spellcheck_service),
    store: PersonalDictionaryStore = Depends(get_personal_store),
) -> PersonalDictionaryResponse:
    """
    Add words to the personal dictionary.

    Words become valid immediately and are persisted for the next start.
    Re-adding a word is a no-op.
    """
    added = service.merge_overlay(body.words)
    words = service.index.overlay_words()

    if added:
        try:
            store.save(words)
        except OSError as e:
            logger.error("Failed to persist personal dictionary", error=str(e), exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Words were added and stay active until restart, but could not be saved"
            )
        logger.info("Personal dictionary updated", added=added, total=len(words))

    return PersonalDictionaryResponse(words=words, count=len(words), added=added)
