"""
Word list acquisition: pickle cache, local file or remote download.

Records are normalized here into WordlistEntry objects so the dictionary
index never deals with source-specific field names.

Supported line formats:
- JSON lines: {"madde": "kelime", ...} or {"word": "kelime", "frequency": 12}
- Plain text: "kelime" or "kelime 12"
"""
import json
import pickle
import time
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

import httpx
from pydantic import ValidationError

from yazim.config import settings
from yazim.schemas.spellcheck import WordlistEntry
from yazim.services.spellcheck_base import MalformedWordlistEntry, WordlistSourceError
from yazim.utils.logger import get_logger

logger = get_logger("services.wordlist_source")

CACHE_VERSION = 1
CACHE_FILENAME = "wordlist_tr.pkl"

# JSON keys holding the headword, in order of preference
WORD_KEYS = ("madde", "word")


def parse_wordlist_line(line: str) -> Optional[WordlistEntry]:
    """
    Parse one word list line.

    Args:
        line: Raw line (JSON object or "word [frequency]")

    Returns:
        WordlistEntry, or None for blank lines

    Raises:
        MalformedWordlistEntry: If the line cannot be parsed
    """
    line = line.strip()
    if not line:
        return None

    try:
        if line.startswith("{"):
            try:
                data = json.loads(line)
            except json.JSONDecodeError as e:
                raise MalformedWordlistEntry(f"Invalid JSON: {e}", record=line) from e
            word = next((data[key] for key in WORD_KEYS if data.get(key)), None)
            if word is None:
                raise MalformedWordlistEntry("No headword field in record", record=line)
            return WordlistEntry(word=word, frequency=data.get("frequency"))

        parts = line.split()
        if len(parts) == 1:
            return WordlistEntry(word=parts[0])
        if len(parts) == 2 and parts[1].isdigit():
            return WordlistEntry(word=parts[0], frequency=int(parts[1]))
        raise MalformedWordlistEntry("Expected 'word' or 'word frequency'", record=line)
    except ValidationError as e:
        raise MalformedWordlistEntry(f"Invalid word list entry: {e}", record=line) from e


def parse_wordlist_lines(lines: Iterable[str]) -> Tuple[List[WordlistEntry], int]:
    """
    Parse word list lines, skipping malformed ones.

    Returns:
        Tuple of (entries, skipped line count)
    """
    entries: List[WordlistEntry] = []
    skipped = 0
    for line in lines:
        try:
            entry = parse_wordlist_line(line)
        except MalformedWordlistEntry:
            skipped += 1
            continue
        if entry is not None:
            entries.append(entry)
    return entries, skipped


class WordlistSource:
    """
    Provides word list entries from the fastest available source.

    Order: pickle cache (if it was built from the same source), local
    word list file, remote URL. Parsed file/URL payloads are written to the
    cache for the next start.
    """

    def __init__(
        self,
        wordlist_path: Optional[str] = None,
        url: Optional[str] = None,
        cache_path: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            wordlist_path: Local word list file (default from config)
            url: Remote JSON-lines word list (default from config)
            cache_path: Directory for the pickle cache (default from config)
            timeout: Download timeout in seconds (default from config)
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self._wordlist_path = Path(wordlist_path) if wordlist_path else Path(settings.SPELLCHECK_WORDLIST_PATH)
        self._url = url if url is not None else settings.SPELLCHECK_WORDLIST_URL
        cache_dir = Path(cache_path) if cache_path else Path(settings.SPELLCHECK_CACHE_PATH)
        self._pickle_path = cache_dir / CACHE_FILENAME
        self._timeout = timeout or settings.SPELLCHECK_DOWNLOAD_TIMEOUT
        self._transport = transport

    @property
    def pickle_path(self) -> Path:
        return self._pickle_path

    def _source_id(self) -> str:
        """Identifies the payload a cache was built from."""
        if self._wordlist_path.exists():
            stat = self._wordlist_path.stat()
            return f"file:{self._wordlist_path.resolve()}:{stat.st_size}:{int(stat.st_mtime)}"
        return f"url:{self._url}"

    async def fetch_entries(self) -> List[WordlistEntry]:
        """
        Get word list entries.

        Returns:
            Parsed entries (possibly empty if the source is empty)

        Raises:
            WordlistSourceError: If no source is available or the download fails
        """
        source_id = self._source_id()

        cached = self._load_from_pickle(source_id)
        if cached is not None:
            return cached

        if self._wordlist_path.exists():
            entries = self._read_wordlist_file()
        elif self._url:
            entries = await self._download()
        else:
            logger.error(
                "Neither pickle, word list nor URL available",
                pickle_path=str(self._pickle_path),
                wordlist_path=str(self._wordlist_path),
            )
            raise WordlistSourceError(
                f"No word list at {self._wordlist_path} and no SPELLCHECK_WORDLIST_URL configured"
            )

        self._save_pickle(source_id, entries)
        return entries

    def _read_wordlist_file(self) -> List[WordlistEntry]:
        start_time = time.time()
        with open(self._wordlist_path, "r", encoding="utf-8") as f:
            entries, skipped = parse_wordlist_lines(f)

        logger.info(
            "Word list read from file",
            entries=len(entries),
            skipped=skipped,
            read_time_seconds=round(time.time() - start_time, 2),
            wordlist_path=str(self._wordlist_path),
        )
        return entries

    async def _download(self) -> List[WordlistEntry]:
        start_time = time.time()
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                response = await client.get(self._url)
                response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error("Word list download failed", url=self._url, error=str(e))
            raise WordlistSourceError(f"Failed to download word list: {e}") from e

        entries, skipped = parse_wordlist_lines(response.text.splitlines())

        logger.info(
            "Word list downloaded",
            entries=len(entries),
            skipped=skipped,
            download_time_seconds=round(time.time() - start_time, 2),
            url=self._url,
        )
        return entries

    def _load_from_pickle(self, source_id: str) -> Optional[List[WordlistEntry]]:
        """Load entries from the pickle cache, or None if missing or stale."""
        if not self._pickle_path.exists():
            return None

        try:
            with open(self._pickle_path, "rb") as f:
                payload = pickle.load(f)
        except Exception as e:
            logger.warning(
                "Failed to load pickle, will rebuild",
                error=str(e),
                pickle_path=str(self._pickle_path),
            )
            return None

        if not isinstance(payload, dict) or payload.get("version") != CACHE_VERSION:
            logger.info("Ignoring word list cache with unknown format", pickle_path=str(self._pickle_path))
            return None
        if payload.get("source") != source_id:
            logger.info("Word list cache is stale", pickle_path=str(self._pickle_path))
            return None

        entries = [WordlistEntry(word=word, frequency=frequency) for word, frequency in payload["entries"]]
        logger.info("Word list loaded from cache", entries=len(entries), pickle_path=str(self._pickle_path))
        return entries

    def _save_pickle(self, source_id: str, entries: List[WordlistEntry]) -> None:
        """Save entries to the pickle cache for fast loading."""
        try:
            self._pickle_path.parent.mkdir(parents=True, exist_ok=True)

            payload = {
                "version": CACHE_VERSION,
                "source": source_id,
                "entries": [(entry.word, entry.frequency) for entry in entries],
            }
            with open(self._pickle_path, "wb") as f:
                pickle.dump(payload, f)

            logger.info("Word list saved to cache", pickle_path=str(self._pickle_path))

        except OSError as e:
            logger.warning(
                "Failed to save pickle (will rebuild on next start)",
                error=str(e),
                pickle_path=str(self._pickle_path),
            )
