"""
Unit tests for word list parsing and acquisition.
"""
import json
from unittest.mock import patch

import httpx
import pytest

from yazim.schemas.spellcheck import WordlistEntry
from yazim.services.spellcheck_base import MalformedWordlistEntry, WordlistSourceError
from yazim.services.wordlist_source import (
    CACHE_FILENAME,
    WordlistSource,
    parse_wordlist_line,
    parse_wordlist_lines,
)


WORDLIST_URL = "https://example.test/tr-words.jsonl"

JSONL_PAYLOAD = "\n".join([
    json.dumps({"madde": "merhaba", "anlam": "selam"}, ensure_ascii=False),
    json.dumps({"madde": "dünya"}, ensure_ascii=False),
    "not json at all {",
    json.dumps({"word": "kitap", "frequency": 12}, ensure_ascii=False),
    "",
])


class TestParseWordlistLine:
    """Tests for single-line parsing."""

    def test_madde_record(self):
        assert parse_wordlist_line('{"madde": "ağaç", "lisan": ""}') == WordlistEntry(word="ağaç")

    def test_word_record_with_frequency(self):
        entry = parse_wordlist_line('{"word": "kitap", "frequency": 7}')
        assert entry == WordlistEntry(word="kitap", frequency=7)

    def test_null_frequency(self):
        assert parse_wordlist_line('{"word": "kitap", "frequency": null}').frequency == 1

    def test_plain_word(self):
        assert parse_wordlist_line("kalem\n") == WordlistEntry(word="kalem")

    def test_plain_word_with_frequency(self):
        assert parse_wordlist_line("kalem 42") == WordlistEntry(word="kalem", frequency=42)

    def test_blank_line(self):
        assert parse_wordlist_line("   \n") is None

    @pytest.mark.parametrize("line", [
        "{not json",
        '{"anlam": "no headword"}',
        '{"madde": ""}',
        '{"word": "kitap", "frequency": 0}',
        "kalem abc",
        "üç kelime var",
    ])
    def test_malformed(self, line):
        with pytest.raises(MalformedWordlistEntry) as exc_info:
            parse_wordlist_line(line)
        assert exc_info.value.record == line

    def test_lines_skip_malformed(self):
        entries, skipped = parse_wordlist_lines(JSONL_PAYLOAD.splitlines())
        assert [e.word for e in entries] == ["merhaba", "dünya", "kitap"]
        assert skipped == 1


class TestWordlistSourceFile:
    """Tests for reading a local word list and caching it."""

    @pytest.fixture
    def wordlist_file(self, tmp_path):
        path = tmp_path / "tr-words.jsonl"
        path.write_text(JSONL_PAYLOAD, encoding="utf-8")
        return path

    @pytest.mark.asyncio
    async def test_reads_file_and_writes_cache(self, wordlist_file, tmp_path):
        source = WordlistSource(wordlist_path=str(wordlist_file), url="", cache_path=str(tmp_path / "cache"))

        entries = await source.fetch_entries()

        assert [e.word for e in entries] == ["merhaba", "dünya", "kitap"]
        assert source.pickle_path == tmp_path / "cache" / CACHE_FILENAME
        assert source.pickle_path.exists()

    @pytest.mark.asyncio
    async def test_second_fetch_uses_cache(self, wordlist_file, tmp_path):
        source = WordlistSource(wordlist_path=str(wordlist_file), url="", cache_path=str(tmp_path / "cache"))
        first = await source.fetch_entries()

        with patch.object(WordlistSource, "_read_wordlist_file", side_effect=AssertionError("file read")):
            second = await source.fetch_entries()

        assert second == first

    @pytest.mark.asyncio
    async def test_changed_file_invalidates_cache(self, wordlist_file, tmp_path):
        source = WordlistSource(wordlist_path=str(wordlist_file), url="", cache_path=str(tmp_path / "cache"))
        await source.fetch_entries()

        wordlist_file.write_text("kalem\nkalemlik 3\n", encoding="utf-8")
        entries = await source.fetch_entries()

        assert [(e.word, e.frequency) for e in entries] == [("kalem", 1), ("kalemlik", 3)]

    @pytest.mark.asyncio
    async def test_corrupt_cache_falls_back_to_file(self, wordlist_file, tmp_path):
        source = WordlistSource(wordlist_path=str(wordlist_file), url="", cache_path=str(tmp_path / "cache"))
        source.pickle_path.parent.mkdir(parents=True)
        source.pickle_path.write_bytes(b"not a pickle")

        entries = await source.fetch_entries()

        assert len(entries) == 3

    @pytest.mark.asyncio
    async def test_no_source_available(self, tmp_path):
        source = WordlistSource(
            wordlist_path=str(tmp_path / "missing.jsonl"),
            url="",
            cache_path=str(tmp_path / "cache"),
        )
        with pytest.raises(WordlistSourceError):
            await source.fetch_entries()


class TestWordlistSourceDownload:
    """Tests for downloading the word list over HTTP."""

    @pytest.mark.asyncio
    async def test_downloads_when_file_missing(self, tmp_path):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, text=JSONL_PAYLOAD)

        source = WordlistSource(
            wordlist_path=str(tmp_path / "missing.jsonl"),
            url=WORDLIST_URL,
            cache_path=str(tmp_path / "cache"),
            transport=httpx.MockTransport(handler),
        )

        entries = await source.fetch_entries()
        assert [e.word for e in entries] == ["merhaba", "dünya", "kitap"]
        assert str(requests[0].url) == WORDLIST_URL

        # Cached now, no second request
        await source.fetch_entries()
        assert len(requests) == 1

    @pytest.mark.asyncio
    async def test_http_error(self, tmp_path):
        source = WordlistSource(
            wordlist_path=str(tmp_path / "missing.jsonl"),
            url=WORDLIST_URL,
            cache_path=str(tmp_path / "cache"),
            transport=httpx.MockTransport(lambda request: httpx.Response(500)),
        )
        with pytest.raises(WordlistSourceError):
            await source.fetch_entries()
        assert not source.pickle_path.exists()

    @pytest.mark.asyncio
    async def test_connection_error(self, tmp_path):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        source = WordlistSource(
            wordlist_path=str(tmp_path / "missing.jsonl"),
            url=WORDLIST_URL,
            cache_path=str(tmp_path / "cache"),
            transport=httpx.MockTransport(handler),
        )
        with pytest.raises(WordlistSourceError):
            await source.fetch_entries()
