from __future__ import annotations

from typing import Callable, List

import httpx
import pytest

from wordlookup.data.history_repo import HistoryRepo
from wordlookup.service.lookup_service import DictionaryApiClient, WordNotFound
from wordlookup.service.search_service import SearchService

HELLO_JSON = [
    {
        "word": "hello",
        "phonetic": "/həˈləʊ/",
        "phonetics": [
            {"text": "/həˈləʊ/", "audio": "https://api.dictionaryapi.dev/media/pronunciations/en/hello-uk.mp3"},
            {"text": "/hɛˈloʊ/"},
        ],
        "meanings": [
            {
                "partOfSpeech": "noun",
                "definitions": [
                    {
                        "definition": '"Hello!" or an equivalent greeting.',
                        "synonyms": ["greeting"],
                        "antonyms": [],
                    }
                ],
                "synonyms": ["greeting"],
                "antonyms": [],
            },
            {
                "partOfSpeech": "interjection",
                "definitions": [
                    {
                        "definition": "A greeting (salutation) said when meeting someone.",
                        "example": "Hello, everyone.",
                        "synonyms": [],
                        "antonyms": ["bye", "goodbye"],
                    }
                ],
            },
        ],
        "license": {"name": "CC BY-SA 3.0", "url": "https://creativecommons.org/licenses/by-sa/3.0"},
        "sourceUrls": ["https://en.wiktionary.org/wiki/hello"],
    }
]


class FakeLookup:
    """In-process DictionaryLookup: returns canned entries, records calls."""

    def __init__(self, handler: Callable[[str], List] | None = None):
        self.calls: list[str] = []
        self.handler = handler

    def lookup(self, word: str):
        self.calls.append(word)
        if self.handler is None:
            raise WordNotFound(word)
        return self.handler(word)


def api_client(handler: Callable[[httpx.Request], httpx.Response]) -> DictionaryApiClient:
    return DictionaryApiClient(base_url="https://dict.test/api/v2/entries/en", transport=httpx.MockTransport(handler))


@pytest.fixture
def history_repo() -> HistoryRepo:
    return HistoryRepo(limit=10)


@pytest.fixture
def fake_lookup() -> FakeLookup:
    return FakeLookup()


@pytest.fixture
def search_service(history_repo, fake_lookup) -> SearchService:
    return SearchService(history_repo, fake_lookup)
