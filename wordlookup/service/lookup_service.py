from __future__ import annotations

import logging
from typing import List, Protocol
from urllib.parse import quote_plus

import httpx
from pydantic import TypeAdapter, ValidationError

from wordlookup.config import settings
from wordlookup.models.dictionary import Entry

logger = logging.getLogger(__name__)

_entries_adapter = TypeAdapter(List[Entry])


class DictLookupError(Exception):
    """Base class for failed lookups. `message` is what the user sees."""
    message = "Failed to fetch dictionary data"

    def __init__(self, word: str, detail: str = ""):
        super().__init__(f"{word!r}: {detail}" if detail else repr(word))
        self.word = word
        self.detail = detail


class LookupFailed(DictLookupError):
    """The request never got a response (connection error, timeout)."""


class WordNotFound(DictLookupError):
    message = "Word not found. Please check your spelling and try again."


class UpstreamError(DictLookupError):
    """Any non-success status other than 404."""


class DecodeFailed(DictLookupError):
    message = "Failed to parse dictionary data"


class DictionaryLookup(Protocol):
    def lookup(self, word: str) -> List[Entry]: ...


class DictionaryApiClient:
    """Client for the dictionaryapi.dev entries endpoint.

    No retries and no caching: every call is one GET. Pass `transport` to
    swap the network layer (tests use httpx.MockTransport).
    """

    def __init__(
        self,
        base_url: str = settings.DICTIONARY_API_URL,
        timeout: float = settings.LOOKUP_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._client = httpx.Client(timeout=timeout, transport=transport, follow_redirects=True)

    def url_for(self, word: str) -> str:
        return f"{self.base_url}/{quote_plus(word)}"

    def lookup(self, word: str) -> List[Entry]:
        url = self.url_for(word)
        logger.debug("Looking up %r at %s", word, url)
        try:
            resp = self._client.get(url)
        except httpx.HTTPError as e:
            logger.warning("Dictionary request for %r failed: %s", word, e)
            raise LookupFailed(word, str(e)) from e

        if resp.status_code == 404:
            raise WordNotFound(word)
        if resp.status_code != 200:
            logger.warning("Dictionary API returned %s for %r", resp.status_code, word)
            raise UpstreamError(word, f"HTTP {resp.status_code}")

        try:
            return _entries_adapter.validate_json(resp.content)
        except ValidationError as e:
            logger.warning("Could not decode dictionary data for %r: %s", word, e)
            raise DecodeFailed(word, str(e)) from e
