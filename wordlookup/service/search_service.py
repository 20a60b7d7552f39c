from __future__ import annotations

import logging

from wordlookup.data.history_repo import HistoryRepo
from wordlookup.models.page import PageData
from wordlookup.service.lookup_service import DictionaryLookup, DictLookupError

logger = logging.getLogger(__name__)

EMPTY_QUERY_MESSAGE = "Please enter a word"


class SearchService:
    """Runs one search: validate, remember it, look it up.

    The word goes into history before the lookup and stays there whatever
    the lookup returns.
    """

    def __init__(self, history_repo: HistoryRepo, lookup: DictionaryLookup):
        self.history_repo = history_repo
        self.lookup = lookup

    def handle_search(self, client_key: str, raw_word: str) -> PageData:
        word = (raw_word or "").strip()
        if not word:
            return PageData(error=EMPTY_QUERY_MESSAGE)

        self.history_repo.record(client_key, word)

        try:
            entries = self.lookup.lookup(word)
        except DictLookupError as e:
            logger.info("Lookup for %r failed with %s", word, type(e).__name__)
            return PageData(error=e.message)
        return PageData(results=entries, query=word)

    def handle_history_view(self, client_key: str) -> PageData:
        return PageData(history=self.history_repo.get(client_key))
