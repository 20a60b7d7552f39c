from __future__ import annotations

import threading
from typing import Dict, List

from wordlookup.config import settings


class HistoryRepo:
    """Recent searches per client, kept in memory for the process lifetime.

    Each list is most-recent-first, holds at most `limit` words and never two
    words that differ only by case. A word already in the list keeps its
    position when searched again.
    """

    def __init__(self, limit: int = settings.HISTORY_LIMIT):
        self.limit = limit
        self._lock = threading.Lock()
        self._history: Dict[str, List[str]] = {}

    def record(self, client_key: str, word: str) -> None:
        folded = word.casefold()
        with self._lock:
            history = self._history.get(client_key, [])
            if any(w.casefold() == folded for w in history):
                return
            self._history[client_key] = [word, *history][: self.limit]

    def get(self, client_key: str) -> List[str]:
        with self._lock:
            return list(self._history.get(client_key, ()))
