from __future__ import annotations

from dataclasses import dataclass, field

from wordlookup.models.dictionary import Entry


@dataclass(frozen=True)
class PageData:
    """What the templates render.

    A search fills either `results` + `query` or `error`; the home and
    history pages fill `history` only.
    """
    results: list[Entry] = field(default_factory=list)
    error: str | None = None
    query: str = ""
    history: list[str] = field(default_factory=list)
