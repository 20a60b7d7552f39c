from __future__ import annotations
from fastapi import Request
from fastapi.templating import Jinja2Templates

from wordlookup.config import settings
from wordlookup.data.history_repo import HistoryRepo
from wordlookup.service.identity import ClientIdentityResolver, ConnectionIdentityResolver
from wordlookup.service.lookup_service import DictionaryApiClient
from wordlookup.service.search_service import SearchService

templates = Jinja2Templates(directory=str(settings.TEMPLATES_DIR))

history_repo = HistoryRepo()
dictionary_client = DictionaryApiClient()
search_service = SearchService(history_repo, dictionary_client)
identity_resolver: ClientIdentityResolver = ConnectionIdentityResolver()

def get_search_service() -> SearchService:
    return search_service

def get_client_key(request: Request) -> str:
    return identity_resolver.client_key(request)
