from __future__ import annotations
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from wordlookup.service.search_service import SearchService
from wordlookup.web.dependencies import get_client_key, get_search_service, templates

router = APIRouter()

@router.get("/history", response_class=HTMLResponse)
def history_home(
    request: Request,
    client_key: str = Depends(get_client_key),
    search_service: SearchService = Depends(get_search_service),
):
    data = search_service.handle_history_view(client_key)
    return templates.TemplateResponse(request, "history.html", {"data": data})
