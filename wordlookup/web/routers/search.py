from __future__ import annotations
from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse

from wordlookup.service.search_service import SearchService
from wordlookup.web.dependencies import get_client_key, get_search_service, templates

router = APIRouter()

@router.post("/search", response_class=HTMLResponse)
def search(
    request: Request,
    word: str = Form(""),
    client_key: str = Depends(get_client_key),
    search_service: SearchService = Depends(get_search_service),
):
    """Look up `word` and render the results page.

    Every outcome is a 200; lookup failures are shown as a message. Only POST
    is routed here, so other methods get a 405 from the router.
    """
    data = search_service.handle_search(client_key, word)
    return templates.TemplateResponse(request, "results.html", {"data": data})
