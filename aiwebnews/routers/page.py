from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from aiwebnews.services import view as view_service
from aiwebnews.ui.render import render_page

router = APIRouter(tags=["page"])


@router.get("/", response_class=HTMLResponse)
def news_page() -> HTMLResponse:
    return HTMLResponse(render_page(view_service.get_news_view().state))
