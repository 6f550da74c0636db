from fastapi import APIRouter

from aiwebnews.models.view import ViewState
from aiwebnews.services import view as view_service

router = APIRouter(prefix="/api/news", tags=["news"])


@router.get("")
def get_news() -> ViewState:
    return view_service.get_news_view().state
