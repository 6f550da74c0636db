from fastmcp import FastMCP

from aiwebnews.models.view import Failed
from aiwebnews.services import view as view_service

mcp = FastMCP("AI Web News")


@mcp.tool
def news_feed() -> dict:
    """Get this week's AI-in-web-engineering news fetched at startup.
    Returns status "loading" while the fetch is running, or "ready" with news_items
    (title, summary) and sources (web.uri, web.title) once it has finished."""
    state = view_service.get_news_view().state
    if isinstance(state, Failed):
        return {"error": "news_unavailable", "message": state.message}
    return state.model_dump()
