from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.routing import Mount

from aiwebnews.config import get_settings
from aiwebnews.logging_config import configure_logging
from aiwebnews.mcp_server import mcp
from aiwebnews.models.common import ErrorResponse, StatusResponse
from aiwebnews.routers.news import router as news_router
from aiwebnews.routers.page import router as page_router
from aiwebnews.services import view as view_service


# --- Localhost-only middleware ---

class LocalhostOnlyMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        client_host = request.client.host if request.client else None
        if client_host not in ("127.0.0.1", "::1", "localhost"):
            return JSONResponse(
                status_code=403,
                content=ErrorResponse(error_code="forbidden", message="Localhost access only").model_dump(),
            )
        return await call_next(request)


# --- FastAPI app ---

api = FastAPI(title="AI Web News", version="0.1.0")
api.include_router(page_router)
api.include_router(news_router)


@api.get("/api/status")
def api_status() -> StatusResponse:
    return StatusResponse(
        configured=bool(get_settings().api_key),
        state=view_service.get_news_view().state.status,
    )


# --- Starlette root app ---

mcp_app = mcp.http_app(path="/", stateless_http=True)


@asynccontextmanager
async def lifespan(app: Starlette):
    configure_logging(get_settings().log_level)
    view = view_service.get_news_view()
    view.mount()
    try:
        async with mcp_app.lifespan(app):
            yield
    finally:
        view.unmount()


app = Starlette(
    middleware=[Middleware(LocalhostOnlyMiddleware)],
    routes=[
        Mount("/mcp", app=mcp_app),
        Mount("/", app=api),
    ],
    lifespan=lifespan,
)


def run():
    settings = get_settings()
    uvicorn.run(
        "aiwebnews.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
