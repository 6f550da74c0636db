"""Display lifecycle for the news page: one fetch at mount, then loading / failed / ready."""

import asyncio
import logging
from typing import Awaitable, Callable

from aiwebnews.models.news import NewsData
from aiwebnews.models.view import Failed, Loading, Ready, ViewState
from aiwebnews.services import news as news_service

logger = logging.getLogger(__name__)

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred."

_view: "NewsView | None" = None


class NewsView:
    def __init__(self, fetch: Callable[[], Awaitable[NewsData]] | None = None) -> None:
        self._fetch = fetch or news_service.fetch_news
        self._task: asyncio.Task | None = None
        self._mounted = False
        self._settled: ViewState | None = None
        self.state: ViewState = Loading()

    @property
    def mounted(self) -> bool:
        return self._mounted

    def mount(self) -> asyncio.Task:
        """Start the single fetch. Must be called from a running event loop.

        Mounting again returns the task from the first mount and picks up a
        result that settled while the view was unmounted.
        """
        loop = asyncio.get_running_loop()
        self._mounted = True
        if self._task is not None:
            if self._settled is not None:
                self.state = self._settled
            return self._task
        self.state = Loading()
        self._task = loop.create_task(self._load())
        return self._task

    def unmount(self) -> None:
        """Tear the view down. A fetch still in flight will not touch state."""
        self._mounted = False

    def _set_state(self, state: ViewState) -> None:
        if not isinstance(state, Loading):
            self._settled = state
        if not self._mounted:
            logger.debug("View unmounted, discarding %s state", state.status)
            return
        self.state = state

    async def _load(self) -> None:
        try:
            data = await self._fetch()
            self._set_state(Ready(news_items=data.news_items, sources=data.sources))
        except Exception as e:
            logger.error("News fetch failed: %s", e)
            self._set_state(Failed(message=str(e) or UNKNOWN_ERROR_MESSAGE))
        finally:
            if self._settled is None:
                self._set_state(Failed(message=UNKNOWN_ERROR_MESSAGE))


def get_news_view() -> NewsView:
    """Return the process-wide view, creating it on first use."""
    global _view
    if _view is None:
        _view = NewsView()
    return _view
