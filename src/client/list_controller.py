"""
Paging and filter state for one bookmarks page.

A BookmarkListController is created per page and owns everything the page
shows: the active filter, the accumulated rows, the counts, and whether a
fetch is in flight. UI events (filter buttons, "load more", card clicks,
the archive context action) map one-to-one onto its public methods, and
every state change ends with a call to the render callback.
"""
import inspect
import logging
from collections.abc import Awaitable, Callable
from enum import StrEnum

import httpx

from client import api_client
from schemas.bookmark import BookmarkFilter, BookmarkResponse

logger = logging.getLogger(__name__)

ARCHIVED_VIEW = "archived"
DEFAULT_PAGE_SIZE = 20


class ListStatus(StrEnum):
    """Where the controller is in its load cycle."""

    IDLE = "idle"
    LOADING = "loading"
    EMPTY = "empty"


RenderCallback = Callable[["BookmarkListController"], None]
OpenUrlCallback = Callable[[str], None | Awaitable[None]]


class BookmarkListController:
    """
    State machine behind the bookmarks page.

    States are idle, loading and empty. A reset load (initial load or filter
    change) discards the accumulated rows; "load more" appends the next page
    at the current offset. While a load is in flight any further load request
    is ignored.

    Per-card actions update the local rows only after the server confirms
    them. Errors from the API are not caught here; they propagate to whoever
    dispatched the event.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        render: RenderCallback | None = None,
        open_url: OpenUrlCallback | None = None,
        limit: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        self.client = client
        self.render_callback = render
        self.open_url = open_url
        self.limit = limit

        self.filter: BookmarkFilter = BookmarkFilter.ALL
        self.archived = False
        self.bookmarks: list[BookmarkResponse] = []
        self.offset = 0
        self.total = 0
        self.unread_count = 0
        self.status = ListStatus.IDLE

    @property
    def loading(self) -> bool:
        return self.status == ListStatus.LOADING

    @property
    def has_more(self) -> bool:
        """True if the server holds rows beyond those already loaded."""
        return self.offset < self.total

    @property
    def active_filter_name(self) -> str:
        """Name of the filter button that should appear selected."""
        return ARCHIVED_VIEW if self.archived else self.filter.value

    async def select_filter(self, name: str) -> None:
        """
        Switch filter (or to/from the archived view) and reload from scratch.

        The archived view always lists every archived bookmark, so choosing it
        resets the filter to 'all'.
        """
        if name == ARCHIVED_VIEW:
            self.archived = True
            self.filter = BookmarkFilter.ALL
        else:
            self.archived = False
            self.filter = BookmarkFilter.parse(name)
        await self.load(reset=True)

    async def load(self, reset: bool = False) -> None:
        """Fetch a page. No-op while another load is in flight."""
        if self.loading:
            logger.debug("Ignoring load request while a fetch is in flight")
            return

        self.status = ListStatus.LOADING
        if reset:
            self.offset = 0
            self.bookmarks = []

        try:
            page = await api_client.fetch_bookmarks(
                self.client,
                bookmark_filter=self.filter.value,
                archived=self.archived,
                offset=self.offset,
                limit=self.limit,
            )
        finally:
            self._settle()

        if reset:
            self.bookmarks = list(page.data)
        else:
            self.bookmarks.extend(page.data)
        self.total = page.total
        self.unread_count = page.unread_count
        self.offset += len(page.data)
        self._settle()
        self.render()

    async def load_more(self) -> None:
        """Append the next page."""
        await self.load(reset=False)

    async def open_bookmark(self, bookmark: BookmarkResponse) -> None:
        """
        Open a bookmark's URL and mark it read if it was unread.

        The local row takes the server's read_at once the request succeeds.
        """
        if self.open_url is not None:
            result = self.open_url(bookmark.url)
            if inspect.isawaitable(result):
                await result

        if bookmark.read_at is not None:
            return

        response = await api_client.mark_read(self.client, bookmark.x_id)
        bookmark.read_at = response.read_at
        self.unread_count = max(0, self.unread_count - 1)
        self.render()

    async def toggle_archive(self, bookmark: BookmarkResponse) -> None:
        """
        Archive the bookmark (or unarchive it in the archived view).

        Either way it leaves the current listing: the row is dropped and the
        counts and offset shrink by one so the next page starts at the right row.
        """
        if self.archived:
            await api_client.unarchive(self.client, bookmark.x_id)
        else:
            await api_client.archive(self.client, bookmark.x_id)

        remaining = [b for b in self.bookmarks if b.x_id != bookmark.x_id]
        if len(remaining) != len(self.bookmarks):
            self.bookmarks = remaining
            self.total = max(0, self.total - 1)
            self.offset = max(0, self.offset - 1)
            if bookmark.read_at is None:
                self.unread_count = max(0, self.unread_count - 1)
        # A fetch still in flight owns the status until it settles.
        if not self.loading:
            self._settle()
        self.render()

    def render(self) -> None:
        if self.render_callback is not None:
            self.render_callback(self)

    def _settle(self) -> None:
        self.status = ListStatus.IDLE if self.bookmarks else ListStatus.EMPTY
