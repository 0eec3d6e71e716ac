"""
Search pagination state machine.

    IDLE --submit_query--> FETCHING(1) --ok--> IDLE --request_more--> FETCHING(n+1) --> ...
                                       `--empty page--> EXHAUSTED

- submit_query() starts over: fresh SearchState, cursor 1, fetch page 1.
  Any fetch still in flight for the previous query is invalidated and its
  response dropped when it arrives.
- request_more() is a no-op unless IDLE; otherwise it fetches the next page.
- A failed fetch (NetworkError/ParseError) is logged and the machine goes
  back to IDLE without advancing, so the next request_more() retries the
  same page.
- An empty page means the directory has nothing more: EXHAUSTED is terminal
  until the next submission.

Fetches run the blocking client call in a worker thread (asyncio.to_thread)
so the event loop keeps ticking while a page is on its way.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Protocol

from recipes.models import Recipe

from .errors import NetworkError, ParseError

logger = logging.getLogger(__name__)


class SearchStatus(str, Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    EXHAUSTED = "exhausted"


class QueryClient(Protocol):
    def search(self, query: str, page: int) -> List[Recipe]:
        ...


@dataclass
class SearchState:
    """
    State of one submitted search.

    Attributes:
        query: The query as submitted
        cursor: Last page number appended (1-indexed); 1 before page 1 arrives
        results: Every recipe appended so far, in page order
        cursor_loaded: Whether page `cursor` has been appended
    """
    query: str
    cursor: int = 1
    results: List[Recipe] = field(default_factory=list)
    cursor_loaded: bool = False

    @property
    def next_page(self) -> int:
        return self.cursor + 1 if self.cursor_loaded else self.cursor


ResultsListener = Callable[[List[Recipe], int], None]


class SearchController:
    """
    Owns the query, page cursor and accumulated results of the Search page.

    Attributes:
        client: Anything with search(query, page) -> List[Recipe]
        on_results: Called with (batch, page) after each successful fetch
        status: Current SearchStatus
        state: Current SearchState, None before the first submission
    """

    def __init__(self, client: QueryClient, on_results: Optional[ResultsListener] = None) -> None:
        self.client = client
        self.on_results = on_results
        self.status = SearchStatus.IDLE
        self.state: Optional[SearchState] = None
        self._generation = 0
        self._closed = False

    @property
    def cursor(self) -> int:
        return self.state.cursor if self.state else 1

    @property
    def results(self) -> List[Recipe]:
        return list(self.state.results) if self.state else []

    @property
    def exhausted(self) -> bool:
        return self.status is SearchStatus.EXHAUSTED

    async def submit_query(self, query: str) -> bool:
        """
        Start a new search and fetch its first page.

        Returns:
            True if page 1 was fetched and applied
        """
        if self._closed:
            return False
        self._generation += 1
        self.state = SearchState(query=query)
        self.status = SearchStatus.IDLE
        logger.debug("New search %r", query)
        return await self._fetch(1)

    async def request_more(self) -> bool:
        """
        Fetch the next page if the machine is IDLE.

        Returns:
            True if a page was fetched and applied, False for a no-op or failure
        """
        if self._closed or self.state is None or self.status is not SearchStatus.IDLE:
            return False
        return await self._fetch(self.state.next_page)

    def close(self) -> None:
        """Stop accepting work; responses still in flight will be discarded."""
        self._closed = True
        self._generation += 1

    async def _fetch(self, page: int) -> bool:
        generation = self._generation
        state = self.state
        self.status = SearchStatus.FETCHING

        try:
            batch = await asyncio.to_thread(self.client.search, state.query, page)
        except (NetworkError, ParseError) as e:
            if generation == self._generation:
                self.status = SearchStatus.IDLE
            logger.warning("Fetching page %d for %r failed: %s", page, state.query, e)
            return False
        except asyncio.CancelledError:
            if generation == self._generation:
                self.status = SearchStatus.IDLE
            raise

        if generation != self._generation:
            logger.debug("Discarding stale page %d for %r", page, state.query)
            return False

        state.results.extend(batch)
        state.cursor = page
        state.cursor_loaded = True
        self.status = SearchStatus.EXHAUSTED if not batch else SearchStatus.IDLE
        logger.debug("Page %d for %r: %d recipes (%s)", page, state.query, len(batch), self.status.value)

        if self.on_results is not None:
            self.on_results(batch, page)
        return True
