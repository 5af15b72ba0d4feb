"""
MealViewer API client.

Fetches school lunch menus from https://api.mealviewer.com:

    GET /school/{school}/{MM-DD-YYYY}/{MM-DD-YYYY}/

One GET per call, no caching and no retries. The client only holds its
construction-time configuration, so concurrent calls are safe.
"""

import logging
from typing import Optional

import httpx

from mealviewer.config import get_settings
from mealviewer.exceptions import classify
from mealviewer.models.menu import MenuQuery, MenuQueryResult
from mealviewer.parser import map_response
from mealviewer.urls import build_url

logger = logging.getLogger(__name__)


class MealViewerClient:
    """Async client for the MealViewer school menu API."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        debug: Optional[bool] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_settings()
        self._base_url = (settings.base_url if base_url is None else base_url).rstrip("/")
        self._timeout = settings.timeout if timeout is None else timeout
        self._user_agent = settings.user_agent if user_agent is None else user_agent
        self._debug = settings.debug if debug is None else debug
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

        self._log("MealViewerClient initialized")

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def user_agent(self) -> str:
        return self._user_agent

    @property
    def debug(self) -> bool:
        return self._debug

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers={"User-Agent": self._user_agent},
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "MealViewerClient":
        return self

    async def __aexit__(self, *exc_info):
        await self.close()

    # =========================================================================
    # Menus
    # =========================================================================

    async def get_menu(self, query: MenuQuery) -> MenuQueryResult:
        """
        Get menus for a school and date range.

        Raises:
            MealViewerError: INVALID_DATE for a malformed date string,
                SCHOOL_NOT_FOUND on 404, NETWORK_ERROR when the connection is
                refused or times out, API_ERROR for anything else.
        """
        try:
            url = build_url(query.school_id, query.start_date, query.end_date)
            self._log(f"Fetching menu: GET {url}")

            client = await self._get_client()
            response = await client.get(url)
            response.raise_for_status()
            result = map_response(response.json())
        except Exception as e:
            error = classify(e)
            self._log(f"Menu request failed ({error.code.value}): {error.message}")
            if error is e:
                raise
            raise error from e

        self._log(f"Menu fetched successfully: {len(result.menus)} day(s)")
        return result

    def _log(self, message: str):
        """Debug logging, only when debug is enabled."""
        if self._debug:
            logger.debug(f"[MealViewerClient] {message}")
