"""
client.py — TrendsClient, the public entry point.

One client value holds everything that used to be process-wide state:
the transport (with its session cookie), the default parameters, the
reference-tree cache and the debug flag. Build it once in application
wiring and pass it where it is needed:

    async with TrendsClient() as client:
        widgets = await client.explore(ExploreRequest(
            comparison_items=[ComparisonItem(keyword="golang", geo="US")],
        ))
        timeseries = widgets.by_type(WidgetType.TIMESERIES)[0]
        points = await client.interest_over_time(timeseries)

Every operation is a coroutine. Cancel the task (or wrap the call in
asyncio.timeout) to abort an in-flight request.
"""

import logging
import threading
from typing import Optional
from urllib.parse import quote

import httpx

from gtrends.core.cache import ReferenceCache
from gtrends.core.config import settings
from gtrends.core.constants import (
    PATH_AUTOCOMPLETE,
    PATH_CATEGORIES,
    PATH_EXPLORE,
    PATH_INTEREST_BY_REGION,
    PATH_INTEREST_OVER_TIME,
    PATH_LOCATIONS,
    PATH_RELATED,
    TODAY_LABEL,
    TRENDS_CATEGORIES,
    WIDGET_GUARD_PREFIX,
)
from gtrends.core.errors import InvalidWidgetTypeError
from gtrends.core.transport import Transport
from gtrends.models.explore import ExploreRequest, ExploreResponse, Widget, WidgetType
from gtrends.models.reference import CategoryNode, LocationNode
from gtrends.models.trending import TrendingSearch, TrendingSearchDays
from gtrends.models.widgetdata import (
    AutocompleteResponse,
    ComparedGeoResponse,
    GeoMap,
    KeywordTopic,
    MultilineResponse,
    RankedKeyword,
    RelatedResponse,
    Timeline,
)
from gtrends.services import params
from gtrends.services.batch import extract_trending_terms
from gtrends.services.decoder import decode
from gtrends.services.widgets import WidgetCollection

logger = logging.getLogger(__name__)


class TrendsClient:
    """
    Async client for the trends explore, widget-data and batch endpoints.

    Args:
        http_client: Any httpx.AsyncClient. When omitted the client creates
                     one and closes it in aclose().
        debug:       Log request URLs, payloads and raw responses at DEBUG.
                     Defaults to settings.debug.
        language:    Default host language for calls that omit `hl`.
    """

    def __init__(
        self,
        http_client: Optional[httpx.AsyncClient] = None,
        *,
        debug: Optional[bool] = None,
        language: Optional[str] = None,
    ) -> None:
        self.transport = Transport(
            http_client, debug=settings.debug if debug is None else debug
        )
        self.cache = ReferenceCache()
        self.language = language or settings.default_language
        self.api_url = settings.api_url.rstrip("/")
        self.batch_execute_url = settings.batch_execute_url

        self._default_params = params.default_params()
        self._categories_lock = threading.Lock()
        self._trends_categories = dict(TRENDS_CATEGORIES)

    async def __aenter__(self) -> "TrendsClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.transport.aclose()

    # ── Settings ──────────────────────────────────────────────────────────────

    @property
    def debug(self) -> bool:
        return self.transport.debug

    def set_debug(self, debug: bool) -> None:
        """Toggle request/response logging. Purely observational."""
        self.transport.debug = debug

    def default_params(self) -> dict[str, str]:
        """A copy of the default query parameters; safe to mutate."""
        return dict(self._default_params)

    def trends_categories(self) -> dict[str, str]:
        """Daily trends category codes mapped to their names."""
        with self._categories_lock:
            return dict(self._trends_categories)

    def validate_category(self, code: str) -> bool:
        with self._categories_lock:
            return code in self._trends_categories

    # ── Explore ───────────────────────────────────────────────────────────────

    async def explore(self, request: ExploreRequest, hl: Optional[str] = None) -> WidgetCollection:
        """
        Fetch the widgets for a set of comparison terms.

        Returns the widgets in upstream order; call .sorted() for the
        suffix ordering.
        """
        query = params.explore_params(request, hl or self.language)
        body = await self.transport.get(self.api_url + PATH_EXPLORE, query)
        return WidgetCollection(decode(body, ExploreResponse).widgets)

    async def interest_over_time(self, widget: Widget, hl: Optional[str] = None) -> list[Timeline]:
        """Timeline points of a TIMESERIES widget."""
        self._require_kind(widget, WidgetType.TIMESERIES)

        query = params.widget_params(widget, hl or self.language)
        body = await self.transport.get(self.api_url + PATH_INTEREST_OVER_TIME, query)
        return decode(body, MultilineResponse, WIDGET_GUARD_PREFIX).default.timeline_data

    async def interest_by_location(self, widget: Widget, hl: Optional[str] = None) -> list[GeoMap]:
        """Per-region interest of a GEO_MAP widget."""
        self._require_kind(widget, WidgetType.GEO_MAP)

        request = params.geo_map_request(widget.request)
        query = params.widget_params(widget, hl or self.language, request)
        body = await self.transport.get(self.api_url + PATH_INTEREST_BY_REGION, query)
        return decode(body, ComparedGeoResponse, WIDGET_GUARD_PREFIX).default.geo_map_data

    async def related(self, widget: Widget, hl: Optional[str] = None) -> list[RankedKeyword]:
        """Related queries or topics of a RELATED_QUERIES / RELATED_TOPICS widget."""
        self._require_kind(widget, WidgetType.RELATED_QUERIES, WidgetType.RELATED_TOPICS)

        query = params.widget_params(widget, hl or self.language)
        body = await self.transport.get(self.api_url + PATH_RELATED, query)
        return decode(body, RelatedResponse, WIDGET_GUARD_PREFIX).keywords()

    async def search(self, word: str, hl: Optional[str] = None) -> list[KeywordTopic]:
        """Autocomplete topics for a search term."""
        url = f"{self.api_url}{PATH_AUTOCOMPLETE}/{quote(word, safe='')}"
        body = await self.transport.get(url, params.search_params(hl or self.language))
        return decode(body, AutocompleteResponse, WIDGET_GUARD_PREFIX).default.topics

    # ── Daily trends (batch endpoint) ─────────────────────────────────────────

    async def daily(self, hl: Optional[str] = None, loc: str = "US") -> list[TrendingSearch]:
        """Today's trending searches for a location, most prominent first."""
        terms = await self._trending_terms(hl or self.language, loc)
        return [TrendingSearch.from_query(term) for term in terms]

    async def daily_by_day(self, hl: Optional[str] = None, loc: str = "US") -> list[TrendingSearchDays]:
        """Same terms as daily(), grouped under a single "Today" bucket."""
        terms = await self._trending_terms(hl or self.language, loc)
        today = TrendingSearchDays(
            formatted_date=TODAY_LABEL,
            searches=[TrendingSearch.from_query(term) for term in terms],
        )
        return [today]

    async def _trending_terms(self, hl: str, loc: str) -> list[str]:
        body = await self.transport.post(
            self.batch_execute_url,
            params.batch_trending_payload(loc),
            params.batch_trending_params(hl),
        )
        return extract_trending_terms(body.decode("utf-8", errors="replace"), debug=self.debug)

    # ── Reference trees (cached) ──────────────────────────────────────────────

    async def explore_categories(self) -> CategoryNode:
        """Full category tree. Fetched once per client."""
        cached = self.cache.categories.get()
        if cached is not None:
            return cached

        body = await self.transport.get(self.api_url + PATH_CATEGORIES)
        tree = decode(body, CategoryNode)
        self.cache.categories.set(tree)
        return tree

    async def explore_locations(self) -> LocationNode:
        """Full location tree. Fetched once per client."""
        cached = self.cache.locations.get()
        if cached is not None:
            return cached

        body = await self.transport.get(self.api_url + PATH_LOCATIONS)
        tree = decode(body, LocationNode)
        self.cache.locations.set(tree)
        return tree

    # ── Internals ─────────────────────────────────────────────────────────────

    @staticmethod
    def _require_kind(widget: Widget, *kinds: WidgetType) -> None:
        if not widget.is_kind(*kinds):
            raise InvalidWidgetTypeError(widget.id, tuple(k.value for k in kinds))
