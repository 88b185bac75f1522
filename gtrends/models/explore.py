"""
explore.py — Pydantic schemas for the explore endpoint and its widgets.

ExploreRequest   — what the caller sends to explore()
Widget           — one fetchable data view returned by explore()
WidgetRequest    — the sub-request embedded in a widget; sent back
                   verbatim (plus term geo normalization) with the widget token
GeoScope         — tagged geo value of widget comparison terms
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Annotated, Any, Optional, Union

from pydantic import ConfigDict, Field, PlainSerializer, PlainValidator, field_validator

from gtrends.models.base import WireModel


# ── Explore request ───────────────────────────────────────────────────────────

class SearchProperty(str, Enum):
    """Upstream content property. WEB is the unfiltered web search."""
    WEB = ""
    NEWS = "news"
    IMAGES = "images"
    SHOPPING = "froogle"
    YOUTUBE = "youtube"


class ComparisonItem(WireModel):
    """One keyword with its geographic and time scope."""
    keyword: str
    # Region code ("US", "US-CA"); None for worldwide
    geo: Optional[str] = None
    time: str = "today 12-m"
    granular_time_resolution: bool = False
    # Unix seconds, alternative to `time`
    start_time: str = ""
    end_time: str = ""

    @field_validator("geo")
    @classmethod
    def _empty_geo_is_worldwide(cls, value: Optional[str]) -> Optional[str]:
        return value or None

    @field_validator("time")
    @classmethod
    def _url_style_time(cls, value: str) -> str:
        # "today+12-m" as copied from a trends URL
        return value.replace("+", " ")


class ExploreRequest(WireModel):
    comparison_items: list[ComparisonItem] = Field(alias="comparisonItem", min_length=1)
    # 0 = all categories; ids come from explore_categories()
    category: int = 0
    search_property: SearchProperty = Field(default=SearchProperty.WEB, alias="property")


# ── Widget types ──────────────────────────────────────────────────────────────

class WidgetType(str, Enum):
    TIMESERIES = "TIMESERIES"
    GEO_MAP = "GEO_MAP"
    RELATED_QUERIES = "RELATED_QUERIES"
    RELATED_TOPICS = "RELATED_TOPICS"


# Identifiers that never carry an order suffix
UNORDERED_WIDGET_IDS = frozenset({WidgetType.TIMESERIES.value, WidgetType.GEO_MAP.value})


# ── Geo scope ─────────────────────────────────────────────────────────────────

class GeoKind(str, Enum):
    UNSET = "unset"
    SINGLE = "single"
    MULTI = "multi"


@dataclass(frozen=True)
class GeoScope:
    """
    Geographic scope of a widget comparison term.

    Upstream sends a bare code, a mapping such as {"country": "US"}, or
    nothing at all. It rejects a request whose geo is missing but accepts
    an explicit {"": ""}, which is therefore how UNSET is encoded.
    """

    kind: GeoKind = GeoKind.UNSET
    code: str = ""
    regions: dict[str, str] = field(default_factory=dict)

    @classmethod
    def single(cls, code: str) -> "GeoScope":
        return cls(GeoKind.SINGLE, code=code) if code else cls()

    @classmethod
    def multi(cls, regions: dict[str, str]) -> "GeoScope":
        regions = {k: v for k, v in regions.items() if k}
        return cls(GeoKind.MULTI, regions=regions) if regions else cls()

    @classmethod
    def from_wire(cls, value: Any) -> "GeoScope":
        if isinstance(value, GeoScope):
            return value
        if value is None:
            return cls()
        if isinstance(value, str):
            return cls.single(value)
        if isinstance(value, dict):
            return cls.multi({str(k): str(v) for k, v in value.items()})
        raise ValueError(f"unsupported geo value: {value!r}")

    def to_wire(self) -> Union[str, dict[str, str]]:
        if self.kind is GeoKind.SINGLE:
            return self.code
        if self.kind is GeoKind.MULTI:
            return dict(self.regions)
        return {"": ""}


Geo = Annotated[GeoScope, PlainValidator(GeoScope.from_wire), PlainSerializer(GeoScope.to_wire)]


# ── Widget request ────────────────────────────────────────────────────────────
# Unknown upstream keys are kept (extra="allow"): the widget token is
# issued for the request as upstream built it.

class KeywordRestriction(WireModel):
    type: str = ""  # "BROAD", "ENTITY", ...
    value: str = ""


class KeywordsRestriction(WireModel):
    keyword: list[KeywordRestriction] = Field(default_factory=list)


class WidgetComparisonItem(WireModel):
    model_config = ConfigDict(extra="allow")

    geo: Geo = Field(default_factory=GeoScope)
    time: Optional[str] = None
    complex_keywords_restriction: Optional[KeywordsRestriction] = None
    original_time_range_for_explore_url: Optional[str] = None


class RequestOptions(WireModel):
    model_config = ConfigDict(extra="allow")

    search_property: str = Field(default="", alias="property")
    backend: str = ""
    category: int = 0


class WidgetRequest(WireModel):
    model_config = ConfigDict(extra="allow")

    # Sent back exactly as upstream issued it, {} included
    geo: Optional[Any] = None
    time: Optional[str] = None
    resolution: Optional[str] = None
    locale: Optional[str] = None
    restriction: WidgetComparisonItem = Field(default_factory=WidgetComparisonItem)
    comparison_items: list[WidgetComparisonItem] = Field(default_factory=list, alias="comparisonItem")
    request_options: RequestOptions = Field(default_factory=RequestOptions)
    keyword_type: str = ""
    metric: list[str] = Field(default_factory=list)
    language: str = ""
    trendiness_settings: dict[str, Any] = Field(default_factory=dict)
    data_mode: Optional[str] = None
    user_config: Optional[dict[str, Any]] = None
    user_country_code: Optional[str] = None


# ── Widget ────────────────────────────────────────────────────────────────────

class Widget(WireModel):
    """
    One data view returned by explore().

    `id` is "TYPE" or "TYPE_N", where N is the index of the comparison
    term the widget belongs to.
    """
    token: str = ""
    type: str = ""  # chart kind, e.g. "fe_line_chart"
    title: str = ""
    id: str = ""
    request: WidgetRequest = Field(default_factory=WidgetRequest)

    def is_kind(self, *kinds: WidgetType) -> bool:
        return any(self.id.startswith(k.value) for k in kinds)

    @property
    def kind(self) -> Optional[WidgetType]:
        for k in WidgetType:
            if self.id.startswith(k.value):
                return k
        return None

    @property
    def order(self) -> Optional[int]:
        """Numeric suffix of the identifier, or None when there is none."""
        if self.id in UNORDERED_WIDGET_IDS:
            return None
        _, sep, suffix = self.id.rpartition("_")
        if not sep or not suffix.isdecimal():
            return None
        return int(suffix)


class ExploreResponse(WireModel):
    widgets: list[Widget] = Field(default_factory=list)
