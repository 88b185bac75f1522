"""
widgetdata.py — Pydantic schemas for widget detail endpoints.

Timeline       — one point of interest-over-time (multiline)
GeoMap         — one region of interest-by-location (comparedgeo)
RankedKeyword  — one related query or topic (relatedsearches)
KeywordTopic   — a knowledge-graph topic (autocomplete, related topics)

Per-term sequences (value, has_data, formatted_value) hold one entry per
comparison term, in the order of the originating request.
"""

from pydantic import Field

from gtrends.models.base import WireModel


# ── Interest over time ────────────────────────────────────────────────────────

class Timeline(WireModel):
    time: str = ""  # unix seconds
    formatted_time: str = ""
    formatted_axis_time: str = ""
    value: list[int] = Field(default_factory=list)
    has_data: list[bool] = Field(default_factory=list)
    formatted_value: list[str] = Field(default_factory=list)
    is_partial: bool = False


class _MultilineBody(WireModel):
    timeline_data: list[Timeline] = Field(default_factory=list)


class MultilineResponse(WireModel):
    default: _MultilineBody = Field(default_factory=_MultilineBody)


# ── Interest by location ──────────────────────────────────────────────────────

class GeoMap(WireModel):
    geo_code: str = ""
    geo_name: str = ""
    value: list[int] = Field(default_factory=list)
    formatted_value: list[str] = Field(default_factory=list)
    # Index of the term with the highest value in this region
    max_value_index: int = 0
    has_data: list[bool] = Field(default_factory=list)


class _GeoBody(WireModel):
    geo_map_data: list[GeoMap] = Field(default_factory=list)


class ComparedGeoResponse(WireModel):
    default: _GeoBody = Field(default_factory=_GeoBody)


# ── Topics and related terms ──────────────────────────────────────────────────

class KeywordTopic(WireModel):
    mid: str = ""  # knowledge-graph machine id, usable as an explore keyword
    title: str = ""
    type: str = ""


class RankedKeyword(WireModel):
    """A related query (`query` set) or related topic (`topic` set)."""
    query: str = ""
    topic: KeywordTopic = Field(default_factory=KeywordTopic)
    value: int = 0
    formatted_value: str = ""  # "100", "+250%", "Breakout"
    has_data: bool = False
    link: str = ""


class _RankedList(WireModel):
    ranked_keyword: list[RankedKeyword] = Field(default_factory=list)


class _RelatedBody(WireModel):
    ranked_list: list[_RankedList] = Field(default_factory=list)


class RelatedResponse(WireModel):
    default: _RelatedBody = Field(default_factory=_RelatedBody)

    def keywords(self) -> list[RankedKeyword]:
        """All ranked lists (top, rising) concatenated in order."""
        return [kw for ranked in self.default.ranked_list for kw in ranked.ranked_keyword]


class _AutocompleteBody(WireModel):
    topics: list[KeywordTopic] = Field(default_factory=list)


class AutocompleteResponse(WireModel):
    default: _AutocompleteBody = Field(default_factory=_AutocompleteBody)
