"""
trending.py — Pydantic schemas for daily trending searches.

The batch endpoint only yields the query text, so traffic, image and
articles stay empty for now; the fields mirror the full upstream shape.
"""

from typing import Optional

from pydantic import Field

from gtrends.models.base import WireModel


class SearchTitle(WireModel):
    query: str


class SearchImage(WireModel):
    news_url: str = ""
    source: str = ""
    image_url: str = ""


class SearchArticle(WireModel):
    title: str = ""
    time_ago: str = ""
    source: str = ""
    image: Optional[SearchImage] = None
    url: str = ""
    snippet: str = ""


class TrendingSearch(WireModel):
    title: SearchTitle
    formatted_traffic: str = ""  # "500K+"
    image: Optional[SearchImage] = None
    articles: list[SearchArticle] = Field(default_factory=list)

    @classmethod
    def from_query(cls, query: str) -> "TrendingSearch":
        return cls(title=SearchTitle(query=query))


class TrendingSearchDays(WireModel):
    formatted_date: str
    searches: list[TrendingSearch] = Field(default_factory=list, alias="trendingSearches")
