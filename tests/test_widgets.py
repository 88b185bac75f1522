"""
test_widgets.py — Tests for widget models, ordering and filtering,
and the GeoScope tagged value.
"""

import pytest
from pydantic import ValidationError

from gtrends.models.explore import (
    GeoKind,
    GeoScope,
    Widget,
    WidgetComparisonItem,
    WidgetType,
)
from gtrends.services.widgets import WidgetCollection, sort_widgets, widget_order_key


def _collection(*ids: str) -> WidgetCollection:
    return WidgetCollection(Widget(id=i) for i in ids)


def _ids(widgets) -> list[str]:
    return [w.id for w in widgets]


# ── Ordering ──────────────────────────────────────────────────────────────────

class TestSort:
    def test_unsuffixed_first_then_ascending(self):
        widgets = _collection("RELATED_QUERIES_2", "RELATED_TOPICS_0", "RELATED_QUERIES_1", "TIMESERIES", "GEO_MAP")

        assert _ids(widgets.sorted()) == [
            "TIMESERIES", "GEO_MAP", "RELATED_TOPICS_0", "RELATED_QUERIES_1", "RELATED_QUERIES_2",
        ]

    def test_ties_keep_input_order(self):
        widgets = _collection("RELATED_TOPICS_0", "GEO_MAP", "RELATED_QUERIES_0", "TIMESERIES")

        assert _ids(sort_widgets(widgets)) == ["GEO_MAP", "TIMESERIES", "RELATED_TOPICS_0", "RELATED_QUERIES_0"]

    def test_sort_does_not_mutate(self):
        widgets = _collection("RELATED_QUERIES_1", "TIMESERIES")

        widgets.sorted()

        assert _ids(widgets) == ["RELATED_QUERIES_1", "TIMESERIES"]

    def test_order_key(self):
        assert widget_order_key(Widget(id="TIMESERIES")) == (0, 0)
        assert widget_order_key(Widget(id="RELATED_TOPICS_3")) == (1, 3)

    def test_sorted_keeps_collection_type(self):
        assert isinstance(_collection("TIMESERIES").sorted(), WidgetCollection)


# ── Filtering ─────────────────────────────────────────────────────────────────

class TestByType:
    def setup_method(self):
        self.widgets = _collection(
            "RELATED_QUERIES_0", "RELATED_TOPICS_0", "RELATED_QUERIES_1", "TIMESERIES", "GEO_MAP",
        )

    def test_counts(self):
        assert len(self.widgets.by_type(WidgetType.RELATED_QUERIES)) == 2
        assert len(self.widgets.by_type(WidgetType.RELATED_TOPICS)) == 1
        assert len(self.widgets.by_type(WidgetType.TIMESERIES)) == 1
        assert len(self.widgets.by_type(WidgetType.GEO_MAP)) == 1

    def test_keeps_order(self):
        assert _ids(self.widgets.by_type(WidgetType.RELATED_QUERIES)) == ["RELATED_QUERIES_0", "RELATED_QUERIES_1"]


class TestByOrder:
    def setup_method(self):
        self.widgets = _collection(
            "RELATED_QUERIES_0", "RELATED_TOPICS_0", "RELATED_QUERIES_1", "RELATED_TOPICS_1", "TIMESERIES", "GEO_MAP",
        )

    def test_order_one(self):
        assert _ids(self.widgets.by_order(1)) == ["RELATED_QUERIES_1", "RELATED_TOPICS_1"]

    def test_order_zero_excludes_unsuffixed(self):
        assert _ids(self.widgets.by_order(0)) == ["RELATED_QUERIES_0", "RELATED_TOPICS_0"]

    def test_missing_order(self):
        assert len(self.widgets.by_order(99)) == 0


# ── Widget model ──────────────────────────────────────────────────────────────

class TestWidget:
    @pytest.mark.parametrize("widget_id, order", [
        ("RELATED_QUERIES_3", 3),
        ("RELATED_TOPICS_0", 0),
        ("TIMESERIES", None),
        ("GEO_MAP", None),
        ("RELATED_QUERIES", None),
        ("", None),
    ])
    def test_order(self, widget_id, order):
        assert Widget(id=widget_id).order == order

    def test_kind(self):
        assert Widget(id="RELATED_TOPICS_1").kind is WidgetType.RELATED_TOPICS
        assert Widget(id="GEO_MAP").kind is WidgetType.GEO_MAP
        assert Widget(id="SOMETHING_ELSE").kind is None

    def test_is_kind(self):
        widget = Widget(id="RELATED_QUERIES_0")
        assert widget.is_kind(WidgetType.RELATED_QUERIES, WidgetType.RELATED_TOPICS)
        assert not widget.is_kind(WidgetType.TIMESERIES)

    def test_upstream_payload(self):
        widget = Widget.model_validate({
            "request": {
                "time": "2024-01-01 2024-12-31",
                "resolution": "WEEK",
                "locale": "en-US",
                "comparisonItem": [{
                    "geo": {"country": "US"},
                    "complexKeywordsRestriction": {"keyword": [{"type": "BROAD", "value": "golang"}]},
                }],
                "requestOptions": {"property": "", "backend": "IZG", "category": 31},
                "userConfig": {"userType": "USER_TYPE_LEGIT_USER"},
            },
            "lineAnnotationText": "Search interest",
            "bullets": [{"text": "golang"}],
            "showLegend": False,
            "resolvedRequest": {},
            "token": "APP6_UEAAAAA",
            "id": "TIMESERIES",
            "type": "fe_line_chart",
            "title": "Interest over time",
            "template": "fe",
        })

        assert widget.token == "APP6_UEAAAAA"
        assert widget.kind is WidgetType.TIMESERIES
        assert widget.request.request_options.category == 31
        assert widget.request.comparison_items[0].geo == GeoScope.multi({"country": "US"})
        assert widget.request.comparison_items[0].complex_keywords_restriction.keyword[0].value == "golang"


# ── GeoScope ──────────────────────────────────────────────────────────────────

class TestGeoScope:
    @pytest.mark.parametrize("wire", [None, "", {}, {"": ""}])
    def test_unset(self, wire):
        geo = GeoScope.from_wire(wire)
        assert geo.kind is GeoKind.UNSET
        assert geo.to_wire() == {"": ""}

    def test_single(self):
        geo = GeoScope.from_wire("US")
        assert geo.kind is GeoKind.SINGLE
        assert geo.to_wire() == "US"

    def test_multi(self):
        geo = GeoScope.from_wire({"region": "US-CA"})
        assert geo.kind is GeoKind.MULTI
        assert geo.to_wire() == {"region": "US-CA"}

    def test_instance_passes_through(self):
        geo = GeoScope.single("GB")
        assert GeoScope.from_wire(geo) is geo

    def test_rejects_other_types(self):
        with pytest.raises(ValueError):
            GeoScope.from_wire(42)

    def test_model_rejects_other_types(self):
        with pytest.raises(ValidationError):
            WidgetComparisonItem.model_validate({"geo": 42})

    def test_default_is_unset(self):
        item = WidgetComparisonItem()
        assert item.geo.kind is GeoKind.UNSET
        assert item.model_dump(by_alias=True, exclude_none=True)["geo"] == {"": ""}
