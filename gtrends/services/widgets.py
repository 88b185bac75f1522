"""
widgets.py — Ordering and filtering of explore widgets.

Widgets without an order suffix (TIMESERIES, GEO_MAP) sort first,
suffixed ones follow by ascending suffix. Ties keep their input order.
"""

from typing import Iterable

from gtrends.models.explore import Widget, WidgetType


def widget_order_key(widget: Widget) -> tuple[int, int]:
    order = widget.order
    if order is None:
        return (0, 0)
    return (1, order)


def sort_widgets(widgets: Iterable[Widget]) -> list[Widget]:
    return sorted(widgets, key=widget_order_key)


class WidgetCollection(list[Widget]):
    """The ordered widget list returned by explore()."""

    def sorted(self) -> "WidgetCollection":
        return WidgetCollection(sort_widgets(self))

    def by_type(self, widget_type: WidgetType) -> "WidgetCollection":
        return WidgetCollection(w for w in self if w.is_kind(widget_type))

    def by_order(self, index: int) -> "WidgetCollection":
        """Widgets of the comparison term at `index`. Unsuffixed widgets are never included."""
        return WidgetCollection(w for w in self if w.order == index)
