"""
params.py — Query-string builders for every endpoint family.

Structured requests travel as compact JSON in the `req` parameter;
tz, hl and the widget token are plain parameters beside it.
"""

import json
from typing import Optional
from urllib.parse import urlencode

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError

from gtrends.core.constants import (
    BATCH_FORM_KEY,
    BATCH_RPC_ID,
    BATCH_TRENDING_HOURS,
    COMPARE_DATA_MODE,
    DEFAULT_PARAMS,
    PARAM_HL,
    PARAM_REQ,
    PARAM_TOKEN,
    PARAM_TZ,
)
from gtrends.core.errors import InvalidRequestError
from gtrends.models.explore import ExploreRequest, Widget, WidgetRequest


def default_params() -> dict[str, str]:
    """Fresh copy of the default parameter set."""
    return dict(DEFAULT_PARAMS)


def encode_request(request: BaseModel) -> str:
    """Serialize a request model to compact camelCase JSON."""
    try:
        return request.model_dump_json(by_alias=True, exclude_none=True)
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        raise InvalidRequestError(exc) from exc


def explore_params(request: ExploreRequest, hl: str) -> dict[str, str]:
    return {
        PARAM_TZ: "0",
        PARAM_HL: hl,
        PARAM_REQ: encode_request(request),
    }


def widget_params(
    widget: Widget,
    hl: str,
    request: Optional[WidgetRequest] = None,
) -> dict[str, str]:
    """
    Parameters for a widget detail fetch.

    `request` overrides the widget's own sub-request (see geo_map_request).
    Unset term geos are encoded as {"": ""} by GeoScope itself.
    """
    return {
        PARAM_TZ: "0",
        PARAM_HL: hl,
        PARAM_TOKEN: widget.token,
        PARAM_REQ: encode_request(request if request is not None else widget.request),
    }


def geo_map_request(request: WidgetRequest) -> WidgetRequest:
    """Multi-term geo maps must be requested in percentage mode. Returns a copy."""
    if len(request.comparison_items) > 1:
        return request.model_copy(update={"data_mode": COMPARE_DATA_MODE})
    return request


def search_params(hl: str) -> dict[str, str]:
    return {PARAM_TZ: "0", PARAM_HL: hl}


def batch_trending_params(hl: str) -> dict[str, str]:
    return {"rpcids": BATCH_RPC_ID, PARAM_HL: hl}


def batch_trending_payload(loc: str) -> str:
    """Form body for the trending-now RPC: an RPC envelope around a JSON-in-a-string argument list."""
    args = json.dumps([None, None, loc, 0, None, BATCH_TRENDING_HOURS])
    envelope = json.dumps([[[BATCH_RPC_ID, args, None, "generic"]]])
    return urlencode({BATCH_FORM_KEY: envelope})
