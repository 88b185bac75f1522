"""
Wire contract with the upstream trends service.

Paths, query parameter names and the default parameter set must match
exactly what the service expects; they are not configuration.
"""

# ─── Endpoint paths (relative to settings.api_url) ─────────────────────────────
PATH_EXPLORE = "/explore"
PATH_CATEGORIES = "/explore/pickers/category"
PATH_LOCATIONS = "/explore/pickers/geo"
PATH_RELATED = "/widgetdata/relatedsearches"
PATH_INTEREST_OVER_TIME = "/widgetdata/multiline"
PATH_INTEREST_BY_REGION = "/widgetdata/comparedgeo"
PATH_AUTOCOMPLETE = "/autocomplete"

# ─── Query parameter names ─────────────────────────────────────────────────────
PARAM_HL = "hl"
PARAM_CAT = "cat"
PARAM_REQ = "req"
PARAM_TZ = "tz"
PARAM_TOKEN = "token"

DEFAULT_PARAMS: dict[str, str] = {
    PARAM_TZ: "0",
    PARAM_CAT: "all",
    "fi": "0",
    "fs": "0",
    PARAM_HL: "EN",
    "ri": "300",
    "rs": "20",
}

# Multi-term geo requests must ask for relative percentages.
COMPARE_DATA_MODE = "PERCENTAGES"

# ─── Response guards ───────────────────────────────────────────────────────────
# Prepended to JSON bodies to stop direct <script> inclusion.
GUARD_PREFIX = ")]}'"
# Widget-data and autocomplete endpoints add a trailing comma.
WIDGET_GUARD_PREFIX = ")]}',"

# ─── Batch execute ─────────────────────────────────────────────────────────────
BATCH_RPC_ID = "i0OFE"
BATCH_FORM_KEY = "f.req"
# Lookback window in hours sent with the trending-now RPC.
BATCH_TRENDING_HOURS = 48

TODAY_LABEL = "Today"

# ─── Daily trends categories ───────────────────────────────────────────────────
TRENDS_CATEGORIES: dict[str, str] = {
    "all": "all",
    "b": "business",
    "e": "entertainment",
    "h": "top stories",
    "m": "health",
    "s": "sports",
    "t": "sci/tech",
}

# ─── Headers ───────────────────────────────────────────────────────────────────
CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_FORM = "application/x-www-form-urlencoded;charset=UTF-8"
