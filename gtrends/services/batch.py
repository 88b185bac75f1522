"""
batch.py — Term extraction for batchexecute responses.

A batchexecute body is line oriented. One of its lines is a JSON array
shaped like:

    [["wrb.fr", "i0OFE", "<json string>", ...], ...]

The third element of the first entry is itself a JSON document:

    [null, [["term", ...], ["term", ...], ...], ...]

and the first element of each item is a trending term.

Every unwrap step is a checked type + length test. A line that does not
match is skipped; the first line yielding at least one term wins.
"""

import json
import logging
from typing import Any, Optional

from gtrends.core.errors import ExtractionError

logger = logging.getLogger(__name__)


def _as_list(value: Any, min_len: int = 0) -> Optional[list]:
    if isinstance(value, list) and len(value) >= min_len:
        return value
    return None


def _loads(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError:
        return None


def terms_from_line(line: str) -> Optional[list[str]]:
    """
    Decode one candidate line.

    Returns None when the line does not have the expected shape, and a
    (possibly empty) list of terms when it does.
    """
    outer = _as_list(_loads(line), 1)
    if outer is None:
        return None

    envelope = _as_list(outer[0], 3)
    if envelope is None or not isinstance(envelope[2], str):
        return None

    payload = _as_list(_loads(envelope[2]))
    if payload is None:
        return None
    if len(payload) < 2:
        return []

    items = _as_list(payload[1])
    if items is None:
        return None

    terms = []
    for item in items:
        entry = _as_list(item, 1)
        if entry is not None and isinstance(entry[0], str):
            terms.append(entry[0])
    return terms


def extract_trending_terms(text: str, debug: bool = False) -> list[str]:
    """
    Return the trending terms from the first qualifying line.

    Later lines are ignored once a non-empty result is found; upstream
    has only ever sent one.
    """
    for line in text.splitlines():
        line = line.strip()
        if not (line.startswith("[") and line.endswith("]")):
            continue

        terms = terms_from_line(line)
        if terms is None:
            if debug:
                logger.debug("Skipping batch line with unexpected shape: %.120s", line)
            continue
        if terms:
            return terms

    raise ExtractionError()
