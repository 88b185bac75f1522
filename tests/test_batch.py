"""
test_batch.py — Tests for the batchexecute term extractor.

The fixtures mimic the real response layout: an anti-XSSI guard, chunk
length lines, and one array line whose envelope carries a JSON string.
"""

import json

import pytest

from gtrends.core.errors import ExtractionError
from gtrends.services.batch import extract_trending_terms, terms_from_line


def batch_line(items, extra=None) -> str:
    """One response line whose envelope wraps `[null, items, ...]`."""
    payload = [None, items] + (extra or [])
    return json.dumps([
        ["wrb.fr", "i0OFE", json.dumps(payload), None, None, None, "generic"],
        ["di", 42],
        ["af.httprm", 41, "-1234", 7],
    ])


def batch_response(*lines: str) -> str:
    body = [")]}'", ""]
    for line in lines:
        body.append(str(len(line)))
        body.append(line)
    return "\n".join(body) + "\n"


GOOD_ITEMS = [["golang", None, "US", [1700000000]], ["rust", None, "US", [1700000100]]]


# ── terms_from_line ───────────────────────────────────────────────────────────

class TestTermsFromLine:
    def test_expected_shape(self):
        assert terms_from_line(batch_line(GOOD_ITEMS)) == ["golang", "rust"]

    def test_single_outer_entry_is_enough(self):
        line = json.dumps([["wrb.fr", "i0OFE", json.dumps([None, [["golang"]]])]])
        assert terms_from_line(line) == ["golang"]

    def test_non_list_items_are_skipped(self):
        items = [["golang"], "oops", [], [42], {"a": 1}, ["rust"]]
        assert terms_from_line(batch_line(items)) == ["golang", "rust"]

    def test_payload_without_items_is_empty(self):
        line = json.dumps([["wrb.fr", "i0OFE", json.dumps([None])]])
        assert terms_from_line(line) == []

    @pytest.mark.parametrize("line", [
        "not json",
        "[]",
        "[1, 2, 3]",
        json.dumps([["wrb.fr", "i0OFE"]]),
        json.dumps([["wrb.fr", "i0OFE", None]]),
        json.dumps([["wrb.fr", "i0OFE", "{not json"]]),
        json.dumps([["wrb.fr", "i0OFE", json.dumps({"a": 1})]]),
        json.dumps([["wrb.fr", "i0OFE", json.dumps([None, "not a list"])]]),
    ])
    def test_mismatched_shapes(self, line):
        assert terms_from_line(line) is None


# ── extract_trending_terms ────────────────────────────────────────────────────

class TestExtractTrendingTerms:
    def test_full_response(self):
        text = batch_response(batch_line(GOOD_ITEMS), '[["e",4,null,null,150]]')
        assert extract_trending_terms(text) == ["golang", "rust"]

    def test_skips_unrelated_lines_before_match(self):
        text = batch_response('[["e",4,null,null,150]]', "[broken", batch_line(GOOD_ITEMS))
        assert extract_trending_terms(text) == ["golang", "rust"]

    def test_surrounding_whitespace_is_ignored(self):
        assert extract_trending_terms("   " + batch_line(GOOD_ITEMS) + "  \r\n") == ["golang", "rust"]

    def test_first_non_empty_line_wins(self):
        text = batch_response(batch_line([["first"]]), batch_line([["second"]]))
        assert extract_trending_terms(text) == ["first"]

    def test_empty_match_keeps_scanning(self):
        text = batch_response(batch_line([]), batch_line([["later"]]))
        assert extract_trending_terms(text) == ["later"]

    def test_no_matching_line(self):
        with pytest.raises(ExtractionError) as exc_info:
            extract_trending_terms(batch_response('[["e",4,null,null,150]]'))

        assert "no valid JSON found in response" in str(exc_info.value)

    def test_invalid_response(self):
        with pytest.raises(ExtractionError):
            extract_trending_terms("invalid response")

    def test_empty_response(self):
        with pytest.raises(ExtractionError):
            extract_trending_terms("")

    def test_only_empty_matches(self):
        with pytest.raises(ExtractionError):
            extract_trending_terms(batch_line([]))
