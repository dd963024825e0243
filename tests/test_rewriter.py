import logging

import pytest

from urlmock.rewriter import rewrite, rewrite_arg

LOOKUP = {
    "https://example.com": "https://example.net",
    "https://api.example.com/v1/orders": "http://127.0.0.1:9090/v1/orders",
}


class TestRewrite:
    @pytest.mark.parametrize("key", list(LOOKUP))
    def test_known_key_is_replaced(self, key):
        assert rewrite(LOOKUP, key) == LOOKUP[key]


    def test_unknown_string_is_untouched(self):
        value = "https://example.org"
        assert rewrite(LOOKUP, value) is value


    def test_match_is_exact_not_prefix(self):
        assert rewrite(LOOKUP, "https://example.com/path") == "https://example.com/path"
        assert rewrite(LOOKUP, "https://example.com/") == "https://example.com/"


    @pytest.mark.parametrize("value", [None, 42, 3.5, b"https://example.com", ["https://example.com"]])
    def test_non_string_is_untouched(self, value):
        assert rewrite(LOOKUP, value) is value


    def test_unhashable_value_does_not_raise(self):
        value = {"url": "https://example.com"}
        assert rewrite(LOOKUP, value) is value


    def test_empty_table(self):
        assert rewrite({}, "https://example.com") == "https://example.com"


    def test_logs_redirect(self, caplog):
        with caplog.at_level(logging.INFO, logger="urlmock.rewriter"):
            rewrite(LOOKUP, "https://example.com")
        assert "https://example.net" in caplog.text


class TestRewriteArg:
    def test_writes_back_into_slot(self):
        args = ["GET", "https://example.com", {"body": "x"}]
        rewrite_arg(LOOKUP, args, 1)
        assert args == ["GET", "https://example.net", {"body": "x"}]


    def test_out_of_range_is_noop(self):
        args = ["https://example.com"]
        rewrite_arg(LOOKUP, args, 3)
        rewrite_arg(LOOKUP, args, -1)
        assert args == ["https://example.com"]
