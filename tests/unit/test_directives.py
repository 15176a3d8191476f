"""Tests for directive serialization (src/cspkit/policy/directives.py)."""

import pytest

from src.cspkit.policy.directives import (
    as_tokens,
    copy_directives,
    find_directive,
    serialize_directives,
    wire_name,
)

pytestmark = pytest.mark.unit


class TestWireName:
    def test_snake_case_becomes_kebab_case(self):
        assert wire_name("script_src") == "script-src"
        assert wire_name("upgrade_insecure_requests") == "upgrade-insecure-requests"

    def test_kebab_case_is_unchanged(self):
        assert wire_name("default-src") == "default-src"


class TestSerializeDirectives:
    def test_single_directive(self):
        assert serialize_directives({"default_src": ["'none'"]}) == "default-src 'none';"

    def test_entries_joined_in_mapping_order(self):
        header = serialize_directives(
            {"default_src": ["'none'"], "script_src": ["'self'", "'unsafe-inline'"]}
        )
        assert header == "default-src 'none'; script-src 'self' 'unsafe-inline';"

    def test_string_value_is_a_single_token(self):
        header = serialize_directives({"report_uri": "/csp-violation-report-endpoint/"})
        assert header == "report-uri /csp-violation-report-endpoint/;"

    def test_directive_without_tokens_is_bare_name(self):
        header = serialize_directives({"upgrade_insecure_requests": []})
        assert header == "upgrade-insecure-requests;"

    def test_empty_map(self):
        assert serialize_directives({}) == ";"


class TestTokens:
    def test_as_tokens_returns_fresh_list(self):
        source = ["'self'"]
        tokens = as_tokens(source)
        tokens.insert(0, "'nonce-abc'")
        assert source == ["'self'"]

    def test_as_tokens_none(self):
        assert as_tokens(None) == []

    def test_copy_directives_does_not_share_lists(self):
        source = {"script_src": ["'self'"]}
        copy = copy_directives(source)
        copy["script_src"].append("example.com")
        assert source == {"script_src": ["'self'"]}

    def test_find_directive_matches_either_spelling(self):
        assert find_directive({"script-src": []}, "script_src") == "script-src"
        assert find_directive({"script_src": []}, "script-src") == "script_src"
        assert find_directive({"img_src": []}, "script_src") is None
