"""Route resolver tests."""

import itertools

import pytest
from roadrouter_core.routing.matcher import PatternMatcher
from roadrouter_core.routing.resolver import (
    MatchMethod,
    NoRouteFound,
    RouteResolver,
    resolve,
)
from roadrouter_core.routing.table import RoutingTable


class TestRouteResolver:
    """Test RouteResolver class."""

    def test_more_specific_wins(self):
        """Test longer literal prefix beats shorter one."""
        table = RoutingTable.from_dict({
            "gpt*": "fallback-model",
            "gpt-4*": "specific-model",
        })
        assert resolve("gpt-4-turbo", table) == "specific-model"
        assert resolve("gpt-3.5-turbo", table) == "fallback-model"

    def test_single_match(self):
        """Test a single matching rule."""
        table = RoutingTable.from_dict({
            "claude-*-sonnet-*": "sonnet",
            "*thinking*": "thinker",
        })
        assert resolve("claude-3-5-sonnet-20241022", table) == "sonnet"
        assert resolve("claude-3-thinking-model", table) == "thinker"

    def test_fallback(self):
        """Test fallback when nothing matches."""
        table = RoutingTable.from_dict({"gpt*": "openai"})
        assert resolve("unknown-model", table, "default-target") == "default-target"

    def test_no_route_found(self):
        """Test NoRouteFound without fallback."""
        table = RoutingTable.from_dict({"gpt*": "openai"})

        with pytest.raises(NoRouteFound) as exc_info:
            resolve("unknown-model", table)

        assert exc_info.value.model == "unknown-model"

    def test_empty_table(self):
        """Test empty table falls back."""
        assert resolve("gpt-4", RoutingTable(), "default") == "default"

    def test_tie_breaks_on_smallest_pattern(self):
        """Test equal specificity picks the smallest pattern."""
        table = RoutingTable.from_dict({
            "gpt-*": "by-prefix",
            "*t-4o": "by-suffix",
        })
        # Both score 4; "*t-4o" < "gpt-*"
        assert resolve("gpt-4o", table) == "by-suffix"

    def test_tie_with_exact_rule(self):
        """Test exact rule competes on specificity like any other."""
        table = RoutingTable.from_dict({
            "abc": "exact",
            "abc*": "prefix",
        })
        assert resolve("abc", table) == "exact"

    def test_result_independent_of_rule_order(self):
        """Test every insertion order yields the same target."""
        rules = [
            ("gpt-*", "a"),
            ("*t-4o", "b"),
            ("g*o", "c"),
            ("*", "d"),
            ("gpt*", "e"),
        ]
        results = {
            resolve("gpt-4o", RoutingTable.from_rules(order))
            for order in itertools.permutations(rules)
        }
        assert results == {"b"}

    def test_repeated_resolution_is_stable(self):
        """Test repeated calls return the same target."""
        table = RoutingTable.from_dict({"a*": "1", "*a": "2", "*": "3"})
        results = {resolve("aa", table) for _ in range(50)}
        assert results == {"2"}


class TestResolveMatch:
    """Test resolve_match details."""

    def test_wildcard_match(self):
        """Test wildcard decision details."""
        table = RoutingTable.from_dict({"gpt*": "x", "gpt-4*": "y"})
        result = RouteResolver().resolve_match("gpt-4-turbo", table)

        assert result.target == "y"
        assert result.pattern == "gpt-4*"
        assert result.specificity == 5
        assert result.method is MatchMethod.WILDCARD
        assert result.candidates == 2
        assert result.is_fallback is False

    def test_exact_match(self):
        """Test exact decision details."""
        table = RoutingTable.from_dict({"gpt-4o": "z"})
        result = RouteResolver().resolve_match("gpt-4o", table)

        assert result.method is MatchMethod.EXACT
        assert result.candidates == 1

    def test_fallback_match(self):
        """Test fallback decision details."""
        result = RouteResolver().resolve_match("o1", RoutingTable(), "default")

        assert result.is_fallback is True
        assert result.pattern is None
        assert result.target == "default"


class TestCandidates:
    """Test candidate ordering."""

    def test_candidates_best_first(self):
        """Test candidates ranked by specificity then pattern."""
        table = RoutingTable.from_dict({
            "*": "any",
            "gpt*": "gpt",
            "gpt-4*": "gpt4",
            "*4*": "four",
        })
        patterns = [r.pattern for r in RouteResolver().candidates("gpt-4o", table)]
        assert patterns == ["gpt-4*", "gpt*", "*4*", "*"]


class TestCustomMatcher:
    """Test injecting a matcher."""

    def test_uses_injected_matcher(self):
        """Test resolver delegates to its matcher."""

        class CaseInsensitiveMatcher(PatternMatcher):
            def matches(self, pattern, value):
                return pattern.lower() == value.lower()

        resolver = RouteResolver(CaseInsensitiveMatcher())
        table = RoutingTable.from_dict({"GPT-4O": "openai"})
        assert resolver.resolve("gpt-4o", table) == "openai"
