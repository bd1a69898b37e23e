"""Tests for suffix rules."""

from __future__ import annotations

import pytest

from publicsuffix.core.rules import DEFAULT_RULE, Rule, RuleType, labels, parse_rule


class TestParseRule:
    """Tests for parse_rule function."""

    def test_normal_rule(self) -> None:
        """Plain lines become normal rules."""
        rule = parse_rule("co.uk")
        assert rule == Rule(RuleType.NORMAL, "co.uk", 2, False)

    def test_wildcard_rule(self) -> None:
        """Wildcard marker is stripped and counts as one label."""
        rule = parse_rule("*.kawasaki.jp")
        assert rule.type is RuleType.WILDCARD
        assert rule.value == "kawasaki.jp"
        assert rule.length == 3

    def test_bare_wildcard_rule(self) -> None:
        """The bare "*" rule has an empty value and length 1."""
        rule = parse_rule("*")
        assert rule.type is RuleType.WILDCARD
        assert rule.value == ""
        assert rule.length == 1

    def test_exception_rule(self) -> None:
        """Exception marker is stripped and its first label is not counted."""
        rule = parse_rule("!city.kawasaki.jp")
        assert rule.type is RuleType.EXCEPTION
        assert rule.value == "city.kawasaki.jp"
        assert rule.length == 2

    def test_private_flag(self) -> None:
        """Private flag is carried on the rule."""
        assert parse_rule("github.io", private=True).private is True
        assert parse_rule("github.io").private is False

    def test_arbitrary_content_is_normal(self) -> None:
        """Content is not validated."""
        rule = parse_rule("not a domain")
        assert rule.type is RuleType.NORMAL
        assert rule.value == "not a domain"

    def test_empty_content_raises(self) -> None:
        """Empty lines are rejected."""
        with pytest.raises(ValueError):
            parse_rule("")

    def test_rules_are_immutable(self) -> None:
        """Rules cannot be modified after construction."""
        rule = parse_rule("com")
        with pytest.raises(AttributeError):
            rule.value = "net"  # type: ignore[misc]

    def test_str_restores_source(self) -> None:
        """str() gives back the source line."""
        for line in ["com", "*.ck", "!www.ck", "*"]:
            assert str(parse_rule(line)) == line

    def test_default_rule(self) -> None:
        """The default rule is the bare wildcard."""
        assert DEFAULT_RULE == parse_rule("*")


class TestLabels:
    """Tests for labels function."""

    def test_splits_on_dots(self) -> None:
        assert labels("www.example.co.uk") == ["www", "example", "co", "uk"]

    def test_single_label(self) -> None:
        assert labels("com") == ["com"]


class TestRuleMatch:
    """Tests for Rule.match."""

    def test_normal_matches_exact_name(self) -> None:
        """A normal rule matches a name equal to its value."""
        assert parse_rule("com").match("com") is True

    def test_normal_matches_subdomain(self) -> None:
        """A normal rule matches names ending on a label boundary."""
        assert parse_rule("co.uk").match("example.co.uk") is True
        assert parse_rule("uk").match("www.example.co.uk") is True

    def test_rejects_mid_label_suffix(self) -> None:
        """The suffix must start at a label boundary."""
        assert parse_rule("uk").match("example.fuk") is False
        assert parse_rule("co.uk").match("deco.uk") is False

    def test_rejects_non_suffix(self) -> None:
        """Rules that are not a suffix of the name do not match."""
        assert parse_rule("com").match("example.net") is False

    def test_wildcard_needs_extra_label(self) -> None:
        """A wildcard rule does not match its bare value."""
        rule = parse_rule("*.ck")
        assert rule.match("ck") is False
        assert rule.match("example.ck") is True
        assert rule.match("www.example.ck") is True

    def test_wildcard_label_boundary(self) -> None:
        """A wildcard rule still requires a dot before its value."""
        assert parse_rule("*.ck").match("example.tck") is False

    def test_exception_matches(self) -> None:
        """An exception rule matches its own name and subdomains."""
        rule = parse_rule("!city.kawasaki.jp")
        assert rule.match("city.kawasaki.jp") is True
        assert rule.match("www.city.kawasaki.jp") is True
        assert rule.match("town.kawasaki.jp") is False


class TestRuleDecompose:
    """Tests for Rule.decompose."""

    def test_normal_rule(self) -> None:
        """Normal rules split off their own labels."""
        assert parse_rule("co.uk").decompose("www.example.co.uk") == ("www.example", "co.uk")

    def test_normal_rule_on_suffix_itself(self) -> None:
        """Nothing to split when the name is the suffix."""
        assert parse_rule("co.uk").decompose("co.uk") == ("", "")

    def test_wildcard_consumes_one_label(self) -> None:
        """Wildcard rules add one arbitrary label to the suffix."""
        assert parse_rule("*.ck").decompose("www.example.ck") == ("www", "example.ck")

    def test_wildcard_on_suffix_itself(self) -> None:
        """A name made of only the wildcard suffix cannot be split."""
        assert parse_rule("*.ck").decompose("example.ck") == ("", "")

    def test_bare_wildcard(self) -> None:
        """The bare wildcard makes the last label the suffix."""
        assert DEFAULT_RULE.decompose("www.example.test") == ("www.example", "test")
        assert DEFAULT_RULE.decompose("test") == ("", "")

    def test_exception_keeps_first_label(self) -> None:
        """Exception rules leave their first label out of the suffix."""
        rule = parse_rule("!city.kawasaki.jp")
        assert rule.decompose("city.kawasaki.jp") == ("city", "kawasaki.jp")
        assert rule.decompose("www.city.kawasaki.jp") == ("www.city", "kawasaki.jp")

    def test_mismatched_name(self) -> None:
        """Names that do not end with the rule labels cannot be split."""
        assert parse_rule("co.uk").decompose("example.com") == ("", "")
