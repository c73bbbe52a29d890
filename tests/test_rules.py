"""Tests for RuleSet and parse_rules."""

import re

import pytest

from filekit import RuleSet, parse_rules


class TestParseRules:
    @pytest.mark.parametrize("rule", [None, "", [], ()])
    def test_falsy_is_none(self, rule):
        assert parse_rules(rule) is None

    def test_rule_set_passthrough(self):
        rules = parse_rules("*.js")
        assert parse_rules(rules) is rules

    def test_string(self):
        rules = parse_rules("*.js")
        assert isinstance(rules, RuleSet)
        assert len(rules.patterns) == 1

    def test_regex(self):
        regex = re.compile(r"\.md$")
        rules = parse_rules(regex)
        assert rules.patterns == (regex,)

    def test_list_keeps_order(self):
        rules = parse_rules(["*.js", "node_modules/", re.compile("x")])
        assert [p.pattern for p in rules.patterns] == [
            r"[^/*]+\.js\Z", r"/node_modules/\Z", "x",
        ]

    def test_unsupported_patterns_dropped(self):
        rules = parse_rules(["a/b", "*.js"])
        assert len(rules.patterns) == 1

    def test_callable(self):
        rules = parse_rules(lambda tag: tag.endswith("/"))
        assert rules.matches("/dir/") is True
        assert rules.matches("/file") is False

    def test_bad_type(self):
        with pytest.raises(TypeError):
            parse_rules(42)


class TestMatches:
    def test_any_pattern(self):
        rules = parse_rules(["*.jpg", "*.png"])
        assert rules.matches("/a/1.png")
        assert rules.matches("/a/1.jpg")
        assert not rules.matches("/a/1.gif")

    def test_callback_result_coerced(self):
        rules = RuleSet(callback=lambda tag: "yes" if "x" in tag else None)
        assert rules.matches("/x") is True
        assert rules.matches("/y") is False

    def test_only_unsupported_never_matches(self):
        rules = parse_rules("a/b")
        assert rules is not None
        assert rules.matches("/a/b") is False

    def test_short_circuits(self):
        seen = []

        class Spy:
            def __init__(self, name, result):
                self.name, self.result = name, result

            def search(self, tag):
                seen.append(self.name)
                return self.result

        rules = RuleSet([Spy("first", True), Spy("second", True)])
        assert rules.matches("/x")
        assert seen == ["first"]
