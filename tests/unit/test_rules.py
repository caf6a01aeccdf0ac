"""Tests for the rule engine primitives."""

from __future__ import annotations

import re

from polyglot.context import EMPTY_CONTEXT, Context
from polyglot.rules import TranslationRule, apply_rules, library_gate, regex_rule
from polyglot.targets import get_translator


def _upper(text: str, context: Context) -> str:
    return text.upper()


def _never(text: str, context: Context) -> bool:
    return False


class TestTranslationRule:
    def test_fired_and_changed(self):
        text, step = TranslationRule("upper", _upper).apply("abc", EMPTY_CONTEXT)
        assert text == "ABC"
        assert step.fired and step.changed

    def test_fired_without_change(self):
        text, step = TranslationRule("upper", _upper).apply("ABC", EMPTY_CONTEXT)
        assert text == "ABC"
        assert step.fired and not step.changed

    def test_predicate_false_skips_transform(self):
        text, step = TranslationRule("upper", _upper, _never).apply("abc", EMPTY_CONTEXT)
        assert text == "abc"
        assert not step.fired
        assert str(step) == "upper: skipped"


class TestRegexRule:
    def test_substitutes_every_match(self):
        rule = regex_rule("digits", re.compile(r"\d"), lambda m, ctx: "#")
        text, _ = rule.apply("a1b22", EMPTY_CONTEXT)
        assert text == "a#b##"

    def test_rewrite_sees_context(self):
        ctx = Context(functions=("f",))
        rule = regex_rule("fn", re.compile(r"X"), lambda m, c: c.functions[0])
        assert rule.apply("X X", ctx)[0] == "f f"


class TestLibraryGate:
    def test_requires_detection_and_marker(self):
        gate = library_gate("numpy", "np.array")
        numpy_ctx = Context(detected_libraries=("numpy",))
        assert gate("np.array(x)", numpy_ctx)
        assert not gate("np.array(x)", EMPTY_CONTEXT)
        assert not gate("x = 1", numpy_ctx)


class TestApplyRules:
    def test_rules_run_in_order_over_previous_output(self):
        rules = [
            regex_rule("a_to_b", re.compile("a"), lambda m, ctx: "b"),
            regex_rule("b_to_c", re.compile("b"), lambda m, ctx: "c"),
        ]
        text, steps = apply_rules(rules, "a", EMPTY_CONTEXT)
        assert text == "c"
        assert [s.rule for s in steps] == ["a_to_b", "b_to_c"]

    def test_one_step_per_rule(self):
        translator = get_translator("go")
        _, steps = apply_rules(translator.rules, "", EMPTY_CONTEXT)
        assert len(steps) == len(translator.rules)


class TestRuleOrder:
    def test_boilerplate_is_last_and_repair_precedes_it(self):
        for target in ("go", "php", "javascript", "csharp"):
            names = [rule.name for rule in get_translator(target).rules]
            assert names[-1] == "boilerplate"
            assert names[-2] == "block_repair"
            assert names.index("function_signature") < names.index("counting_loop")

    def test_target_prelude_runs_before_loop(self):
        go_names = [rule.name for rule in get_translator("go").rules]
        assert go_names.index("range_bounds_guard") < go_names.index("counting_loop")
        php_names = [rule.name for rule in get_translator("php").rules]
        assert php_names.index("length_builtin") < php_names.index("counting_loop")
