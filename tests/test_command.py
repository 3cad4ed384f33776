"""End-to-end tests for the public entry points."""

import io
import logging
import re

import pytest

import nestedcss
from nestedcss import CallerValueError, NestingConflict, formatOnly, toCSS, toObject, writeCSS


def norm(text):
    return re.sub(r"\s+", " ", text).strip()


def check(actual, expected):
    assert norm(actual) == norm(expected)


# ---------------------------------------------------------------------------
# Selectors
# ---------------------------------------------------------------------------


def test_nested_child_selectors():
    rules = {"b": {"color": "blue", ".aa": {"color": "cyan"}, ".bb": {"color": "red"}}}
    check(
        toCSS(rules),
        """
        b { color: blue; }
        b .aa { color: cyan; }
        b .bb { color: red; }
        """,
    )


def test_nested_comma_selectors():
    rules = {"b, i": {".aa, .bb": {"border": 0}}}
    check(
        toCSS(rules),
        """
        b .aa { border: 0; }
        b .bb { border: 0; }
        i .aa { border: 0; }
        i .bb { border: 0; }
        """,
    )


def test_nested_sticky_selectors():
    rules = {"main": {".sub, &.sticky": {"border": 0}}}
    check(toCSS(rules), "main .sub { border: 0; } main.sticky { border: 0; }")


def test_nested_empty_selectors():
    rules = {"b": {"color": "blue", "": {"margin": "0"}, ".bb": {"margin": "1"}}}
    check(toCSS(rules), "b { color: blue; margin: 0; } b .bb { margin: 1; }")


def test_nested_pseudo_classes():
    rules = {"b": {":hover": {"border": "1"}, "::after": {"border": "2"}}}
    check(toCSS(rules), "b:hover { border: 1; } b::after { border: 2; }")


def test_nested_parent_selectors():
    rules = {"main": {"sub": {"subsub, inter&": {"border": 0}}}}
    check(toCSS(rules), "main sub subsub { border: 0; } main inter sub { border: 0; }")


def test_disjoint_rules():
    rules = {
        "b": {".c": {"border": 0}},
        "b, i": {".c": {"color": "red"}},
        "i, b": {".c": {"margin": 0}},
    }
    check(
        toCSS(rules),
        """
        b .c { border: 0; color: red; margin: 0; }
        i .c { color: red; margin: 0; }
        """,
    )


def test_comma_selectors_equal_separate_rules():
    joined = toObject({"b, i": {"color": "red"}})
    separate = toObject([{"b": {"color": "red"}}, {"i": {"color": "red"}}])
    assert joined == separate


# ---------------------------------------------------------------------------
# At-rules
# ---------------------------------------------------------------------------


def test_media_queries():
    rules = {"@media screen and (min-width: 900px)": {"b": {"border": 0}}}
    check(toCSS(rules), "@media screen and (min-width: 900px) { b { border: 0; } }")


def test_nested_media_queries():
    rules = {"@media screen": {"@media (min-width: 900px)": {"b": {"border": 0}}}}
    check(toCSS(rules), "@media screen and (min-width: 900px) { b { border: 0; } }")


def test_media_moved_forward():
    rules = {"b": {"i": {"@media screen and (min-width: 900px)": {"border": 0}}}}
    check(toCSS(rules), "@media screen and (min-width: 900px) { b i { border: 0; } }")


def test_at_rules_drop_prefix():
    rules = {"b": {"i": {"@keyframes hey": {"from": {"marginTop": "1"}, "50%": {"marginTop": "2"}}}}}
    check(toCSS(rules), "@keyframes hey { from { margin-top: 1; } 50% { margin-top: 2; } }")


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


def test_property_names_converted():
    rules = {"b": {"__custom": "green", "_mozBackgroundColor": "blue", "backgroundColor": "red"}}
    check(toCSS(rules), "b { --custom: green; -moz-background-color: blue; background-color: red; }")


def test_verbatim_property_names():
    rules = {"b": {"--custom": "green", "-moz-background-color": "blue", "background-color": "red"}}
    check(toCSS(rules), "b { --custom: green; -moz-background-color: blue; background-color: red; }")


def test_configurable_custom_properties():
    rules = {"b": {"--custom": "green", "customTwo": "blue"}}
    check(toCSS(rules, {"customs": ["custom-one", "custom-two"]}), "b { --custom: green; --custom-two: blue; }")


def test_default_unit_added():
    check(toCSS({"b": {"margin": 3}}), "b { margin: 3px; }")


def test_configurable_default_unit():
    check(toCSS({"b": {"margin": 3}}, unit="em"), "b { margin: 3em; }")


def test_zero_has_no_unit():
    check(toCSS({"b": {"margin": 0}}), "b { margin: 0; }")


def test_string_values_as_is():
    check(toCSS({"b": {"margin": "3foo"}}), "b { margin: 3foo; }")


def test_empty_string_values():
    check(toCSS({"b::before": {"content": ""}}), "b::before { content: ''; }")


def test_unitless_properties():
    check(toCSS({"b": {"flex": 5, "lineHeight": 32}}), "b { flex: 5; line-height: 32; }")


def test_array_values():
    check(toCSS({"b": {"border": [1, "solid", "red"]}}, {"unit": "em"}), "b { border: 1em solid red; }")


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


def test_array_rules():
    rules = {"b": [{"i": {"color": "red"}}, [{"i": {"padding": ["3"]}}]]}
    check(toCSS(rules), "b i { color: red; padding: 3; }")


def test_function_rules():
    rules = {
        "b": [lambda opts: {"i": {"color": opts.COLOR}}],
        "i": lambda opts: opts["RULE"],
    }
    check(toCSS(rules, {"COLOR": "blue", "RULE": {"margin": "33"}}), "b i { color: blue; } i { margin: 33; }")


def test_top_level_properties():
    assert toObject({"color": "red"}) == {"color": "red"}


def test_to_object():
    rules = {"b": {"i": {"@media print": {"margin": 2}}, "color": "red"}}
    assert toObject(rules) == {"@media print": {"b i": {"margin": "2px"}}, "b": {"color": "red"}}


def test_to_object_is_idempotent():
    rules = {
        "b, i": {".c": {"margin": 1, "content": ""}, "&:hover": {"color": "red"}},
        "@media screen": {"@media (min-width: 900px)": {"b": {"border": 0}}},
    }
    once = toObject(rules, customs=["accent"])
    assert toObject(once, customs=["accent"]) == once


def test_sorted_output():
    rules = {"div": {"zIndex": 1, "color": "red"}, "@media x": {"b": {"border": 0}}, "#id": {"border": 0}, "*": {"margin": 0}}
    assert list(toObject(rules, sort=True)) == ["*", "div", "#id", "@media x"]
    assert list(toObject(rules, sort=True)["div"]) == ["color", "z-index"]


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------


def test_format_only():
    assert formatOnly({"b": {"color": "red"}}, indent=2) == "b {\n  color: red;\n}"


def test_to_css_indent():
    assert toCSS({"b": {"color": "red"}}, indent=0) == "b {\ncolor: red;\n}"


def test_write_css():
    s = io.StringIO()
    writeCSS({"b": {"margin": 1}}, s)
    assert s.getvalue() == "b {\n    margin: 1px;\n}"


def test_unknown_options_are_ignored():
    check(toCSS({"b": {"margin": 1}}, {"whatever": 12}), "b { margin: 1px; }")


def test_non_string_option_keys_are_kept():
    assert toCSS({"b": {"margin": 1}}, {1: "x"}) == "b {\n    margin: 1px;\n}"
    rules = {"b": lambda opts: {"color": opts[1], "margin": opts["values"]}}
    check(toCSS(rules, {1: "red", "values": "2em"}), "b { color: red; margin: 2em; }")


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


def test_nesting_conflict(caplog):
    with caplog.at_level(logging.ERROR, logger="nestedcss"):
        with pytest.raises(NestingConflict):
            toCSS([{"b": "red"}, {"b": {"color": "blue"}}])
    assert "Nesting conflict" in caplog.text


def test_symbol_value_fails():
    with pytest.raises(CallerValueError):
        toObject({"b": {"color": object()}})


def test_caller_value_error_is_value_error():
    with pytest.raises(ValueError):
        toObject({"b": {"color": {1, 2}}})


def test_version():
    assert nestedcss.VERSION
