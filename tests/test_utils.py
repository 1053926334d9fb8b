"""Tests for text helpers."""

from glosbe_lookup.utils import collapse_whitespace, encode_component, unique_lines


def test_encode_component_keeps_unreserved_marks():
    assert encode_component("a-b_c.d!e~f*g'h(i)") == "a-b_c.d!e~f*g'h(i)"


def test_encode_component_escapes_reserved():
    assert encode_component("a/b?c&d=e f#") == "a%2Fb%3Fc%26d%3De%20f%23"


def test_collapse_whitespace():
    assert collapse_whitespace("  one\n\n two\t three  ") == "one two three"
    assert collapse_whitespace(" \n ") == ""


def test_unique_lines_preserves_first_occurrence():
    assert unique_lines(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]


def test_unique_lines_is_case_sensitive_and_drops_empty():
    assert unique_lines(["A", "", "a", "A", ""]) == ["A", "a"]
