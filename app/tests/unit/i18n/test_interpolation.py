"""Tests for localekit.i18n.interpolation module."""

import pytest

from localekit.i18n.interpolation import (
    format_value,
    interpolate,
    interpolate_array,
    serialize,
    to_text,
)


class TestInterpolate:
    """Tests for named parameter interpolation."""

    def test_simple_field(self):
        """%{name} is replaced with the parameter text."""
        assert interpolate("Hello %{name}", {"name": "World"}) == "Hello World"

    def test_numeric_field_serialized(self):
        """Non-string values are serialized."""
        assert interpolate("%{n} items", {"n": 5}) == "5 items"

    def test_bool_and_list_fields(self):
        """Booleans and lists render as JSON text."""
        text = interpolate("%{flag} %{tags}", {"flag": True, "tags": ["a", "b"]})
        assert text == 'true ["a","b"]'

    def test_value_format_float(self):
        """%<name>.f renders a float."""
        assert interpolate("%<price>.f EUR", {"price": 9.5}) == "9.5 EUR"

    def test_value_format_integer(self):
        """%<name>.d truncates to an integer."""
        assert interpolate("%<n>.d", {"n": 3.9}) == "3"
        assert interpolate("%<n>.i", {"n": -3.9}) == "-3"

    def test_missing_field_unchanged(self):
        """Placeholders with no parameter stay as they are."""
        assert interpolate("Hi %{who}", {"name": "x"}) == "Hi %{who}"
        assert interpolate("%<who>.d", {}) == "%<who>.d"

    def test_escaped_field_untouched(self):
        """A placeholder preceded by % is not substituted."""
        assert interpolate("100%%{x}", {"x": "y"}) == "100%%{x}"

    def test_escaped_value_untouched(self):
        """A value placeholder preceded by % is not substituted."""
        assert interpolate("%%<x>.d", {"x": 1}) == "%%<x>.d"

    def test_substituted_value_not_rescanned(self):
        """A value containing a field placeholder is inserted literally."""
        text = interpolate("%{a} %{b}", {"a": "%{b}", "b": "B"})
        assert text == "%{b} B"

    def test_value_pass_runs_after_field_pass(self):
        """The value pass sees the output of the field pass."""
        text = interpolate("%{tpl}", {"tpl": "%<n>.d", "n": 7})
        assert text == "7"

    def test_dotted_names(self):
        """Parameter names may contain dots."""
        assert interpolate("%{user.name}", {"user.name": "Ann"}) == "Ann"

    def test_non_mapping_params(self):
        """Non-mapping params leave the text as is."""
        assert interpolate("Hello %{name}", None) == "Hello %{name}"

    def test_repeated_field(self):
        """Every occurrence of a placeholder is replaced."""
        assert interpolate("%{x}-%{x}", {"x": "a"}) == "a-a"


class TestFormatValue:
    """Tests for format_value() codes."""

    @pytest.mark.parametrize(
        "value,code,expected",
        [
            (42, "d", "42"),
            (42.7, "d", "42"),
            ("42", "d", "0"),
            (True, "d", "0"),
            (float("inf"), "d", "0"),
            (2, "f", "2"),
            (0.25, "f", "0.25"),
            (1e20, "f", "1e+20"),
            ("x", "f", "0"),
            ("text", "s", "text"),
            (5, "s", "5"),
            ({"a": 1}, "x", '{"a":1}'),
            ("text", "x", '"text"'),
        ],
    )
    def test_codes(self, value, code, expected):
        """Each format code renders as documented."""
        assert format_value(value, code) == expected

    @pytest.mark.parametrize("code", ["d", "i", "f"])
    def test_integer_beyond_float_range(self, code):
        """Integers too large for a float render in full."""
        assert format_value(10**400, code) == str(10**400)

    def test_interpolate_integer_beyond_float_range(self):
        """%<n>.d does not fail on huge integers."""
        assert interpolate("%<n>.d", {"n": 10**400}) == str(10**400)


class TestSerialize:
    """Tests for serialize() and to_text()."""

    def test_serialize_compact(self):
        """serialize() produces compact JSON."""
        assert serialize({"a": [1, 2]}) == '{"a":[1,2]}'

    def test_serialize_keeps_unicode(self):
        """serialize() does not escape non-ASCII text."""
        assert serialize(["é"]) == '["é"]'

    def test_serialize_none(self):
        """None renders as null."""
        assert serialize(None) == "null"

    def test_to_text_string_unquoted(self):
        """Strings render without quotes."""
        assert to_text("plain") == "plain"

    def test_to_text_bool(self):
        """Booleans render lowercase."""
        assert to_text(False) == "false"


class TestInterpolateArray:
    """Tests for positional parameter interpolation."""

    def test_indexed(self):
        """{N} takes the Nth parameter."""
        assert interpolate_array("{1} then {0}", ["a", "b"]) == "b then a"

    def test_sequential(self):
        """{} takes parameters in order."""
        assert interpolate_array("{} and {}", ["a", "b"]) == "a and b"

    def test_indexed_and_sequential_counters_are_independent(self):
        """{} counting starts at 0 regardless of {N} placeholders."""
        assert interpolate_array("{0} {}", ["a", "b"]) == "a a"

    def test_out_of_range_index_unchanged(self):
        """{N} beyond the parameters stays as is."""
        assert interpolate_array("{0} {5}", ["a"]) == "a {5}"

    def test_extra_braces_unchanged(self):
        """{} beyond the parameters stays as is."""
        assert interpolate_array("{} {} {}", ["a"]) == "a {} {}"

    def test_no_params(self):
        """Without parameters the text is unchanged."""
        assert interpolate_array("{} {0}", []) == "{} {0}"

    def test_substituted_value_not_rescanned_by_index_pass(self):
        """Values inserted by {N} are not re-read by the {N} pass."""
        assert interpolate_array("{0} {1}", ["{1}", "x"]) == "{1} x"
