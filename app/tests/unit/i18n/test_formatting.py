"""Tests for localekit.i18n.formatting module."""

from datetime import date, datetime

import pytest

from localekit.i18n import CurrencyConfig, FormatConfig, NumberConfig
from localekit.i18n.formatting import (
    format_date,
    format_number,
    format_price,
    parse_number,
    resolve_date_pattern,
    separate_thousands,
)

# Tuesday
SAMPLE_MOMENT = datetime(2024, 3, 5, 14, 7, 9)


class TestSeparateThousands:
    """Tests for separate_thousands()."""

    @pytest.mark.parametrize(
        "digits,expected",
        [("0", "0"), ("123", "123"), ("1234", "1,234"), ("1234567", "1,234,567")],
    )
    def test_grouping(self, digits, expected):
        """Digits are grouped by three from the right."""
        assert separate_thousands(digits, ",") == expected

    def test_empty_separator(self):
        """An empty separator leaves digits contiguous."""
        assert separate_thousands("1234567", "") == "1234567"


class TestFormatNumber:
    """Tests for format_number()."""

    def test_default_rules(self):
        """Default rules use a space separator and two decimals."""
        assert format_number(1234567.891, NumberConfig()) == "1 234 567.89"

    def test_custom_separators(self):
        """Separators come from the config."""
        config = NumberConfig(thousand_separator=".", decimal_symbol=",")
        assert format_number(1234.5, config) == "1.234,50"

    def test_negative(self):
        """Negative numbers get the negative symbol."""
        config = NumberConfig(thousand_separator=",")
        assert format_number(-1234.5, config) == "-1,234.50"

    def test_positive_symbol(self):
        """Positive numbers get the positive symbol."""
        assert format_number(5, NumberConfig(positive_symbol="+")) == "+5.00"

    def test_integer_input(self):
        """Integers are padded with fractional zeros."""
        assert format_number(42, NumberConfig()) == "42.00"

    def test_zero_fract_digits(self):
        """fract_digits 0 omits the decimal symbol."""
        assert format_number(1234.4, NumberConfig(fract_digits=0)) == "1 234"

    @pytest.mark.parametrize(
        "value,expected", [(2.5, "3"), (-2.5, "-3"), (0.4, "0"), (1.5, "2")]
    )
    def test_rounds_half_away_from_zero(self, value, expected):
        """Halves round away from zero."""
        assert format_number(value, NumberConfig(fract_digits=0)) == expected

    def test_rounding_carries_into_integer_part(self):
        """Rounding up the fraction carries into the integer part."""
        assert format_number(999.999, NumberConfig()) == "1 000.00"

    def test_exact_half_in_fraction(self):
        """An exactly representable half rounds up."""
        assert format_number(0.125, NumberConfig()) == "0.13"

    def test_three_digits(self):
        """More fractional digits are zero padded."""
        assert format_number(1.5, NumberConfig(fract_digits=3)) == "1.500"

    def test_integer_beyond_float_range(self):
        """Integers too large for a float are formatted exactly."""
        result = format_number(10**402, NumberConfig(thousand_separator=",", fract_digits=0))
        assert result == "1" + ",000" * 134

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_raises(self, value):
        """Non-finite values are rejected."""
        with pytest.raises(ValueError):
            format_number(value, NumberConfig())


class TestParseNumber:
    """Tests for parse_number()."""

    def test_parses_grouped_number(self):
        """Separators are removed before parsing."""
        config = NumberConfig(thousand_separator=",")
        assert parse_number("1,234.50", config) == 1234.5

    def test_parses_custom_decimal_symbol(self):
        """A custom decimal symbol is understood."""
        config = NumberConfig(thousand_separator=" ", decimal_symbol=",")
        assert parse_number("-1 234,5", config) == -1234.5

    def test_parses_formatted_output(self):
        """Output of format_number() parses back to the rounded value."""
        config = NumberConfig(thousand_separator=".", decimal_symbol=",")
        assert parse_number(format_number(-98765.432, config), config) == -98765.43

    def test_invalid_text_raises(self):
        """Text that is not a number raises ValueError."""
        with pytest.raises(ValueError):
            parse_number("abc", NumberConfig())


class TestFormatPrice:
    """Tests for format_price()."""

    def test_dollar_format(self):
        """Symbol and grouped amount are placed by the format."""
        config = CurrencyConfig(symbol="$", positive_format="%c%q", thousand_separator=",")
        assert format_price(1234.5, config) == "$1,234.50"

    def test_default_format(self):
        """The default format puts a space after the symbol."""
        assert format_price(5, CurrencyConfig()) == "XXX 5.00"

    def test_negative_uses_negative_format(self):
        """Negative amounts use negative_format and carry the sign."""
        config = CurrencyConfig(symbol="€", negative_format="(%q %c)")
        assert format_price(-3, config) == "(-3.00 €)"

    def test_sign_placeholder_renders_nothing(self):
        """%p is removed from the output."""
        config = CurrencyConfig(symbol="$", positive_format="%p%c%q")
        assert format_price(1, config) == "$1.00"

    def test_currency_fract_digits(self):
        """The currency's own fractional digits apply."""
        config = CurrencyConfig(symbol="¥", fract_digits=0, positive_format="%c%q")
        assert format_price(1234.5, config) == "¥1 235"

    def test_unknown_token_kept(self):
        """Unknown tokens are emitted literally."""
        config = CurrencyConfig(symbol="$", positive_format="%x%q")
        assert format_price(5, config) == "%x5.00"

    def test_trailing_percent_kept(self):
        """A lone trailing % is kept."""
        config = CurrencyConfig(symbol="$", positive_format="%q %")
        assert format_price(5, config) == "5.00 %"


class TestResolveDatePattern:
    """Tests for resolve_date_pattern()."""

    def test_empty_is_iso(self):
        """An empty pattern resolves to ISO 8601."""
        assert resolve_date_pattern("", FormatConfig().date_time) == "%Y-%m-%dT%H:%M:%S"

    def test_alias(self):
        """Aliases resolve to the configured pattern."""
        assert resolve_date_pattern("short_date", FormatConfig().date_time) == "%m/%d/%Y"

    def test_literal(self):
        """Other patterns are used literally."""
        assert resolve_date_pattern("%d.%m.", FormatConfig().date_time) == "%d.%m."


class TestFormatDate:
    """Tests for format_date()."""

    def test_iso(self):
        """An empty pattern renders ISO 8601."""
        assert format_date("", SAMPLE_MOMENT, FormatConfig()) == "2024-03-05T14:07:09"

    @pytest.mark.parametrize(
        "alias,expected",
        [
            ("long_time", "14:07:09"),
            ("short_time", "14:07"),
            ("long_date", "March 05, 2024"),
            ("short_date", "03/05/2024"),
            ("long_date_time", "March 05, 2024 14:07:09"),
            ("short_date_time", "03/05/2024 14:07"),
        ],
    )
    def test_aliases(self, alias, expected):
        """Each alias uses its configured pattern."""
        assert format_date(alias, SAMPLE_MOMENT, FormatConfig()) == expected

    def test_name_tokens(self):
        """Weekday and month names come from the config."""
        result = format_date("%l %a %F %b", SAMPLE_MOMENT, FormatConfig())
        assert result == "Tuesday Tue March Mar"

    def test_minute_and_second_aliases(self):
        """%i and %s are aliases of %M and %S."""
        assert format_date("%i:%s", SAMPLE_MOMENT, FormatConfig()) == "07:09"

    def test_sunday_is_first_day(self):
        """Day name lists start on Sunday."""
        assert format_date("%l", datetime(2024, 3, 3), FormatConfig()) == "Sunday"

    def test_localized_names(self):
        """Custom name lists are used."""
        config = FormatConfig().merged(
            {"long_month_names": ["janvier", "février", "mars"]}
        )
        assert format_date("%d %F", SAMPLE_MOMENT, config) == "05 mars"

    def test_short_name_list_renders_empty(self):
        """A name index outside the list renders nothing."""
        config = FormatConfig().merged({"short_day_names": ["Sun"]})
        assert format_date("[%a]", SAMPLE_MOMENT, config) == "[]"

    def test_unknown_token_kept(self):
        """Unknown tokens are emitted literally."""
        assert format_date("%Q %Y", SAMPLE_MOMENT, FormatConfig()) == "%Q 2024"

    def test_plain_date_at_midnight(self):
        """A date renders at midnight."""
        result = format_date("short_date_time", date(2024, 3, 5), FormatConfig())
        assert result == "03/05/2024 00:00"

    def test_none_uses_current_time(self):
        """None renders the current time."""
        result = format_date("%Y", None, FormatConfig())
        assert result == str(datetime.now().year)
