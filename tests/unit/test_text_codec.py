"""
Тесты для Text Codec

Проверяет:
1. Грамматику ['-'] digit+ ['.' digit*]
2. Политику лишних дробных разрядов (TRUNCATE/ROUND/REJECT)
3. MalformedInput для всех видов некорректного ввода
4. Overflow при разборе
5. Форматирование и round-trip parse(format(v)) == v
"""

import pytest

from fixeddec import (
    I8,
    I32,
    I64,
    I128,
    U8,
    U128,
    CodecError,
    ExcessDigits,
    FixedValue,
    MalformedInput,
    Overflow,
    RoundingPolicy,
    format_raw,
    parse_raw,
)


# =============================================================================
# ТЕСТЫ PARSE
# =============================================================================


class TestParseValid:
    """Разбор корректных строк"""

    @pytest.mark.parametrize(
        "text,raw",
        [
            ("0", 0),
            ("3.5", 35),
            ("12", 120),
            ("12.", 120),
            ("007.1", 71),
            ("-0", 0),
            ("-0.0", 0),
            ("25.5", 255),
        ],
    )
    def test_unsigned_tenths(self, text: str, raw: int) -> None:
        assert FixedValue[U8, 1].parse(text).raw == raw

    def test_padding_with_trailing_zeros(self) -> None:
        assert FixedValue[I64, 4].parse("1.5").raw == 15_000
        assert FixedValue[I64, 4].parse("-1").raw == -10_000

    def test_zero_precision(self) -> None:
        cls = FixedValue[I32, 0]
        assert cls.parse("42").raw == 42
        assert cls.parse("42.").raw == 42
        assert cls.parse("-42.9").raw == -42

    def test_many_leading_zeros(self) -> None:
        """Ведущие нули не ограничены длиной"""
        cls = FixedValue[I32, 1]
        text = "0" * 5000 + "1.5"
        assert cls.parse(text).raw == 15
        assert cls.parse(text, excess=ExcessDigits.ROUND).raw == 15
        assert cls.parse("-" + "0" * 5000 + "1.55", excess=ExcessDigits.ROUND).raw == -16
        assert cls.parse("0" * 5000).raw == 0


class TestExcessDigits:
    """Лишние дробные разряды"""

    def test_truncate_by_default(self) -> None:
        cls = FixedValue[I32, 2]
        assert cls.parse("1.239").raw == 123
        assert cls.parse("-1.239").raw == -123

    def test_round(self) -> None:
        cls = FixedValue[I32, 2]
        assert cls.parse("1.235", excess=ExcessDigits.ROUND).raw == 124
        assert cls.parse("-1.235", excess=ExcessDigits.ROUND).raw == -124
        assert cls.parse("1.2349999", excess=ExcessDigits.ROUND).raw == 123
        assert cls.parse("1.2350001", excess="round").raw == 124

    def test_round_with_policy(self) -> None:
        cls = FixedValue[I32, 2]
        assert cls.parse("1.225", excess=ExcessDigits.ROUND, rounding=RoundingPolicy.HALF_EVEN).raw == 122
        assert cls.parse("1.2250001", excess=ExcessDigits.ROUND, rounding=RoundingPolicy.HALF_EVEN).raw == 123

    def test_round_at_zero_precision(self) -> None:
        assert FixedValue[I32, 0].parse("1.5", excess=ExcessDigits.ROUND).raw == 2

    def test_reject(self) -> None:
        cls = FixedValue[I32, 2]
        with pytest.raises(MalformedInput, match="fractional digits"):
            cls.parse("1.239", excess=ExcessDigits.REJECT)

    def test_trailing_zeros_are_not_excess(self) -> None:
        cls = FixedValue[I32, 2]
        assert cls.parse("1.23000", excess=ExcessDigits.REJECT).raw == 123


class TestParseMalformed:
    """MalformedInput для некорректного ввода"""

    @pytest.mark.parametrize(
        "text,reason",
        [
            ("", "empty input"),
            ("-", "sign without digits"),
            (".5", "missing integer digits"),
            ("-.5", "missing integer digits"),
            (".", "missing integer digits"),
            ("1.2.3", "multiple decimal points"),
            ("1..2", "multiple decimal points"),
            ("12a", "non-digit character"),
            ("+5", "non-digit character"),
            (" 5", "non-digit character"),
            ("5 ", "non-digit character"),
            ("1e5", "non-digit character"),
            ("--5", "non-digit character"),
            ("٣", "non-digit character"),
        ],
    )
    def test_malformed(self, text: str, reason: str) -> None:
        with pytest.raises(MalformedInput, match=reason):
            FixedValue[I32, 2].parse(text)

    def test_malformed_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            FixedValue[I32, 2].parse("abc")

    def test_non_str_input(self) -> None:
        with pytest.raises(TypeError, match="expects str"):
            FixedValue[I32, 2].parse(1.5)


class TestParseOverflow:
    """Overflow при разборе"""

    def test_exceeds_unsigned_range(self) -> None:
        with pytest.raises(Overflow, match="parse"):
            FixedValue[U8, 1].parse("25.6")

    def test_negative_on_unsigned(self) -> None:
        with pytest.raises(Overflow):
            FixedValue[U8, 1].parse("-0.1")

    def test_signed_bounds(self) -> None:
        cls = FixedValue[I8, 1]
        assert cls.parse("-12.8").raw == -128
        with pytest.raises(Overflow):
            cls.parse("12.8")

    def test_huge_literal(self) -> None:
        with pytest.raises(Overflow):
            FixedValue[I128, 0].parse("9" * 5000)

    def test_codec_error_catches_both(self) -> None:
        for text in ("", "999"):
            with pytest.raises(CodecError):
                FixedValue[U8, 1].parse(text)


# =============================================================================
# ТЕСТЫ FORMAT
# =============================================================================


class TestFormat:
    """Форматирование"""

    @pytest.mark.parametrize(
        "raw,precision,text",
        [
            (12345, 2, "123.45"),
            (-12345, 2, "-123.45"),
            (5, 2, "0.05"),
            (-5, 1, "-0.5"),
            (0, 3, "0.000"),
            (42, 0, "42"),
            (-42, 0, "-42"),
        ],
    )
    def test_format_raw(self, raw: int, precision: int, text: str) -> None:
        assert format_raw(raw, precision) == text

    def test_format_value(self) -> None:
        assert FixedValue[U8, 1].from_integer(12).format() == "12.0"
        assert str(FixedValue[U8, 1].from_raw(155)) == "15.5"

    def test_format_u128_max(self) -> None:
        assert FixedValue[U128, 38].max_value().format() == "3.40282366920938463463374607431768211455"


# =============================================================================
# ROUND-TRIP
# =============================================================================


class TestRoundTrip:
    """parse(format(v)) == v"""

    @pytest.mark.parametrize("raw", [0, 1, -1, 99, -100, 2**31 - 1, -(2**31)])
    def test_i32_cents(self, raw: int) -> None:
        cls = FixedValue[I32, 2]
        value = cls.from_raw(raw)
        assert cls.parse(value.format()) == value

    @pytest.mark.parametrize("precision", [0, 1, 2])
    def test_u8_extremes(self, precision: int) -> None:
        cls = FixedValue[U8, precision]
        for value in (cls.min_value(), cls.max_value()):
            assert cls.parse(value.format()) == value

    def test_i128_extremes(self) -> None:
        cls = FixedValue[I128, 20]
        for value in (cls.min_value(), cls.max_value()):
            assert cls.parse(str(value)) == value

    def test_parse_raw_format_raw(self) -> None:
        assert parse_raw(format_raw(-700, 3), 3, I32) == -700
