"""
Тесты для Comparison

Проверяет:
1. Равенство и порядок по raw для одного типа
2. equals/compare
3. Отказ сравнивать разные конкретные типы
"""

import pytest

from fixeddec import I32, I64, U8, FixedValue


@pytest.fixture
def cents():
    return FixedValue[I32, 2]


class TestSameTypeComparison:
    """Сравнение значений одного типа"""

    def test_equality(self, cents) -> None:
        assert cents.parse("1.50") == cents.parse("1.5")
        assert cents.parse("1.50") != cents.parse("1.51")
        assert cents.parse("-0") == cents.zero()

    def test_ordering(self, cents) -> None:
        a, b = cents.parse("-1.00"), cents.parse("0.99")
        assert a < b
        assert a <= b
        assert b > a
        assert b >= a
        assert a <= cents.parse("-1.00")

    def test_compare_total_order(self, cents) -> None:
        a, b = cents.parse("2.00"), cents.parse("3.00")
        assert a.compare(b) == -1
        assert b.compare(a) == 1
        assert a.compare(cents.parse("2")) == 0

    def test_equals(self, cents) -> None:
        assert cents.parse("0.10").equals(cents.from_raw(10))
        assert not cents.parse("0.10").equals(cents.from_raw(11))

    def test_sorting(self, cents) -> None:
        values = [cents.parse(t) for t in ("3.00", "-1.25", "0.00", "2.50")]
        assert [v.format() for v in sorted(values)] == ["-1.25", "0.00", "2.50", "3.00"]
        assert max(values).format() == "3.00"


class TestCrossTypeComparison:
    """Сравнение разных конкретных типов требует явной конверсии"""

    def test_eq_with_other_type_is_false(self) -> None:
        """== не выполняет неявную конверсию"""
        assert FixedValue[I32, 2].one() != FixedValue[I32, 3].one()
        assert FixedValue[I32, 2].one() != FixedValue[I64, 2].one()
        assert FixedValue[I32, 0].one() != 1

    def test_ordering_with_other_type_raises(self) -> None:
        with pytest.raises(TypeError):
            FixedValue[I32, 2].one() < FixedValue[I32, 3].one()

    def test_equals_and_compare_with_other_type_raise(self) -> None:
        a = FixedValue[I32, 2].one()
        b = FixedValue[I32, 3].one()
        with pytest.raises(TypeError, match="equals"):
            a.equals(b)
        with pytest.raises(TypeError, match="compare"):
            a.compare(b)

    def test_ordering_with_non_fixed_raises(self) -> None:
        with pytest.raises(TypeError):
            FixedValue[U8, 1].one() < 5

    def test_explicit_conversion_enables_comparison(self) -> None:
        a = FixedValue[I32, 2].parse("1.25")
        b = FixedValue[I32, 3].parse("1.250")
        assert a.convert(3) == b
        assert b.convert(2) == a
