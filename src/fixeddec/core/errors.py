"""
Errors — Иерархия исключений fixed-point арифметики

Все ошибки локальны и восстановимы вызывающим кодом:
- Overflow: результат не помещается в диапазон storage kind
- DivisionByZero: делитель с raw == 0
- MalformedInput: текст не соответствует грамматике десятичного числа

Ни одна операция не выполняет clamp и не подставляет значение по умолчанию:
либо новый валидный FixedValue, либо исключение.
"""


class FixedDecError(Exception):
    """Базовое исключение пакета fixeddec."""

    pass


class Overflow(FixedDecError, OverflowError):
    """
    Результат не помещается в диапазон storage kind.

    Возникает при конструировании, арифметике и расширяющей конверсии
    точности. Наследует OverflowError, поэтому ловится и стандартным
    обработчиком арифметических ошибок.
    """

    pass


class DivisionByZero(FixedDecError, ZeroDivisionError):
    """Деление на значение с raw == 0."""

    pass


class MalformedInput(FixedDecError, ValueError):
    """
    Текст не соответствует грамматике ['-'] digit+ ['.' digit*].

    Пустая строка, знак без цифр, отсутствие целой части, несколько
    десятичных точек, нецифровые символы.
    """

    pass


# Всё, что может выбросить parse при синтаксически корректном вызове
CodecError = (MalformedInput, Overflow)
