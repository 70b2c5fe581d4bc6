"""
Core fixed-point primitives: storage kinds, rounding, arithmetic, value type, codec.

Модули не имеют внешнего состояния: все операции являются чистыми функциями
над immutable значениями.
"""
