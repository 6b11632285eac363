"""
Numerics — числовые примитивы

Модуль содержит предикаты над отдельными числами, на которых построены
структурные проверки векторов и матриц:
- Определение "числа" (bool числом не считается)
- Проверка неотрицательных/положительных целых (индексы, размеры)
- Epsilon-сравнения float с учётом машинной точности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. bool никогда не принимается ни как число, ни как индекс
2. Сравнения float всегда учитывают толерантность из ToleranceConfig
3. Все функции чистые и детерминированные
"""

import math
from numbers import Number
from typing import Any

from matrix_reloaded.core.config import DEFAULT_TOLERANCE, ToleranceConfig

# =============================================================================
# ПРЕДИКАТЫ ТИПОВ
# =============================================================================


def is_number(value: Any) -> bool:
    """
    Проверка, является ли значение числом.

    bool является подклассом int, но элементом матрицы быть не может.

    Examples:
        >>> is_number(3)
        True
        >>> is_number(2.5)
        True
        >>> is_number(True)
        False
        >>> is_number("1")
        False
    """
    return isinstance(value, Number) and not isinstance(value, bool)


def is_non_neg_integer(value: Any) -> bool:
    """Целое число >= 0 (bool исключён)."""
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def is_positive_integer(value: Any) -> bool:
    """Целое число > 0 (bool исключён)."""
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


# =============================================================================
# EPSILON-СРАВНЕНИЯ
# =============================================================================


def is_close(a: float, b: float, tolerance: ToleranceConfig = DEFAULT_TOLERANCE) -> bool:
    """
    Сравнение двух чисел с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        tolerance: Толерантности (default: DEFAULT_TOLERANCE)

    Returns:
        True если значения близки

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(0.1 + 0.2, 0.3)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=tolerance.rel_tol, abs_tol=tolerance.abs_tol)
