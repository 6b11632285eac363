"""
Тесты для Numerics и ToleranceConfig

Проверяет:
1. Предикаты чисел (bool не число)
2. Предикаты целых для индексов и размеров
3. Epsilon-сравнения с настраиваемой толерантностью
"""

import pytest

from matrix_reloaded.core.config import (
    DEFAULT_TOLERANCE,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    ToleranceConfig,
)
from matrix_reloaded.core.numerics import (
    is_close,
    is_non_neg_integer,
    is_number,
    is_positive_integer,
)


class TestPredicates:
    @pytest.mark.parametrize("value", [0, -3, 2.5, 1e300])
    def test_numbers(self, value):
        assert is_number(value)

    @pytest.mark.parametrize("value", [True, False, "1", None, [1]])
    def test_not_numbers(self, value):
        assert not is_number(value)

    def test_non_neg_integer(self):
        assert is_non_neg_integer(0)
        assert is_non_neg_integer(7)
        assert not is_non_neg_integer(-1)
        assert not is_non_neg_integer(1.0)
        assert not is_non_neg_integer(False)

    def test_positive_integer(self):
        assert is_positive_integer(1)
        assert not is_positive_integer(0)
        assert not is_positive_integer(True)


class TestTolerance:
    def test_defaults(self):
        assert DEFAULT_TOLERANCE.rel_tol == EPS_FLOAT_COMPARE_REL
        assert DEFAULT_TOLERANCE.abs_tol == EPS_FLOAT_COMPARE_ABS

    def test_negative_tolerance_rejected(self):
        with pytest.raises(ValueError, match="rel_tol"):
            ToleranceConfig(rel_tol=-1.0)
        with pytest.raises(ValueError, match="abs_tol"):
            ToleranceConfig(abs_tol=-1.0)

    def test_is_close(self):
        assert is_close(0.1 + 0.2, 0.3)
        assert not is_close(1.0, 1.1)
        assert is_close(1.0, 1.1, ToleranceConfig(rel_tol=0.2))

