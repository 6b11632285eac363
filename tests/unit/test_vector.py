"""
Тесты для Vector

Проверяет:
1. Конструкторы row/col
2. Поэлементную арифметику и произведения
3. Ограниченное обновление (update, update_map)
4. Неизменность аргументов
"""

import pytest

from matrix_reloaded.core.config import ToleranceConfig
from matrix_reloaded.core.domain import Orientation
from matrix_reloaded.core.errors import ErrorKind
from matrix_reloaded.linalg import vector


# =============================================================================
# КОНСТРУКТОРЫ И СТРУКТУРА
# =============================================================================


class TestConstructors:
    def test_row(self):
        assert vector.row(4).unwrap() == [0, 0, 0, 0]
        assert vector.row(2, 3.9).unwrap() == [3.9, 3.9]

    def test_col(self):
        assert vector.col(3, 1).unwrap() == [[1], [1], [1]]

    @pytest.mark.parametrize("size", [0, -1, 2.0, True])
    def test_invalid_size(self, size):
        assert vector.row(size).kind is ErrorKind.DIMENSION_INVALID
        assert vector.col(size).kind is ErrorKind.DIMENSION_INVALID


class TestStructure:
    def test_orientation(self):
        assert vector.orientation([1, 2]).unwrap() is Orientation.ROW
        assert vector.orientation([[1], [2]]).unwrap() is Orientation.COLUMN
        assert vector.orientation([1, [2]]).is_err()

    def test_transpose_involution(self):
        vec = [1, 2, 3]
        assert vector.transpose(vec) == [[1], [2], [3]]
        assert vector.transpose(vector.transpose(vec)) == vec

    def test_size(self):
        assert vector.size([[1], [2], [3]]) == 3


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


class TestArithmetic:
    def test_add_sub_rows(self):
        assert vector.add([1, 2, 3], [4, 5, 6]).unwrap() == [5, 7, 9]
        assert vector.sub([1, 2, 3], [4, 5, 6]).unwrap() == [-3, -3, -3]

    def test_add_columns_keeps_orientation(self):
        assert vector.add([[1], [2]], [[10], [20]]).unwrap() == [[11], [22]]

    @pytest.mark.parametrize(
        "vec1,vec2",
        [([1, 2], [1, 2, 3]), ([1, 2], [[1], [2]]), ([[1]], [[1], [2]])],
    )
    def test_shape_mismatch(self, vec1, vec2):
        assert vector.add(vec1, vec2).kind is ErrorKind.SHAPE_MISMATCH
        assert vector.sub(vec1, vec2).kind is ErrorKind.SHAPE_MISMATCH

    def test_add_then_sub_restores(self):
        a, b = [1.5, -2.25, 3.1], [0.1, 0.2, 0.3]
        restored = vector.add(a, b).and_then(lambda s: vector.sub(s, b)).unwrap()
        assert vector.is_close(restored, a)

    def test_dot(self):
        assert vector.dot([1, 2, 3], [4, 5, 6]).unwrap() == 32

    def test_dot_rejects_columns(self):
        assert vector.dot([[1], [2]], [[1], [2]]).kind is ErrorKind.MALFORMED_PAYLOAD

    def test_dot_length_mismatch(self):
        assert vector.dot([1, 2], [1, 2, 3]).kind is ErrorKind.SHAPE_MISMATCH

    def test_inner_product(self):
        assert vector.inner_product([1, 2, 3], [4, 5, 6]).unwrap() == [4, 10, 18]

    def test_outer_product(self):
        assert vector.outer_product([1, 2], [3, 4, 5]).unwrap() == [[3, 4, 5], [6, 8, 10]]

    def test_outer_product_rejects_short_and_column(self):
        assert vector.outer_product([1], [1, 2]).kind is ErrorKind.DIMENSION_INVALID
        assert vector.outer_product([1, 2], [[1], [2]]).kind is ErrorKind.MALFORMED_PAYLOAD

    def test_mult_by_num(self):
        assert vector.mult_by_num([2, 2, 2], 3) == [6, 6, 6]
        assert vector.mult_by_num([[1], [2]], -1) == [[-1], [-2]]

    def test_alternate_seq(self):
        assert vector.alternate_seq([0, 0, 0, 0, 0], 1).unwrap() == [1, 0, 1, 0, 1]
        assert vector.alternate_seq([0] * 7, 1, 3).unwrap() == [1, 0, 0, 1, 0, 0, 1]
        assert vector.alternate_seq([0, 0], 1, 0).kind is ErrorKind.DIMENSION_INVALID


# =============================================================================
# ОГРАНИЧЕННОЕ ОБНОВЛЕНИЕ
# =============================================================================


class TestUpdate:
    """update: весь диапазон [position, position + len) внутри вектора."""

    def test_update_range(self):
        assert vector.update([0, 0, 0, 0], [1, 2], 1).unwrap() == [0, 1, 2, 0]

    def test_update_up_to_last_element(self):
        assert vector.update([0, 0, 0, 0], [1, 2], 2).unwrap() == [0, 0, 1, 2]

    def test_update_column_with_number(self):
        assert vector.update([[0], [0], [0]], 5, 2).unwrap() == [[0], [0], [5]]

    def test_overflow_rejected(self):
        result = vector.update([0, 0, 0, 0], [1, 2], 3)
        assert result.kind is ErrorKind.OUT_OF_RANGE
        assert vector.update([0, 0], 1, 2).kind is ErrorKind.OUT_OF_RANGE

    def test_orientation_mismatch(self):
        assert vector.update([0, 0, 0], [[1]], 0).kind is ErrorKind.SHAPE_MISMATCH

    def test_bad_position_and_payload(self):
        assert vector.update([0, 0], 1, -1).kind is ErrorKind.MALFORMED_INDEX
        assert vector.update([0, 0], "1", 0).kind is ErrorKind.MALFORMED_PAYLOAD

    def test_argument_not_mutated(self):
        vec = [0, 0, 0]
        vector.update(vec, [7], 1)
        assert vec == [0, 0, 0]


class TestUpdateMap:
    def test_several_positions(self):
        assert vector.update_map([0, 0, 0, 0, 0], [1, 1], [0, 3]).unwrap() == [1, 1, 0, 1, 1]

    def test_later_positions_overwrite(self):
        assert vector.update_map([0, 0, 0], [1, 2], [0, 1]).unwrap() == [1, 1, 2]

    def test_first_error_returned(self):
        vec = [0, 0, 0, 0, 0]
        result = vector.update_map(vec, [1, 1], [0, 4, -1])
        assert result.kind is ErrorKind.OUT_OF_RANGE
        assert vec == [0, 0, 0, 0, 0]


class TestIsClose:
    def test_close(self):
        assert vector.is_close([0.1 + 0.2, 1.0], [0.3, 1.0])
        assert not vector.is_close([1.0], [1.1])
        assert vector.is_close([1.0], [1.1], ToleranceConfig(rel_tol=0.2))

    def test_shape_differs(self):
        assert not vector.is_close([1, 2], [[1], [2]])
        assert not vector.is_close([1, 2], [1, 2, 3])
        assert not vector.is_close([], [])
