"""
Тесты для Shapes — Index, Dimension, Orientation

Проверяет:
1. Строгость целых (bool, float, str отклоняются)
2. Границы: индекс >= 0, размер > 0
3. Immutable модели
4. parse_index / parse_dimension возвращают Err нужного вида
"""

import pytest
from pydantic import ValidationError

from matrix_reloaded.core.domain import Dimension, Index, Orientation, parse_dimension, parse_index
from matrix_reloaded.core.errors import ErrorKind


class TestIndexModel:
    """Index: пара неотрицательных целых."""

    def test_valid_index(self):
        index = Index(row=0, col=3)
        assert index.as_tuple() == (0, 3)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError):
            Index(row=-1, col=0)

    def test_float_rejected(self):
        with pytest.raises(ValidationError):
            Index(row=1.0, col=0)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError):
            Index(row=True, col=0)

    def test_frozen(self):
        index = Index(row=1, col=1)
        with pytest.raises(ValidationError):
            index.row = 2


class TestDimensionModel:
    """Dimension: пара положительных целых."""

    def test_valid_dimension(self):
        assert Dimension(rows=2, cols=3).as_tuple() == (2, 3)

    @pytest.mark.parametrize("rows,cols", [(0, 1), (1, 0), (-2, 3), (2, "3")])
    def test_invalid_dimension(self, rows, cols):
        with pytest.raises(ValidationError):
            Dimension(rows=rows, cols=cols)


class TestParseIndex:
    """parse_index: tuple -> Ok(Index) | Err(MALFORMED_INDEX)."""

    def test_tuple_and_list_accepted(self):
        assert parse_index((1, 2)).unwrap() == Index(row=1, col=2)
        assert parse_index([0, 0]).unwrap() == Index(row=0, col=0)

    @pytest.mark.parametrize(
        "index",
        [(-1, 0), (0, -1), (1.5, 0), ("1", 0), (True, 0), (1,), (1, 2, 3), 3, None],
    )
    def test_malformed(self, index):
        result = parse_index(index)
        assert result.is_err()
        assert result.kind is ErrorKind.MALFORMED_INDEX


class TestParseDimension:
    """parse_dimension: n -> n×n, (m, n) -> m×n."""

    def test_square(self):
        assert parse_dimension(3).unwrap().as_tuple() == (3, 3)

    def test_rectangular(self):
        assert parse_dimension((2, 5)).unwrap().as_tuple() == (2, 5)

    @pytest.mark.parametrize("dimension", [0, -3, 2.0, "2", (0, 2), (2, -1), (2.0, 2), None])
    def test_invalid(self, dimension):
        result = parse_dimension(dimension)
        assert result.is_err()
        assert result.kind is ErrorKind.DIMENSION_INVALID


class TestOrientation:
    def test_values(self):
        assert Orientation.ROW.value == "row"
        assert Orientation.COLUMN.value == "column"
