"""
Shapes — индексы, размеры и ориентация

Immutable Pydantic модели для адресации матриц:
- Index: пара (row, col), нумерация с 0
- Dimension: пара (rows, cols), обе величины > 0
- Orientation: строка или столбец (для векторов)

Модели строгие (StrictInt): 2.0, "2" и True не являются индексами.
Пользовательский ввод в виде tuple разбирается функциями parse_index и
parse_dimension, которые возвращают Result вместо исключения.
"""

from enum import Enum
from typing import Any, Tuple

from pydantic import BaseModel, Field, StrictInt, ValidationError

from matrix_reloaded.core.errors import ErrorKind
from matrix_reloaded.core.result import Ok, Result, fail

# =============================================================================
# ENUMS
# =============================================================================


class Orientation(str, Enum):
    """Ориентация вектора."""

    ROW = "row"
    COLUMN = "column"


# =============================================================================
# MODELS
# =============================================================================


class Index(BaseModel):
    """
    Позиция элемента (или левого верхнего угла области) в матрице.

    Immutable модель (frozen=True).
    """

    row: StrictInt = Field(..., ge=0, description="Номер строки, с 0")
    col: StrictInt = Field(..., ge=0, description="Номер столбца, с 0")

    model_config = {"frozen": True}

    def as_tuple(self) -> Tuple[int, int]:
        return (self.row, self.col)


class Dimension(BaseModel):
    """
    Размер матрицы или области.

    Immutable модель (frozen=True).
    """

    rows: StrictInt = Field(..., gt=0, description="Число строк")
    cols: StrictInt = Field(..., gt=0, description="Число столбцов")

    model_config = {"frozen": True}

    def as_tuple(self) -> Tuple[int, int]:
        return (self.rows, self.cols)


# =============================================================================
# PARSERS
# =============================================================================


def _is_pair(value: Any) -> bool:
    return isinstance(value, (tuple, list)) and len(value) == 2


def parse_index(index: Any) -> Result[Index]:
    """
    Разбор индекса (row, col).

    Args:
        index: tuple/list из двух неотрицательных целых

    Returns:
        Ok(Index) или Err(MALFORMED_INDEX)
    """
    if _is_pair(index):
        try:
            return Ok(Index(row=index[0], col=index[1]))
        except ValidationError:
            pass
    return fail(
        ErrorKind.MALFORMED_INDEX,
        f"The index {index!r} must be in the form (m, n) where 0 <= m and 0 <= n!",
        index=index,
    )


def parse_dimension(dimension: Any) -> Result[Dimension]:
    """
    Разбор размера матрицы.

    Положительное целое n означает квадратную матрицу n×n, пара (m, n) —
    прямоугольную.

    Returns:
        Ok(Dimension) или Err(DIMENSION_INVALID)
    """
    if _is_pair(dimension):
        try:
            return Ok(Dimension(rows=dimension[0], cols=dimension[1]))
        except ValidationError:
            return fail(
                ErrorKind.DIMENSION_INVALID,
                f"The size {tuple(dimension)!r} of matrix must be in the form (m, n) "
                f"where m, n are positive integers!",
                dimension=dimension,
            )
    try:
        return Ok(Dimension(rows=dimension, cols=dimension))
    except ValidationError:
        return fail(
            ErrorKind.DIMENSION_INVALID,
            f"Dimension {dimension!r} of squared matrix must be positive integer!",
            dimension=dimension,
        )
