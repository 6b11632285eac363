"""
Validation — семейство проверок границ

Каждая операция, которая читает или переписывает область матрицы
(или диапазон вектора), собирается из этих проверок через Result.and_then
и прерывается на первой ошибке. Порядок для region-операций:

1. Индекс корректен (неотрицательные целые)           -> MALFORMED_INDEX
2. Область помещается в контейнер                     -> OUT_OF_RANGE
3. Payload строго меньше контейнера (update/get)      -> OVERSIZED_PAYLOAD

Для update_row/update_col проверка 3 ослаблена до "<=": строка на всю
ширину матрицы — обычный случай. Отдельной проверки для них нет, так как
check_row_in_matrix/check_col_in_matrix уже гарантируют длину <= размера
матрицы. Замена всей матрицы через update не поддерживается: payload
размера контейнера отклоняется.

Все проверки принимают значение, которое пропускают дальше при успехе
(обычно саму матрицу), чтобы их можно было выстраивать в цепочку.
"""

from typing import Any, Iterable, Sequence, Tuple, TypeVar

from matrix_reloaded.core.contracts import (
    COLUMN_VECTOR_CONTRACT,
    MATRIX_CONTRACT,
    ROW_VECTOR_CONTRACT,
)
from matrix_reloaded.core.domain import Orientation, parse_index
from matrix_reloaded.core.errors import ErrorKind
from matrix_reloaded.core.numerics import is_non_neg_integer, is_positive_integer
from matrix_reloaded.core.result import Ok, Result, fail

T = TypeVar("T")

Size = Tuple[int, int]


# =============================================================================
# СТРУКТУРА ВХОДОВ
# =============================================================================


def check_matrix(matrix: Any) -> Result[Any]:
    """
    Матрица: непустой прямоугольный список строк чисел.

    Returns:
        Ok(matrix) или Err(MALFORMED_MATRIX)
    """
    reason = MATRIX_CONTRACT.first_error_message(matrix)
    if reason:
        return fail(
            ErrorKind.MALFORMED_MATRIX,
            f"Input is not a matrix: {reason}",
            reason=reason,
        )
    return Ok(matrix)


def vector_orientation(vector: Any) -> Result[Orientation]:
    """
    Определение ориентации вектора по структуре.

    Список чисел — строка, список одноэлементных списков — столбец.
    Смешанные формы отклоняются.

    Returns:
        Ok(Orientation) или Err(MALFORMED_PAYLOAD)
    """
    if ROW_VECTOR_CONTRACT.is_valid(vector):
        return Ok(Orientation.ROW)
    if COLUMN_VECTOR_CONTRACT.is_valid(vector):
        return Ok(Orientation.COLUMN)
    return fail(
        ErrorKind.MALFORMED_PAYLOAD,
        "Input vector must be a non-empty list of numbers (row) "
        "or a list of single-element lists of numbers (column)!",
        vector=vector,
    )


def check_row_vector(value: T, row: Any) -> Result[T]:
    if ROW_VECTOR_CONTRACT.is_valid(row):
        return Ok(value)
    return fail(
        ErrorKind.MALFORMED_PAYLOAD,
        "Input row vector must be only non-empty list of numbers!",
        row=row,
    )


def check_column_vector(value: T, col: Any) -> Result[T]:
    if COLUMN_VECTOR_CONTRACT.is_valid(col):
        return Ok(value)
    return fail(
        ErrorKind.MALFORMED_PAYLOAD,
        "Input column vector must be only non-empty list of single-element lists of numbers!",
        col=col,
    )


# =============================================================================
# ИНДЕКСЫ И ЧИСЛА
# =============================================================================


def check_index(value: T, index: Any) -> Result[T]:
    """Индекс (row, col) из неотрицательных целых."""
    return parse_index(index).map(lambda _: value)


def check_non_neg_integer(value: T, num: Any, vec: str = "row") -> Result[T]:
    if is_non_neg_integer(num):
        return Ok(value)
    return fail(
        ErrorKind.MALFORMED_INDEX,
        f"The {vec} number {num!r} must be an integer greater or equal to zero!",
        number=num,
    )


def check_positive_integer(value: T, num: Any, what: str = "number of elements") -> Result[T]:
    if is_positive_integer(num):
        return Ok(value)
    return fail(
        ErrorKind.DIMENSION_INVALID,
        f"The {what} {num!r} must be a positive integer, i.e. n > 0!",
        number=num,
    )


def check_all_numbers(value: T, nums: Sequence[Any], vec: str = "row") -> Result[T]:
    """Список номеров строк/столбцов: неотрицательные целые без повторов."""
    bad = [n for n in nums if not is_non_neg_integer(n)]
    if bad:
        return fail(
            ErrorKind.MALFORMED_INDEX,
            f"List of {vec} numbers must be integers greater or equal to zero! Got {bad!r}.",
            numbers=list(nums),
        )
    if len(set(nums)) != len(nums):
        return fail(
            ErrorKind.MALFORMED_INDEX,
            f"List of {vec} numbers must not contain duplicates! Got {list(nums)!r}.",
            numbers=list(nums),
        )
    return Ok(value)


# =============================================================================
# ОБЛАСТЬ ВНУТРИ КОНТЕЙНЕРА
# =============================================================================


def check_element_in_matrix(
    value: T, size_mat: Size, index: Size, method: str = "update"
) -> Result[T]:
    """Одиночный элемент: from_row < rows и from_col < cols."""
    rs_mat, cs_mat = size_mat
    from_row, from_col = index
    if from_row < rs_mat and from_col < cs_mat:
        return Ok(value)
    return fail(
        ErrorKind.OUT_OF_RANGE,
        f"You can not {method} the matrix on given position ({from_row}, {from_col}). "
        f"The element is outside of matrix {size_mat}!",
        index=index,
        size=size_mat,
    )


def check_submatrix_in_matrix(
    value: T, size_mat: Size, size_sub: Size, index: Size, method: str = "update"
) -> Result[T]:
    """Дальний угол области (from + size - 1) строго внутри матрицы."""
    rs_mat, cs_mat = size_mat
    to_row, to_col = size_sub
    from_row, from_col = index
    if from_row + to_row - 1 < rs_mat and from_col + to_col - 1 < cs_mat:
        return Ok(value)
    return fail(
        ErrorKind.OUT_OF_RANGE,
        f"You can not {method} the matrix on given position ({from_row}, {from_col}). "
        f"The submatrix of size {size_sub} is outside of matrix {size_mat}!",
        index=index,
        size=size_mat,
        payload_size=size_sub,
    )


def check_row_in_matrix(
    value: T, size_mat: Size, size_row: int, index: Size, method: str = "update"
) -> Result[T]:
    rs_mat, cs_mat = size_mat
    from_row, from_col = index
    if from_row < rs_mat and from_col + size_row <= cs_mat:
        return Ok(value)
    return fail(
        ErrorKind.OUT_OF_RANGE,
        f"You can not {method} row in the matrix on given position ({from_row}, {from_col}). "
        f"A part of row is outside of matrix {size_mat}!",
        index=index,
        size=size_mat,
        payload_size=(1, size_row),
    )


def check_col_in_matrix(
    value: T, size_mat: Size, size_col: int, index: Size, method: str = "update"
) -> Result[T]:
    rs_mat, cs_mat = size_mat
    from_row, from_col = index
    if from_col < cs_mat and from_row + size_col <= rs_mat:
        return Ok(value)
    return fail(
        ErrorKind.OUT_OF_RANGE,
        f"You can not {method} column in the matrix on given position ({from_row}, {from_col}). "
        f"A part of column is outside of matrix {size_mat}!",
        index=index,
        size=size_mat,
        payload_size=(size_col, 1),
    )


def check_number_in_range(value: T, count: int, num: int, vec: str = "row") -> Result[T]:
    """Номер строки/столбца меньше их количества."""
    if num < count:
        return Ok(value)
    return fail(
        ErrorKind.OUT_OF_RANGE,
        f"You can not get {vec} from the matrix. The {vec} number {num} is outside of matrix!",
        number=num,
        count=count,
    )


def check_all_in_range(value: T, count: int, nums: Iterable[int], vec: str = "row") -> Result[T]:
    outside = [n for n in nums if n >= count]
    if outside:
        return fail(
            ErrorKind.OUT_OF_RANGE,
            f"It is not possible drop the {vec}s {outside!r} from matrix! "
            f"Numbering of {vec}s begins from 0 to {count - 1}.",
            numbers=outside,
            count=count,
        )
    return Ok(value)


# =============================================================================
# РАЗМЕР PAYLOAD
# =============================================================================


def check_submatrix_smaller_than_matrix(
    value: T, size_mat: Size, size_sub: Size, method: str = "update"
) -> Result[T]:
    """Payload строго меньше матрицы по обоим измерениям."""
    rs_mat, cs_mat = size_mat
    rs_sub, cs_sub = size_sub
    if rs_sub < rs_mat and cs_sub < cs_mat:
        return Ok(value)
    target = "the matrix" if method == "update" else "the submatrix"
    return fail(
        ErrorKind.OVERSIZED_PAYLOAD,
        f"You can not {method} {target}. Size of submatrix {size_sub} "
        f"is same or bigger than size of matrix {size_mat}!",
        size=size_mat,
        payload_size=size_sub,
    )


# =============================================================================
# RESHAPE / DROP / ОПЕРАНДЫ
# =============================================================================


def check_reshapeable(value: T, count: int, rows: int, cols: int) -> Result[T]:
    if rows * cols == count:
        return Ok(value)
    return fail(
        ErrorKind.SIZE_MISMATCH,
        f"It is not possible to reshape {count} elements into ({rows}, {cols})! "
        f"The number of elements must be equal row * col.",
        count=count,
        rows=rows,
        cols=cols,
    )


def check_not_all_dropped(value: T, size_mat: Size, num_dropped: int, vec: str = "row") -> Result[T]:
    count = size_mat[0]
    if num_dropped < count:
        return Ok(value)
    return fail(
        ErrorKind.EMPTY_RESULT,
        f"It is not possible drop all the {vec}s from matrix! "
        f"Matrix has {count} {vec}s.",
        count=count,
        dropped=num_dropped,
    )


def check_same_size(value: T, size1: Size, size2: Size, what: str = "matrices") -> Result[T]:
    if size1 == size2:
        return Ok(value)
    return fail(
        ErrorKind.SHAPE_MISMATCH,
        f"Sizes (dimensions) of both {what} must be same! Got {size1} and {size2}.",
        size1=size1,
        size2=size2,
    )
