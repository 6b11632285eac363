"""
Vector — операции над векторами

Вектор представлен списком:
- строка: [1, 2, 3]
- столбец: [[1], [2], [3]]

Ориентация не хранится отдельно и определяется по структуре
(vector_orientation) на входе каждой операции, которая от неё зависит.

Все функции чистые: аргументы не изменяются, результат — новый список.
Операции, которые могут отказать, возвращают Result (Ok/Err).
"""

import operator
from numbers import Number
from typing import Any, Callable, List, Sequence, Tuple, Union

from matrix_reloaded.core.config import DEFAULT_TOLERANCE, ToleranceConfig
from matrix_reloaded.core.domain import Orientation
from matrix_reloaded.core.errors import ErrorKind
from matrix_reloaded.core.numerics import is_close as _is_close_number
from matrix_reloaded.core.numerics import is_number
from matrix_reloaded.core.result import Err, Ok, Result, fail
from matrix_reloaded.linalg.validation import (
    check_non_neg_integer,
    check_positive_integer,
    check_row_vector,
    check_same_size,
    vector_orientation,
)

Row = List[Number]
Column = List[List[Number]]
Vector = Union[Row, Column]


# =============================================================================
# КОНСТРУКТОРЫ
# =============================================================================


def row(size: int, val: Number = 0) -> Result[Row]:
    """
    Строка-вектор заданной длины, заполненная val.

    Examples:
        >>> row(4)
        Ok(value=[0, 0, 0, 0])
        >>> row(4, 3.9)
        Ok(value=[3.9, 3.9, 3.9, 3.9])
    """
    return check_positive_integer(size, size, "size of vector").map(lambda n: [val] * n)


def col(size: int, val: Number = 0) -> Result[Column]:
    """
    Столбец-вектор заданной длины, заполненный val.

    Examples:
        >>> col(3)
        Ok(value=[[0], [0], [0]])
    """
    return check_positive_integer(size, size, "size of vector").map(
        lambda n: [[val] for _ in range(n)]
    )


# =============================================================================
# СТРУКТУРА
# =============================================================================


def orientation(vec: Any) -> Result[Orientation]:
    """Ориентация вектора: Ok(ROW), Ok(COLUMN) или Err(MALFORMED_PAYLOAD)."""
    return vector_orientation(vec)


def size(vec: Sequence[Any]) -> int:
    return len(vec)


def transpose(vec: Vector) -> Vector:
    """
    Строка -> столбец и наоборот.

    Examples:
        >>> transpose([1, 2, 3])
        [[1], [2], [3]]
        >>> transpose([[1], [2], [3]])
        [1, 2, 3]
    """
    if vec and isinstance(vec[0], list):
        return [el for item in vec for el in item]
    return [[el] for el in vec]


def _flatten(vec: Vector, orient: Orientation) -> Row:
    if orient is Orientation.COLUMN:
        return [item[0] for item in vec]
    return list(vec)


def _orient(values: Row, orient: Orientation) -> Vector:
    if orient is Orientation.COLUMN:
        return [[el] for el in values]
    return values


def _shape(vec: Vector, orient: Orientation) -> Tuple[int, int]:
    return (1, len(vec)) if orient is Orientation.ROW else (len(vec), 1)


# =============================================================================
# ПОЭЛЕМЕНТНЫЕ ОПЕРАЦИИ
# =============================================================================


def _zip_with(vec1: Vector, vec2: Vector, op: Callable[[Any, Any], Any]) -> Result[Vector]:
    """Поэлементная операция над векторами одинаковой формы и ориентации."""
    orient1 = vector_orientation(vec1)
    if isinstance(orient1, Err):
        return orient1
    orient2 = vector_orientation(vec2)
    if isinstance(orient2, Err):
        return orient2

    o1, o2 = orient1.value, orient2.value
    return check_same_size(None, _shape(vec1, o1), _shape(vec2, o2), "vectors").map(
        lambda _: _orient(
            [op(x, y) for x, y in zip(_flatten(vec1, o1), _flatten(vec2, o2))], o1
        )
    )


def add(vec1: Vector, vec2: Vector) -> Result[Vector]:
    """
    Сумма двух векторов одинакового размера и ориентации.

    Examples:
        >>> add([1, 2, 3], [4, 5, 6])
        Ok(value=[5, 7, 9])
    """
    return _zip_with(vec1, vec2, operator.add)


def sub(vec1: Vector, vec2: Vector) -> Result[Vector]:
    """
    Разность двух векторов одинакового размера и ориентации.

    Examples:
        >>> sub([1, 2, 3], [4, 5, 6])
        Ok(value=[-3, -3, -3])
    """
    return _zip_with(vec1, vec2, operator.sub)


def _check_row_pair(vec1: Any, vec2: Any, name: str) -> Result[None]:
    """Оба операнда — строки одинаковой длины."""
    for vec in (vec1, vec2):
        checked = check_row_vector(None, vec)
        if isinstance(checked, Err):
            return fail(
                ErrorKind.MALFORMED_PAYLOAD,
                f"The {name} is defined only for row vectors (non-empty lists of numbers)!",
                vector=vec,
            )
    return check_same_size(None, (1, len(vec1)), (1, len(vec2)), "vectors")


def dot(vec1: Row, vec2: Row) -> Result[Number]:
    """
    Скалярное произведение двух строк одинаковой длины.

    Examples:
        >>> dot([1, 2, 3], [4, 5, 6])
        Ok(value=32)
    """
    return _check_row_pair(vec1, vec2, "dot product").map(
        lambda _: sum(x * y for x, y in zip(vec1, vec2))
    )


def inner_product(vec1: Row, vec2: Row) -> Result[Row]:
    """
    Поэлементное произведение двух строк (без суммирования).

    На уровне матриц используется для произведения Адамара (schur_product).

    Examples:
        >>> inner_product([1, 2, 3], [4, 5, 6])
        Ok(value=[4, 10, 18])
    """
    return _check_row_pair(vec1, vec2, "inner product").map(
        lambda _: [x * y for x, y in zip(vec1, vec2)]
    )


def outer_product(vec1: Row, vec2: Row) -> Result[List[Row]]:
    """
    Внешнее произведение: матрица всех попарных произведений vec1[i] * vec2[j].

    Оба вектора — строки длины >= 2.

    Examples:
        >>> outer_product([1, 2], [3, 4, 5])
        Ok(value=[[3, 4, 5], [6, 8, 10]])
    """
    for vec in (vec1, vec2):
        if isinstance(check_row_vector(None, vec), Err):
            return fail(
                ErrorKind.MALFORMED_PAYLOAD,
                "The outer product is defined only for row vectors (non-empty lists of numbers)!",
                vector=vec,
            )
        if len(vec) < 2:
            return fail(
                ErrorKind.DIMENSION_INVALID,
                f"The outer product requires vectors of length at least 2, got length {len(vec)}!",
                vector=vec,
            )
    return Ok([[x * y for y in vec2] for x in vec1])


def mult_by_num(vec: Vector, val: Number) -> Vector:
    """
    Умножение вектора на число (ориентация сохраняется).

    Examples:
        >>> mult_by_num([2, 2, 2], 3)
        [6, 6, 6]
    """
    if vec and isinstance(vec[0], list):
        return [[item[0] * val] for item in vec]
    return [el * val for el in vec]


def alternate_seq(vec: Row, val: Number, step: int = 2) -> Result[Row]:
    """
    Прибавление val к каждому step-му элементу, начиная с первого.

    Examples:
        >>> alternate_seq([0, 0, 0, 0, 0], 1)
        Ok(value=[1, 0, 1, 0, 1])
        >>> alternate_seq([0] * 7, 1, 3)
        Ok(value=[1, 0, 0, 1, 0, 0, 1])
    """
    return (
        check_row_vector(vec, vec)
        .and_then(lambda v: check_positive_integer(v, step, "step"))
        .map(lambda v: [x + val if i % step == 0 else x for i, x in enumerate(v)])
    )


# =============================================================================
# ОГРАНИЧЕННОЕ ОБНОВЛЕНИЕ
# =============================================================================


def _payload_values(value: Any, orient: Orientation) -> Result[Row]:
    """Число или вектор той же ориентации -> плоский список значений."""
    if is_number(value):
        return Ok([value])
    value_orient = vector_orientation(value)
    if isinstance(value_orient, Err):
        return value_orient
    if value_orient.value is not orient:
        return fail(
            ErrorKind.SHAPE_MISMATCH,
            f"Orientation of the new values ({value_orient.value.value}) "
            f"must be same as orientation of the vector ({orient.value})!",
            vector_orientation=orient.value,
            payload_orientation=value_orient.value.value,
        )
    return Ok(_flatten(value, orient))


def update(vec: Vector, value: Union[Number, Vector], position: int) -> Result[Vector]:
    """
    Замена части вектора начиная с позиции position.

    value — число или вектор той же ориентации. Весь диапазон
    [position, position + len(value)) должен лежать внутри вектора.

    Args:
        vec: Исходный вектор (строка или столбец)
        value: Новое значение или новые значения
        position: Номер первого заменяемого элемента, с 0

    Returns:
        Ok(новый вектор) или Err

    Examples:
        >>> update([0, 0, 0, 0], [1, 2], 1)
        Ok(value=[0, 1, 2, 0])
        >>> update([[0], [0], [0]], 5, 2)
        Ok(value=[[0], [0], [5]])
    """
    orient = vector_orientation(vec)
    if isinstance(orient, Err):
        return orient
    o = orient.value

    checked = check_non_neg_integer(None, position, "position")
    if isinstance(checked, Err):
        return checked

    payload = _payload_values(value, o)
    if isinstance(payload, Err):
        return payload
    values = payload.value

    if position + len(values) - 1 >= len(vec):
        return fail(
            ErrorKind.OUT_OF_RANGE,
            f"You can not update the vector on given position {position}. "
            f"{len(values)} new value(s) do not fit into vector of size {len(vec)}!",
            position=position,
            size=len(vec),
            payload_size=len(values),
        )

    flat = _flatten(vec, o)
    return Ok(_orient(flat[:position] + values + flat[position + len(values):], o))


def update_map(vec: Vector, value: Union[Number, Vector], positions: Sequence[int]) -> Result[Vector]:
    """
    Последовательное применение update для каждой позиции слева направо.

    Более поздние позиции могут перезаписать более ранние. Возвращается
    первая ошибка; частично обновлённый вектор наружу не попадает.

    Examples:
        >>> update_map([0, 0, 0, 0, 0], [1, 1], [0, 3])
        Ok(value=[1, 1, 0, 1, 1])
    """
    result: Result[Vector] = Ok(vec)
    for position in positions:
        result = result.and_then(lambda v, p=position: update(v, value, p))
    return result


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def is_close(vec1: Vector, vec2: Vector, tolerance: ToleranceConfig = DEFAULT_TOLERANCE) -> bool:
    """
    Приближённое равенство векторов одной формы.

    Returns:
        False если формы различаются или хотя бы одна пара элементов не близка
    """
    orient1 = vector_orientation(vec1)
    orient2 = vector_orientation(vec2)
    if isinstance(orient1, Err) or isinstance(orient2, Err):
        return False
    if orient1.value is not orient2.value or len(vec1) != len(vec2):
        return False
    return all(
        _is_close_number(x, y, tolerance)
        for x, y in zip(_flatten(vec1, orient1.value), _flatten(vec2, orient2.value))
    )
