"""
Result — двухвариантный результат операции

Каждая операция, которая может отказать, возвращает либо Ok(value), либо
Err(MatrixError). Проверки выстраиваются в цепочку через and_then и
прерываются на первой ошибке:

    is_index_ok(matrix, index)
        .and_then(lambda m: is_submatrix_in_matrix(m, ...))
        .map(lambda m: make_update(m, ...))

Комбинаторы:
- map: преобразовать значение Ok
- and_then: продолжить цепочку функцией, возвращающей Result
- and_then2: бинарная операция над двумя Result (только если оба Ok)
- collect: список Result -> Result списка (первая ошибка побеждает)
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, List, TypeVar, Union

from matrix_reloaded.core.errors import ErrorKind, MatrixError, MatrixReloadedError

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")


# =============================================================================
# ВАРИАНТЫ
# =============================================================================


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Успешный результат."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def map(self, f: Callable[[T], U]) -> "Ok[U]":
        return Ok(f(self.value))

    def and_then(self, f: Callable[[T], "Result[U]"]) -> "Result[U]":
        return f(self.value)

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: Any) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Отказ с описанием нарушения."""

    error: MatrixError

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind

    @property
    def message(self) -> str:
        return self.error.message

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def map(self, f: Callable[[Any], Any]) -> "Err":
        return self

    def and_then(self, f: Callable[[Any], Any]) -> "Err":
        return self

    def unwrap(self) -> Any:
        """
        Raises:
            MatrixReloadedError: всегда, с исходным MatrixError
        """
        raise MatrixReloadedError(self.error)

    def unwrap_or(self, default: U) -> U:
        return default


Result = Union[Ok[T], Err]


# =============================================================================
# КОНСТРУКТОРЫ
# =============================================================================


def fail(kind: ErrorKind, message: str, **context: Any) -> Err:
    """
    Создание Err с логированием на уровне DEBUG.

    Все проверки границ создают ошибки только через эту функцию, поэтому
    отказ любой операции виден в логе с видом нарушения и контекстом.

    Args:
        kind: Вид нарушения
        message: Сообщение для пользователя
        **context: Нарушающие значения (индексы, размеры)

    Returns:
        Err(MatrixError)
    """
    logger.debug("validation failed: kind=%s message=%r context=%s", kind.value, message, context)
    return Err(MatrixError(kind=kind, message=message, context=dict(context)))


# =============================================================================
# КОМБИНАТОРЫ
# =============================================================================


def and_then2(
    result1: "Result[T]",
    result2: "Result[U]",
    f: Callable[[T, U], "Result[V]"],
) -> "Result[V]":
    """
    Применение бинарной операции к двум Result.

    f вызывается только если оба результата Ok; иначе возвращается первая
    ошибка (слева направо).

    Examples:
        >>> and_then2(new(2), new(2, 1), add)  # doctest: +SKIP
        Ok(value=[[1, 1], [1, 1]])
    """
    if isinstance(result1, Err):
        return result1
    if isinstance(result2, Err):
        return result2
    return f(result1.value, result2.value)


def collect(results: Iterable["Result[T]"]) -> "Result[List[T]]":
    """
    Список Result -> Result списка значений.

    Возвращает первую встреченную ошибку без вычисления остальных.
    """
    values: List[T] = []
    for result in results:
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(values)
