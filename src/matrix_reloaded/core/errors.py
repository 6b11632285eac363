"""
Errors — таксономия ошибок валидации

Каждая проверка границ возвращает ошибку своего вида (ErrorKind), чтобы
вызывающий код и тесты могли различать "индекс некорректен", "индекс вне
матрицы" и "payload слишком большой", а не просто "что-то пошло не так".

Ошибки передаются как значения (Err(MatrixError)), исключение
MatrixReloadedError появляется только при явном Result.unwrap().
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict


class ErrorKind(str, Enum):
    """Вид нарушения."""

    MALFORMED_INDEX = "malformed_index"  # отрицательная или нецелая координата
    OUT_OF_RANGE = "out_of_range"  # позиция за границами контейнера
    OVERSIZED_PAYLOAD = "oversized_payload"  # payload не меньше контейнера
    SHAPE_MISMATCH = "shape_mismatch"  # размеры операндов не согласованы
    SIZE_MISMATCH = "size_mismatch"  # reshape: rows * cols != число элементов
    DIMENSION_INVALID = "dimension_invalid"  # неположительный/некорректный размер
    EMPTY_RESULT = "empty_result"  # drop удалил бы все строки/столбцы
    MALFORMED_PAYLOAD = "malformed_payload"  # payload/вектор не той структуры
    MALFORMED_MATRIX = "malformed_matrix"  # пустая, рваная или нечисловая матрица


@dataclass(frozen=True)
class MatrixError:
    """Описание отказа операции.

    kind: вид нарушения
    message: человекочитаемое сообщение с нарушающими значениями
    context: значения, на которых сработала проверка (индексы, размеры)
    """

    kind: ErrorKind
    message: str
    context: Dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return f"[{self.kind.value}] {self.message}"


class MatrixReloadedError(Exception):
    """
    Исключение для вызывающего кода, предпочитающего exceptions.

    Возникает только в Result.unwrap() на Err. Несёт исходный MatrixError
    в атрибуте error.
    """

    def __init__(self, error: MatrixError):
        super().__init__(str(error))
        self.error = error

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind
