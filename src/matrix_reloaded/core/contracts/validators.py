"""
JSON Schema Contract Validators

Модуль для проверки структуры векторов и матриц согласно формальным
JSON Schema контрактам. Использует библиотеку jsonschema.

Схемы (contracts/schema/):
- row_vector.json: непустой список чисел
- column_vector.json: непустой список одноэлементных списков чисел
- matrix.json: непустой список непустых строк чисел

Прямоугольность матрицы (одинаковая длина строк) JSON Schema выразить не
может, её проверяет MatrixValidator поверх схемы.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, List

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from jsonschema.exceptions import best_match


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'matrix')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)

    def validate(self, data: Any) -> None:
        """
        Валидация данных против контракта.

        Raises:
            ValidationError: наиболее релевантная ошибка (best_match)
        """
        error = best_match(self.iter_errors(data))
        if error is not None:
            raise error

    def is_valid(self, data: Any) -> bool:
        """Проверка валидности без exception."""
        return next(iter(self.iter_errors(data)), None) is None

    def first_error_message(self, data: Any) -> str:
        """Сообщение наиболее релевантной ошибки или пустая строка."""
        error = best_match(self.iter_errors(data))
        return "" if error is None else error.message


class RowVectorValidator(ContractValidator):
    """Валидатор строки-вектора."""

    def __init__(self):
        super().__init__("row_vector")


class ColumnVectorValidator(ContractValidator):
    """Валидатор столбца-вектора."""

    def __init__(self):
        super().__init__("column_vector")


class MatrixValidator(ContractValidator):
    """
    Валидатор матрицы.

    Помимо схемы проверяет прямоугольность: все строки длины первой строки.
    """

    def __init__(self):
        super().__init__("matrix")

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        schema_errors: List[ValidationError] = list(self.validator.iter_errors(data))
        if schema_errors:
            yield from schema_errors
            return

        width = len(data[0])
        for i, row in enumerate(data):
            if len(row) != width:
                yield ValidationError(
                    f"Row {i} has {len(row)} elements, expected {width} "
                    f"(matrix must be rectangular)",
                    path=[i],
                    validator="rectangular",
                    instance=row,
                )


ROW_VECTOR_CONTRACT = RowVectorValidator()
COLUMN_VECTOR_CONTRACT = ColumnVectorValidator()
MATRIX_CONTRACT = MatrixValidator()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_row_vector(data: Any) -> None:
    """
    Raises:
        ValidationError: Если данные не являются строкой-вектором
    """
    ROW_VECTOR_CONTRACT.validate(data)


def validate_column_vector(data: Any) -> None:
    """
    Raises:
        ValidationError: Если данные не являются столбцом-вектором
    """
    COLUMN_VECTOR_CONTRACT.validate(data)


def validate_matrix(data: Any) -> None:
    """
    Raises:
        ValidationError: Если данные не являются прямоугольной матрицей чисел
    """
    MATRIX_CONTRACT.validate(data)
