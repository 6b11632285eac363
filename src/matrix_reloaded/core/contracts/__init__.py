"""
Contract Validation Module

Модуль для валидации структуры векторов и матриц по JSON Schema контрактам.
"""

from .validators import (
    COLUMN_VECTOR_CONTRACT,
    MATRIX_CONTRACT,
    ROW_VECTOR_CONTRACT,
    ColumnVectorValidator,
    ContractValidator,
    MatrixValidator,
    RowVectorValidator,
    SchemaLoader,
    validate_column_vector,
    validate_matrix,
    validate_row_vector,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "RowVectorValidator",
    "ColumnVectorValidator",
    "MatrixValidator",
    # Instances
    "ROW_VECTOR_CONTRACT",
    "COLUMN_VECTOR_CONTRACT",
    "MATRIX_CONTRACT",
    # Functions
    "validate_row_vector",
    "validate_column_vector",
    "validate_matrix",
]
