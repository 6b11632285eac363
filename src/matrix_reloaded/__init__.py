"""
matrix_reloaded — структурная работа с матрицами и векторами

Библиотека сфокусирована на обновлении, перестройке, чтении и удалении
строк/столбцов матриц, представленных вложенными списками. Содержит также
несколько операций над матрицами: сложение, вычитание, произведение.
Для быстрых численных расчётов используйте специализированные библиотеки.
"""

import logging

# Result convention
from matrix_reloaded.core.result import (
    Err,
    Ok,
    Result,
    and_then2,
    collect,
    fail,
)

# Errors
from matrix_reloaded.core.errors import ErrorKind, MatrixError, MatrixReloadedError

# Config
from matrix_reloaded.core.config import (
    DEFAULT_TOLERANCE,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    ToleranceConfig,
)

# Domain
from matrix_reloaded.core.domain import Dimension, Index, Orientation

# Engines
from matrix_reloaded.linalg import matrix, vector

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "2.2.1"

__all__ = [
    # Result convention
    "Ok",
    "Err",
    "Result",
    "fail",
    "and_then2",
    "collect",
    # Errors
    "ErrorKind",
    "MatrixError",
    "MatrixReloadedError",
    # Config
    "DEFAULT_TOLERANCE",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "ToleranceConfig",
    # Domain
    "Dimension",
    "Index",
    "Orientation",
    # Engines
    "matrix",
    "vector",
]
