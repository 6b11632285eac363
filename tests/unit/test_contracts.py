"""
Tests for JSON Schema Contract Validators

Комплексное тестирование контрактов векторов и матриц:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений типов и пустых структур
- Прямоугольность матрицы
"""

import pytest
from jsonschema import Draft202012Validator, ValidationError

from matrix_reloaded.core.contracts import (
    COLUMN_VECTOR_CONTRACT,
    MATRIX_CONTRACT,
    ROW_VECTOR_CONTRACT,
    ColumnVectorValidator,
    MatrixValidator,
    RowVectorValidator,
    SchemaLoader,
    validate_column_vector,
    validate_matrix,
    validate_row_vector,
)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Загрузка и meta-validation схем."""

    @pytest.mark.parametrize("name", ["row_vector", "column_vector", "matrix"])
    def test_schemas_are_valid(self, name):
        schema = SchemaLoader().load_schema(name)
        Draft202012Validator.check_schema(schema)
        assert schema["type"] == "array"

    def test_schema_cached(self):
        loader = SchemaLoader()
        assert loader.load_schema("matrix") is loader.load_schema("matrix")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("tensor")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nowhere")


# =============================================================================
# VECTORS
# =============================================================================


class TestRowVectorContract:
    def test_valid(self):
        validate_row_vector([1, 2.5, -3])
        assert RowVectorValidator().is_valid([0])

    @pytest.mark.parametrize("data", [[], [[1], [2]], [1, "2"], [True, 1], "123", 5, None])
    def test_invalid(self, data):
        assert not ROW_VECTOR_CONTRACT.is_valid(data)
        with pytest.raises(ValidationError):
            validate_row_vector(data)


class TestColumnVectorContract:
    def test_valid(self):
        validate_column_vector([[1], [2], [3]])
        assert ColumnVectorValidator().is_valid([[0.5]])

    @pytest.mark.parametrize("data", [[], [1, 2], [[1, 2]], [[1], []], [[1], 2], [["a"]]])
    def test_invalid(self, data):
        assert not COLUMN_VECTOR_CONTRACT.is_valid(data)
        with pytest.raises(ValidationError):
            validate_column_vector(data)


# =============================================================================
# MATRIX
# =============================================================================


class TestMatrixContract:
    def test_valid(self):
        validate_matrix([[1, 2], [3, 4]])
        assert MatrixValidator().is_valid([[1]])
        assert MATRIX_CONTRACT.first_error_message([[1, 2, 3]]) == ""

    @pytest.mark.parametrize("data", [[], [[]], [1, 2], [[1, "x"]], [[1], None]])
    def test_structure_violations(self, data):
        assert not MATRIX_CONTRACT.is_valid(data)
        with pytest.raises(ValidationError):
            validate_matrix(data)

    def test_ragged_matrix_rejected(self):
        data = [[1, 2, 3], [4, 5]]
        errors = list(MATRIX_CONTRACT.iter_errors(data))
        assert len(errors) == 1
        assert "rectangular" in errors[0].message
        assert list(errors[0].path) == [1]

        with pytest.raises(ValidationError, match="rectangular"):
            validate_matrix(data)

    def test_first_error_message(self):
        assert "rectangular" in MATRIX_CONTRACT.first_error_message([[1], [2, 3]])
