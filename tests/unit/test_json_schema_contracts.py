"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных запросов
- Детекция нарушений required полей
- Детекция нарушений типов и enum
- Условные требования (b для бинарных операций, коэффициенты по типу)
"""

import pytest
from jsonschema import Draft202012Validator, ValidationError

from calckernel.core.contracts import (
    EquationRequestValidator,
    MatrixRequestValidator,
    SchemaLoader,
    validate_equation_request,
    validate_matrix_request,
)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_matrix_request():
    """Валидный matrix_request (бинарная операция)."""
    return {
        "operation": "multiply",
        "a": [[1, 2], [3, 4]],
        "b": [[5.5], [6.5]],
    }


@pytest.fixture
def valid_system_request():
    """Валидный equation_request для системы 2×2."""
    return {
        "equation_type": "system",
        "coefficients": {"a1": 1, "b1": 1, "c1": 3, "a2": 2, "b2": -1, "c2": 0},
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты для SchemaLoader"""

    @pytest.mark.parametrize("name", ["matrix_request", "equation_request"])
    def test_schemas_are_valid(self, name):
        schema = SchemaLoader().load_schema(name)
        Draft202012Validator.check_schema(schema)

    def test_schema_cached(self):
        loader = SchemaLoader()
        assert loader.load_schema("matrix_request") is loader.load_schema("matrix_request")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nope")

    def test_invalid_schema(self, tmp_path):
        (tmp_path / "broken.json").write_text('{"type": 12}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# MATRIX REQUEST
# =============================================================================


class TestMatrixRequestContract:
    """Тесты для matrix_request контракта"""

    def test_valid(self, valid_matrix_request):
        validate_matrix_request(valid_matrix_request)

    @pytest.mark.parametrize("operation", ["transpose", "determinant", "inverse"])
    def test_unary_without_b(self, operation):
        validate_matrix_request({"operation": operation, "a": [[1.0]]})

    @pytest.mark.parametrize("operation", ["add", "subtract", "multiply"])
    def test_binary_requires_b(self, operation):
        with pytest.raises(ValidationError):
            validate_matrix_request({"operation": operation, "a": [[1.0]]})

    def test_unknown_operation(self, valid_matrix_request):
        valid_matrix_request["operation"] = "power"
        with pytest.raises(ValidationError):
            validate_matrix_request(valid_matrix_request)

    def test_missing_a(self):
        with pytest.raises(ValidationError):
            validate_matrix_request({"operation": "transpose"})

    @pytest.mark.parametrize("a", [[], [[]], [[1, "2"]], [[True]], "1,2;3,4", [1, 2]])
    def test_bad_operand_structure(self, a):
        assert not MatrixRequestValidator().is_valid({"operation": "transpose", "a": a})

    def test_jagged_passes_contract(self):
        # Прямоугольность проверяет ядро (DIMENSION_MISMATCH), не схема
        assert MatrixRequestValidator().is_valid({"operation": "transpose", "a": [[1, 2], [3]]})

    def test_extra_field_rejected(self, valid_matrix_request):
        valid_matrix_request["c"] = [[1]]
        assert not MatrixRequestValidator().is_valid(valid_matrix_request)

    def test_iter_errors(self):
        errors = list(MatrixRequestValidator().iter_errors({"a": "x"}))
        assert len(errors) >= 2

    def test_first_error_message(self, valid_matrix_request):
        validator = MatrixRequestValidator()
        assert validator.first_error_message(valid_matrix_request) is None

        message = validator.first_error_message({"operation": "transpose", "a": [["x"]]})
        assert message.startswith("a/0/0:")


# =============================================================================
# EQUATION REQUEST
# =============================================================================


class TestEquationRequestContract:
    """Тесты для equation_request контракта"""

    def test_valid_system(self, valid_system_request):
        validate_equation_request(valid_system_request)

    def test_valid_linear_and_quadratic(self):
        validate_equation_request(
            {"equation_type": "linear", "coefficients": {"a": 2, "b": -4}}
        )
        validate_equation_request(
            {"equation_type": "quadratic", "coefficients": {"a": 1, "b": -3, "c": 2}}
        )

    def test_missing_coefficient(self, valid_system_request):
        del valid_system_request["coefficients"]["c2"]
        with pytest.raises(ValidationError):
            validate_equation_request(valid_system_request)

    def test_foreign_coefficient(self):
        request = {"equation_type": "linear", "coefficients": {"a": 1, "b": 2, "c": 3}}
        assert not EquationRequestValidator().is_valid(request)

    def test_non_numeric_coefficient(self):
        request = {"equation_type": "linear", "coefficients": {"a": "1", "b": 2}}
        assert not EquationRequestValidator().is_valid(request)

    def test_unknown_type(self):
        request = {"equation_type": "cubic", "coefficients": {"a": 1}}
        assert not EquationRequestValidator().is_valid(request)

    def test_not_an_object(self):
        assert not EquationRequestValidator().is_valid([1, 2, 3])
