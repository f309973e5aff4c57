"""
JSON Schema Contract Validators

Модуль для валидации запросов UI-слоя согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema (Draft 2020-12).

Схемы (calckernel/core/contracts/schema/):
- matrix_request.json - операция над матрицами и операнды
- equation_request.json - тип уравнения и коэффициенты
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются как package data рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'matrix_request')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-валидацию
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation самой схемы
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

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации (ValidationError)."""
        return self.validator.iter_errors(data)

    def first_error_message(self, data: Dict[str, Any]) -> str | None:
        """
        Сообщение наиболее релевантной ошибки или None для валидных данных.

        Используется фасадом операций для details при INVALID_INPUT.
        """
        error = best_match(self.validator.iter_errors(data))
        if error is None:
            return None
        path = "/".join(str(p) for p in error.absolute_path)
        return f"{path}: {error.message}" if path else error.message


class MatrixRequestValidator(ContractValidator):
    """Валидатор для matrix_request контракта."""

    def __init__(self):
        super().__init__("matrix_request")


class EquationRequestValidator(ContractValidator):
    """Валидатор для equation_request контракта."""

    def __init__(self):
        super().__init__("equation_request")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_matrix_request(data: Dict[str, Any]) -> None:
    """
    Валидация matrix_request данных.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    MatrixRequestValidator().validate(data)


def validate_equation_request(data: Dict[str, Any]) -> None:
    """
    Валидация equation_request данных.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    EquationRequestValidator().validate(data)
