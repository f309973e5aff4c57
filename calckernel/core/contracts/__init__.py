"""
Contract Validation Module

Модуль для валидации JSON запросов к ядру calc-kernel.
"""

from .validators import (
    ContractValidator,
    EquationRequestValidator,
    MatrixRequestValidator,
    SchemaLoader,
    validate_equation_request,
    validate_matrix_request,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "MatrixRequestValidator",
    "EquationRequestValidator",
    # Functions
    "validate_matrix_request",
    "validate_equation_request",
]
