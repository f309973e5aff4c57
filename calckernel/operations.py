"""Operations - фасад ядра для UI-слоя.

Принимает уже распарсенный запрос (dict), проверяет его JSON Schema контрактом,
строит доменные объекты и маршрутизирует в Matrix Engine / Equation Solver.

Порядок обработки:
1. Контракт (matrix_request / equation_request) → INVALID_INPUT при нарушении
2. Выбор операции по MatrixOperation / EquationType
3. Вызов ядра, результат возвращается как есть

Фасад никогда не поднимает исключений: любой исход - OperationResult.
"""

import logging
from typing import Any, Dict, Optional

from pydantic import ValidationError

from calckernel.core.contracts import EquationRequestValidator, MatrixRequestValidator
from calckernel.core.domain import (
    EquationType,
    ErrorKind,
    LinearEquation,
    LinearSystem2x2,
    MatrixOperation,
    OperationResult,
    QuadraticEquation,
)
from calckernel.core.math import equation_solver, matrix_engine
from calckernel.core.math.equation_solver import EquationSolverConfig
from calckernel.core.math.matrix_engine import MatrixEngineConfig

logger = logging.getLogger(__name__)


_MATRIX_VALIDATOR = MatrixRequestValidator()
_EQUATION_VALIDATOR = EquationRequestValidator()


def _invalid(details: str) -> OperationResult:
    logger.debug("request rejected: %s", details)
    return OperationResult.failure(ErrorKind.INVALID_INPUT, details)


def perform_matrix_operation(
    request: Dict[str, Any],
    config: Optional[MatrixEngineConfig] = None,
) -> OperationResult:
    """Выполнение операции над матрицами по запросу UI.

    Args:
        request: {"operation": ..., "a": [[...]], "b": [[...]]}
            b обязателен для add / subtract / multiply
        config: конфигурация Matrix Engine (default: matrix_engine.DEFAULT_CONFIG)

    Returns:
        OperationResult операции ядра или failure INVALID_INPUT
    """
    error = _MATRIX_VALIDATOR.first_error_message(request)
    if error is not None:
        return _invalid(f"matrix_request: {error}")

    if config is None:
        config = matrix_engine.DEFAULT_CONFIG
    operation = MatrixOperation(request["operation"])
    a = request["a"]
    b = request.get("b")

    if operation is MatrixOperation.TRANSPOSE:
        return matrix_engine.transpose(a)
    if operation is MatrixOperation.DETERMINANT:
        return matrix_engine.determinant(a, config)
    if operation is MatrixOperation.INVERSE:
        return matrix_engine.inverse(a, config)
    if operation is MatrixOperation.ADD:
        return matrix_engine.add(a, b)
    if operation is MatrixOperation.SUBTRACT:
        return matrix_engine.subtract(a, b)
    return matrix_engine.multiply(a, b)


def solve_equation(
    request: Dict[str, Any],
    config: Optional[EquationSolverConfig] = None,
) -> OperationResult:
    """Решение уравнения по запросу UI.

    Args:
        request: {"equation_type": "linear" | "quadratic" | "system",
                  "coefficients": {...}}
        config: конфигурация Equation Solver (default: equation_solver.DEFAULT_CONFIG)

    Returns:
        OperationResult решателя или failure INVALID_INPUT
    """
    error = _EQUATION_VALIDATOR.first_error_message(request)
    if error is not None:
        return _invalid(f"equation_request: {error}")

    if config is None:
        config = equation_solver.DEFAULT_CONFIG
    equation_type = EquationType(request["equation_type"])
    coefficients = request["coefficients"]

    try:
        if equation_type is EquationType.LINEAR:
            eq = LinearEquation(**coefficients)
            return equation_solver.solve_linear(eq.a, eq.b)

        if equation_type is EquationType.QUADRATIC:
            eq = QuadraticEquation(**coefficients)
            return equation_solver.solve_quadratic(eq.a, eq.b, eq.c, config)

        eq = LinearSystem2x2(**coefficients)
    except ValidationError as e:
        return _invalid(f"{equation_type.value}: {e.errors()[0]['msg']}")

    return equation_solver.solve_linear_system_2x2(
        eq.a1, eq.b1, eq.c1, eq.a2, eq.b2, eq.c2, config
    )
