"""
Equation Solver - Решение линейных, квадратных уравнений и систем 2×2

Модуль реализует решения в замкнутой форме:
- a·x + b = 0
- a·x² + b·x + c = 0 (при a == 0 - сводится к линейному)
- Система 2×2 по правилу Крамера

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль никогда не происходит
2. Все функции тотальны: OperationResult, без исключений (целые вне диапазона float - INVALID_INPUT)
3. Случай одного корня определяется по дискриминанту, а не по x1 == x2
4. Решатель не зависит от Matrix Engine (прямая арифметика Крамера)

ФОРМУЛЫ:
    D = b² - 4ac
    x1,2 = (-b ± √D) / (2a)

    Δ  = a1·b2 - a2·b1
    x  = (b2·c1 - b1·c2) / Δ
    y  = (a1·c2 - a2·c1) / Δ
    Δ₂ = a1·c2 - a2·c1   (при Δ == 0: пропорциональность уравнений)
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional

from calckernel.core.domain.results import (
    ErrorKind,
    OperationResult,
    QuadraticRoots,
    SystemSolution,
)
from calckernel.core.math.numerical_safeguards import (
    EPS_ZERO_DEFAULT,
    compare_with_tolerance,
    is_zero,
    validate_tolerance,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class EquationSolverConfig:
    """Конфигурация Equation Solver.

    zero_eps: порог "нуля" для дискриминанта и определителей Крамера
    (0.0 - точное сравнение)
    """

    zero_eps: float = EPS_ZERO_DEFAULT

    def __post_init__(self) -> None:
        validate_tolerance(self.zero_eps, "zero_eps")


DEFAULT_CONFIG = EquationSolverConfig()


def _fail(error: ErrorKind, details: str) -> OperationResult:
    logger.debug("equation solve failed: %s (%s)", error.value, details)
    return OperationResult.failure(error, details)


def _as_floats(*values: float) -> Optional[tuple[float, ...]]:
    """Коэффициенты как float; None если целое не помещается в float."""
    try:
        return tuple(float(v) for v in values)
    except OverflowError:
        return None


# =============================================================================
# LINEAR
# =============================================================================


def solve_linear(a: float, b: float) -> OperationResult:
    """
    Решение a·x + b = 0.

    Коэффициент при x сравнивается с нулём точно: любое a != 0 даёт корень.

    Returns:
        success(float x = -b / a) при a != 0;
        failure INFINITE_SOLUTIONS при a == 0 и b == 0;
        failure NO_SOLUTION при a == 0 и b != 0

    Examples:
        >>> solve_linear(2.0, -4.0).value
        2.0
        >>> solve_linear(0.0, 5.0).error
        <ErrorKind.NO_SOLUTION: 'NO_SOLUTION'>
    """
    coefficients = _as_floats(a, b)
    if coefficients is None:
        return _fail(ErrorKind.INVALID_INPUT, "linear: coefficient out of float range")
    a, b = coefficients

    if a != 0:
        return OperationResult.success(-b / a)

    if b == 0:
        return _fail(ErrorKind.INFINITE_SOLUTIONS, f"linear: a=0, b={b!r}")

    return _fail(ErrorKind.NO_SOLUTION, f"linear: a=0, b={b!r}")


# =============================================================================
# QUADRATIC
# =============================================================================


def solve_quadratic(
    a: float,
    b: float,
    c: float,
    config: EquationSolverConfig = DEFAULT_CONFIG,
) -> OperationResult:
    """
    Решение a·x² + b·x + c = 0.

    При a == 0 уравнение вырождается в b·x + c = 0 и решается как линейное:
    корень упаковывается в QuadraticRoots(x, None), отказы передаются как есть.

    Returns:
        success(QuadraticRoots):
            - D == 0: QuadraticRoots(-b / (2a), None)
            - D > 0: QuadraticRoots(x1, x2), x1 = (-b + √D)/(2a), x2 = (-b - √D)/(2a)
        failure NO_REAL_ROOTS при D < 0

    Examples:
        >>> solve_quadratic(1.0, -3.0, 2.0).value
        QuadraticRoots(x1=2.0, x2=1.0)
        >>> solve_quadratic(1.0, -2.0, 1.0).value
        QuadraticRoots(x1=1.0, x2=None)
    """
    coefficients = _as_floats(a, b, c)
    if coefficients is None:
        return _fail(ErrorKind.INVALID_INPUT, "quadratic: coefficient out of float range")
    a, b, c = coefficients

    if a == 0:
        linear = solve_linear(b, c)
        if not linear.ok:
            return linear
        return OperationResult.success(
            QuadraticRoots(linear.value), details="degenerate: a=0"
        )

    discriminant = b * b - 4.0 * a * c
    sign = compare_with_tolerance(discriminant, 0.0, config.zero_eps)

    if sign < 0:
        return _fail(ErrorKind.NO_REAL_ROOTS, f"quadratic: D={discriminant!r}")

    two_a = 2.0 * a

    if sign == 0:
        return OperationResult.success(QuadraticRoots(-b / two_a))

    sqrt_d = math.sqrt(discriminant)
    x1 = (-b + sqrt_d) / two_a
    x2 = (-b - sqrt_d) / two_a
    return OperationResult.success(QuadraticRoots(x1, x2))


# =============================================================================
# LINEAR SYSTEM 2×2
# =============================================================================


def solve_linear_system_2x2(
    a1: float,
    b1: float,
    c1: float,
    a2: float,
    b2: float,
    c2: float,
    config: EquationSolverConfig = DEFAULT_CONFIG,
) -> OperationResult:
    """
    Решение системы 2×2 по правилу Крамера.

        a1·x + b1·y = c1
        a2·x + b2·y = c2

    Returns:
        success(SystemSolution(x, y)) при Δ != 0;
        failure INFINITE_SOLUTIONS при Δ == 0 и Δ₂ == 0 (одна и та же прямая);
        failure NO_SOLUTION при Δ == 0 и Δ₂ != 0 (параллельные прямые)

    Examples:
        >>> solve_linear_system_2x2(1, 1, 3, 2, -1, 0).value
        SystemSolution(x=1.0, y=2.0)
    """
    coefficients = _as_floats(a1, b1, c1, a2, b2, c2)
    if coefficients is None:
        return _fail(ErrorKind.INVALID_INPUT, "system: coefficient out of float range")
    a1, b1, c1, a2, b2, c2 = coefficients

    det = a1 * b2 - a2 * b1

    if not is_zero(det, config.zero_eps):
        x = (b2 * c1 - b1 * c2) / det
        y = (a1 * c2 - a2 * c1) / det
        return OperationResult.success(SystemSolution(x, y))

    det_secondary = a1 * c2 - a2 * c1

    if is_zero(det_secondary, config.zero_eps):
        return _fail(
            ErrorKind.INFINITE_SOLUTIONS,
            f"system: det=0, secondary det={det_secondary!r}",
        )

    return _fail(
        ErrorKind.NO_SOLUTION,
        f"system: det=0, secondary det={det_secondary!r}",
    )
