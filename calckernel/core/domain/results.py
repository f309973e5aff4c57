"""
OperationResult - Результат операции ядра (success | failure)

Все операции Matrix Engine и Equation Solver возвращают OperationResult
вместо исключений или sentinel-значений (None/NaN):
- success: payload (Matrix, float, QuadraticRoots, SystemSolution)
- failure: тег ErrorKind + диагностическая строка details

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ровно одно из (value, error) задано
2. Failure никогда не несёт частично вычисленный payload
3. Ядро не форматирует и не локализует сообщения - это задача UI
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, NamedTuple, Optional


# =============================================================================
# ENUMS
# =============================================================================


class ErrorKind(str, Enum):
    """
    Таксономия отказов ядра.

    Основные:
    - DIMENSION_MISMATCH: add/subtract с разной формой, multiply с несовместимой
      внутренней размерностью, рваный или пустой ввод
    - NOT_SQUARE: determinant/inverse для неквадратной матрицы
    - SINGULAR: inverse для матрицы с нулевым определителем
    - NO_SOLUTION: линейное уравнение/система не имеет решений
    - INFINITE_SOLUTIONS: уравнение/система выполняется для любых значений
    - NO_REAL_ROOTS: отрицательный дискриминант

    Граничные (не возникают на валидном числовом вводе с конфигурацией по умолчанию):
    - INVALID_INPUT: нечисловые элементы или запрос, нарушающий контракт
    - SIZE_LIMIT_EXCEEDED: матрица больше настроенного потолка разложения
    """

    DIMENSION_MISMATCH = "DIMENSION_MISMATCH"
    NOT_SQUARE = "NOT_SQUARE"
    SINGULAR = "SINGULAR"
    NO_SOLUTION = "NO_SOLUTION"
    INFINITE_SOLUTIONS = "INFINITE_SOLUTIONS"
    NO_REAL_ROOTS = "NO_REAL_ROOTS"
    INVALID_INPUT = "INVALID_INPUT"
    SIZE_LIMIT_EXCEEDED = "SIZE_LIMIT_EXCEEDED"


# =============================================================================
# PAYLOADS
# =============================================================================


class QuadraticRoots(NamedTuple):
    """
    Вещественные корни квадратного уравнения.

    x2 is None для единственного корня (двойной корень при D == 0 или
    вырожденный линейный случай при a == 0). Иначе x1 соответствует +√D,
    x2 соответствует -√D (при a > 0 это даёт x1 >= x2).
    """

    x1: float
    x2: Optional[float] = None

    @property
    def roots(self) -> tuple[float, ...]:
        if self.x2 is None:
            return (self.x1,)
        return (self.x1, self.x2)

    @property
    def is_single(self) -> bool:
        return self.x2 is None


class SystemSolution(NamedTuple):
    """Единственное решение (x, y) системы 2×2."""

    x: float
    y: float


# =============================================================================
# EXCEPTIONS
# =============================================================================


class OperationFailed(Exception):
    """
    Поднимается OperationResult.unwrap() для failure-результата.

    Ядро само никогда её не поднимает: unwrap - опциональное удобство
    вызывающего кода, предпочитающего исключения.
    """

    def __init__(self, error: ErrorKind, details: str = ""):
        self.error = error
        self.details = details
        msg = error.value if not details else f"{error.value}: {details}"
        super().__init__(msg)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class OperationResult:
    """Результат операции ядра."""

    ok: bool
    value: Any = None
    error: Optional[ErrorKind] = None

    # Диагностика (не для показа пользователю)
    details: str = ""

    def __post_init__(self) -> None:
        if self.ok and self.error is not None:
            raise ValueError("successful result cannot carry an error")
        if not self.ok and (self.error is None or self.value is not None):
            raise ValueError("failed result must carry an error and no value")

    @classmethod
    def success(cls, value: Any, details: str = "") -> "OperationResult":
        return cls(ok=True, value=value, details=details)

    @classmethod
    def failure(cls, error: ErrorKind, details: str = "") -> "OperationResult":
        return cls(ok=False, error=error, details=details)

    def unwrap(self) -> Any:
        """
        Payload успешного результата.

        Raises:
            OperationFailed: Если результат - failure
        """
        if not self.ok:
            raise OperationFailed(self.error, self.details)
        return self.value
