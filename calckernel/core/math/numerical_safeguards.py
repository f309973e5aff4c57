"""
Numerical Safeguards - Epsilon-сравнения для матричного ядра и решателя

Модуль задаёт единые epsilon-параметры и сравнения float, которые используют
Matrix Engine и Equation Solver:
- Проверка валидности float (NaN/Inf)
- Сравнение с нулём с настраиваемой толерантностью (по умолчанию точное)
- Сравнение двух float с учётом машинной точности
- Трёхзначное сравнение (-1 / 0 / +1) для ветвления по знаку

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Толерантность 0.0 означает точное сравнение (поведение по умолчанию)
2. Отрицательная толерантность недопустима (ValueError)
3. NaN никогда не считается нулём и не вызывает исключений
4. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Порог вырожденности определителя при обращении матрицы
# 0.0 - вырожденной считается только матрица с det == 0
EPS_SINGULAR_DEFAULT: Final[float] = 0.0

# Порог "нуля" для дискриминанта и определителей Крамера
EPS_ZERO_DEFAULT: Final[float] = 0.0

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def validate_tolerance(value: float, name: str) -> None:
    """
    Валидация толерантности: конечная и неотрицательная.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value < 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_zero(value: float, tol: float = EPS_ZERO_DEFAULT) -> bool:
    """
    Проверка, близко ли значение к нулю с учётом толерантности.

    При tol == 0.0 сравнение точное: is_zero(1e-300) → False.

    Args:
        value: Проверяемое значение
        tol: Абсолютная толерантность (default: EPS_ZERO_DEFAULT)

    Returns:
        True если abs(value) <= tol (для NaN всегда False)

    Examples:
        >>> is_zero(0.0)
        True
        >>> is_zero(-0.0)
        True
        >>> is_zero(1e-15)
        False
        >>> is_zero(1e-15, tol=1e-12)
        True
    """
    return abs(value) <= tol


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(0.0, 1e-13)
        True
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def compare_with_tolerance(
    a: float,
    b: float,
    tol: float = EPS_ZERO_DEFAULT,
) -> int:
    """
    Трёхзначное сравнение двух float с учётом толерантности.

    Используется для ветвления по знаку дискриминанта: D < 0, D == 0, D > 0.

    Args:
        a: Первое значение
        b: Второе значение
        tol: Абсолютная толерантность (default: EPS_ZERO_DEFAULT)

    Returns:
        -1 если a < b (с учётом tol)
         0 если a ≈ b (в пределах tol)
        +1 если a > b (с учётом tol) или разность NaN

    Examples:
        >>> compare_with_tolerance(1.0, 2.0)
        -1
        >>> compare_with_tolerance(2.0, 1.0)
        1
        >>> compare_with_tolerance(1.0, 1.0 + 1e-13, tol=1e-12)
        0
    """
    diff = a - b

    if abs(diff) <= tol:
        return 0
    elif diff < 0:
        return -1
    else:
        return 1
