"""
Matrix Engine - Плотная матричная арифметика, определитель, обращение

Модуль реализует операции над вещественными матрицами:
- Поэлементное сложение и вычитание
- Умножение (сумма по k в порядке 0..cols(A)-1)
- Транспонирование
- Определитель разложением по первой строке (cofactor expansion)
- Обращение методом Гаусса-Жордана с частичным выбором главного элемента

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все операции тотальны: возвращают OperationResult и никогда не поднимают исключений
2. Проверка формы выполняется ДО любой арифметики
3. Операнды не мутируются, failure не несёт частичную матрицу
4. Все операции детерминированы и не имеют состояния

ОГРАНИЧЕНИЕ МАСШТАБА:
    Разложение по первой строке стоит O(n!). Для целевого ввода (до 4×4)
    этого достаточно. Для больших матриц задайте
    MatrixEngineConfig.max_cofactor_size.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional, Union

from calckernel.core.domain.matrix import Matrix, MatrixShapeError
from calckernel.core.domain.results import ErrorKind, OperationResult
from calckernel.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_SINGULAR_DEFAULT,
    is_close,
    is_zero,
    validate_tolerance,
)

logger = logging.getLogger(__name__)

MatrixLike = Union[Matrix, Sequence[Sequence[float]]]


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class MatrixEngineConfig:
    """Конфигурация Matrix Engine.

    singular_eps: |det| <= singular_eps считается вырожденным (0.0 - точное сравнение)
    max_cofactor_size: потолок n для разложения по строке (None - без потолка)
    """

    singular_eps: float = EPS_SINGULAR_DEFAULT
    max_cofactor_size: Optional[int] = None

    def __post_init__(self) -> None:
        validate_tolerance(self.singular_eps, "singular_eps")
        if self.max_cofactor_size is not None and self.max_cofactor_size < 1:
            raise ValueError(
                f"max_cofactor_size must be >= 1, got {self.max_cofactor_size}"
            )


DEFAULT_CONFIG = MatrixEngineConfig()


# =============================================================================
# HELPERS
# =============================================================================


def _fail(error: ErrorKind, details: str) -> OperationResult:
    logger.debug("matrix operation failed: %s (%s)", error.value, details)
    return OperationResult.failure(error, details)


def _coerce(operand: MatrixLike, name: str) -> Union[Matrix, OperationResult]:
    """Приведение операнда к Matrix; при нарушении формы или типа - failure."""
    try:
        return Matrix.from_rows(operand)
    except MatrixShapeError as e:
        return _fail(ErrorKind.DIMENSION_MISMATCH, f"{name}: {e}")
    except (TypeError, ValueError) as e:
        return _fail(ErrorKind.INVALID_INPUT, f"{name}: non-numeric entry ({e})")
    except OverflowError as e:
        return _fail(ErrorKind.INVALID_INPUT, f"{name}: entry out of float range ({e})")


def _check_cofactor_size(n: int, config: MatrixEngineConfig) -> Optional[OperationResult]:
    if config.max_cofactor_size is not None and n > config.max_cofactor_size:
        return _fail(
            ErrorKind.SIZE_LIMIT_EXCEEDED,
            f"{n}x{n} exceeds max_cofactor_size={config.max_cofactor_size}",
        )
    return None


def _cofactor_determinant(rows: Sequence[Sequence[float]]) -> float:
    """Определитель квадратной сетки разложением по первой строке."""
    n = len(rows)
    if n == 1:
        return rows[0][0]

    det = 0.0
    for j in range(n):
        # Минор: без строки 0 и столбца j
        minor = [row[:j] + row[j + 1:] for row in rows[1:]]
        sign = 1.0 if j % 2 == 0 else -1.0
        det += sign * rows[0][j] * _cofactor_determinant(minor)

    return det


def allclose(
    a: Matrix,
    b: Matrix,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Поэлементное сравнение двух матриц с толерантностью.

    Матрицы разной формы никогда не считаются близкими.

    Examples:
        >>> allclose(Matrix.identity(2), Matrix.from_rows([[1.0, 1e-13], [0.0, 1.0]]))
        True
    """
    if a.shape != b.shape:
        return False

    return all(
        is_close(x, y, rel_tol=rel_tol, abs_tol=abs_tol)
        for row_a, row_b in zip(a.rows, b.rows)
        for x, y in zip(row_a, row_b)
    )


# =============================================================================
# ELEMENT-WISE
# =============================================================================


def _elementwise(a: MatrixLike, b: MatrixLike, sign: float, op_name: str) -> OperationResult:
    m_a = _coerce(a, "A")
    if isinstance(m_a, OperationResult):
        return m_a
    m_b = _coerce(b, "B")
    if isinstance(m_b, OperationResult):
        return m_b

    if m_a.shape != m_b.shape:
        return _fail(
            ErrorKind.DIMENSION_MISMATCH,
            f"{op_name}: shapes {m_a.shape} and {m_b.shape} differ",
        )

    rows = tuple(
        tuple(x + sign * y for x, y in zip(row_a, row_b))
        for row_a, row_b in zip(m_a.rows, m_b.rows)
    )
    return OperationResult.success(Matrix(rows=rows))


def add(a: MatrixLike, b: MatrixLike) -> OperationResult:
    """
    Поэлементная сумма A + B.

    Returns:
        success(Matrix) той же формы или failure DIMENSION_MISMATCH
    """
    return _elementwise(a, b, 1.0, "add")


def subtract(a: MatrixLike, b: MatrixLike) -> OperationResult:
    """
    Поэлементная разность A - B.

    Returns:
        success(Matrix) той же формы или failure DIMENSION_MISMATCH
    """
    return _elementwise(a, b, -1.0, "subtract")


# =============================================================================
# PRODUCT / TRANSPOSE
# =============================================================================


def multiply(a: MatrixLike, b: MatrixLike) -> OperationResult:
    """
    Матричное произведение A · B.

    entry(i, j) = Σ_k A[i][k] · B[k][j], суммирование по k = 0..cols(A)-1.

    Returns:
        success(Matrix rows(A) × cols(B)) или failure DIMENSION_MISMATCH,
        если cols(A) != rows(B)
    """
    m_a = _coerce(a, "A")
    if isinstance(m_a, OperationResult):
        return m_a
    m_b = _coerce(b, "B")
    if isinstance(m_b, OperationResult):
        return m_b

    if m_a.n_cols != m_b.n_rows:
        return _fail(
            ErrorKind.DIMENSION_MISMATCH,
            f"multiply: cols(A)={m_a.n_cols} != rows(B)={m_b.n_rows}",
        )

    columns = list(zip(*m_b.rows))
    rows = []
    for row in m_a.rows:
        out_row = []
        for col in columns:
            total = 0.0
            for x, y in zip(row, col):
                total += x * y
            out_row.append(total)
        rows.append(tuple(out_row))

    return OperationResult.success(Matrix(rows=tuple(rows)))


def transpose(a: MatrixLike) -> OperationResult:
    """
    Транспонирование: result[j][i] = A[i][j].

    Всегда успешно для прямоугольной матрицы (в т.ч. неквадратной).
    """
    m_a = _coerce(a, "A")
    if isinstance(m_a, OperationResult):
        return m_a

    return OperationResult.success(Matrix(rows=tuple(zip(*m_a.rows))))


# =============================================================================
# DETERMINANT / INVERSE
# =============================================================================


def determinant(
    a: MatrixLike,
    config: MatrixEngineConfig = DEFAULT_CONFIG,
) -> OperationResult:
    """
    Определитель разложением по первой строке.

    Базовый случай: det([[x]]) = x.
    Рекурсия: det(A) = Σ_j sign(j) · A[0][j] · det(minor(0, j)),
    sign(j) = +1 для чётных j, -1 для нечётных.

    Returns:
        success(float) или failure NOT_SQUARE / SIZE_LIMIT_EXCEEDED

    Examples:
        >>> determinant([[1, 2], [3, 4]]).value
        -2.0
    """
    m_a = _coerce(a, "A")
    if isinstance(m_a, OperationResult):
        return m_a

    if not m_a.is_square:
        return _fail(ErrorKind.NOT_SQUARE, f"determinant: shape {m_a.shape}")

    too_large = _check_cofactor_size(m_a.n_rows, config)
    if too_large is not None:
        return too_large

    return OperationResult.success(_cofactor_determinant(m_a.rows))


def inverse(
    a: MatrixLike,
    config: MatrixEngineConfig = DEFAULT_CONFIG,
) -> OperationResult:
    """
    Обратная матрица методом Гаусса-Жордана с частичным выбором главного элемента.

    Алгоритм:
    1. det(A) == 0 (или |det| <= config.singular_eps) → SINGULAR
    2. Строим расширенную матрицу [A | I]
    3. Для каждого столбца i: выбираем строку с max |value| в строках i..n-1,
       меняем её со строкой i, нормируем, зануляем столбец i в остальных строках
    4. Правая половина (столбцы n..2n-1) - обратная матрица

    Returns:
        success(Matrix n × n) или failure NOT_SQUARE / SINGULAR / SIZE_LIMIT_EXCEEDED

    Examples:
        >>> inverse([[2, 0], [0, 2]]).value.to_list()
        [[0.5, 0.0], [0.0, 0.5]]
    """
    m_a = _coerce(a, "A")
    if isinstance(m_a, OperationResult):
        return m_a

    if not m_a.is_square:
        return _fail(ErrorKind.NOT_SQUARE, f"inverse: shape {m_a.shape}")

    n = m_a.n_rows

    too_large = _check_cofactor_size(n, config)
    if too_large is not None:
        return too_large

    det = _cofactor_determinant(m_a.rows)
    if is_zero(det, config.singular_eps):
        return _fail(ErrorKind.SINGULAR, f"inverse: det={det!r}")

    # Расширенная матрица [A | I]
    augmented = [
        list(row) + [1.0 if i == j else 0.0 for j in range(n)]
        for i, row in enumerate(m_a.rows)
    ]

    for i in range(n):
        pivot_row = i
        for j in range(i + 1, n):
            if abs(augmented[j][i]) > abs(augmented[pivot_row][i]):
                pivot_row = j

        augmented[i], augmented[pivot_row] = augmented[pivot_row], augmented[i]

        pivot = augmented[i][i]
        # Вырожденную матрицу с ненулевым из-за округления det ловит нулевой пивот
        if pivot == 0.0:
            return _fail(ErrorKind.SINGULAR, f"inverse: zero pivot in column {i}")

        augmented[i] = [v / pivot for v in augmented[i]]

        for j in range(n):
            factor = augmented[j][i]
            if j != i and factor != 0.0:
                augmented[j] = [
                    v - factor * p for v, p in zip(augmented[j], augmented[i])
                ]

    return OperationResult.success(
        Matrix(rows=tuple(tuple(row[n:]) for row in augmented))
    )
