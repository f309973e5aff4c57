"""
Matrix - Плотная вещественная матрица (value object)

Неизменяемый тип значения для Matrix Engine:
- строки снаружи, столбцы внутри
- прямоугольность (все строки одной длины) проверяется при создании
- rows >= 1, cols >= 1
- операции ядра возвращают новые матрицы и никогда не мутируют операнды
"""

import numbers
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum


# =============================================================================
# ENUMS
# =============================================================================


class MatrixOperation(str, Enum):
    """Операция над матрицами (селектор UI)"""

    TRANSPOSE = "transpose"
    DETERMINANT = "determinant"
    INVERSE = "inverse"
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MatrixShapeError(ValueError):
    """
    Нарушение формы матрицы: пустая матрица или строки разной длины.

    Поднимается только при прямом создании Matrix. Функции Matrix Engine
    перехватывают её и возвращают failure DIMENSION_MISMATCH.
    """
    pass


# =============================================================================
# MATRIX
# =============================================================================


@dataclass(frozen=True)
class Matrix:
    """
    Прямоугольная матрица вещественных чисел.

    Attributes:
        rows: Кортеж строк, каждая строка - кортеж float одинаковой длины

    Examples:
        >>> m = Matrix.from_rows([[1, 2], [3, 4]])
        >>> m.shape
        (2, 2)
        >>> m.rows[1][0]
        3.0
    """

    rows: tuple[tuple[float, ...], ...]

    def __post_init__(self) -> None:
        if len(self.rows) == 0:
            raise MatrixShapeError("Matrix must have at least one row")

        width = len(self.rows[0])
        if width == 0:
            raise MatrixShapeError("Matrix must have at least one column")

        for i, row in enumerate(self.rows):
            if len(row) != width:
                raise MatrixShapeError(
                    f"Matrix is not rectangular: row 0 has {width} entries, "
                    f"row {i} has {len(row)}"
                )

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "Matrix":
        """
        Создание матрицы из вложенных последовательностей чисел.

        Args:
            rows: Последовательность строк (list[list[float]], tuple и т.п.)

        Returns:
            Новая Matrix с элементами, приведёнными к float

        Raises:
            MatrixShapeError: Если матрица пустая или строки разной длины
            TypeError: Если элемент не вещественное число (строки и bool отвергаются)
            OverflowError: Если целое не помещается в float
        """
        if isinstance(rows, Matrix):
            return rows
        return cls(rows=tuple(tuple(_entry(v) for v in row) for row in rows))

    @classmethod
    def zeros(cls, n_rows: int, n_cols: int) -> "Matrix":
        """Нулевая матрица n_rows × n_cols (пустая сетка ввода)."""
        return cls(rows=tuple((0.0,) * n_cols for _ in range(n_rows)))

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        """Единичная матрица n × n."""
        return cls(
            rows=tuple(
                tuple(1.0 if i == j else 0.0 for j in range(n)) for i in range(n)
            )
        )

    # -------------------------------------------------------------------------
    # Shape
    # -------------------------------------------------------------------------

    @property
    def n_rows(self) -> int:
        return len(self.rows)

    @property
    def n_cols(self) -> int:
        return len(self.rows[0])

    @property
    def shape(self) -> tuple[int, int]:
        return (self.n_rows, self.n_cols)

    @property
    def is_square(self) -> bool:
        return self.n_rows == self.n_cols

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def to_list(self) -> list[list[float]]:
        """Копия элементов в виде list[list[float]] (для JSON/UI)."""
        return [list(row) for row in self.rows]


def _entry(value: float) -> float:
    # Только вещественные числа: str и bool не приводятся
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(
            f"Matrix entry must be a real number, got {type(value).__name__}"
        )
    return float(value)
