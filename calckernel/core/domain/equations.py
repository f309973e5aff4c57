"""
Equations - Модели уравнений для Equation Solver

Immutable Pydantic модели коэффициентов:
- LinearEquation: a·x + b = 0
- QuadraticEquation: a·x² + b·x + c = 0
- LinearSystem2x2: a1·x + b1·y = c1, a2·x + b2·y = c2

Коэффициенты - уже распарсенные float. NaN/Inf не отсекаются на этом уровне:
фильтрация ввода - ответственность UI-слоя, решатель их не обрабатывает особо.
"""

from enum import Enum

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class EquationType(str, Enum):
    """Тип уравнения (селектор UI)"""

    LINEAR = "linear"
    QUADRATIC = "quadratic"
    SYSTEM = "system"


# =============================================================================
# MODELS
# =============================================================================


class LinearEquation(BaseModel):
    """Линейное уравнение a·x + b = 0."""

    a: float = Field(..., description="Коэффициент при x")
    b: float = Field(..., description="Свободный член")

    model_config = {"frozen": True}


class QuadraticEquation(BaseModel):
    """Квадратное уравнение a·x² + b·x + c = 0 (при a == 0 вырождается в линейное)."""

    a: float = Field(..., description="Коэффициент при x²")
    b: float = Field(..., description="Коэффициент при x")
    c: float = Field(..., description="Свободный член")

    model_config = {"frozen": True}


class LinearSystem2x2(BaseModel):
    """
    Система двух линейных уравнений с двумя неизвестными.

        a1·x + b1·y = c1
        a2·x + b2·y = c2
    """

    a1: float = Field(..., description="Коэффициент при x в первом уравнении")
    b1: float = Field(..., description="Коэффициент при y в первом уравнении")
    c1: float = Field(..., description="Правая часть первого уравнения")
    a2: float = Field(..., description="Коэффициент при x во втором уравнении")
    b2: float = Field(..., description="Коэффициент при y во втором уравнении")
    c2: float = Field(..., description="Правая часть второго уравнения")

    model_config = {"frozen": True}
