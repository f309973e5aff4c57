"""
Core math modules для calc-kernel

Матричная арифметика, решение уравнений и epsilon-примитивы.
"""

# Numerical Safeguards
from calckernel.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_SINGULAR_DEFAULT,
    EPS_ZERO_DEFAULT,
    # Comparisons
    compare_with_tolerance,
    is_close,
    is_valid_float,
    is_zero,
    # Validation
    validate_tolerance,
)

# Matrix Engine
from calckernel.core.math.matrix_engine import (
    MatrixEngineConfig,
    add,
    allclose,
    determinant,
    inverse,
    multiply,
    subtract,
    transpose,
)

# Equation Solver
from calckernel.core.math.equation_solver import (
    EquationSolverConfig,
    solve_linear,
    solve_linear_system_2x2,
    solve_quadratic,
)

__all__ = [
    # Numerical Safeguards - Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "EPS_SINGULAR_DEFAULT",
    "EPS_ZERO_DEFAULT",
    # Numerical Safeguards - Comparisons
    "compare_with_tolerance",
    "is_close",
    "is_valid_float",
    "is_zero",
    # Numerical Safeguards - Validation
    "validate_tolerance",
    # Matrix Engine - Config
    "MatrixEngineConfig",
    # Matrix Engine - Functions
    "add",
    "allclose",
    "determinant",
    "inverse",
    "multiply",
    "subtract",
    "transpose",
    # Equation Solver - Config
    "EquationSolverConfig",
    # Equation Solver - Functions
    "solve_linear",
    "solve_linear_system_2x2",
    "solve_quadratic",
]
