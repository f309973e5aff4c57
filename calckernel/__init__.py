"""
calc-kernel - numeric core of the calculator application.

Core modules:
- calckernel.core.math: Matrix Engine, Equation Solver, numerical safeguards
- calckernel.core.domain: Matrix, equation models, OperationResult
- calckernel.core.contracts: JSON Schema request contracts
- calckernel.operations: request dispatch for the UI layer
"""

from calckernel.core.domain import (
    ErrorKind,
    Matrix,
    OperationResult,
    QuadraticRoots,
    SystemSolution,
)
from calckernel.core.math import (
    add,
    determinant,
    inverse,
    multiply,
    solve_linear,
    solve_linear_system_2x2,
    solve_quadratic,
    subtract,
    transpose,
)

__version__ = "1.0.0"
__all__ = [
    "ErrorKind",
    "Matrix",
    "OperationResult",
    "QuadraticRoots",
    "SystemSolution",
    "add",
    "determinant",
    "inverse",
    "multiply",
    "solve_linear",
    "solve_linear_system_2x2",
    "solve_quadratic",
    "subtract",
    "transpose",
]
