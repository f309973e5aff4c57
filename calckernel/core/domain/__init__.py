"""
Domain models and value objects.

Contains the kernel's data types: Matrix, equation models, OperationResult.
"""

from calckernel.core.domain.equations import (
    EquationType,
    LinearEquation,
    LinearSystem2x2,
    QuadraticEquation,
)
from calckernel.core.domain.matrix import Matrix, MatrixOperation, MatrixShapeError
from calckernel.core.domain.results import (
    ErrorKind,
    OperationFailed,
    OperationResult,
    QuadraticRoots,
    SystemSolution,
)

__all__ = [
    # Matrix
    "Matrix",
    "MatrixShapeError",
    "MatrixOperation",
    # Equation models
    "EquationType",
    "LinearEquation",
    "QuadraticEquation",
    "LinearSystem2x2",
    # Results
    "ErrorKind",
    "OperationFailed",
    "OperationResult",
    "QuadraticRoots",
    "SystemSolution",
]
