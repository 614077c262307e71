"""Hermitian validation utilities for demoralized Hamiltonians.

The global Hamiltonian is Hermitian by construction (it is symmetrized as
``H + H^H``), while the local Hamiltonian is only as Hermitian as the blocks
supplied by the caller. This module measures how far an operator is from
being Hermitian so builders and tests can report it.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional
import time

import numpy as np
import scipy.sparse as sp

from ...utils.config import HERMITIAN_TOLERANCE
from ...utils.exceptions import DimensionMismatchError

# Simple logging setup
import logging
logger = logging.getLogger(__name__)


@dataclass
class HermitianValidationResult:
    """Results of Hermitian property validation."""
    is_hermitian: bool
    hermitian_error: float
    shape: tuple
    stored_entries: int
    validation_time: float
    errors: List[str] = field(default_factory=list)

    def __post_init__(self):
        """Post-initialization validation."""
        if self.hermitian_error < 0:
            raise ValueError("Hermitian error must be non-negative")

    def summary(self) -> str:
        """Get validation summary."""
        status = "PASS" if self.is_hermitian else "FAIL"
        return (f"Hermitian Validation Status: {status}\n"
                f"  Shape: {self.shape}\n"
                f"  Stored entries: {self.stored_entries}\n"
                f"  Hermitian error: {self.hermitian_error:.3e}\n"
                f"  Validation time: {self.validation_time:.4f}s")


class HermitianValidator:
    """Validates the Hermitian property ``M^H = M`` of sparse or dense operators.

    Attributes:
        hermitian_tolerance: Largest tolerated ``max |M - M^H|``
    """

    def __init__(self, hermitian_tolerance: Optional[float] = None):
        """Initialize the Hermitian validator.

        Args:
            hermitian_tolerance: Tolerance for Hermitian property validation,
                ``Config.numerical.HERMITIAN_TOLERANCE`` by default
        """
        if hermitian_tolerance is None:
            hermitian_tolerance = HERMITIAN_TOLERANCE
        if hermitian_tolerance < 0:
            raise ValueError("hermitian_tolerance must be non-negative")
        self.hermitian_tolerance = hermitian_tolerance

        logger.debug(f"HermitianValidator initialized with tolerance={hermitian_tolerance}")

    def hermitian_error(self, matrix: Any) -> float:
        """Largest absolute entry of ``matrix - matrix^H``.

        Raises:
            DimensionMismatchError: If the matrix is not square
        """
        if matrix.shape[0] != matrix.shape[1]:
            raise DimensionMismatchError(
                f"Matrix must be square for Hermitian validation, got shape {matrix.shape}",
                parameter="matrix",
                actual=matrix.shape
            )

        if sp.issparse(matrix):
            difference = sp.csr_matrix(matrix - matrix.conj().T)
            if difference.nnz == 0:
                return 0.0
            return float(np.abs(difference.data).max())

        matrix = np.asarray(matrix)
        if matrix.size == 0:
            return 0.0
        return float(np.abs(matrix - matrix.conj().T).max())

    def is_hermitian(self, matrix: Any) -> bool:
        """Whether ``matrix`` is Hermitian within tolerance."""
        return self.hermitian_error(matrix) <= self.hermitian_tolerance

    def validate(self, matrix: Any) -> HermitianValidationResult:
        """Validate ``matrix`` and collect the result."""
        start_time = time.time()

        error = self.hermitian_error(matrix)
        is_hermitian = error <= self.hermitian_tolerance
        errors = []
        if not is_hermitian:
            errors.append(f"max |M - M^H| = {error:.3e} exceeds tolerance "
                          f"{self.hermitian_tolerance:.3e}")

        stored = matrix.nnz if sp.issparse(matrix) else int(np.count_nonzero(matrix))

        return HermitianValidationResult(
            is_hermitian=is_hermitian,
            hermitian_error=error,
            shape=tuple(matrix.shape),
            stored_entries=stored,
            validation_time=time.time() - start_time,
            errors=errors
        )
