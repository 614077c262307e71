"""Core mathematical pieces of the demoralization scheme.

- Elementary and default blocks (Fourier matrices, hopping Hamiltonian)
- Hermitian property validation of assembled operators
"""

from .elementary import default_local_hamiltonian, fourier_matrix, all_ones_block
from .hermitian_validation import HermitianValidator, HermitianValidationResult

__all__ = [
    "default_local_hamiltonian",
    "fourier_matrix",
    "all_ones_block",
    "HermitianValidator",
    "HermitianValidationResult",
]
