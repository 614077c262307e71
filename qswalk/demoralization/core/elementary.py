"""Default blocks for the demoralized operators.

- default_local_hamiltonian: hermitian hopping operator inside a vertex subspace
- fourier_matrix: default elementary matrix of the nonmoralizing Lindbladian
- all_ones_block: default coupling block of the global Hamiltonian
"""

import numpy as np
import scipy.sparse as sp

from ...utils.config import OPERATOR_DTYPE
from ...utils.exceptions import InvalidArgumentError


def _check_size(size: int, name: str) -> int:
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)) or size <= 0:
        raise InvalidArgumentError(
            f"Size of {name} needs to be positive, got {size!r}",
            parameter="size",
            actual=size
        )
    return int(size)


def default_local_hamiltonian(size: int) -> sp.csr_matrix:
    """Default local Hamiltonian of shape ``size x size``.

    Zero for ``size == 1``, otherwise ``+1j`` on the first superdiagonal and
    ``-1j`` on the first subdiagonal.

    Example:
        >>> default_local_hamiltonian(3).toarray()
        array([[0.+0.j, 0.+1.j, 0.+0.j],
               [0.-1.j, 0.+0.j, 0.+1.j],
               [0.+0.j, 0.-1.j, 0.+0.j]])

    Raises:
        InvalidArgumentError: If ``size`` is not a positive integer
    """
    size = _check_size(size, "default local hamiltonian")
    if size == 1:
        return sp.csr_matrix((1, 1), dtype=OPERATOR_DTYPE)

    off_diagonal = np.ones(size - 1, dtype=OPERATOR_DTYPE)
    return sp.diags([1j * off_diagonal, -1j * off_diagonal], [1, -1],
                    shape=(size, size), format="csr", dtype=OPERATOR_DTYPE)


def fourier_matrix(size: int) -> np.ndarray:
    """Unnormalized discrete Fourier matrix ``exp(2 pi i r c / size)``.

    Its columns are pairwise orthogonal, as required of elementary matrices.

    Raises:
        InvalidArgumentError: If ``size`` is not a positive integer
    """
    size = _check_size(size, "fourier matrix")
    k = np.arange(size)
    return np.exp(2j * np.pi * np.outer(k, k) / size)


def all_ones_block(rows: int, cols: int) -> np.ndarray:
    """Complex all-ones coupling block."""
    return np.ones((rows, cols), dtype=OPERATOR_DTYPE)
