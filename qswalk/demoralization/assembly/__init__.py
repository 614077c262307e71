"""Assembly of the demoralized operators.

Key Components:
- LocalHamiltonianBuilder: block-diagonal Hamiltonian inside vertex subspaces
- GlobalHamiltonianBuilder: Hermitian coupling between adjacent subspaces
- NonmoralizingLindbladianBuilder: jump operator of the correction scheme

Each builder also has a functional shortcut (``local_hamiltonian``,
``global_hamiltonian``, ``nonmoralizing_lindbladian``).

Usage:
    from qswalk.demoralization.assembly import nonmoralizing_lindbladian

    L, vset = nonmoralizing_lindbladian(adjacency)
"""

from .base import BlockAccumulator, BlockOperatorBuilder
from .local_hamiltonian import LocalHamiltonianBuilder, local_hamiltonian
from .global_hamiltonian import GlobalHamiltonianBuilder, global_hamiltonian, coupled_pairs
from .lindbladian import NonmoralizingLindbladianBuilder, nonmoralizing_lindbladian

__all__ = [
    "BlockAccumulator",
    "BlockOperatorBuilder",
    "LocalHamiltonianBuilder",
    "GlobalHamiltonianBuilder",
    "NonmoralizingLindbladianBuilder",
    "local_hamiltonian",
    "global_hamiltonian",
    "nonmoralizing_lindbladian",
    "coupled_pairs",
]
