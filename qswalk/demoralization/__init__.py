"""Demoralization of quantum stochastic walks on directed graphs.

A quantum stochastic walk defined naively on a directed graph introduces
spurious correlations between the sources of a common target
("moralization"). The demoralization scheme splits every vertex into a
subspace whose dimension equals its in-degree and builds the walk generators
on that enlarged space:

- Vertex / VertexSet: the subspace partition
- make_vertex_set: partition induced by an adjacency matrix
- local_hamiltonian: dynamics inside each vertex subspace
- global_hamiltonian: Hermitian coupling of adjacent subspaces
- nonmoralizing_lindbladian: jump operator of the correction scheme

Usage:
    from qswalk.demoralization import (
        nonmoralizing_lindbladian, global_hamiltonian, local_hamiltonian
    )

    L, vset = nonmoralizing_lindbladian(A)
    H_global = global_hamiltonian(A)
    H_local = local_hamiltonian(vset)
"""

from .data_structures import Vertex, VertexSet, vertexsetsize
from .incidence import (
    reversed_incidence_list,
    incidence_list,
    revinc_to_vertexset,
    make_vertex_set,
    demoralize,
)
from .core import (
    default_local_hamiltonian,
    fourier_matrix,
    HermitianValidator,
    HermitianValidationResult,
)
from .assembly import (
    LocalHamiltonianBuilder,
    GlobalHamiltonianBuilder,
    NonmoralizingLindbladianBuilder,
    local_hamiltonian,
    global_hamiltonian,
    nonmoralizing_lindbladian,
)

__all__ = [
    "Vertex",
    "VertexSet",
    "vertexsetsize",
    "reversed_incidence_list",
    "incidence_list",
    "revinc_to_vertexset",
    "make_vertex_set",
    "demoralize",
    "default_local_hamiltonian",
    "fourier_matrix",
    "HermitianValidator",
    "HermitianValidationResult",
    "LocalHamiltonianBuilder",
    "GlobalHamiltonianBuilder",
    "NonmoralizingLindbladianBuilder",
    "local_hamiltonian",
    "global_hamiltonian",
    "nonmoralizing_lindbladian",
]
