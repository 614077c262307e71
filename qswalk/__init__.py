"""QSWalk: demoralized generators of quantum stochastic walks.

This package builds the operators needed to simulate open quantum stochastic
walks on arbitrary directed graphs with the nonmoralizing correction scheme:

- Vertex subspace partition induced by in-degrees
- Local and global Hamiltonians as sparse complex matrices
- Nonmoralizing Lindbladian with Fourier (or custom) elementary matrices

The operators are scipy sparse matrices, ready to be handed to a Lindblad
master equation integrator.
"""

__version__ = "0.1.0"
__author__ = "QSWalk Team"

from .demoralization import (
    Vertex,
    VertexSet,
    vertexsetsize,
    reversed_incidence_list,
    incidence_list,
    make_vertex_set,
    default_local_hamiltonian,
    fourier_matrix,
    local_hamiltonian,
    global_hamiltonian,
    nonmoralizing_lindbladian,
)
from .utils.logging import setup_logger
from .utils.exceptions import (
    QSWalkError,
    ValidationError,
    InvalidArgumentError,
    InvalidVertexError,
    InvalidVertexSetError,
    DimensionMismatchError,
    MissingKeyError,
    ShapeMismatchError,
    TypeMismatchError,
)

__all__ = [
    # Version info
    "__version__",
    "__author__",
    # Vertex subspaces
    "Vertex",
    "VertexSet",
    "vertexsetsize",
    "reversed_incidence_list",
    "incidence_list",
    "make_vertex_set",
    # Operators
    "default_local_hamiltonian",
    "fourier_matrix",
    "local_hamiltonian",
    "global_hamiltonian",
    "nonmoralizing_lindbladian",
    # Utilities
    "setup_logger",
    # Exceptions
    "QSWalkError",
    "ValidationError",
    "InvalidArgumentError",
    "InvalidVertexError",
    "InvalidVertexSetError",
    "DimensionMismatchError",
    "MissingKeyError",
    "ShapeMismatchError",
    "TypeMismatchError",
]
