"""Incidence extraction from weighted adjacency matrices.

An entry ``A[i, j]`` is significant when ``abs(A[i, j]) >= epsilon``. The
reversed incidence list of ``A`` maps every row ``i`` to the ascending
columns ``j`` with a significant entry, i.e. to the sources of the edges
entering ``i``. Its lengths are the in-degrees that size the demoralized
vertex subspaces.

The diagonal is not treated specially: a significant self-loop is an
incoming edge like any other.
"""

from typing import Any, List, Optional, Tuple

import numpy as np
import scipy.sparse as sp

from ..utils.config import default_epsilon
from ..utils.validation import as_adjacency_matrix, validate_epsilon
from ..utils.logging import setup_logger
from .data_structures import Vertex, VertexSet

logger = setup_logger(__name__)


def _resolve_epsilon(A, epsilon: Optional[float]) -> float:
    if epsilon is None:
        return default_epsilon(A)
    return validate_epsilon(epsilon)


def _significant_columns(A, epsilon: float) -> List[List[int]]:
    """Ascending significant columns of every row of a validated matrix."""
    n = A.shape[0]

    # Implicit zeros only pass the test when epsilon is zero
    if sp.issparse(A) and epsilon > 0:
        csr = sp.csr_matrix(A, copy=True)
        csr.sort_indices()
        rows = []
        for i in range(n):
            start, stop = csr.indptr[i], csr.indptr[i + 1]
            columns = csr.indices[start:stop]
            mask = np.abs(csr.data[start:stop]) >= epsilon
            rows.append([int(j) for j in columns[mask]])
        return rows

    dense = A.toarray() if sp.issparse(A) else np.asarray(A)
    mask = np.abs(dense) >= epsilon
    return [[int(j) for j in np.flatnonzero(mask[i])] for i in range(n)]


def reversed_incidence_list(A: Any, epsilon: Optional[float] = None) -> List[List[int]]:
    """Significant incoming neighbours of every vertex.

    Args:
        A: Square adjacency matrix; ``A[i, j]`` weighs the edge ``j -> i``
        epsilon: Significance threshold, machine epsilon of ``A`` by default

    Returns:
        List whose ``i``-th element holds the ascending 0-based columns ``j``
        with ``abs(A[i, j]) >= epsilon``

    Raises:
        DimensionMismatchError: If ``A`` is not square
        InvalidArgumentError: If ``epsilon`` is negative
    """
    A = as_adjacency_matrix(A)
    epsilon = _resolve_epsilon(A, epsilon)
    return _significant_columns(A, epsilon)


def incidence_list(A: Any, epsilon: Optional[float] = None) -> List[List[int]]:
    """Significant outgoing neighbours of every vertex.

    The forward counterpart of :func:`reversed_incidence_list`: element ``j``
    holds the ascending rows ``i`` with ``abs(A[i, j]) >= epsilon``.
    """
    A = as_adjacency_matrix(A)
    epsilon = _resolve_epsilon(A, epsilon)
    return _significant_columns(A.T, epsilon)


def revinc_to_vertexset(revincidence_list: List[List[int]]) -> VertexSet:
    """Vertex set induced by a reversed incidence list.

    Vertex ``i`` receives the next ``len(revincidence_list[i])`` labels, in
    row order. A vertex without incoming edges becomes the empty vertex and
    does not advance the label counter.
    """
    vertices = []
    offset = 0
    for neighbours in revincidence_list:
        degree = len(neighbours)
        vertices.append(Vertex(tuple(range(offset + 1, offset + degree + 1))))
        offset += degree
    return VertexSet(vertices)


def demoralize(A: Any, epsilon: Optional[float] = None) -> Tuple[Any, List[List[int]], VertexSet]:
    """Validate ``A`` and derive its reversed incidence list and vertex set.

    Returns:
        Tuple of (validated adjacency matrix, reversed incidence list, vertex set)
    """
    A = as_adjacency_matrix(A)
    epsilon = _resolve_epsilon(A, epsilon)
    revincidence_list = _significant_columns(A, epsilon)
    return A, revincidence_list, revinc_to_vertexset(revincidence_list)


def make_vertex_set(A: Any, epsilon: Optional[float] = None) -> VertexSet:
    """Demoralized vertex set of an adjacency matrix.

    Example:
        >>> A = np.array([[0, 1, 0], [1, 0, 1], [0, 1, 0]])
        >>> make_vertex_set(A)
        VertexSet([Vertex([1]), Vertex([2, 3]), Vertex([4])])

    Args:
        A: Square adjacency matrix; ``A[i, j]`` weighs the edge ``j -> i``
        epsilon: Significance threshold, machine epsilon of ``A`` by default

    Returns:
        VertexSet whose vertex ``i`` has dimension equal to the in-degree of ``i``
    """
    revincidence_list = reversed_incidence_list(A, epsilon=epsilon)
    vertex_set = revinc_to_vertexset(revincidence_list)
    logger.debug(f"Built vertex set with {len(vertex_set)} vertices, "
                 f"total dimension {vertex_set.vertexsetsize}")
    return vertex_set
