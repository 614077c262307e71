"""Nonmoralizing Lindbladian of the demoralization procedure.

Implements the correction scheme of

    K. Domino, A. Glos, M. Ostaszewski, Superdiffusive quantum stochastic
    walk definable on arbitrary directed graph, Quantum Information &
    Computation, Vol. 17 No. 11&12, pp. 0973-0986, arXiv:1701.04624.

Every vertex ``i`` is split into a subspace of dimension equal to its
in-degree, and carries an elementary matrix ``E_i`` with orthogonal
columns. For the ``index``-th incoming neighbour ``j`` of ``i`` the column
``A[i, j] * E_i[:, index]`` is written at ``subspace(i) x {k}`` for every
``k`` in ``subspace(j)``.

Elementary matrices may be keyed by in-degree or by Vertex; by default the
Fourier matrix of each in-degree is used. Orthogonality of the columns is
not verified.
"""

from typing import Any, Dict, Optional, Tuple

import scipy.sparse as sp

from ...utils.exceptions import MissingKeyError
from ...utils.validation import validate_block_shape
from ...utils.logging import setup_logger
from ..core.elementary import fourier_matrix
from ..data_structures import Vertex, VertexSet
from ..incidence import demoralize
from .base import (
    BY_DEGREE,
    BlockAccumulator,
    BlockOperatorBuilder,
    as_coo_blocks,
    classify_block_keys,
    validate_block_dict,
)

logger = setup_logger(__name__)


class NonmoralizingLindbladianBuilder(BlockOperatorBuilder):
    """Builds the demoralized jump operator of a directed graph.

    The Lindbladian is not Hermitian, so ``validate_properties`` has no
    effect on this builder.
    """

    def build(self,
              A: Any,
              lindbladians: Optional[Dict[Any, Any]] = None,
              epsilon: Optional[float] = None) -> Tuple[sp.csr_matrix, VertexSet]:
        """Build the Lindbladian and the vertex set it is defined on.

        Args:
            A: Square adjacency matrix; ``A[i, j]`` weighs the edge ``j -> i``
            lindbladians: ``None`` for Fourier matrices, a dict keyed by
                in-degree, or a dict keyed by Vertex
            epsilon: Significance threshold, machine epsilon of ``A`` by default

        Returns:
            Tuple of (complex CSR matrix of shape ``(N, N)``, VertexSet)

        Raises:
            DimensionMismatchError: If ``A`` is not square
            InvalidArgumentError: If ``epsilon`` is negative
            TypeMismatchError: If an elementary matrix is not numeric
            MissingKeyError: If an in-degree or vertex is absent
            ShapeMismatchError: If an elementary matrix does not match the
                in-degree of its vertex
        """
        A, revincidence_list, vertex_set = demoralize(A, epsilon=epsilon)

        if lindbladians is None:
            lindbladians = {d: fourier_matrix(d)
                            for d in sorted(set(vertex_set.degrees())) if d > 0}

        form = classify_block_keys(lindbladians, "lindbladians")
        shapes = validate_block_dict(lindbladians, "lindbladians", square=True)

        if form == BY_DEGREE:
            lindbladians = self._expand_by_degree(vertex_set, lindbladians, shapes)

        result = self._build_by_vertex(A, revincidence_list, vertex_set, lindbladians)
        return result, vertex_set

    def _expand_by_degree(self,
                          vertex_set: VertexSet,
                          lindbladians: Dict[int, Any],
                          shapes: Dict[int, tuple]) -> Dict[Vertex, Any]:
        """Translate an in-degree keyed dictionary into a vertex-keyed one."""
        needed = sorted(set(d for d in vertex_set.degrees() if d > 0))
        for degree in needed:
            if degree not in lindbladians:
                raise MissingKeyError(
                    f"Missing degree {degree} in lindbladians: degrees {needed} needed",
                    key=degree
                )
            validate_block_shape(lindbladians[degree], degree, (degree, degree),
                                 "lindbladians", shapes[degree])

        return {v: lindbladians[len(v)] for v in vertex_set if len(v) > 0}

    def _build_by_vertex(self, A, revincidence_list, vertex_set: VertexSet,
                         lindbladians: Dict[Vertex, Any]) -> sp.csr_matrix:
        """Assemble from a vertex-keyed dictionary of validated square matrices."""
        members = [v for v in vertex_set if len(v) > 0]
        for v in members:
            if v not in lindbladians:
                raise MissingKeyError(f"Vertex {v!r} is missing in lindbladians", key=v)
            validate_block_shape(lindbladians[v], v, (len(v), len(v)), "lindbladians")

        elementary = {v: block.toarray()
                      for v, block in as_coo_blocks(lindbladians, set(members)).items()}

        accumulator = BlockAccumulator(vertex_set.vertexsetsize)
        for i, neighbours in enumerate(revincidence_list):
            rows = vertex_set.subspace(i)
            for index, j in enumerate(neighbours):
                column = complex(A[i, j]) * elementary[vertex_set[i]][:, index]
                for k in vertex_set.subspace(j):
                    accumulator.place_column(column, rows, k)

        result = accumulator.to_csr()
        logger.debug(f"Assembled nonmoralizing Lindbladian {result.shape}, "
                     f"{sum(len(n) for n in revincidence_list)} significant edges, "
                     f"{result.nnz} stored entries")
        return result


def nonmoralizing_lindbladian(A: Any,
                              lindbladians: Optional[Dict[Any, Any]] = None,
                              epsilon: Optional[float] = None) -> Tuple[sp.csr_matrix, VertexSet]:
    """Nonmoralizing Lindbladian and the vertex set describing its subspaces.

    Example:
        >>> A = np.array([[0, 1, 0], [1, 0, 1], [0, 1, 0]])
        >>> L, vset = nonmoralizing_lindbladian(A)
        >>> vset
        VertexSet([Vertex([1]), Vertex([2, 3]), Vertex([4])])

    See :meth:`NonmoralizingLindbladianBuilder.build`.
    """
    return NonmoralizingLindbladianBuilder().build(A, lindbladians, epsilon=epsilon)
