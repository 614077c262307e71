"""Local Hamiltonian of the demoralization procedure.

The local Hamiltonian acts inside every vertex subspace: it is block
diagonal, with the block of vertex ``v`` placed at
``subspace(v) x subspace(v)``. Blocks may be given

- implicitly, using :func:`default_local_hamiltonian` per dimension,
- keyed by dimension, one block per distinct vertex dimension,
- keyed by Vertex, one block per vertex.

The first two forms are expanded into the by-vertex form before assembly.
Blocks are placed as given; Hermiticity is the caller's responsibility.
"""

from typing import Any, Dict, Optional

import scipy.sparse as sp

from ...utils.exceptions import MissingKeyError, TypeMismatchError
from ...utils.validation import validate_block_shape
from ...utils.logging import setup_logger
from ..core.elementary import default_local_hamiltonian
from ..data_structures import Vertex, VertexSet
from .base import (
    BY_DEGREE,
    BlockAccumulator,
    BlockOperatorBuilder,
    as_coo_blocks,
    classify_block_keys,
    validate_block_dict,
)

logger = setup_logger(__name__)


class LocalHamiltonianBuilder(BlockOperatorBuilder):
    """Builds block-diagonal local Hamiltonians over a vertex set.

    Example:
        >>> vset = VertexSet([[1, 2], [3, 4]])
        >>> H = LocalHamiltonianBuilder().build(vset, {2: np.eye(2)})
        >>> H.toarray().real
        array([[1., 0., 0., 0.],
               [0., 1., 0., 0.],
               [0., 0., 1., 0.],
               [0., 0., 0., 1.]])
    """

    def build(self, vertex_set: VertexSet, hamiltonians: Optional[Dict[Any, Any]] = None) -> sp.csr_matrix:
        """Build the local Hamiltonian.

        Args:
            vertex_set: Vertex set, usually from :func:`make_vertex_set`
            hamiltonians: ``None`` for the default blocks, a dict keyed by
                dimension, or a dict keyed by Vertex

        Returns:
            Complex CSR matrix of shape ``(N, N)``, ``N = vertex_set.vertexsetsize``

        Raises:
            TypeMismatchError: If a block is not a numeric matrix
            ShapeMismatchError: If a block is not square or does not match
                its vertex dimension
            MissingKeyError: If a required dimension or vertex is absent
        """
        if not isinstance(vertex_set, VertexSet):
            raise TypeMismatchError(
                f"vertex_set must be a VertexSet, got {type(vertex_set).__name__}",
                parameter="vertex_set"
            )

        if hamiltonians is None:
            hamiltonians = {d: default_local_hamiltonian(d)
                            for d in sorted(set(vertex_set.degrees())) if d > 0}

        form = classify_block_keys(hamiltonians, "hamiltonians")
        shapes = validate_block_dict(hamiltonians, "hamiltonians", square=True)

        if form == BY_DEGREE:
            hamiltonians = self._expand_by_degree(vertex_set, hamiltonians, shapes)

        return self._build_by_vertex(vertex_set, hamiltonians)

    def _expand_by_degree(self,
                          vertex_set: VertexSet,
                          hamiltonians: Dict[int, Any],
                          shapes: Dict[int, tuple]) -> Dict[Vertex, Any]:
        """Translate a dimension-keyed dictionary into a vertex-keyed one."""
        needed = sorted(set(d for d in vertex_set.degrees() if d > 0))
        for degree in needed:
            if degree not in hamiltonians:
                raise MissingKeyError(
                    f"Missing degree {degree} in hamiltonians: degrees {needed} needed",
                    key=degree
                )
            validate_block_shape(hamiltonians[degree], degree, (degree, degree),
                                 "hamiltonians", shapes[degree])

        return {v: hamiltonians[len(v)] for v in vertex_set if len(v) > 0}

    def _build_by_vertex(self, vertex_set: VertexSet, hamiltonians: Dict[Vertex, Any]) -> sp.csr_matrix:
        """Assemble from a vertex-keyed dictionary of validated square blocks."""
        members = [v for v in vertex_set if len(v) > 0]
        for v in members:
            if v not in hamiltonians:
                raise MissingKeyError(f"Missing hamiltonian for vertex {v!r}", key=v)
            validate_block_shape(hamiltonians[v], v, (len(v), len(v)), "hamiltonians")

        blocks = as_coo_blocks(hamiltonians, set(members))

        size = vertex_set.vertexsetsize
        accumulator = BlockAccumulator(size)
        for position, v in enumerate(vertex_set):
            if len(v) == 0:
                continue
            subspace = vertex_set.subspace(position)
            accumulator.place(blocks[v], subspace, subspace)

        result = accumulator.to_csr()
        logger.debug(f"Assembled local Hamiltonian {result.shape} from "
                     f"{len(members)} blocks, {result.nnz} stored entries")

        self._check_hermitian(result, "Local Hamiltonian")
        return result


def local_hamiltonian(vertex_set: VertexSet, hamiltonians: Optional[Dict[Any, Any]] = None) -> sp.csr_matrix:
    """Local Hamiltonian acting inside every vertex subspace.

    See :meth:`LocalHamiltonianBuilder.build`.
    """
    return LocalHamiltonianBuilder().build(vertex_set, hamiltonians)
