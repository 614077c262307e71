"""Global Hamiltonian of the demoralization procedure.

The global Hamiltonian couples the subspaces of adjacent vertices. For every
row ``index`` of the adjacency matrix and every significant column ``j`` of
that row with ``index < j``, a coupling block scaled by ``A[index, j]`` is
written between the subspaces of ``index`` and ``j``. The upper part built
this way is symmetrized as ``H + H^H``, so the result is exactly Hermitian
whatever blocks are supplied.

Coupling blocks may be keyed

- by shape ``(dim_index, dim_j)``: the block lands at
  ``subspace(index) x subspace(j)``,
- by vertex pair ``(v_index, v_j)``: the transposed block lands at
  ``subspace(j) x subspace(index)``.

By default every coupling block is all ones.
"""

from typing import Any, Dict, List, Optional, Tuple

import scipy.sparse as sp

from ...utils.exceptions import MissingKeyError
from ...utils.validation import validate_block_shape
from ...utils.logging import setup_logger
from ..core.elementary import all_ones_block
from ..data_structures import VertexSet
from ..incidence import demoralize
from .base import (
    BY_SHAPE,
    BlockAccumulator,
    BlockOperatorBuilder,
    as_coo_blocks,
    classify_block_keys,
    validate_block_dict,
)

logger = setup_logger(__name__)


def coupled_pairs(revincidence_list: List[List[int]]) -> List[Tuple[int, int]]:
    """Ordered vertex pairs ``(index, j)`` that receive a coupling block.

    A pair is coupled when ``j`` appears in the reversed incidence list of
    row ``index`` and ``index < j``.
    """
    return [(index, j)
            for index, neighbours in enumerate(revincidence_list)
            for j in neighbours
            if index < j]


class GlobalHamiltonianBuilder(BlockOperatorBuilder):
    """Builds the Hermitian global Hamiltonian coupling vertex subspaces.

    Example:
        >>> A = np.array([[0, 1, 0], [1, 0, 1], [0, 1, 0]])
        >>> GlobalHamiltonianBuilder().build(A).toarray().real
        array([[0., 1., 1., 0.],
               [1., 0., 0., 1.],
               [1., 0., 0., 1.],
               [0., 1., 1., 0.]])
    """

    def build(self,
              A: Any,
              hamiltonians: Optional[Dict[Tuple[Any, Any], Any]] = None,
              epsilon: Optional[float] = None) -> sp.csr_matrix:
        """Build the global Hamiltonian.

        Args:
            A: Square adjacency matrix; ``A[i, j]`` weighs the edge ``j -> i``
            hamiltonians: ``None`` for all-ones blocks, a dict keyed by
                ``(int, int)`` shapes, or a dict keyed by ``(Vertex, Vertex)``
            epsilon: Significance threshold, machine epsilon of ``A`` by default

        Returns:
            Hermitian complex CSR matrix of shape ``(N, N)``

        Raises:
            DimensionMismatchError: If ``A`` is not square
            InvalidArgumentError: If ``epsilon`` is negative
            TypeMismatchError: If a block is not a numeric matrix
            MissingKeyError: If a coupling block is absent
            ShapeMismatchError: If a coupling block has the wrong shape
        """
        A, revincidence_list, vertex_set = demoralize(A, epsilon=epsilon)
        pairs = [(index, j) for index, j in coupled_pairs(revincidence_list)
                 if len(vertex_set[index]) > 0 and len(vertex_set[j]) > 0]

        if hamiltonians is None:
            hamiltonians = self._default_hamiltonians(vertex_set, pairs)

        form = classify_block_keys(hamiltonians, "hamiltonians", pairs=True)
        shapes = validate_block_dict(hamiltonians, "hamiltonians", square=False)

        # Every key and shape is checked before assembly starts
        placements = []
        for index, j in pairs:
            v_index, v_j = vertex_set[index], vertex_set[j]
            if form == BY_SHAPE:
                key = (len(v_index), len(v_j))
                if key not in hamiltonians:
                    raise MissingKeyError(f"hamiltonian of size {key} not found", key=key)
            else:
                key = (v_index, v_j)
                if key not in hamiltonians:
                    raise MissingKeyError(f"hamiltonian for {key} not found", key=key)
            validate_block_shape(hamiltonians[key], key, (len(v_index), len(v_j)),
                                 "hamiltonians", shapes[key])
            placements.append((index, j, key))

        blocks = as_coo_blocks(hamiltonians, set(key for _, _, key in placements))

        accumulator = BlockAccumulator(vertex_set.vertexsetsize)
        for index, j, key in placements:
            weight = complex(A[index, j])
            if form == BY_SHAPE:
                accumulator.place(blocks[key], vertex_set.subspace(index),
                                  vertex_set.subspace(j), weight)
            else:
                accumulator.place(blocks[key].T.tocoo(), vertex_set.subspace(j),
                                  vertex_set.subspace(index), weight)

        upper = accumulator.to_csr()
        result = sp.csr_matrix(upper + upper.conj().T)
        logger.debug(f"Assembled global Hamiltonian {result.shape} from "
                     f"{len(placements)} coupling blocks, {result.nnz} stored entries")

        self._check_hermitian(result, "Global Hamiltonian")
        return result

    def _default_hamiltonians(self, vertex_set: VertexSet,
                              pairs: List[Tuple[int, int]]) -> Dict[Tuple[int, int], Any]:
        """All-ones blocks for every coupled shape, in both orientations."""
        hamiltonians = {}
        for index, j in pairs:
            rows, cols = len(vertex_set[index]), len(vertex_set[j])
            hamiltonians[(rows, cols)] = all_ones_block(rows, cols)
            hamiltonians[(cols, rows)] = all_ones_block(cols, rows)
        return hamiltonians


def global_hamiltonian(A: Any,
                       hamiltonians: Optional[Dict[Tuple[Any, Any], Any]] = None,
                       epsilon: Optional[float] = None) -> sp.csr_matrix:
    """Hermitian global Hamiltonian coupling adjacent vertex subspaces.

    See :meth:`GlobalHamiltonianBuilder.build`.
    """
    return GlobalHamiltonianBuilder().build(A, hamiltonians, epsilon=epsilon)
