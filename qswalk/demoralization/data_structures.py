"""Core data structures for demoralized vertex subspaces.

A demoralized walk replaces every graph vertex by a linear subspace of the
global Hilbert space whose dimension equals the in-degree of the vertex.
The subspaces are described by canonical, 1-based basis labels:

- Vertex: ordered, duplicate-free tuple of positive labels owned by a vertex
- VertexSet: ordered vertices whose labels, concatenated, are exactly 1..N

Matrix positions are 0-based, so the subspace of a vertex with labels
``(k, ..., k + d - 1)`` occupies rows and columns ``range(k - 1, k - 1 + d)``.
Both types are immutable values with structural equality and hashing, so
they can be used as dictionary keys for per-vertex operator blocks.
"""

from dataclasses import dataclass
from numbers import Integral
from typing import Dict, Iterable, Iterator, List, Sequence, Tuple, Union

import numpy as np

from ..utils.exceptions import InvalidVertexError, InvalidVertexSetError, MissingKeyError


@dataclass(frozen=True)
class Vertex:
    """Ordered set of canonical subspace labels owned by one vertex.

    Equality and hashing depend only on the label sequence, and
    ``hash(Vertex(seq)) == hash(tuple(seq))``. The empty vertex is allowed
    and describes a vertex without incoming edges.

    Attributes:
        indices: Positive, pairwise distinct subspace labels

    Raises:
        InvalidVertexError: If a label is not a positive integer or repeats
    """

    indices: Tuple[int, ...] = ()

    def __post_init__(self):
        labels = []
        for label in self.indices:
            if isinstance(label, (bool, np.bool_)) or not isinstance(label, Integral):
                raise InvalidVertexError(
                    f"Vertex labels must be integers, got {label!r}",
                    parameter="indices",
                    actual=type(label).__name__
                )
            labels.append(int(label))

        if any(label <= 0 for label in labels):
            raise InvalidVertexError(
                f"Vertex labels must be positive, got {labels}",
                parameter="indices",
                actual=labels
            )
        if len(set(labels)) != len(labels):
            raise InvalidVertexError(
                f"Vertex labels must be unique, got {labels}",
                parameter="indices",
                actual=labels
            )

        object.__setattr__(self, "indices", tuple(labels))

    def __hash__(self) -> int:
        return hash(self.indices)

    def __len__(self) -> int:
        return len(self.indices)

    def __getitem__(self, position: int) -> int:
        return self.indices[position]

    def __iter__(self) -> Iterator[int]:
        return iter(self.indices)

    def __repr__(self) -> str:
        return f"Vertex({list(self.indices)})"

    def to_list(self) -> List[int]:
        """Return the raw label sequence."""
        return list(self.indices)


VertexLike = Union[Vertex, Sequence[int]]


class VertexSet:
    """Ordered vertices partitioning the labels ``1..N``.

    The concatenation of the member vertices' labels, in order, must be
    exactly ``1, 2, ..., N``. Vertex order therefore fixes subspace order and
    every subspace is contiguous. Subspace ranges are computed once at
    construction.

    Slicing or selecting several positions returns a tuple of Vertex, not a
    VertexSet: a selection does not partition ``1..N`` on its own, so it
    cannot be handed to the operator builders.

    Example:
        >>> vset = VertexSet([[1], [2, 3], [4]])
        >>> vset.vertexsetsize
        4
        >>> vset.subspace(1)
        range(1, 3)

    Raises:
        InvalidVertexError: If a member is not a valid vertex
        InvalidVertexSetError: If the labels are not exactly ``1..N``
    """

    def __init__(self, vertices: Iterable[VertexLike]):
        vertices = tuple(v if isinstance(v, Vertex) else Vertex(tuple(v)) for v in vertices)

        labels = [label for v in vertices for label in v]
        for expected, label in enumerate(labels, start=1):
            if label != expected:
                raise InvalidVertexSetError(
                    f"Vertices must partition 1..{len(labels)} in order; "
                    f"label {expected} expected at position {expected - 1}, got {label}",
                    parameter="vertices",
                    expected=expected,
                    actual=label
                )

        self._vertices = vertices

        subspaces = []
        offset = 0
        for v in vertices:
            subspaces.append(range(offset, offset + len(v)))
            offset += len(v)
        self._subspaces = tuple(subspaces)

        self._positions: Dict[Vertex, int] = {}
        for position, v in enumerate(vertices):
            self._positions.setdefault(v, position)

    @property
    def vertices(self) -> Tuple[Vertex, ...]:
        """Member vertices in subspace order."""
        return self._vertices

    @property
    def vertexsetsize(self) -> int:
        """Total dimension N, the sum of the vertex lengths."""
        return sum(len(v) for v in self._vertices)

    def degrees(self) -> Tuple[int, ...]:
        """Dimension of every vertex, in order."""
        return tuple(len(v) for v in self._vertices)

    def index(self, vertex: Vertex) -> int:
        """Position of ``vertex`` in the set.

        Raises:
            MissingKeyError: If the vertex is not a member
        """
        try:
            return self._positions[vertex]
        except KeyError:
            raise MissingKeyError(f"{vertex!r} is not a member of the vertex set",
                                  key=vertex) from None

    def subspace(self, vertex: Union[int, Vertex]) -> range:
        """0-based matrix positions owned by a vertex.

        Args:
            vertex: Position in the set or a member Vertex

        Returns:
            Contiguous range of row/column positions
        """
        if isinstance(vertex, Vertex):
            vertex = self.index(vertex)
        return self._subspaces[vertex]

    def subspaces(self) -> Tuple[range, ...]:
        """Subspace ranges of all vertices, in order."""
        return self._subspaces

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._positions

    def __getitem__(self, key) -> Union[Vertex, Tuple[Vertex, ...]]:
        """Vertex at a position, or a tuple of vertices for a slice or position list."""
        if isinstance(key, (list, tuple, np.ndarray)):
            return tuple(self._vertices[int(k)] for k in key)
        return self._vertices[key]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VertexSet):
            return NotImplemented
        return self._vertices == other._vertices

    def __hash__(self) -> int:
        return hash(self._vertices)

    def __repr__(self) -> str:
        return f"VertexSet({list(self._vertices)!r})"


def vertexsetsize(vertex_set: VertexSet) -> int:
    """Total dimension of the space partitioned by ``vertex_set``."""
    return vertex_set.vertexsetsize
