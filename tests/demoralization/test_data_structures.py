"""Unit tests for demoralized vertex data structures.

This module tests:
- Vertex
- VertexSet
- vertexsetsize

Tests cover label validation, structural equality and hashing, subspace
ranges and sub-set selection.
"""

import numpy as np
import pytest

from qswalk.demoralization import Vertex, VertexSet, vertexsetsize
from qswalk.utils.exceptions import (
    InvalidArgumentError,
    InvalidVertexError,
    InvalidVertexSetError,
    MissingKeyError,
)


class TestVertex:
    """Test suite for Vertex."""

    def test_creation(self):
        """Test creation from lists and tuples."""
        v = Vertex([1, 2, 3])

        assert v.indices == (1, 2, 3)
        assert len(v) == 3
        assert v[0] == 1
        assert list(v) == [1, 2, 3]
        assert v.to_list() == [1, 2, 3]

    def test_empty_vertex(self):
        """Test the empty vertex of a source node."""
        v = Vertex()

        assert len(v) == 0
        assert v == Vertex([])
        assert v.to_list() == []

    def test_numpy_labels(self):
        """Test numpy integer labels are normalised to int."""
        v = Vertex(np.array([4, 5]))

        assert v.indices == (4, 5)
        assert all(type(label) is int for label in v)

    @pytest.mark.parametrize("labels", [[0], [-1, 2], [1, 0, 2]])
    def test_non_positive_labels(self, labels):
        """Test non-positive labels are rejected."""
        with pytest.raises(InvalidVertexError):
            Vertex(labels)

    def test_duplicate_labels(self):
        """Test duplicated labels are rejected."""
        with pytest.raises(InvalidVertexError, match="unique"):
            Vertex([1, 2, 1])

    @pytest.mark.parametrize("labels", [[1.0], [True], ["1"]])
    def test_non_integer_labels(self, labels):
        """Test non-integer labels are rejected."""
        with pytest.raises(InvalidVertexError):
            Vertex(labels)

    def test_invalid_vertex_is_value_error(self):
        """Test vertex errors are catchable as ValueError."""
        with pytest.raises(ValueError):
            Vertex([0])
        assert issubclass(InvalidVertexError, InvalidArgumentError)

    def test_equality_and_hash(self):
        """Test structural equality and tuple-compatible hashing."""
        assert Vertex([1, 2]) == Vertex((1, 2))
        assert Vertex([1, 2]) != Vertex([2, 1])
        assert hash(Vertex([1, 2])) == hash((1, 2))
        assert hash(Vertex([])) == hash(())

    def test_usable_as_dict_key(self):
        """Test vertices work as dictionary keys."""
        blocks = {Vertex([1]): "a", Vertex([2, 3]): "b"}

        assert blocks[Vertex([2, 3])] == "b"
        assert Vertex([3, 2]) not in blocks

    def test_immutable(self):
        """Test vertices cannot be modified."""
        v = Vertex([1])
        with pytest.raises(AttributeError):
            v.indices = (2,)

    def test_repr(self):
        """Test string representation."""
        assert repr(Vertex([1, 2])) == "Vertex([1, 2])"


class TestVertexSet:
    """Test suite for VertexSet."""

    def test_creation(self, path_vertex_set):
        """Test creation from nested lists."""
        assert len(path_vertex_set) == 3
        assert path_vertex_set.vertexsetsize == 4
        assert path_vertex_set.vertices == (Vertex([1]), Vertex([2, 3]), Vertex([4]))
        assert path_vertex_set.degrees() == (1, 2, 1)

    def test_creation_from_vertices(self):
        """Test creation from Vertex objects and mixed input."""
        a = VertexSet([Vertex([1, 2]), Vertex([3])])
        b = VertexSet([[1, 2], (3,)])

        assert a == b
        assert hash(a) == hash(b)

    def test_empty_set(self):
        """Test the vertex set of an empty graph."""
        vset = VertexSet([])

        assert len(vset) == 0
        assert vset.vertexsetsize == 0

    @pytest.mark.parametrize("vertices", [
        [[1], [3]],
        [[2], [1]],
        [[1, 3], [2]],
        [[2, 3]],
        [[1], [1]],
    ])
    def test_labels_must_partition_range(self, vertices):
        """Test labels must be exactly 1..N in order."""
        with pytest.raises(InvalidVertexSetError):
            VertexSet(vertices)

    def test_invalid_member(self):
        """Test an invalid member vertex is reported as a vertex error."""
        with pytest.raises(InvalidVertexError):
            VertexSet([[1], [0]])

    def test_subspaces(self, path_vertex_set):
        """Test 0-based subspace ranges."""
        assert path_vertex_set.subspace(0) == range(0, 1)
        assert path_vertex_set.subspace(1) == range(1, 3)
        assert path_vertex_set.subspace(2) == range(3, 4)
        assert path_vertex_set.subspace(Vertex([2, 3])) == range(1, 3)
        assert path_vertex_set.subspaces() == (range(0, 1), range(1, 3), range(3, 4))

    def test_subspaces_with_empty_vertices(self):
        """Test empty vertices get empty ranges and keep later offsets."""
        vset = VertexSet([[], [1], [], [2, 3]])

        assert vset.vertexsetsize == 3
        assert vset.subspace(0) == range(0, 0)
        assert vset.subspace(1) == range(0, 1)
        assert len(vset.subspace(2)) == 0
        assert vset.subspace(3) == range(1, 3)

    def test_membership_and_index(self, path_vertex_set):
        """Test membership queries."""
        assert Vertex([4]) in path_vertex_set
        assert Vertex([5]) not in path_vertex_set
        assert path_vertex_set.index(Vertex([4])) == 2

    def test_index_of_missing_vertex(self, path_vertex_set):
        """Test looking up a non-member raises MissingKeyError."""
        with pytest.raises(MissingKeyError):
            path_vertex_set.index(Vertex([2]))
        with pytest.raises(KeyError):
            path_vertex_set.subspace(Vertex([7]))

    def test_integer_indexing(self, path_vertex_set):
        """Test integer indexing returns vertices."""
        assert path_vertex_set[1] == Vertex([2, 3])
        assert path_vertex_set[-1] == Vertex([4])

    def test_slicing(self, path_vertex_set):
        """Test slices return plain tuples of vertices."""
        tail = path_vertex_set[1:]

        assert not isinstance(tail, VertexSet)
        assert tail == (Vertex([2, 3]), Vertex([4]))

    def test_fancy_indexing(self, path_vertex_set):
        """Test list and array selection."""
        picked = path_vertex_set[[2, 0]]

        assert picked == (Vertex([4]), Vertex([1]))
        assert path_vertex_set[np.array([0])] == (Vertex([1]),)

    def test_selection_keeps_parent_subspaces(self, path_vertex_set):
        """Test selected vertices are located through the parent set."""
        tail = path_vertex_set[1:]

        assert [path_vertex_set.subspace(v) for v in tail] == [range(1, 3), range(3, 4)]

    def test_subspaces_cover_whole_space(self, rng):
        """Test subspace ranges are disjoint and cover 0..N-1 in order."""
        degrees = rng.integers(0, 4, size=10)
        vertices, offset = [], 0
        for degree in degrees:
            vertices.append(list(range(offset + 1, offset + degree + 1)))
            offset += degree
        vset = VertexSet(vertices)

        covered = [k for subspace in vset.subspaces() for k in subspace]
        assert covered == list(range(vset.vertexsetsize))

    def test_iteration(self, path_vertex_set):
        """Test iteration yields vertices in order."""
        assert [len(v) for v in path_vertex_set] == [1, 2, 1]

    def test_equality(self, path_vertex_set):
        """Test structural equality."""
        assert path_vertex_set == VertexSet([[1], [2, 3], [4]])
        assert path_vertex_set != VertexSet([[1, 2], [3], [4]])
        assert path_vertex_set != [[1], [2, 3], [4]]

    def test_repr(self):
        """Test string representation."""
        assert repr(VertexSet([[1], [2]])) == "VertexSet([Vertex([1]), Vertex([2])])"

    def test_vertexsetsize_function(self, path_vertex_set):
        """Test the functional size accessor."""
        assert vertexsetsize(path_vertex_set) == 4
        assert vertexsetsize(VertexSet([[], []])) == 0
