"""Integration tests for package setup and component interaction."""

import networkx as nx
import numpy as np
import pytest
import scipy.sparse as sp

from qswalk.demoralization import HermitianValidator


class TestPackageImports:
    """Test package imports and basic functionality."""

    def test_main_package_import(self):
        """Test main package can be imported."""
        import qswalk

        assert qswalk.__version__ == "0.1.0"
        assert hasattr(qswalk, "__author__")

    def test_main_package_exports(self):
        """Test operator builders are exported from the main package."""
        import qswalk

        for name in ("Vertex", "VertexSet", "make_vertex_set", "local_hamiltonian",
                     "global_hamiltonian", "nonmoralizing_lindbladian", "setup_logger"):
            assert hasattr(qswalk, name)
        assert issubclass(qswalk.MissingKeyError, qswalk.ValidationError)

    def test_utils_module_imports(self):
        """Test utils module components can be imported."""
        from qswalk.utils import setup_logger, QSWalkError, ValidationError, Config

        assert callable(setup_logger)
        assert issubclass(ValidationError, QSWalkError)
        assert Config.assembly.ELIMINATE_ZEROS is True


class TestDemoralizedPathGraph:
    """Build every operator for a long path graph."""

    @pytest.fixture
    def adjacency(self):
        return nx.to_scipy_sparse_array(nx.path_graph(101), format="csr")

    def test_operators_share_vertex_set(self, adjacency):
        """Test all operators live on the space described by the vertex set."""
        import qswalk

        lindbladian, vset = qswalk.nonmoralizing_lindbladian(adjacency)
        h_global = qswalk.global_hamiltonian(adjacency)
        h_local = qswalk.local_hamiltonian(vset)

        size = vset.vertexsetsize
        assert size == 2 * 100
        for operator in (lindbladian, h_global, h_local):
            assert sp.isspmatrix_csr(operator)
            assert operator.shape == (size, size)

        validator = HermitianValidator()
        assert validator.is_hermitian(h_global)
        assert validator.is_hermitian(h_local)

    def test_endpoints_have_one_dimension(self, adjacency):
        """Test the path endpoints have in-degree one."""
        import qswalk

        vset = qswalk.make_vertex_set(adjacency)

        assert len(vset[0]) == 1
        assert len(vset[100]) == 1
        assert set(vset.degrees()[1:-1]) == {2}

    def test_symmetric_lindbladian_pair(self, adjacency):
        """Test the two elementary matrix choices give distinct operators."""
        import qswalk

        first, vset_first = qswalk.nonmoralizing_lindbladian(
            adjacency, {1: np.ones((1, 1)), 2: np.array([[1, 1], [1, -1]])})
        second, vset_second = qswalk.nonmoralizing_lindbladian(
            adjacency, {1: np.ones((1, 1)), 2: np.array([[1, 1], [-1, 1]])})

        assert vset_first == vset_second
        assert first.nnz == second.nnz
        assert abs(first - second).sum() > 0

    def test_single_vertex_set_selection(self, adjacency):
        """Test selecting the midpoint vertex keeps its subspace."""
        import qswalk

        vset = qswalk.make_vertex_set(adjacency)
        middle = vset[[50]]

        assert middle == (vset[50],)
        assert vset.subspace(middle[0]) == vset.subspace(50)
        assert vset.subspace(50) == range(99, 101)
