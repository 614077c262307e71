"""Shared test fixtures for the QSWalk test suite.

This module provides common fixtures and utilities used across all tests.
"""

import pytest
import tempfile
import shutil
from pathlib import Path
import os
import sys

import numpy as np
import scipy.sparse as sp

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

from qswalk.utils.logging import shutdown_logging
from qswalk.demoralization import VertexSet


@pytest.fixture(scope="session", autouse=True)
def test_environment():
    """Set up test environment."""
    os.environ["QSWALK_TEST_MODE"] = "true"

    yield

    if "QSWALK_TEST_MODE" in os.environ:
        del os.environ["QSWALK_TEST_MODE"]


@pytest.fixture(scope="function", autouse=True)
def cleanup_logging():
    """Clean up logging after each test."""
    yield
    shutdown_logging()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_dir = tempfile.mkdtemp()
    yield Path(temp_dir)
    shutil.rmtree(temp_dir)


@pytest.fixture
def path_adjacency():
    """Adjacency matrix of the undirected path graph on three vertices."""
    return np.array([[0, 1, 0],
                     [1, 0, 1],
                     [0, 1, 0]])


@pytest.fixture
def sparse_path_adjacency(path_adjacency):
    """Sparse version of the path graph adjacency matrix."""
    return sp.csr_matrix(path_adjacency)


@pytest.fixture
def path_vertex_set():
    """Vertex set induced by the path graph on three vertices."""
    return VertexSet([[1], [2, 3], [4]])


@pytest.fixture
def cycle_adjacency():
    """Directed 3-cycle 0 -> 1 -> 2 -> 0, stored as A[target, source]."""
    return np.array([[0, 0, 1],
                     [1, 0, 0],
                     [0, 1, 0]], dtype=float)


@pytest.fixture
def rng():
    """Seeded random generator."""
    return np.random.default_rng(1234)


# Custom pytest plugins
def pytest_configure(config):
    """Configure pytest."""
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


# Custom assertions
def assert_sparse_equal(matrix, expected):
    """Assert a sparse matrix equals a dense expectation exactly."""
    assert sp.issparse(matrix)
    assert matrix.shape == np.shape(expected)
    np.testing.assert_array_equal(matrix.toarray(), np.asarray(expected))


pytest.assert_sparse_equal = assert_sparse_equal
