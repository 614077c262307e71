"""Validation utilities for adjacency matrices and operator blocks.

This module provides the eager input checks shared by the demoralization
builders. Accepted containers are numpy arrays, scipy sparse matrices and
torch tensors; adjacency matrices may also be given as networkx graphs.
"""

from numbers import Real
from typing import Any, Optional, Tuple

import networkx as nx
import numpy as np
import scipy.sparse as sp
import torch

from .config import OPERATOR_DTYPE
from .exceptions import (
    DimensionMismatchError,
    InvalidArgumentError,
    ShapeMismatchError,
    TypeMismatchError,
)


def _is_numeric_dtype(dtype: Any) -> bool:
    return np.issubdtype(dtype, np.number) or np.issubdtype(dtype, np.bool_)


def _tensor_to_numpy(tensor: torch.Tensor) -> np.ndarray:
    if tensor.is_sparse:
        tensor = tensor.to_dense()
    return tensor.detach().cpu().numpy()


def as_adjacency_matrix(A: Any):
    """Validate an adjacency matrix and return it as numpy or scipy sparse.

    networkx graphs are converted in node order with their ``weight``
    attribute. networkx stores the edge ``u -> v`` at ``[u, v]``, while the
    builders read ``A[i, j]`` as the weight of the edge ``j -> i``, so the
    converted matrix is transposed.

    Args:
        A: Square numpy array, scipy sparse matrix, 2-D torch tensor or
            networkx graph

    Returns:
        numpy.ndarray or scipy CSR matrix

    Raises:
        TypeMismatchError: If ``A`` is not a supported numeric container
        DimensionMismatchError: If ``A`` is not square
    """
    if isinstance(A, nx.Graph):
        A = sp.csr_matrix(nx.to_scipy_sparse_array(A, weight="weight").T)
    elif isinstance(A, torch.Tensor):
        A = _tensor_to_numpy(A)
    elif sp.issparse(A):
        A = sp.csr_matrix(A, copy=True)
    elif not isinstance(A, np.ndarray):
        raise TypeMismatchError(
            "Adjacency matrix must be numpy.ndarray, scipy sparse matrix, "
            "torch.Tensor or networkx graph",
            parameter="A",
            actual=type(A).__name__
        )

    if not _is_numeric_dtype(A.dtype):
        raise TypeMismatchError(
            "Adjacency matrix must have a numeric element type",
            parameter="A",
            actual=str(A.dtype)
        )

    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        raise DimensionMismatchError(
            f"Adjacency matrix must be square, got shape {A.shape}",
            parameter="A",
            actual=A.shape
        )

    # Stored duplicates are one summed entry; canonical form also sorts columns
    if sp.issparse(A):
        A.sum_duplicates()

    return A


def validate_epsilon(epsilon: Any) -> float:
    """Check that the significance threshold is a non-negative real.

    Raises:
        InvalidArgumentError: If ``epsilon`` is negative or not real
    """
    if isinstance(epsilon, (bool, np.bool_)) or not isinstance(epsilon, Real):
        raise InvalidArgumentError(
            f"epsilon must be a real number, got {type(epsilon).__name__}",
            parameter="epsilon"
        )
    if not epsilon >= 0:
        raise InvalidArgumentError(
            f"epsilon needs to be nonnegative, got {epsilon}",
            parameter="epsilon",
            actual=epsilon
        )
    return float(epsilon)


def validate_block(block: Any, key: Any, name: str = "block") -> Tuple[int, int]:
    """Check that ``block`` is a numeric 2-D dense or sparse matrix.

    Args:
        block: Candidate block
        key: Dictionary key of the block, used in messages
        name: Name of the dictionary, used in messages

    Returns:
        Shape of the block

    Raises:
        TypeMismatchError: If the container or element type is unsupported
    """
    if not (isinstance(block, (np.ndarray, torch.Tensor)) or sp.issparse(block)):
        raise TypeMismatchError(
            f"All elements in `{name}` must be numpy.ndarray, scipy sparse "
            f"matrix or torch.Tensor; got {type(block).__name__} for key {key!r}",
            parameter=name,
            actual=type(block).__name__
        )

    if isinstance(block, torch.Tensor):
        if block.is_floating_point() or block.is_complex():
            numeric = True
        else:
            numeric = block.dtype in (torch.bool, torch.uint8, torch.int8, torch.int16,
                                      torch.int32, torch.int64)
        ndim = block.dim()
    else:
        numeric = _is_numeric_dtype(block.dtype)
        ndim = block.ndim

    if not numeric:
        raise TypeMismatchError(
            f"All elements of `{name}` must be numeric; key {key!r} has dtype {block.dtype}",
            parameter=name,
            actual=str(block.dtype)
        )

    if ndim != 2:
        raise TypeMismatchError(
            f"All elements of `{name}` must be 2-D matrices; key {key!r} has {ndim} dimensions",
            parameter=name,
            actual=ndim
        )

    return tuple(int(s) for s in block.shape)


def validate_square_block(block: Any, key: Any, name: str = "block") -> int:
    """Check that ``block`` is a numeric square matrix and return its size.

    Raises:
        TypeMismatchError: If the container or element type is unsupported
        ShapeMismatchError: If the block is not square
    """
    rows, cols = validate_block(block, key, name)
    if rows != cols:
        raise ShapeMismatchError(
            f"`{name}` must consist of square matrices; key {key!r} has shape {(rows, cols)}",
            key=key,
            actual=(rows, cols)
        )
    return rows


def validate_block_shape(
    block: Any,
    key: Any,
    expected: Tuple[int, int],
    name: str = "block",
    shape: Optional[Tuple[int, int]] = None
) -> None:
    """Check that an already validated block has the ``expected`` shape.

    Raises:
        ShapeMismatchError: If the shapes disagree
    """
    if shape is None:
        shape = tuple(int(s) for s in block.shape)
    if tuple(shape) != tuple(expected):
        raise ShapeMismatchError(
            f"`{name}` entry for key {key!r} should have shape {tuple(expected)}, "
            f"got {tuple(shape)}",
            key=key,
            expected=tuple(expected),
            actual=tuple(shape)
        )


def to_complex_block(block: Any) -> sp.coo_matrix:
    """Convert a validated block to a complex COO matrix."""
    if isinstance(block, torch.Tensor):
        block = _tensor_to_numpy(block)
    return sp.coo_matrix(block, dtype=OPERATOR_DTYPE)
