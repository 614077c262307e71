"""Shared machinery of the block operator builders.

All three builders follow the same pattern:

1. classify the caller's block dictionary (default, keyed by dimension,
   keyed by vertex or vertex pair),
2. validate every supplied block eagerly (container, element type, shape),
3. resolve the blocks required by the vertex set, raising MissingKeyError or
   ShapeMismatchError before anything is written,
4. place the blocks into a COO accumulator and convert to CSR.

Zero-dimensional vertices never require a block: their subspaces are empty.
"""

from numbers import Integral
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import scipy.sparse as sp

from ...utils.config import Config, OPERATOR_DTYPE
from ...utils.exceptions import TypeMismatchError
from ...utils.validation import validate_block, validate_square_block, to_complex_block
from ...utils.logging import setup_logger
from ..core.hermitian_validation import HermitianValidator, HermitianValidationResult
from ..data_structures import Vertex

logger = setup_logger(__name__)

BY_DEGREE = "degree"
BY_SHAPE = "shape"
BY_VERTEX = "vertex"


def _is_int_key(key: Any) -> bool:
    return isinstance(key, Integral) and not isinstance(key, bool) and key >= 0


def classify_block_keys(blocks: Dict[Any, Any], name: str, pairs: bool = False) -> str:
    """Decide which dictionary form ``blocks`` uses.

    Args:
        blocks: Caller-supplied block dictionary
        name: Name of the dictionary, used in messages
        pairs: Whether keys are pairs (global Hamiltonian) or single keys

    Returns:
        ``BY_DEGREE`` (or ``BY_SHAPE`` for pairs) when keys are dimensions,
        ``BY_VERTEX`` when keys are vertices. An empty dictionary counts as
        keyed by dimension.

    Raises:
        TypeMismatchError: If ``blocks`` is not a dict or keys are mixed
    """
    if not isinstance(blocks, dict):
        raise TypeMismatchError(
            f"`{name}` must be a dict, got {type(blocks).__name__}",
            parameter=name,
            actual=type(blocks).__name__
        )

    def key_form(key):
        if pairs:
            if isinstance(key, tuple) and len(key) == 2:
                if all(_is_int_key(k) for k in key):
                    return BY_SHAPE
                if all(isinstance(k, Vertex) for k in key):
                    return BY_VERTEX
            return None
        if _is_int_key(key):
            return BY_DEGREE
        if isinstance(key, Vertex):
            return BY_VERTEX
        return None

    forms = set()
    for key in blocks:
        form = key_form(key)
        if form is None:
            expected = ("(int, int) or (Vertex, Vertex) tuples" if pairs
                        else "non-negative int or Vertex")
            raise TypeMismatchError(
                f"Keys of `{name}` must be {expected}, got {key!r}",
                parameter=name,
                expected=expected,
                actual=type(key).__name__
            )
        forms.add(form)

    if len(forms) > 1:
        raise TypeMismatchError(
            f"Keys of `{name}` mix dimensions and vertices",
            parameter=name,
            actual=sorted(forms)
        )
    if forms:
        return forms.pop()
    return BY_SHAPE if pairs else BY_DEGREE


def validate_block_dict(blocks: Dict[Any, Any], name: str, square: bool) -> Dict[Any, Tuple[int, int]]:
    """Validate every value of ``blocks`` and collect its shape.

    Raises:
        TypeMismatchError: If a value is not a numeric 2-D matrix
        ShapeMismatchError: If ``square`` and a value is not square
    """
    shapes = {}
    for key, block in blocks.items():
        if square:
            size = validate_square_block(block, key, name)
            shapes[key] = (size, size)
        else:
            shapes[key] = validate_block(block, key, name)
    return shapes


class BlockAccumulator:
    """Collects COO triplets of blocks placed at subspace offsets."""

    def __init__(self, size: int):
        self.size = size
        self._rows: List[np.ndarray] = []
        self._cols: List[np.ndarray] = []
        self._data: List[np.ndarray] = []

    def place(self, block: sp.coo_matrix, rows: range, cols: range, scale: complex = 1.0) -> None:
        """Write ``scale * block`` at ``rows x cols``."""
        if block.nnz == 0:
            return
        self._rows.append(block.row + rows.start)
        self._cols.append(block.col + cols.start)
        self._data.append(scale * block.data)

    def place_column(self, vector: np.ndarray, rows: range, col: int) -> None:
        """Write a dense column ``vector`` at ``rows x {col}``."""
        if len(rows) == 0:
            return
        self._rows.append(np.arange(rows.start, rows.stop))
        self._cols.append(np.full(len(rows), col))
        self._data.append(np.asarray(vector, dtype=OPERATOR_DTYPE))

    def to_csr(self) -> sp.csr_matrix:
        """Assemble the collected triplets into a complex CSR matrix."""
        if self._data:
            rows = np.concatenate(self._rows)
            cols = np.concatenate(self._cols)
            data = np.concatenate(self._data).astype(OPERATOR_DTYPE)
        else:
            rows = cols = np.zeros(0, dtype=np.int64)
            data = np.zeros(0, dtype=OPERATOR_DTYPE)

        matrix = sp.coo_matrix((data, (rows, cols)), shape=(self.size, self.size)).tocsr()
        if Config.assembly.ELIMINATE_ZEROS:
            matrix.eliminate_zeros()
        return matrix


class BlockOperatorBuilder:
    """Base class of the demoralized operator builders.

    Attributes:
        validate_properties: Whether Hamiltonians are checked for Hermiticity
            after assembly
        hermitian_validator: Validator used for the check
    """

    def __init__(self,
                 validate_properties: Optional[bool] = None,
                 hermitian_tolerance: Optional[float] = None):
        """Initialize the builder.

        Args:
            validate_properties: Check Hermiticity of assembled Hamiltonians,
                ``Config.assembly.VALIDATE_PROPERTIES`` by default
            hermitian_tolerance: Tolerance of the Hermiticity check
        """
        if validate_properties is None:
            validate_properties = Config.assembly.VALIDATE_PROPERTIES
        self.validate_properties = validate_properties
        self.hermitian_validator = HermitianValidator(hermitian_tolerance)

        logger.debug(f"{type(self).__name__} initialized with "
                     f"validate_properties={validate_properties}")

    def _check_hermitian(self, matrix: sp.csr_matrix, name: str) -> Optional[HermitianValidationResult]:
        if not self.validate_properties:
            return None
        result = self.hermitian_validator.validate(matrix)
        if not result.is_hermitian:
            logger.warning(f"{name} is not Hermitian: {result.errors[0]}")
        return result


def as_coo_blocks(blocks: Dict[Any, Any], keys) -> Dict[Any, sp.coo_matrix]:
    """Convert the validated blocks under ``keys`` to complex COO matrices."""
    return {key: to_complex_block(blocks[key]) for key in keys}
