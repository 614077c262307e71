"""Configuration constants for QSWalk.

This module centralizes the numerical constants used by the demoralization
operators, and computes call-site defaults such as the significance
threshold for adjacency entries.
"""

from dataclasses import dataclass
from typing import Dict, Any

import numpy as np


@dataclass(frozen=True)
class NumericalConstants:
    """Numerical tolerances and dtypes."""

    # Operators are always assembled in this dtype
    OPERATOR_DTYPE: type = np.complex128

    # Threshold used when the adjacency matrix is not floating point
    FALLBACK_EPSILON: float = float(np.finfo(np.float64).eps)

    # Hermiticity checks
    HERMITIAN_TOLERANCE: float = 1e-12


@dataclass(frozen=True)
class AssemblyConstants:
    """Sparse assembly constants."""

    # Drop explicitly stored zeros after assembly
    ELIMINATE_ZEROS: bool = True

    # Builders do not check Hermiticity unless asked
    VALIDATE_PROPERTIES: bool = False


class Config:
    """Global configuration object containing all constants."""

    numerical = NumericalConstants()
    assembly = AssemblyConstants()

    @classmethod
    def get_all_constants(cls) -> Dict[str, Any]:
        """Get all constants as a flat dictionary.

        Returns:
            Dictionary with keys like ``"numerical.HERMITIAN_TOLERANCE"``
        """
        constants = {}

        for attr_name in ("numerical", "assembly"):
            attr = getattr(cls, attr_name)
            for field_name in attr.__dataclass_fields__:
                constants[f"{attr_name}.{field_name}"] = getattr(attr, field_name)

        return constants


def default_epsilon(matrix: Any) -> float:
    """Machine epsilon for the scalar type of ``matrix``.

    Floating and complex matrices use the epsilon of their own precision,
    anything else (integers, booleans) falls back to double precision.

    Args:
        matrix: numpy array or scipy sparse matrix

    Returns:
        Non-negative significance threshold
    """
    dtype = getattr(matrix, "dtype", None)
    if dtype is not None and np.issubdtype(dtype, np.inexact):
        return float(np.finfo(dtype).eps)
    return Config.numerical.FALLBACK_EPSILON


# Convenience access to commonly used constants
OPERATOR_DTYPE = Config.numerical.OPERATOR_DTYPE
HERMITIAN_TOLERANCE = Config.numerical.HERMITIAN_TOLERANCE
