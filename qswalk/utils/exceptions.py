"""Custom exception hierarchy for QSWalk.

This module defines the exception hierarchy used by the demoralization
operators. All exceptions inherit from the base QSWalkError class, providing
consistent error reporting throughout the codebase.

Exception Categories:
- ValidationError: Input validation failures (base of the kinds below)
- InvalidArgumentError: Non-positive sizes, negative thresholds, malformed
  vertices and vertex sets, non-square matrices
- MissingKeyError: A required key is absent from a block dictionary
- ShapeMismatchError: A supplied block has the wrong shape
- TypeMismatchError: A supplied block is not a numeric matrix

The concrete kinds also derive from the matching builtin exception
(ValueError, KeyError, TypeError) so callers can catch them either way.
"""

from typing import Optional, Any, Dict


class QSWalkError(Exception):
    """Base exception for all QSWalk errors.

    Attributes:
        message: Error message
        context: Additional context information
        recoverable: Whether the error is potentially recoverable
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        recoverable: bool = False
    ):
        """Initialize base exception.

        Args:
            message: Error message
            context: Additional context information
            recoverable: Whether the error is potentially recoverable
        """
        super().__init__(message)
        self.message = message
        self.context = self._validate_context(context or {})
        self.recoverable = recoverable

    def __str__(self) -> str:
        """Return string representation of the exception."""
        base_msg = self.message
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base_msg += f" (Context: {context_str})"
        return base_msg

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "context": self.context,
            "recoverable": self.recoverable,
        }

    def _validate_context(self, context: Dict[str, Any]) -> Dict[str, Any]:
        """Validate and sanitize context dictionary.

        Keys are converted to strings and long values are truncated so that
        an error carrying a large matrix does not flood the message.

        Args:
            context: Context dictionary to validate

        Returns:
            Validated context dictionary
        """
        if not isinstance(context, dict):
            return {"invalid_context": f"Context must be dict, got {type(context).__name__}"}

        max_value_size = 1000

        validated_context = {}
        for key, value in context.items():
            if not isinstance(key, str):
                key = str(key)
            if len(key) > 100:
                key = key[:97] + "..."

            try:
                str_value = str(value)
            except Exception:
                validated_context[key] = f"<{type(value).__name__} object>"
                continue

            if len(str_value) > max_value_size:
                validated_context[key] = str_value[:max_value_size - 3] + "..."
            else:
                validated_context[key] = value

        return validated_context


class ValidationError(QSWalkError):
    """Raised when input validation fails.

    Examples:
        - Block dictionary missing a degree
        - Block shape disagreeing with a vertex dimension
        - Negative significance threshold
    """

    def __init__(
        self,
        message: str,
        parameter: Optional[str] = None,
        expected: Optional[Any] = None,
        actual: Optional[Any] = None,
        **kwargs
    ):
        """Initialize validation error.

        Args:
            message: Error message
            parameter: Name of the parameter that failed validation
            expected: Expected value or type
            actual: Actual value received
            **kwargs: Additional context
        """
        context = kwargs.get('context', {})
        if parameter:
            context['parameter'] = parameter
        if expected is not None:
            context['expected'] = expected
        if actual is not None:
            context['actual'] = actual

        super().__init__(message, context, recoverable=True)


class InvalidArgumentError(ValidationError, ValueError):
    """Raised for arguments outside their domain.

    Examples:
        - Non-positive matrix size
        - Negative epsilon
        - Non-square adjacency matrix
    """


class InvalidVertexError(InvalidArgumentError):
    """Raised when a vertex has non-positive or duplicated indices."""


class InvalidVertexSetError(InvalidArgumentError):
    """Raised when vertices do not partition a contiguous range 1..N."""


class DimensionMismatchError(InvalidArgumentError):
    """Raised when a matrix that must be square is not."""


class MissingKeyError(ValidationError, KeyError):
    """Raised when a block dictionary lacks a required key.

    Attributes:
        key: The missing degree, shape, vertex or vertex pair
    """

    def __init__(self, message: str, key: Any = None, **kwargs):
        """Initialize missing key error.

        Args:
            message: Error message
            key: The key that was required but not supplied
            **kwargs: Passed on to ValidationError
        """
        self.key = key
        context = kwargs.pop('context', {})
        if key is not None:
            context['key'] = key
        super().__init__(message, context=context, **kwargs)


class ShapeMismatchError(ValidationError, ValueError):
    """Raised when a supplied block disagrees with the required shape.

    Attributes:
        key: Dictionary key of the offending block
    """

    def __init__(self, message: str, key: Any = None, **kwargs):
        """Initialize shape mismatch error.

        Args:
            message: Error message
            key: Dictionary key of the offending block
            **kwargs: Passed on to ValidationError (``expected``, ``actual``)
        """
        self.key = key
        context = kwargs.pop('context', {})
        if key is not None:
            context['key'] = key
        super().__init__(message, context=context, **kwargs)


class TypeMismatchError(ValidationError, TypeError):
    """Raised when a block is not a numeric dense/sparse matrix."""
