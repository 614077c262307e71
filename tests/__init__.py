"""Test suite for QSWalk.

Structure:
- unit/: Unit tests for utilities (logging, exceptions, configuration, validation)
- demoralization/: Vertex subspaces, incidence extraction, default blocks
  and operator assembly
- integration/: Package imports and end-to-end operator construction
"""
