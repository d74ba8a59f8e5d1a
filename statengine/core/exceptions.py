"""
Exception hierarchy for statengine.

All exceptions inherit from StatEngineError to allow catching any
library-specific error.

Design principles:
    - Degenerate data (too few observations, zero variance) is NOT an
      error; solvers return neutral results and record a warning instead
    - Exceptions are reserved for malformed input and programmer errors
      (non-numeric data, non-positive shape parameters, bad alpha)
    - Error messages are actionable with actual vs expected values
"""


class StatEngineError(Exception):
    """Base exception for all statengine errors."""
    pass


class ValidationError(StatEngineError):
    """
    Input validation failed.

    Raised when inputs are malformed (non-numeric, infinite) or when a
    special function is called outside its domain.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect.

    Raised when a sample is not 1-dimensional.
    """
    pass
