"""
Core infrastructure for statengine.

Shared abstractions used by every domain-specific submodule
(descriptive, hypothesis, anova, regression).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Named numerical constants and tolerance tiers
"""

from statengine.core.result import Result
from statengine.core.exceptions import (
    StatEngineError,
    ValidationError,
    DimensionError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "StatEngineError",
    "ValidationError",
    "DimensionError",
]
