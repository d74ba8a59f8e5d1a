"""
Generic result container for all statengine computations.

The Result class is the envelope every test module returns its payload
in. Payloads are frozen dataclasses; the envelope adds method metadata
and the warnings raised by degenerate inputs.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (test name, excluded groups)
    - No timing: results are a pure function of their inputs, so two
      calls on the same data compare equal
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (statistics, p-value, ...)
        info: Structured metadata (test name, group bookkeeping)
        warnings: Non-fatal issues, e.g. why a neutral result was returned

    Examples:
        >>> Result(
        ...     params=TTestParams(...),
        ...     info={'test': 't_two_sample'},
        ...     warnings=('data are essentially constant',),
        ... )
    """
    params: P
    info: dict[str, Any]
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
