"""
AnovaDesign: validated input for one-way ANOVA.

Accepts groups in any of the shapes callers naturally have them in and
normalizes them to a tuple of Group objects.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from numpy.typing import ArrayLike

from statengine.anova._common import Group
from statengine.core.compute.tolerances import SIGNIFICANCE_LEVEL
from statengine.core.exceptions import DimensionError, ValidationError
from statengine.core.validation import check_alpha

# Groups smaller than this are reported but left out of the F test
MIN_GROUP_SIZE = 2


def _to_group(item: Any, position: int) -> Group:
    if isinstance(item, Group):
        return item
    if isinstance(item, Mapping):
        try:
            return Group(item['name'], item['values'])
        except KeyError as e:
            raise ValidationError(
                f"groups[{position}]: mapping must have 'name' and 'values' keys"
            ) from e
    if isinstance(item, Sequence) and not isinstance(item, str) and len(item) == 2:
        name, values = item
        return Group(name, values)
    raise ValidationError(
        f"groups[{position}]: expected Group, (name, values) or "
        f"{{'name': ..., 'values': ...}}, got {type(item).__name__}"
    )


@dataclass(frozen=True)
class AnovaDesign:
    """
    Design for one-way ANOVA.

    Construction:
        AnovaDesign.for_groups([Group('a', [...]), ('b', [...])])
        AnovaDesign.for_groups({'a': [...], 'b': [...]})
        AnovaDesign.for_oneway(y, labels)
    """
    _groups: tuple[Group, ...]
    _alpha: float = SIGNIFICANCE_LEVEL

    @classmethod
    def for_groups(
        cls,
        groups: Mapping[str, ArrayLike] | Sequence[Any],
        *,
        alpha: float = SIGNIFICANCE_LEVEL,
    ) -> AnovaDesign:
        """Build design from named groups."""
        if isinstance(groups, Mapping):
            normalized = tuple(Group(name, values) for name, values in groups.items())
        else:
            normalized = tuple(_to_group(item, i) for i, item in enumerate(groups))
        return cls(_groups=normalized, _alpha=check_alpha(alpha))

    @classmethod
    def for_oneway(
        cls,
        y: ArrayLike,
        labels: Sequence[Any],
        *,
        alpha: float = SIGNIFICANCE_LEVEL,
    ) -> AnovaDesign:
        """Build design from a response vector and a parallel label vector."""
        return cls(_groups=group_by(y, labels), _alpha=check_alpha(alpha))

    @property
    def groups(self) -> tuple[Group, ...]:
        """All groups, in input order."""
        return self._groups

    @property
    def valid_groups(self) -> tuple[Group, ...]:
        """Groups large enough to contribute a within-group variance."""
        return tuple(g for g in self._groups if g.n >= MIN_GROUP_SIZE)

    @property
    def alpha(self) -> float:
        return self._alpha


def group_by(y: ArrayLike, labels: Sequence[Any]) -> tuple[Group, ...]:
    """
    Bucket observations by label.

    Groups appear in order of first appearance and are named str(label).
    Observations whose label is None are skipped.

    Raises:
        DimensionError: If y and labels differ in length
    """
    y_list = list(y)
    label_list = list(labels)
    if len(y_list) != len(label_list):
        raise DimensionError(
            f"Inconsistent lengths: y={len(y_list)}, labels={len(label_list)}"
        )

    buckets: dict[str, list[Any]] = {}
    for value, label in zip(y_list, label_list):
        if label is None:
            continue
        buckets.setdefault(str(label), []).append(value)

    return tuple(Group(name, values) for name, values in buckets.items())
