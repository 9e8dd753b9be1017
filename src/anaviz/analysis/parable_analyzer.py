"""Parable (squaring) analyzer.

Maps each value ``v`` of a validated numeric sample to a point whose y is
``v**2``. The x coordinate follows the configured policy:

- ``"value"`` (default): x is the value itself, giving a parabola
- ``"index"``: x is the value's position in the sample
"""

from typing import TYPE_CHECKING, List, Optional

import numpy as np

from anaviz.core.series import Point

if TYPE_CHECKING:
    from anaviz.schemas import InternalConfig

__all__ = ['ParableAnalyzer']

POLICIES = ("value", "index")


class ParableAnalyzer:
    """Square every value. A total transform: never fails on numeric input."""

    def __init__(self, config: Optional["InternalConfig"] = None, policy: Optional[str] = None):
        if policy is None:
            policy = config.parable.policy if config is not None else "value"
        if policy not in POLICIES:
            raise ValueError(f"Unknown parable policy {policy!r}; expected one of {POLICIES}")
        self.policy = policy

    async def analyze_data(self, data) -> List[Point]:
        # numpy scalars square in their own dtype and wrap around
        values = [v.item() if isinstance(v, np.generic) else v for v in data]
        if self.policy == "index":
            return [Point(i, value ** 2) for i, value in enumerate(values)]
        return [Point(value, value ** 2) for value in values]
