"""Sample and Series types shared by every stage.

A Sample is either a real number or a point. Points produced by the
pipeline are immutable ``Point`` tuples; raw point input may also come in
as mappings with ``x`` and ``y`` keys (e.g. decoded JSON objects).

A Series is an ordered list of Samples. Order is significant: it is the
order in which the visualizer draws the curve.
"""

import numbers
from collections.abc import Mapping
from typing import Any, List, NamedTuple, Optional, Tuple, Union

import numpy as np
import pandas as pd

__all__ = ['Point', 'Sample', 'Series', 'is_number', 'is_sequence',
           'point_coordinates', 'series_to_frame']


class Point(NamedTuple):
    """A single ``(x, y)`` sample."""
    x: float
    y: float


Sample = Union[float, Point, Mapping]
Series = List[Sample]


def is_number(value: Any) -> bool:
    """True for real numbers, including numpy scalars. Booleans are not numbers."""
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def is_sequence(data: Any) -> bool:
    """True for list-like containers a stage can iterate in order."""
    if isinstance(data, np.ndarray):
        return data.ndim == 1
    return isinstance(data, (list, tuple))


def point_coordinates(sample: Any) -> Optional[Tuple[Any, Any]]:
    """Return ``(x, y)`` for a point-like sample, or None if either is missing."""
    if isinstance(sample, Mapping):
        x, y = sample.get("x"), sample.get("y")
    else:
        x, y = getattr(sample, "x", None), getattr(sample, "y", None)
    if x is None or y is None:
        return None
    return x, y


def series_to_frame(series: List[Point]) -> pd.DataFrame:
    """Tabulate an analyzed Series as a two-column DataFrame (x, y)."""
    return pd.DataFrame(list(series), columns=["x", "y"])
