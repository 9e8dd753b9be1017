"""Scatter analyzer for point data.

Point data is already plottable, so analysis is a pass-through that
normalizes every validated sample (mapping or object) into a ``Point``,
keeping input order.
"""

from typing import List

from anaviz.core.series import Point, point_coordinates

__all__ = ['PointAnalyzer']


class PointAnalyzer:
    """Convert validated point-like samples into ``Point`` tuples."""

    async def analyze_data(self, data) -> List[Point]:
        return [Point(*point_coordinates(sample)) for sample in data]
