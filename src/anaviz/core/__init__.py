"""Core data model shared by all pipeline stages."""

from anaviz.core.series import (
    Point,
    Sample,
    Series,
    is_number,
    is_sequence,
    point_coordinates,
    series_to_frame,
)

__all__ = ['Point', 'Sample', 'Series', 'is_number', 'is_sequence',
           'point_coordinates', 'series_to_frame']
