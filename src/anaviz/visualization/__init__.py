"""Visualization module for analyzed series."""

from .plotter import SeriesPlotter

__all__ = ['SeriesPlotter']
