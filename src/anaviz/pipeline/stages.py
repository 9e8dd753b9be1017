"""Stage protocols and configuration-driven stage construction.

The orchestrator only depends on these protocols, never on concrete
classes. Stage methods are coroutines: a stage that returns a plain value
instead of an awaitable breaks its contract and fails the run.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Awaitable, Dict, List, Optional, Protocol, Tuple, runtime_checkable

from anaviz.analysis import (
    DensityAnalyzer,
    NumericValidator,
    ParableAnalyzer,
    PointAnalyzer,
    PointValidator,
)
from anaviz.core.series import Point
from anaviz.visualization import SeriesPlotter

if TYPE_CHECKING:
    from anaviz.schemas import InternalConfig

__all__ = ['Validator', 'Analyzer', 'VisualizingAnalyzer', 'Visualizer', 'build_stages']


@runtime_checkable
class Validator(Protocol):
    def validate_data(self, data) -> Awaitable:
        ...


@runtime_checkable
class Analyzer(Protocol):
    def analyze_data(self, data) -> Awaitable[List[Point]]:
        ...


@runtime_checkable
class VisualizingAnalyzer(Protocol):
    """Analyzer whose output is meant to be drawn directly (e.g. a density curve)."""

    def analyze_and_visualize_data(self, data) -> Awaitable[List[Point]]:
        ...


@runtime_checkable
class Visualizer(Protocol):
    def render(self, series: List[Point]):
        ...


def build_stages(config: "InternalConfig",
                 output_dirs: Optional[Dict[str, Path]] = None) -> Tuple:
    """Build ``(validator, analyzer, visualizer)`` from configuration.

    The visualizer is None when ``config.visualization.enabled`` is False
    or no output directories are given.
    """
    if config.validator.kind == "point":
        validator = PointValidator()
    else:
        validator = NumericValidator()

    if config.analyzer.method == "parable":
        analyzer = ParableAnalyzer(config)
    elif config.analyzer.method == "point":
        analyzer = PointAnalyzer()
    else:
        analyzer = DensityAnalyzer(config)

    visualizer = None
    if config.visualization.enabled and output_dirs is not None:
        visualizer = SeriesPlotter(config, output_dirs)

    return validator, analyzer, visualizer
