"""Density estimation analyzer.

Turns a validated numeric sample into a smooth density curve using a
Gaussian kernel density estimate with Silverman's bandwidth. The curve is
sampled at evenly spaced points between the sample minimum and maximum
(inclusive) and returned as a Series of points in ascending x order.
"""

import logging
from typing import TYPE_CHECKING, List, Optional

import numpy as np

from anaviz.analysis.estimator import kde, silverman_bandwidth
from anaviz.contracts import EstimationError, InvalidInputError, require
from anaviz.core.series import Point, is_sequence

if TYPE_CHECKING:
    from anaviz.schemas import InternalConfig

__all__ = ['DensityAnalyzer']

logger = logging.getLogger(__name__)


class DensityAnalyzer:
    """Kernel density estimation of a numeric sample.

    Configuration comes from ``config.estimator``:

    - ``bandwidth_factor`` : Silverman factor (default 1.06)
    - ``bandwidth_exponent`` : Silverman exponent (default -0.2)
    - ``sample_points`` : number of x positions on the curve (default 101,
      i.e. a step of ``(max - min) / 100``)

    Examples
    --------
    >>> analyzer = DensityAnalyzer()
    >>> series = asyncio.run(analyzer.analyze_and_visualize_data([1, 2, 3, 4, 5]))
    >>> len(series), series[0].x, series[-1].x
    (101, 1.0, 5.0)
    """

    def __init__(self, config: Optional["InternalConfig"] = None):
        if config is None:
            self.bandwidth_factor = 1.06
            self.bandwidth_exponent = -0.2
            self.sample_points = 101
        else:
            self.bandwidth_factor = config.estimator.bandwidth_factor
            self.bandwidth_exponent = config.estimator.bandwidth_exponent
            self.sample_points = config.estimator.sample_points

    async def analyze_and_visualize_data(self, data) -> List[Point]:
        """Estimate the density curve of ``data``.

        Raises
        ------
        InvalidInputError
            If ``data`` is not a sequence or is empty.
        EstimationError
            If the bandwidth is zero (constant sample) or the curve contains NaN.
        """
        require(is_sequence(data) and len(data) > 0,
                "Invalid input data. Expected a non-empty array.",
                InvalidInputError)

        values = np.asarray(data, dtype=float)
        bandwidth = silverman_bandwidth(values, self.bandwidth_factor,
                                        self.bandwidth_exponent)
        density = kde(values, bandwidth)

        xs = np.linspace(values.min(), values.max(), self.sample_points)
        ys = density(xs)
        require(not np.isnan(ys).any(),
                "Numerical error during density estimation.",
                EstimationError)

        logger.info("Density estimated: n=%d, bandwidth=%.4g, %d points",
                    values.size, bandwidth, len(xs))
        return [Point(float(x), float(y)) for x, y in zip(xs, ys)]
