"""Statistical estimator shared by the analysis stages.

Pure numerical helpers: mean, standard deviation, Gaussian kernel,
Silverman bandwidth, and a kernel density estimation (KDE) factory.

All functions accept any 1-D numeric sequence (list, tuple, numpy array)
and fail loudly instead of returning NaN or Infinity:

- empty input raises InvalidInputError
- a zero, negative or non-finite bandwidth raises EstimationError
"""

import logging
from typing import Callable, Sequence, Union

import numpy as np

from anaviz.contracts import EstimationError, InvalidInputError, require

__all__ = ['mean', 'standard_deviation', 'gaussian_kernel',
           'silverman_bandwidth', 'kde']

logger = logging.getLogger(__name__)

ArrayLike = Union[Sequence[float], np.ndarray]

_INV_SQRT_2PI = 1.0 / np.sqrt(2.0 * np.pi)


def _as_array(data: ArrayLike, what: str) -> np.ndarray:
    values = np.asarray(data, dtype=float)
    require(values.ndim == 1,
            f"Cannot compute {what}: expected a 1-D sequence, got {values.ndim} dims",
            InvalidInputError)
    require(values.size > 0,
            f"Cannot compute {what} of an empty sequence.",
            InvalidInputError)
    return values


def mean(data: ArrayLike) -> float:
    """Arithmetic mean of ``data``.

    Raises
    ------
    InvalidInputError
        If ``data`` is empty.
    """
    return float(_as_array(data, "mean").mean())


def standard_deviation(data: ArrayLike) -> float:
    """Population standard deviation (divides by n) of ``data``.

    Raises
    ------
    InvalidInputError
        If ``data`` is empty.
    """
    values = _as_array(data, "standard deviation")
    spread = np.ptp(values)
    if spread == 0:
        return 0.0
    # scaled to [-1, 1] so squaring cannot overflow
    scaled = (values - values.mean()) / spread
    return float(spread * np.sqrt(np.mean(scaled ** 2)))


def gaussian_kernel(u):
    """Standard normal kernel ``exp(-u**2 / 2) / sqrt(2*pi)``.

    Works element-wise on scalars and numpy arrays.
    """
    return _INV_SQRT_2PI * np.exp(-0.5 * np.square(u))


def silverman_bandwidth(data: ArrayLike, factor: float = 1.06,
                        exponent: float = -0.2) -> float:
    """Silverman's rule of thumb: ``factor * std(data) * n**exponent``.

    Parameters
    ----------
    data : sequence of float
        Non-empty sample.
    factor : float, default 1.06
    exponent : float, default -0.2 (that is, -1/5)

    Returns
    -------
    float
        Bandwidth. Zero for constant input; ``kde`` rejects it.
    """
    values = _as_array(data, "bandwidth")
    bandwidth = factor * standard_deviation(values) * values.size ** exponent
    logger.debug("Silverman bandwidth: n=%d, h=%.6g", values.size, bandwidth)
    return float(bandwidth)


def kde(data: ArrayLike, bandwidth: float) -> Callable:
    """Build a Gaussian kernel density estimate over ``data``.

    Parameters
    ----------
    data : sequence of float
        Non-empty sample ``x_1 .. x_n``.
    bandwidth : float
        Smoothing parameter ``h``; must be finite and strictly positive.

    Returns
    -------
    callable
        ``density(x) = 1/(n*h) * sum(K((x - x_i)/h))``. Accepts a scalar
        (returns float) or an array of points (returns ndarray).

    Raises
    ------
    InvalidInputError
        If ``data`` is empty.
    EstimationError
        If ``bandwidth`` is zero, negative or not finite (for example when
        the sample is constant and its standard deviation is 0).

    Examples
    --------
    >>> density = kde([1, 2, 3, 4, 5], silverman_bandwidth([1, 2, 3, 4, 5]))
    >>> density(3.0) > density(1.0)
    True
    """
    values = _as_array(data, "density estimate")
    require(bool(np.isfinite(bandwidth)) and bandwidth > 0,
            f"Cannot estimate density with bandwidth {bandwidth!r}: "
            "bandwidth must be finite and positive",
            EstimationError)

    n = values.size
    norm = 1.0 / (n * bandwidth)

    def density(x):
        points = np.asarray(x, dtype=float)
        u = (points[..., np.newaxis] - values) / bandwidth
        result = norm * gaussian_kernel(u).sum(axis=-1)
        if points.ndim == 0:
            return float(result)
        return result

    return density
