"""Analysis stage contract.

Enforces the guarantee that whatever an analyzer returns is a Series of
points, so the visualizer is never handed raw data.
"""

from anaviz.contracts.base import require
from anaviz.core.series import Point, is_number


def assert_series(series) -> None:
    """Enforce analysis stage contract.

    Called after the analyzer resolves and before the Series is published.
    We do NOT check the numerical correctness of the curve; that is the
    analyzer's responsibility. We only check structure.

    Parameters
    ----------
    series : list of Point
        Output of ``analyze_data`` / ``analyze_and_visualize_data``.

    Raises
    ------
    ContractViolation
        If the output is not a list of Points with numeric coordinates.
    """
    require(
        isinstance(series, list),
        f"Analysis contract violated: output is {type(series).__name__}, expected list of Point"
    )

    for i, point in enumerate(series):
        require(
            isinstance(point, Point),
            f"Analysis contract violated: element {i} is {type(point).__name__}, expected Point"
        )
        require(
            is_number(point.x) and is_number(point.y),
            f"Analysis contract violated: element {i} has non-numeric coordinates {point!r}"
        )
