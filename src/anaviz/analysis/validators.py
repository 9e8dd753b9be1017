"""Validator stages.

A validator is a pure predicate gate: it either returns its input unchanged
or raises ValidationError naming the violated precondition. It never
mutates or coerces data.
"""

import logging

from anaviz.contracts import ValidationError, require
from anaviz.core.series import is_number, is_sequence, point_coordinates

__all__ = ['NumericValidator', 'PointValidator']

logger = logging.getLogger(__name__)


class NumericValidator:
    """Accepts a sequence whose every element is a real number.

    Booleans and numeric strings are rejected. An empty sequence is valid.
    """

    async def validate_data(self, data):
        require(is_sequence(data),
                f"Validation failed: data must be a sequence, got {type(data).__name__}",
                ValidationError)
        for i, item in enumerate(data):
            require(is_number(item),
                    f"Validation failed: data must be numeric (element {i} is {item!r})",
                    ValidationError)
        logger.debug("NumericValidator: %d values passed", len(data))
        return data


class PointValidator:
    """Accepts a sequence of points, each with both ``x`` and ``y`` defined.

    A point may be a mapping (``{"x": 1, "y": 5}``) or any object with
    ``x``/``y`` attributes, such as :class:`anaviz.core.Point`.
    """

    async def validate_data(self, data):
        require(is_sequence(data),
                f"Validation failed: data must be a sequence, got {type(data).__name__}",
                ValidationError)
        for i, item in enumerate(data):
            require(point_coordinates(item) is not None,
                    f"Validation failed: missing x or y (element {i} is {item!r})",
                    ValidationError)
        logger.debug("PointValidator: %d points passed", len(data))
        return data
