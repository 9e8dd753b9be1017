"""Analysis stages.

- estimator: mean, standard deviation, Gaussian kernel, KDE
- validators: numeric and point validators
- density_analyzer: KDE density curve
- parable_analyzer: value -> value**2 transform
- point_analyzer: scatter pass-through
"""

from anaviz.analysis.validators import NumericValidator, PointValidator
from anaviz.analysis.density_analyzer import DensityAnalyzer
from anaviz.analysis.parable_analyzer import ParableAnalyzer
from anaviz.analysis.point_analyzer import PointAnalyzer

__all__ = [
    "NumericValidator",
    "PointValidator",
    "DensityAnalyzer",
    "ParableAnalyzer",
    "PointAnalyzer",
]
