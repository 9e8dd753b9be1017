"""Centralized failure types for the analysis pipeline.

Every stage fails fast and loud with one of the exception types below.
All of them derive from PipelineError, so the orchestrator can catch a
run's failure once, at its boundary, and handle every kind uniformly.
"""

USER_ERROR_MESSAGE = "An error occurred during the data processing pipeline."


class PipelineError(RuntimeError):
    """Base class for every failure raised inside a pipeline run."""


class ConfigurationError(PipelineError):
    """The pipeline was composed incorrectly.

    Raised for a non-callable source, the wrong number of stages, or a
    stage that does not expose the capability its position requires.
    """


class ValidationError(PipelineError):
    """Data failed the validator's precondition."""


class InvalidInputError(PipelineError):
    """An estimator or analyzer received empty or malformed input."""


class EstimationError(PipelineError):
    """Numerical failure during estimation (zero bandwidth, NaN density)."""


class SourceError(PipelineError):
    """The data source rejected or could not produce data."""


class ContractViolation(PipelineError):
    """Raised when a stage does not produce the output it promised.

    This indicates a bug in a stage implementation, not bad user data.
    Example: an analyzer returning raw numbers instead of a list of points.
    """
