"""Pipeline contracts: fail-fast enforcement of stage invariants.

Contracts fail immediately and loudly when a stage does not produce what it
promised, or when a stage receives input that breaks its precondition.

Key principle:
- Pydantic validates config correctness
- Contracts validate pipeline correctness
- The orchestrator turns any failure into a single error state
"""

from anaviz.contracts.failure import (
    USER_ERROR_MESSAGE,
    PipelineError,
    ConfigurationError,
    ValidationError,
    InvalidInputError,
    EstimationError,
    SourceError,
    ContractViolation,
)
from anaviz.contracts.base import require
from anaviz.contracts.series import assert_series

__all__ = [
    "USER_ERROR_MESSAGE",
    "PipelineError",
    "ConfigurationError",
    "ValidationError",
    "InvalidInputError",
    "EstimationError",
    "SourceError",
    "ContractViolation",
    "require",
    "assert_series",
]
