"""InternalConfig: Authoritative runtime configuration.

This is the ONLY config schema that runtime code sees. It is fully validated,
normalized, and contains NO optional fields that processing code depends on.

All .get() calls, fallback defaults, and validation logic are FORBIDDEN in
runtime code - everything is explicit here.
"""

from typing import Literal, Optional
from pydantic import ConfigDict, Field
from anaviz.schemas.base import AnavizBaseModel


# =============================================================================
# Nested Configuration Models (Runtime)
# =============================================================================

class InternalSourceConfig(AnavizBaseModel):
    """Runtime source configuration.

    path may be None when the caller injects its own source coroutine.
    """
    path: Optional[str]
    format: Optional[Literal["json", "csv"]]


class InternalValidatorConfig(AnavizBaseModel):
    """Runtime validator selection."""
    kind: Literal["numeric", "point"]


class InternalAnalyzerConfig(AnavizBaseModel):
    """Runtime analyzer selection."""
    method: Literal["density", "parable", "point"]


class InternalEstimatorConfig(AnavizBaseModel):
    """Runtime KDE parameters."""
    bandwidth_factor: float = Field(gt=0)
    bandwidth_exponent: float = Field(lt=0)
    sample_points: int = Field(ge=2)


class InternalParableConfig(AnavizBaseModel):
    """Runtime parable policy."""
    policy: Literal["value", "index"]


class InternalPipelineConfig(AnavizBaseModel):
    """Runtime orchestrator behaviour."""
    cancel_superseded: bool
    user_error_message: str


class InternalVisualizationConfig(AnavizBaseModel):
    """Runtime visualization settings."""
    enabled: bool
    width_px: int
    height_px: int
    dpi: int
    output_format: Literal["svg", "png", "jpg"]
    line_color: str
    line_width: float
    fill_alpha: float
    x_label: str
    y_label: str
    export_csv: bool


class InternalOutputConfig(AnavizBaseModel):
    """Runtime output location."""
    base_dir: str


class InternalLoggingConfig(AnavizBaseModel):
    """Runtime logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


# =============================================================================
# Main InternalConfig
# =============================================================================

class InternalConfig(AnavizBaseModel):
    """Authoritative runtime configuration.

    Runtime modules receive InternalConfig and access fields directly:

        def __init__(self, config: InternalConfig):
            self.sample_points = config.estimator.sample_points  # NOT .get()

    Rules
    -----
    - NO .get() calls
    - NO fallback defaults
    - NO validation

    All of that happens during config resolution, not in runtime code.
    """

    source: InternalSourceConfig
    validator: InternalValidatorConfig
    analyzer: InternalAnalyzerConfig
    estimator: InternalEstimatorConfig
    parable: InternalParableConfig
    pipeline: InternalPipelineConfig
    visualization: InternalVisualizationConfig
    output: InternalOutputConfig
    logging: InternalLoggingConfig

    model_config = ConfigDict(
        extra='forbid',
        validate_assignment=True,
        use_enum_values=True,
        str_strip_whitespace=True,
        frozen=True,  # Immutable after construction
    )
