"""ParamConfig: Expert defaults for the anaviz pipeline.

This module defines the complete default configuration. ALL pipeline
parameters must have defaults here. No runtime code should define
fallback values - this is the single source of truth for defaults.

Runtime code NEVER reads from ParamConfig directly - it only receives InternalConfig.
"""

from typing import Literal, Optional
from pydantic import Field, field_validator
from anaviz.contracts.failure import USER_ERROR_MESSAGE
from anaviz.schemas.base import AnavizBaseModel


# =============================================================================
# Nested Configuration Models
# =============================================================================

class SourceConfig(AnavizBaseModel):
    """Data source configuration."""
    path: Optional[str] = None
    format: Optional[Literal["json", "csv"]] = Field(
        None, description="File format; inferred from the suffix when None"
    )


class ValidatorConfig(AnavizBaseModel):
    """Validator stage selection."""
    kind: Literal["numeric", "point"] = "numeric"


class AnalyzerConfig(AnavizBaseModel):
    """Analyzer stage selection."""
    method: Literal["density", "parable", "point"] = "density"

    @field_validator("method", mode="before")
    @classmethod
    def normalize_method_name(cls, v):
        """Normalize method names to lowercase."""
        if isinstance(v, str):
            return v.lower().strip()
        return v


class EstimatorConfig(AnavizBaseModel):
    """Kernel density estimation parameters (Silverman's rule of thumb)."""
    bandwidth_factor: float = Field(1.06, gt=0)
    bandwidth_exponent: float = Field(-0.2, lt=0)
    sample_points: int = Field(101, ge=2, description="Evenly spaced points between min and max")


class ParableConfig(AnavizBaseModel):
    """Parable analyzer policy: x is the value itself or its position."""
    policy: Literal["value", "index"] = "value"


class PipelineConfig(AnavizBaseModel):
    """Orchestrator behaviour."""
    cancel_superseded: bool = False
    user_error_message: str = USER_ERROR_MESSAGE


class VisualizationConfig(AnavizBaseModel):
    """Visualization settings."""
    enabled: bool = True
    width_px: int = Field(500, ge=50)
    height_px: int = Field(300, ge=50)
    dpi: int = Field(100, ge=50)
    output_format: Literal["svg", "png", "jpg"] = "svg"
    line_color: str = "steelblue"
    line_width: float = Field(1.5, gt=0)
    fill_alpha: float = Field(0.3, ge=0, le=1.0)
    x_label: str = ""
    y_label: str = ""
    export_csv: bool = False

    @field_validator("output_format", mode="before")
    @classmethod
    def normalize_format(cls, v):
        """Accept 'JPEG', '.png' and similar spellings."""
        if isinstance(v, str):
            v = v.lower().strip().lstrip(".")
            return "jpg" if v == "jpeg" else v
        return v


class OutputConfig(AnavizBaseModel):
    """Output location."""
    base_dir: str = "output"


class LoggingConfig(AnavizBaseModel):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


# =============================================================================
# Main ParamConfig
# =============================================================================

class ParamConfig(AnavizBaseModel):
    """Complete expert configuration with all defaults.

    This is the single source of truth for all pipeline parameters.
    Every tunable parameter MUST have a default here.

    Usage
    -----
    This config is NOT used directly by runtime code. It serves as the
    base layer in config resolution:

        internal_cfg = resolve_config(param_cfg, user_cfg, cli_cfg)

    Runtime code only sees InternalConfig.
    """

    source: SourceConfig = Field(default_factory=SourceConfig)
    validator: ValidatorConfig = Field(default_factory=ValidatorConfig)
    analyzer: AnalyzerConfig = Field(default_factory=AnalyzerConfig)
    estimator: EstimatorConfig = Field(default_factory=EstimatorConfig)
    parable: ParableConfig = Field(default_factory=ParableConfig)
    pipeline: PipelineConfig = Field(default_factory=PipelineConfig)
    visualization: VisualizationConfig = Field(default_factory=VisualizationConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
