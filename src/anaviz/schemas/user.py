"""UserConfig: Forgiving, minimal user-facing configuration.

This schema accepts user inputs in a variety of formats, with aliases
for common naming patterns (e.g., ANALYZER -> analyzer, BASE_DIR -> base_dir).

UserConfig is intentionally minimal - users only specify what they want
to override from the expert defaults. Validation is lenient to accept
both uppercase and lowercase keys, integers where floats are expected, etc.
"""

from typing import Literal, Optional
from pydantic import Field, field_validator, model_validator
from anaviz.schemas.base import AnavizBaseModel


class UserEstimatorConfig(AnavizBaseModel):
    """User-facing estimator config."""
    bandwidth_factor: Optional[float] = None
    bandwidth_exponent: Optional[float] = None
    sample_points: Optional[int] = None

    @field_validator("bandwidth_factor", "bandwidth_exponent", mode="before")
    @classmethod
    def coerce_float(cls, v):
        """Accept int or float."""
        if v is not None:
            return float(v)
        return v


class UserVisualizationConfig(AnavizBaseModel):
    """User-facing visualization config."""
    enabled: Optional[bool] = None
    width_px: Optional[int] = None
    height_px: Optional[int] = None
    dpi: Optional[int] = None
    output_format: Optional[str] = None
    line_color: Optional[str] = None
    line_width: Optional[float] = None
    fill_alpha: Optional[float] = None
    x_label: Optional[str] = None
    y_label: Optional[str] = None
    export_csv: Optional[bool] = None


class UserPipelineConfig(AnavizBaseModel):
    """User-facing orchestrator config."""
    cancel_superseded: Optional[bool] = None
    user_error_message: Optional[str] = None


class UserConfig(AnavizBaseModel):
    """User-facing configuration schema.

    Minimal, forgiving, and uses common aliases. Users only specify
    what they want to override from ParamConfig defaults.

    Usage
    -----
        user_cfg = UserConfig(
            source="data/samples.json",
            analyzer="density",
            base_dir="/tmp/anaviz",
            output_format="png",
        )

        internal = resolve_config(param_cfg, user_cfg, cli_cfg)
    """

    # Top-level operational settings
    source: Optional[str] = Field(None, alias="SOURCE")
    source_format: Optional[Literal["json", "csv"]] = Field(None, alias="SOURCE_FORMAT")
    validator: Optional[Literal["numeric", "point"]] = Field(None, alias="VALIDATOR")
    analyzer: Optional[str] = Field(None, alias="ANALYZER")
    base_dir: Optional[str] = Field(None, alias="BASE_DIR")
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = Field(
        None, alias="LOG_LEVEL"
    )

    # Analysis settings (flat aliases)
    sample_points: Optional[int] = Field(None, alias="SAMPLE_POINTS")
    bandwidth_factor: Optional[float] = Field(None, alias="BANDWIDTH_FACTOR")
    parable_policy: Optional[Literal["value", "index"]] = Field(None, alias="PARABLE_POLICY")
    cancel_superseded: Optional[bool] = Field(None, alias="CANCEL_SUPERSEDED")

    # Visualization settings (flat aliases)
    output_format: Optional[str] = Field(None, alias="OUTPUT_FORMAT")
    x_label: Optional[str] = Field(None, alias="X_LABEL")
    y_label: Optional[str] = Field(None, alias="Y_LABEL")

    # Nested overrides (advanced users)
    estimator: Optional[UserEstimatorConfig] = None
    visualization: Optional[UserVisualizationConfig] = None
    pipeline: Optional[UserPipelineConfig] = None

    model_config = AnavizBaseModel.model_config.copy()
    # Allow forgiving input dictionaries (ignore unknown legacy keys)
    model_config.update({"populate_by_name": True, "extra": "ignore"})

    @model_validator(mode="after")
    def infer_point_validator(self):
        """Point analysis needs point validation unless told otherwise."""
        if self.validator is None and self.analyzer == "point":
            self.validator = "point"
        return self

    @field_validator("bandwidth_factor", mode="before")
    @classmethod
    def coerce_numeric_fields(cls, v):
        """Accept int or float for numeric fields."""
        if v is not None:
            return float(v)
        return v

    @field_validator("analyzer", "validator", "parable_policy", mode="before")
    @classmethod
    def normalize_stage_names(cls, v):
        """Normalize stage names to lowercase."""
        if isinstance(v, str):
            return v.lower().strip()
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept 'debug' as well as 'DEBUG'."""
        if isinstance(v, str):
            return v.upper().strip()
        return v

    def to_internal_overrides(self) -> dict:
        """Convert flat UserConfig to nested InternalConfig structure.

        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}

        source = {}
        if self.source is not None:
            source["path"] = self.source
        if self.source_format is not None:
            source["format"] = self.source_format
        if source:
            overrides["source"] = source

        if self.validator is not None:
            overrides["validator"] = {"kind": self.validator}
        if self.analyzer is not None:
            overrides["analyzer"] = {"method": self.analyzer}
        if self.base_dir is not None:
            overrides["output"] = {"base_dir": str(self.base_dir)}
        if self.log_level is not None:
            overrides["logging"] = {"level": self.log_level}
        if self.parable_policy is not None:
            overrides["parable"] = {"policy": self.parable_policy}

        # Estimator section
        estimator = {}
        if self.sample_points is not None:
            estimator["sample_points"] = self.sample_points
        if self.bandwidth_factor is not None:
            estimator["bandwidth_factor"] = self.bandwidth_factor

        # Merge with explicit estimator config
        if self.estimator is not None:
            estimator.update(self.estimator.model_dump(exclude_none=True))

        if estimator:
            overrides["estimator"] = estimator

        # Pipeline section
        pipeline = {}
        if self.cancel_superseded is not None:
            pipeline["cancel_superseded"] = self.cancel_superseded
        if self.pipeline is not None:
            pipeline.update(self.pipeline.model_dump(exclude_none=True))
        if pipeline:
            overrides["pipeline"] = pipeline

        # Visualization section
        visualization = {}
        if self.output_format is not None:
            visualization["output_format"] = self.output_format
        if self.x_label is not None:
            visualization["x_label"] = self.x_label
        if self.y_label is not None:
            visualization["y_label"] = self.y_label

        # Merge with explicit visualization config
        if self.visualization is not None:
            visualization.update(self.visualization.model_dump(exclude_none=True))

        if visualization:
            overrides["visualization"] = visualization

        return overrides
