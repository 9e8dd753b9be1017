"""CLIConfig: Command-line operational overrides.

Minimal configuration for operational parameters that commonly change
between runs: data source, stage selection, output path, verbosity.

This schema handles command-line arguments parsed by argparse.
"""

from typing import Literal, Optional
from pydantic import model_validator
from anaviz.schemas.base import AnavizBaseModel


class CLIConfig(AnavizBaseModel):
    """Command-line configuration overrides.

    Operational-only settings that override user and param configs.
    Highest priority in config resolution.

    Notes
    -----
    If the point analyzer is requested but no validator is given, the
    validator is set to "point" (schema responsibility, not runtime).

    Usage
    -----
        cli_cfg = CLIConfig(source="data/samples.csv", analyzer="parable")
        internal = resolve_config(param_cfg, user_cfg, cli_cfg)
    """

    source: Optional[str] = None
    validator: Optional[Literal["numeric", "point"]] = None
    analyzer: Optional[Literal["density", "parable", "point"]] = None
    base_dir: Optional[str] = None
    output_format: Optional[Literal["svg", "png", "jpg"]] = None
    no_plot: Optional[bool] = None
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = None

    @model_validator(mode="after")
    def infer_point_validator(self):
        """Point analysis needs point validation unless told otherwise."""
        if self.validator is None and self.analyzer == "point":
            self.validator = "point"
        return self

    def to_internal_overrides(self) -> dict:
        """Convert CLI config to internal config structure.

        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}

        if self.source is not None:
            overrides["source"] = {"path": self.source}
        if self.validator is not None:
            overrides["validator"] = {"kind": self.validator}
        if self.analyzer is not None:
            overrides["analyzer"] = {"method": self.analyzer}
        if self.base_dir is not None:
            overrides["output"] = {"base_dir": str(self.base_dir)}

        visualization = {}
        if self.output_format is not None:
            visualization["output_format"] = self.output_format
        if self.no_plot:
            visualization["enabled"] = False
        if visualization:
            overrides["visualization"] = visualization

        if self.log_level is not None:
            overrides["logging"] = {"level": self.log_level}

        return overrides
