"""Core pipeline execution logic for the command line.

This module contains the actual runner, separated from argument parsing.
scripts/run_pipeline.py is a thin wrapper; this is the real implementation.
"""

import argparse
import asyncio
import importlib.util
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from anaviz.contracts import ConfigurationError
from anaviz.pipeline import PipelineOrchestrator, PipelineRun, RunStatus, build_stages, file_source
from anaviz.schemas import CLIConfig, ParamConfig, UserConfig, resolve_config
from anaviz.setup_directories import setup_output_directories

logger = logging.getLogger(__name__)


def load_user_config_dict(config_path: str) -> dict:
    """Load user config dict from Python file.

    Returns the raw dict before Pydantic validation.

    Raises
    ------
    FileNotFoundError
        If config file does not exist.
    ValueError
        If no CONFIG dict found in file.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")

    spec = importlib.util.spec_from_file_location("config_module", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    for name in dir(module):
        if name.startswith('CONFIG'):
            obj = getattr(module, name)
            if isinstance(obj, dict):
                return obj

    raise ValueError(f"No CONFIG dict found in {path}")


def run_analysis_pipeline(
    user_config_path: Optional[str] = None,
    cli_args: Optional[Dict[str, Any]] = None,
    verbose: bool = False,
) -> PipelineRun:
    """Execute the analysis pipeline once and return its final state.

    1. Loads and resolves configuration (Param < User < CLI)
    2. Sets up output directories and logging
    3. Builds validator, analyzer and visualizer from the config
    4. Runs the orchestrator on a file source

    Parameters
    ----------
    user_config_path : str, optional
        Python file with a CONFIG dict.
    cli_args : dict, optional
        CLI overrides: source, validator, analyzer, base_dir,
        output_format, no_plot, log_level. None values are ignored.
    verbose : bool, optional
        DEBUG logging and print the resolved config.

    Raises
    ------
    ConfigurationError
        If no data source is configured.
    """
    param_cfg = ParamConfig()
    user_cfg = None
    if user_config_path is not None:
        user_cfg = UserConfig.model_validate(load_user_config_dict(user_config_path))

    cli_args = dict(cli_args or {})
    if verbose and "log_level" not in cli_args:
        cli_args["log_level"] = "DEBUG"
    cli_dict = {k: v for k, v in cli_args.items() if v is not None}
    cli_cfg = CLIConfig.model_validate(cli_dict) if cli_dict else CLIConfig()

    config = resolve_config(param_cfg, user_cfg, cli_cfg)
    if config.source.path is None:
        raise ConfigurationError("No data source configured (pass SOURCE or set it in the config file).")

    output_dirs = setup_output_directories(config.output.base_dir)

    orchestrator = PipelineOrchestrator(config)
    orchestrator.setup_logging(output_dirs["logs"])

    logger.info("=" * 60)
    logger.info("anaviz analysis pipeline")
    logger.info("Source:    %s", config.source.path)
    logger.info("Validator: %s", config.validator.kind)
    logger.info("Analyzer:  %s", config.analyzer.method)
    logger.info("Output:    %s", output_dirs["base"])
    logger.info("=" * 60)

    if verbose:
        print(json.dumps(config.model_dump(), indent=2))

    validator, analyzer, visualizer = build_stages(config, output_dirs)
    source = file_source(config.source.path, config.source.format)

    if visualizer is None:
        asyncio.run(orchestrator.run(source, validator, analyzer))
    else:
        asyncio.run(orchestrator.execute(source, validator, analyzer, visualizer))

    return orchestrator.state


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Validate, analyze and plot a data series")
    parser.add_argument("source", nargs="?", help="JSON or CSV file with the series")
    parser.add_argument("-c", "--config", help="Path to user config file (Python, CONFIG dict)")
    parser.add_argument("--validator", choices=["numeric", "point"], help="Validator stage")
    parser.add_argument("--analyzer", choices=["density", "parable", "point"], help="Analyzer stage")
    parser.add_argument("--base-dir", help="Output directory")
    parser.add_argument("--format", dest="output_format", choices=["svg", "png", "jpg"],
                        help="Plot file format")
    parser.add_argument("--no-plot", action="store_true", help="Skip the visualizer")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    state = run_analysis_pipeline(
        args.config,
        cli_args={
            "source": args.source,
            "validator": args.validator,
            "analyzer": args.analyzer,
            "base_dir": args.base_dir,
            "output_format": args.output_format,
            "no_plot": args.no_plot or None,
        },
        verbose=args.verbose,
    )

    if state.status is RunStatus.ERROR:
        print(f"Error: {state.error_message}")
        return 1

    print(f"Analyzed {len(state.analyzed_data)} points")
    return 0
