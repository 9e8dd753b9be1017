"""Command-line interface modules for anaviz pipeline execution.

This package contains core execution logic, making scripts/ optional and deletable.
"""

from anaviz.cli.run_analysis import run_analysis_pipeline, main

__all__ = ['run_analysis_pipeline', 'main']
