"""Pipeline modules.

- orchestrator: run lifecycle and stage sequencing
- run_state: observable PipelineRun and RunStatus
- stages: stage protocols and build_stages
- sources: in-memory and file data sources
"""

from anaviz.pipeline.orchestrator import PipelineOrchestrator
from anaviz.pipeline.run_state import PipelineRun, RunStatus
from anaviz.pipeline.stages import build_stages
from anaviz.pipeline.sources import file_source, static_source

__all__ = [
    "PipelineOrchestrator",
    "PipelineRun",
    "RunStatus",
    "build_stages",
    "file_source",
    "static_source",
]
