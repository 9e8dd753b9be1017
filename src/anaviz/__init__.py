"""`anaviz` - asynchronous validate / analyze / visualize pipeline.

Subpackages:
- core: Sample, Point and Series types
- contracts: Error types and fail-fast stage contracts
- analysis: Validators, statistical estimator, analyzers
- pipeline: Orchestrator, run state, sources
- visualization: Plotting
- schemas: Pydantic configuration
"""

__version__ = "0.1.0"
