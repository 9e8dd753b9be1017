"""Asynchronous pipeline orchestration.

Runs source -> validator -> analyzer -> visualizer, one awaited stage at a
time, and exposes the lifecycle of the latest run as observable state.
"""

import asyncio
import itertools
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional, Sequence

from anaviz.contracts import ConfigurationError, SourceError, assert_series, require
from anaviz.core.series import Point
from anaviz.pipeline.run_state import PipelineRun, RunStatus
from anaviz.pipeline.stages import Analyzer, Validator, Visualizer, VisualizingAnalyzer
from anaviz.schemas import resolve_config

if TYPE_CHECKING:
    from anaviz.schemas import InternalConfig

__all__ = ['PipelineOrchestrator']

logger = logging.getLogger(__name__)


class PipelineOrchestrator:
    """Coordinates one data source and three stages.

    This is the main entry point for running ``anaviz``. Each call to
    :meth:`run`, :meth:`execute` or :meth:`start` begins a new run:

    1. **Source**: a zero-argument coroutine function producing raw data.
    2. **Validator**: ``validate_data(raw)`` returns the data unchanged or
       raises ``ValidationError``.
    3. **Analyzer**: ``analyze_data(validated)`` (or
       ``analyze_and_visualize_data``) returns a list of ``Point``.
    4. **Visualizer** (:meth:`execute` and :meth:`start` only): receives the
       Series unchanged via ``render(series)``.

    **Lifecycle:**

    ``state`` is the :class:`PipelineRun` of the most recently started run.
    Its status moves from ``loading`` to ``success`` or ``error``. On error
    the user only sees ``config.pipeline.user_error_message``; the original
    exception is kept in ``state.cause`` and logged.

    **Supersession:**

    Runs are tagged with increasing ids. A run that finishes after a newer
    one has started is discarded: it never replaces ``state`` and never
    reaches the visualizer. With ``pipeline.cancel_superseded`` the
    superseded task started via :meth:`start` is also cancelled.

    Example usage::

        orch = PipelineOrchestrator(config)
        series = await orch.execute(file_source("samples.json"),
                                    NumericValidator(), DensityAnalyzer(config),
                                    SeriesPlotter(config, output_dirs))
        if orch.state.status is RunStatus.ERROR:
            print(orch.state.error_message)
    """

    def __init__(self, config: Optional["InternalConfig"] = None):
        self.config = config if config is not None else resolve_config()
        self.state: Optional[PipelineRun] = None
        self._run_ids = itertools.count(1)
        self._task: Optional[asyncio.Task] = None
        self._task_run_id: Optional[int] = None

    def setup_logging(self, log_dir: Optional[Path] = None):
        """Configure root logging from ``config.logging.level``.

        Console handler always; file handler ``log_dir/anaviz.log`` when a
        directory is given.
        """
        log_level = getattr(logging, self.config.logging.level, logging.INFO)

        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        root = logging.getLogger()
        root.setLevel(log_level)
        for handler in root.handlers[:]:
            root.removeHandler(handler)

        ch = logging.StreamHandler(sys.stderr)
        ch.setLevel(log_level)
        ch.setFormatter(formatter)
        root.addHandler(ch)

        log_path = None
        if log_dir is not None:
            log_dir = Path(log_dir)
            log_dir.mkdir(parents=True, exist_ok=True)
            log_path = log_dir / "anaviz.log"
            fh = logging.FileHandler(log_path)
            fh.setLevel(log_level)
            fh.setFormatter(formatter)
            root.addHandler(fh)

        logger.info("Logging: level=%s, file=%s", self.config.logging.level, log_path)

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    async def run(self, source, validator, analyzer) -> Optional[List[Point]]:
        """Run source -> validator -> analyzer.

        Returns
        -------
        list of Point or None
            The analyzed Series, or None if the run failed or was superseded.
            Inspect ``state`` for status and diagnostics.
        """
        return await self._execute(self._begin_run(), source, (validator, analyzer),
                                   with_visualizer=False)

    async def execute(self, source, *stages) -> Optional[List[Point]]:
        """Run the full composition: exactly ``validator, analyzer, visualizer``.

        Any other number of stages ends the run in ``error`` with a
        ConfigurationError before the source is called.

        ``visualizer.render`` is called synchronously on the event loop
        thread and blocks the loop while it draws and writes. pyplot keeps
        global state, so renders are never moved to worker threads.
        """
        return await self._execute(self._begin_run(), source, stages,
                                   with_visualizer=True)

    def start(self, source, *stages) -> asyncio.Task:
        """Schedule :meth:`execute` as a task and return it.

        Must be called from a running event loop. The new run becomes the
        observed one immediately, before its task gets to run.
        """
        run = self._begin_run()
        previous = self._task
        if self.config.pipeline.cancel_superseded and previous is not None and not previous.done():
            logger.info("Cancelling superseded run %d", self._task_run_id)
            previous.cancel()

        self._task = asyncio.ensure_future(
            self._execute(run, source, stages, with_visualizer=True)
        )
        self._task_run_id = run.run_id
        return self._task

    # ------------------------------------------------------------------
    # Run lifecycle
    # ------------------------------------------------------------------

    def _begin_run(self) -> PipelineRun:
        run = PipelineRun(run_id=next(self._run_ids))
        self.state = run
        logger.debug("Run %d: loading", run.run_id)
        return run

    def _is_current(self, run: PipelineRun) -> bool:
        return self.state is run

    async def _execute(self, run: PipelineRun, source, stages: Sequence,
                       with_visualizer: bool) -> Optional[List[Point]]:
        try:
            validator, analyze, visualizer = self._check_composition(
                source, stages, with_visualizer
            )

            run.raw_data = await self._load(source)
            logger.debug("Run %d: source returned %s", run.run_id, type(run.raw_data).__name__)

            run.validated_data = await validator.validate_data(run.raw_data)
            series = await analyze(run.validated_data)
            assert_series(series)

            if not self._is_current(run):
                logger.debug("Run %d: discarding stale result (run %d is newer)",
                             run.run_id, self.state.run_id)
                return None

            if visualizer is not None:
                visualizer.render(series)

        except Exception as exc:
            self._fail(run, exc)
            return None

        run.analyzed_data = series
        run.status = RunStatus.SUCCESS
        run.finished_at = datetime.now(timezone.utc)
        logger.info("Run %d: success (%d points)", run.run_id, len(series))
        return series

    def _check_composition(self, source, stages: Sequence, with_visualizer: bool):
        """Structural preconditions, checked before anything is invoked.

        Order: source callable, stage count, stage capabilities.
        Returns ``(validator, analyze coroutine function, visualizer or None)``.
        """
        require(callable(source),
                "The data source must be an asynchronous function returning data.",
                ConfigurationError)

        if with_visualizer:
            require(len(stages) == 3,
                    "Pipeline expects exactly three stages: Validator, Analyzer, "
                    f"and Visualizer (got {len(stages)}).",
                    ConfigurationError)
            validator, analyzer, visualizer = stages
        else:
            require(len(stages) == 2,
                    f"Pipeline expects exactly one Validator and one Analyzer (got {len(stages)} stages).",
                    ConfigurationError)
            validator, analyzer = stages
            visualizer = None

        require(isinstance(validator, Validator),
                "Validator stage must provide an asynchronous validate_data function.",
                ConfigurationError)

        if isinstance(analyzer, Analyzer):
            analyze = analyzer.analyze_data
        elif isinstance(analyzer, VisualizingAnalyzer):
            analyze = analyzer.analyze_and_visualize_data
        else:
            raise ConfigurationError(
                "Analyzer stage must provide an asynchronous analyze_data or "
                "analyze_and_visualize_data function."
            )

        if with_visualizer:
            require(isinstance(visualizer, Visualizer),
                    "Visualizer stage must provide a render function.",
                    ConfigurationError)

        return validator, analyze, visualizer

    @staticmethod
    async def _load(source):
        try:
            return await source()
        except Exception as exc:
            raise SourceError(f"Error loading data: {exc}") from exc

    def _fail(self, run: PipelineRun, exc: Exception):
        run.status = RunStatus.ERROR
        run.error_message = self.config.pipeline.user_error_message
        run.cause = exc
        run.finished_at = datetime.now(timezone.utc)
        if self._is_current(run):
            logger.error("Run %d failed: %s", run.run_id, run.diagnostic)
        else:
            logger.debug("Run %d (superseded) failed: %s", run.run_id, run.diagnostic)
