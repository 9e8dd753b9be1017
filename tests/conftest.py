"""Root-level pytest fixtures for the anaviz test suite.

Provides shared configuration fixtures following the Pydantic-based
architecture, plus hand-written fake stages for orchestrator tests.
All tests must use these fixtures instead of creating raw dict configs.
"""

import asyncio
import shutil
import tempfile
from pathlib import Path

import pytest

from anaviz.schemas import ParamConfig, UserConfig, resolve_config


# =============================================================================
# Configuration Fixtures (Pydantic-based)
# =============================================================================

@pytest.fixture
def param_config():
    """Expert configuration with all defaults."""
    return ParamConfig()


@pytest.fixture
def internal_config(param_config):
    """Fully validated runtime configuration (no overrides).

    Examples
    --------
    >>> def test_density_init(internal_config):
    ...     analyzer = DensityAnalyzer(internal_config)
    ...     assert analyzer.sample_points == 101
    """
    return resolve_config(param_config, None, None)


@pytest.fixture
def make_config(param_config):
    """Factory fixture for creating custom test configs.

    Returns a callable that accepts UserConfig-compatible kwargs.

    Examples
    --------
    >>> def test_custom_points(make_config):
    ...     config = make_config(sample_points=11)
    ...     assert DensityAnalyzer(config).sample_points == 11
    """
    def _make(**user_overrides):
        """Create InternalConfig with user overrides."""
        if user_overrides:
            user = UserConfig(**user_overrides)
            return resolve_config(param_config, user, None)
        else:
            return resolve_config(param_config, None, None)

    return _make


# =============================================================================
# Directory Fixtures
# =============================================================================

@pytest.fixture
def temp_dir():
    """Temporary directory that is cleaned up after test."""
    d = tempfile.mkdtemp()
    yield Path(d)
    shutil.rmtree(d, ignore_errors=True)


@pytest.fixture
def output_dirs(temp_dir):
    """Standard anaviz output directory structure (base, plots, logs)."""
    dirs = {
        "base": temp_dir,
        "plots": temp_dir / "plots",
        "logs": temp_dir / "logs",
    }

    for d in dirs.values():
        d.mkdir(parents=True, exist_ok=True)

    return dirs


# =============================================================================
# Fake Stages
# =============================================================================

class CountingSource:
    """Async source that records how often it was called."""

    def __init__(self, data, delay=0.0, error=None):
        self.data = data
        self.delay = delay
        self.error = error
        self.calls = 0

    async def __call__(self):
        self.calls += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.data


class GatedSource:
    """Async source that resolves only once ``release()`` is called."""

    def __init__(self, data):
        self.data = data
        self.started = asyncio.Event()
        self._gate = asyncio.Event()

    def release(self):
        self._gate.set()

    async def __call__(self):
        self.started.set()
        await self._gate.wait()
        return self.data


class RecordingVisualizer:
    """Visualizer that keeps every Series it was asked to render."""

    def __init__(self):
        self.rendered = []

    def render(self, series):
        self.rendered.append(series)


@pytest.fixture
def counting_source():
    """Factory for CountingSource instances."""
    return CountingSource


@pytest.fixture
def gated_source():
    """Factory for GatedSource instances."""
    return GatedSource


@pytest.fixture
def recording_visualizer():
    return RecordingVisualizer()
