"""Data sources.

A source is a zero-argument coroutine function returning a Series. The
orchestrator receives it as a parameter; nothing here is registered or
looked up by name.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Callable, Optional

import pandas as pd

__all__ = ['static_source', 'file_source', 'read_series_file']

logger = logging.getLogger(__name__)


def static_source(values, delay: float = 0.0) -> Callable:
    """Source resolving to ``values``, optionally after ``delay`` seconds."""
    async def load():
        if delay:
            await asyncio.sleep(delay)
        return values
    return load


def read_series_file(path, fmt: Optional[str] = None) -> list:
    """Read a Series from a JSON or CSV file.

    JSON: a top-level list of numbers or of ``{"x": .., "y": ..}`` objects.
    CSV: a single column becomes a list of numbers; a file with ``x`` and
    ``y`` columns becomes a list of point mappings.

    Values are returned as found; validating them is the validator's job.
    """
    path = Path(path)
    fmt = (fmt or path.suffix.lstrip(".")).lower()

    if fmt == "json":
        with open(path, "r") as f:
            data = json.load(f)
        if not isinstance(data, list):
            raise ValueError(f"{path}: expected a JSON list, got {type(data).__name__}")
        return data

    if fmt == "csv":
        df = pd.read_csv(path)
        if {"x", "y"}.issubset(df.columns):
            return df[["x", "y"]].to_dict(orient="records")
        if len(df.columns) == 1:
            return df.iloc[:, 0].tolist()
        raise ValueError(
            f"{path}: expected one column or 'x'/'y' columns, got {list(df.columns)}"
        )

    raise ValueError(f"Unsupported source format {fmt!r} for {path}")


def file_source(path, fmt: Optional[str] = None) -> Callable:
    """Source reading ``path`` in a worker thread each time it is called."""
    async def load():
        logger.info("Loading series from %s", path)
        return await asyncio.to_thread(read_series_file, path, fmt)
    return load
