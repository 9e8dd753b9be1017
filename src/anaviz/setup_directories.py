"""
Directory setup for the analysis pipeline.

All outputs of a run live under one base directory:
- plots: rendered charts (and optional CSV exports)
- logs: pipeline log file
"""

from pathlib import Path


def setup_output_directories(base_output_dir="output"):
    """
    Set up organized output directory structure.

    Parameters
    ----------
    base_output_dir : str or Path
        Base output directory; ``~`` is expanded.

    Returns
    -------
    dict
        Dictionary with paths: 'base', 'plots', 'logs'
    """
    base_output_dir = Path(base_output_dir).expanduser().resolve()

    directories = {
        "base": base_output_dir,
        "plots": base_output_dir / "plots",
        "logs": base_output_dir / "logs",
    }

    for path in directories.values():
        path.mkdir(parents=True, exist_ok=True)

    return directories
