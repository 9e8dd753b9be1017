"""anaviz user configuration.

This is the user-facing configuration file. Modify settings here to customize
the pipeline behavior. Expert defaults live in anaviz.schemas.param.

Usage:
    python scripts/run_pipeline.py --config scripts/user_config.py
    python scripts/run_pipeline.py data.csv --config scripts/user_config.py --analyzer parable
"""

CONFIG = {
    # ========================================================================
    # DATA SOURCE
    # ========================================================================
    "SOURCE": "data/samples.json",   # JSON list or CSV (one column, or x/y columns)
    "SOURCE_FORMAT": None,           # "json" / "csv"; None = from file suffix

    # ========================================================================
    # STAGES
    # ========================================================================
    "VALIDATOR": "numeric",          # "numeric" or "point"
    "ANALYZER": "density",           # "density", "parable" or "point"
    "PARABLE_POLICY": "value",       # x = value ("value") or position ("index")

    # ========================================================================
    # DENSITY ESTIMATION
    # ========================================================================
    "SAMPLE_POINTS": 101,            # points on the density curve
    "BANDWIDTH_FACTOR": 1.06,        # Silverman's rule of thumb factor

    # ========================================================================
    # OUTPUT
    # ========================================================================
    "BASE_DIR": "output",
    "OUTPUT_FORMAT": "svg",          # "svg", "png" or "jpg"
    "X_LABEL": "",
    "Y_LABEL": "Density",
    "LOG_LEVEL": "INFO",
}
