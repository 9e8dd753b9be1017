"""Series visualization.

Renders an analyzed Series to SVG, PNG or JPG with matplotlib. Density
curves are drawn as a filled area, every other Series as a line.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Dict, List, Optional

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from anaviz.core.series import Point, series_to_frame

if TYPE_CHECKING:
    from anaviz.schemas import InternalConfig

__all__ = ['SeriesPlotter']

logger = logging.getLogger(__name__)


class SeriesPlotter:
    """Draws a Series and saves the figure to the plots directory.

    **Appearance:**

    Figure size is given in pixels (``width_px`` x ``height_px`` at ``dpi``)
    as in a browser chart. The y axis starts at zero unless the data goes
    negative. Density analysis output gets a filled area under the curve.

    **Output:**

    ``plots/series_{run_time}.{svg|png|jpg}``. JPG has no transparency, so
    it is saved on a white background. With ``export_csv`` the Series is
    also written as ``.csv`` next to the image.

    Example usage::

        plotter = SeriesPlotter(config, output_dirs)
        path = plotter.render(series)
    """

    def __init__(self, config: "InternalConfig", output_dirs: Dict[str, Path]):
        viz = config.visualization
        self.width_px = viz.width_px
        self.height_px = viz.height_px
        self.dpi = viz.dpi
        self.output_format = viz.output_format
        self.line_color = viz.line_color
        self.line_width = viz.line_width
        self.fill_alpha = viz.fill_alpha
        self.x_label = viz.x_label
        self.y_label = viz.y_label
        self.export_csv = viz.export_csv
        self.fill_area = config.analyzer.method == "density"

        self.plots_dir = Path(output_dirs["plots"])
        self.last_path: Optional[Path] = None

        logger.debug("SeriesPlotter initialized (format=%s, %dx%d px)",
                     self.output_format, self.width_px, self.height_px)

    def render(self, series: List[Point], output_path: Optional[Path] = None) -> Path:
        """Draw ``series`` and save it.

        Parameters
        ----------
        series : list of Point
            Analyzed Series, drawn in the given order.
        output_path : Path, optional
            Explicit file path. Defaults to a timestamped file in ``plots_dir``.

        Returns
        -------
        Path
            Saved figure.
        """
        if output_path is None:
            stamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S_%f")
            output_path = self.plots_dir / f"series_{stamp}.{self.output_format}"
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        xs = [p.x for p in series]
        ys = [p.y for p in series]

        fig, ax = plt.subplots(
            figsize=(self.width_px / self.dpi, self.height_px / self.dpi),
            dpi=self.dpi,
        )
        try:
            if self.fill_area:
                ax.fill_between(xs, ys, color=self.line_color, alpha=self.fill_alpha)
            ax.plot(xs, ys, color=self.line_color, linewidth=self.line_width)

            if ys:
                ax.set_ylim(bottom=min(0.0, min(ys)))
            if self.x_label:
                ax.set_xlabel(self.x_label)
            if self.y_label:
                ax.set_ylabel(self.y_label)

            facecolor = "white" if self.output_format == "jpg" else "none"
            fig.savefig(output_path, format=self.output_format, facecolor=facecolor,
                        bbox_inches="tight")
        finally:
            plt.close(fig)

        if self.export_csv:
            csv_path = output_path.with_suffix(".csv")
            series_to_frame(series).to_csv(csv_path, index=False)
            logger.info("Series data saved: %s", csv_path)

        self.last_path = output_path
        logger.info("✓ Plot saved: %s (%d points)", output_path, len(series))
        return output_path
