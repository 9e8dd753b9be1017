import pandas as pd
import pytest

from anaviz.core import Point
from anaviz.visualization import SeriesPlotter

pytestmark = pytest.mark.unit

SERIES = [Point(0.0, 0.1), Point(1.0, 0.4), Point(2.0, 0.1)]


def test_plotter_reads_visualization_config(make_config, output_dirs):
    config = make_config(output_format="png", y_label="Density")
    plotter = SeriesPlotter(config, output_dirs)

    assert plotter.output_format == "png"
    assert plotter.y_label == "Density"
    assert plotter.width_px == 500
    assert plotter.fill_area is True


def test_non_density_output_is_not_filled(make_config, output_dirs):
    plotter = SeriesPlotter(make_config(analyzer="parable"), output_dirs)

    assert plotter.fill_area is False


@pytest.mark.parametrize("fmt", ["svg", "png", "jpg"])
def test_render_writes_file(make_config, output_dirs, fmt):
    plotter = SeriesPlotter(make_config(output_format=fmt), output_dirs)

    path = plotter.render(SERIES)

    assert path.exists()
    assert path.suffix == f".{fmt}"
    assert path.parent == output_dirs["plots"]
    assert plotter.last_path == path


def test_svg_output_is_svg(internal_config, output_dirs):
    path = SeriesPlotter(internal_config, output_dirs).render(SERIES)

    assert "<svg" in path.read_text()


def test_render_to_explicit_path(internal_config, output_dirs, temp_dir):
    target = temp_dir / "nested" / "curve.svg"

    path = SeriesPlotter(internal_config, output_dirs).render(SERIES, target)

    assert path == target
    assert target.exists()


def test_render_empty_series(internal_config, output_dirs):
    path = SeriesPlotter(internal_config, output_dirs).render([])

    assert path.exists()


def test_render_negative_values(make_config, output_dirs):
    plotter = SeriesPlotter(make_config(analyzer="point"), output_dirs)

    path = plotter.render([Point(0, -2), Point(1, 3)])

    assert path.exists()


def test_csv_export(make_config, output_dirs):
    config = make_config(visualization={"export_csv": True})
    path = SeriesPlotter(config, output_dirs).render(SERIES)

    df = pd.read_csv(path.with_suffix(".csv"))

    assert list(df.columns) == ["x", "y"]
    assert df["y"].tolist() == [0.1, 0.4, 0.1]


def test_no_csv_by_default(internal_config, output_dirs):
    path = SeriesPlotter(internal_config, output_dirs).render(SERIES)

    assert not path.with_suffix(".csv").exists()
