from anaviz.schemas.cli import CLIConfig
from anaviz.schemas.param import ParamConfig
from anaviz.schemas.resolve import resolve_config
from anaviz.schemas.user import UserConfig


def test_cli_overrides_do_not_mutate_user():
    user = UserConfig.model_validate({"ANALYZER": "parable", "BASE_DIR": "/tmp"})

    cli = CLIConfig.model_validate({"analyzer": "density"})

    internal = resolve_config(ParamConfig(), user, cli)

    # CLI should take precedence
    assert internal.analyzer.method == "density"

    # But the original user model should remain unchanged
    assert user.analyzer == "parable"


def test_cli_source_overrides_user_source():
    user = UserConfig(source="a.json", base_dir="/tmp")
    cli = CLIConfig(source="b.csv")

    config = resolve_config(ParamConfig(), user, cli)

    assert config.source.path == "b.csv"  # CLI wins
    assert config.output.base_dir == "/tmp"  # User value preserved


def test_cli_output_format_overrides_user():
    user = UserConfig(output_format="png", y_label="Density")
    cli = CLIConfig(output_format="svg")

    config = resolve_config(ParamConfig(), user, cli)

    assert config.visualization.output_format == "svg"
    assert config.visualization.y_label == "Density"


def test_cli_no_plot_disables_visualization():
    config = resolve_config(ParamConfig(), None, CLIConfig(no_plot=True))

    assert config.visualization.enabled is False


def test_cli_point_analyzer_implies_point_validator():
    cli = CLIConfig(analyzer="point")

    config = resolve_config(ParamConfig(), None, cli)

    assert config.validator.kind == "point"


def test_cli_precedence_no_user_config():
    """CLI should work even without UserConfig."""
    cli = CLIConfig(source="samples.json", log_level="DEBUG")

    config = resolve_config(ParamConfig(), None, cli)

    assert config.source.path == "samples.json"
    assert config.logging.level == "DEBUG"
    assert config.analyzer.method == "density"
