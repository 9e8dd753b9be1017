"""Configuration resolution: ParamConfig < UserConfig < CLIConfig.

``resolve_config()`` is the only way runtime code obtains an
InternalConfig. Each layer may be given as a model, a plain dict or None.
"""

from typing import Optional, Type, TypeVar, Union

from pydantic import BaseModel

from anaviz.schemas.cli import CLIConfig
from anaviz.schemas.internal import InternalConfig
from anaviz.schemas.param import ParamConfig
from anaviz.schemas.user import UserConfig

M = TypeVar("M", bound=BaseModel)


def deep_merge(base: dict, *overrides: dict) -> dict:
    """Merge ``overrides`` into a copy of ``base``, recursing into dicts.

    >>> deep_merge({"a": 1, "b": {"c": 2}}, {"b": {"c": 3}})
    {'a': 1, 'b': {'c': 3}}
    """
    result = dict(base)
    for override in overrides:
        for key, value in override.items():
            if isinstance(result.get(key), dict) and isinstance(value, dict):
                result[key] = deep_merge(result[key], value)
            else:
                result[key] = value
    return result


def _as_model(model_cls: Type[M], cfg: Union[dict, M, None]) -> M:
    if isinstance(cfg, model_cls):
        return cfg
    return model_cls.model_validate(cfg or {})


def resolve_config(
    param_cfg: Optional[Union[dict, ParamConfig]] = None,
    user_cfg: Optional[Union[dict, UserConfig]] = None,
    cli_cfg: Optional[Union[dict, CLIConfig]] = None,
) -> InternalConfig:
    """Validate each layer and merge them into a frozen InternalConfig.

    Raises
    ------
    pydantic.ValidationError
        If any layer, or the merged result, is invalid.

    Examples
    --------
    >>> resolve_config(user_cfg={"ANALYZER": "parable"}).analyzer.method
    'parable'
    """
    param = _as_model(ParamConfig, param_cfg)
    user = _as_model(UserConfig, user_cfg)
    cli = _as_model(CLIConfig, cli_cfg)

    merged = deep_merge(
        param.model_dump(),
        user.to_internal_overrides(),
        cli.to_internal_overrides(),
    )
    return InternalConfig.model_validate(merged)
