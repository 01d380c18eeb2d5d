"""Configuration file handling for the Kumo CLI."""

from pathlib import Path
from typing import Optional

import click
import toml
from pydantic import BaseModel, Field

from kumo.models import IchimokuParameters, TimeFrame

CONFIG_DIR = Path.home() / ".config" / "kumo"
CONFIG_PATH = CONFIG_DIR / "config.toml"

TEMPLATE = {
    "ichimoku": {
        "short_period": 9,
        "medium_period": 26,
        "long_period": 52,
    },
    "generator": {
        "count": 256,
        "timeframe": "1min",
    },
}


def load_config(path: Optional[Path] = None) -> dict:
    """Load the TOML configuration.

    Args:
        path: Config file path. Defaults to ~/.config/kumo/config.toml.

    Returns:
        Configuration dictionary, empty if the file does not exist.

    Raises:
        click.ClickException: If the file exists but is not valid TOML.
    """
    config_path = Path(path) if path else CONFIG_PATH

    if not config_path.exists():
        return {}

    try:
        return toml.load(config_path)
    except toml.TomlDecodeError as e:
        raise click.ClickException(f"Invalid config file {config_path}: {e}")


def create_template_config(path: Optional[Path] = None) -> Path:
    """Write a template configuration file.

    Args:
        path: Destination. Defaults to ~/.config/kumo/config.toml.

    Returns:
        Path of the written file.
    """
    config_path = Path(path) if path else CONFIG_PATH
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        toml.dump(TEMPLATE, f)

    return config_path


def parameters_from_config(config: dict, **overrides: Optional[int]) -> IchimokuParameters:
    """Build Ichimoku parameters from config values and CLI overrides.

    Overrides that are None fall back to the config file, then to the
    model defaults.

    Raises:
        pydantic.ValidationError: If the resulting windows are invalid.
    """
    values = dict(config.get("ichimoku", {}))
    values.update({k: v for k, v in overrides.items() if v is not None})
    return IchimokuParameters(**values)


class GeneratorConfig(BaseModel):
    """Settings of the `[generator]` config section."""

    count: int = Field(default=256, ge=0, strict=True, description="Candles to generate")
    seed: Optional[int] = Field(default=None, strict=True, description="Random seed")
    timeframe: TimeFrame = Field(default=TimeFrame.ONE_MINUTE, description="Candle interval")

    model_config = {"frozen": True, "extra": "forbid"}


def generator_from_config(config: dict, **overrides) -> GeneratorConfig:
    """Build generator settings from config values and CLI overrides.

    Raises:
        pydantic.ValidationError: If a value has the wrong type or range.
    """
    values = dict(config.get("generator", {}))
    values.update({k: v for k, v in overrides.items() if v is not None})
    return GeneratorConfig(**values)
