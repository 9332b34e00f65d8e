"""Configuration management for vent."""

import os
from dataclasses import dataclass
from pathlib import Path

STORE_ENV_VAR = "VENT_TXT_CSV"
TEMPLATE_ENV_VAR = "VENT_TXT_HBS"

DEFAULT_STORE_PATH = Path("vent.csv")
DEFAULT_TEMPLATE_PATH = Path("template") / "vent.hbs"


@dataclass
class Config:
    """Vent configuration."""

    store_path: Path = DEFAULT_STORE_PATH
    template_path: Path = DEFAULT_TEMPLATE_PATH


def load_config() -> Config:
    """Load configuration from the environment."""
    config = Config()

    store_path = os.environ.get(STORE_ENV_VAR)
    if store_path:
        config.store_path = Path(store_path)

    template_path = os.environ.get(TEMPLATE_ENV_VAR)
    if template_path:
        config.template_path = Path(template_path)

    return config
