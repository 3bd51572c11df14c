"""Configuration loading through Hydra's Compose API."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from hydra import compose, initialize_config_dir
from omegaconf import DictConfig

CONFIG_DIR = Path(__file__).resolve().parent / "conf"
CONFIG_NAME = "config"


def load_config(overrides: Sequence[str] | None = None) -> DictConfig:
    """Compose the application config, applying Hydra-style *overrides*.

    >>> load_config(["engine.top_k=3"]).engine.top_k
    3
    """
    with initialize_config_dir(version_base=None, config_dir=str(CONFIG_DIR)):
        return compose(config_name=CONFIG_NAME, overrides=list(overrides or []))
