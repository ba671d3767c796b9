"""
--------------------------------------------------------------------------------
<pmcmc project>
src/pmcmc/config/load.py

Read and write pmcmc run controls as YAML.
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import inspect
from pathlib import Path
from typing import Any

import yaml

from pmcmc.config.control import pmcmc_control
from pmcmc.config.errors import ConfigError, InvalidScalarError
from pmcmc.config.schema import RunConfig

ROOT_KEY = "pmcmc_control"
CONTROL_KEYS = tuple(inspect.signature(pmcmc_control).parameters)


def _read_block(path: Path) -> dict[str, Any]:
    try:
        raw = yaml.safe_load(Path(path).read_text())
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse run control YAML at {path}: {exc}") from exc
    if not isinstance(raw, dict) or ROOT_KEY not in raw:
        raise ConfigError(f"Run control config requires root key: {ROOT_KEY}")
    payload = raw[ROOT_KEY]
    if not isinstance(payload, dict):
        raise ConfigError(f"{ROOT_KEY} must be a mapping")
    return payload


def load_control(path: Path) -> RunConfig:
    payload = _read_block(path)
    unknown = sorted(str(key) for key in payload if key not in CONTROL_KEYS)
    if unknown:
        raise ConfigError(f"Unknown {ROOT_KEY} keys: {', '.join(unknown)}")
    if "n_steps" not in payload:
        raise InvalidScalarError("n_steps", "a positive integer", None)
    options = dict(payload)
    return pmcmc_control(options.pop("n_steps"), **options)


def load_resolved(path: Path) -> RunConfig:
    """Load a control written by ``dump_control`` without re-resolving defaults."""
    return RunConfig.model_validate(_read_block(path))


def dump_control(cfg: RunConfig, path: Path | None = None) -> str:
    text = yaml.safe_dump({ROOT_KEY: cfg.model_dump(mode="json")}, sort_keys=False)
    if path is not None:
        Path(path).write_text(text)
    return text
