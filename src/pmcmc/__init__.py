"""pmcmc package root."""

from __future__ import annotations

from pmcmc.config.control import pmcmc_control
from pmcmc.config.errors import (
    ChainWorkerMismatchError,
    ConfigError,
    InvalidScalarError,
    NotStrictlyIncreasingError,
    ThreadWorkerMismatchError,
    ThreadWorkerNotDivisibleError,
)
from pmcmc.config.schema import NEVER, RunConfig

__all__ = [
    "NEVER",
    "ChainWorkerMismatchError",
    "ConfigError",
    "InvalidScalarError",
    "NotStrictlyIncreasingError",
    "RunConfig",
    "ThreadWorkerMismatchError",
    "ThreadWorkerNotDivisibleError",
    "pmcmc_control",
]
