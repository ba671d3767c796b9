"""
--------------------------------------------------------------------------------
<pmcmc project>
src/pmcmc/config/control.py

Build and validate the control for a particle MCMC run.
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from typing import Any, Optional

import numpy as np

from pmcmc.config.errors import (
    ChainWorkerMismatchError,
    InvalidScalarError,
    NotStrictlyIncreasingError,
    ThreadWorkerMismatchError,
    ThreadWorkerNotDivisibleError,
)
from pmcmc.config.schema import NEVER, RunConfig

logger = logging.getLogger(__name__)

STEPS_EACH_FRACTION = 10


def _as_integer(value: Any) -> Optional[int]:
    if isinstance(value, (bool, np.bool_)):
        return None
    if isinstance(value, (int, np.integer)):
        return int(value)
    if isinstance(value, (float, np.floating)) and math.isfinite(value) and float(value).is_integer():
        return int(value)
    return None


def _positive_integer(value: Any, field: str) -> int:
    out = _as_integer(value)
    if out is None or out < 1:
        raise InvalidScalarError(field, "a positive integer", value)
    return out


def _logical(value: Any, field: str) -> bool:
    if not isinstance(value, (bool, np.bool_)):
        raise InvalidScalarError(field, "a logical (True/False)", value)
    return bool(value)


def _rerun_every(value: Any) -> int | str:
    if isinstance(value, str) and value == NEVER:
        return NEVER
    if isinstance(value, (float, np.floating)) and value == math.inf:
        return NEVER
    return _positive_integer(value, "rerun_every")


def _strictly_increasing(values: Any, field: str) -> tuple[int, ...]:
    if isinstance(values, np.ndarray):
        values = values.tolist()
    if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
        raise InvalidScalarError(field, "a sequence of integers", values)
    out: list[int] = []
    for value in values:
        item = _as_integer(value)
        if item is None:
            raise InvalidScalarError(field, "a sequence of integers", values)
        out.append(item)
    for idx in range(1, len(out)):
        if out[idx] <= out[idx - 1]:
            raise NotStrictlyIncreasingError(field, idx, out[idx - 1], out[idx])
    return tuple(out)


def pmcmc_control(
    n_steps: int,
    *,
    n_chains: int = 1,
    n_threads_total: Optional[int] = None,
    n_workers: int = 1,
    n_steps_each: Optional[int] = None,
    rerun_every: int | float | str = NEVER,
    use_parallel_seed: bool = False,
    save_state: bool = True,
    save_restart: Optional[Sequence[int]] = None,
    save_trajectories: bool = False,
    progress: bool = False,
) -> RunConfig:
    """
    Construct the control for a pmcmc run, validating that the options
    work together.

    Only ``n_steps`` may be given by position. ``n_steps_each`` is ignored
    when ``n_workers`` is 1 (chains run in series and report once), and
    defaults to 10% of ``n_steps`` (rounded up) otherwise.
    ``n_threads_total`` is divided evenly across workers at start, so it must
    be a multiple of ``n_workers``. ``rerun_every`` accepts ``"never"`` or
    ``math.inf`` to disable reruns of the accepted point.

    Raises a ``ConfigError`` subclass naming the offending field; no partial
    config is produced.

    Examples
    --------
    >>> pmcmc_control(1000)
    >>> pmcmc_control(1000, n_chains=8, n_threads_total=16)
    >>> pmcmc_control(1000, n_chains=8, n_threads_total=16, n_workers=4)
    """
    n_steps = _positive_integer(n_steps, "n_steps")
    n_chains = _positive_integer(n_chains, "n_chains")
    n_workers = _positive_integer(n_workers, "n_workers")

    if n_workers == 1:
        if n_steps_each is not None and _as_integer(n_steps_each) != n_steps:
            logger.debug("Ignoring n_steps_each=%r with a single worker; using n_steps=%d", n_steps_each, n_steps)
        n_steps_each = n_steps
    elif n_steps_each is None:
        n_steps_each = -(-n_steps // STEPS_EACH_FRACTION)
    else:
        n_steps_each = _positive_integer(n_steps_each, "n_steps_each")

    if n_threads_total is not None:
        n_threads_total = _positive_integer(n_threads_total, "n_threads_total")
        if n_threads_total < n_workers:
            raise ThreadWorkerMismatchError(n_threads_total, n_workers)
        if n_threads_total % n_workers != 0:
            raise ThreadWorkerNotDivisibleError(n_threads_total, n_workers)

    rerun_every = _rerun_every(rerun_every)

    use_parallel_seed = _logical(use_parallel_seed, "use_parallel_seed")
    save_state = _logical(save_state, "save_state")
    save_trajectories = _logical(save_trajectories, "save_trajectories")
    progress = _logical(progress, "progress")

    if n_chains < n_workers:
        raise ChainWorkerMismatchError(n_chains, n_workers)
    if n_workers > 1 and n_chains % n_workers != 0:
        logger.debug("n_chains=%d is not a multiple of n_workers=%d; workers get uneven chains", n_chains, n_workers)

    if save_restart is not None:
        save_restart = _strictly_increasing(save_restart, "save_restart")

    return RunConfig(
        n_steps=n_steps,
        n_chains=n_chains,
        n_workers=n_workers,
        n_steps_each=n_steps_each,
        n_threads_total=n_threads_total,
        rerun_every=rerun_every,
        use_parallel_seed=use_parallel_seed,
        save_state=save_state,
        save_restart=save_restart,
        save_trajectories=save_trajectories,
        progress=progress,
    )
