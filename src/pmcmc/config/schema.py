"""
--------------------------------------------------------------------------------
<pmcmc project>
src/pmcmc/config/schema.py

Defines the resolved pmcmc run control schema.

The model only checks structural invariants; defaults that depend on other
fields are resolved by pmcmc.config.control.pmcmc_control.
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from typing import Annotated, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, field_validator, model_validator

NEVER = "never"

PositiveInt = Annotated[StrictInt, Field(ge=1)]
RerunEvery = Union[Literal["never"], PositiveInt]


class StrictBaseModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class RunConfig(StrictBaseModel):
    """Fully resolved control for a particle MCMC run.

    Instances are immutable. Build them with ``pmcmc_control`` rather than
    constructing directly; ``model_validate`` is intended for reloading a
    previously dumped config.
    """

    n_steps: PositiveInt
    n_chains: PositiveInt = 1
    n_workers: PositiveInt = 1
    n_steps_each: PositiveInt
    n_threads_total: Optional[PositiveInt] = None
    rerun_every: RerunEvery = NEVER
    use_parallel_seed: StrictBool = False
    save_state: StrictBool = True
    save_restart: Optional[Tuple[StrictInt, ...]] = None
    save_trajectories: StrictBool = False
    progress: StrictBool = False

    @field_validator("save_restart")
    @classmethod
    def _check_save_restart(cls, v: Optional[Tuple[int, ...]]) -> Optional[Tuple[int, ...]]:
        if v is None:
            return v
        for prev, cur in zip(v, v[1:]):
            if cur <= prev:
                raise ValueError("save_restart must be strictly increasing")
        return v

    @model_validator(mode="after")
    def _check_topology(self) -> "RunConfig":
        if self.n_chains < self.n_workers:
            raise ValueError("n_chains must be >= n_workers")
        if self.n_workers == 1 and self.n_steps_each != self.n_steps:
            raise ValueError("n_steps_each must equal n_steps when n_workers is 1")
        if self.n_threads_total is not None:
            if self.n_threads_total < self.n_workers:
                raise ValueError("n_threads_total must be >= n_workers")
            if self.n_threads_total % self.n_workers != 0:
                raise ValueError("n_threads_total must be a multiple of n_workers")
        return self

    @property
    def parallel(self) -> bool:
        return self.n_workers > 1

    @property
    def rerun_enabled(self) -> bool:
        return self.rerun_every != NEVER

    @property
    def n_threads_per_worker(self) -> Optional[int]:
        # None defers to the thread count configured on the particle filter
        if self.n_threads_total is None:
            return None
        return self.n_threads_total // self.n_workers

    @property
    def n_chunks(self) -> int:
        return -(-self.n_steps // self.n_steps_each)
