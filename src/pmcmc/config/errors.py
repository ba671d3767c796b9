"""
--------------------------------------------------------------------------------
<pmcmc project>
src/pmcmc/config/errors.py

Errors raised while building a pmcmc run control.
--------------------------------------------------------------------------------
"""

from __future__ import annotations


class ConfigError(ValueError):
    """Raised when run control inputs are malformed or contradictory."""


class InvalidScalarError(ConfigError):
    """Raised when a field is not a scalar of the expected kind."""

    def __init__(self, field: str, expected: str, value: object) -> None:
        self.field = field
        self.expected = expected
        self.value = value
        super().__init__(f"'{field}' must be {expected} (got {value!r})")


class ChainWorkerMismatchError(ConfigError):
    def __init__(self, n_chains: int, n_workers: int) -> None:
        self.n_chains = n_chains
        self.n_workers = n_workers
        super().__init__(f"'n_chains' ({n_chains}) is less than 'n_workers' ({n_workers})")


class ThreadWorkerMismatchError(ConfigError):
    def __init__(self, n_threads_total: int, n_workers: int) -> None:
        self.n_threads_total = n_threads_total
        self.n_workers = n_workers
        super().__init__(f"'n_threads_total' ({n_threads_total}) is less than 'n_workers' ({n_workers})")


class ThreadWorkerNotDivisibleError(ConfigError):
    def __init__(self, n_threads_total: int, n_workers: int) -> None:
        self.n_threads_total = n_threads_total
        self.n_workers = n_workers
        super().__init__(f"'n_threads_total' ({n_threads_total}) is not a multiple of 'n_workers' ({n_workers})")


class NotStrictlyIncreasingError(ConfigError):
    def __init__(self, field: str, index: int, previous: int, current: int) -> None:
        self.field = field
        self.index = index
        super().__init__(
            f"'{field}' must be strictly increasing: element {index} ({current}) "
            f"is not greater than element {index - 1} ({previous})"
        )
