"""
--------------------------------------------------------------------------------
<pmcmc project>
src/pmcmc/services/control_service.py

Summarize a resolved run control, including derived scheduling facts.
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from typing import Any, Dict, List

from pmcmc.config.schema import RunConfig


def chains_per_worker(cfg: RunConfig) -> List[int]:
    base, extra = divmod(cfg.n_chains, cfg.n_workers)
    return [base + 1 if idx < extra else base for idx in range(cfg.n_workers)]


def summarize_control(cfg: RunConfig) -> Dict[str, Any]:
    summary: Dict[str, Any] = cfg.model_dump(mode="json")
    summary.update(
        {
            "parallel": cfg.parallel,
            "n_threads_per_worker": cfg.n_threads_per_worker,
            "rerun_enabled": cfg.rerun_enabled,
            "n_chunks": cfg.n_chunks,
            "chains_per_worker": chains_per_worker(cfg),
        }
    )
    return summary
