"""Wall-clock comparison of the registered strategies.

For every ``(strategy, n)`` pair the harness times construction and
verification of the constructed sequence, repeating each measurement
and keeping the median.  Results come back as a tidy
:class:`pandas.DataFrame`, one row per pair.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Sequence

import numpy as np
import pandas as pd

from ._strategies import available_strategies, resolve_strategy
from .core import check_superperm, create_superperm

logger = logging.getLogger(__name__)

COLUMNS = ["strategy", "n", "length", "create_time_s", "check_time_s", "valid"]


def _benchmark_one(strategy: str, n_tokens: int, repeats: int) -> dict:
    """Time one strategy at one *n* and return a result row."""
    impl = resolve_strategy(strategy)
    create_times: list[float] = []
    check_times: list[float] = []
    superperm: list[int] = []
    valid = False

    for _ in range(repeats):
        t0 = time.perf_counter()
        superperm = create_superperm(n_tokens, strategy=impl)
        create_times.append(time.perf_counter() - t0)

        t0 = time.perf_counter()
        valid = check_superperm(superperm, n_tokens, strategy=impl)
        check_times.append(time.perf_counter() - t0)

    return {
        "strategy": impl.name,
        "n": n_tokens,
        "length": len(superperm),
        "create_time_s": float(np.median(create_times)),
        "check_time_s": float(np.median(check_times)),
        "valid": valid,
    }


def benchmark_strategies(
    n_values: Iterable[int],
    strategies: Sequence[str] | None = None,
    repeats: int = 3,
) -> pd.DataFrame:
    """Time construction and verification for each strategy and *n*.

    Args:
        n_values: Token counts to benchmark.
        strategies: Strategy names; all registered strategies when
            ``None``.
        repeats: Runs per measurement; the median is reported.

    Returns:
        DataFrame with columns ``strategy``, ``n``, ``length``,
        ``create_time_s``, ``check_time_s`` and ``valid``.

    Raises:
        ValueError: If *repeats* is not positive or a strategy name is
            unknown.
    """
    if repeats < 1:
        raise ValueError(f"'repeats' must be at least 1, got {repeats}.")
    if strategies is None:
        strategies = available_strategies()

    rows: list[dict] = []
    for n_tokens in n_values:
        for strategy in strategies:
            row = _benchmark_one(strategy, n_tokens, repeats)
            logger.info(
                "%s n=%d: create %.4fs, check %.4fs",
                row["strategy"],
                n_tokens,
                row["create_time_s"],
                row["check_time_s"],
            )
            rows.append(row)

    return pd.DataFrame(rows, columns=COLUMNS)
