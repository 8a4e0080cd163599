"""Runtime configuration for the superperm package.

Controls which strategy the :func:`~superperm.create_superperm` and
:func:`~superperm.check_superperm` facades use when the caller does
not name one, and the token count from which construction warns about
the size of the ``n!`` search space.

Resolution order for the default strategy (first match wins):
    1. Programmatic override via :func:`set_default_strategy`.
    2. The ``SUPERPERM_STRATEGY`` environment variable.
    3. ``"indexed"``.

Valid strategy names are ``"naive"`` and ``"indexed"``
(case-insensitive).  ``"auto"`` clears a programmatic override.

Examples:
    Force the naive strategy from the shell::

        export SUPERPERM_STRATEGY=naive

    Or programmatically::

        import superperm
        superperm.set_default_strategy("naive")
"""

from __future__ import annotations

import os

_VALID_STRATEGIES = {"naive", "indexed", "auto"}
_DEFAULT_STRATEGY = "indexed"

# Construction at or above this many tokens emits a UserWarning.
LARGE_N_THRESHOLD = 9

# Sentinel indicating "no programmatic override has been set".
_strategy_override: str | None = None


def get_default_strategy() -> str:
    """Return the active default strategy name (``"naive"`` or ``"indexed"``).

    Resolution order:
        1. Value set by :func:`set_default_strategy` (unless ``"auto"``).
        2. ``SUPERPERM_STRATEGY`` environment variable.
        3. ``"indexed"``.
    """
    if _strategy_override is not None and _strategy_override != "auto":
        return _strategy_override

    env = os.environ.get("SUPERPERM_STRATEGY", "").strip().lower()
    if env in ("naive", "indexed"):
        return env

    return _DEFAULT_STRATEGY


def set_default_strategy(name: str) -> None:
    """Override the default strategy.

    Args:
        name: One of ``"naive"``, ``"indexed"``, or ``"auto"``
            (case-insensitive).  ``"auto"`` restores the default
            resolution order.

    Raises:
        ValueError: If *name* is not a recognised strategy.
    """
    global _strategy_override
    normalised = name.strip().lower()
    if normalised not in _VALID_STRATEGIES:
        raise ValueError(
            f"Unknown strategy '{name}'. Choose from: {sorted(_VALID_STRATEGIES)}"
        )
    _strategy_override = normalised


def get_large_n_threshold() -> int:
    """Token count at which construction starts warning.

    Read from ``SUPERPERM_WARN_N`` when it holds an integer, otherwise
    :data:`LARGE_N_THRESHOLD`.
    """
    env = os.environ.get("SUPERPERM_WARN_N", "").strip()
    try:
        return int(env)
    except ValueError:
        return LARGE_N_THRESHOLD
