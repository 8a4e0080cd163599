"""Superpermutation strategy registry and protocol.

Each strategy implements the same two-operation contract:

* ``create_superperm(n_tokens)`` — greedily build *a* sequence over
  ``1..n_tokens`` that contains every permutation as a contiguous
  window (not necessarily the shortest one).
* ``check_superperm(sequence, n_tokens)`` — slide a width-``n_tokens``
  window over *sequence* and report whether every permutation was
  seen.

Two strategies are registered:

* ``"naive"`` — materialises all ``n!`` permutations as a NumPy array
  and scans it.
* ``"indexed"`` — never materialises the permutations; it asks a
  :class:`~superperm.permutations.PermutationMapper` which index values
  are consistent with a window or trailing overlap.

Both must agree on ``check_superperm``.  ``create_superperm`` outputs
may differ, because each breaks ties in its own enumeration order.

Strategies assume validated input (a non-negative integer
``n_tokens``); validation happens in :mod:`superperm.core`.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

# ------------------------------------------------------------------ #
# Strategy protocol
# ------------------------------------------------------------------ #


@runtime_checkable
class SuperpermStrategy(Protocol):
    """Interface that every superpermutation strategy must satisfy."""

    name: str
    """Registry key of the strategy."""

    def create_superperm(self, n_tokens: int) -> list[int]:
        """Return a superpermutation of ``1..n_tokens``."""
        ...

    def check_superperm(self, sequence: Sequence[int], n_tokens: int) -> bool:
        """Return ``True`` if *sequence* contains every permutation of ``1..n_tokens``."""
        ...


# ------------------------------------------------------------------ #
# Registry
# ------------------------------------------------------------------ #

# Populated lazily so that importing the protocol does not pull in
# every implementation.

_STRATEGY_REGISTRY: dict[str, type[SuperpermStrategy]] = {}


def _ensure_registry() -> None:
    """Populate the registry on first access."""
    if _STRATEGY_REGISTRY:
        return

    from .indexed import IndexedStrategy
    from .naive import NaiveStrategy

    _STRATEGY_REGISTRY.update(
        {
            "naive": NaiveStrategy,
            "indexed": IndexedStrategy,
        }
    )


def available_strategies() -> list[str]:
    """Return the registered strategy names, sorted."""
    _ensure_registry()
    return sorted(_STRATEGY_REGISTRY)


def resolve_strategy(name: str) -> SuperpermStrategy:
    """Return a strategy instance for the given name.

    Args:
        name: ``"naive"`` or ``"indexed"`` (case-insensitive).

    Raises:
        ValueError: If *name* is not recognised.
    """
    _ensure_registry()
    cls = _STRATEGY_REGISTRY.get(name.strip().lower())
    if cls is None:
        valid = ", ".join(sorted(_STRATEGY_REGISTRY))
        raise ValueError(f"Invalid strategy '{name}'. Choose from: {valid}.")
    return cls()


__all__ = [
    "SuperpermStrategy",
    "available_strategies",
    "resolve_strategy",
]
