"""Public facade for constructing and verifying superpermutations.

Both entry points validate their arguments, resolve a strategy (by
name, by instance, or from :func:`~superperm._config.get_default_strategy`)
and delegate to it.  Strategies are interchangeable: any object
satisfying :class:`~superperm._strategies.SuperpermStrategy` may be
passed directly.
"""

from __future__ import annotations

import logging
import math
import numbers
import warnings
from collections.abc import Sequence

from ._config import get_default_strategy, get_large_n_threshold
from ._strategies import SuperpermStrategy, resolve_strategy

logger = logging.getLogger(__name__)


def _validate_n_tokens(n_tokens: int) -> int:
    """Return *n_tokens* as an ``int`` after type and range checks.

    Raises:
        TypeError: If *n_tokens* is not an integer (``bool`` included).
        ValueError: If *n_tokens* is negative.
    """
    if isinstance(n_tokens, bool) or not isinstance(n_tokens, numbers.Integral):
        raise TypeError(
            f"'n_tokens' must be an integer, got {type(n_tokens).__name__}."
        )
    if n_tokens < 0:
        raise ValueError(f"'n_tokens' must be non-negative, got {n_tokens}.")
    return int(n_tokens)


def _resolve(strategy: str | SuperpermStrategy | None) -> SuperpermStrategy:
    if strategy is None:
        strategy = get_default_strategy()
    if isinstance(strategy, str):
        resolved = resolve_strategy(strategy)
    elif isinstance(strategy, SuperpermStrategy):
        resolved = strategy
    else:
        raise TypeError(
            "'strategy' must be a strategy name or a SuperpermStrategy, "
            f"got {type(strategy).__name__}."
        )
    logger.debug("Using %s strategy", resolved.name)
    return resolved


def create_superperm(
    n_tokens: int,
    *,
    strategy: str | SuperpermStrategy | None = None,
) -> list[int]:
    """Build a superpermutation of the tokens ``1..n_tokens``.

    The result contains every permutation of ``1..n_tokens`` as a
    contiguous window.  It is built greedily and is not guaranteed to
    be of minimal length.  For ``n_tokens == 0`` the result is empty.

    Args:
        n_tokens: Alphabet size *n*.
        strategy: ``"naive"``, ``"indexed"``, a strategy instance, or
            ``None`` for the configured default.

    Returns:
        The superpermutation as a list of tokens.

    Raises:
        TypeError: If *n_tokens* is not an integer.
        ValueError: If *n_tokens* is negative or *strategy* is unknown.

    Warns:
        UserWarning: If *n_tokens* reaches the configured large-n
            threshold, since every one of the ``n!`` permutations must
            be covered.
    """
    n_tokens = _validate_n_tokens(n_tokens)
    impl = _resolve(strategy)

    if n_tokens >= get_large_n_threshold():
        warnings.warn(
            f"Building a superpermutation for n_tokens={n_tokens} must cover "
            f"{math.factorial(n_tokens):,} permutations and may take a long time.",
            UserWarning,
            stacklevel=2,
        )

    return impl.create_superperm(n_tokens)


def check_superperm(
    sequence: Sequence[int],
    n_tokens: int,
    *,
    strategy: str | SuperpermStrategy | None = None,
) -> bool:
    """Return ``True`` if *sequence* contains every permutation of ``1..n_tokens``.

    A sequence shorter than *n_tokens* holds no full window and is
    reported as invalid rather than raising.  Tokens outside the
    alphabet are allowed; windows containing them simply match no
    permutation.

    Args:
        sequence: Candidate superpermutation.
        n_tokens: Alphabet size *n*.
        strategy: ``"naive"``, ``"indexed"``, a strategy instance, or
            ``None`` for the configured default.

    Raises:
        TypeError: If *n_tokens* is not an integer.
        ValueError: If *n_tokens* is negative or *strategy* is unknown.
    """
    n_tokens = _validate_n_tokens(n_tokens)
    impl = _resolve(strategy)
    tokens = list(sequence)
    valid = impl.check_superperm(tokens, n_tokens)
    logger.debug(
        "Sequence of length %d is %sa superpermutation for n=%d",
        len(tokens),
        "" if valid else "not ",
        n_tokens,
    )
    return valid
