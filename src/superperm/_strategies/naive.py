"""Naive strategy — scan an explicit table of all permutations.

Every permutation of ``1..n`` is materialised up front as an
``(n!, n)`` integer array in lexicographic order (row 0 is the base
sequence ``1..n``).  Both operations then compare windows against the
whole table with vectorised NumPy comparisons.

Memory is O(n!·n), so this strategy is a reference implementation for
small *n*, not a scalable one.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Sequence

import numpy as np

logger = logging.getLogger(__name__)


def _all_permutations(n_tokens: int) -> np.ndarray:
    """Return every permutation of ``1..n_tokens`` as rows, lexicographic order.

    For ``n_tokens == 0`` the table holds a single empty row.
    """
    return np.array(
        list(itertools.permutations(range(1, n_tokens + 1))),
        dtype=np.intp,
    )


class NaiveStrategy:
    """Brute-force construction and verification over a permutation table.

    Construction tie-break: among uncovered permutations whose leading
    tokens equal the trailing overlap, the lexicographically smallest
    is chosen.
    """

    name: str = "naive"

    def create_superperm(self, n_tokens: int) -> list[int]:
        logger.debug("naive: building superpermutation for n=%d", n_tokens)
        perms = _all_permutations(n_tokens)
        checklist = np.zeros(len(perms), dtype=bool)

        superperm: list[int] = perms[0].tolist()
        checklist[0] = True
        remaining = len(perms) - 1
        fallbacks = 0

        while remaining:
            # Longest trailing overlap first.
            for overlap in range(n_tokens - 1, 0, -1):
                trailing = superperm[-overlap:]
                matches = ~checklist & np.all(perms[:, :overlap] == trailing, axis=1)
                hits = np.flatnonzero(matches)
                if hits.size:
                    row = int(hits[0])
                    superperm.extend(perms[row, overlap:].tolist())
                    break
            else:
                # No overlap fits: append the first uncovered permutation whole.
                row = int(np.flatnonzero(~checklist)[0])
                superperm.extend(perms[row].tolist())
                fallbacks += 1
            checklist[row] = True
            remaining -= 1

        logger.debug(
            "naive: built length-%d superpermutation for n=%d (%d full appends)",
            len(superperm),
            n_tokens,
            fallbacks,
        )
        return superperm

    def check_superperm(self, sequence: Sequence[int], n_tokens: int) -> bool:
        perms = _all_permutations(n_tokens)
        checklist = np.zeros(len(perms), dtype=bool)
        # Tokens outside 1..n become 0 so they match no permutation row.
        alphabet = set(range(1, n_tokens + 1))
        tokens = np.fromiter(
            (int(token) if token in alphabet else 0 for token in sequence),
            dtype=np.intp,
        )

        # No window fits when the sequence is shorter than n_tokens.
        for start in range(len(tokens) - n_tokens + 1):
            window = tokens[start : start + n_tokens]
            checklist |= np.all(perms == window, axis=1)

        covered = int(checklist.sum())
        logger.debug("naive: %d of %d permutations covered", covered, len(perms))
        return covered == len(perms)
