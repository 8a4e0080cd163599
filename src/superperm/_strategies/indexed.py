"""Indexed strategy — work on permutation index values, never on a table.

Each permutation of ``1..n`` is identified by its index value in the
factorial number system (see :mod:`superperm.permutations`).  The
checklist is a boolean array over index values; permutations are only
decoded when their tokens are about to be appended.

Construction asks the mapper, for each trailing overlap width from
``n - 1`` down to 1, which index values start with the trailing tokens
and takes the lowest one not yet covered.  Verification asks the same
question for every width-``n`` window, which matches at most one value.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from ..permutations import PermutationMapper

logger = logging.getLogger(__name__)


class IndexedStrategy:
    """Construction and verification through :class:`PermutationMapper`.

    Construction tie-break: the lowest uncovered index value consistent
    with the trailing overlap.
    """

    name: str = "indexed"

    def create_superperm(self, n_tokens: int) -> list[int]:
        logger.debug("indexed: building superpermutation for n=%d", n_tokens)
        mapper = PermutationMapper.from_size(n_tokens)
        checklist = np.zeros(mapper.max_value, dtype=bool)

        # Index value 0 is the base sequence 1..n.
        superperm: list[int] = list(mapper.base)
        checklist[0] = True
        remaining = mapper.max_value - 1
        fallbacks = 0

        while remaining:
            value: int | None = None
            for overlap in range(n_tokens - 1, 0, -1):
                candidates = mapper.iter_possible_values(superperm[-overlap:])
                value = next((v for v in candidates if not checklist[v]), None)
                if value is not None:
                    superperm.extend(mapper.value_to_perm(value)[overlap:])
                    break
            if value is None:
                value = int(np.flatnonzero(~checklist)[0])
                superperm.extend(mapper.value_to_perm(value))
                fallbacks += 1
            checklist[value] = True
            remaining -= 1

        logger.debug(
            "indexed: built length-%d superpermutation for n=%d (%d full appends)",
            len(superperm),
            n_tokens,
            fallbacks,
        )
        return superperm

    def check_superperm(self, sequence: Sequence[int], n_tokens: int) -> bool:
        mapper = PermutationMapper.from_size(n_tokens)
        checklist = np.zeros(mapper.max_value, dtype=bool)
        tokens = list(sequence)

        for start in range(len(tokens) - n_tokens + 1):
            for value in mapper.iter_possible_values(tokens[start : start + n_tokens]):
                checklist[value] = True

        covered = int(checklist.sum())
        logger.debug("indexed: %d of %d permutations covered", covered, mapper.max_value)
        return covered == mapper.max_value
