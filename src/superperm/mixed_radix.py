"""Mixed-radix number systems.

A mixed-radix system is a positional numbering scheme in which every
position carries its own base.  Given bases ``[b_0, b_1, …, b_{k-1}]``
(least-significant position first), every integer ``v`` in
``[0, b_0·b_1·…·b_{k-1})`` has exactly one representation
``[d_0, d_1, …, d_{k-1}]`` with ``0 <= d_i < b_i``:

    v = d_0 + d_1·b_0 + d_2·b_0·b_1 + ··· + d_{k-1}·b_0·…·b_{k-2}

The factorial number system used by the permutation mapper is the
special case ``[n, n-1, …, 1]``, whose capacity is exactly ``n!``.

Example for bases ``[5, 4, 3]``:

    54 → 54 % 5 = 4, 54 // 5 = 10
         10 % 4 = 2, 10 // 4 = 2
          2 % 3 = 2
       → [4, 2, 2]

A zero base is accepted and collapses the number space: ``max_value``
becomes 0 and iteration yields nothing.
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence

# A single number expressed in a mixed-radix system.
Representation = list[int]


class MixedRadix:
    """Immutable mixed-radix number system.

    Iterating over an instance yields every representation for the
    values ``0 … max_value - 1`` in increasing value order.  Iteration
    is restartable: each ``iter()`` call starts a fresh pass.

    Attributes:
        bases: Per-position bases, least-significant first.
        max_value: Number of distinct representable values (the
            product of all bases).
    """

    __slots__ = ("_bases", "_max_value")

    def __init__(self, bases: Sequence[int]) -> None:
        bases = tuple(int(b) for b in bases)
        if any(b < 0 for b in bases):
            raise ValueError(f"Mixed-radix bases must be non-negative, got {list(bases)}.")
        self._bases = bases
        self._max_value = math.prod(bases)

    @property
    def bases(self) -> tuple[int, ...]:
        return self._bases

    @property
    def max_value(self) -> int:
        return self._max_value

    def encode(self, value: int) -> Representation:
        """Return the representation of *value*.

        Only values in ``[0, max_value)`` have a meaningful
        representation; larger values silently wrap in the most
        significant position and must not be relied upon.
        """
        representation: Representation = []
        carry = value
        for base in self._bases:
            carry, digit = divmod(carry, base)
            representation.append(digit)
        return representation

    def decode(self, representation: Sequence[int]) -> int:
        """Return the value of *representation*.  Inverse of :meth:`encode`.

        Raises:
            ValueError: If *representation* does not have one digit
                per position.
        """
        if len(representation) != len(self._bases):
            raise ValueError(
                f"Representation has {len(representation)} digits but the "
                f"system has {len(self._bases)} positions."
            )
        total = 0
        place = 1
        for digit, base in zip(representation, self._bases):
            total += digit * place
            place *= base
        return total

    def __iter__(self) -> Iterator[Representation]:
        for value in range(self._max_value):
            yield self.encode(value)

    def __len__(self) -> int:
        return self._max_value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MixedRadix):
            return NotImplemented
        return self._bases == other._bases

    def __hash__(self) -> int:
        return hash(self._bases)

    def __repr__(self) -> str:
        return f"MixedRadix({list(self._bases)})"
