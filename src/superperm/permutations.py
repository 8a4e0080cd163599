"""Bijection between permutation index values and permutations.

Why a mixed-radix system?
-------------------------
Build a permutation of the base sequence ``[1, 2, 3]`` by dropping its
tokens, in order, into an output of three empty slots:

* ``1`` goes into one of the 3 free slots   (e.g. ``[_, 1, _]``)
* ``2`` goes into one of the 2 free slots   (e.g. ``[2, 1, _]``)
* ``3`` goes into the last free slot        (``[2, 1, 3]``)

The choice made for token *i* is an offset among the slots still free,
so it is a digit in ``[0, n - i)``.  Reading the offsets as a number
in the mixed-radix system with bases ``[n, n-1, …, 1]`` gives every
permutation a unique index value in ``[0, n!)``:

    [1, 2, 3] ↔ digits (0, 0, 0) ↔ 0
    [2, 1, 3] ↔ digits (1, 0, 0) ↔ 1
    [3, 2, 1] ↔ digits (2, 1, 0) ↔ 5

Value 0 is always the base sequence itself.

Prefix ranges
-------------
Because a token's digit only counts *free* slots to its left, the
tokens of a known prefix have fixed digits, while every token missing
from the prefix may take any digit between "first free slot after the
prefix" and "last free slot".  Those two extremes are exactly the
digits of the prefix completed with the missing tokens in ascending and
in descending base order.  :meth:`PermutationMapper.iter_possible_values`
walks the box of digits between the two extremes with a derived
:class:`~superperm.mixed_radix.MixedRadix` system, so the values
consistent with a prefix are produced without enumerating any
permutation.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from .mixed_radix import MixedRadix, Representation


class PermutationMapper:
    """Map index values in ``[0, n!)`` to permutations of a base sequence.

    The mapper is immutable after construction and may be shared
    between independent construction or verification runs.

    Attributes:
        base: The base sequence (the permutation with index value 0).
        size: Number of tokens, ``len(base)``.
        radix: Factorial-base system ``[n, n-1, …, 1]``.
    """

    def __init__(self, base: Sequence[int]) -> None:
        base = tuple(base)
        if len(set(base)) != len(base):
            raise ValueError(f"Base sequence must not repeat tokens, got {list(base)}.")
        self.base: tuple[int, ...] = base
        self.size: int = len(base)
        self.radix = MixedRadix(range(self.size, 0, -1))

    @classmethod
    def from_size(cls, n_tokens: int) -> PermutationMapper:
        """Mapper over the dense alphabet ``1..n_tokens``."""
        return cls(range(1, n_tokens + 1))

    @property
    def max_value(self) -> int:
        """Number of permutations, ``n!``."""
        return self.radix.max_value

    def __repr__(self) -> str:
        return f"PermutationMapper({list(self.base)})"

    # ------------------------------------------------------------------ #
    # Digit-level mapping
    # ------------------------------------------------------------------ #

    def encoded_to_perm(self, digits: Sequence[int]) -> list[int]:
        """Build the permutation described by a factorial-base representation.

        Args:
            digits: One insertion offset per base token, digit *i* in
                ``[0, n - i)``.

        Returns:
            The permutation as a list of tokens.
        """
        output: list[int] = [0] * self.size
        free = list(range(self.size))
        for token, shift in zip(self.base, digits, strict=True):
            output[free.pop(shift)] = token
        return output

    def perm_to_encoded(self, perm: Sequence[int]) -> Representation | None:
        """Recover the insertion offsets of *perm*.

        Returns ``None`` when *perm* is not a permutation of the base
        sequence: wrong length, a repeated token, or a token outside
        the alphabet.
        """
        if len(perm) != self.size:
            return None
        free = list(range(self.size))
        digits: Representation = []
        for token in self.base:
            for shift, position in enumerate(free):
                if perm[position] == token:
                    break
            else:
                return None
            del free[shift]
            digits.append(shift)
        return digits

    # ------------------------------------------------------------------ #
    # Value-level mapping
    # ------------------------------------------------------------------ #

    def value_to_perm(self, value: int) -> list[int]:
        """Return the permutation with index *value*.

        Raises:
            ValueError: If *value* is outside ``[0, n!)``.
        """
        if not 0 <= value < self.max_value:
            raise ValueError(
                f"Index value {value} is outside [0, {self.max_value}) "
                f"for {self.size} tokens."
            )
        return self.encoded_to_perm(self.radix.encode(value))

    def perm_to_value(self, perm: Sequence[int]) -> int | None:
        """Return the index value of *perm*, or ``None`` if it is not a permutation."""
        digits = self.perm_to_encoded(perm)
        if digits is None:
            return None
        return self.radix.decode(digits)

    def iter_possible_values(self, prefix: Sequence[int]) -> Iterator[int]:
        """Yield, in ascending order, every index value whose permutation starts with *prefix*.

        An empty prefix matches all ``n!`` values.  A prefix that is
        longer than ``n``, repeats a token, or contains a token outside
        the alphabet matches nothing.

        Args:
            prefix: Leading tokens of the target permutation.

        Yields:
            Index values in ``[0, n!)``.
        """
        prefix = list(prefix)
        if not prefix:
            yield from range(self.max_value)
            return
        if len(prefix) > self.size:
            return

        seen = set(prefix)
        missing = [token for token in self.base if token not in seen]
        low = self.perm_to_encoded(prefix + missing)
        high = self.perm_to_encoded(prefix + missing[::-1])
        if low is None or high is None:
            return

        spans = MixedRadix([hi - lo + 1 for lo, hi in zip(low, high)])
        for offsets in spans:
            yield self.radix.decode([lo + off for lo, off in zip(low, offsets)])

    def possible_values_for(self, prefix: Sequence[int]) -> list[int]:
        """List form of :meth:`iter_possible_values`."""
        return list(self.iter_possible_values(prefix))
