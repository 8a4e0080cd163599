"""Shared behaviour checks run against every registered strategy."""

from __future__ import annotations

import numpy as np
import pytest

from superperm._strategies import (
    SuperpermStrategy,
    available_strategies,
    resolve_strategy,
)
from superperm._strategies.indexed import IndexedStrategy
from superperm._strategies.naive import NaiveStrategy

# ------------------------------------------------------------------ #
# Fixtures
# ------------------------------------------------------------------ #

_SEED = 42

SUPERPERM_3 = [1, 2, 3, 1, 2, 1, 3, 2, 1]
SUPERPERM_4 = [
    1, 2, 3, 4, 1, 2, 3, 1, 4, 2, 3, 1, 2, 4, 3, 1, 2,
    1, 3, 4, 2, 1, 3, 2, 4, 1, 3, 2, 1, 4, 3, 2, 1,
]  # fmt: skip


@pytest.fixture(params=["naive", "indexed"])
def strategy(request) -> SuperpermStrategy:
    return resolve_strategy(request.param)


# ------------------------------------------------------------------ #
# Registry
# ------------------------------------------------------------------ #


class TestRegistry:
    """Tests for strategy lookup."""

    def test_available(self):
        assert available_strategies() == ["indexed", "naive"]

    def test_resolve_types(self):
        assert isinstance(resolve_strategy("naive"), NaiveStrategy)
        assert isinstance(resolve_strategy("Indexed"), IndexedStrategy)

    def test_satisfies_protocol(self):
        for name in available_strategies():
            assert isinstance(resolve_strategy(name), SuperpermStrategy)

    def test_unknown_raises(self):
        with pytest.raises(ValueError, match="Invalid strategy"):
            resolve_strategy("genetic")


# ------------------------------------------------------------------ #
# Contract shared by every strategy
# ------------------------------------------------------------------ #


class TestCheck:
    """Verification behaviour."""

    def test_invalid_sequence(self, strategy):
        assert not strategy.check_superperm([1, 2, 3, 2], 3)

    def test_valid_n3(self, strategy):
        assert strategy.check_superperm(SUPERPERM_3, 3)

    def test_valid_n4(self, strategy):
        assert len(SUPERPERM_4) == 33
        assert strategy.check_superperm(SUPERPERM_4, 4)

    def test_missing_one_permutation(self, strategy):
        # Dropping the final token loses the window [3, 2, 1].
        assert not strategy.check_superperm(SUPERPERM_3[:-1], 3)

    def test_shorter_than_window(self, strategy):
        assert not strategy.check_superperm([1, 2], 3)
        assert not strategy.check_superperm([], 2)

    def test_padding_never_invalidates(self, strategy):
        rng = np.random.default_rng(_SEED)
        for _ in range(10):
            pre = rng.integers(1, 4, size=rng.integers(1, 10)).tolist()
            suf = rng.integers(1, 4, size=rng.integers(1, 10)).tolist()
            assert strategy.check_superperm(pre + SUPERPERM_3 + suf, 3)

    def test_out_of_alphabet_tokens(self, strategy):
        assert strategy.check_superperm([0, 9] + SUPERPERM_3 + [7], 3)
        assert not strategy.check_superperm([1, 2, 0, 3, 1, 2, 1, 3, 2, 1], 3)

    def test_single_token(self, strategy):
        assert strategy.check_superperm([1], 1)
        assert strategy.check_superperm([2, 1, 2], 1)
        assert not strategy.check_superperm([2, 3], 1)

    def test_zero_tokens(self, strategy):
        assert strategy.check_superperm([], 0)
        assert strategy.check_superperm([1, 2], 0)


class TestCreate:
    """Construction behaviour."""

    @pytest.mark.parametrize("n_tokens", range(0, 7))
    def test_self_agreement(self, strategy, n_tokens):
        superperm = strategy.create_superperm(n_tokens)
        assert strategy.check_superperm(superperm, n_tokens)

    @pytest.mark.slow
    def test_self_agreement_n7(self, strategy):
        assert strategy.check_superperm(strategy.create_superperm(7), 7)

    def test_known_n3(self, strategy):
        assert strategy.create_superperm(3) == SUPERPERM_3

    def test_known_n4(self, strategy):
        assert strategy.create_superperm(4) == SUPERPERM_4

    def test_strategies_build_identical_sequences(self):
        naive, indexed = NaiveStrategy(), IndexedStrategy()
        for n_tokens in range(0, 7):
            assert naive.create_superperm(n_tokens) == indexed.create_superperm(n_tokens)

    def test_starts_with_base_sequence(self, strategy):
        assert strategy.create_superperm(5)[:5] == [1, 2, 3, 4, 5]

    def test_degenerate_sizes(self, strategy):
        assert strategy.create_superperm(0) == []
        assert strategy.create_superperm(1) == [1]
        assert strategy.create_superperm(2) == [1, 2, 1]

    def test_deterministic(self, strategy):
        assert strategy.create_superperm(5) == strategy.create_superperm(5)

    def test_tokens_in_alphabet(self, strategy):
        assert set(strategy.create_superperm(4)) == {1, 2, 3, 4}


# ------------------------------------------------------------------ #
# Cross-strategy agreement
# ------------------------------------------------------------------ #


class TestAgreement:
    """Both strategies must agree on every verification."""

    def test_random_sequences(self):
        naive, indexed = NaiveStrategy(), IndexedStrategy()
        rng = np.random.default_rng(_SEED)
        for _ in range(50):
            n_tokens = int(rng.integers(1, 5))
            length = int(rng.integers(0, 40))
            sequence = rng.integers(0, n_tokens + 2, size=length).tolist()
            assert naive.check_superperm(sequence, n_tokens) == indexed.check_superperm(
                sequence, n_tokens
            )

    @pytest.mark.parametrize("n_tokens", range(1, 6))
    def test_cross_check(self, n_tokens):
        naive, indexed = NaiveStrategy(), IndexedStrategy()
        assert naive.check_superperm(indexed.create_superperm(n_tokens), n_tokens)
        assert indexed.check_superperm(naive.create_superperm(n_tokens), n_tokens)

    @pytest.mark.parametrize(
        "sequence, expected",
        [
            ([2**70] + SUPERPERM_3, True),
            (SUPERPERM_3 + [-(2**70)], True),
            ([1.5, 2, 3, 1, 2, 1, 3, 2, 1], False),
            ([2.0, 3, 1, 2, 1, 3, 2, 1, 2, 3], True),
        ],
    )
    def test_unusual_tokens(self, sequence, expected):
        naive, indexed = NaiveStrategy(), IndexedStrategy()
        assert naive.check_superperm(sequence, 3) is expected
        assert indexed.check_superperm(sequence, 3) is expected
