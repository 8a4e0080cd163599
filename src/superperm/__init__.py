"""superperm — Greedy construction and verification of superpermutations.

A superpermutation over ``1..n`` is a token sequence containing every
one of the ``n!`` permutations as a contiguous window.  Construction is
greedy (maximal trailing overlap first) and makes no claim of minimal
length.

Two interchangeable strategies implement the same contract: a naive
one that scans an explicit table of all permutations, and an indexed
one that maps permutations to factorial-base index values and answers
prefix queries as digit ranges without enumerating permutations.

Public API:
    .. autosummary::
        create_superperm
        check_superperm
        benchmark_strategies
        MixedRadix
        PermutationMapper
        SuperpermStrategy
        available_strategies
        resolve_strategy
        get_default_strategy
        set_default_strategy
"""

from ._config import get_default_strategy, set_default_strategy
from ._strategies import SuperpermStrategy, available_strategies, resolve_strategy
from .benchmark import benchmark_strategies
from .core import check_superperm, create_superperm
from .mixed_radix import MixedRadix
from .permutations import PermutationMapper

__all__ = [
    "create_superperm",
    "check_superperm",
    "benchmark_strategies",
    "MixedRadix",
    "PermutationMapper",
    "SuperpermStrategy",
    "available_strategies",
    "resolve_strategy",
    "get_default_strategy",
    "set_default_strategy",
]

__version__ = "0.1.0"
