"""Unbiased shuffling and sampling helpers."""
import random
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")

# Process-wide generator used when the caller does not inject one
_default_rng = random.Random()


def get_rng(rng: Optional[random.Random] = None) -> random.Random:
    """Return the injected random source or the shared default one."""
    return rng if rng is not None else _default_rng


def shuffle(items: Sequence[T], rng: Optional[random.Random] = None) -> List[T]:
    """Return a uniformly random permutation of items (Fisher-Yates).

    The input sequence is left untouched.
    """
    rng = get_rng(rng)
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randrange(i + 1)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def sample_without_replacement(
    items: Sequence[T], k: int, rng: Optional[random.Random] = None
) -> List[T]:
    """Pick min(k, len(items)) elements backed by distinct indices.

    Equal values at different positions can both be picked.
    """
    if k <= 0:
        return []
    rng = get_rng(rng)
    if len(items) <= k:
        return shuffle(items, rng)[:k]

    result: List[T] = []
    used = set()
    while len(result) < k and len(used) < len(items):
        idx = rng.randrange(len(items))
        if idx in used:
            continue
        used.add(idx)
        result.append(items[idx])
    return result
