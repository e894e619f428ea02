"""Seeded randomness carried as a value.

The generator state lives in the model rather than in a module-level
Random, so a run is reproducible from its seed and two models never share
a stream.
"""

import random
from typing import Iterator

from wavetile.core.constants import MAX_RANDOM
from .selector import RandomPair

RandomState = tuple


def seed_state(seed: int) -> RandomState:
    """Initial generator state for a seed."""
    return random.Random(seed).getstate()


def draw_pair(state: RandomState) -> tuple[RandomPair, RandomState]:
    """Draw one (position, tile) pair and return it with the advanced state."""
    rng = random.Random()
    rng.setstate(state)
    pair = RandomPair(rng.randint(0, MAX_RANDOM), rng.randint(0, MAX_RANDOM))
    return pair, rng.getstate()


def time_seeded_pairs(rng: random.Random | None = None) -> Iterator[RandomPair]:
    """Endless pairs from a clock-seeded generator, for interactive runs."""
    rng = rng or random.Random()
    while True:
        yield RandomPair(rng.randint(0, MAX_RANDOM), rng.randint(0, MAX_RANDOM))
