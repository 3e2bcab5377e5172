"""
Random value generators: bounded integers, hex colors, alphanumeric words.

Every generator takes an optional `rng`. Pass a seeded `random.Random`
for reproducible output; leave it out to use the global `random` state.

IMPORTANT:
    Not suitable for secrets or tokens. Use the `secrets` module for those.
"""

import math
import random
import string
import warnings
from typing import Optional


ALPHABET = string.digits + string.ascii_lowercase + string.ascii_uppercase


def random_num(low: float, high: float, rng: Optional[random.Random] = None) -> int:
    """
    Return a uniformly distributed integer in [ceil(low), floor(high)].

    Args:
        low: Lower bound (rounded up)
        high: Upper bound (rounded down)
        rng: Random source (defaults to the global `random` state)

    Returns:
        Integer in the inclusive range. If the rounded bounds are
        inverted, a UserWarning is emitted and the result is meaningless.
    """
    rng = rng or random
    first = math.ceil(low)
    last = math.floor(high)

    if first > last:
        warnings.warn(f"Empty range for random_num: [{first}, {last}]", UserWarning)

    return math.floor(rng.random() * (last - first + 1)) + first


def random_color(rng: Optional[random.Random] = None) -> str:
    """Return a random color as `#rrggbb` (lowercase, zero-padded)."""
    rng = rng or random
    return f"#{rng.randrange(0x1000000):06x}"


def random_word(
    random_flag: bool,
    low: int,
    high: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Return a random string drawn from ALPHABET (0-9, a-z, A-Z).

    Args:
        random_flag: If False, the word has exactly `low` characters.
            If True, its length is drawn uniformly from [low, high].
        low: Fixed length, or lower length bound
        high: Upper length bound (only used when random_flag is True)
        rng: Random source (defaults to the global `random` state)
    """
    rng = rng or random
    length = low

    if random_flag:
        if high is None:
            raise ValueError("random_word needs `high` when random_flag is set")
        length = rng.randint(low, high)

    return "".join(rng.choice(ALPHABET) for _ in range(length))
