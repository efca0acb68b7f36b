"""Deterministic random streams and the running per-character hash."""

from typing import Callable

MASK32 = 0xFFFFFFFF

# non-zero reset value for the live hash
LIVE_HASH_SEED = 0x9E3779B9

# xorshift never leaves the all-zero state
_ZERO_SEED_FALLBACK = 0x6D2B79F5

RNG = Callable[[], float]


class XorShift32:
    """
    32-bit xorshift generator (13/17/5 triple).

    Calling the instance returns the next float in [0, 1) as state / 2**32.
    """

    def __init__(self, seed: int) -> None:
        self.state = (int(seed) & MASK32) or _ZERO_SEED_FALLBACK

    def next_uint32(self) -> int:
        x = self.state
        x ^= (x << 13) & MASK32
        x ^= x >> 17
        x ^= (x << 5) & MASK32
        self.state = x
        return x

    def random(self) -> float:
        return self.next_uint32() / 2**32

    __call__ = random


def make_rng(seed: int) -> RNG:
    return XorShift32(seed)


def step_hash(current: int, char_code: int, index: int) -> int:
    # fold the character and its position in, then avalanche
    h = (current & MASK32) ^ ((char_code + index * 0x45D9F3B) & MASK32)
    h ^= h >> 15
    h = (h * 0x85EBCA6B) & MASK32
    h ^= h >> 13
    h = (h * 0xC2B2AE35) & MASK32
    h ^= h >> 16
    return h & MASK32
