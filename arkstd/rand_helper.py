"""Random number helpers for tests."""

from __future__ import annotations

import os
import random

_SEED = bytes(
    [
        1, 0, 0, 0, 23, 0, 0, 0, 200, 1, 0, 0, 210, 30, 0, 0,
        0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    ]
)


def test_rng() -> random.Random:
    """Return a generator for tests, not for any real-world use.

    When the environment variable ``DETERMINISTIC_TEST_RNG`` is ``"1"`` the
    generator is seeded with a fixed seed; otherwise it is seeded randomly.
    """
    if os.environ.get("DETERMINISTIC_TEST_RNG") == "1":
        return random.Random(int.from_bytes(_SEED, "little"))
    return random.Random(int.from_bytes(os.urandom(32), "little"))


test_rng.__test__ = False


def uniform_rand(rng: random.Random, bits: int) -> int:
    """Return a uniformly random unsigned integer of ``bits`` bits."""
    if bits < 0:
        raise ValueError("bits must be non-negative")
    return rng.getrandbits(bits)