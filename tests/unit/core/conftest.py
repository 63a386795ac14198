"""Shared fixtures for core unit tests"""

import random

import pytest


@pytest.fixture(name="rng")
def rng_fixture():
    return random.Random(20260204)


@pytest.fixture(name="random_pairs")
def random_pairs_fixture(rng):
    """Small line sequences over a tiny alphabet so they share plenty of lines."""
    pairs = []
    for _ in range(200):
        a = [rng.choice("ABC") for _ in range(rng.randint(0, 8))]
        b = [rng.choice("ABC") for _ in range(rng.randint(0, 8))]
        pairs.append((a, b))
    return pairs
