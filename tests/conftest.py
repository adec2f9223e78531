"""Shared fixtures."""

import numpy as np
import pytest


class RoundRobinRng:
    """Random source that cycles low, low + 1, ..., high - 1 in order."""

    def __init__(self):
        self.position = 0
        self.calls = []

    def integers(self, low, high, size):
        self.calls.append((low, high, size))
        n = int(np.prod(size))
        values = low + (np.arange(self.position, self.position + n) % (high - low))
        self.position += n
        return values.reshape(size)


@pytest.fixture
def round_robin_rng():
    return RoundRobinRng()
