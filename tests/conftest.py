"""Shared fixtures for analysis tests."""

import numpy as np
import pytest

from benchlens.metrics import Measured


@pytest.fixture
def measurements() -> list[Measured]:
    """Thirty noisy measurements with time roughly proportional to iterations."""
    rng = np.random.default_rng(1234)
    noise = rng.lognormal(mean=0.0, sigma=0.05, size=30)
    return [
        Measured(
            time=float(0.002 * iters * noise[iters - 1]),
            iters=iters,
            cpu_time=float(0.0019 * iters * noise[iters - 1]),
            allocated=1024 * iters + 64 * (iters % 3),
        )
        for iters in range(1, 31)
    ]
