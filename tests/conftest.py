# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Scott Friedman and Project Contributors

"""
Global pytest configuration.
"""

import math
import os
import sys

import numpy as np
import pytest

# Add the project root to the Python path so tests can import modules properly
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from discrete_wavelets import basis_from_scaling_numbers  # noqa: E402

SQRT2 = math.sqrt(2)

# Haar transforms with known coefficients and energy
HAAR_DATASETS = [
    {
        "data": [1, 2, 3, 4],
        "dwt": ([3 / SQRT2, 7 / SQRT2], [-1 / SQRT2, -1 / SQRT2]),
        "wavedec": [[5], [-2], [-1 / SQRT2, -1 / SQRT2]],
        "energy": 30,
    },
    {
        "data": [0, 1, 2, 3, 5, 8, 13, 21],
        "dwt": (
            [1 / SQRT2, 5 / SQRT2, 13 / SQRT2, 34 / SQRT2],
            [-1 / SQRT2, -1 / SQRT2, -3 / SQRT2, -8 / SQRT2],
        ),
        "wavedec": [
            [18.73832970144351],
            [-14.495689014324228],
            [-2.0000000000000004, -10.500000000000004],
            [-0.7071067811865476, -0.7071067811865477,
             -2.121320343559643, -5.65685424949238],
        ],
        "energy": 713,
    },
]


@pytest.fixture
def haar_datasets():
    """Haar datasets with known coefficients."""
    return HAAR_DATASETS


@pytest.fixture
def haar_basis():
    """Explicit Haar wavelet basis."""
    return basis_from_scaling_numbers([1 / SQRT2, 1 / SQRT2])


@pytest.fixture
def rng():
    """Seeded random number generator."""
    return np.random.default_rng(42)
