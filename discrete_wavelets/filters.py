# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Scott Friedman and Project Contributors

"""
Filter bank types for the discrete wavelet transform.

Filters are stored in correlation orientation: an approximation coefficient
is the dot product of a window of the padded signal with the low-pass filter,
``approx[k] = dot(padded[2k:2k + N], low)``. The same orientation is used when
the reconstruction filters are added back into the signal.
"""

from typing import NamedTuple, Sequence, Tuple

from .exceptions import FilterLengthMismatchError, FilterTooShortError


class FilterPair(NamedTuple):
    """Low-pass and high-pass filter taps."""

    low: Tuple[float, ...]
    high: Tuple[float, ...]

    @property
    def length(self) -> int:
        return len(self.low)


class WaveletBasis(NamedTuple):
    """Decomposition and reconstruction filters of a wavelet.

    Parameters
    ----------
    dec : FilterPair
        Filters applied by the forward transform.
    rec : FilterPair
        Filters applied by the inverse transform.
    """

    dec: FilterPair
    rec: FilterPair


def validate_filters(filters: FilterPair) -> None:
    """
    Check that a filter pair can be used for a transform.

    Args:
        filters: Filter pair to check

    Raises:
        FilterLengthMismatchError: If low-pass and high-pass lengths differ
        FilterTooShortError: If the filters have fewer than two taps
    """
    if len(filters.low) != len(filters.high):
        raise FilterLengthMismatchError(
            "Invalid filters: low-pass and high-pass filters have different "
            f"lengths ({len(filters.low)} and {len(filters.high)})."
        )
    if len(filters.low) < 2:
        raise FilterTooShortError(
            "Invalid filters: they must have a length of at least 2, "
            f"got {len(filters.low)}."
        )


def basis_from_scaling_numbers(scaling: Sequence[float]) -> WaveletBasis:
    """
    Build an orthogonal wavelet basis from its scaling numbers.

    The high-pass filter is the quadrature mirror of the scaling numbers,
    ``high[i] = (-1)**i * scaling[N-1-i]``. Reconstruction uses the same
    filters as decomposition.

    Args:
        scaling: Scaling numbers (low-pass taps)

    Returns:
        WaveletBasis: Decomposition and reconstruction filters
    """
    low = tuple(float(value) for value in scaling)
    N = len(low)
    high = tuple((-1) ** i * low[N - 1 - i] for i in range(N))
    filters = FilterPair(low=low, high=high)
    return WaveletBasis(dec=filters, rec=filters)
