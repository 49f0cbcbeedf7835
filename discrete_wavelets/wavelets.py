# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Scott Friedman and Project Contributors

"""
Catalog of named wavelets.

Named wavelets are identified by the closed ``WaveletType`` enumeration. The
scaling numbers of each wavelet are read from the PyWavelets filter tables;
the full basis is derived from them by ``basis_from_scaling_numbers``.
Callers may always pass an explicit ``WaveletBasis`` instead of a name.
"""

from enum import Enum
from functools import lru_cache
from typing import Dict, Union

import pywt

from .exceptions import UnknownWaveletError
from .filters import WaveletBasis, basis_from_scaling_numbers


class WaveletType(Enum):
    """Enum defining the wavelets available by name."""
    HAAR = "haar"
    DB1 = "db1"
    DB2 = "db2"
    DB3 = "db3"
    DB4 = "db4"
    DB5 = "db5"
    DB6 = "db6"
    DB7 = "db7"
    DB8 = "db8"


# Daubechies wavelets named by their filter length
WAVELET_ALIASES: Dict[str, WaveletType] = {
    "D2": WaveletType.DB1,
    "D4": WaveletType.DB2,
    "D6": WaveletType.DB3,
    "D8": WaveletType.DB4,
    "D10": WaveletType.DB5,
    "D12": WaveletType.DB6,
    "D14": WaveletType.DB7,
    "D16": WaveletType.DB8,
}

Wavelet = Union[WaveletBasis, WaveletType, str]


def resolve_wavelet_type(name: Union[WaveletType, str]) -> WaveletType:
    """
    Resolve a wavelet name or alias to its wavelet type.

    Args:
        name: A WaveletType, a wavelet name (``haar``, ``db1`` ... ``db8``)
            or an alias (``D2`` ... ``D16``)

    Returns:
        The matching WaveletType

    Raises:
        UnknownWaveletError: If the name is not in the catalog
    """
    if isinstance(name, WaveletType):
        return name
    if isinstance(name, str):
        if name in WAVELET_ALIASES:
            return WAVELET_ALIASES[name]
        try:
            return WaveletType(name)
        except ValueError:
            pass
    raise UnknownWaveletError(
        f"Unknown wavelet {name!r}. "
        f"Available: {[w.value for w in WaveletType] + list(WAVELET_ALIASES)}"
    )


@lru_cache(maxsize=None)
def _named_basis(wavelet_type: WaveletType) -> WaveletBasis:
    # rec_lo of an orthogonal PyWavelets wavelet holds its scaling numbers
    scaling = pywt.Wavelet(wavelet_type.value).rec_lo
    return basis_from_scaling_numbers(scaling)


def resolve_wavelet(wavelet: Wavelet) -> WaveletBasis:
    """
    Determine the wavelet basis for a wavelet name, type or basis.

    Args:
        wavelet: Wavelet name, alias, WaveletType or an explicit WaveletBasis

    Returns:
        WaveletBasis: Decomposition and reconstruction filters
    """
    if isinstance(wavelet, WaveletBasis):
        return wavelet
    return _named_basis(resolve_wavelet_type(wavelet))
