"""
Discrete Wavelet Transform Module

This package provides the one-dimensional Discrete Wavelet Transform (DWT):
decomposition of a signal into approximation and detail coefficients at one
or several levels, and exact reconstruction of the signal from them.

Key components:
- Single level transform (dwt, idwt)
- Multilevel decomposition and reconstruction (wavedec, waverec)
- Signal extension modes (zero, constant, periodic, symmetric, reflect,
  smooth, antisymmetric)
- Haar and Daubechies 1-8 wavelets, or any explicit orthogonal filter bank
- Wavelet shrinkage denoising
"""

from .exceptions import (
    WaveletError,
    InvalidFilterError,
    FilterLengthMismatchError,
    FilterTooShortError,
    InvalidDataError,
    EmptyDataError,
    InvalidPaddingError,
    UnknownModeError,
    UnknownWaveletError,
    LengthMismatchError,
    InvalidLevelError,
    NegativeLevelError,
    NonIntegerLengthError,
    NegativeLengthError,
    EmptyCoefficientsError
)

from .filters import (
    FilterPair,
    WaveletBasis,
    validate_filters,
    basis_from_scaling_numbers
)

from .padding import (
    ExtensionMode,
    MODES,
    MODE_ALIASES,
    resolve_mode,
    pad,
    pad_element,
    pad_widths
)

from .wavelets import (
    WaveletType,
    WAVELET_ALIASES,
    resolve_wavelet,
    resolve_wavelet_type
)

from .config import (
    DEFAULT_MODE,
    DEFAULT_WAVELET,
    TransformConfig
)

from .transform import (
    DiscreteWaveletTransform,
    dwt,
    idwt,
    wavedec,
    waverec,
    max_level,
    energy
)

from .denoise import (
    threshold,
    denoise_signal
)

# Version information
__version__ = '0.1.0'
