# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Scott Friedman and Project Contributors

"""
Exceptions raised by the discrete wavelet transform.

Every error is a caller contract violation and is raised before any
computation takes place.
"""


class WaveletError(ValueError):
    """Base class for all errors raised by this package."""


class InvalidFilterError(WaveletError):
    """A filter pair cannot be used for a transform."""


class FilterLengthMismatchError(InvalidFilterError):
    """Low-pass and high-pass filters have different lengths."""


class FilterTooShortError(InvalidFilterError):
    """Filters have fewer than two taps."""


class InvalidDataError(WaveletError):
    """Input data is missing or cannot be transformed."""


class EmptyDataError(InvalidDataError):
    """An extension mode needs at least one sample to extend."""


class InvalidPaddingError(WaveletError):
    """Padding widths are negative or not integers."""


class UnknownModeError(WaveletError):
    """Signal extension mode name is not known."""


class UnknownWaveletError(WaveletError):
    """Wavelet name or alias is not in the catalog."""


class LengthMismatchError(WaveletError):
    """Approximation and detail coefficients cannot be combined."""


class InvalidLevelError(WaveletError):
    """Decomposition level cannot be used."""


class NegativeLevelError(InvalidLevelError):
    """Decomposition level is less than zero."""


class NonIntegerLengthError(WaveletError):
    """Data length is not an integer."""


class NegativeLengthError(WaveletError):
    """Data length is less than zero."""


class EmptyCoefficientsError(WaveletError):
    """A coefficient set holds no coefficients at all."""
