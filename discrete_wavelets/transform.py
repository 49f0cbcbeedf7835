# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Scott Friedman and Project Contributors

"""
Discrete Wavelet Transform (DWT) of one-dimensional signals.

This module provides the single level transform (``dwt``/``idwt``), the
multilevel cascade (``wavedec``/``waverec``), the maximum useful
decomposition level (``max_level``) and the signal energy (``energy``).

Coefficient lengths, level count and boundary handling follow PyWavelets:
a signal of length n transformed with filters of length N yields
``(n + N - 1) // 2`` approximation and detail coefficients.
"""

import logging
import math
import numbers
import warnings
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .config import DEFAULT_MODE, DEFAULT_WAVELET
from .exceptions import (
    EmptyCoefficientsError,
    InvalidDataError,
    InvalidLevelError,
    LengthMismatchError,
    NegativeLengthError,
    NegativeLevelError,
    NonIntegerLengthError,
)
from .filters import FilterPair, WaveletBasis, validate_filters
from .padding import MODES, ExtensionMode, ModeLike, pad, pad_widths, resolve_mode
from .wavelets import Wavelet, resolve_wavelet

logger = logging.getLogger(__name__)

CoefficientSet = List[np.ndarray]


def _as_signal(data, name: str = "data") -> np.ndarray:
    if data is None:
        raise InvalidDataError(f"Input {name} must not be undefined.")
    try:
        signal = np.asarray(data, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidDataError(f"Input {name} must be numeric: {e}") from e
    if signal.ndim != 1:
        raise InvalidDataError(
            f"Input {name} must be one-dimensional, got shape {signal.shape}."
        )
    return signal


def _convolve_downsample(signal: np.ndarray, filter_coef: Sequence[float]) -> np.ndarray:
    """Dot products of the filter with windows of the signal at even offsets."""
    # Correlation is a convolution with the reversed filter
    correlated = np.convolve(signal, np.asarray(filter_coef)[::-1], mode='valid')
    return correlated[::2]


def _upsample_convolve(signal: np.ndarray, filter_coef: Sequence[float]) -> np.ndarray:
    """Insert zeros between samples and convolve with the filter."""
    upsampled = np.zeros(2 * len(signal))
    upsampled[::2] = signal
    return np.convolve(upsampled, np.asarray(filter_coef), mode='full')


def _dwt(data: np.ndarray, filters: FilterPair,
         mode: ExtensionMode) -> Tuple[np.ndarray, np.ndarray]:
    filter_length = len(filters.low)
    padded = pad(data, pad_widths(len(data), filter_length), mode)
    approx = _convolve_downsample(padded, filters.low)
    detail = _convolve_downsample(padded, filters.high)
    return approx, detail


def _idwt(approx: np.ndarray, detail: np.ndarray, filters: FilterPair) -> np.ndarray:
    if len(approx) != len(detail):
        raise LengthMismatchError(
            "Approximation and detail coefficients must have equal length, "
            f"got {len(approx)} and {len(detail)}."
        )
    if len(approx) == 0:
        raise LengthMismatchError(
            "Approximation and detail coefficients must not have zero length."
        )

    filter_length = len(filters.low)
    coeff_length = len(approx)

    # Padded signal of the previous level
    combined = (_upsample_convolve(approx, filters.low)
                + _upsample_convolve(detail, filters.high))
    combined = combined[:filter_length + 2 * (coeff_length - 1)]

    # Remove the padding added by the forward transform
    trim = filter_length - 2
    return combined[trim:len(combined) - trim]


def dwt(data: Sequence[float], wavelet: Wavelet = DEFAULT_WAVELET,
        mode: ModeLike = DEFAULT_MODE) -> Tuple[np.ndarray, np.ndarray]:
    """
    Single level Discrete Wavelet Transform.

    Args:
        data: Input signal
        wavelet: Wavelet name, alias, WaveletType or WaveletBasis
        mode: Signal extension mode or alias

    Returns:
        tuple: Approximation and detail coefficients
    """
    mode = resolve_mode(mode)
    basis = resolve_wavelet(wavelet)
    validate_filters(basis.dec)
    return _dwt(_as_signal(data), basis.dec, mode)


def idwt(approx: Optional[Sequence[float]], detail: Optional[Sequence[float]],
         wavelet: Wavelet = DEFAULT_WAVELET,
         mode: ModeLike = DEFAULT_MODE) -> np.ndarray:
    """
    Single level inverse Discrete Wavelet Transform.

    Missing coefficients are replaced by zeros of the length of the other
    coefficients. The extension mode is accepted for symmetry with ``dwt``;
    the padding is already contained in the coefficient lengths.

    Args:
        approx: Approximation coefficients, or None
        detail: Detail coefficients, or None
        wavelet: Wavelet name, alias, WaveletType or WaveletBasis
        mode: Signal extension mode or alias

    Returns:
        numpy.ndarray: Approximation coefficients of the previous level
    """
    resolve_mode(mode)
    basis = resolve_wavelet(wavelet)
    validate_filters(basis.rec)

    if approx is None and detail is None:
        raise LengthMismatchError("Coefficients must not both be undefined.")
    if approx is None:
        detail = _as_signal(detail, "detail coefficients")
        approx = np.zeros_like(detail)
    elif detail is None:
        approx = _as_signal(approx, "approximation coefficients")
        detail = np.zeros_like(approx)

    return _idwt(
        _as_signal(approx, "approximation coefficients"),
        _as_signal(detail, "detail coefficients"),
        basis.rec,
    )


def _check_length(data_length) -> int:
    if isinstance(data_length, bool):
        raise NonIntegerLengthError("Length of data is not an integer.")
    if not isinstance(data_length, numbers.Integral):
        if isinstance(data_length, numbers.Real) and float(data_length).is_integer():
            data_length = int(data_length)
        else:
            raise NonIntegerLengthError(
                f"Length of data is not an integer: {data_length!r}."
            )
    if data_length < 0:
        raise NegativeLengthError("Data length cannot be less than zero.")
    return int(data_length)


def _max_level(data_length: int, filter_length: int) -> int:
    if data_length == 0:
        return 0
    return max(0, math.floor(math.log2(data_length / (filter_length - 1))))


def max_level(data_length: int, wavelet: Wavelet = DEFAULT_WAVELET) -> int:
    """
    Determine the maximum useful level of decomposition.

    Beyond this level the approximation is too short compared to the filter
    to carry information that is not dominated by boundary effects.

    Args:
        data_length: Length of the input data
        wavelet: Wavelet name, alias, WaveletType or WaveletBasis

    Returns:
        int: Maximum useful decomposition level
    """
    data_length = _check_length(data_length)
    basis = resolve_wavelet(wavelet)
    validate_filters(basis.dec)
    return _max_level(data_length, len(basis.dec.low))


def wavedec(data: Sequence[float], wavelet: Wavelet = DEFAULT_WAVELET,
            mode: ModeLike = DEFAULT_MODE,
            level: Optional[int] = None) -> CoefficientSet:
    """
    Multilevel 1D wavelet decomposition.

    Args:
        data: Input signal
        wavelet: Wavelet name, alias, WaveletType or WaveletBasis
        mode: Signal extension mode or alias
        level: Decomposition level, defaults to the maximum useful level

    Returns:
        list: Coefficients ``[approx_n, detail_n, ..., detail_1]``
    """
    data = _as_signal(data)
    mode = resolve_mode(mode)
    basis = resolve_wavelet(wavelet)
    validate_filters(basis.dec)
    filter_length = len(basis.dec.low)
    useful_level = _max_level(len(data), filter_length)

    if level is None:
        level = useful_level
    elif isinstance(level, bool) or not isinstance(level, numbers.Integral):
        raise InvalidLevelError(f"Decomposition level must be an integer, got {level!r}.")
    if level < 0:
        raise NegativeLevelError("Decomposition level must not be less than zero.")
    if level > useful_level:
        warnings.warn(
            f"Level value of {level} is too high: all coefficients will "
            "experience boundary effects."
        )

    logger.debug("Decomposing %d samples to level %d with %d-tap filters (%s)",
                 len(data), level, filter_length, mode.value)

    approx = data
    details = []
    for _ in range(level):
        approx, detail = _dwt(approx, basis.dec, mode)
        details.append(detail)

    return [approx] + details[::-1]


def _check_coefficient_lengths(approx_length: int, details: List[np.ndarray],
                               filter_length: int) -> None:
    for level, detail in enumerate(details, start=1):
        if len(detail) == 0 or approx_length not in (len(detail), len(detail) + 1):
            raise LengthMismatchError(
                f"Coefficients of level {len(details) - level + 1} do not match: "
                f"{approx_length} approximation and {len(detail)} detail coefficients."
            )
        # Length of the approximation rebuilt from this level
        approx_length = 2 * len(detail) - filter_length + 2


def waverec(coeffs: Sequence[Sequence[float]], wavelet: Wavelet = DEFAULT_WAVELET,
            mode: ModeLike = DEFAULT_MODE) -> np.ndarray:
    """
    Multilevel 1D wavelet reconstruction.

    Reconstructing odd-length data yields one additional trailing sample, the
    first value of the back padding of the decomposition.

    Args:
        coeffs: Coefficients ``[approx_n, detail_n, ..., detail_1]``
        wavelet: Wavelet name, alias, WaveletType or WaveletBasis
        mode: Signal extension mode or alias

    Returns:
        numpy.ndarray: Reconstructed signal
    """
    if coeffs is None or len(coeffs) < 1:
        raise EmptyCoefficientsError(
            "Invalid coefficients: at least the approximation coefficients are required."
        )
    resolve_mode(mode)
    basis = resolve_wavelet(wavelet)
    validate_filters(basis.rec)

    approx = _as_signal(coeffs[0], "approximation coefficients")
    details = [_as_signal(detail, "detail coefficients") for detail in coeffs[1:]]
    _check_coefficient_lengths(len(approx), details, len(basis.rec.low))

    for level, detail in enumerate(details, start=1):
        # Odd-length approximations were padded by one extra sample
        if len(approx) == len(detail) + 1:
            approx = approx[:-1]

        approx = _idwt(approx, detail, basis.rec)
        logger.debug("Reconstructed level %d: %d samples", len(coeffs) - level, len(approx))

    return approx


def energy(values) -> float:
    """
    Calculate the energy of data or coefficients as their sum of squares.

    Args:
        values: Signal or (nested) coefficient set

    Returns:
        float: Sum of squares of all values
    """
    if values is None:
        raise InvalidDataError("Cannot calculate the energy of undefined values.")
    if (not isinstance(values, (np.ndarray, list, tuple))
            or (isinstance(values, np.ndarray) and values.ndim == 0)):
        raise InvalidDataError(
            f"Energy needs a sequence of values, got {type(values).__name__}."
        )
    total = 0.0
    for value in values:
        if isinstance(value, (np.ndarray, list, tuple)):
            total += energy(value)
        elif isinstance(value, numbers.Real):
            total += float(value) ** 2
        else:
            raise InvalidDataError(f"Cannot calculate the energy of non-numeric value {value!r}.")
    return total


class DiscreteWaveletTransform:
    """
    Discrete Wavelet Transform (DWT) with a fixed wavelet and extension mode.

    The wavelet and mode are resolved once when the object is created and
    reused for every transform.
    """

    modes = MODES

    def __init__(self, wavelet: Wavelet = DEFAULT_WAVELET, mode: ModeLike = DEFAULT_MODE):
        """
        Initialize a new DWT object.

        Args:
            wavelet: Wavelet name, alias, WaveletType or WaveletBasis
            mode: Signal extension mode or alias
        """
        self.basis: WaveletBasis = resolve_wavelet(wavelet)
        self.mode: ExtensionMode = resolve_mode(mode)
        validate_filters(self.basis.dec)
        validate_filters(self.basis.rec)

    @property
    def filter_length(self) -> int:
        return len(self.basis.dec.low)

    def dwt(self, data):
        return dwt(data, self.basis, self.mode)

    def idwt(self, approx, detail):
        return idwt(approx, detail, self.basis, self.mode)

    def max_level(self, data_length):
        return max_level(data_length, self.basis)

    def forward(self, signal, level=None):
        """
        Perform the multilevel forward DWT.

        Args:
            signal (numpy.ndarray): Input signal
            level (int): Number of decomposition levels, defaults to the maximum useful level

        Returns:
            list: Coefficients ``[approx_n, detail_n, ..., detail_1]``
        """
        return wavedec(signal, self.basis, self.mode, level)

    def inverse(self, coeffs):
        """
        Perform the multilevel inverse DWT.

        Args:
            coeffs (list): Coefficients as returned by ``forward``

        Returns:
            numpy.ndarray: Reconstructed signal
        """
        return waverec(coeffs, self.basis, self.mode)
