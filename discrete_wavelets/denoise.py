# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Scott Friedman and Project Contributors

"""
Wavelet shrinkage denoising.
"""

import logging

import numpy as np

from .config import DEFAULT_MODE
from .exceptions import InvalidDataError, WaveletError
from .transform import wavedec, waverec

logger = logging.getLogger(__name__)

# Median absolute deviation of standard normal noise
MAD_SCALE = 0.6745

THRESHOLD_KINDS = ("soft", "hard")


def threshold(values, value, kind="soft"):
    """
    Threshold coefficients.

    Args:
        values (numpy.ndarray): Coefficients
        value (float): Threshold, must not be negative
        kind (str): ``soft`` shrinks all coefficients towards zero,
            ``hard`` only zeroes coefficients below the threshold

    Returns:
        numpy.ndarray: Thresholded coefficients
    """
    values = np.asarray(values, dtype=np.float64)
    if value < 0:
        raise WaveletError(f"Threshold must not be negative, got {value}")
    if kind == "soft":
        return np.sign(values) * np.maximum(0, np.abs(values) - value)
    if kind == "hard":
        return np.where(np.abs(values) < value, 0.0, values)
    raise WaveletError(f"Unknown threshold kind {kind!r}. Available: {list(THRESHOLD_KINDS)}")


def denoise_signal(signal, wavelet="db4", mode=DEFAULT_MODE, level=None,
                   threshold_factor=1.5, kind="soft"):
    """
    Simple wavelet-based signal denoising.

    Args:
        signal (numpy.ndarray): Input noisy signal
        wavelet: Wavelet name, alias, WaveletType or WaveletBasis
        mode: Signal extension mode or alias
        level (int): Number of decomposition levels, defaults to the maximum useful level
        threshold_factor (float): Threshold multiplier for noise estimation
        kind (str): Thresholding kind, ``soft`` or ``hard``

    Returns:
        numpy.ndarray: Denoised signal with the length of the input
    """
    signal = np.asarray(signal, dtype=np.float64)
    if signal.ndim != 1 or len(signal) == 0:
        raise InvalidDataError("Denoising needs a non-empty one-dimensional signal.")

    coeffs = wavedec(signal, wavelet, mode, level)

    # Threshold detail coefficients, keep the coarsest approximation
    for i in range(1, len(coeffs)):
        detail = coeffs[i]

        # Estimate noise level (MAD estimator)
        noise_level = np.median(np.abs(detail)) / MAD_SCALE
        value = threshold_factor * noise_level
        logger.debug("Detail band %d: noise level %.6g, threshold %.6g", i, noise_level, value)

        coeffs[i] = threshold(detail, value, kind)

    denoised = waverec(coeffs, wavelet, mode)
    return denoised[:len(signal)]
