# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Scott Friedman and Project Contributors

"""
Default settings for the discrete wavelet transform.

Defaults can be overridden through environment variables:

- ``DWT_WAVELET``: wavelet name or alias (default ``haar``)
- ``DWT_MODE``: signal extension mode or alias (default ``symmetric``)
- ``DWT_LEVEL``: decomposition level (default: maximum useful level)
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .exceptions import InvalidLevelError, NegativeLevelError
from .padding import ExtensionMode, resolve_mode
from .wavelets import WaveletType, resolve_wavelet_type

DEFAULT_WAVELET = WaveletType.HAAR.value
DEFAULT_MODE = ExtensionMode.SYMMETRIC

WAVELET_ENV = "DWT_WAVELET"
MODE_ENV = "DWT_MODE"
LEVEL_ENV = "DWT_LEVEL"


def parse_level(value) -> Optional[int]:
    """
    Parse a decomposition level given as text or number.

    Args:
        value: Level, or None/empty text for the maximum useful level

    Returns:
        The level, or None
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        level = int(value)
    except (TypeError, ValueError):
        raise InvalidLevelError(
            f"Decomposition level must be an integer, got {value!r}") from None
    if level < 0:
        raise NegativeLevelError("Decomposition level must not be less than zero.")
    return level


@dataclass(frozen=True)
class TransformConfig:
    """Wavelet, extension mode and level used by a transform."""

    wavelet: WaveletType = WaveletType(DEFAULT_WAVELET)
    mode: ExtensionMode = DEFAULT_MODE
    level: Optional[int] = None

    @classmethod
    def create(cls, wavelet=None, mode=None, level=None) -> "TransformConfig":
        """Build a validated configuration, using defaults for missing values."""
        return cls(
            wavelet=resolve_wavelet_type(wavelet or DEFAULT_WAVELET),
            mode=resolve_mode(mode or DEFAULT_MODE),
            level=parse_level(level),
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TransformConfig":
        """Build a configuration from environment variables."""
        environ = os.environ if environ is None else environ
        return cls.create(
            wavelet=environ.get(WAVELET_ENV),
            mode=environ.get(MODE_ENV),
            level=environ.get(LEVEL_ENV),
        )
