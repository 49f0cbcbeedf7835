# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Scott Friedman and Project Contributors

"""
Signal extension (padding) for the discrete wavelet transform.

A finite signal is extended at both ends before it is convolved with the
decomposition filters. The value of every padded sample is computed on its
own from the data and its distance to the nearest boundary, so any padding
width is supported, including widths larger than the signal itself.

Naming follows the signal extension modes of PyWavelets, including the
MATLAB-style aliases (``zpd``, ``sp0``, ``sp1``, ``ppd``, ``sym``, ``symw``,
``asym``, ...).
"""

import logging
import numbers
from enum import Enum
from typing import Callable, Dict, Sequence, Tuple, Union

import numpy as np

from .exceptions import (
    EmptyDataError,
    InvalidDataError,
    InvalidFilterError,
    InvalidPaddingError,
    UnknownModeError,
)

logger = logging.getLogger(__name__)


class ExtensionMode(Enum):
    """Enum defining signal extension modes used at the signal boundaries."""
    ZERO = "zero"
    CONSTANT = "constant"
    PERIODIC = "periodic"
    SYMMETRIC = "symmetric"
    REFLECT = "reflect"
    SMOOTH = "smooth"
    ANTISYMMETRIC = "antisymmetric"


# Alternative names accepted for each mode
MODE_ALIASES: Dict[str, ExtensionMode] = {
    "zpd": ExtensionMode.ZERO,
    "sp0": ExtensionMode.CONSTANT,
    "sp1": ExtensionMode.SMOOTH,
    "ppd": ExtensionMode.PERIODIC,
    "sym": ExtensionMode.SYMMETRIC,
    "symh": ExtensionMode.SYMMETRIC,
    "symw": ExtensionMode.REFLECT,
    "asym": ExtensionMode.ANTISYMMETRIC,
    "asymh": ExtensionMode.ANTISYMMETRIC,
}

# Canonical names of all supported modes
MODES: Tuple[str, ...] = tuple(mode.value for mode in ExtensionMode)

PaddingWidths = Tuple[int, int]
ModeLike = Union[ExtensionMode, str]


def resolve_mode(mode: ModeLike) -> ExtensionMode:
    """
    Resolve a mode name or alias to its extension mode.

    Args:
        mode: An ExtensionMode, a canonical mode name or an alias

    Returns:
        The matching ExtensionMode

    Raises:
        UnknownModeError: If the mode is not known
    """
    if isinstance(mode, ExtensionMode):
        return mode
    if isinstance(mode, str):
        if mode in MODE_ALIASES:
            return MODE_ALIASES[mode]
        try:
            return ExtensionMode(mode)
        except ValueError:
            pass
    raise UnknownModeError(
        f"Unknown signal extension mode {mode!r}. "
        f"Available: {list(MODES) + list(MODE_ALIASES)}"
    )


def _zero(data, index, inverse):
    return 0.0


def _constant(data, index, inverse):
    return data[0] if inverse else data[-1]


def _periodic(data, index, inverse):
    n = len(data)
    if inverse:
        return data[n - 1 - (index % n)]
    return data[index % n]


def _symmetric(data, index, inverse):
    n = len(data)
    dir_changes = index // n
    inversions = dir_changes if inverse else dir_changes + 1
    if inversions % 2 == 0:
        return data[index % n]
    return data[n - 1 - (index % n)]


def _reflect(data, index, inverse):
    n = len(data)
    if n == 1:
        return data[0]
    dir_changes = index // (n - 1)
    inversions = dir_changes if inverse else dir_changes + 1
    if inversions % 2 == 0:
        return data[index % (n - 1) + 1]
    return data[n - 2 - (index % (n - 1))]


def _smooth(data, index, inverse):
    # Single samples extrapolate with slope data[0] in front and -data[0]
    # at the back.
    n = len(data)
    if inverse:
        offset = data[0]
        slope = data[0] if n == 1 else data[0] - data[1]
    else:
        offset = data[-1]
        slope = -data[0] if n == 1 else data[-1] - data[-2]
    return offset + (index + 1) * slope


def _antisymmetric(data, index, inverse):
    sign = -1.0 if (index // len(data)) % 2 == 0 else 1.0
    return sign * _symmetric(data, index, inverse)


_EXTENSIONS: Dict[ExtensionMode, Callable] = {
    ExtensionMode.ZERO: _zero,
    ExtensionMode.CONSTANT: _constant,
    ExtensionMode.PERIODIC: _periodic,
    ExtensionMode.SYMMETRIC: _symmetric,
    ExtensionMode.REFLECT: _reflect,
    ExtensionMode.SMOOTH: _smooth,
    ExtensionMode.ANTISYMMETRIC: _antisymmetric,
}


def pad_element(data: np.ndarray, index: int, inverse: bool,
                mode: ModeLike) -> float:
    """
    Compute a single padded value.

    Args:
        data: Input values
        index: Distance from the boundary, 0 for the sample next to the data
        inverse: True for the front of the signal, False for the back
        mode: Signal extension mode

    Returns:
        The padded value
    """
    mode = resolve_mode(mode)
    if len(data) == 0 and mode is not ExtensionMode.ZERO:
        raise EmptyDataError(
            f"Cannot determine {mode.value} padding for data of zero length."
        )
    return float(_EXTENSIONS[mode](data, index, inverse))


def _check_width(width) -> int:
    if isinstance(width, bool) or not isinstance(width, numbers.Integral):
        raise InvalidPaddingError(f"Padding width must be an integer, got {width!r}")
    if width < 0:
        raise InvalidPaddingError(f"Padding width must not be negative, got {width}")
    return int(width)


def pad(data: Sequence[float], widths: PaddingWidths,
        mode: ModeLike) -> np.ndarray:
    """
    Extend a signal at its front and back.

    Args:
        data: Input signal
        widths: Number of padded values at the front and at the back
        mode: Signal extension mode or alias

    Returns:
        numpy.ndarray: Signal of length ``front + len(data) + back``

    Raises:
        InvalidDataError: If no data is given
        InvalidPaddingError: If a width is negative
        EmptyDataError: If the data is empty and the mode needs a sample
        UnknownModeError: If the mode is not known
    """
    if data is None:
        raise InvalidDataError("Cannot add padding to undefined data.")
    try:
        front, back = widths
    except (TypeError, ValueError):
        raise InvalidPaddingError(
            f"Padding widths must be a (front, back) pair, got {widths!r}"
        ) from None
    front, back = _check_width(front), _check_width(back)
    mode = resolve_mode(mode)

    try:
        data = np.asarray(data, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidDataError(f"Cannot pad non-numeric data: {e}") from e
    if data.ndim != 1:
        raise InvalidDataError(f"Data must be one-dimensional, got shape {data.shape}.")
    if len(data) == 0 and mode is not ExtensionMode.ZERO:
        raise EmptyDataError(
            f"Cannot add {mode.value} padding to data of zero length."
        )

    logger.debug("Padding %d samples with %s extension (front=%d, back=%d)",
                 len(data), mode.value, front, back)
    extend = _EXTENSIONS[mode]
    head = [extend(data, front - 1 - i, True) for i in range(front)]
    tail = [extend(data, i, False) for i in range(back)]
    return np.concatenate([
        np.asarray(head, dtype=np.float64),
        data,
        np.asarray(tail, dtype=np.float64),
    ])


def pad_widths(data_length: int, filter_length: int) -> PaddingWidths:
    """
    Determine the padding needed before a single level transform.

    The front receives ``filter_length - 2`` values. The back receives one more
    value when ``data_length + filter_length`` is odd, which keeps the padded
    length even so that the stride-2 windows end exactly on the last sample.

    Args:
        data_length: Length of the data to pad
        filter_length: Length of the decomposition filters

    Returns:
        tuple: Padding widths (front, back)
    """
    if data_length <= 0:
        raise InvalidDataError(
            f"Cannot determine padding for data of length {data_length}."
        )
    if filter_length < 2:
        raise InvalidFilterError(
            f"Filters must have at least two taps, got {filter_length}."
        )
    front = filter_length - 2
    back = front if (data_length + filter_length) % 2 == 0 else filter_length - 1
    return front, back
