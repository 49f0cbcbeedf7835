# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Scott Friedman and Project Contributors

"""
Command-line interface for the discrete wavelet transform.

Signals and coefficients are read as JSON from a file or stdin and results
are written as JSON to stdout or an output file.
"""

import argparse
import json
import logging
import os
import sys
from typing import Any, List, Optional

import numpy as np

from .config import LEVEL_ENV, MODE_ENV, WAVELET_ENV, TransformConfig
from .denoise import THRESHOLD_KINDS, denoise_signal
from .exceptions import WaveletError
from .padding import MODE_ALIASES, MODES, pad
from .transform import dwt, energy, idwt, max_level, wavedec, waverec
from .wavelets import WAVELET_ALIASES, WaveletType

logger = logging.getLogger(__name__)

# Subcommands that list the catalog and need no configuration
CATALOG_COMMANDS = ("modes", "wavelets")

# Subcommands that take a decomposition level
LEVEL_COMMANDS = ("wavedec", "denoise")


def to_json(value: Any) -> Any:
    """
    Convert transform results to JSON-serializable values.

    Args:
        value: Array, tuple, list or scalar

    Returns:
        Nested lists of floats
    """
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, dict):
        return {key: to_json(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json(item) for item in value]
    if isinstance(value, np.generic):
        return value.item()
    return value


def read_input(path: Optional[str]) -> Any:
    """
    Read JSON input from a file, or from stdin if no path is given.

    Args:
        path: Input file path, ``-`` or None for stdin

    Returns:
        Parsed JSON value
    """
    if path is None or path == "-":
        return json.load(sys.stdin)
    with open(path, "r") as f:
        return json.load(f)


def write_output(result: Any, args: argparse.Namespace) -> None:
    """
    Write a result as JSON.

    Args:
        result: Transform result
        args: Command-line arguments
    """
    result = to_json(result)
    if args.output:
        with open(args.output, "w") as f:
            json.dump(result, f, indent=args.indent)
        logger.info("Result saved to %s", args.output)
    else:
        json.dump(result, sys.stdout, indent=args.indent)
        sys.stdout.write("\n")


def list_catalog(command: str) -> Any:
    """
    List the available modes or wavelets with their aliases.

    Args:
        command: ``modes`` or ``wavelets``

    Returns:
        dict: Canonical names and aliases
    """
    if command == "modes":
        return {"modes": list(MODES), "aliases": {k: v.value for k, v in MODE_ALIASES.items()}}
    return {"wavelets": [w.value for w in WaveletType],
            "aliases": {k: v.value for k, v in WAVELET_ALIASES.items()}}


def resolve_config(args: argparse.Namespace) -> TransformConfig:
    """
    Merge command-line options over the environment configuration.

    Args:
        args: Parsed command-line arguments

    Returns:
        TransformConfig: Validated configuration
    """
    # Environment values are only read for options not given on the command line
    level = None
    if args.command in LEVEL_COMMANDS:
        level = args.level if args.level is not None else os.environ.get(LEVEL_ENV)
    return TransformConfig.create(
        wavelet=args.wavelet or os.environ.get(WAVELET_ENV),
        mode=args.mode or os.environ.get(MODE_ENV),
        level=level,
    )


def run_command(args: argparse.Namespace, config: TransformConfig) -> Any:
    """
    Execute a transform subcommand.

    Args:
        args: Parsed command-line arguments
        config: Wavelet, mode and level to use

    Returns:
        The command's result
    """
    wavelet, mode, level = config.wavelet, config.mode, config.level

    if args.command == "max-level":
        return max_level(args.length, wavelet)

    data = read_input(args.input)
    if args.command == "dwt":
        approx, detail = dwt(data, wavelet, mode)
        return {"approx": approx, "detail": detail}
    elif args.command == "idwt":
        if not isinstance(data, dict):
            raise WaveletError('idwt input must be an object with "approx" and "detail" keys.')
        return idwt(data.get("approx"), data.get("detail"), wavelet, mode)
    elif args.command == "wavedec":
        return wavedec(data, wavelet, mode, level)
    elif args.command == "waverec":
        return waverec(data, wavelet, mode)
    elif args.command == "pad":
        return pad(data, (args.front, args.back), mode)
    elif args.command == "energy":
        return energy(data)
    elif args.command == "denoise":
        return denoise_signal(data, wavelet, mode, level,
                              threshold_factor=args.threshold_factor, kind=args.kind)
    raise WaveletError(f"Unknown command {args.command!r}")


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="discrete-wavelets",
        description="One-dimensional discrete wavelet transform",
    )
    parser.add_argument("--wavelet", type=str, default=None,
                        help="Wavelet name or alias (default: $DWT_WAVELET or haar)")
    parser.add_argument("--mode", type=str, default=None,
                        help="Signal extension mode or alias (default: $DWT_MODE or symmetric)")
    parser.add_argument("--level", type=str, default=None,
                        help="Decomposition level (default: $DWT_LEVEL or maximum useful level)")
    parser.add_argument("--output", type=str, default=None,
                        help="Output file (default: stdout)")
    parser.add_argument("--indent", type=int, default=None,
                        help="Indentation of the JSON output")
    parser.add_argument("--verbose", action="store_true",
                        help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, help_text in [
        ("dwt", "Single level transform of a JSON list"),
        ("idwt", 'Single level inverse of a JSON object {"approx": [...], "detail": [...]}'),
        ("wavedec", "Multilevel decomposition of a JSON list"),
        ("waverec", "Multilevel reconstruction of a JSON list of coefficient lists"),
        ("energy", "Sum of squares of a (nested) JSON list"),
    ]:
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("input", nargs="?", default=None,
                         help="Input JSON file (default: stdin)")

    pad_parser = subparsers.add_parser("pad", help="Extend a JSON list at both ends")
    pad_parser.add_argument("input", nargs="?", default=None,
                            help="Input JSON file (default: stdin)")
    pad_parser.add_argument("--front", type=int, required=True,
                            help="Number of values added at the front")
    pad_parser.add_argument("--back", type=int, required=True,
                            help="Number of values added at the back")

    denoise_parser = subparsers.add_parser("denoise", help="Wavelet shrinkage denoising")
    denoise_parser.add_argument("input", nargs="?", default=None,
                                help="Input JSON file (default: stdin)")
    denoise_parser.add_argument("--threshold-factor", type=float, default=1.5,
                                help="Threshold multiplier for noise estimation")
    denoise_parser.add_argument("--kind", choices=list(THRESHOLD_KINDS), default="soft",
                                help="Thresholding kind")

    level_parser = subparsers.add_parser("max-level", help="Maximum useful decomposition level")
    level_parser.add_argument("length", type=int, help="Length of the data")

    subparsers.add_parser("modes", help="List signal extension modes")
    subparsers.add_parser("wavelets", help="List named wavelets")

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """
    Main entry point for the discrete wavelet transform CLI.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        if args.command in CATALOG_COMMANDS:
            result = list_catalog(args.command)
        else:
            config = resolve_config(args)
            logger.debug("Configuration: wavelet=%s mode=%s level=%s",
                         config.wavelet.value, config.mode.value, config.level)
            result = run_command(args, config)
    except WaveletError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except (OSError, json.JSONDecodeError) as e:
        print(f"Error: cannot read input: {e}", file=sys.stderr)
        sys.exit(1)

    write_output(result, args)


if __name__ == "__main__":
    main()
