#!/usr/bin/env python3
"""
AIS Decoder - Command Line Interface

Main entry point for the AIS decoder.
Decodes armored payloads or streams of NMEA sentences.
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict, Optional, TextIO

from . import __version__
from .core.config import OUTPUT_FORMATS, AISConfig, ConfigValidationError
from .core.receiver import AISReceiver, ReceiverStatus
from .protocols.classifier import SUPPORTED_MESSAGE_TYPES, classify
from .protocols.errors import DecodeFailure
from .protocols.messages import DecodedMessage, MessageFamily
from .utils.conversions import latitude_to_str, longitude_to_str, optional_to_str


def format_message(message: DecodedMessage) -> str:
    """Render a decoded message as one line of text."""
    parts = [f"type={message.message_type}", f"mmsi={message.mmsi}"]

    if message.navigation_status is not None:
        parts.append(f"status={message.navigation_status_text}")
    if message.position is not None:
        parts.append(
            f"pos={latitude_to_str(message.position.latitude)} "
            f"{longitude_to_str(message.position.longitude)}"
        )
    if message.family == MessageFamily.POSITION_REPORT:
        parts.append(f"sog={optional_to_str(message.speed_over_ground, 'kn')}")
        parts.append(f"cog={optional_to_str(message.course_over_ground, '°')}")
        parts.append(f"hdg={optional_to_str(message.true_heading, '°', 0)}")
        parts.append(f"rot={optional_to_str(message.rate_of_turn, '°/min')}")
    if message.ship_name is not None:
        parts.append(f"name={message.ship_name!r}")
    if message.callsign is not None:
        parts.append(f"callsign={message.callsign!r}")
    if message.ship_type is not None:
        parts.append(f"shiptype={message.ship_type}")
    if message.dimensions is not None:
        dim = message.dimensions
        parts.append(f"size={dim.length}x{dim.beam}m")

    return " ".join(parts)


def format_failure(failure: DecodeFailure) -> str:
    """Render a decode failure as one line of text."""
    text = f"error={failure.kind.value}"
    if failure.has_identity:
        text += f" type={failure.message_type} mmsi={failure.mmsi}"
    if failure.detail:
        text += f" ({failure.detail})"
    return text


def _failure_dict(failure: DecodeFailure) -> Dict[str, Any]:
    return {
        "error": failure.kind.value,
        "detail": failure.detail,
        "message_type": failure.message_type,
        "mmsi": failure.mmsi,
    }


def print_status(status: ReceiverStatus, out: TextIO) -> None:
    """Print receiver counters."""
    print(file=out)
    print(f"Messages received:  {status.messages_received}", file=out)
    print(f"Messages decoded:   {status.messages_decoded}", file=out)
    print(f"Fragments skipped:  {status.fragments_skipped}", file=out)
    print(f"Unsupported:        {status.unsupported}", file=out)
    print(f"Errors:             {status.errors}", file=out)
    for message_type in sorted(status.type_counts):
        print(f"  type {message_type:2d}: {status.type_counts[message_type]}", file=out)


def cmd_info(args: argparse.Namespace) -> int:
    """Display module information."""
    print(f"AIS Decoder v{__version__}")
    print()
    print("AIVDM/AIVDO payload decoder (ITU-R M.1371)")
    print("==========================================")
    print()
    print("Supported message types:")
    print("  - 1, 2, 3: Class A position report")
    print("  - 18, 19: Class B position report")
    print("  - 5: Static and voyage related data")
    print("  - 4, 11, 24: Identity only")
    print()
    print(f"Recognized types: {', '.join(str(t) for t in sorted(SUPPORTED_MESSAGE_TYPES))}")
    return 0


def cmd_decode(args: argparse.Namespace) -> int:
    """Decode armored payloads given on the command line."""
    exit_code = 0

    for payload in args.payloads:
        result = classify(payload, args.fill_bits)

        if isinstance(result, DecodeFailure):
            exit_code = 1
            if args.json:
                print(json.dumps(_failure_dict(result)))
            else:
                print(format_failure(result))
            continue

        if args.json:
            print(json.dumps(result.to_dict()))
        else:
            print(format_message(result))

    return exit_code


def cmd_stream(args: argparse.Namespace) -> int:
    """Decode NMEA sentences from a file or stdin."""
    config = AISConfig.load(args.config) if args.config else AISConfig.load_default()
    if config is None:
        print(f"Error: could not load configuration from {args.config}")
        return 1

    if args.own_mmsi is not None:
        try:
            config = config.with_own_mmsi(args.own_mmsi)
        except ConfigValidationError as e:
            print(f"Error: {e}")
            return 1

    if not args.verbose:
        logging.getLogger().setLevel(config.log_level)

    output_format = args.format or config.output.format
    indent = config.output.indent or None
    receiver = AISReceiver(config.receiver)

    def show(message: DecodedMessage, delta: Dict[str, Any]) -> None:
        if output_format == "delta":
            print(json.dumps(delta, indent=indent))
        elif output_format == "json":
            print(json.dumps(message.to_dict()))
        else:
            print(format_message(message))

    receiver.add_callback(show)

    def show_failure(failure: DecodeFailure) -> None:
        if output_format == "text":
            print(format_failure(failure))
        else:
            print(json.dumps(_failure_dict(failure)))

    if args.include_failures or config.output.include_failures:
        receiver.add_failure_callback(show_failure)

    try:
        if args.file:
            with open(args.file, "r") as f:
                for line in f:
                    receiver.process_sentence(line)
        else:
            for line in sys.stdin:
                receiver.process_sentence(line)
    except OSError as e:
        print(f"Error: {e}")
        return 1
    except KeyboardInterrupt:
        pass

    print_status(receiver.status, sys.stderr)
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="ais-decode",
        description="AIS Decoder - AIVDM/AIVDO payload decoding",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Info command
    info_parser = subparsers.add_parser("info", help="Display module information")
    info_parser.set_defaults(func=cmd_info)

    # Decode command
    decode_parser = subparsers.add_parser("decode", help="Decode armored payloads")
    decode_parser.add_argument("payloads", nargs="+", help="Six-bit armored payloads")
    decode_parser.add_argument(
        "--fill-bits",
        type=int,
        default=0,
        help="Padding bits at the end of each payload (default: 0)",
    )
    decode_parser.add_argument(
        "--json", action="store_true", help="Print results as JSON"
    )
    decode_parser.set_defaults(func=cmd_decode)

    # Stream command
    stream_parser = subparsers.add_parser(
        "stream", help="Decode NMEA sentences from a file or stdin"
    )
    stream_parser.add_argument(
        "file", nargs="?", help="File of NMEA sentences (reads stdin if not provided)"
    )
    stream_parser.add_argument(
        "--own-mmsi", type=int, default=None, help="Own vessel MMSI"
    )
    stream_parser.add_argument(
        "--format", choices=OUTPUT_FORMATS, default=None, help="Output format"
    )
    stream_parser.add_argument(
        "--include-failures",
        action="store_true",
        help="Also print payloads that could not be decoded",
    )
    stream_parser.add_argument(
        "--config", "-c", type=str, default=None, help="Configuration file (JSON)"
    )
    stream_parser.set_defaults(func=cmd_stream)

    return parser


def main(argv: Optional[list] = None) -> int:
    """
    Main entry point.

    Args:
        argv: Command line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if args.command is None:
        # No command specified - show info
        return cmd_info(args)

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
