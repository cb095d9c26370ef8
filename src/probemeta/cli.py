"""
Command-line interface for probemeta.

Usage:
  probemeta probe.txt                 # Default report
  probemeta -q *.txt                  # One-line summaries
  probemeta --json probe.txt          # JSON on stdout
  probemeta -o report.json *.txt      # JSON export
  ffprobe ... | probemeta -           # Read captured output from stdin
  probemeta --sample                  # Show the bundled sample
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace

from probemeta._version import __version__
from probemeta.config import LOG_FORMATS, LOG_LEVELS, get_config
from probemeta.decoder import parse_media_information
from probemeta.errors import MetadataError
from probemeta.formatters import format_default, format_json, format_json_list, format_quiet
from probemeta.models import MediaMetadata
from probemeta.sample import placeholder
from probemeta.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


def _read_input(path: str) -> str:
    if path == "-":
        # Same error handler as files: undecodable bytes fail at repair time
        return sys.stdin.buffer.read().decode("utf-8", errors="surrogateescape")
    with open(path, encoding="utf-8", errors="surrogateescape") as f:
        return f.read()


def _render(metadata: MediaMetadata, args: argparse.Namespace) -> str:
    if args.json:
        return format_json(metadata)
    if args.quiet:
        return format_quiet(metadata)
    return format_default(metadata)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="probemeta",
        description="Decode captured ffprobe media information into a metadata report.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Input:
  Each file holds the text captured from one
  `ffprobe -print_format json -show_format -show_streams` run, either as
  plain JSON or as the escaped single-line form. Use - for stdin.

Examples:
  probemeta probe.txt                 # Default report
  probemeta -q *.txt                  # One-line summaries
  probemeta -o report.json *.txt      # JSON export
        """,
    )
    parser.add_argument("files", nargs="*", help="Captured probe output file(s)")
    parser.add_argument("-o", "--output", help="Save decoded metadata to JSON file")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")

    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument("-q", "--quiet", action="store_true", help="Quick summary only")
    mode_group.add_argument("--json", action="store_true", help="Print JSON instead of a report")

    parser.add_argument(
        "--sample",
        action="store_true",
        help="Show the bundled sample metadata",
    )
    parser.add_argument("--log-level", choices=LOG_LEVELS, help="Override configured log level")
    parser.add_argument("--log-format", choices=LOG_FORMATS, help="Override configured log format")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for probemeta CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        logging_config = get_config().logging
    except ValueError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1
    if args.log_level:
        logging_config = replace(logging_config, level=args.log_level)
    if args.log_format:
        logging_config = replace(logging_config, format=args.log_format)
    setup_logging(logging_config)

    if args.sample:
        metadata = placeholder()
        if metadata is None:
            print("Error: bundled sample is unavailable", file=sys.stderr)
            return 1
        print(_render(metadata, args))
        return 0

    if not args.files:
        parser.error("the following arguments are required: files")

    all_metadata = []
    errors = 0

    for file_path in args.files:
        try:
            metadata = parse_media_information(_read_input(file_path))
        except OSError as e:
            print(f"Error: {e}", file=sys.stderr)
            errors += 1
            continue
        except MetadataError as e:
            logger.warning("Failed to decode media information", file=file_path, error=str(e))
            print(f"Error decoding {file_path}: {e}", file=sys.stderr)
            errors += 1
            continue

        all_metadata.append(metadata)
        print(_render(metadata, args))
        if not args.quiet and not args.json:
            print()

    # JSON export
    if args.output and all_metadata:
        json_output = format_json_list(all_metadata)
        try:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(json_output)
        except OSError as e:
            print(f"Error: could not write {args.output}: {e}", file=sys.stderr)
            return 1
        print(f"Report saved to: {args.output}")

    return 1 if errors > 0 else 0


if __name__ == "__main__":
    sys.exit(main())
