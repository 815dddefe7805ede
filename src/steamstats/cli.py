"""steamstats CLI: convert a Steam raw stats dump to JSON or C#."""

import argparse
import logging
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path

from pydantic import ValidationError


def _configure_logging(verbose: bool, quiet: bool) -> None:
    """Send log records to stderr so stdout only carries the converted output."""
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    package_logger = logging.getLogger("steamstats")
    package_logger.handlers[:] = [handler]
    package_logger.setLevel(level)


def main():
    """Main CLI entry point for steamstats."""
    try:
        steamstats_version = get_version("steamstats")
    except PackageNotFoundError:
        steamstats_version = "dev"

    parser = argparse.ArgumentParser(
        prog="steamstats",
        usage="%(prog)s [options] <input file>",
        description="Parse Steam raw stats and achievements into JSON or C#"
    )
    parser.add_argument("--version", action="version", version=f"steamstats {steamstats_version}")
    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        default=None,
        help="Path to the raw stats dump"
    )
    parser.add_argument(
        "-c", "--csharp",
        action="store_true",
        help="Write output as C#"
    )
    parser.add_argument(
        "-o", "--out",
        type=Path,
        default=None,
        help="Write output to this file instead of stdout"
    )
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Encoding of the input file (default: utf-8)"
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Pretty-print JSON with this indent width"
    )
    parser.add_argument(
        "--namespace",
        default=None,
        help="Namespace of the generated C# class (default: BS)"
    )
    parser.add_argument(
        "--class-name",
        dest="class_name",
        default=None,
        help="Name of the generated C# class (default: StatsAndAchievementsDefinitions)"
    )
    parser.add_argument(
        "--enum-base",
        dest="enum_base",
        type=int,
        default=None,
        help="Ordinal of the first enum member (default: 0)"
    )
    parser.add_argument(
        "--escape-strings",
        dest="escape_strings",
        action="store_true",
        help="Escape quotes and backslashes in generated C# string literals"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging to stderr"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all non-error output."
    )

    args = parser.parse_args()

    if args.input is None:
        parser.print_help()
        sys.exit(1)

    _configure_logging(args.verbose, args.quiet)

    # Lazy import: keep --help and --version free of the kernel import
    from .api import convert_file
    from .codes import OutputFormat
    from .options import CodegenOptions

    try:
        output_format = OutputFormat.CSHARP if args.csharp else OutputFormat.JSON
        option_values = {
            key: getattr(args, key)
            for key in ("namespace", "class_name", "enum_base")
            if getattr(args, key) is not None
        }
        options = CodegenOptions(escape_strings=args.escape_strings, **option_values)

        output_text = convert_file(
            Path(args.input).resolve(),
            output_format,
            encoding=args.encoding,
            indent=args.indent,
            options=options,
        )

        if args.out is not None:
            out_path = Path(args.out).resolve()
            out_path.parent.mkdir(parents=True, exist_ok=True)
            out_path.write_text(output_text if output_text.endswith("\n") else output_text + "\n", encoding="utf-8")
            if not args.quiet:
                print(f"[OK] Wrote {output_format.value} output", file=sys.stderr)
                print(f"  Output: {out_path}", file=sys.stderr)
        else:
            print(output_text, end="" if output_text.endswith("\n") else "\n")
    except ValidationError as e:
        print(f"Error: invalid option: {e}", file=sys.stderr)
        sys.exit(1)
    except (OSError, LookupError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
