"""
CLI entry point for the turtlescene command.

Compiles a turtle program file, prints a summary and the diagnostic flags,
and optionally writes the exported scene as JSON.
"""

import argparse
import logging
import sys
from pathlib import Path

from turtlescene.compiler import compile_file
from turtlescene.config import LOG_LEVEL_DEFAULT, TRACE, TRACE_ENABLED
from turtlescene.protocol.export import encode_result
from turtlescene.utils.errors import ParseError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_DIAGNOSTICS = 1
EXIT_ERROR = 2


def build_argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="turtlescene", description="Compile a turtle program into a vector scene"
    )
    parser.add_argument("input", help="Path to the turtle program")
    parser.add_argument(
        "--json", metavar="OUT", help="Write the compiled scene as JSON ('-' for stdout)"
    )
    parser.add_argument("--indent", type=int, default=None, help="JSON indentation")
    parser.add_argument(
        "--strict", action="store_true", help="Exit with status 1 when any diagnostic is raised"
    )

    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="Increase verbosity; -v=INFO, -vv=DEBUG, -vvv=TRACE",
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    parser.add_argument(
        "--log-level",
        choices=["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set specific log level",
    )
    return parser


def resolve_log_level(args: argparse.Namespace) -> int:
    if args.log_level:
        return TRACE if args.log_level == "TRACE" else getattr(logging, args.log_level)
    if args.verbose >= 3:
        return TRACE
    if args.verbose == 2:
        return logging.DEBUG
    if args.verbose == 1:
        return logging.INFO
    if args.quiet:
        return logging.ERROR
    if TRACE_ENABLED or LOG_LEVEL_DEFAULT == "TRACE":
        return TRACE
    return getattr(logging, LOG_LEVEL_DEFAULT, logging.WARNING)


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    logging.basicConfig(
        level=resolve_log_level(args),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        result = compile_file(args.input)
    except ParseError as e:
        print(f"{args.input}: {e}", file=sys.stderr)
        return EXIT_ERROR
    except UnicodeDecodeError as e:
        print(f"File error: {args.input} is not valid UTF-8: {e}", file=sys.stderr)
        return EXIT_ERROR
    except OSError as e:
        print(f"File error: {e}", file=sys.stderr)
        return EXIT_ERROR

    scene = result.scene
    b = scene.bounds
    print(
        f"{args.input}: {len(scene.objects)} objects, {len(scene.paints)} paints, "
        f"bounds=({b.min_x:g}, {b.min_y:g})-({b.max_x:g}, {b.max_y:g})"
    )
    if result.diagnostics:
        print(f"diagnostics: {result.diagnostics}")

    if args.json:
        payload = encode_result(result, indent=args.indent)
        if args.json == "-":
            print(payload)
        else:
            try:
                Path(args.json).write_text(payload + "\n", encoding="utf-8")
            except OSError as e:
                print(f"File error: {e}", file=sys.stderr)
                return EXIT_ERROR
            logger.info(f"Wrote scene to {args.json}")

    if args.strict and result.diagnostics:
        return EXIT_DIAGNOSTICS
    return EXIT_OK


def main_entry():
    """Entry point for the turtlescene console script."""
    sys.exit(main())


if __name__ == "__main__":
    main_entry()
