"""Run a script or a code string with suggestions for unresolved names.

    $ didyoumean script.py
    $ didyoumean -c "print(lenn([1, 2]))"
    ...
    didyoumean.exceptions.UnresolvedNameError: name 'lenn' is not defined. Did you mean len?
"""

import argparse
import logging
import runpy
import sys

from .config import Config, setup_logging
from .consts import PACKAGE_NAME, PACKAGE_VERSION
from .hooks import install
from .models import TieBreak

logger = logging.getLogger("didyoumean.main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PACKAGE_NAME,
        description="Run Python code, suggesting the nearest names when a lookup fails.",
    )
    parser.add_argument("--version", action="version", version=PACKAGE_VERSION)
    parser.add_argument(
        "--tie-break",
        choices=[t.value for t in TieBreak],
        help="Ordering of equally close suggestions",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    parser.add_argument(
        "--no-builtins",
        action="store_true",
        help="Do not suggest builtin and keyword names",
    )
    parser.add_argument("-c", dest="command", help="Program passed in as string")
    parser.add_argument("script", nargs="?", help="Path of the script to run")
    parser.add_argument("args", nargs=argparse.REMAINDER, help="Script arguments")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Uncaught exceptions propagate to the installed excepthook, which prints
    them with suggestions attached.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is not None:
        # with -c every positional belongs to the program
        if args.script is not None:
            args.args = [args.script, *args.args]
            args.script = None
    elif args.script is None:
        parser.error("one of the arguments -c or script is required")

    overrides = {}
    if args.tie_break:
        overrides["tie_break"] = args.tie_break
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.no_builtins:
        overrides["include_reserved"] = False
    config = Config(**overrides)

    setup_logging(config.log_level)
    install(config)

    if args.command is not None:
        logger.debug("Running command string")
        sys.argv = ["-c", *args.args]
        code = compile(args.command, "<string>", "exec")
        exec(code, {"__name__": "__main__"})
    else:
        logger.debug(f"Running script {args.script}")
        sys.argv = [args.script, *args.args]
        runpy.run_path(args.script, run_name="__main__")
    return 0


if __name__ == "__main__":
    sys.exit(main())
