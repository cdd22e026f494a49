"""
Command line entry point for the myshell interpreter.
"""

import argparse
import logging
import sys
from typing import Optional

from myshell.exceptions import ConfigurationError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="myshell",
        description=(
            "Interactive interpreter for cd, ls, cat, mkdir, rmdir, rm, pwd, stat and exit."
        ),
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: MYSHELL_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--no-color",
        dest="color",
        action="store_false",
        default=None,
        help="Disable the coloured prompt and diagnostics",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main application entry point."""
    args = build_parser().parse_args(argv)

    try:
        from myshell.config.settings import settings

        if args.log_level:
            settings.log_level = settings.validate_log_level(args.log_level)
    except ConfigurationError as e:
        print(f"myshell: {e}", file=sys.stderr)
        return 2
    if args.color is False:
        settings.color = False

    # Configure logging
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    from myshell.container import DependencyContainer

    container = DependencyContainer(settings)
    return container.get_dispatch_loop().run()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
