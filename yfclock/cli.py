from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from yfclock import __version__
from yfclock.config import LOG_LEVEL_ENV, ClockConfig
from yfclock.core import YearFractionClock
from yfclock.display import LineDisplay
from yfclock.driver import run
from yfclock.errors import YfclockError
from yfclock.sources import SystemClock

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="yfclock",
        description="Show the current instant as fractions of the year and of the day.",
    )
    p.add_argument(
        "--at",
        metavar="WHEN",
        help="print the reading for WHEN once and exit (e.g. 2021-03-14T15:09:26+01:00)",
    )
    p.add_argument(
        "--basis",
        metavar="WHEN",
        help="show time elapsed since WHEN instead of absolute position",
    )
    p.add_argument(
        "--show-instant",
        action="store_true",
        help="with --at, prefix the output with the instant itself",
    )
    p.add_argument(
        "--log-level",
        default=None,
        help=f"stderr log level (default: ${LOG_LEVEL_ENV} or WARNING)",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def main(argv: list[str] | None = None, stdout: TextIO | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    out = stdout if stdout is not None else sys.stdout

    p = build_parser()
    args = p.parse_args(argv)
    try:
        config = ClockConfig.from_args(args)
    except ValueError as e:
        p.error(str(e))

    logging.basicConfig(
        level=config.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    clock = YearFractionClock()
    try:
        if config.basis is not None:
            clock.set_basis(config.basis)

        if config.one_shot:
            text = clock.format(config.at)
            if config.show_instant:
                text = f"{config.at.isoformat()}: {text}"
            print(text, file=out)
            return 0

        display = LineDisplay(out)
        try:
            run(clock, SystemClock(), display)
        except KeyboardInterrupt:
            logger.info("Interrupted")
        finally:
            display.finish()
    except YfclockError as e:
        print(f"yfclock: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
