"""Run configuration assembled from command-line arguments and environment."""

import logging
import os
from argparse import Namespace
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime

from yfclock.parsing import parse_instant

LOG_LEVEL_ENV = "YFCLOCK_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def parse_log_level(name: str) -> int:
    """Return the ``logging`` level for a case-insensitive level name."""
    upper = name.strip().upper()
    if upper not in _LEVELS:
        valid = ", ".join(_LEVELS)
        raise ValueError(f"Invalid log level '{name}'. Valid levels: {valid}")
    return logging.getLevelName(upper)


@dataclass(frozen=True, kw_only=True)
class ClockConfig:
    """Everything the CLI needs to run one session.

    Attributes:
        at: One-shot instant; continuous mode when None
        basis: Instant whose readings are subtracted from every reading
        show_instant: Prefix one-shot output with the instant itself
        log_level: ``logging`` level for stderr diagnostics
    """

    at: datetime | None = None
    basis: datetime | None = None
    show_instant: bool = False
    log_level: int = logging.WARNING

    @property
    def one_shot(self) -> bool:
        return self.at is not None

    @classmethod
    def from_args(
        cls, args: Namespace, environ: Mapping[str, str] | None = None
    ) -> "ClockConfig":
        """Build a config from parsed arguments, falling back to the environment.

        Raises:
            InstantParseError: If --at or --basis is not a valid date/time
            ValueError: If the log level is unknown
        """
        environ = os.environ if environ is None else environ
        level_name = args.log_level or environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
        return cls(
            at=parse_instant(args.at) if args.at is not None else None,
            basis=parse_instant(args.basis) if args.basis is not None else None,
            show_instant=args.show_instant,
            log_level=parse_log_level(level_name),
        )
