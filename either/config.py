"""Settings for the ``either`` command line tool.

Values come from the process environment, after the nearest ``.env`` at or
above the working directory has been loaded with python-dotenv:

  EITHER_LOG_LEVEL       logging level name (default WARNING)
  EITHER_REPORT_FORMAT   text | markdown | json (default text)
  EITHER_LAW_FAMILIES    comma separated law families (default: all)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from .either import Either, Left, Right, sequence
from .laws import LawFamily
from .report import REPORT_FORMATS, ReportFormat

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    report_format: ReportFormat = "text"
    families: tuple[LawFamily, ...] = tuple(LawFamily)

    @property
    def log_level_number(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level]

    @classmethod
    def from_env(cls) -> Either[ValueError, Settings]:
        """Build settings from EITHER_* variables, loading the working directory ``.env`` first."""
        load_dotenv(find_dotenv(usecwd=True))
        return parse_log_level(os.getenv("EITHER_LOG_LEVEL", "WARNING")).chain(
            lambda level: parse_report_format(
                os.getenv("EITHER_REPORT_FORMAT", "text")
            ).chain(
                lambda fmt: parse_families(os.getenv("EITHER_LAW_FAMILIES", "")).map(
                    lambda families: cls(
                        log_level=level, report_format=fmt, families=families
                    )
                )
            )
        )


def parse_log_level(raw: str) -> Either[ValueError, str]:
    level = raw.strip().upper()
    if level in _LOG_LEVELS:
        return Right(level)
    return Left(
        ValueError(f"Invalid log level {raw!r}; expected one of {', '.join(_LOG_LEVELS)}")
    )


def parse_report_format(raw: str) -> Either[ValueError, ReportFormat]:
    fmt = raw.strip().lower()
    match fmt:
        case "text" | "markdown" | "json":
            return Right(fmt)
        case _:
            return Left(
                ValueError(
                    f"Invalid report format {raw!r}; expected one of {', '.join(REPORT_FORMATS)}"
                )
            )


def parse_family(raw: str) -> Either[ValueError, LawFamily]:
    name = raw.strip().lower()
    for family in LawFamily:
        if family.value == name:
            return Right(family)
    return Left(ValueError(f"Unknown law family {raw!r}"))


def parse_families(raw: str) -> Either[ValueError, tuple[LawFamily, ...]]:
    """Parse a comma separated family list; an empty value selects every family."""
    names = [n for n in raw.split(",") if n.strip()]
    if not names:
        return Right(tuple(LawFamily))
    return sequence(parse_family(n) for n in names).map(tuple)
