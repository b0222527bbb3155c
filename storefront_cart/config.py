"""Configuration and logging setup.

Environment variables:
    STOREFRONT_LOG_LEVEL: Minimum log level applied by setup() (default: INFO)
    STOREFRONT_DISCOUNT_RATE: Display discount rate, 0 to 1 (default: 0.10)
    STOREFRONT_LOG_SNAPSHOTS: "true" to log every published snapshot (default: false)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Mapping, Optional

import structlog

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}

DEFAULT_DISCOUNT_RATE = Decimal("0.10")


def parse_level(level: str) -> int:
    try:
        return _LEVELS[level.upper()]
    except KeyError:
        raise ValueError(f"unknown log level: {level!r}") from None


def parse_rate(value: str) -> Decimal:
    try:
        rate = Decimal(value)
    except InvalidOperation:
        raise ValueError(f"invalid discount rate: {value!r}") from None
    if not rate.is_finite() or rate < 0 or rate > 1:
        raise ValueError(f"discount rate must be between 0 and 1: {value!r}")
    return rate


def parse_flag(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"invalid boolean flag: {value!r}")


@dataclass(frozen=True)
class CartConfig:
    log_level: str = "INFO"
    discount_rate: Decimal = DEFAULT_DISCOUNT_RATE
    log_snapshots: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> CartConfig:
        """Load configuration from the environment.

        Raises:
            ValueError: If a variable is set to an unusable value.
        """
        env = os.environ if environ is None else environ
        log_level = env.get("STOREFRONT_LOG_LEVEL", "INFO").upper()
        parse_level(log_level)
        return cls(
            log_level=log_level,
            discount_rate=parse_rate(env.get("STOREFRONT_DISCOUNT_RATE", str(DEFAULT_DISCOUNT_RATE))),
            log_snapshots=parse_flag(env.get("STOREFRONT_LOG_SNAPSHOTS", "false")),
        )


def configure_logging(level: str = "INFO") -> None:
    """Configure structlog with JSON rendering and ISO timestamps."""
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(parse_level(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
    )


def setup(environ: Optional[Mapping[str, str]] = None) -> CartConfig:
    """Load CartConfig from the environment and configure logging at its level.

    Application roots call this once, then pass the config to CartSession.
    """
    config = CartConfig.from_env(environ)
    configure_logging(config.log_level)
    return config
