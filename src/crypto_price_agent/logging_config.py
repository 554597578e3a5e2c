from __future__ import annotations

import logging
import sys

from pythonjsonlogger.json import JsonFormatter

from crypto_price_agent.config.settings import Settings, get_settings

PLAIN_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings | None = None, service: str = "crypto-price-agent") -> None:
    """Install a single stdout handler on the root logger."""
    settings = settings or get_settings()

    if settings.log_json:
        formatter: logging.Formatter = JsonFormatter(
            fmt="%(asctime)s %(name)s %(levelname)s %(message)s",
            rename_fields={"asctime": "timestamp", "levelname": "level", "name": "logger"},
            static_fields={"service": service},
        )
    else:
        formatter = logging.Formatter(PLAIN_FORMAT)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    logging.root.handlers.clear()
    logging.root.addHandler(handler)
    logging.root.setLevel(settings.log_level.upper())
