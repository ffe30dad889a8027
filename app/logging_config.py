from __future__ import annotations

import logging


def configure_logging(level: str | int = logging.INFO) -> None:
    """Simple, dev-friendly logging setup for scripts and local runs."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
