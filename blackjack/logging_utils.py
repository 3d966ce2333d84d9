"""Logging setup shared by the engine and the console entry point."""

import logging


def setup_logging(level: str = "WARNING") -> None:
    """Call once at program start (console/main.py)."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
