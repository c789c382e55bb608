"""Logging configuration for DazzleWalker.

The library logs through loguru and is disabled on import, so embedding
applications see nothing unless they opt in.
"""

import sys

from loguru import logger


def configure_logging(*, verbose: bool = False, sink=sys.stderr) -> int:
    """Enable DazzleWalker logging and install a sink.

    Args:
        verbose: Emit debug messages (expansion, dispatch, cycle guard)
        sink: Where records go (default stderr)

    Returns:
        Handler id, usable with ``logger.remove()``
    """
    logger.enable("dazzlewalker")
    level = "DEBUG" if verbose else "INFO"
    return logger.add(
        sink,
        level=level,
        format="{level.icon} {name}: {message}",
        filter="dazzlewalker",
    )


def disable_logging() -> None:
    """Silence DazzleWalker again."""
    logger.disable("dazzlewalker")
