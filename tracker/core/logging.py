"""
Logging configuration module for the tracker.

Provides centralized logging setup with colored output using rich.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: int = logging.WARNING) -> None:
    """
    Sets up logging configuration with rich colored output.

    Args:
        level (int): The logging level to set. Defaults to logging.WARNING.

    """
    console = Console(width=120, stderr=True, force_jupyter=False)

    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_level=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=False,
    )
    rich_handler.setFormatter(logging.Formatter("%(name)s - %(message)s", datefmt="[%X]"))

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[rich_handler],
        force=True,
    )

    # prompt_toolkit is chatty at debug level.
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def parse_level(name: str) -> int:
    """
    Converts a level name such as "debug" into a logging level.

    Args:
        name (str): The level name, in any letter case.

    Raises:
        ValueError: If the name is not a known logging level.

    Returns:
        int: The numeric logging level.

    """
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name}")
    return level
