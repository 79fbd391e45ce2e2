from __future__ import annotations

from rich.console import Console
from rich.logging import RichHandler
import logging

_console = Console()

ROOT_LOGGER = "random_color"

def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    # Handler lives on the package root so module loggers follow its level
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        handler = RichHandler(console=_console, show_time=True, show_level=True, show_path=False)
        formatter = logging.Formatter("%(message)s")
        handler.setFormatter(formatter)
        root.addHandler(handler)
        root.setLevel(logging.INFO)
        root.propagate = False
    return logging.getLogger(name)

def console() -> Console:
    return _console
