"""
Logging utilities for the API server.

Configures stdlib logging once at startup and prints a color-coded
startup banner. Uses colorama for cross-platform terminal color support.
"""

import datetime
import logging
import sys

from colorama import Fore, Style, init

# Initialize colorama (auto-reset after each print)
init(autoreset=True)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class C:
    """Color shortcuts for console output."""
    HEADER = Fore.CYAN + Style.BRIGHT
    OK = Fore.GREEN + Style.BRIGHT
    INFO = Fore.WHITE
    DIM = Style.DIM
    VALUE = Fore.GREEN
    RESET = Style.RESET_ALL


def _ts() -> str:
    return datetime.datetime.now().strftime("%H:%M:%S")


def setup_logging(level="INFO") -> logging.Logger:
    """
    Configure the root logger with a console handler.

    Args:
        level: Level name ('DEBUG', 'INFO', ...) or numeric level

    Returns:
        The root logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    # Prevent duplicate handlers on repeated setup
    if not any(getattr(h, "_crime_api", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._crime_api = True
        root.addHandler(handler)

    return root


def banner(title: str, rows: list[tuple[str, str]]) -> None:
    """Print a bold startup header followed by label-value pairs."""
    print(f"\n{C.HEADER}{'='*60}")
    print(f"  {title}")
    print(f"{'='*60}{C.RESET}")
    max_label = max(len(r[0]) for r in rows) if rows else 0
    for label, value in rows:
        print(f"  {label:<{max_label}}  {C.VALUE}{value}{C.RESET}")
    print(f"{C.OK}[{_ts()}] OK server starting{C.RESET}\n")
