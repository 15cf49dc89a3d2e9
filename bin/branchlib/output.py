"""Formatted output utilities."""

# ============================================================
# Imports
# ============================================================

import os
import sys


# ============================================================
# Configuration
# ============================================================

class Color:
    """ANSI color codes for terminal output."""

    RESET = '\033[0m'
    BOLD = '\033[1m'
    CYAN = '\033[36m'
    YELLOW = '\033[33m'
    RED = '\033[31m'

    enabled = 'NO_COLOR' not in os.environ

    @classmethod
    def wrap(cls, text: str, *codes: str) -> str:
        """Wrap text in the given codes, or return it unchanged when disabled."""
        if not cls.enabled or not codes:
            return text
        return f"{''.join(codes)}{text}{cls.RESET}"


def set_color_enabled(enabled: bool) -> None:
    """Toggle ANSI colors for all output helpers."""
    Color.enabled = enabled


# ============================================================
# Output Functions
# ============================================================

def print_info(message: str) -> None:
    """Print an informational message."""
    print(message)


def print_lines(lines: list[str]) -> None:
    """Print pre-rendered lines to stdout."""
    for line in lines:
        print(line)


def print_warning(message: str) -> None:
    """Print a warning message in yellow to stderr."""
    print(Color.wrap(f"Warning: {message}", Color.YELLOW), file=sys.stderr)


def print_error(message: str) -> None:
    """Print an error message to stderr with 'Error:' prefix."""
    print(Color.wrap(f"Error: {message}", Color.BOLD, Color.RED), file=sys.stderr)
