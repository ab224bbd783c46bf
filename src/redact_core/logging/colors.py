"""ANSI color codes for terminal output.

All colors use the 256-color palette for better compatibility and consistency.

Usage:
    from redact_core.logging.colors import RED, RESET

    print(f"{RED}Error occurred{RESET}")
"""

# Basic colors
RESET = "\033[0m"

# Level colors
RED = "\033[38;5;196m"  # Errors - bright red
YELLOW = "\033[38;5;226m"  # Warnings - bright yellow
CYAN = "\033[38;5;51m"  # Info - cyan
LIGHT_BLUE = "\033[38;5;153m"  # Debug and context - light blue

__all__ = [
    "RESET",
    "RED",
    "YELLOW",
    "CYAN",
    "LIGHT_BLUE",
]
