"""ANSI color codes for terminal output.

Usage:
    from langchain_mcp_tools.logging.colors import RED, RESET

    print(f"{RED}Error occurred{RESET}")
"""

RESET = "\033[0m"

GRAY = "\033[90m"  # Routine output (trace, debug, info)
YELLOW = "\033[93m"  # Warnings
RED = "\033[91m"  # Errors
RED_BACKGROUND = "\033[101m"  # Fatal errors
CYAN = "\033[38;5;51m"  # Component labels

__all__ = [
    "RESET",
    "GRAY",
    "YELLOW",
    "RED",
    "RED_BACKGROUND",
    "CYAN",
]
