"""
Console style constants shared by the logger, the reporter and the
evaluation summary.
"""


class LogStyle:
    """Separators, symbols and ANSI codes for the run log."""

    WIDTH = 80
    HEAVY = "━" * WIDTH

    ARROW = "»"
    SUCCESS = "✓"
    INDENT = "  "

    # ANSI codes, console handler only
    RESET = "\033[0m"
    DIM = "\033[2m"
    BOLD = "\033[1m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    RED = "\033[31m"
