"""
Logging Package.

Logger bootstrap, visual style constants and environment reporting.
"""

from .logger import ColorFormatter, Logger
from .reporter import Reporter
from .styles import LogStyle

__all__ = ["ColorFormatter", "Logger", "LogStyle", "Reporter"]
