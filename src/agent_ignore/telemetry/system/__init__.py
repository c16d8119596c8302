"""System operational logging."""

from agent_ignore.telemetry.system.system_logger import (
    ConsoleFormatter,
    close_system_logger_file,
    configure_system_logger_file,
    get_system_logger,
    set_console_level,
)

__all__ = [
    "ConsoleFormatter",
    "close_system_logger_file",
    "configure_system_logger_file",
    "get_system_logger",
    "set_console_level",
]
