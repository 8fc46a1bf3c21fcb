"""
Logging setup shared by the command-line tools.

Everything goes to stderr: stdout is reserved for the machine-readable
result consumed by the build tool.
"""

import logging
import sys


def setup_logging(tool_name: str, level: str = "WARNING") -> logging.Logger:
    """
    Configure logging for a tool.

    Args:
        tool_name: Name of the tool (used as logger prefix).
        level: Log level string (e.g. 'INFO', 'DEBUG').

    Returns:
        Configured logger instance.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s  %(name)-30s  %(levelname)-7s  %(message)s",
        stream=sys.stderr,
    )
    return logging.getLogger(tool_name)
