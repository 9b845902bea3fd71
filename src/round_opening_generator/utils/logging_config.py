"""
Logging configuration for the round opening generator.

Modules log through ``logging.getLogger(__name__)``; entry points call
``OpeningLogger.configure()`` once to attach a timestamped log file and a
console handler. A custom TRACE level sits below DEBUG for per-face
diagnostics.
"""

import logging
import os
import sys
from datetime import datetime
from typing import Optional


class OpeningLogger:
    """
    Configures logging for the round opening generator.

    Supports:
    - Standard levels plus a TRACE level (5)
    - A file handler capturing everything at the configured level
    - A console handler at INFO with a short or detailed format
    """

    TRACE_LEVEL = 5
    logging.addLevelName(TRACE_LEVEL, "TRACE")

    @staticmethod
    def _add_trace_method():
        """Add Logger.trace if not already present."""
        if not hasattr(logging.Logger, "trace"):
            def trace(self, message, *args, **kwargs):
                if self.isEnabledFor(OpeningLogger.TRACE_LEVEL):
                    self._log(OpeningLogger.TRACE_LEVEL, message, args, **kwargs)
            logging.Logger.trace = trace

    @staticmethod
    def configure(
        debug_mode: bool = False,
        log_dir: str = "logs",
        short_console: bool = True,
    ) -> str:
        """
        Configure the root logger.

        Args:
            debug_mode: If True, log DEBUG and above to the file
            log_dir: Directory for log files, created if missing
            short_console: Use "LEVEL: message" on the console, as Revit's
                Python shells show it best

        Returns:
            Path to the created log file
        """
        OpeningLogger._add_trace_method()
        os.makedirs(log_dir, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = os.path.join(log_dir, f"round_openings_{timestamp}.log")

        level = logging.DEBUG if debug_mode else logging.INFO
        root_logger = logging.getLogger()
        root_logger.setLevel(level)
        if root_logger.handlers:
            root_logger.handlers.clear()

        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        file_handler.setLevel(level)
        root_logger.addHandler(file_handler)

        console_handler = logging.StreamHandler(sys.stdout)
        if short_console:
            console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        else:
            console_handler.setFormatter(
                logging.Formatter("%(name)s - %(levelname)s: %(message)s")
            )
        console_handler.setLevel(logging.INFO)
        root_logger.addHandler(console_handler)

        return log_file


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Logger for a module, with an optional level override.

    Args:
        name: Logger name, typically __name__
        level: Optional specific level for this logger
    """
    logger = logging.getLogger(name)
    if level:
        logger.setLevel(level)
    return logger
