"""
Logger utility for the Algorithm Demonstrations.

Provides console/file logging with verbosity levels.
"""

import sys
from typing import Optional, TextIO
from datetime import datetime


class DemoLogger:
    """
    Logger for demo output and kernel traces.

    Info lines are the demo's console output; debug lines only appear
    when verbose.
    """

    def __init__(
        self,
        verbose: bool = False,
        log_file: Optional[str] = None,
        stream: Optional[TextIO] = None
    ):
        """
        Initialize logger.

        Args:
            verbose: Enable verbose output
            log_file: Optional file path for logging
            stream: Console stream (defaults to stdout)
        """
        self.verbose = verbose
        self.log_file = log_file
        self.stream = stream
        self.file_handle = None

        if self.log_file:
            self.file_handle = open(self.log_file, 'w', encoding='utf-8')
            self._write_header()

    def _write_header(self) -> None:
        """Write log file header."""
        if self.file_handle:
            timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
            self.file_handle.write(f"Demo Log - {timestamp}\n")
            self.file_handle.write("="*60 + "\n\n")

    def log(self, message: str, level: str = "info") -> None:
        """
        Log a message.

        Args:
            message: Message to log
            level: Log level (info, debug, warning, error)
        """
        if level == "debug" and not self.verbose:
            return

        formatted = self._format_message(message, level)

        # Console output
        print(formatted, file=self.stream if self.stream is not None else sys.stdout)

        # File output
        if self.file_handle:
            self.file_handle.write(formatted + "\n")
            self.file_handle.flush()

    def _format_message(self, message: str, level: str) -> str:
        """Format message with level prefix."""
        if level == "error":
            return f"[ERROR] {message}"
        elif level == "warning":
            return f"[WARNING] {message}"
        elif level == "debug":
            return f"[DEBUG] {message}"
        else:
            return message

    def log_event(self, event) -> None:
        """
        Log a trace event.

        Args:
            event: TraceEvent recorded by a kernel
        """
        self.log(str(event), "debug")

    def log_table(self, table_str: str) -> None:
        """
        Log a formatted DP table.

        Args:
            table_str: Output of DPTable.display()
        """
        if self.verbose:
            self.log(table_str, "debug")

    def close(self) -> None:
        """Close log file if open."""
        if self.file_handle:
            self.file_handle.close()
            self.file_handle = None

    def __del__(self):
        """Cleanup on destruction."""
        self.close()
