"""
Unified logging for cclevels.

Provides dual output to console and a log file.
Tracks warnings and errors for an end-of-run summary.

Usage:
    from cclevels.utils import log, logWarning, logError, logDebug, init_logging, print_summary

    # At start of a command line tool:
    init_logging(Path("cclevels.log"))

    # Throughout code:
    log("Reading levelset...")                # Info - section headers, major points
    logWarning("config file not found")       # Something the user should look at
    logError("invalid levelset header")       # The command failed
    logDebug("level 3: 412 bytes")            # Useful for debugging

    # At end:
    print_summary()  # Shows warning/error counts

Library code only calls logDebug, which is a no-op until an application
has called init_logging. Reading or writing a levelset therefore never
prints anything or creates a log file on its own.
"""

import sys
import atexit
from pathlib import Path
from datetime import datetime
from typing import List, Optional, Tuple

# ANSI color codes
class Colors:
    YELLOW = '\033[93m'
    RED = '\033[91m'
    GREEN = '\033[92m'
    BOLD = '\033[1m'
    RESET = '\033[0m'


DEFAULT_LOG_NAME = "cclevels.log"

# Module state
_log_file = None
_log_path: Optional[Path] = None
_initialized = False
_registered = False
_warnings: List[str] = []
_errors: List[str] = []


def init_logging(log_path: Path = None):
    """
    Initialize logging to both console and file.

    Args:
        log_path: Path to log file. Defaults to cclevels.log in the working directory
    """
    global _log_file, _log_path, _initialized, _registered, _warnings, _errors

    if _initialized:
        return

    _warnings = []
    _errors = []

    if log_path is None:
        log_path = Path.cwd() / DEFAULT_LOG_NAME

    _log_path = Path(log_path)
    _initialized = True

    try:
        _log_path.parent.mkdir(parents=True, exist_ok=True)
        _log_file = open(_log_path, 'w', encoding='utf-8')

        timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
        _log_file.write(f"Run started: {timestamp}\n")
        _log_file.write("=" * 70 + "\n\n")
        _log_file.flush()

        if not _registered:
            atexit.register(close_logging)
            _registered = True

    except OSError as e:
        print(f"Warning: Could not open log file {_log_path}: {e}", file=sys.stderr)
        _log_file = None


def close_logging():
    """Close the log file and reset state."""
    global _log_file, _initialized

    if _log_file is not None:
        try:
            timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
            _log_file.write(f"\n{'=' * 70}\n")
            _log_file.write(f"Run finished: {timestamp}\n")
            _log_file.close()
        except OSError:
            pass
        _log_file = None

    _initialized = False


def is_initialized() -> bool:
    return _initialized


def print_summary():
    """
    Print a summary of warnings and errors at the end of a run.
    Uses colors for terminal output.
    """
    if _errors:
        print(f"\n{Colors.RED}{Colors.BOLD}Errors ({len(_errors)}):{Colors.RESET}")
        for err in _errors:
            print(f"  {Colors.RED}- {err}{Colors.RESET}")
        if _log_file:
            _log_file.write(f"\nErrors ({len(_errors)}):\n")
            for err in _errors:
                _log_file.write(f"  - {err}\n")

    if _warnings:
        print(f"\n{Colors.YELLOW}{Colors.BOLD}Warnings ({len(_warnings)}):{Colors.RESET}")
        for warn in _warnings:
            print(f"  {Colors.YELLOW}- {warn}{Colors.RESET}")
        if _log_file:
            _log_file.write(f"\nWarnings ({len(_warnings)}):\n")
            for warn in _warnings:
                _log_file.write(f"  - {warn}\n")

    if not _errors and not _warnings:
        return

    print()
    if _errors:
        print(f"{Colors.RED}{Colors.BOLD}{len(_errors)} Error(s){Colors.RESET}", end="")
    else:
        print(f"{Colors.GREEN}0 Errors{Colors.RESET}", end="")

    print(" | ", end="")

    if _warnings:
        print(f"{Colors.YELLOW}{Colors.BOLD}{len(_warnings)} Warning(s){Colors.RESET}")
    else:
        print(f"{Colors.GREEN}0 Warnings{Colors.RESET}")

    if _log_file:
        _log_file.write(f"\n{len(_errors)} Error(s) | {len(_warnings)} Warning(s)\n")
        _log_file.flush()


def get_counts() -> Tuple[int, int]:
    """Return (error_count, warning_count)."""
    return len(_errors), len(_warnings)


def _write_to_file(msg: str, end: str = "\n"):
    """Write message to log file."""
    if _log_file is not None:
        try:
            _log_file.write(msg + end)
            _log_file.flush()
        except OSError:
            pass


def log(msg: str = "", end: str = "\n"):
    """
    Log an info message to both console and file.
    """
    if not _initialized:
        init_logging()

    print(msg, end=end)
    _write_to_file(msg, end)


def logWarning(msg: str, end: str = "\n"):
    """
    Log a warning message. Displayed in yellow and tracked for the summary.
    """
    if not _initialized:
        init_logging()

    formatted = f"Warning: {msg}"
    print(f"{Colors.YELLOW}{formatted}{Colors.RESET}", end=end)
    _write_to_file(formatted, end)
    _warnings.append(msg)


def logError(msg: str, end: str = "\n"):
    """
    Log an error message. Displayed in red on stderr and tracked for the summary.
    """
    if not _initialized:
        init_logging()

    formatted = f"ERROR: {msg}"
    print(f"{Colors.RED}{formatted}{Colors.RESET}", end=end, file=sys.stderr)
    _write_to_file(formatted, end)
    _errors.append(msg)


def logDebug(msg: str, end: str = "\n"):
    """
    Log a debug message. Only written to the log file, never shown in console.
    Does nothing until logging has been initialized.
    """
    if not _initialized:
        return

    _write_to_file(f"[DEBUG] {msg}", end)
