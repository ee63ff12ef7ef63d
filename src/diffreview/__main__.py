#!/usr/bin/env python3
"""
Diff review renderer - show the new content of each file in a unified diff.

Usage:
    python -m diffreview [--diff FILE] [options]

Options:
    --diff PATH       Unified diff file (reads stdin when omitted)
    --format FORMAT   Output format: html, json or text (default: html)
    --output PATH     Write output to a file instead of stdout
    --settings PATH   Settings file (default: ~/.diffreview/settings.json)
    --log-dir PATH    Directory for log files (default: ~/.diffreview/logs)
    --verbose         Also log to stderr
    --help            Show this help message
"""

import argparse
from datetime import datetime, timezone
import glob
import json
import logging
from logging.handlers import RotatingFileHandler
import os
import sys
from typing import List

from diffreview.diff_renderer import DiffRenderer
from diffreview.review_output import format_html, format_json, format_text
from diffreview.review_settings import DEFAULT_SETTINGS_PATH, ReviewSettings
from highlight.highlighter import PygmentsHighlighter


DEFAULT_LOG_DIR = os.path.expanduser("~/.diffreview/logs")


class Colors:
    """ANSI color codes for terminal output."""
    RESET = '\033[0m'
    RED = '\033[91m'

    @classmethod
    def disable(cls) -> None:
        """Disable colors (for non-terminal output)."""
        cls.RESET = ''
        cls.RED = ''


def setup_logging(log_dir: str, verbose: bool = False) -> None:
    """Configure logging with timestamped files and rotation."""
    os.makedirs(log_dir, exist_ok=True)

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d-%H-%M-%S-%f")[:23]
    log_file = os.path.join(log_dir, f"{timestamp}.log")

    # Keep up to 50 log files, max 1MB each
    handlers: List[logging.Handler] = [
        RotatingFileHandler(
            log_file,
            maxBytes=1024*1024,
            backupCount=49,
            encoding='utf-8'
        )
    ]
    if verbose:
        handlers.append(logging.StreamHandler(sys.stderr))

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )

    cleanup_old_logs(log_dir, max_logs=50)


def cleanup_old_logs(log_dir: str, max_logs: int) -> None:
    """Remove oldest log files if we exceed maximum count."""
    log_files = glob.glob(os.path.join(log_dir, "*.log*"))
    log_files.sort(key=os.path.getctime)

    while len(log_files) > max_logs:
        try:
            os.remove(log_files.pop(0))

        except OSError:
            pass  # Another process may have removed it


class DiffReviewApp:
    """
    Command-line application.

    Reads a diff, renders it and writes the result in the requested format.
    """

    def __init__(self, args: argparse.Namespace):
        """
        Initialize the application with command-line arguments.

        Args:
            args: Parsed command-line arguments
        """
        self.args = args
        self._logger = logging.getLogger("DiffReviewApp")

        if not sys.stderr.isatty():
            Colors.disable()

    def run(self) -> int:
        """
        Run the application.

        Returns:
            Exit code (0 for success, 2 for unreadable input or settings)
        """
        settings = self._load_settings()
        if settings is None:
            return 2

        diff_text = self._read_diff()
        if diff_text is None:
            return 2

        renderer = DiffRenderer.from_settings(settings)
        units = renderer.render(diff_text)
        self._logger.info("Rendered %d file(s)", len(units))

        if self.args.format == 'json':
            output = format_json(units)

        elif self.args.format == 'text':
            output = format_text(units)

        else:
            highlighter = renderer.adapter.highlighter
            style_defs = highlighter.style_defs() if isinstance(highlighter, PygmentsHighlighter) else ""
            output = format_html(units, style_defs, settings.css_class)

        return self._write_output(output)

    def _load_settings(self) -> ReviewSettings | None:
        path = self.args.settings or DEFAULT_SETTINGS_PATH
        try:
            return ReviewSettings.load_or_default(path)

        except json.JSONDecodeError as e:
            self._print_error(f"Invalid settings file {path}: {e}")
            return None

        except OSError as e:
            self._print_error(f"Failed to read settings file {path}: {e}")
            return None

    def _read_diff(self) -> str | None:
        if not self.args.diff:
            # stdin is decoded as UTF-8 whatever the locale, like --diff files
            return sys.stdin.buffer.read().decode('utf-8', errors='replace')

        try:
            with open(self.args.diff, 'r', encoding='utf-8', errors='replace') as f:
                return f.read()

        except OSError as e:
            self._print_error(f"Failed to read diff file {self.args.diff}: {e}")
            return None

    def _write_output(self, output: str) -> int:
        if not self.args.output:
            sys.stdout.write(output)
            return 0

        try:
            with open(self.args.output, 'w', encoding='utf-8') as f:
                f.write(output)

        except OSError as e:
            self._print_error(f"Failed to write output file {self.args.output}: {e}")
            return 2

        return 0

    def _print_error(self, message: str) -> None:
        """Print an error message."""
        self._logger.error(message)
        print(f"{Colors.RED}Error:{Colors.RESET} {message}", file=sys.stderr)


def parse_arguments(argv: List[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="diffreview",
        description="Render the new content of each file in a unified diff for review",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Render a diff file as an HTML page
  python -m diffreview --diff submission.diff --output review.html

  # Render straight from git
  git diff HEAD~1 | python -m diffreview --format text
        """
    )

    parser.add_argument(
        '--diff',
        help='Unified diff file (reads stdin when omitted)'
    )

    parser.add_argument(
        '--format',
        choices=['html', 'json', 'text'],
        default='html',
        help='Output format (default: html)'
    )

    parser.add_argument(
        '--output',
        help='Write output to this file instead of stdout'
    )

    parser.add_argument(
        '--settings',
        help='Settings file (default: ~/.diffreview/settings.json)'
    )

    parser.add_argument(
        '--log-dir',
        default=DEFAULT_LOG_DIR,
        help='Directory for log files (default: ~/.diffreview/logs)'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Also log to stderr'
    )

    return parser.parse_args(argv)


def main(argv: List[str] | None = None) -> int:
    """Main entry point."""
    args = parse_arguments(argv)
    try:
        setup_logging(args.log_dir, args.verbose)

    except OSError as e:
        print(f"Error: Failed to set up logging in {args.log_dir}: {e}", file=sys.stderr)
        return 2

    app = DiffReviewApp(args)
    return app.run()


if __name__ == "__main__":
    sys.exit(main())
