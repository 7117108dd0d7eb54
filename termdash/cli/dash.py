"""termdash: terminal dashboard entry point."""

from __future__ import annotations

import curses
import logging
import signal
import sys

from termdash.constants import EXIT_FAULT, EXIT_OK
from termdash.cli.tui.types import CursesWindow
from termdash.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _run_tui(stdscr: CursesWindow) -> int:
    from termdash.cli.tui.app import DashboardApp
    from termdash.cli.tui.backend import CursesBackend
    from termdash.config import config

    app = DashboardApp(CursesBackend(stdscr, mouse=config.ui.mouse), config.ui)

    def _handle_sigterm(_signum: int, _frame: object | None) -> None:
        logger.info("SIGTERM received")
        app.stop(EXIT_OK)

    # cbreak mode leaves Ctrl-C as SIGINT; treat it as the quit shortcut
    def _handle_sigint(_signum: int, _frame: object | None) -> None:
        logger.info("SIGINT received")
        app.interrupt()

    previous_term = signal.signal(signal.SIGTERM, _handle_sigterm)
    previous_int = signal.signal(signal.SIGINT, _handle_sigint)
    try:
        return app.run()
    finally:
        signal.signal(signal.SIGINT, previous_int)
        signal.signal(signal.SIGTERM, previous_term)


def _main_impl() -> int:
    try:
        # Config is validated on import
        from termdash.config import config

        setup_logging(config.logging.level, config.logging.path)
    except (ValueError, OSError) as exc:
        sys.stderr.write(f"termdash error: {exc}\n")
        return EXIT_FAULT

    try:
        return curses.wrapper(_run_tui)
    except KeyboardInterrupt:
        raise
    except Exception as exc:
        logger.exception("Uncaught fault in TUI")
        sys.stderr.write(f"termdash error: {exc}\n")
        return EXIT_FAULT


def main() -> None:
    try:
        exit_code = _main_impl()
    except KeyboardInterrupt:
        exit_code = EXIT_OK
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
