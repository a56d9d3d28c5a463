"""
Entry point for the effort timer application.
"""

from __future__ import annotations

import sys
from typing import Iterable, Tuple

from PySide6.QtWidgets import QApplication

from core.app import APP_NAME, AppCoordinator
from core.settings import APPLICATION_NAME, ORGANIZATION_NAME
from effort_timer_core.effort_timer_core import logger as app_logger

_LOGGER = app_logger.get_logger()


def _run_application_once(argv: Iterable[str]) -> Tuple[int, bool]:
    """Start the Qt application once and report whether shutdown was intentional."""
    app = QApplication(list(argv))
    app.setOrganizationName(ORGANIZATION_NAME)
    app.setApplicationName(APPLICATION_NAME)
    app.setApplicationDisplayName(APP_NAME)
    # The app lives in the tray; closing the full-screen message must not quit it.
    app.setQuitOnLastWindowClosed(False)
    coordinator = AppCoordinator()
    coordinator.start()
    exit_code = app.exec()
    manual_shutdown = getattr(coordinator, "manual_shutdown_requested", False)
    return exit_code, bool(manual_shutdown)


def main() -> int:
    """Launch the effort timer."""
    exit_code, manual = _run_application_once(sys.argv)
    if not manual:
        _LOGGER.warning("Effort timer exited without a shutdown request (code={}).", exit_code)
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
