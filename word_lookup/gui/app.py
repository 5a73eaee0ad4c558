"""Main GUI application entry point."""

import sys

from PyQt6.QtWidgets import QApplication

from word_lookup.gui.main_window import MainWindow, wait_for_detached_workers


def main() -> int:
    """Launch the Word Lookup GUI application."""
    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("Word Lookup")
    app.setOrganizationName("WordLookup")

    window = MainWindow()
    window.show()

    exit_code = app.exec()

    # Lookups still in flight at close end within the client-side timeout
    wait_for_detached_workers(int(window.config.request_timeout * 1000) + 1000)
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
