"""
Application Initialization
==========================
Builds the demo window and starts the Qt event loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Configures logging from the environment.
2. Creates the QApplication and the settings store.
3. Instantiates the Main Window (View) and shows it.
"""
import os
import sys

from PySide6.QtCore import QCoreApplication, QSettings
from PySide6.QtWidgets import QApplication

from keyvaluegrid.config import log_file_from_env, log_level_from_env
from keyvaluegrid.logging_config import setup_logging
from keyvaluegrid.view.main_window import MainWindow, VISIBLE_APP_NAME

ORG_ID = "keyvaluegrid"
APP_ID = "keyvaluegrid-demo"


def create_app() -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationDisplayName(VISIBLE_APP_NAME)
    return app


def main() -> int:
    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=log_level_from_env(), log_file=log_file_from_env())

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the Main Window
    window = MainWindow(QSettings())
    window.show()

    # 4. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
