"""
Application Initialization
==========================
This module constructs the MVC (Model-View-Controller) architecture and starts
the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the Global Data Model (SimulatorState).
2. Instantiates the Main Window (View).
3. Passes the Model into the View so they can communicate.
4. Prevents circular import errors by being the orchestrator.
"""
import os
import sys

import pyqtgraph as pg
from PySide6.QtCore import QCoreApplication
from PySide6.QtWidgets import QApplication

from degeneracycollapse.config import ORG_ID, APP_ID, VISIBLE_APP_NAME, LOG_LEVEL, LOG_FILE
from degeneracycollapse.logging_config import setup_logging
from degeneracycollapse.model.state import SimulatorState
from degeneracycollapse.view.main_window import MainWindow


def main() -> None:
    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=LOG_LEVEL, log_file=LOG_FILE)

    # 2. Create the Qt Application
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")
    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)

    app = QApplication(sys.argv)
    app.setApplicationDisplayName(VISIBLE_APP_NAME)

    pg.setConfigOption("background", "w")
    pg.setConfigOption("foreground", "k")

    # 3. Initialize the Data Model
    state = SimulatorState()

    # 4. Initialize the Main Window, passing the model
    window = MainWindow(state)
    window.show()

    # 5. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
