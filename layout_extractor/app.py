import sys

from PyQt5.QtWidgets import QApplication

from layout_extractor.config import get_settings
from layout_extractor.logger import setup_logger
from layout_extractor.ui.main_window import MainWindow


def main() -> int:
    settings = get_settings()
    logger = setup_logger(settings)

    app = QApplication(sys.argv)
    window = MainWindow(settings)
    # Optional project directory on the command line
    args = app.arguments()[1:]
    if args:
        window.load_project(args[0])
    window.show()
    logger.info("Layout Extractor started")
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
