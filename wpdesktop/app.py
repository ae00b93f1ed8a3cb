# wpdesktop/app.py
import sys
from PySide6.QtWidgets import QApplication
from .log import configure_logging
from .main_window import MainWindow
from .navigation_policy import NavigationPolicy
from .settings import load_settings

class WPDesktopApp(QApplication):
    def __init__(self, argv):
        super().__init__(argv)
        self.setApplicationName("WordPress.com")

def main():
    settings = load_settings()
    configure_logging(settings)
    policy = NavigationPolicy.from_settings(settings)
    app = WPDesktopApp(sys.argv)
    win = MainWindow(settings=settings, policy=policy)
    win.show()
    sys.exit(app.exec())

if __name__ == "__main__":
    main()
