# wpdesktop/main_window.py
import logging

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import QMainWindow

from .browser.site_view import SiteView
from .external_links import LinkDispatcher
from .host.qt_backend import QtHostServices
from .models.decision import Geometry
from .navigation_policy import NavigationPolicy
from .settings import LAST_LOCATION, server_url

log = logging.getLogger(__name__)

MAIN_SITE_PATH = "/sites"


class ChildWindow(QMainWindow):
    """In-app window for links that must not leave the application."""

    def __init__(self, dispatcher: LinkDispatcher, profile, geometry: Geometry, parent=None):
        super().__init__(parent)
        self.setAttribute(Qt.WidgetAttribute.WA_DeleteOnClose)
        self.site_view = SiteView(dispatcher, self, profile)
        self.site_view.title_changed.connect(self.setWindowTitle)
        self.setCentralWidget(self.site_view)
        self.setGeometry(geometry.x, geometry.y, geometry.width, geometry.height)

    def open_child_window(self, geometry: Geometry) -> "ChildWindow":
        return self.parent().open_child_window(geometry)


class MainWindow(QMainWindow):
    def __init__(self, settings: dict, policy: NavigationPolicy, parent=None):
        super().__init__(parent)
        self.settings = settings
        self.setWindowTitle("WordPress.com")
        self.resize(settings["window"]["width"], settings["window"]["height"])

        self.host = QtHostServices(self)
        self.dispatcher = LinkDispatcher(policy, self.host)
        self.children_windows = []

        self.site_view = SiteView(self.dispatcher, self)
        self.site_view.title_changed.connect(self.setWindowTitle)
        self.setCentralWidget(self.site_view)

        self.load_path(settings.get(LAST_LOCATION) or "/")

    def load_path(self, path: str) -> None:
        url = server_url(self.settings) + path
        log.info("Loading %s", url)
        self.site_view.navigate_to(url)

    def show_main_site_view(self) -> None:
        # deferred so it never runs inside a navigation callback
        QTimer.singleShot(0, lambda: self.load_path(MAIN_SITE_PATH))

    def open_child_window(self, geometry: Geometry) -> ChildWindow:
        child = ChildWindow(self.dispatcher, self.site_view.page.profile(), geometry, self)
        child.destroyed.connect(lambda _=None, c=child: self._forget_child(c))
        self.children_windows.append(child)
        child.show()
        return child

    def _forget_child(self, child: ChildWindow) -> None:
        if child in self.children_windows:
            self.children_windows.remove(child)
