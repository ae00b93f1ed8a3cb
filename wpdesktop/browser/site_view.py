# wpdesktop/browser/site_view.py
from PySide6.QtWidgets import QWidget, QVBoxLayout
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtCore import QUrl, Signal

from .page import PolicyPage


class SiteView(QWidget):
    title_changed = Signal(str)

    def __init__(self, dispatcher, owner, profile=None, parent=None):
        super().__init__(parent)
        self._view = QWebEngineView(self)
        self.page = PolicyPage(dispatcher, owner, profile, self._view)
        self._view.setPage(self.page)
        self._view.titleChanged.connect(self.title_changed.emit)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self._view)

    def navigate_to(self, url: str):
        """Load a url without going through the navigation policy."""
        self._view.setUrl(QUrl(url))
