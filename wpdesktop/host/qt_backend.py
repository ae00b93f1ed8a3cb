# wpdesktop/host/qt_backend.py
from typing import Any

from PySide6.QtCore import QUrl
from PySide6.QtGui import QDesktopServices
from PySide6.QtWidgets import QMessageBox

from .backend import HostServices
from ..models.decision import Prompt
from .. import settings as settings_store

class QtHostServices(HostServices):
    def __init__(self, window):
        self.window = window  # MainWindow

    def open_external(self, url: str) -> None:
        QDesktopServices.openUrl(QUrl(url))

    def confirm(self, prompt: Prompt) -> int:
        box = QMessageBox(self.window)
        box.setIcon(QMessageBox.Icon.Information)
        box.setWindowTitle(prompt.title)
        box.setText(prompt.message)
        box.setInformativeText(prompt.detail)
        buttons = []
        for i, label in enumerate(prompt.buttons):
            role = QMessageBox.ButtonRole.AcceptRole if i == 0 else QMessageBox.ButtonRole.RejectRole
            buttons.append(box.addButton(label, role))
        box.setEscapeButton(buttons[-1])
        box.exec()
        clicked = box.clickedButton()
        # closing the box counts as the last (cancel) button
        return buttons.index(clicked) if clicked in buttons else len(buttons) - 1

    def show_main_site_view(self) -> None:
        self.window.show_main_site_view()

    def save_setting(self, key: str, value: Any) -> None:
        settings_store.save_setting(key, value)
        self.window.settings[key] = value
