# wpdesktop/host/backend.py
from abc import ABC, abstractmethod
from typing import Any

from ..models.decision import Prompt

class HostServices(ABC):
    @abstractmethod
    def open_external(self, url: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def confirm(self, prompt: Prompt) -> int:
        """Show a modal choice and return the index of the pressed button."""
        raise NotImplementedError

    @abstractmethod
    def show_main_site_view(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def save_setting(self, key: str, value: Any) -> None:
        raise NotImplementedError
