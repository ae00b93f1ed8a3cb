# wpdesktop/models/decision.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .route import NavigationTarget


class Action(Enum):
    ALLOW = "allow"
    SUPPRESS = "suppress"
    OPEN_EXTERNAL = "open_external"
    OPEN_IN_NEW_APP_WINDOW = "open_in_new_app_window"
    PROMPT_USER = "prompt_user"


@dataclass(frozen=True)
class Geometry:
    x: int
    y: int
    width: int
    height: int


@dataclass(frozen=True)
class Prompt:
    title: str
    message: str
    detail: str
    buttons: Tuple[str, ...]


@dataclass(frozen=True)
class Decision:
    """Outcome of one navigation event, applied by the link dispatcher."""

    action: Action
    url: Optional[str] = None
    geometry: Optional[Geometry] = None
    prompt: Optional[Prompt] = None
    target: Optional[NavigationTarget] = None

    @classmethod
    def allow(cls) -> "Decision":
        return cls(Action.ALLOW)

    @classmethod
    def suppress(cls) -> "Decision":
        return cls(Action.SUPPRESS)

    @classmethod
    def open_external(cls, url: str) -> "Decision":
        return cls(Action.OPEN_EXTERNAL, url=url)

    @classmethod
    def new_app_window(cls, geometry: Geometry) -> "Decision":
        return cls(Action.OPEN_IN_NEW_APP_WINDOW, geometry=geometry)

    @classmethod
    def prompt_user(cls, url: str, prompt: Prompt, target: NavigationTarget) -> "Decision":
        return cls(Action.PROMPT_USER, url=url, prompt=prompt, target=target)

    @property
    def proceeds(self) -> bool:
        """Whether the embedded surface should carry on with its own navigation."""
        return self.action in (Action.ALLOW, Action.OPEN_IN_NEW_APP_WINDOW)
