# wpdesktop/models/route.py
from dataclasses import dataclass
from typing import Optional

WILDCARD_PATHS = ("*", "/*")

@dataclass(frozen=True)
class NavigationTarget:
    scheme: str               # '' when the url has none
    host: str                 # lower-cased hostname, no brackets
    port: Optional[int]       # None when absent or the scheme's default
    path: str                 # '/' when a host is present and the path is empty
    query: str = ""
    fragment: str = ""
    username: Optional[str] = None
    password: Optional[str] = None

@dataclass(frozen=True)
class MatchRule:
    host: str
    path: str                 # literal path, or '*' / '/*' for any path

    @property
    def is_wildcard(self) -> bool:
        return self.path in WILDCARD_PATHS
