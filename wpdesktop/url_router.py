# wpdesktop/url_router.py
import logging
import urllib.parse
from dataclasses import replace
from typing import Iterable, Union
from .models.route import NavigationTarget, MatchRule

log = logging.getLogger(__name__)

LOGIN_ENDPOINT = "wp-login.php"
DEFAULT_PORTS = {"http": 80, "https": 443}
REAUTH_PARAM = "reauth"


class InvalidURLError(ValueError):
    """Raised when a navigation url cannot be parsed."""


class URLRouter:
    SUPPORTED = {"http", "https"}

    def __init__(
        self,
        internal_host: str = "127.0.0.1",
        public_host: str = "wordpress.com",
        public_url: str = "https://wordpress.com",
    ):
        self.internal_host = internal_host.lower()
        self.public_host = public_host.lower()
        self.public_url = public_url

    def parse(self, text: str) -> NavigationTarget:
        text = text.strip()
        try:
            parts = urllib.parse.urlsplit(text)
            port = parts.port
        except ValueError as e:
            raise InvalidURLError(f"Cannot parse url {text!r}: {e}") from e
        scheme = parts.scheme.lower()
        host = parts.hostname or ""
        path = parts.path
        if port is not None and port == DEFAULT_PORTS.get(scheme):
            port = None
        # a url with an authority always has at least the root path
        if host and not path:
            path = "/"
        return NavigationTarget(
            scheme=scheme,
            host=host,
            port=port,
            path=path,
            query=parts.query,
            fragment=parts.fragment,
            username=parts.username,
            password=parts.password,
        )

    def parse_rule(self, text: str) -> MatchRule:
        target = self.parse(text)
        if not target.host:
            raise InvalidURLError(f"Rule {text!r} has no host")
        return MatchRule(host=target.host, path=target.path)

    def to_text(self, target: NavigationTarget) -> str:
        if not target.host:
            text = f"{target.scheme}:{target.path}" if target.scheme else target.path
        else:
            host = f"[{target.host}]" if ":" in target.host else target.host
            netloc = host if target.port is None else f"{host}:{target.port}"
            if target.username is not None:
                userinfo = target.username
                if target.password is not None:
                    userinfo += f":{target.password}"
                netloc = f"{userinfo}@{netloc}"
            text = f"{target.scheme}://{netloc}{target.path}"
        if target.query:
            text += f"?{target.query}"
        if target.fragment:
            text += f"#{target.fragment}"
        return text

    def origin(self, target: NavigationTarget) -> str:
        host = f"[{target.host}]" if ":" in target.host else target.host
        if target.port is None:
            return f"{target.scheme}://{host}"
        return f"{target.scheme}://{host}:{target.port}"

    # ---------- Matching ----------
    def matches_rule(self, target: NavigationTarget, rule: MatchRule) -> bool:
        # scheme and port never take part in a match
        return target.host == rule.host and (target.path == rule.path or rule.is_wildcard)

    def any_rule_matches(self, target: NavigationTarget, rules: Iterable[MatchRule]) -> bool:
        return any(self.matches_rule(target, rule) for rule in rules)

    # ---------- Classification ----------
    def is_openably_valid(self, url: str) -> Union[str, bool]:
        """Return ``url`` if it may be handed to the system browser, else False."""
        try:
            target = self.parse(url)
        except InvalidURLError:
            return False
        if target.scheme in self.SUPPORTED:
            return url
        return False

    def is_login_redirect(self, url: Union[str, NavigationTarget]) -> bool:
        target = self.parse(url) if isinstance(url, str) else url
        if LOGIN_ENDPOINT not in target.path:
            return False
        params = urllib.parse.parse_qs(target.query, keep_blank_values=True)
        return bool(params.get(REAUTH_PARAM, [""])[0])

    def rewrite_if_internal(self, target: NavigationTarget) -> NavigationTarget:
        if target.host != self.internal_host:
            return target
        log.info("Replacing internal url %s with public url %s", target.host, self.public_url)
        return replace(target, host=self.public_host, port=None)
