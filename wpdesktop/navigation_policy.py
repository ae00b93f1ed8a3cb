# wpdesktop/navigation_policy.py
import logging
from typing import Any, Dict, Iterable, Optional, Tuple

from .models.decision import Decision, Geometry, Prompt
from .models.route import MatchRule
from .settings import server_url
from .url_router import URLRouter

log = logging.getLogger(__name__)

SCALE_NEW_WINDOW_FACTOR = 0.9
OFFSET_NEW_WINDOW = 50

PROCEED_IN_BROWSER = 0
CANCEL = 1


def adjust_new_window_geometry(requested: Geometry) -> Geometry:
    """Shift and shrink a child window so it doesn't sit exactly over the main one."""
    return Geometry(
        x=requested.x + OFFSET_NEW_WINDOW,
        y=requested.y + OFFSET_NEW_WINDOW,
        width=round(requested.width * SCALE_NEW_WINDOW_FACTOR),
        height=round(requested.height * SCALE_NEW_WINDOW_FACTOR),
    )


def reauth_prompt(origin: str) -> Prompt:
    return Prompt(
        title="Jetpack Authorization Required",
        message=(
            "This feature requires that Single Sign-On is enabled in the Jetpack "
            "settings of the site:\n\n" + origin
        ),
        detail=(
            "You may try again after changing the site's Jetpack settings, "
            "or you can proceed in an external browser."
        ),
        buttons=("Proceed in Browser", "Cancel"),
    )


class NavigationPolicy:
    """
    Maps navigation events raised by the embedded site view to a Decision.

    The handlers hold no state between events; the only data they read are the
    two rule tuples fixed at construction.
    """

    def __init__(
        self,
        router: URLRouter,
        always_open_in_app: Iterable[MatchRule],
        never_open_in_browser: Iterable[MatchRule],
    ):
        self.router = router
        self.always_open_in_app: Tuple[MatchRule, ...] = tuple(always_open_in_app)
        self.never_open_in_browser: Tuple[MatchRule, ...] = tuple(never_open_in_browser)

    @classmethod
    def from_settings(cls, settings: Dict[str, Any], router: Optional[URLRouter] = None) -> "NavigationPolicy":
        server = settings["server"]
        links = settings["links"]
        router = router or URLRouter(server["host"], server["public_host"], server["public_url"])
        always = [f"http://{server['host']}"] + list(links["always_open_in_app"])
        never = [server_url(settings)] + list(links["never_open_in_browser"])
        return cls(
            router,
            [router.parse_rule(text) for text in always],
            [router.parse_rule(text) for text in never],
        )

    def will_navigate(self, url: str) -> Decision:
        target = self.router.parse(url)

        # in-page location overrides to the login screen
        if self.router.is_login_redirect(target):
            log.info("Ignoring window location override to URL: '%s://%s%s'",
                     target.scheme, target.host, target.path)
            return Decision.suppress()

        if self.router.any_rule_matches(target, self.always_open_in_app):
            return Decision.allow()

        return Decision.open_external(url)

    def new_window_request(self, url: str, requested: Geometry) -> Decision:
        target = self.router.parse(url)

        if self.router.any_rule_matches(target, self.never_open_in_browser):
            log.info("Open in new window for %s", url)
            return Decision.new_app_window(adjust_new_window_geometry(requested))

        public = self.router.rewrite_if_internal(target)
        return Decision.open_external(self.router.to_text(public))

    def will_redirect(self, url: str) -> Decision:
        target = self.router.parse(url)

        if not self.router.is_login_redirect(target):
            return Decision.allow()

        origin = self.router.origin(target)
        log.info("Intercepted login redirect to %s", origin)
        return Decision.prompt_user(url, reauth_prompt(origin), target)
