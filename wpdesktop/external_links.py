# wpdesktop/external_links.py
import logging

from .host.backend import HostServices
from .models.decision import Action, Decision, Geometry
from .navigation_policy import NavigationPolicy, PROCEED_IN_BROWSER, CANCEL
from .settings import LAST_LOCATION
from .url_router import InvalidURLError

log = logging.getLogger(__name__)


class LinkDispatcher:
    """
    Runs each navigation event through the NavigationPolicy and carries out the
    side effects of the resulting Decision on the host.

    Every ``handle_*`` method returns the Decision so the Qt layer can accept
    or reject the navigation (``Decision.proceeds``) and size new windows.
    """

    def __init__(self, policy: NavigationPolicy, host: HostServices):
        self.policy = policy
        self.host = host

    def handle_will_navigate(self, url: str) -> Decision:
        try:
            decision = self.policy.will_navigate(url)
        except InvalidURLError as e:
            log.error("Skipping navigation policy: %s", e)
            return Decision.allow()
        return self._apply(decision)

    def handle_new_window(self, url: str, requested: Geometry) -> Decision:
        try:
            decision = self.policy.new_window_request(url, requested)
        except InvalidURLError as e:
            log.error("Skipping new window policy: %s", e)
            return Decision.allow()
        return self._apply(decision)

    def handle_will_redirect(self, url: str) -> Decision:
        try:
            decision = self.policy.will_redirect(url)
        except InvalidURLError as e:
            log.error("Skipping redirect policy: %s", e)
            return Decision.allow()
        return self._apply(decision)

    def open_in_browser(self, url: str) -> None:
        if self.policy.router.is_openably_valid(url):
            log.info("Using system default handler for URL: %s", url)
            self.host.open_external(url)

    # ---------- Side effects ----------
    def _apply(self, decision: Decision) -> Decision:
        if decision.action is Action.OPEN_EXTERNAL:
            self.open_in_browser(decision.url)
        elif decision.action is Action.PROMPT_USER:
            self._prompt_reauth(decision)
        return decision

    def _prompt_reauth(self, decision: Decision) -> None:
        # the redirect stays suppressed whatever happens here
        try:
            selected = self.host.confirm(decision.prompt)
            if selected == PROCEED_IN_BROWSER:
                log.info("User selected 'Proceed in Browser'...")
                self.open_in_browser(decision.url)
            elif selected == CANCEL:
                log.info("User selected 'Cancel'...")
            self.host.show_main_site_view()
            # keeps the redirect from firing again on the next launch
            self.host.save_setting(LAST_LOCATION, f"/stats/day/{decision.target.host}")
        except Exception:
            log.exception("Failed to prompt for Jetpack authorization")
