"""Tests for the per-event decisions made by NavigationPolicy."""

import pytest

from wpdesktop.models.decision import Action, Decision, Geometry
from wpdesktop.models.route import MatchRule
from wpdesktop.navigation_policy import (
    NavigationPolicy,
    adjust_new_window_geometry,
    OFFSET_NEW_WINDOW,
    SCALE_NEW_WINDOW_FACTOR,
)
from wpdesktop.url_router import InvalidURLError

LOGIN_REDIRECT = "https://wordpress.com/wp-login.php?reauth=1"
REQUESTED = Geometry(x=100, y=200, width=1000, height=800)


class TestFromSettings:

    def test_server_entries_come_first(self, policy):
        assert policy.always_open_in_app[0] == MatchRule(host="127.0.0.1", path="/")
        assert policy.never_open_in_browser[0] == MatchRule(host="127.0.0.1", path="/")

    def test_configured_entries_follow(self, policy):
        assert MatchRule(host="calypso.localhost", path="/*") in policy.always_open_in_app
        assert MatchRule(host="public-api.wordpress.com", path="/connect/") in policy.never_open_in_browser

    def test_rule_sets_are_tuples(self, policy):
        assert isinstance(policy.always_open_in_app, tuple)
        assert isinstance(policy.never_open_in_browser, tuple)

    def test_router_gets_public_url(self, settings):
        settings["server"]["public_url"] = "https://example.net"
        policy = NavigationPolicy.from_settings(settings)
        assert policy.router.public_url == "https://example.net"

    def test_bad_rule_entry_fails_at_startup(self, settings):
        settings["links"]["always_open_in_app"].append("no host here")
        with pytest.raises(InvalidURLError):
            NavigationPolicy.from_settings(settings)


class TestWillNavigate:

    @pytest.mark.parametrize("url", [
        "http://127.0.0.1:41050/stats/day/example.blog",
        "http://127.0.0.1/",
        "http://calypso.localhost:3000/read",
        "http://localhost/",
        "https://public-api.wordpress.com/",
        "https://wordpress.com/wp-login.php",
    ])
    def test_in_app_urls_are_allowed(self, policy, url):
        decision = policy.will_navigate(url)
        assert decision == Decision.allow()
        assert decision.proceeds

    def test_login_redirect_is_suppressed(self, policy):
        decision = policy.will_navigate(LOGIN_REDIRECT)
        assert decision.action is Action.SUPPRESS
        assert not decision.proceeds

    def test_other_urls_open_externally(self, policy):
        decision = policy.will_navigate("https://example.com/article?id=7")
        assert decision == Decision.open_external("https://example.com/article?id=7")
        assert not decision.proceeds

    def test_public_site_is_not_kept_in_app(self, policy):
        assert policy.will_navigate("https://wordpress.com/").action is Action.OPEN_EXTERNAL

    def test_malformed_url_raises(self, policy):
        with pytest.raises(InvalidURLError):
            policy.will_navigate("http://example.com:notaport/")


class TestNewWindowRequest:

    @pytest.mark.parametrize("url", [
        "http://127.0.0.1:41050/",
        "https://public-api.wordpress.com/connect/",
        "https://public-api.wordpress.com/connect/?client_id=1",
    ])
    def test_never_open_in_browser_opens_app_window(self, policy, url):
        decision = policy.new_window_request(url, REQUESTED)
        assert decision.action is Action.OPEN_IN_NEW_APP_WINDOW
        assert decision.geometry == Geometry(x=150, y=250, width=900, height=720)
        assert decision.proceeds

    def test_internal_url_is_rewritten_to_public_host(self, policy):
        decision = policy.new_window_request("http://127.0.0.1:41050/post/example.blog/12", REQUESTED)
        assert decision == Decision.open_external("http://wordpress.com/post/example.blog/12")

    def test_external_url_is_unchanged(self, policy):
        decision = policy.new_window_request("https://example.com:8443/docs#top", REQUESTED)
        assert decision == Decision.open_external("https://example.com:8443/docs#top")

    def test_userinfo_is_kept_and_default_port_dropped(self, policy):
        decision = policy.new_window_request("https://user:pw@example.com:443/x", REQUESTED)
        assert decision == Decision.open_external("https://user:pw@example.com/x")


class TestWillRedirect:

    def test_login_redirect_prompts(self, policy):
        decision = policy.will_redirect(LOGIN_REDIRECT)
        assert decision.action is Action.PROMPT_USER
        assert not decision.proceeds
        assert decision.url == LOGIN_REDIRECT
        assert decision.target.host == "wordpress.com"
        assert decision.prompt.buttons == ("Proceed in Browser", "Cancel")
        assert decision.prompt.title == "Jetpack Authorization Required"
        assert decision.prompt.message.endswith("https://wordpress.com")

    def test_origin_keeps_port(self, policy):
        decision = policy.will_redirect("https://example.blog:8443/wp-login.php?reauth=1")
        assert decision.prompt.message.endswith("https://example.blog:8443")

    def test_origin_leaves_out_default_port(self, policy):
        decision = policy.will_redirect("https://example.blog:443/wp-login.php?reauth=1")
        assert decision.prompt.message.endswith("https://example.blog")

    def test_other_redirects_proceed(self, policy):
        decision = policy.will_redirect("https://wordpress.com/wp-login.php?redirect_to=%2F")
        assert decision == Decision.allow()


class TestGeometry:

    def test_offset_and_scale(self):
        adjusted = adjust_new_window_geometry(Geometry(0, 0, 500, 300))
        assert adjusted == Geometry(
            OFFSET_NEW_WINDOW,
            OFFSET_NEW_WINDOW,
            round(500 * SCALE_NEW_WINDOW_FACTOR),
            round(300 * SCALE_NEW_WINDOW_FACTOR),
        )

    def test_sizes_are_rounded_to_int(self):
        adjusted = adjust_new_window_geometry(Geometry(10, 10, 1001, 799))
        assert adjusted == Geometry(60, 60, 901, 719)
        assert isinstance(adjusted.width, int)

    def test_requested_geometry_is_not_modified(self):
        requested = Geometry(1, 2, 3, 4)
        adjust_new_window_geometry(requested)
        assert requested == Geometry(1, 2, 3, 4)
