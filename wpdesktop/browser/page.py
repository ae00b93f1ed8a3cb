# wpdesktop/browser/page.py
from PySide6.QtWebEngineCore import QWebEnginePage

from ..external_links import LinkDispatcher
from ..models.decision import Action, Geometry


NavigationType = QWebEnginePage.NavigationType


def encoded_url(qurl) -> str:
    """The url as the page sent it, percent-encoding intact."""
    return qurl.toEncoded().data().decode("ascii")


# user driven loads; typed urls, reloads and history moves are left alone
WILL_NAVIGATE_TYPES = {
    NavigationType.NavigationTypeLinkClicked,
    NavigationType.NavigationTypeFormSubmitted,
    NavigationType.NavigationTypeOther,
}


class PolicyPage(QWebEnginePage):
    """QWebEnginePage that routes main-frame navigation through a LinkDispatcher."""

    def __init__(self, dispatcher: LinkDispatcher, owner, profile=None, parent=None):
        if profile is None:
            super().__init__(parent)
        else:
            super().__init__(profile, parent)
        self.dispatcher = dispatcher
        self.owner = owner  # window providing geometry and child windows
        self.newWindowRequested.connect(self._on_new_window_requested)

    def acceptNavigationRequest(self, url, nav_type, is_main_frame):  # noqa: N802
        if not is_main_frame:
            return True
        text = encoded_url(url)
        if nav_type == NavigationType.NavigationTypeRedirect:
            return self.dispatcher.handle_will_redirect(text).proceeds
        if nav_type in WILL_NAVIGATE_TYPES:
            return self.dispatcher.handle_will_navigate(text).proceeds
        return True

    def _on_new_window_requested(self, request):
        rect = request.requestedGeometry()
        if rect.isEmpty():
            rect = self.owner.geometry()
        requested = Geometry(rect.x(), rect.y(), rect.width(), rect.height())
        decision = self.dispatcher.handle_new_window(encoded_url(request.requestedUrl()), requested)

        if decision.action is Action.OPEN_IN_NEW_APP_WINDOW:
            child = self.owner.open_child_window(decision.geometry)
            request.openIn(child.site_view.page)
        elif decision.action is Action.ALLOW:
            child = self.owner.open_child_window(requested)
            request.openIn(child.site_view.page)
        # anything else was sent to the system browser; the request is dropped
