from flask import current_app, g, has_app_context, has_request_context, redirect, request, session

from back_mark.state import IGNORE_ACTIONS, RequestInfo, RequestMarks
from back_mark.tracker import BackMarkTracker


class BackMark:
    """
    Flask extension that remembers back links in the session.

        back_mark = BackMark()
        back_mark.init_app(app)

    Every request (except AJAX, static files and the ignored actions) is
    remembered by a before_request hook. Views call `back_mark(...)` to mark
    pages with a label and `redirect_to_back_mark_or_default(...)` to go back.
    Templates get `back_url`, `back_label`, `back_url_or_default` and
    `render_back_link`.
    """

    def __init__(self, app=None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        app.config.setdefault("BACK_MARK_IGNORE_ACTIONS", IGNORE_ACTIONS)
        app.config.setdefault("BACK_MARK_LEGACY_MARK_NOW", False)
        app.config.setdefault("BACK_MARK_SESSION_PREFIX", "")
        app.config.setdefault("BACK_MARK_LINK_ID", "back_link")
        app.config.setdefault("BACK_MARK_SAFE_REDIRECTS", True)

        app.extensions["back_mark"] = self
        app.before_request(self._back_mark_pages)
        app.context_processor(self._inject_helpers)

    def tracker(self):
        """Tracker bound to the current request."""
        if not has_request_context():
            raise RuntimeError("Back marks are only available while handling a request.")

        marks = g.get("back_mark_marks")
        if marks is None:
            marks = g.back_mark_marks = RequestMarks()

        config = current_app.config
        return BackMarkTracker(
            session=session,
            request=RequestInfo.from_flask(request),
            marks=marks,
            redirect=redirect,
            ignore_actions=config["BACK_MARK_IGNORE_ACTIONS"],
            legacy_mark_now=config["BACK_MARK_LEGACY_MARK_NOW"],
            key_prefix=config["BACK_MARK_SESSION_PREFIX"],
            link_id=config["BACK_MARK_LINK_ID"],
            safe_redirects=config["BACK_MARK_SAFE_REDIRECTS"],
            logger=current_app.logger,
        )

    # -----------------------------------------------------
    # before_request: remember the current url
    # -----------------------------------------------------
    def _back_mark_pages(self):
        g.back_mark_marks = RequestMarks()

        endpoint = request.endpoint
        if not endpoint:
            return  # 404s, favicon.ico, etc.
        if endpoint == "static" or endpoint.endswith(".static"):
            return

        view_func = current_app.view_functions.get(endpoint)
        if getattr(view_func, "_back_mark_skip", False):
            return

        self.tracker().back_mark_pages(
            force_mark=getattr(view_func, "_back_mark_force", False),
            url=getattr(view_func, "_back_mark_url", None),
        )

    def _inject_helpers(self):
        if not has_request_context():
            return {}
        tracker = self.tracker()
        return dict(
            back_url=tracker.back_url,
            back_label=tracker.back_label,
            back_url_or_default=tracker.back_url_or_default,
            render_back_link=tracker.render_back_link,
        )


def current_tracker():
    """Tracker for the current request of the current app."""
    ext = current_app.extensions.get("back_mark") if has_app_context() else None
    if ext is None:
        raise RuntimeError("BackMark is not initialised on this app. Call BackMark.init_app(app) first.")
    return ext.tracker()
