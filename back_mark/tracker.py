"""
Back mark tracking.

Pages can be marked with a label so that later pages can link back to them
("« Back to 'Inbox'"). Independently, the last visited page that is not a
create/update/delete style action is remembered, so that once an item has been
created (POST to items/create) the user lands on the items index instead of
the 'new' form that was the last visited page.
"""
import logging

from markupsafe import Markup

from back_mark.links import link_to
from back_mark.state import (
    BACK_LABEL,
    BACK_URL,
    FILTER_BACK_URL,
    FILTER_PREV_URL,
    IGNORE_ACTIONS,
    PREV_LABEL,
    PREV_URL,
)
from utils.return_to import is_safe_url


class BackMarkTracker:
    def __init__(
            self,
            session,
            request,
            marks,
            redirect=None,
            ignore_actions=IGNORE_ACTIONS,
            legacy_mark_now=False,
            key_prefix="",
            link_id="back_link",
            safe_redirects=True,
            logger=None,
    ):
        self.session = session
        self.request = request
        self.marks = marks
        self._redirect = redirect
        self.ignore_actions = frozenset(ignore_actions)
        self.legacy_mark_now = legacy_mark_now
        self.key_prefix = key_prefix
        self.link_id = link_id
        self.safe_redirects = safe_redirects
        self.logger = logger or logging.getLogger(__name__)

    # ------------------------------
    #   SESSION SLOTS
    # ------------------------------
    def _key(self, slot):
        return f"{self.key_prefix}{slot}"

    def get(self, slot):
        return self.session.get(self._key(slot))

    def set(self, slot, value):
        if value is None:
            self.session.pop(self._key(slot), None)
        else:
            self.session[self._key(slot)] = value

    # ------------------------------
    #   FILTER
    # ------------------------------
    def back_mark_pages(self, force_mark=False, url=None):
        """
        Remember the current request url. Runs before every action.

        AJAX requests can't be linked back and are ignored. So are the actions
        in `ignore_actions`, unless `force_mark` is given.
        """
        if self.request.is_xhr:
            self.logger.debug("Back mark filter skipped AJAX request %s", self.request.url)
            return
        if not force_mark and self.request.action in self.ignore_actions:
            return

        self.set(FILTER_BACK_URL, self.get(FILTER_PREV_URL))
        self.set(FILTER_PREV_URL, url or self.request.url)
        self.marks.marked_in_filter = True
        self.logger.debug(
            "Back mark filter: prev=%s back=%s",
            self.get(FILTER_PREV_URL), self.get(FILTER_BACK_URL),
        )

    # ------------------------------
    #   EXPLICIT MARKS
    # ------------------------------
    def back_mark(self, label, url_to_mark=None, mark_now=False):
        """
        Mark the current url (or `url_to_mark`) with `label` so that future
        pages can link back to it.

        With `mark_now` the mark goes straight into the back slots, so the
        link can be rendered by the current action itself.

            tracker.back_mark("Inbox")
            tracker.back_mark("Login", "/login", mark_now=True)
        """
        if self.request.is_xhr:
            self.logger.debug("Back mark skipped AJAX request %s", self.request.url)
            return

        url_to_mark = url_to_mark or self.request.url

        if mark_now:
            self.set(BACK_LABEL, label)
            self.set(PREV_LABEL, label)
            self.set(BACK_URL, url_to_mark)
            if self.legacy_mark_now:
                # older releases stored the url in the label slot
                self.set(PREV_LABEL, url_to_mark)
            else:
                self.set(PREV_URL, url_to_mark)
            self.marks.back_marked = True
            self.logger.debug("Back marked now: %r -> %s", label, url_to_mark)
            return

        # The previously marked page becomes the back link
        self.set(BACK_URL, self.get(PREV_URL))
        self.set(BACK_LABEL, self.get(PREV_LABEL))

        self.set(PREV_URL, url_to_mark)
        self.set(PREV_LABEL, label)
        self.marks.back_marked = True
        self.logger.debug("Back marked: %r -> %s", label, url_to_mark)

    # ------------------------------
    #   READERS
    # ------------------------------
    def _filter_target(self):
        url = self.get(FILTER_BACK_URL) if self.marks.marked_in_filter else self.get(FILTER_PREV_URL)
        if url and self.safe_redirects and not is_safe_url(url, self.request.host):
            self.logger.warning("Ignoring stored back url on a foreign host: %s", url)
            return None
        return url

    def back_url_or_default(self, default_url):
        """Stored back url, or `default_url` when there is none."""
        return self._filter_target() or default_url

    def redirect_to_back_mark_or_default(self, default_url):
        """
        Redirect to the url remembered by the filter (not the last back marked
        url), or to `default_url`. The remembered url is consumed.
        """
        if self._redirect is None:
            raise RuntimeError("BackMarkTracker was created without a redirect function.")

        target = self.back_url_or_default(default_url)
        self.logger.debug("Redirecting back to %s", target)
        response = self._redirect(target)
        self.set(FILTER_BACK_URL, None)
        return response

    def back_url(self):
        return self.get(BACK_URL) if self.marks.back_marked else self.get(PREV_URL)

    def back_label(self):
        return self.get(BACK_LABEL) if self.marks.back_marked else self.get(PREV_LABEL)

    def render_back_link(self, **attrs):
        """
        Link back to the marked page, if both its url and label are known.
        Nothing is rendered when the back url is the current page.
        """
        url = self.back_url()
        if url == self.request.url:
            return Markup("")

        label = self.back_label()
        if not (url and label):
            return Markup("")

        attrs.setdefault("id", self.link_id)
        return link_to(Markup("&laquo; Back to '{}'").format(label), url, **attrs)
