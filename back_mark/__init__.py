from back_mark.decorators import force_back_mark, marks_back, skip_back_mark
from back_mark.extension import BackMark, current_tracker
from back_mark.state import IGNORE_ACTIONS, SLOTS, RequestInfo, RequestMarks
from back_mark.tracker import BackMarkTracker


def back_mark(label, url_to_mark=None, mark_now=False):
    current_tracker().back_mark(label, url_to_mark, mark_now)


def redirect_to_back_mark_or_default(default_url):
    return current_tracker().redirect_to_back_mark_or_default(default_url)


def back_url_or_default(default_url):
    return current_tracker().back_url_or_default(default_url)


def back_url():
    return current_tracker().back_url()


def back_label():
    return current_tracker().back_label()


def render_back_link(**attrs):
    return current_tracker().render_back_link(**attrs)
