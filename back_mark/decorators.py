from functools import wraps

from back_mark.extension import current_tracker


def marks_back(label, url=None, mark_now=False):
    """
    Mark the decorated view with `label` before it runs, e.g.

        @items_bp.route("/")
        @marks_back("Items")
        def index(): ...
    """

    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            current_tracker().back_mark(label, url, mark_now)
            return f(*args, **kwargs)

        return wrapper

    return decorator


def force_back_mark(f=None, *, url=None):
    """
    Remember the decorated view even if its action is one of the ignored
    ones. `url` is remembered instead of the request url when given.
    """

    def decorator(view):
        view._back_mark_force = True
        view._back_mark_url = url
        return view

    if f is None:
        return decorator
    if not callable(f):
        raise TypeError("force_back_mark takes the url as a keyword: @force_back_mark(url=...)")
    return decorator(f)


def skip_back_mark(f):
    """Never remember the decorated view."""
    f._back_mark_skip = True
    return f
