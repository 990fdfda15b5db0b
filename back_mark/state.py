from dataclasses import dataclass
from typing import Optional


# Session slots
PREV_URL = "prev_url"
PREV_LABEL = "prev_label"
BACK_URL = "back_url"
BACK_LABEL = "back_label"
FILTER_PREV_URL = "filter_prev_url"
FILTER_BACK_URL = "filter_back_url"

SLOTS = (PREV_URL, PREV_LABEL, BACK_URL, BACK_LABEL, FILTER_PREV_URL, FILTER_BACK_URL)

# Pages/actions we don't want to link back to. Only the page that led to
# them is worth remembering.
IGNORE_ACTIONS = ("new", "edit", "create", "update", "destroy")


@dataclass
class RequestMarks:
    """Flags that live for a single request only."""

    back_marked: bool = False
    marked_in_filter: bool = False


@dataclass
class RequestInfo:
    """What the tracker needs to know about the current request."""

    url: str
    is_xhr: bool = False
    action: Optional[str] = None
    host: Optional[str] = None

    @classmethod
    def from_flask(cls, request):
        endpoint = request.endpoint or ""
        return cls(
            url=request.url,
            is_xhr=request.headers.get("X-Requested-With", "").lower() == "xmlhttprequest",
            action=endpoint.rsplit(".", 1)[-1] or None,
            host=request.host,
        )
