from urllib.parse import urlparse


def is_safe_url(url, host=None) -> bool:
    """
    A URL is safe to redirect to when it is a local path, or an absolute
    http(s) URL on the same host as the current request.
    """
    if not url:
        return False
    p = urlparse(url)
    if p.scheme == "" and p.netloc == "":
        return url.startswith("/") and not url.startswith("//")
    if p.scheme not in ("http", "https"):
        return False
    return host is not None and p.netloc == host
