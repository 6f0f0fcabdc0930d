"""Route and context classification for inbound requests.

Turns a request path and query string into a DispositionRequest.  URL shapes
follow the host CMS's default permalink structure.  Exemption contexts come
from the endpoint a request hits, never from client-supplied headers or
query parameters.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from urllib.parse import parse_qs

from comments_off.models import DispositionRequest

FEED_TYPES = ("feed", "rss2", "atom", "rss", "rdf")

# Archive bases whose feeds list posts, not comments.
ARCHIVE_BASES = frozenset({"category", "tag", "author", "search", "type", "page"})

# Query vars that select a single post or page.
SINGULAR_QUERY_VARS = ("p", "page_id", "name", "pagename", "attachment_id")

ADMIN_PREFIX = "/wp-admin/"
REST_PREFIX = "/wp-json/"
ASYNC_ENDPOINTS = ("/admin-ajax.php", "/wp-cron.php")
COMMENT_ADMIN_SCREENS = frozenset({"edit-comments.php", "comment.php"})

_FEED_SUFFIX = re.compile(r"^(?P<base>.*?)/feed(?:/(?:" + "|".join(FEED_TYPES) + r"))?/?$")
_COMMENT_FEED_QUERY = re.compile(r"^comments-(?:" + "|".join(FEED_TYPES) + r")$")


def _query(query: str | Mapping[str, list[str]]) -> Mapping[str, list[str]]:
    if isinstance(query, str):
        return parse_qs(query, keep_blank_values=True)
    return query


def _first(params: Mapping[str, list[str]], key: str) -> str:
    values = params.get(key) or [""]
    return values[0]


def _under(path: str, prefix: str) -> bool:
    """``path`` is ``prefix`` itself (with or without trailing slash) or below it."""
    return path.startswith(prefix) or path == prefix.rstrip("/")


def _relative(path: str, site_path: str) -> str:
    """Strip the site's install directory ("/blog/comments/feed" -> "/comments/feed")."""
    if site_path != "/" and _under(path, site_path):
        return "/" + path[len(site_path):]
    return path


def _is_singular_path(path: str) -> bool:
    """Pretty permalink of a single post or page, e.g. /hello-world or /2024/05/12/hello-world."""
    segments = [s for s in path.split("/") if s]
    if not segments:
        return False
    if segments[0] in ARCHIVE_BASES or segments[0] in ("feed", "wp-admin", "wp-json"):
        return False
    if segments[-1].endswith(".php"):
        return False
    # /2024/05 is a date archive
    return not all(s.isdigit() for s in segments)


def is_comment_feed(path: str, query: str | Mapping[str, list[str]] = "") -> bool:
    """True for the sitewide comments feed and for the feed of any single post or page."""
    params = _query(query)

    # Query-string feeds: ?feed=comments-rss2, ?feed=rss2&withcomments=1, ?p=42&feed=rss2
    feed = _first(params, "feed").lower()
    if feed:
        if _COMMENT_FEED_QUERY.match(feed):
            return True
        if _first(params, "withcomments") not in ("", "0"):
            return True
        if any(_first(params, var) for var in SINGULAR_QUERY_VARS):
            return True

    match = _FEED_SUFFIX.match(path)
    if match:
        base = match.group("base")
        return base.strip("/") == "comments" or _is_singular_path(base)

    # /hello-world/?feed=rss2
    return bool(feed) and _is_singular_path(path)


def is_admin(path: str, admin_path: str = ADMIN_PREFIX) -> bool:
    return _under(path, admin_path) and not is_async(path)


def is_async(path: str) -> bool:
    """Background requests: admin-ajax and wp-cron."""
    return path.endswith(ASYNC_ENDPOINTS)


def is_api(path: str) -> bool:
    """REST API and XML-RPC traffic."""
    return _under(path, REST_PREFIX) or path.endswith("/xmlrpc.php")


def is_comment_admin_screen(path: str, admin_path: str = ADMIN_PREFIX) -> bool:
    """The host's comment moderation screens, which have nothing left to show."""
    if not path.startswith(admin_path):
        return False
    return path[len(admin_path):] in COMMENT_ADMIN_SCREENS


def classify(
    path: str,
    query: str = "",
    *,
    site_path: str = "/",
    admin_path: str = ADMIN_PREFIX,
) -> DispositionRequest:
    """Build the DispositionRequest for a single inbound request.

    ``site_path`` is the directory the site is installed in and ``admin_path``
    the admin area's path, both with a trailing slash.
    """
    params = _query(query)
    local = _relative(path, site_path)
    return DispositionRequest(
        is_comment_feed_route=is_comment_feed(local, params),
        is_admin_context=is_admin(path, admin_path),
        is_async_context=is_async(path),
        is_api_context=is_api(local),
    )
