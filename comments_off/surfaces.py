"""Comment surface strippers.

Each function takes plain data handed over by a host adapter (REST routes,
XML-RPC method maps, comment lists, post records) and returns a copy with
the comment parts removed.  They are idempotent and never mutate their input.
"""

import json
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

COMMENTS_ROUTE = "/wp/v2/comments"

XMLRPC_COMMENT_METHODS = frozenset({
    "wp.getComments",
    "wp.getComment",
    "wp.deleteComment",
    "wp.editComment",
    "wp.newComment",
    "wp.getCommentCount",
    "wp.getCommentStatusList",
})

COMMENT_FEATURES = frozenset({"comments", "trackbacks"})

# Editor blocks that render or count comments.
COMMENT_BLOCKS: tuple[str, ...] = (
    "core/comment-author-avatar",
    "core/comment-author-name",
    "core/comment-content",
    "core/comment-date",
    "core/comment-edit-link",
    "core/comment-reply-link",
    "core/comment-template",
    "core/comments",
    "core/comments-pagination",
    "core/comments-pagination-next",
    "core/comments-pagination-numbers",
    "core/comments-pagination-previous",
    "core/comments-title",
    "core/latest-comments",
    "core/post-comments-count",
    "core/post-comments-form",
    "core/post-comments-link",
)


def comments_open(*_: Any) -> bool:
    return False


def pings_open(*_: Any) -> bool:
    return False


def show_comments_feed_link(*_: Any) -> bool:
    return False


def comment_collection_params(params: Mapping[str, Any]) -> dict[str, Any]:
    return {}


def prepare_comment(comment: Any) -> None:
    return None


def clear_comments(comments: Sequence[Any], is_admin: bool = False) -> list[Any]:
    """Hide every comment outside the admin area."""
    return list(comments) if is_admin else []


def close_comments(post: Mapping[str, Any]) -> dict[str, Any]:
    """Return ``post`` with comment and ping status closed.

    Revisions keep whatever status they were saved with.
    """
    closed = dict(post)
    if post.get("post_type") == "revision":
        return closed
    closed["comment_status"] = "closed"
    closed["ping_status"] = "closed"
    return closed


def remove_comment_endpoints(endpoints: Mapping[str, Any]) -> dict[str, Any]:
    """Drop the comments collection route and every route below it."""
    return {
        route: handler
        for route, handler in endpoints.items()
        if route != COMMENTS_ROUTE and not route.startswith(COMMENTS_ROUTE + "/")
    }


def remove_xmlrpc_comment_methods(methods: Mapping[str, Any]) -> dict[str, Any]:
    return {name: fn for name, fn in methods.items() if name not in XMLRPC_COMMENT_METHODS}


def strip_post_type_support(supports: Mapping[str, Iterable[str]]) -> dict[str, set[str]]:
    """Remove comment and trackback support from every post type."""
    return {post_type: set(features) - COMMENT_FEATURES for post_type, features in supports.items()}


def unregister_blocks_script(blocks: Iterable[str] = COMMENT_BLOCKS) -> str:
    """Editor ``<script>`` that unregisters ``blocks`` once the DOM is ready."""
    calls = "".join(f"window.wp.blocks.unregisterBlockType({_js_string(block)});" for block in blocks)
    return (
        '<script type="text/javascript">'
        "addEventListener('DOMContentLoaded', function() {"
        "window.wp.domReady( function() {"
        f"{calls}"
        "} );"
        "} );"
        "</script>"
    )


def _js_string(value: str) -> str:
    # "</" is escaped so a block name cannot close the script element
    return json.dumps(value).replace("</", "<\\/")
