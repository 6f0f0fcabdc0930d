"""Route and context classification."""

import pytest

from comments_off import DispositionRequest, classify
from comments_off.classifiers import (
    is_admin,
    is_api,
    is_async,
    is_comment_admin_screen,
    is_comment_feed,
)


@pytest.mark.parametrize("path,query", [
    ("/comments/feed/", ""),
    ("/comments/feed", ""),
    ("/comments/feed/atom/", ""),
    ("/hello-world/feed/", ""),
    ("/2024/05/12/hello-world/feed/rss2/", ""),
    ("/", "feed=comments-rss2"),
    ("/", "feed=comments-atom"),
    ("/", "feed=rss2&withcomments=1"),
    ("/index.php", "feed=COMMENTS-RSS2"),
    ("/", "p=42&feed=rss2"),
    ("/", "page_id=5&feed=atom"),
    ("/index.php", "name=hello-world&feed=rss2"),
    ("/", "pagename=about&feed=rss2"),
    ("/hello-world/", "feed=rss2"),
    ("/2024/05/12/hello-world/", "feed=atom"),
])
def test_comment_feeds(path, query):
    assert is_comment_feed(path, query)


@pytest.mark.parametrize("query", ["feed=rss2", "feed=atom", "feed=rss2&withcomments=0", "feed="])
def test_feed_query_does_not_hide_comment_feed_path(query):
    assert is_comment_feed("/comments/feed/", query)
    assert is_comment_feed("/hello-world/feed/", query)


@pytest.mark.parametrize("path,query", [
    ("/", ""),
    ("/feed/", ""),
    ("/feed/atom/", ""),
    ("/category/news/feed/", ""),
    ("/tag/python/feed/", ""),
    ("/author/admin/feed/", ""),
    ("/2024/05/feed/", ""),
    ("/hello-world/", ""),
    ("/feedback/", ""),
    ("/", "feed=rss2"),
    ("/index.php", "feed=rss2"),
    ("/", "feed=rss2&withcomments=0"),
    ("/category/news/", "feed=rss2"),
    ("/2024/05/", "feed=rss2"),
    ("/feed/", "feed=rss2"),
    ("/wp-json/wp/v2/posts/feed", ""),
])
def test_not_comment_feeds(path, query):
    assert not is_comment_feed(path, query)


def test_admin_context():
    assert is_admin("/wp-admin/")
    assert is_admin("/wp-admin")
    assert is_admin("/wp-admin/edit.php")
    assert not is_admin("/wp-admin/admin-ajax.php")
    assert not is_admin("/wp-administrator/")
    assert not is_admin("/comments/feed/")


def test_admin_context_custom_path():
    assert is_admin("/blog/wp-admin/edit.php", "/blog/wp-admin/")
    assert not is_admin("/wp-admin/edit.php", "/blog/wp-admin/")


def test_async_context():
    assert is_async("/wp-admin/admin-ajax.php")
    assert is_async("/wp-cron.php")
    assert not is_async("/comments/feed/")


def test_api_context():
    assert is_api("/wp-json/wp/v2/comments")
    assert is_api("/wp-json")
    assert is_api("/xmlrpc.php")
    assert not is_api("/comments/feed/")
    assert not is_api("/wp-jsonx/")


def test_comment_admin_screens():
    assert is_comment_admin_screen("/wp-admin/edit-comments.php")
    assert is_comment_admin_screen("/wp-admin/comment.php")
    assert not is_comment_admin_screen("/wp-admin/edit.php")
    assert not is_comment_admin_screen("/comment.php")
    assert is_comment_admin_screen("/blog/wp-admin/comment.php", "/blog/wp-admin/")


def test_classify_plain_feed():
    assert classify("/comments/feed/") == DispositionRequest(is_comment_feed_route=True)


@pytest.mark.parametrize("query", [
    "doing_wp_cron=1712345678",
    "rest_route=/wp/v2/comments",
    "feed=rss2",
    "feed=rss2&doing_wp_cron=1&rest_route=x",
])
def test_query_parameters_grant_no_exemption(query):
    assert classify("/comments/feed/", query) == DispositionRequest(is_comment_feed_route=True)


def test_classify_feed_under_rest_prefix_is_api():
    req = classify("/wp-json/comments/feed/")
    assert req.is_api_context
    assert not req.is_comment_feed_route


def test_classify_subdirectory_install():
    req = classify("/blog/comments/feed/", site_path="/blog/", admin_path="/blog/wp-admin/")
    assert req == DispositionRequest(is_comment_feed_route=True)

    # The blog's main feed lists posts
    assert not classify("/blog/feed/", site_path="/blog/").is_comment_feed_route
    assert classify("/blog/wp-json/wp/v2/posts", site_path="/blog/").is_api_context
