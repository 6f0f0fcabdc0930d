"""Comment surface strippers."""

from comments_off import surfaces


def test_constant_filters():
    assert surfaces.comments_open() is False
    assert surfaces.comments_open(True, 42) is False
    assert surfaces.pings_open(True, 42) is False
    assert surfaces.show_comments_feed_link(True) is False
    assert surfaces.comment_collection_params({"page": 1}) == {}
    assert surfaces.prepare_comment({"id": 1}) is None


def test_clear_comments():
    comments = [{"id": 1}, {"id": 2}]
    assert surfaces.clear_comments(comments) == []
    assert surfaces.clear_comments(comments, is_admin=True) == comments
    assert comments == [{"id": 1}, {"id": 2}]


def test_close_comments():
    post = {"ID": 7, "post_type": "post", "comment_status": "open", "ping_status": "open"}
    closed = surfaces.close_comments(post)
    assert closed == {"ID": 7, "post_type": "post", "comment_status": "closed", "ping_status": "closed"}
    assert post["comment_status"] == "open"
    assert surfaces.close_comments(closed) == closed


def test_close_comments_skips_revisions():
    revision = {"ID": 8, "post_type": "revision", "comment_status": "open"}
    assert surfaces.close_comments(revision) == revision


def test_remove_comment_endpoints():
    endpoints = {
        "/wp/v2/posts": "posts",
        "/wp/v2/comments": "comments",
        "/wp/v2/comments/(?P<id>[\\d]+)": "comment",
        "/wp/v2/commentsx": "unrelated",
    }
    assert surfaces.remove_comment_endpoints(endpoints) == {
        "/wp/v2/posts": "posts",
        "/wp/v2/commentsx": "unrelated",
    }
    assert len(endpoints) == 4


def test_remove_xmlrpc_comment_methods():
    methods = {name: name for name in surfaces.XMLRPC_COMMENT_METHODS}
    methods["wp.getPosts"] = "wp.getPosts"
    assert surfaces.remove_xmlrpc_comment_methods(methods) == {"wp.getPosts": "wp.getPosts"}


def test_strip_post_type_support():
    supports = {"post": ["title", "comments", "trackbacks"], "page": {"title", "editor"}}
    assert surfaces.strip_post_type_support(supports) == {"post": {"title"}, "page": {"title", "editor"}}


def test_unregister_blocks_script():
    script = surfaces.unregister_blocks_script()
    assert script.startswith('<script type="text/javascript">')
    assert script.endswith("</script>")
    assert script.count("unregisterBlockType(") == len(surfaces.COMMENT_BLOCKS) == 17
    assert 'window.wp.blocks.unregisterBlockType("core/comments");' in script


def test_unregister_blocks_script_escapes_names():
    script = surfaces.unregister_blocks_script(["x'</script><b>"])
    assert script.count("</script>") == 1
    assert "x'<\\/script><b>" in script
