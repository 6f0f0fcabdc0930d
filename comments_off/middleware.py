"""HTTP responder: an ASGI middleware that applies the comments-off policy."""

from http import HTTPStatus

from loguru import logger
from starlette.applications import Starlette
from starlette.responses import PlainTextResponse, RedirectResponse, Response
from starlette.types import ASGIApp, Receive, Scope, Send

from comments_off.classifiers import classify, is_comment_admin_screen
from comments_off.config import PolicyConfig
from comments_off.models import DispositionResult, NotFound, PassThrough, Redirect
from comments_off.policy import decide

# Same set of headers the host CMS sends for "never cache this".
NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, must-revalidate, max-age=0, no-store, private",
    "Expires": "Wed, 11 Jan 1984 05:00:00 GMT",
}


def respond(result: DispositionResult) -> Response:
    """Turn a Redirect or NotFound into the response that carries it out."""
    if isinstance(result, Redirect):
        return RedirectResponse(result.target_url, status_code=result.status_code)
    if isinstance(result, NotFound):
        return PlainTextResponse(
            HTTPStatus(result.status_code).phrase,
            status_code=result.status_code,
            headers=NO_CACHE_HEADERS,
        )
    raise ValueError(f"Nothing to respond with for {result!r}")


class CommentsOffMiddleware:
    """Intercepts comment feeds and comment admin screens before the app sees them."""

    def __init__(self, app: ASGIApp, config: PolicyConfig | None = None) -> None:
        self.app = app
        self.config = config or PolicyConfig.from_env()

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        path = scope.get("path", "")

        # --- Comment moderation screens → admin dashboard ---
        if is_comment_admin_screen(path, self.config.admin_path):
            logger.info(f"Comments off: {path} → redirect 301 {self.config.admin_url}")
            response = RedirectResponse(self.config.admin_url, status_code=301)
            await response(scope, receive, send)
            return

        # --- Comment feeds ---
        query = scope.get("query_string", b"").decode("latin-1")
        req = classify(path, query, site_path=self.config.site_path, admin_path=self.config.admin_path)
        result = decide(req, self.config)

        if isinstance(result, PassThrough):
            if req.is_comment_feed_route:
                logger.debug(f"Comments off: {path} exempt ({req})")
            await self.app(scope, receive, send)
            return

        if isinstance(result, Redirect):
            logger.info(f"Comments off: {path} → redirect {result.status_code} {result.target_url}")
        else:
            logger.info(f"Comments off: {path} → {result.status_code}")

        await respond(result)(scope, receive, send)


def install(app: Starlette, config: PolicyConfig | None = None) -> bool:
    """Add the middleware to ``app`` unless the operator switched it off.

    Must be called before the application starts serving.
    """
    config = config or PolicyConfig.from_env()
    if not config.enabled:
        logger.info("Comments off: disabled by configuration, middleware not installed")
        return False
    app.add_middleware(CommentsOffMiddleware, config=config)
    logger.info(
        f"Comments off: installed (status={config.status_code}, "
        f"redirect={config.redirect_url or config.site_url})"
    )
    return True
