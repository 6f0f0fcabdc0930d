"""Request disposition policy for disabled comment routes."""

from comments_off.allowlist import safe_redirect_target
from comments_off.config import PolicyConfig
from comments_off.models import (
    DispositionRequest,
    DispositionResult,
    NOT_FOUND_CODES,
    NotFound,
    PassThrough,
    Redirect,
)

REDIRECT_CODES = frozenset({301, 302, 307, 308})
DEFAULT_REDIRECT_CODE = 301


def decide(req: DispositionRequest, config: PolicyConfig) -> DispositionResult:
    """Decide what to do with a request, first match wins.

      1. Not a comment feed route → pass through
      2. Admin / async / API context → pass through
      3. Configured 404 or 410 → not found
      4. Otherwise redirect, clamping the code to 3xx (301 if outside)
         and falling back to the site root for an empty or foreign target
    """
    if not req.is_comment_feed_route:
        return PassThrough()

    if req.is_exempt:
        return PassThrough()

    if config.status_code in NOT_FOUND_CODES:
        return NotFound(config.status_code)

    return Redirect(resolve_redirect_url(config), clamp_redirect_code(config.status_code))


def clamp_redirect_code(status_code: int) -> int:
    """Keep ``status_code`` inside [300, 399], else fall back to 301."""
    if status_code < 300 or status_code > 399:
        return DEFAULT_REDIRECT_CODE
    return status_code


def resolve_redirect_url(config: PolicyConfig) -> str:
    """The configured redirect target, or the site root if empty or not allowed."""
    target = config.redirect_url or config.site_url
    return safe_redirect_target(target, config)
