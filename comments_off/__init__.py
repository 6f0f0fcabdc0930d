"""comments-off: turn off a site's comment feeds, screens and endpoints."""

from comments_off.config import PolicyConfig
from comments_off.models import DispositionRequest, DispositionResult, NotFound, PassThrough, Redirect
from comments_off.policy import decide
from comments_off.classifiers import classify
from comments_off.middleware import CommentsOffMiddleware, install, respond

__all__ = [
    "PolicyConfig",
    "DispositionRequest",
    "DispositionResult",
    "NotFound",
    "PassThrough",
    "Redirect",
    "decide",
    "classify",
    "CommentsOffMiddleware",
    "install",
    "respond",
]
