"""Core data models for comments-off."""

from dataclasses import dataclass, field
from typing import Literal, Union

NOT_FOUND_CODES = frozenset({404, 410})


@dataclass(frozen=True)
class DispositionRequest:
    """What the classifiers know about an inbound request."""
    is_comment_feed_route: bool
    is_admin_context: bool = False
    is_async_context: bool = False  # ajax / cron
    is_api_context: bool = False    # REST / XML-RPC

    @property
    def is_exempt(self) -> bool:
        return self.is_admin_context or self.is_async_context or self.is_api_context


@dataclass(frozen=True)
class Redirect:
    """Forward the request to another URL."""
    target_url: str
    status_code: int = 301
    kind: Literal["redirect"] = field(default="redirect", init=False)

    def __post_init__(self) -> None:
        if not self.target_url:
            raise ValueError("Redirect needs a target URL")
        if not 300 <= self.status_code <= 399:
            raise ValueError(f"{self.status_code} is not a redirect status code")


@dataclass(frozen=True)
class NotFound:
    """Answer with 404 or 410 and nothing else."""
    status_code: int = 404
    kind: Literal["not_found"] = field(default="not_found", init=False)

    def __post_init__(self) -> None:
        if self.status_code not in NOT_FOUND_CODES:
            raise ValueError(f"NotFound status must be 404 or 410, got {self.status_code}")


@dataclass(frozen=True)
class PassThrough:
    """Leave the request alone."""
    kind: Literal["pass_through"] = field(default="pass_through", init=False)


DispositionResult = Union[Redirect, NotFound, PassThrough]
