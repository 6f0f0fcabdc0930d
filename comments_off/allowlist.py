"""Redirect target validation: keep the policy from becoming an open redirector.

A target is safe when it is a site-relative path or an absolute http(s) URL
whose host is the site's own host or one of the operator's allowed hosts.
"""

from __future__ import annotations

from urllib.parse import urlsplit

from loguru import logger

from comments_off.config import PolicyConfig


def _normalize_host(host: str | None) -> str:
    """Lowercase and strip a trailing dot ("Example.COM." -> "example.com")."""
    return (host or "").lower().rstrip(".")


def allowed_hosts(site_url: str, extra: tuple[str, ...] = ()) -> set[str]:
    """The site host plus every operator-supplied host, normalized."""
    hosts = {_normalize_host(h) for h in extra}
    site_host = _normalize_host(urlsplit(site_url).hostname)
    if site_host:
        hosts.add(site_host)
    hosts.discard("")
    return hosts


def is_safe_redirect(url: str, site_url: str, extra_hosts: tuple[str, ...] = ()) -> bool:
    """Return True if ``url`` may be used as a ``Location`` target."""
    if not url:
        return False

    # Backslashes are treated as slashes by browsers ("/\evil.com")
    if "\\" in url or any(ord(c) < 0x20 for c in url):
        return False

    # 1. Site-relative path
    if url.startswith("/") and not url.startswith("//"):
        return True

    try:
        parts = urlsplit(url)
        host = parts.hostname
    except ValueError:
        return False

    # 2. Protocol-relative or absolute URL; scheme must be http(s) if present
    if parts.scheme and parts.scheme.lower() not in ("http", "https"):
        return False
    if not parts.scheme and not url.startswith("//"):
        return False

    # 3. Host lookup
    return _normalize_host(host) in allowed_hosts(site_url, extra_hosts)


def safe_redirect_target(url: str, config: PolicyConfig) -> str:
    """Return ``url`` if it is safe to redirect to, otherwise the site root."""
    if is_safe_redirect(url, config.site_url, config.allowed_redirect_hosts):
        return url
    logger.warning(f"Redirect target {url!r} is not an allowed host, using {config.site_url}")
    return config.site_url
