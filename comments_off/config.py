"""Operator configuration for the comments-off policy."""

import os
from dataclasses import dataclass, field
from urllib.parse import urlsplit

from loguru import logger

DEFAULT_STATUS_CODE = 404
DEFAULT_SITE_URL = "http://localhost/"
ENV_PREFIX = "COMMENTS_OFF_"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class PolicyConfig:
    """Status code and redirect target used for disabled comment routes.

    ``status_code`` 404/410 answers with an error, any other value redirects
    (invalid redirect codes are clamped to 301 by the policy).  An empty
    ``redirect_url`` means "the site root".
    """

    site_url: str = DEFAULT_SITE_URL
    status_code: int = DEFAULT_STATUS_CODE
    redirect_url: str = ""
    admin_url: str = ""
    allowed_redirect_hosts: tuple[str, ...] = field(default_factory=tuple)
    enabled: bool = True

    def __post_init__(self) -> None:
        if not self.site_url:
            raise ValueError("site_url must not be empty")
        if not self.admin_url:
            # Frozen dataclass: bypass __setattr__ for the derived default
            object.__setattr__(self, "admin_url", self.site_url.rstrip("/") + "/wp-admin/")
        object.__setattr__(
            self,
            "allowed_redirect_hosts",
            tuple(h.strip().lower() for h in self.allowed_redirect_hosts if h.strip()),
        )

    @property
    def site_path(self) -> str:
        """Directory the site is installed in, e.g. "/" or "/blog/"."""
        return _dir_path(urlsplit(self.site_url).path)

    @property
    def admin_path(self) -> str:
        return _dir_path(urlsplit(self.admin_url).path)

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "PolicyConfig":
        """Build a config from ``COMMENTS_OFF_*`` environment variables."""
        env = os.environ if environ is None else environ

        def get(name: str, default: str = "") -> str:
            return env.get(ENV_PREFIX + name, default).strip()

        raw_code = get("STATUS_CODE", str(DEFAULT_STATUS_CODE))
        try:
            status_code = int(raw_code)
        except ValueError:
            logger.warning(
                f"Config: {ENV_PREFIX}STATUS_CODE={raw_code!r} is not an integer, using {DEFAULT_STATUS_CODE}"
            )
            status_code = DEFAULT_STATUS_CODE

        return cls(
            site_url=get("SITE_URL") or DEFAULT_SITE_URL,
            status_code=status_code,
            redirect_url=get("REDIRECT_URL"),
            admin_url=get("ADMIN_URL"),
            allowed_redirect_hosts=tuple(get("ALLOWED_HOSTS").split(",")),
            enabled=_parse_bool(get("ENABLED"), default=True),
        )


def _dir_path(path: str) -> str:
    stripped = path.strip("/")
    return f"/{stripped}/" if stripped else "/"


def _parse_bool(raw: str, default: bool) -> bool:
    if not raw:
        return default
    lowered = raw.lower()
    if lowered in _TRUTHY:
        return True
    if lowered in _FALSY:
        return False
    logger.warning(f"Config: {ENV_PREFIX}ENABLED={raw!r} is not a boolean, using {default}")
    return default
