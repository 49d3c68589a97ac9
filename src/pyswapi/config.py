"""Client configuration for pyswapi."""

from __future__ import annotations

import dataclasses
import logging
import os
from typing import Any

from pyswapi._constants import BASE_URL, DEFAULT_PORT, DEFAULT_TIMEOUT_MS
from pyswapi.exceptions import SwapiConfigError

_logger = logging.getLogger(__name__)


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def parse_timeout_ms(value: Any) -> int | None:
    """Parse a millisecond timeout.

    Returns ``None`` when *value* is not an integer or is not positive.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        parsed = int(str(value).strip())
    except ValueError:
        return None
    return parsed if parsed > 0 else None


@dataclasses.dataclass(frozen=True)
class SwapiConfig:
    """Process-wide settings, built once at startup.

    Parameters
    ----------
    debug : bool
        Verbose logging (cache hits, fetch results, stats block).
    timeout_ms : int
        Milliseconds before a pending request is aborted.
    base_url : str
        API base URL; endpoints are appended verbatim.
    verify_ssl : bool
        Validate TLS certificates. Disabling it is an explicit opt-in
        and is logged when the client opens.
    host : str
        Interface the presentation server binds to.
    port : int
        Port the presentation server listens on.
    """

    debug: bool = True
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    base_url: str = BASE_URL
    verify_ssl: bool = True
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT

    def __post_init__(self) -> None:
        if self.timeout_ms <= 0:
            raise SwapiConfigError(f"timeout_ms must be positive, got {self.timeout_ms}")
        if not self.base_url.startswith(("http://", "https://")):
            raise SwapiConfigError(f"base_url must be an http(s) URL, got {self.base_url!r}")
        if not self.base_url.endswith("/"):
            object.__setattr__(self, "base_url", self.base_url + "/")

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000.0

    @classmethod
    def from_env(cls, **overrides: Any) -> SwapiConfig:
        """Create configuration from environment variables.

        Reads ``PORT`` and the optional ``SWAPI_*`` variables. Explicit
        keyword arguments override environment values.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        base_url = env.get("SWAPI_BASE_URL")
        if base_url:
            config_kwargs["base_url"] = base_url

        if "debug" not in overrides:
            config_kwargs["debug"] = _env_bool(env.get("SWAPI_DEBUG"), True)

        if "verify_ssl" not in overrides:
            config_kwargs["verify_ssl"] = _env_bool(env.get("SWAPI_VERIFY_SSL"), True)

        timeout_env = env.get("SWAPI_TIMEOUT_MS")
        if timeout_env is not None:
            timeout = parse_timeout_ms(timeout_env)
            if timeout is None:
                _logger.warning("Ignoring invalid SWAPI_TIMEOUT_MS value %r", timeout_env)
            else:
                config_kwargs["timeout_ms"] = timeout

        port_env = env.get("PORT")
        if port_env is not None and "port" not in overrides:
            try:
                config_kwargs["port"] = int(port_env)
            except ValueError as exc:
                raise SwapiConfigError(f"PORT must be an integer, got {port_env!r}") from exc

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
