# =============================================================================
# perplexity_core/config.py  —  Process configuration
# =============================================================================
#
# Two values are required before the server may start:
#
#   PERPLEXITY_API_KEY   bearer credential for the Sonar API
#   BASE_URL             full URL of the chat-completions endpoint
#                        (e.g. https://api.perplexity.ai/chat/completions)
#
# Optional:
#
#   PERPLEXITY_TIMEOUT   per-request timeout in seconds; unset means the
#                        HTTP client's own default (no timeout)
#
# Settings are read once at startup into a frozen dataclass and passed into
# the client explicitly.  Tests build a Settings directly and never touch
# os.environ.
# =============================================================================

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from perplexity_core.errors import ConfigError

API_KEY_VAR = "PERPLEXITY_API_KEY"
BASE_URL_VAR = "BASE_URL"
TIMEOUT_VAR = "PERPLEXITY_TIMEOUT"


@dataclass(frozen=True)
class Settings:
    """Immutable process-wide configuration."""

    api_key: str
    base_url: str
    timeout: Optional[float] = None

    def __repr__(self) -> str:
        # Keep the credential out of logs and tracebacks.
        return (
            f"Settings(api_key='***', base_url={self.base_url!r}, "
            f"timeout={self.timeout!r})"
        )


def _required(environ: Mapping[str, str], name: str) -> str:
    value = (environ.get(name) or "").strip()
    if not value:
        raise ConfigError(f"{name} environment variable is required")
    return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the environment.

    Args:
        environ: Mapping to read from.  Defaults to ``os.environ``.

    Raises:
        ConfigError: A required variable is missing or empty, or the
            timeout is not a positive number.
    """
    env = os.environ if environ is None else environ

    api_key = _required(env, API_KEY_VAR)
    base_url = _required(env, BASE_URL_VAR)

    timeout: Optional[float] = None
    raw_timeout = (env.get(TIMEOUT_VAR) or "").strip()
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ConfigError(
                f"{TIMEOUT_VAR} must be a number of seconds, got {raw_timeout!r}"
            ) from None
        if timeout <= 0:
            raise ConfigError(f"{TIMEOUT_VAR} must be positive, got {raw_timeout!r}")

    return Settings(api_key=api_key, base_url=base_url, timeout=timeout)
