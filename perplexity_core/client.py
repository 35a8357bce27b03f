# =============================================================================
# perplexity_core/client.py  —  Completion Client
# =============================================================================
#
# One POST to the Sonar chat-completions endpoint, one parsed payload back.
#
# FAILURE MODES (each raised exactly once, never retried):
#
#   could not connect / timed out     ──▶ NetworkError
#   non-2xx status                    ──▶ HttpError(status, reason, body)
#   body is not JSON                  ──▶ PayloadError
#   no choices / no message content   ──▶ PayloadError
#
# The opener defaults to urllib.request.urlopen.  Tests pass a fake opener
# instead of patching the network.
# =============================================================================

import json
import logging
import urllib.error
import urllib.request
from typing import Any, Callable, Optional

from perplexity_core.config import Settings
from perplexity_core.errors import HttpError, NetworkError, PayloadError

logger = logging.getLogger(__name__)

UNREADABLE_BODY = "Unable to parse error response"

Opener = Callable[..., Any]


class CompletionClient:
    """Blocking HTTP client for the Perplexity chat-completions endpoint."""

    def __init__(self, settings: Settings, opener: Optional[Opener] = None) -> None:
        self._settings = settings
        self._opener = opener or urllib.request.urlopen

    def _build_http_request(self, body: dict[str, Any]) -> urllib.request.Request:
        return urllib.request.Request(
            self._settings.base_url,
            data=json.dumps(body).encode("utf-8"),
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {self._settings.api_key}",
            },
            method="POST",
        )

    def _open(self, request: urllib.request.Request):
        if self._settings.timeout is None:
            return self._opener(request)
        return self._opener(request, timeout=self._settings.timeout)

    def complete(self, body: dict[str, Any]) -> dict[str, Any]:
        """Send ``body`` upstream and return the validated JSON payload.

        Raises:
            NetworkError: The request never produced an HTTP response.
            HttpError: Upstream answered with a non-success status.
            PayloadError: The response is not JSON or lacks
                ``choices[0].message.content``.
        """
        request = self._build_http_request(body)
        logger.debug("POST %s model=%s messages=%d",
                     self._settings.base_url, body.get("model"), len(body.get("messages") or []))

        try:
            with self._open(request) as response:
                raw = response.read()
        except urllib.error.HTTPError as exc:
            error = HttpError(exc.code, exc.reason or "", _read_error_body(exc))
            logger.warning("Perplexity API returned %s %s", exc.code, exc.reason)
            raise error from exc
        except (urllib.error.URLError, OSError) as exc:
            logger.warning("Network error calling %s: %s", self._settings.base_url, exc)
            raise NetworkError(
                f"Network error while calling Perplexity API: {exc}", exc
            ) from exc

        return parse_payload(raw)


def _read_error_body(exc: urllib.error.HTTPError) -> str:
    try:
        data = exc.read()
    except Exception:  # body stream already closed or broken
        return UNREADABLE_BODY
    if isinstance(data, bytes):
        return data.decode("utf-8", errors="replace")
    return str(data) if data is not None else ""


def parse_payload(raw: Any) -> dict[str, Any]:
    """Decode a response body and check it carries a usable answer."""
    try:
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8")
        data = json.loads(raw)
    except (UnicodeDecodeError, ValueError, TypeError) as exc:
        raise PayloadError(
            f"Failed to parse JSON response from Perplexity API: invalid JSON ({exc})", exc
        ) from exc

    if not isinstance(data, dict):
        raise PayloadError("Invalid API response: missing or empty choices array")

    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        raise PayloadError("Invalid API response: missing or empty choices array")

    choice = choices[0]
    message = choice.get("message") if isinstance(choice, dict) else None
    if not isinstance(message, dict) or not isinstance(message.get("content"), str):
        raise PayloadError("Invalid API response: missing or invalid message content")

    return data
